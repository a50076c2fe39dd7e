from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_analyzer.analysis import analyze_text  # noqa: E402
from resume_analyzer.core.config.scoring import load_scoring_config  # noqa: E402
from resume_analyzer.parsing.models import ExtractionError  # noqa: E402
from resume_analyzer.parsing.parse import parse_document  # noqa: E402


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Analyze a resume and print the assessment as JSON.")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--file", help="Resume document (.txt, .pdf, .docx)")
    source.add_argument("--text", help="Raw resume text")
    parser.add_argument("--out", default=None, help="Write JSON to this path instead of stdout")
    args = parser.parse_args(argv)

    if args.file:
        try:
            text = parse_document(args.file).text
        except (ExtractionError, FileNotFoundError) as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 1
    else:
        text = args.text

    result = analyze_text(text, config=load_scoring_config())
    payload = json.dumps(result.model_dump(mode="json", by_alias=True), indent=2, ensure_ascii=False)

    if args.out:
        out_path = Path(args.out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(payload + "\n", encoding="utf-8")
    else:
        print(payload)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
