from __future__ import annotations

import hashlib
import json
import logging
import time
from functools import lru_cache

from resume_analyzer.analysis import analyze_text
from resume_analyzer.analysis.scoring import ScoringConfig
from resume_analyzer.core.analysis_store import AnalysisStoreError, save_analysis
from resume_analyzer.core.config import settings
from resume_analyzer.core.config.scoring import load_scoring_config
from resume_analyzer.parsing.models import ExtractionError, ParsedDoc
from resume_analyzer.parsing.parse import parse_upload
from resume_analyzer.schemas.analysis import AnalysisResponse, AnalysisResult, AnalyzeTextRequest

logger = logging.getLogger("resume_analyzer.analysis")


def _short_hash(value: str) -> str:
    return hashlib.sha256(value.encode("utf-8", errors="ignore")).hexdigest()[:12]


@lru_cache(maxsize=1)
def _cached_scoring_config() -> ScoringConfig:
    return load_scoring_config()


def _persist(result: AnalysisResult, *, source: str, save: bool) -> str | None:
    if not (save and settings.analysis_store_enabled):
        return None
    try:
        return save_analysis(result, source=source)
    except AnalysisStoreError as exc:
        logger.warning(json.dumps({"event": "analysis_store_failed", "source": source, "error": str(exc)}))
        return None


def _run(text: str, *, source: str, save: bool) -> tuple[AnalysisResult, str | None]:
    started_at = time.perf_counter()
    result = analyze_text(text, config=_cached_scoring_config())
    duration_ms = int((time.perf_counter() - started_at) * 1000)
    analysis_id = _persist(result, source=source, save=save)

    logger.info(
        json.dumps(
            {
                "event": "analysis_complete",
                "source": source,
                "text_hash": _short_hash(text),
                "characters": len(text),
                "skills": len(result.skills),
                "experience": len(result.experience),
                "education": len(result.education),
                "score": result.score,
                "ats_compatibility": result.ats_compatibility,
                "saved": analysis_id is not None,
                "duration_ms": duration_ms,
            }
        )
    )
    return result, analysis_id


def run_text_analysis(payload: AnalyzeTextRequest) -> AnalysisResponse:
    result, analysis_id = _run(payload.text, source="text", save=payload.save)
    return AnalysisResponse(
        analysis_id=analysis_id,
        source="text",
        characters=len(payload.text),
        analysis=result,
    )


def extract_document(filename: str, content: bytes) -> ParsedDoc:
    try:
        return parse_upload(filename=filename, content=content)
    except ExtractionError as exc:
        logger.warning(
            json.dumps(
                {
                    "event": "analysis_extraction_failed",
                    "filename_hash": _short_hash(filename),
                    "bytes": len(content),
                    "error": str(exc),
                }
            )
        )
        raise


def run_file_analysis(filename: str, content: bytes, *, save: bool = True) -> AnalysisResponse:
    parsed = extract_document(filename, content)
    result, analysis_id = _run(parsed.text, source="upload", save=save)
    return AnalysisResponse(
        analysis_id=analysis_id,
        source="upload",
        filename=parsed.filename,
        source_type=parsed.source_type,
        characters=len(parsed.text),
        analysis=result,
    )
