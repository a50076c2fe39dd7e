import json
import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

os.environ.setdefault(
    "ANALYSIS_STORE_DB_PATH",
    os.path.join(tempfile.gettempdir(), "resume_analyzer_tests", "analysis.db"),
)

from resume_analyzer.analysis.scoring import DEFAULT_SCORING  # noqa: E402
from resume_analyzer.core.analysis_store import (  # noqa: E402
    AnalysisStoreError,
    clear_analysis_store,
    get_analysis,
)
from resume_analyzer.parsing.models import ExtractionError  # noqa: E402
from resume_analyzer.schemas.analysis import AnalyzeTextRequest  # noqa: E402
from resume_analyzer.services import analysis_service  # noqa: E402
from resume_analyzer.services.analysis_service import (  # noqa: E402
    run_file_analysis,
    run_text_analysis,
)


class AnalysisServiceTests(unittest.TestCase):
    RESUME_TEXT = "Backend Engineer at Acme\nPython, SQL, Docker\njane@example.com\n"

    def setUp(self):
        clear_analysis_store()

    def test_text_analysis_is_saved_and_logged_without_raw_text(self):
        with self.assertLogs("resume_analyzer.analysis", level="INFO") as captured:
            response = run_text_analysis(AnalyzeTextRequest(text=self.RESUME_TEXT))

        self.assertIsNotNone(response.analysis_id)
        self.assertEqual(response.source, "text")
        self.assertEqual(response.characters, len(self.RESUME_TEXT))
        self.assertEqual(response.analysis.skills, ("python", "sql", "docker"))

        stored = get_analysis(response.analysis_id)
        self.assertIsNotNone(stored)
        self.assertEqual(stored["analysis"]["skills"], ["python", "sql", "docker"])

        event = json.loads(captured.records[-1].getMessage())
        self.assertEqual(event["event"], "analysis_complete")
        self.assertEqual(event["skills"], 3)
        self.assertTrue(event["saved"])
        self.assertNotIn("Acme", captured.output[-1])

    def test_save_false_skips_persistence(self):
        response = run_text_analysis(AnalyzeTextRequest(text=self.RESUME_TEXT, save=False))
        self.assertIsNone(response.analysis_id)

    def test_store_failure_still_returns_analysis(self):
        with patch(
            "resume_analyzer.services.analysis_service.save_analysis",
            side_effect=AnalysisStoreError("disk full"),
        ), self.assertLogs("resume_analyzer.analysis", level="WARNING") as captured:
            response = run_text_analysis(AnalyzeTextRequest(text=self.RESUME_TEXT))

        self.assertIsNone(response.analysis_id)
        self.assertEqual(response.analysis.skills, ("python", "sql", "docker"))
        self.assertTrue(any("analysis_store_failed" in line for line in captured.output))

    def test_file_analysis_reports_source_type(self):
        response = run_file_analysis("resume.txt", self.RESUME_TEXT.encode("utf-8"), save=False)
        self.assertEqual(response.source, "upload")
        self.assertEqual(response.source_type, "txt")
        self.assertEqual(response.filename, "resume.txt")
        self.assertEqual(response.analysis.skills, ("python", "sql", "docker"))

    def test_extraction_failure_is_logged_and_raised(self):
        with self.assertLogs("resume_analyzer.analysis", level="WARNING") as captured:
            with self.assertRaises(ExtractionError):
                run_file_analysis("resume.txt", b"   \n\t ")
        self.assertTrue(any("analysis_extraction_failed" in line for line in captured.output))

    def test_cached_scoring_config_is_engine_config(self):
        self.assertFalse(hasattr(analysis_service, "get_scoring_config"))
        self.assertEqual(analysis_service._cached_scoring_config(), DEFAULT_SCORING)


if __name__ == "__main__":
    unittest.main()
