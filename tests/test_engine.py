import sys
import unittest
from dataclasses import replace
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from pydantic import ValidationError  # noqa: E402

from resume_analyzer.analysis import AnalysisCatalogs, analyze_text  # noqa: E402
from resume_analyzer.analysis.scoring import DEFAULT_SCORING  # noqa: E402
from resume_analyzer.analysis.feedback import (  # noqa: E402
    ADD_CONTACT_RECOMMENDATION,
    ADD_HEADINGS_RECOMMENDATION,
    ADD_KEYWORDS_RECOMMENDATION,
    EXPAND_CONTENT_RECOMMENDATION,
)


class AnalysisEngineTests(unittest.TestCase):
    SAMPLE_RESUME = (
        "Jane Doe\n"
        "jane.doe@example.com | +1 5550001111 | linkedin.com/in/janedoe\n"
        "Summary\n"
        "Full-stack developer focused on TypeScript, React and Node services.\n"
        "Experience\n"
        "Senior Software Engineer at Acme Corp\n"
        "Frontend Developer - 2016 to 2019\n"
        "Intern 2015 to 2016\n"
        "Education\n"
        "Bachelor of Science in Computer Science, 2015\n"
        "Skills\n"
        "Python, Docker, Kubernetes, AWS, SQL, Git, GraphQL\n"
    )

    def test_empty_input_is_a_valid_zero_signal_result(self):
        result = analyze_text("")
        self.assertEqual(result.skills, ())
        self.assertEqual(result.education, ())
        self.assertEqual(result.experience, ())
        self.assertEqual(result.score, 40)
        self.assertEqual(result.ats_compatibility, 0)
        self.assertEqual(
            result.recommendations,
            (
                ADD_KEYWORDS_RECOMMENDATION,
                ADD_CONTACT_RECOMMENDATION,
                ADD_HEADINGS_RECOMMENDATION,
                EXPAND_CONTENT_RECOMMENDATION,
            ),
        )
        self.assertEqual(result.strengths, ())

    def test_same_text_gives_identical_results(self):
        first = analyze_text(self.SAMPLE_RESUME)
        second = analyze_text(self.SAMPLE_RESUME)
        self.assertEqual(first, second)
        self.assertEqual(first.model_dump_json(by_alias=True), second.model_dump_json(by_alias=True))

    def test_end_to_end_350_word_resume(self):
        text = (
            "Jane Doe\n"
            "jane.doe@example.com\n"
            "Experience\n"
            "Python React AWS\n"
            + " ".join(["delivered"] * 343)
        )
        self.assertEqual(len(text.split()), 350)

        result = analyze_text(text)
        self.assertEqual(result.skills, ("react", "python", "aws"))
        self.assertEqual(result.score, 68)
        self.assertEqual(result.ats_compatibility, 32)
        self.assertEqual(result.recommendations, (ADD_KEYWORDS_RECOMMENDATION,))
        self.assertNotIn(ADD_CONTACT_RECOMMENDATION, result.recommendations)
        self.assertNotIn(ADD_HEADINGS_RECOMMENDATION, result.recommendations)
        self.assertEqual(result.strengths, ("Has 3 identified skill(s): react, python, aws",))
        self.assertEqual(result.improvements, ())

    def test_structured_resume(self):
        result = analyze_text(self.SAMPLE_RESUME)
        self.assertEqual(
            result.skills,
            ("typescript", "react", "node", "python", "sql", "aws", "docker", "kubernetes", "git", "graphql"),
        )
        self.assertEqual(result.score, 100)
        self.assertTrue(result.experience[0].title.startswith("Full-stack developer"))
        titles = [entry.title for entry in result.experience]
        self.assertIn("Senior Software Engineer", titles)
        self.assertIn("Frontend Developer", titles)
        self.assertEqual(result.education[-1].year, "2015")
        self.assertIn("Education section detected.", result.strengths)

    def test_scores_and_experience_stay_bounded(self):
        lines = [f"Engineer {year} to {year + 1}" for year in range(1990, 2020)]
        text = "\n".join(lines + ["python java sql aws docker react git css html figma"] * 50)
        result = analyze_text(text)
        self.assertLessEqual(result.score, 100)
        self.assertGreaterEqual(result.score, 0)
        self.assertLessEqual(result.ats_compatibility, 100)
        self.assertGreaterEqual(result.ats_compatibility, 0)
        self.assertEqual(len(result.experience), 8)

    def test_serializes_with_camel_case_ats_key(self):
        payload = analyze_text("Python").model_dump(mode="json", by_alias=True)
        self.assertIn("atsCompatibility", payload)
        self.assertEqual(payload["skills"], ["python"])
        self.assertEqual(payload["experience"], [])

    def test_result_is_frozen(self):
        result = analyze_text("Python")
        with self.assertRaises(ValidationError):
            result.score = 99

    def test_negative_experience_cap_yields_no_entries(self):
        text = "Developer at A\nDesigner at B\nAnalyst at C"
        self.assertEqual(len(analyze_text(text).experience), 3)
        config = replace(DEFAULT_SCORING, max_experience_entries=-1)
        self.assertEqual(analyze_text(text, config=config).experience, ())

    def test_injected_catalogs(self):
        catalogs = AnalysisCatalogs(skills=("rust",), role_keywords=("chef",))
        result = analyze_text("Head Chef\nRust hobbyist", catalogs=catalogs)
        self.assertEqual(result.skills, ("rust",))
        self.assertEqual([entry.title for entry in result.experience], ["Head Chef"])


if __name__ == "__main__":
    unittest.main()
