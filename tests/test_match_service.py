import os
import sys
import unittest
from pathlib import Path
from unittest.mock import patch

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

os.environ.setdefault("SUMMARIZER_ENABLED", "0")

from pydantic import ValidationError  # noqa: E402

from app.core.errors import ExternalServiceError, InputValidationError  # noqa: E402
from app.services.match_service import analyze  # noqa: E402
from app.services.suggestions import fallback_suggestions  # noqa: E402

RESUME = "Experienced Python developer with Docker and AWS skills"
JOB = (
    "Looking for a Python Developer with Docker, Kubernetes and AWS experience. "
    "Position: Senior Python Developer"
)


class _FailingSummarizer:
    def summarize(self, prompt):
        raise ExternalServiceError("connection refused", code="network_error")


class _StaticSummarizer:
    def summarize(self, prompt):
        return "Describe the Kubernetes clusters you operated. Quantify the AWS savings you delivered."


class MatchServiceTests(unittest.TestCase):
    def setUp(self):
        patcher = patch("app.services.suggestions.get_summarizer", return_value=None)
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_python_developer_scenario(self):
        report = analyze(RESUME, JOB)
        self.assertEqual(report.position_title, "Senior Python Developer")
        self.assertEqual(report.company, "Target Company")
        for skill in ("python", "docker", "aws"):
            self.assertIn(skill, report.skills_found)
        self.assertIn("kubernetes", report.missing_keywords)
        self.assertEqual(report.match_score, 75)
        self.assertEqual(report.match_level, "Good Candidate Match")
        self.assertEqual(report.improvements, fallback_suggestions())

    def test_placeholders_when_job_has_no_fields(self):
        report = analyze(RESUME, "we need someone who knows python and docker")
        self.assertEqual(report.position_title, "Target Position")
        self.assertEqual(report.company, "Target Company")

    def test_empty_resume_scores_zero(self):
        report = analyze("", "We need Python, Docker and Kubernetes.")
        self.assertEqual(report.match_score, 0)
        self.assertEqual(report.skills_found, [])
        self.assertEqual(report.missing_keywords, ["python", "docker", "kubernetes"])
        self.assertEqual(report.match_level, "Potential Candidate Match")

    def test_missing_keywords_report_cap_and_display_names(self):
        job = "python java ruby swift kotlin scala perl ci/cd"
        report = analyze("python", job)
        self.assertEqual(len(report.missing_keywords), 5)
        self.assertNotIn("python", report.missing_keywords)

        report = analyze("kubernetes", "We automate CI/CD with Jenkins.")
        self.assertEqual(report.missing_keywords, ["ci/cd", "jenkins"])

    def test_summarizer_failure_only_changes_improvements(self):
        baseline = analyze(RESUME, JOB)
        failed = analyze(RESUME, JOB, summarizer=_FailingSummarizer())
        self.assertEqual(failed, baseline)
        self.assertEqual(failed.improvements, fallback_suggestions())

        succeeded = analyze(RESUME, JOB, summarizer=_StaticSummarizer())
        self.assertEqual(
            succeeded.improvements,
            [
                "Describe the Kubernetes clusters you operated.",
                "Quantify the AWS savings you delivered.",
            ],
        )
        self.assertEqual(succeeded.match_score, baseline.match_score)
        self.assertEqual(succeeded.skills_found, baseline.skills_found)

    def test_blank_job_description_is_rejected(self):
        with self.assertRaises(InputValidationError):
            analyze(RESUME, "   ")

    def test_report_is_immutable_and_uses_camel_case(self):
        report = analyze(RESUME, JOB)
        with self.assertRaises(ValidationError):
            report.match_score = 10
        payload = report.model_dump(by_alias=True)
        self.assertEqual(
            set(payload),
            {
                "matchScore",
                "matchLevel",
                "positionTitle",
                "company",
                "missingKeywords",
                "skillsFound",
                "improvements",
            },
        )


if __name__ == "__main__":
    unittest.main()
