import os
import sys
import unittest
from dataclasses import replace
from io import BytesIO
from pathlib import Path
from unittest.mock import patch

# Keep API tests deterministic and offline.
os.environ.setdefault("RATE_LIMIT_ENABLED", "0")
os.environ.setdefault("ENRICHMENT_ENABLED", "0")

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from docx import Document  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from resume_analyzer.api.v1 import analysis as analysis_api  # noqa: E402
from resume_analyzer.main import app  # noqa: E402
from resume_analyzer.parsing.parse import DOCX_MIME  # noqa: E402
from resume_analyzer.services.analysis_service import AnalysisOrchestrator, get_analysis_orchestrator  # noqa: E402


def _offline_orchestrator() -> AnalysisOrchestrator:
    return AnalysisOrchestrator()


class AnalysisApiTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        app.dependency_overrides[get_analysis_orchestrator] = _offline_orchestrator
        cls.client = TestClient(app)

    @classmethod
    def tearDownClass(cls):
        app.dependency_overrides.pop(get_analysis_orchestrator, None)

    def test_health(self):
        response = self.client.get("/v1/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["status"], "healthy")

    def test_roles(self):
        body = self.client.get("/v1/analysis/roles").json()
        self.assertEqual(body["default_role"], "Software Developer")
        self.assertIn("Data Scientist", body["roles"])

    def test_analyze_text(self):
        response = self.client.post(
            "/v1/analysis/analyze",
            json={"resume_text": "Skills: Python, SQL, Docker", "target_role": "Data Scientist", "enrich": False},
        )
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertIn("Python", body["analysis"]["found_required_skills"])
        self.assertEqual(body["analysis"]["role_profile_used"], "Data Scientist")
        self.assertEqual(body["enrichment"]["status"], "skipped")
        self.assertEqual(body["profile"]["skills"], ["Python", "SQL", "Docker"])

    def test_analyze_text_requires_resume_text(self):
        response = self.client.post("/v1/analysis/analyze", json={"target_role": "Data Scientist"})
        self.assertEqual(response.status_code, 422)

    def test_analyze_plain_text_file(self):
        response = self.client.post(
            "/v1/analysis/analyze-file",
            files={"file": ("resume.txt", b"Jane Doe\njane@example.com\nSkills: Python", "text/plain")},
            data={"target_role": "Backend Developer", "enrich": "false"},
        )
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["profile"]["personal_info"]["email"], "jane@example.com")
        self.assertEqual(body["analysis"]["target_role"], "Backend Developer")

    def test_analyze_docx_file(self):
        document = Document()
        document.add_paragraph("Jane Doe")
        document.add_paragraph("jane@example.com")
        document.add_paragraph("Skills: Python, Docker")
        buffer = BytesIO()
        document.save(buffer)

        response = self.client.post(
            "/v1/analysis/analyze-file",
            files={"file": ("resume.docx", buffer.getvalue(), DOCX_MIME)},
            data={"enrich": "false"},
        )
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["profile"]["personal_info"]["name"], "Jane Doe")
        self.assertIn("Docker", body["profile"]["skills"])

    def test_unsupported_upload_type(self):
        response = self.client.post(
            "/v1/analysis/analyze-file",
            files={"file": ("photo.png", b"\x89PNG", "image/png")},
        )
        self.assertEqual(response.status_code, 400)

    def test_oversized_upload(self):
        small = replace(analysis_api.settings, max_upload_bytes=16)
        with patch.object(analysis_api, "settings", small):
            response = self.client.post(
                "/v1/analysis/analyze-file",
                files={"file": ("resume.txt", b"x" * 64, "text/plain")},
            )
        self.assertEqual(response.status_code, 413)


if __name__ == "__main__":
    unittest.main()
