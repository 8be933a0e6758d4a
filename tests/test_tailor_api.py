import io
import unittest
from unittest.mock import patch

from fastapi.testclient import TestClient
from pypdf import PdfReader
from reportlab.pdfgen import canvas

from jobgoblin.core.errors import ModelError
from jobgoblin.main import app
from jobgoblin.schemas.auth import AuthUser

AUTH = {"Authorization": "Bearer good"}

REPLY = """## Summary
Backend engineer who ships reliable APIs.

## Technical Skills
- Languages: Python, Go

## Highlighted Projects
• Job tracker
- Built a FastAPI service.

## Professional Experience
• Senior Engineer, Acme (2020-2024)
- Led the payments platform.

## Education
- BSc Computer Science
"""


def _resume_pdf() -> bytes:
    buffer = io.BytesIO()
    pdf = canvas.Canvas(buffer)
    for offset, line in enumerate(["Jane Doe, PhD", "Backend Engineer", "Berlin | 555-123-4567 | jane@example.com"]):
        pdf.drawString(72, 720 - offset * 16, line)
    pdf.save()
    return buffer.getvalue()


@patch("jobgoblin.integrations.identity.resolve_user", return_value=AuthUser(id="user-1"))
class TailorApiTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(app)
        cls.resume = _resume_pdf()

    def _post(self, data=None, with_file=True):
        files = {"resume": ("resume.pdf", self.resume, "application/pdf")} if with_file else None
        return self.client.post("/api/tailor/tailor-resume", headers=AUTH, data=data or {}, files=files)

    @patch("jobgoblin.services.tailor_service.request_tailored_text")
    @patch("jobgoblin.services.tailor_service.default_extractor")
    def test_missing_job_description_stops_before_work(self, default_extractor, request_tailored_text, _resolve_user):
        response = self._post(data={"job_description": "   "})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"error": "Job description is required."})
        default_extractor.assert_not_called()
        request_tailored_text.assert_not_called()

    def test_missing_file(self, _resolve_user):
        response = self._post(data={"job_description": "Python role"}, with_file=False)
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"error": "No resume file uploaded."})

    def test_requires_credentials(self, resolve_user):
        response = self.client.post(
            "/api/tailor/tailor-resume",
            data={"job_description": "Python role"},
            files={"resume": ("resume.pdf", self.resume, "application/pdf")},
        )
        self.assertEqual(response.status_code, 401)
        resolve_user.assert_not_called()

    @patch("jobgoblin.services.tailor_service.request_tailored_text", return_value=REPLY)
    def test_returns_rendered_pdf(self, request_tailored_text, _resolve_user):
        response = self._post(data={"job_description": "Senior Python engineer", "candidate_title": "Staff Engineer"})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.headers["content-type"], "application/pdf")
        self.assertEqual(response.headers["content-disposition"], "attachment; filename=tailored_resume.pdf")

        resume_text, job_description = request_tailored_text.call_args.args
        self.assertIn("Jane Doe", resume_text)
        self.assertEqual(job_description, "Senior Python engineer")

        text = PdfReader(io.BytesIO(response.content)).pages[0].extract_text()
        self.assertIn("Jane Doe", text)
        self.assertIn("Staff Engineer", text)
        self.assertIn("PROFESSIONAL EXPERIENCE", text)
        self.assertIn("Led the payments platform.", text)

    @patch("jobgoblin.integrations.preview.publish_preview", return_value="https://cdn/preview.png")
    @patch("jobgoblin.services.tailor_service.request_tailored_text", return_value=REPLY)
    def test_preview_delivery(self, _request_tailored_text, publish_preview, _resolve_user):
        response = self._post(data={"job_description": "Senior Python engineer", "delivery": "preview"})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"tailoredPreviewUrl": "https://cdn/preview.png"})
        owner_id, pdf_bytes = publish_preview.call_args.args
        self.assertEqual(owner_id, "user-1")
        self.assertTrue(pdf_bytes.startswith(b"%PDF-"))

    def test_unknown_delivery(self, _resolve_user):
        response = self._post(data={"job_description": "Python role", "delivery": "email"})
        self.assertEqual(response.status_code, 400)

    def test_non_pdf_upload(self, _resolve_user):
        response = self.client.post(
            "/api/tailor/tailor-resume",
            headers=AUTH,
            data={"job_description": "Python role"},
            files={"resume": ("resume.txt", b"plain text resume", "text/plain")},
        )
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"error": "Uploaded resume must be a PDF file."})

    @patch("jobgoblin.services.tailor_service.request_tailored_text", side_effect=ModelError())
    def test_model_failure(self, _request_tailored_text, _resolve_user):
        response = self._post(data={"job_description": "Python role"})
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {"error": "Failed to generate tailored resume."})


if __name__ == "__main__":
    unittest.main()
