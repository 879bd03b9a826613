import os
from unittest import mock

import requests
from django.contrib.auth import get_user_model
from django.core.exceptions import ValidationError
from django.db import DatabaseError
from django.test import SimpleTestCase, TestCase, override_settings

from generation.export import improved_filename, text_attachment
from generation.models import CoverLetter
from generation.services import (
    COVER_LETTER_FALLBACK_TEXT,
    RESUME_ERROR_TEXT,
    RESUME_FALLBACK_TEXT,
    GeminiService,
    GenerationError,
    build_role_prompt,
    extract_candidate_text,
)
from resumes.models import ResumeVersion


def gemini_response(text=None, payload=None):
    response = mock.Mock()
    response.raise_for_status.return_value = None
    if payload is None:
        payload = {"candidates": [{"content": {"parts": [{"text": text}]}}]}
    response.json.return_value = payload
    return response


class CandidateTextTests(SimpleTestCase):
    def test_first_candidate_first_part(self) -> None:
        payload = {
            "candidates": [
                {"content": {"parts": [{"text": "first"}, {"text": "second"}]}},
                {"content": {"parts": [{"text": "other"}]}},
            ]
        }
        self.assertEqual(extract_candidate_text(payload), "first")

    def test_missing_levels(self) -> None:
        for payload in (
            {},
            {"candidates": []},
            {"candidates": [{}]},
            {"candidates": [{"content": {"parts": []}}]},
            {"candidates": [{"content": {"parts": [{"text": ""}]}}]},
            ["not", "a", "dict"],
        ):
            with self.subTest(payload=payload):
                self.assertIsNone(extract_candidate_text(payload))


class ImprovedFilenameTests(SimpleTestCase):
    def test_drops_everything_after_first_dot(self) -> None:
        self.assertEqual(improved_filename("jane.doe.pdf"), "jane-improved.txt")
        self.assertEqual(improved_filename("cv.docx"), "cv-improved.txt")

    def test_empty_base_falls_back_to_resume(self) -> None:
        self.assertEqual(improved_filename(""), "resume-improved.txt")
        self.assertEqual(improved_filename(".pdf"), "resume-improved.txt")


class TextAttachmentTests(SimpleTestCase):
    def test_plain_name(self) -> None:
        response = text_attachment("Improved resume", "jane.doe.pdf")

        self.assertEqual(response["Content-Type"], "text/plain; charset=utf-8")
        self.assertEqual(response["Content-Disposition"], 'attachment; filename="jane-improved.txt"')

    def test_quote_is_escaped(self) -> None:
        response = text_attachment("text", 'my"cv.pdf')

        self.assertEqual(response["Content-Disposition"], 'attachment; filename="my\\"cv-improved.txt"')

    def test_non_ascii_name_is_percent_encoded(self) -> None:
        response = text_attachment("text", "résumé.pdf")

        self.assertEqual(
            response["Content-Disposition"],
            "attachment; filename*=utf-8''r%C3%A9sum%C3%A9-improved.txt",
        )

    def test_line_breaks_cannot_inject_headers(self) -> None:
        response = text_attachment("text", "cv\r\nX-Injected: 1.pdf")

        self.assertEqual(
            response["Content-Disposition"],
            "attachment; filename*=utf-8''cv%0D%0AX-Injected%3A%201-improved.txt",
        )
        self.assertFalse(response.has_header("X-Injected"))


class GeminiServiceTests(SimpleTestCase):
    def setUp(self) -> None:
        self.service = GeminiService(api_key="test-key", model="gemini-test")

    @mock.patch.dict(os.environ, {"GEMINI_API_KEY": ""})
    @override_settings(GEMINI_API_KEY="")
    def test_missing_key(self) -> None:
        with self.assertRaises(GenerationError):
            GeminiService()

    @override_settings(GEMINI_API_URL="https://gemini.test/models/")
    def test_endpoint(self) -> None:
        service = GeminiService(api_key="test-key", model="gemini-test")
        self.assertEqual(service.endpoint, "https://gemini.test/models/gemini-test:generateContent")

    @mock.patch("generation.services.requests.post")
    def test_improve_for_role_returns_model_text(self, mock_post) -> None:
        mock_post.return_value = gemini_response("Improved React resume")

        result = self.service.improve_for_role("5 years React experience", "Frontend Developer")

        self.assertEqual(result, "Improved React resume")
        mock_post.assert_called_once()
        kwargs = mock_post.call_args.kwargs
        self.assertEqual(kwargs["params"], {"key": "test-key"})
        self.assertEqual(
            kwargs["json"],
            {"contents": [{"parts": [{"text": build_role_prompt("5 years React experience", "Frontend Developer")}]}]},
        )
        prompt = kwargs["json"]["contents"][0]["parts"][0]["text"]
        self.assertIn("[Frontend Developer]", prompt)
        self.assertIn("[5 years React experience]", prompt)

    @mock.patch("generation.services.requests.post")
    def test_improve_for_role_without_candidates(self, mock_post) -> None:
        mock_post.return_value = gemini_response(payload={"candidates": []})

        self.assertEqual(self.service.improve_for_role("resume", "Data Analyst"), RESUME_FALLBACK_TEXT)

    @mock.patch("generation.services.requests.post")
    def test_improve_for_role_transport_error(self, mock_post) -> None:
        mock_post.side_effect = requests.ConnectionError("unreachable")

        self.assertEqual(self.service.improve_for_role("resume", "Data Analyst"), RESUME_ERROR_TEXT)
        self.assertEqual(mock_post.call_count, 1)

    @mock.patch("generation.services.requests.post")
    def test_improve_for_role_http_error(self, mock_post) -> None:
        response = gemini_response("unused")
        response.raise_for_status.side_effect = requests.HTTPError("500 Server Error")
        mock_post.return_value = response

        self.assertEqual(self.service.improve_for_role("resume", "Data Analyst"), RESUME_ERROR_TEXT)

    @mock.patch("generation.services.requests.post")
    def test_generate_text_invalid_json(self, mock_post) -> None:
        response = gemini_response("unused")
        response.json.side_effect = ValueError("not json")
        mock_post.return_value = response

        with self.assertRaises(GenerationError):
            self.service.generate_text("prompt")


@mock.patch("generation.services.requests.post")
class GeminiPersistenceTests(TestCase):
    def setUp(self) -> None:
        self.user = get_user_model().objects.create_user(username="jane", password="secret")
        self.service = GeminiService(api_key="test-key")

    def test_improve_for_job_records_version(self, mock_post) -> None:
        mock_post.return_value = gemini_response("Tailored resume")

        result = self.service.improve_for_job(self.user, "resume", "Build dashboards", "cv.pdf")

        self.assertEqual(result, "Tailored resume")
        version = ResumeVersion.objects.get(user=self.user)
        self.assertEqual(version.resume_id, "cv.pdf")
        self.assertEqual(version.original_filename, "cv.pdf")
        self.assertEqual(version.tweaked_text, "Tailored resume")
        self.assertEqual(version.job_description, "Build dashboards")
        self.assertFalse(version.is_default)

    def test_improve_for_job_fallback_is_not_recorded(self, mock_post) -> None:
        mock_post.return_value = gemini_response(payload={})

        result = self.service.improve_for_job(self.user, "resume", "Build dashboards", "cv.pdf")

        self.assertEqual(result, RESUME_FALLBACK_TEXT)
        self.assertFalse(ResumeVersion.objects.exists())

    def test_improve_for_job_error_is_not_recorded(self, mock_post) -> None:
        mock_post.side_effect = requests.Timeout("slow")

        result = self.service.improve_for_job(self.user, "resume", "Build dashboards", "cv.pdf")

        self.assertEqual(result, RESUME_ERROR_TEXT)
        self.assertFalse(ResumeVersion.objects.exists())

    def test_improve_for_job_storage_failure(self, mock_post) -> None:
        mock_post.return_value = gemini_response("Tailored resume")

        with mock.patch(
            "generation.services.ResumeVersionService.create",
            side_effect=DatabaseError("disk full"),
        ):
            result = self.service.improve_for_job(self.user, "resume", "jd", "cv.pdf")

        self.assertEqual(result, RESUME_ERROR_TEXT)

    def test_cover_letter_requires_job_details(self, mock_post) -> None:
        with self.assertRaises(ValidationError) as ctx:
            self.service.generate_cover_letter(self.user, "resume", "cv.pdf", "Engineer", " ", "")

        self.assertEqual(
            ctx.exception.messages,
            ["company_name is required", "job_description is required"],
        )
        mock_post.assert_not_called()

    def test_cover_letter_is_stored(self, mock_post) -> None:
        mock_post.return_value = gemini_response("Dear hiring manager")

        result = self.service.generate_cover_letter(
            self.user, "resume", "cv.pdf", "Engineer", "Acme", "Build things",
        )

        self.assertEqual(result, "Dear hiring manager")
        letter = CoverLetter.objects.get(user=self.user)
        self.assertEqual(letter.resume_id, "cv.pdf")
        self.assertEqual(letter.company_name, "Acme")
        self.assertEqual(letter.content, "Dear hiring manager")
        prompt = mock_post.call_args.kwargs["json"]["contents"][0]["parts"][0]["text"]
        self.assertIn("[Engineer]", prompt)
        self.assertIn("[Acme]", prompt)

    def test_cover_letter_fallback_is_not_stored(self, mock_post) -> None:
        mock_post.return_value = gemini_response(payload={"candidates": [{}]})

        result = self.service.generate_cover_letter(
            self.user, "resume", "cv.pdf", "Engineer", "Acme", "Build things",
        )

        self.assertEqual(result, COVER_LETTER_FALLBACK_TEXT)
        self.assertFalse(CoverLetter.objects.exists())
