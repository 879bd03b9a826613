"""
Generation app services

Prompt construction and calls to the Gemini ``generateContent`` endpoint.

Each public method sends exactly one request and never retries. Failures
are logged and turned into a fixed user-facing message that is returned in
place of the generated text, so callers always receive a string.
"""
from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

import requests
from django.conf import settings
from django.core.exceptions import ValidationError

from resumes.services import ResumeVersionService

from .models import CoverLetter

logger = logging.getLogger(__name__)


JOB_ROLES = (
    "Frontend Developer",
    "Backend Developer",
    "Data Analyst",
    "Product Manager",
    "UX Designer",
)

DEFAULT_ROLE = JOB_ROLES[0]

RESUME_FALLBACK_TEXT = "Could not generate improved resume. Please try again."
RESUME_ERROR_TEXT = "An error occurred while improving your resume. Please try again later."
COVER_LETTER_FALLBACK_TEXT = "Could not generate cover letter. Please try again."
COVER_LETTER_ERROR_TEXT = "An error occurred while generating your cover letter. Please try again later."


class GenerationError(Exception):
    """
    Domain-specific exception for failed generation requests.
    """


def build_role_prompt(resume_text: str, role: str) -> str:
    return (
        "You are an expert resume builder. Rewrite and improve this resume "
        f"for a job role: [{role}]. Resume: [{resume_text}]"
    )


def build_job_prompt(resume_text: str, job_description: str) -> str:
    return (
        "You are an expert resume builder. Tailor and improve this resume "
        f"for the following job description: [{job_description}]. Resume: [{resume_text}]"
    )


def build_cover_letter_prompt(
    resume_text: str,
    job_title: str,
    company_name: str,
    job_description: str,
) -> str:
    return (
        "You are an expert career coach. Write a professional, personalised cover "
        "letter for the position below using the candidate's resume. "
        f"Job Title: [{job_title}]. Company: [{company_name}]. "
        f"Job Description: [{job_description}]. Resume: [{resume_text}]"
    )


def extract_candidate_text(payload: Dict[str, Any]) -> Optional[str]:
    """
    Pull ``candidates[0].content.parts[0].text`` out of a response body.

    Returns None when any level is missing or the text is empty.
    """
    if not isinstance(payload, dict):
        return None
    candidates = payload.get("candidates") or []
    if not candidates:
        return None
    content = (candidates[0] or {}).get("content") or {}
    parts = content.get("parts") or []
    if not parts:
        return None
    text = (parts[0] or {}).get("text")
    return text or None


class GeminiService:
    """
    Service for resume and cover-letter generation with Gemini.
    """

    def __init__(self, api_key: Optional[str] = None, model: Optional[str] = None):
        """
        Initialize service with API configuration.
        """
        self.api_key = (
            api_key
            or os.environ.get("GEMINI_API_KEY")
            or getattr(settings, "GEMINI_API_KEY", "")
        )
        if not self.api_key:
            raise GenerationError("GEMINI_API_KEY is not configured.")

        self.model = (
            model
            or os.environ.get("GEMINI_MODEL")
            or getattr(settings, "GEMINI_MODEL", "gemini-2.0-flash")
        )
        self.api_url = getattr(
            settings,
            "GEMINI_API_URL",
            "https://generativelanguage.googleapis.com/v1beta/models",
        ).rstrip("/")
        self.timeout = getattr(settings, "GEMINI_TIMEOUT", 60)

    @property
    def endpoint(self) -> str:
        return f"{self.api_url}/{self.model}:generateContent"

    # --------------------------------------------------------------------- #
    # Public helpers                                                        #
    # --------------------------------------------------------------------- #

    def improve_for_role(self, resume_text: str, role: str = DEFAULT_ROLE) -> str:
        """
        Rewrite a resume for a target job role.

        Args:
            resume_text: Original resume text.
            role: Target role, e.g. "Frontend Developer".

        Returns:
            The generated text, the fallback text when the model returned
            nothing, or the error text when the request failed.
        """
        try:
            text = self.generate_text(build_role_prompt(resume_text, role))
        except Exception as exc:  # noqa: BLE001
            logger.error("Error improving resume for role %s: %s", role, exc)
            return RESUME_ERROR_TEXT

        return text or RESUME_FALLBACK_TEXT

    def improve_for_job(
        self,
        user,
        resume_text: str,
        job_description: str,
        filename: str,
    ) -> str:
        """
        Tailor a resume to a job description and record the result.

        A ResumeVersion is stored only when the model produced text.

        Args:
            user: Owner of the resume.
            resume_text: Original resume text.
            job_description: Pasted job description.
            filename: Name of the stored resume the text came from.

        Returns:
            Same contract as ``improve_for_role``.
        """
        try:
            text = self.generate_text(build_job_prompt(resume_text, job_description))
            if not text:
                return RESUME_FALLBACK_TEXT

            ResumeVersionService.create(
                user,
                resume_id=filename,
                original_filename=filename,
                tweaked_text=text,
                job_description=job_description,
            )
            return text
        except Exception as exc:  # noqa: BLE001
            logger.error("Error improving resume %s for job: %s", filename, exc)
            return RESUME_ERROR_TEXT

    def generate_cover_letter(
        self,
        user,
        resume_text: str,
        resume_name: str,
        job_title: str,
        company_name: str,
        job_description: str,
    ) -> str:
        """
        Write a cover letter and store it.

        Raises:
            ValidationError: If any job detail is missing. Nothing is sent.
        """
        errors = []
        for field, value in (
            ("job_title", job_title),
            ("company_name", company_name),
            ("job_description", job_description),
        ):
            if not (value or "").strip():
                errors.append(f"{field} is required")
        if errors:
            raise ValidationError(errors)

        prompt = build_cover_letter_prompt(resume_text, job_title, company_name, job_description)
        try:
            text = self.generate_text(prompt)
            if not text:
                return COVER_LETTER_FALLBACK_TEXT

            cover_letter = CoverLetter.objects.create(
                user=user,
                job_title=job_title,
                company_name=company_name,
                job_description=job_description,
                resume_id=resume_name,
                content=text,
            )
            logger.info("Stored cover letter %s for user %s", cover_letter.pk, user.pk)
            return text
        except Exception as exc:  # noqa: BLE001
            logger.error("Error generating cover letter for %s at %s: %s", job_title, company_name, exc)
            return COVER_LETTER_ERROR_TEXT

    # --------------------------------------------------------------------- #
    # Transport                                                             #
    # --------------------------------------------------------------------- #

    def generate_text(self, prompt: str) -> Optional[str]:
        """
        Send one prompt and return the first candidate's text.

        Returns:
            The text, or None when the response carries no candidate text.

        Raises:
            GenerationError: Transport failure, non-2xx status or a body
                that is not JSON.
        """
        try:
            response = requests.post(
                self.endpoint,
                params={"key": self.api_key},
                headers={"Content-Type": "application/json"},
                json={"contents": [{"parts": [{"text": prompt}]}]},
                timeout=self.timeout,
            )
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException as exc:
            raise GenerationError(f"Gemini request failed: {exc}") from exc
        except ValueError as exc:
            raise GenerationError(f"Gemini returned invalid JSON: {exc}") from exc

        text = extract_candidate_text(payload)
        if text is None:
            logger.warning("Gemini response had no candidate text")
        return text
