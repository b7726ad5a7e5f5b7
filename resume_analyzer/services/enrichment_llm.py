from __future__ import annotations

import json
import logging
import os
from functools import lru_cache
from typing import Protocol

from openai import OpenAI
from pydantic import ValidationError

from resume_analyzer.schemas.analysis import EnrichmentResult
from resume_analyzer.schemas.resume import ResumeProfile

logger = logging.getLogger(__name__)

ENRICHMENT_SYSTEM_PROMPT = (
    "You are an experienced technical recruiter. Assess the resume profile against the target role. "
    "Respond with a JSON object only, using the keys: overall_fit (0-100), key_strengths (list of strings), "
    "skills_analysis (object of skill name to proficiency 0-100), improvements (list of strings), "
    "project_suggestions (list of strings). Keep every list to at most 5 items."
)


class EnrichmentError(RuntimeError):
    def __init__(self, message: str, *, code: str = "enrichment_unavailable"):
        super().__init__(message)
        self.code = code


class EnrichmentProvider(Protocol):
    name: str

    def enrich(
        self,
        profile: ResumeProfile,
        target_role: str,
        job_description: str | None = None,
    ) -> EnrichmentResult: ...


def _looks_like_placeholder(value: str) -> bool:
    lower = value.strip().lower()
    return lower.startswith("your_") or lower.startswith("replace_") or lower in {"changeme", "todo"}


def enrichment_llm_enabled() -> bool:
    api_key = (os.getenv("OPENAI_API_KEY") or "").strip()
    return bool(api_key) and not _looks_like_placeholder(api_key)


def _timeout_s() -> float:
    try:
        return float(os.getenv("ENRICHMENT_TIMEOUT_S", "20"))
    except ValueError:
        return 20.0


@lru_cache(maxsize=1)
def _client() -> OpenAI:
    return OpenAI(
        api_key=(os.getenv("OPENAI_API_KEY") or "").strip(),
        base_url=(os.getenv("OPENAI_BASE_URL") or None),
        timeout=_timeout_s(),
        max_retries=0,
    )


def _model() -> str:
    return (os.getenv("AI_MODEL") or os.getenv("OPENAI_MODEL") or "gpt-4o-mini").strip()


def build_user_prompt(profile: ResumeProfile, target_role: str, job_description: str | None) -> str:
    payload = {
        "target_role": target_role,
        "summary": profile.summary,
        "skills": profile.skills,
        "experience": [
            {"role": entry.role, "company": entry.company, "duration": entry.duration, "description": entry.description}
            for entry in profile.experience
        ],
        "education": [entry.model_dump() for entry in profile.education],
        "projects": [{"title": project.title, "technologies": project.technologies} for project in profile.projects],
        "certifications": [entry.name for entry in profile.certifications],
        "total_experience_years": profile.total_experience_years,
    }
    prompt = f"Resume profile:\n{json.dumps(payload, ensure_ascii=False)}"
    if job_description and job_description.strip():
        prompt += f"\n\nJob description:\n{job_description.strip()[:6000]}"
    return prompt


class OpenAIEnrichmentProvider:
    """Single-attempt JSON completion; every failure surfaces as ``EnrichmentError``."""

    name = "openai"

    def __init__(self, *, temperature: float = 0.2, max_output_tokens: int = 900) -> None:
        self._temperature = temperature
        self._max_output_tokens = max_output_tokens

    def enrich(
        self,
        profile: ResumeProfile,
        target_role: str,
        job_description: str | None = None,
    ) -> EnrichmentResult:
        if not enrichment_llm_enabled():
            raise EnrichmentError("OpenAI is not configured.", code="llm_disabled")
        user_prompt = build_user_prompt(profile, target_role, job_description)
        try:
            response = _client().chat.completions.create(
                model=_model(),
                messages=[
                    {"role": "system", "content": ENRICHMENT_SYSTEM_PROMPT},
                    {"role": "user", "content": user_prompt},
                ],
                temperature=self._temperature,
                response_format={"type": "json_object"},
                max_tokens=self._max_output_tokens,
            )
        except Exception as exc:  # noqa: BLE001 - transport errors map to one code
            raise EnrichmentError(f"OpenAI request failed: {exc}", code="llm_exception") from exc

        content = response.choices[0].message.content if response.choices else ""
        if not content:
            raise EnrichmentError("OpenAI returned an empty response.", code="empty_response")
        try:
            parsed = json.loads(content)
        except json.JSONDecodeError as exc:
            raise EnrichmentError("OpenAI returned malformed JSON.", code="invalid_json") from exc
        if not isinstance(parsed, dict):
            raise EnrichmentError("OpenAI returned a non-object payload.", code="invalid_schema")
        try:
            return EnrichmentResult.model_validate(parsed)
        except ValidationError as exc:
            logger.warning("enrichment_llm_invalid_schema model=%s errors=%s", _model(), exc.error_count())
            raise EnrichmentError("OpenAI payload failed validation.", code="invalid_schema") from exc
