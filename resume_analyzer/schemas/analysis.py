from __future__ import annotations

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .resume import ResumeProfile

QualityLabel = Literal["excellent", "good", "needs_enhancement"]
EnrichmentStatus = Literal["applied", "skipped", "failed"]


def clamp_score(value: Any, default: int = 0) -> int:
    try:
        number = int(round(float(value)))
    except (TypeError, ValueError):
        return default
    return max(0, min(100, number))


class ContentQuality(BaseModel):
    model_config = ConfigDict(frozen=True)

    score: int = Field(ge=0, le=100)
    label: QualityLabel
    feedback: list[str] = Field(default_factory=list)


class AnalysisResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    target_role: str
    role_profile_used: str
    skills_analysis: dict[str, int] = Field(default_factory=dict)
    found_required_skills: list[str] = Field(default_factory=list)
    found_preferred_skills: list[str] = Field(default_factory=list)
    missing_required_skills: list[str] = Field(default_factory=list)
    missing_preferred_skills: list[str] = Field(default_factory=list)
    missing_skills: list[str] = Field(default_factory=list)
    found_key_terms: list[str] = Field(default_factory=list)
    improvements: list[str] = Field(default_factory=list)
    ats_score: int = Field(ge=0, le=100)
    ats_breakdown: dict[str, int] = Field(default_factory=dict)
    content_quality: ContentQuality
    project_suggestions: list[str] = Field(default_factory=list)

    @field_validator("skills_analysis")
    @classmethod
    def _clamp_proficiency(cls, value: dict[str, int]) -> dict[str, int]:
        return {skill: clamp_score(score) for skill, score in value.items()}


class EnrichmentResult(BaseModel):
    overall_fit: int | None = None
    key_strengths: list[str] = Field(default_factory=list, max_length=10)
    skills_analysis: dict[str, int] = Field(default_factory=dict)
    improvements: list[str] = Field(default_factory=list, max_length=10)
    project_suggestions: list[str] = Field(default_factory=list, max_length=10)

    @field_validator("overall_fit", mode="before")
    @classmethod
    def _clamp_overall_fit(cls, value: Any) -> int | None:
        if value is None:
            return None
        return clamp_score(value)

    @field_validator("skills_analysis", mode="before")
    @classmethod
    def _clamp_skills(cls, value: Any) -> dict[str, int]:
        if not isinstance(value, dict):
            raise ValueError("skills_analysis must be an object")
        return {str(skill).strip(): clamp_score(score) for skill, score in value.items() if str(skill).strip()}

    @field_validator("key_strengths", "improvements", "project_suggestions", mode="before")
    @classmethod
    def _clean_strings(cls, value: Any) -> list[str]:
        if value is None:
            return []
        if not isinstance(value, list):
            raise ValueError("expected a list of strings")
        return [str(item).strip() for item in value if str(item).strip()]


class EnrichmentReport(BaseModel):
    status: EnrichmentStatus
    provider: str | None = None
    error_code: str | None = None
    latency_ms: int | None = Field(default=None, ge=0)


class AnalysisResponse(BaseModel):
    profile: ResumeProfile
    analysis: AnalysisResult
    enrichment: EnrichmentReport
    enrichment_result: EnrichmentResult | None = None
    generated_at: datetime


class AnalyzeRequest(BaseModel):
    resume_text: str = Field(max_length=100000)
    target_role: str = Field(default="Software Developer", max_length=120)
    job_description: str | None = Field(default=None, max_length=50000)
    enrich: bool = True


class RoleListResponse(BaseModel):
    roles: list[str]
    default_role: str
