from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

MAX_SKILLS = 25
MAX_EXPERIENCE = 8
MAX_EDUCATION = 5
MAX_PROJECTS = 6
MAX_CERTIFICATIONS = 5
MAX_LANGUAGES = 5
MAX_ACHIEVEMENTS = 8
MAX_ENTRY_ITEMS = 5
MAX_PROJECT_TECHNOLOGIES = 8
MAX_PROJECT_DESCRIPTION_CHARS = 200

SummarySource = Literal["labeled", "document", "default"]
Level = Literal["low", "medium", "high"]


def dedupe_casefold(values: list[str]) -> list[str]:
    """Drop case-insensitive duplicates, keeping the first spelling seen."""
    seen: set[str] = set()
    output: list[str] = []
    for value in values:
        key = value.casefold()
        if key in seen:
            continue
        seen.add(key)
        output.append(value)
    return output


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class PersonalInfo(_Frozen):
    name: str = ""
    email: str = ""
    phone: str = ""
    linkedin: str = ""
    github: str = ""
    location: str = ""
    website: str = ""


class ExperienceEntry(_Frozen):
    role: str = ""
    company: str = ""
    duration: str = ""
    description: str = ""
    responsibilities: list[str] = Field(default_factory=list)
    achievements: list[str] = Field(default_factory=list)

    @field_validator("responsibilities", "achievements")
    @classmethod
    def _cap_items(cls, value: list[str]) -> list[str]:
        return value[:MAX_ENTRY_ITEMS]


class EducationEntry(_Frozen):
    degree: str = ""
    major: str = ""
    institution: str = ""
    year: str = ""
    gpa: str = ""


class ProjectEntry(_Frozen):
    title: str = ""
    description: str = ""
    technologies: list[str] = Field(default_factory=list)
    url: str = ""
    repository_url: str = ""

    @field_validator("description")
    @classmethod
    def _truncate_description(cls, value: str) -> str:
        return value[:MAX_PROJECT_DESCRIPTION_CHARS]

    @field_validator("technologies")
    @classmethod
    def _cap_technologies(cls, value: list[str]) -> list[str]:
        return value[:MAX_PROJECT_TECHNOLOGIES]


class CertificationEntry(_Frozen):
    name: str = ""
    year: str = ""
    issuer: str = ""


class LanguageEntry(_Frozen):
    language: str
    proficiency: str = "unspecified"


class DocumentMetadata(_Frozen):
    word_count: int = Field(default=0, ge=0)
    page_estimate: int = Field(default=0, ge=0)
    complexity: Level = "low"
    parse_quality: Level = "low"


class ResumeProfile(_Frozen):
    raw_text: str = ""
    personal_info: PersonalInfo = Field(default_factory=PersonalInfo)
    summary: str = Field(min_length=1)
    summary_source: SummarySource = "default"
    skills: list[str] = Field(default_factory=list)
    experience: list[ExperienceEntry] = Field(default_factory=list)
    education: list[EducationEntry] = Field(default_factory=list)
    projects: list[ProjectEntry] = Field(default_factory=list)
    certifications: list[CertificationEntry] = Field(default_factory=list)
    languages: list[LanguageEntry] = Field(default_factory=list)
    achievements: list[str] = Field(default_factory=list)
    total_experience_years: float = Field(default=0.0, ge=0.0)
    metadata: DocumentMetadata = Field(default_factory=DocumentMetadata)

    @field_validator("skills")
    @classmethod
    def _unique_capped_skills(cls, value: list[str]) -> list[str]:
        return dedupe_casefold(value)[:MAX_SKILLS]

    @field_validator("experience")
    @classmethod
    def _cap_experience(cls, value: list[ExperienceEntry]) -> list[ExperienceEntry]:
        return value[:MAX_EXPERIENCE]

    @field_validator("education")
    @classmethod
    def _cap_education(cls, value: list[EducationEntry]) -> list[EducationEntry]:
        return value[:MAX_EDUCATION]

    @field_validator("projects")
    @classmethod
    def _cap_projects(cls, value: list[ProjectEntry]) -> list[ProjectEntry]:
        return value[:MAX_PROJECTS]

    @field_validator("certifications")
    @classmethod
    def _cap_certifications(cls, value: list[CertificationEntry]) -> list[CertificationEntry]:
        return value[:MAX_CERTIFICATIONS]

    @field_validator("languages")
    @classmethod
    def _cap_languages(cls, value: list[LanguageEntry]) -> list[LanguageEntry]:
        return value[:MAX_LANGUAGES]

    @field_validator("achievements")
    @classmethod
    def _cap_achievements(cls, value: list[str]) -> list[str]:
        return value[:MAX_ACHIEVEMENTS]

    @property
    def has_profile_links(self) -> bool:
        return bool(self.personal_info.linkedin or self.personal_info.github)
