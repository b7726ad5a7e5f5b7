from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator


class RoleProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    required_skills: tuple[str, ...] = ()
    preferred_skills: tuple[str, ...] = ()
    key_terms: tuple[str, ...] = ()
    project_suggestions: tuple[str, ...] = ()


class ReferenceData(BaseModel):
    """Fixed vocabularies and role expectations shared by extractors and scoring."""

    model_config = ConfigDict(frozen=True)

    default_role: str
    known_technologies: tuple[str, ...] = ()
    technical_terms: tuple[str, ...] = ()
    certification_issuers: tuple[str, ...] = ()
    languages: tuple[str, ...] = ()
    proficiency_levels: tuple[str, ...] = ()
    roles: dict[str, RoleProfile] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _attach_role_labels(cls, data):
        if isinstance(data, dict) and isinstance(data.get("roles"), dict):
            roles = {}
            for label, profile in data["roles"].items():
                if isinstance(profile, dict):
                    profile = {"label": label, **profile}
                roles[label] = profile
            data = {**data, "roles": roles}
        return data

    @model_validator(mode="after")
    def _require_default_role(self) -> "ReferenceData":
        if self.default_role not in self.roles:
            raise ValueError(f"default_role '{self.default_role}' has no role profile")
        return self
