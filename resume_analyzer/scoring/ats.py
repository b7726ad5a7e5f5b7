from __future__ import annotations

from resume_analyzer.schemas.resume import ResumeProfile

from .weights import points


def ats_breakdown(profile: ResumeProfile, found_required: list[str]) -> dict[str, int]:
    """Points per component, each already capped at its configured maximum."""
    per_match = points("ats.required_skills.points_per_match", 5)
    coverage_cap = points("ats.required_skills.cap", 15)
    return {
        "email": points("ats.points.email", 15) if profile.personal_info.email else 0,
        "phone": points("ats.points.phone", 10) if profile.personal_info.phone else 0,
        "skills": points("ats.points.skills", 20) if profile.skills else 0,
        "experience": points("ats.points.experience", 25) if profile.experience else 0,
        "education": points("ats.points.education", 15) if profile.education else 0,
        "required_skills": min(len(found_required) * per_match, coverage_cap),
    }


def ats_score(breakdown: dict[str, int]) -> int:
    return max(0, min(100, sum(breakdown.values())))
