from __future__ import annotations

from resume_analyzer.schemas.analysis import ContentQuality, QualityLabel
from resume_analyzer.schemas.resume import ResumeProfile

from .weights import points

QUALITY_FEEDBACK: dict[str, str] = {
    "excellent": "Well-structured resume with complete contact details and strong section coverage.",
    "good": "Solid resume; filling the remaining gaps would make it more competitive.",
    "needs_enhancement": "Key sections are missing or thin; add the details listed in the improvements.",
}


def quality_label(score: int) -> QualityLabel:
    if score >= points("content_quality.tiers.excellent", 80):
        return "excellent"
    if score >= points("content_quality.tiers.good", 60):
        return "good"
    return "needs_enhancement"


def assess_content_quality(profile: ResumeProfile) -> ContentQuality:
    min_skills = points("content_quality.min_skills", 5, max_value=25)
    score = 0
    if profile.personal_info.email:
        score += points("content_quality.points.email", 10)
    if profile.personal_info.phone:
        score += points("content_quality.points.phone", 10)
    if len(profile.skills) >= min_skills:
        score += points("content_quality.points.skills", 20)
    if profile.experience:
        score += points("content_quality.points.experience", 25)
    if profile.education:
        score += points("content_quality.points.education", 15)
    if profile.projects:
        score += points("content_quality.points.projects", 20)
    score = max(0, min(100, score))
    label = quality_label(score)
    return ContentQuality(score=score, label=label, feedback=[QUALITY_FEEDBACK[label]])
