from __future__ import annotations

import logging

from resume_analyzer.normalize.utils import normalize_text
from resume_analyzer.reference import ReferenceData, get_reference_data
from resume_analyzer.schemas.resume import ResumeProfile

from .achievements import extract_achievements
from .certifications import extract_certifications
from .education import extract_education
from .experience import estimate_total_experience_years, extract_experience
from .languages import extract_languages
from .metadata import build_metadata
from .personal_info import extract_personal_info
from .projects import extract_projects
from .sections import SectionSegmenter
from .skills import extract_skills
from .summary import extract_summary

logger = logging.getLogger(__name__)


def build_resume_profile(
    text: str,
    reference: ReferenceData | None = None,
    *,
    segmenter: SectionSegmenter | None = None,
    current_year: int | None = None,
) -> ResumeProfile:
    """Run every extractor over ``text``. Empty input gives an empty profile, never an error."""
    reference = reference or get_reference_data()
    segmenter = segmenter or SectionSegmenter()
    source = normalize_text(text or "")
    spans = segmenter.segment(source)
    summary, summary_source = extract_summary(source, spans["summary"])

    profile = ResumeProfile(
        raw_text=text or "",
        personal_info=extract_personal_info(source),
        summary=summary,
        summary_source=summary_source,
        skills=extract_skills(source, reference, spans["skills"]),
        experience=extract_experience(spans["experience"]),
        education=extract_education(spans["education"]),
        projects=extract_projects(spans["projects"]),
        certifications=extract_certifications(spans["certifications"], reference),
        languages=extract_languages(spans["languages"], reference),
        achievements=extract_achievements(source),
        total_experience_years=estimate_total_experience_years(source, current_year=current_year),
        metadata=build_metadata(source, reference),
    )
    logger.debug(
        "resume_profile_built sections=%s skills=%s experience=%s",
        ",".join(name for name, span in spans.items() if span),
        len(profile.skills),
        len(profile.experience),
    )
    return profile
