from __future__ import annotations

import logging
from typing import Callable

from resume_analyzer.reference import RoleProfile
from resume_analyzer.schemas.analysis import AnalysisResult
from resume_analyzer.schemas.resume import ResumeProfile

from .ats import ats_breakdown, ats_score
from .improvements import DEFAULT_IMPROVEMENT_RULES, ImprovementContext, ImprovementRule, generate_improvements
from .matching import key_terms_in, partition_terms
from .proficiency import MidpointProficiencyEstimator, ProficiencyEstimator, build_skills_analysis
from .quality import assess_content_quality
from .weights import points

logger = logging.getLogger(__name__)


class ScoringEngine:
    """Scores a profile against a role. Holds no per-call state."""

    def __init__(
        self,
        estimator_factory: Callable[[], ProficiencyEstimator] = MidpointProficiencyEstimator,
        rules: tuple[ImprovementRule, ...] = DEFAULT_IMPROVEMENT_RULES,
    ) -> None:
        self._estimator_factory = estimator_factory
        self._rules = rules

    def score(self, profile: ResumeProfile, role_profile: RoleProfile, target_role: str | None = None) -> AnalysisResult:
        raw_text = profile.raw_text
        found_required, missing_required = partition_terms(role_profile.required_skills, profile.skills, raw_text)
        found_preferred, missing_preferred = partition_terms(role_profile.preferred_skills, profile.skills, raw_text)
        listed_preferred = points("gaps.missing_preferred_listed", 3, max_value=20)

        breakdown = ats_breakdown(profile, found_required)
        improvements = generate_improvements(
            ImprovementContext(profile=profile, role_profile=role_profile, missing_required=missing_required),
            self._rules,
        )
        result = AnalysisResult(
            target_role=(target_role or "").strip() or role_profile.label,
            role_profile_used=role_profile.label,
            skills_analysis=build_skills_analysis(
                found_required,
                found_preferred,
                profile.skills,
                self._estimator_factory(),
            ),
            found_required_skills=found_required,
            found_preferred_skills=found_preferred,
            missing_required_skills=missing_required,
            missing_preferred_skills=missing_preferred,
            missing_skills=missing_required + missing_preferred[:listed_preferred],
            found_key_terms=key_terms_in(raw_text, role_profile.key_terms),
            improvements=improvements,
            ats_score=ats_score(breakdown),
            ats_breakdown=breakdown,
            content_quality=assess_content_quality(profile),
            project_suggestions=list(role_profile.project_suggestions),
        )
        logger.debug(
            "resume_scored role=%s ats_score=%s missing_required=%s",
            role_profile.label,
            result.ats_score,
            len(missing_required),
        )
        return result
