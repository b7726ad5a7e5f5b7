from __future__ import annotations

import logging
import time
from datetime import datetime, timezone
from functools import lru_cache
from typing import Callable

from resume_analyzer.core.config import settings
from resume_analyzer.extraction import build_resume_profile
from resume_analyzer.reference import ReferenceData, RoleProfileRegistry, get_reference_data, get_role_registry
from resume_analyzer.schemas.analysis import (
    AnalysisResponse,
    AnalysisResult,
    EnrichmentReport,
    EnrichmentResult,
    clamp_score,
)
from resume_analyzer.schemas.resume import dedupe_casefold
from resume_analyzer.scoring import (
    MidpointProficiencyEstimator,
    ProficiencyEstimator,
    ScoringEngine,
    SeededProficiencyEstimator,
)
from resume_analyzer.scoring.weights import points

from .enrichment_llm import EnrichmentProvider, OpenAIEnrichmentProvider, enrichment_llm_enabled

logger = logging.getLogger(__name__)


def merge_enrichment(analysis: AnalysisResult, enrichment: EnrichmentResult) -> AnalysisResult:
    """Fold model output into the deterministic result without adding new skill keys."""
    skills = dict(analysis.skills_analysis)
    keys = {skill.casefold(): skill for skill in skills}
    for skill, score in enrichment.skills_analysis.items():
        existing = keys.get(skill.casefold())
        if existing is not None:
            skills[existing] = clamp_score(score)

    max_items = points("improvements.max_items_with_enrichment", 8, max_value=20)
    improvements = dedupe_casefold(analysis.improvements + enrichment.improvements)[:max_items]
    suggestions = enrichment.project_suggestions or analysis.project_suggestions
    return analysis.model_copy(
        update={
            "skills_analysis": skills,
            "improvements": improvements,
            "project_suggestions": list(suggestions),
        }
    )


class AnalysisOrchestrator:
    def __init__(
        self,
        *,
        reference: ReferenceData | None = None,
        registry: RoleProfileRegistry | None = None,
        engine: ScoringEngine | None = None,
        provider: EnrichmentProvider | None = None,
        current_year: int | None = None,
    ) -> None:
        self._reference = reference or get_reference_data()
        self._registry = registry or RoleProfileRegistry(self._reference)
        self._engine = engine or ScoringEngine()
        self._provider = provider
        self._current_year = current_year

    @property
    def registry(self) -> RoleProfileRegistry:
        return self._registry

    def analyze(
        self,
        resume_text: str,
        target_role: str | None = None,
        job_description: str | None = None,
        *,
        enrich: bool = True,
    ) -> AnalysisResponse:
        started = time.perf_counter()
        profile = build_resume_profile(resume_text, self._reference, current_year=self._current_year)
        role_profile = self._registry.profile_for(target_role)
        analysis = self._engine.score(profile, role_profile, target_role)

        report = EnrichmentReport(status="skipped", provider=getattr(self._provider, "name", None))
        enrichment: EnrichmentResult | None = None
        if enrich and self._provider is not None:
            enrich_started = time.perf_counter()
            try:
                enrichment = self._provider.enrich(profile, role_profile.label, job_description)
            except Exception as exc:  # noqa: BLE001 - deterministic fallback is expected
                code = getattr(exc, "code", None) or "enrichment_failed"
                logger.warning(
                    "resume_enrichment_failed provider=%s error_code=%s: %s",
                    report.provider,
                    code,
                    exc,
                )
                report = EnrichmentReport(
                    status="failed",
                    provider=report.provider,
                    error_code=code,
                    latency_ms=int((time.perf_counter() - enrich_started) * 1000),
                )
            else:
                analysis = merge_enrichment(analysis, enrichment)
                report = EnrichmentReport(
                    status="applied",
                    provider=report.provider,
                    latency_ms=int((time.perf_counter() - enrich_started) * 1000),
                )

        logger.info(
            "resume_analysis_completed role=%s ats_score=%s quality=%s enrichment=%s latency_ms=%s",
            analysis.role_profile_used,
            analysis.ats_score,
            analysis.content_quality.label,
            report.status,
            int((time.perf_counter() - started) * 1000),
        )
        return AnalysisResponse(
            profile=profile,
            analysis=analysis,
            enrichment=report,
            enrichment_result=enrichment,
            generated_at=datetime.now(timezone.utc),
        )


def estimator_factory(mode: str, seed: int | None) -> Callable[[], ProficiencyEstimator]:
    if mode == "midpoint":
        return MidpointProficiencyEstimator
    return lambda: SeededProficiencyEstimator(seed)


@lru_cache(maxsize=1)
def get_analysis_orchestrator() -> AnalysisOrchestrator:
    provider: EnrichmentProvider | None = None
    if settings.enrichment_enabled and enrichment_llm_enabled():
        provider = OpenAIEnrichmentProvider()
    return AnalysisOrchestrator(
        reference=get_reference_data(),
        registry=get_role_registry(),
        engine=ScoringEngine(estimator_factory(settings.proficiency_mode, settings.proficiency_seed)),
        provider=provider,
    )
