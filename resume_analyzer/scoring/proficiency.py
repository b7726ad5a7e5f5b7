from __future__ import annotations

import random
from typing import Literal, Protocol

from .weights import band

ProficiencyBand = Literal["required", "preferred", "other"]

DEFAULT_BANDS: dict[str, tuple[int, int]] = {
    "required": (80, 100),
    "preferred": (65, 90),
    "other": (60, 90),
}


def band_bounds(name: ProficiencyBand) -> tuple[int, int]:
    return band(name, DEFAULT_BANDS[name])


class ProficiencyEstimator(Protocol):
    def estimate(self, band_name: ProficiencyBand) -> int: ...


class SeededProficiencyEstimator:
    """Draws a presentation score from the band. Not a measurement; pass a seed for repeatable output."""

    name = "random"

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)

    def estimate(self, band_name: ProficiencyBand) -> int:
        low, high = band_bounds(band_name)
        return self._rng.randrange(low, high)


class MidpointProficiencyEstimator:
    name = "midpoint"

    def estimate(self, band_name: ProficiencyBand) -> int:
        low, high = band_bounds(band_name)
        return (low + high) // 2


def build_skills_analysis(
    found_required: list[str],
    found_preferred: list[str],
    skills: list[str],
    estimator: ProficiencyEstimator,
) -> dict[str, int]:
    analysis: dict[str, int] = {}
    seen: set[str] = set()

    def _add(skill: str, band_name: ProficiencyBand) -> None:
        key = skill.casefold()
        if key in seen:
            return
        seen.add(key)
        analysis[skill] = estimator.estimate(band_name)

    for skill in found_required:
        _add(skill, "required")
    for skill in found_preferred:
        _add(skill, "preferred")
    for skill in skills:
        _add(skill, "other")
    return analysis
