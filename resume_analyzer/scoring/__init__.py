from .engine import ScoringEngine
from .proficiency import MidpointProficiencyEstimator, ProficiencyEstimator, SeededProficiencyEstimator

__all__ = [
    "MidpointProficiencyEstimator",
    "ProficiencyEstimator",
    "ScoringEngine",
    "SeededProficiencyEstimator",
]
