from .analysis import (
    AnalysisResponse,
    AnalysisResult,
    AnalyzeRequest,
    ContentQuality,
    EnrichmentReport,
    EnrichmentResult,
    RoleListResponse,
)
from .resume import (
    CertificationEntry,
    DocumentMetadata,
    EducationEntry,
    ExperienceEntry,
    LanguageEntry,
    PersonalInfo,
    ProjectEntry,
    ResumeProfile,
)

__all__ = [
    "AnalysisResponse",
    "AnalysisResult",
    "AnalyzeRequest",
    "ContentQuality",
    "EnrichmentReport",
    "EnrichmentResult",
    "RoleListResponse",
    "CertificationEntry",
    "DocumentMetadata",
    "EducationEntry",
    "ExperienceEntry",
    "LanguageEntry",
    "PersonalInfo",
    "ProjectEntry",
    "ResumeProfile",
]
