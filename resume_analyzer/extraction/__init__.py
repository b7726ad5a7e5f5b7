from .profile import build_resume_profile
from .sections import DEFAULT_SECTION_RULES, SectionRule, SectionSegmenter

__all__ = ["DEFAULT_SECTION_RULES", "SectionRule", "SectionSegmenter", "build_resume_profile"]
