from __future__ import annotations

import re

from resume_analyzer.normalize.utils import term_pattern
from resume_analyzer.reference import ReferenceData
from resume_analyzer.schemas.resume import MAX_LANGUAGES, LanguageEntry


def _proficiency(span: str, language: str, levels: tuple[str, ...]) -> str:
    if not levels:
        return "unspecified"
    alternatives = "|".join(re.escape(level) for level in levels)
    match = re.search(
        rf"{re.escape(language)}[^,;\n]*?\b({alternatives})\b",
        span,
        re.IGNORECASE,
    )
    return match.group(1).lower() if match else "unspecified"


def extract_languages(span: str | None, reference: ReferenceData) -> list[LanguageEntry]:
    """Known human languages in the order they appear, each with an adjacent proficiency word."""
    if not span:
        return []
    found: list[tuple[int, str]] = []
    for language in reference.languages:
        match = term_pattern(language).search(span)
        if match:
            found.append((match.start(), language))
    found.sort()
    return [
        LanguageEntry(language=language, proficiency=_proficiency(span, language, reference.proficiency_levels))
        for _, language in found[:MAX_LANGUAGES]
    ]
