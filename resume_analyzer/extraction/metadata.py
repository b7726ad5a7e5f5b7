from __future__ import annotations

import math
import re

from resume_analyzer.normalize.utils import contains_term
from resume_analyzer.reference import ReferenceData
from resume_analyzer.schemas.resume import DocumentMetadata, Level

WORDS_PER_PAGE = 275

_LABEL_LINE_RE = re.compile(r"\n[A-Z][a-z]+:")
_BULLET_RE = re.compile(r"[•\-*]\s")


def count_technical_terms(text: str, reference: ReferenceData) -> int:
    return sum(1 for term in reference.technical_terms if contains_term(text, term))


def assess_complexity(text: str, reference: ReferenceData) -> Level:
    length_points = 2 if len(text) > 5000 else 1 if len(text) > 2000 else 0
    sections = len(_LABEL_LINE_RE.findall(text))
    bullets = len(_BULLET_RE.findall(text))
    terms = count_technical_terms(text, reference)
    score = length_points + sections + min(bullets / 5, 3) + min(terms / 10, 3)
    if score >= 8:
        return "high"
    if score >= 5:
        return "medium"
    return "low"


def assess_parse_quality(text: str) -> Level:
    indicators = (
        bool(_LABEL_LINE_RE.search(text)),
        "@" in text,
        bool(re.search(r"\d{4}", text)),
        bool(re.search(r"skills?|technologies?", text, re.IGNORECASE)),
        len(text) > 500,
    )
    hits = sum(indicators)
    if hits >= 4:
        return "high"
    if hits >= 2:
        return "medium"
    return "low"


def build_metadata(text: str, reference: ReferenceData) -> DocumentMetadata:
    words = len(text.split())
    return DocumentMetadata(
        word_count=words,
        page_estimate=math.ceil(words / WORDS_PER_PAGE),
        complexity=assess_complexity(text, reference),
        parse_quality=assess_parse_quality(text),
    )
