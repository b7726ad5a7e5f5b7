from __future__ import annotations

from resume_analyzer.normalize.utils import is_bullet_like, non_blank_lines, split_sentences
from resume_analyzer.schemas.resume import SummarySource

from .sections import SectionSegmenter

PLACEHOLDER_SUMMARY = (
    "Motivated professional seeking opportunities to contribute skills and experience "
    "to achieve organizational goals."
)
MIN_SUMMARY_CHARS = 50
MAX_SUMMARY_CHARS = 300
MAX_SUMMARY_SENTENCES = 3
MIN_PROSE_WORDS = 6

_SEGMENTER = SectionSegmenter()


def _leading_sentences(text: str, *, stop_at: int | None = None) -> str:
    picked: list[str] = []
    for sentence in split_sentences(text)[:MAX_SUMMARY_SENTENCES]:
        picked.append(sentence)
        if stop_at is not None and len(" ".join(picked)) >= stop_at:
            break
    return " ".join(picked)[:MAX_SUMMARY_CHARS].strip()


def _prose(text: str) -> str:
    lines = [
        line
        for line in non_blank_lines(text)
        if len(line.split()) >= MIN_PROSE_WORDS
        and not is_bullet_like(line)
        and not _SEGMENTER.is_heading_like(line)
    ]
    return " ".join(lines)


def extract_summary(text: str, span: str | None) -> tuple[str, SummarySource]:
    """Return ``(summary, source)``; the summary is never empty."""
    if span:
        labeled = _leading_sentences(span)
        if len(labeled) >= MIN_SUMMARY_CHARS:
            return labeled, "labeled"

    document = _leading_sentences(_prose(text), stop_at=MIN_SUMMARY_CHARS)
    if len(document) >= MIN_SUMMARY_CHARS:
        return document, "document"

    return PLACEHOLDER_SUMMARY, "default"
