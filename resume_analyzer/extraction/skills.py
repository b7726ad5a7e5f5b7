from __future__ import annotations

import re

from resume_analyzer.normalize.utils import contains_term, is_bullet_like, normalize_text, strip_bullet_prefix
from resume_analyzer.reference import ReferenceData
from resume_analyzer.schemas.resume import MAX_SKILLS, dedupe_casefold

from .sections import SectionSegmenter

MAX_SKILLS_PER_BLOCK = 20

_SKILL_LABELS = (
    "technical skills",
    "skills",
    "technologies",
    "programming languages",
    "tools and technologies",
)
_ITEM_SPLIT_RE = re.compile(r"[,;|•●▪\n]|\s+-\s+|\s+and\s+")
_PAREN_RE = re.compile(r"\([^)]*\)|\[[^\]]*\]")
_DIGITS_RE = re.compile(r"^[\d.\s%+]+$")
_STOP_ITEMS = {"and", "or", "the", "in", "at", "for", "with", "etc", "other", "others"}
_SEGMENTER = SectionSegmenter()


def _label_pattern(label: str) -> re.Pattern[str]:
    words = r"[ \t]+".join(re.escape(word) for word in label.split())
    return re.compile(rf"^[ \t]*{words}[ \t]*(?::|$)", re.IGNORECASE | re.MULTILINE)


SKILL_LABEL_PATTERNS = tuple(_label_pattern(label) for label in _SKILL_LABELS)


def _labeled_block(text: str, anchor_end: int) -> str:
    """Rest of the label line plus following lines up to a blank line or a bare section heading."""
    lines: list[str] = []
    for index, line in enumerate(text[anchor_end:].split("\n")):
        if not line.strip():
            if index == 0:
                continue
            break
        if index > 0 and _SEGMENTER.is_standalone_heading(line):
            break
        lines.append(line)
    return "\n".join(lines)


def parse_skill_items(block: str) -> list[str]:
    items: list[str] = []
    for raw_line in block.splitlines():
        line = strip_bullet_prefix(raw_line) if is_bullet_like(raw_line) else raw_line
        for chunk in _ITEM_SPLIT_RE.split(line):
            item = _PAREN_RE.sub("", chunk)
            if ":" in item:
                item = item.split(":", 1)[1]
            item = item.strip(" \t.-*")
            if not (1 < len(item) < 30):
                continue
            if _DIGITS_RE.match(item) or item.lower() in _STOP_ITEMS:
                continue
            items.append(item)
            if len(items) >= MAX_SKILLS_PER_BLOCK:
                return items
    return items


def known_technologies_in(text: str, reference: ReferenceData) -> list[str]:
    return [term for term in reference.known_technologies if contains_term(text, term)]


def extract_skills(text: str, reference: ReferenceData, span: str | None = None) -> list[str]:
    """Union of labeled skill lists and known technologies mentioned anywhere."""
    source = normalize_text(text)
    collected: list[str] = []
    if span:
        collected.extend(parse_skill_items(span))
    for pattern in SKILL_LABEL_PATTERNS:
        match = pattern.search(source)
        if match:
            collected.extend(parse_skill_items(_labeled_block(source, match.end())))
    collected.extend(known_technologies_in(source, reference))
    return dedupe_casefold(collected)[:MAX_SKILLS]
