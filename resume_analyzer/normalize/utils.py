from __future__ import annotations

import re

_BULLET_CHARS = "•◦▪▫●○■□◆◇▶►-–—*·"
_BULLET_PATTERN = re.compile(rf"^\s*(?:[{re.escape(_BULLET_CHARS)}]|(?:\d+[\.\)]))\s+")
_INLINE_BULLET_RE = re.compile(r"\s*[•◦▪●■◆►·]\s*")
_BLOCK_SPLIT_RE = re.compile(r"\n\s*\n")
_SENTENCE_RE = re.compile(r"[^.!?]+(?:[.!?]+|$)")
_WORD_CHAR = r"[A-Za-z0-9]"


def normalize_line(line: str) -> str:
    return re.sub(r"\s+", " ", line).strip()


def normalize_text(text: str) -> str:
    """Unify line endings and strip trailing spaces; keeps blank lines."""
    unified = (text or "").replace("\r\n", "\n").replace("\r", "\n")
    return "\n".join(line.rstrip() for line in unified.split("\n"))


def non_blank_lines(text: str) -> list[str]:
    return [normalize_line(line) for line in (text or "").splitlines() if line.strip()]


def split_blocks(text: str) -> list[str]:
    return [block.strip() for block in _BLOCK_SPLIT_RE.split(text or "") if block.strip()]


def is_bullet_like(line: str) -> bool:
    return bool(_BULLET_PATTERN.match(line))


def strip_bullet_prefix(line: str) -> str:
    return _BULLET_PATTERN.sub("", line).strip()


def split_inline_bullets(line: str) -> list[str]:
    return [part.strip() for part in _INLINE_BULLET_RE.split(line) if part.strip()]


def split_sentences(text: str) -> list[str]:
    flat = normalize_line(text or "")
    return [match.group(0).strip() for match in _SENTENCE_RE.finditer(flat) if match.group(0).strip()]


def term_pattern(term: str) -> re.Pattern[str]:
    """Case-insensitive pattern matching ``term`` only on token boundaries."""
    return re.compile(rf"(?<!{_WORD_CHAR}){re.escape(term)}(?!{_WORD_CHAR})", re.IGNORECASE)


def contains_term(text: str, term: str) -> bool:
    if not term or not text:
        return False
    return bool(term_pattern(term).search(text))
