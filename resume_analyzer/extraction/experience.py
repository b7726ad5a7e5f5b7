from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date

from resume_analyzer.normalize.utils import is_bullet_like, normalize_line, split_inline_bullets, strip_bullet_prefix
from resume_analyzer.schemas.resume import MAX_ENTRY_ITEMS, MAX_EXPERIENCE, ExperienceEntry

from .state import ParserState

MIN_DESCRIPTION_LINE_LENGTH = 10
MAX_ROLE_WORDS = 8

# Description lines that start with one of these never name a role.
ACTION_VERBS = frozenset(
    {
        "achieved", "analyzed", "built", "collaborated", "contributed", "coordinated", "created",
        "delivered", "designed", "developed", "drove", "helped", "implemented", "improved",
        "increased", "launched", "led", "managed", "mentored", "partnered", "presented",
        "reduced", "shipped", "spoke", "supported", "taught", "volunteered", "worked", "wrote",
    }
)

_MONTH = r"(?:jan|feb|mar|apr|may|jun|jul|aug|sep|sept|oct|nov|dec)[a-z]*\.?"
_YEAR = r"(?:19|20)\d{2}"
DURATION_PATTERN = (
    rf"(?:{_MONTH}\s+)?{_YEAR}\s*[-–—]\s*(?:(?:{_MONTH}\s+)?{_YEAR}|present|current|now)"
)
DURATION_RE = re.compile(DURATION_PATTERN, re.IGNORECASE)
YEAR_RANGE_RE = re.compile(rf"\b({_YEAR})\s*[-–—]\s*(?:({_YEAR})\b|present\b|current\b)", re.IGNORECASE)

ACHIEVEMENT_PATTERNS = (
    re.compile(r"\d+(?:\.\d+)?\s?%"),
    re.compile(r"[$€£]\s?\d[\d,]*(?:\.\d+)?\s?[kmb]?\b", re.IGNORECASE),
    re.compile(
        r"\b\d[\d,]*\+?\s+(?:users|customers|clients|people|members|engineers|employees|developers|team members)\b",
        re.IGNORECASE,
    ),
    re.compile(
        r"\b(?:increased|improved|reduced|decreased|grew|built|managed|led|saved|generated|cut|boosted)\b[^.]*?\d",
        re.IGNORECASE,
    ),
)


@dataclass(frozen=True, slots=True)
class OpeningRule:
    name: str
    pattern: re.Pattern[str]


# Tried in order; the first rule that matches a line opens a new entry.
OPENING_RULES: tuple[OpeningRule, ...] = (
    OpeningRule(
        "role_at_company",
        re.compile(
            rf"^(?P<role>.+?)\s+(?:at\s+|@\s*)(?P<company>.+?)"
            rf"(?:\s*\((?P<paren>[^)]+)\)|\s*[,|]?\s+(?P<range>{DURATION_PATTERN}|{_YEAR}))?\s*$",
            re.IGNORECASE,
        ),
    ),
    OpeningRule(
        "role_pipe_company",
        re.compile(r"^(?P<role>[^|]+?)\s*\|\s*(?P<company>[^|]+?)\s*\|\s*(?P<range>[^|]*\d{4}[^|]*?)\s*$"),
    ),
)


@dataclass(slots=True)
class _OpenEntry:
    role: str
    company: str
    duration: str
    lines: list[str] = field(default_factory=list)


def _looks_like_duration(value: str) -> bool:
    return bool(re.search(r"\d{4}|present|current", value, re.IGNORECASE))


def match_opening_line(line: str) -> _OpenEntry | None:
    """Return a new entry when ``line`` reads like 'Role at Company (duration)'."""
    stripped = normalize_line(line)
    if not stripped or is_bullet_like(stripped) or stripped.endswith("."):
        return None
    for rule in OPENING_RULES:
        match = rule.pattern.match(stripped)
        if not match:
            continue
        role = match.group("role").strip(" ,-|")
        company = match.group("company").strip(" ,-|")
        if not role or not company or len(role.split()) > MAX_ROLE_WORDS:
            continue
        if role.split()[0].lower() in ACTION_VERBS:
            return None
        groups = match.groupdict()
        duration = (groups.get("range") or "").strip()
        paren = (groups.get("paren") or "").strip()
        if not duration and paren and _looks_like_duration(paren):
            duration = paren
        return _OpenEntry(role=role, company=company, duration=duration)
    return None


def _items_from_lines(lines: list[str]) -> list[str]:
    items: list[str] = []
    for line in lines:
        items.extend(split_inline_bullets(strip_bullet_prefix(line)))
    return items


def is_quantified(text: str) -> bool:
    return any(pattern.search(text) for pattern in ACHIEVEMENT_PATTERNS)


def _close(entry: _OpenEntry) -> ExperienceEntry:
    items = _items_from_lines(entry.lines)
    duration = entry.duration
    if not duration:
        for line in entry.lines:
            found = DURATION_RE.search(line)
            if found:
                duration = found.group(0)
                break
    return ExperienceEntry(
        role=entry.role,
        company=entry.company,
        duration=duration,
        description=" ".join(strip_bullet_prefix(line) for line in entry.lines).strip(),
        responsibilities=items[:MAX_ENTRY_ITEMS],
        achievements=[item for item in items if is_quantified(item)][:MAX_ENTRY_ITEMS],
    )


class ExperienceEntryParser:
    """Line-driven state machine.

    IDLE --opening line--> OPEN_ENTRY
    OPEN_ENTRY --opening line--> emit current, OPEN_ENTRY (new entry)
    OPEN_ENTRY --other line--> append to description when long enough
    IDLE --other line--> ignored
    finish() emits whatever entry is still open.
    """

    def __init__(self, *, max_entries: int = MAX_EXPERIENCE) -> None:
        self.state = ParserState.IDLE
        self._max_entries = max_entries
        self._current: _OpenEntry | None = None
        self._entries: list[ExperienceEntry] = []

    def feed(self, line: str) -> None:
        stripped = normalize_line(line)
        if not stripped:
            return
        opening = match_opening_line(stripped)
        if opening is not None:
            if self.state is ParserState.OPEN_ENTRY:
                self._emit()
            self._current = opening
            self.state = ParserState.OPEN_ENTRY
            return
        if self.state is ParserState.OPEN_ENTRY and self._current is not None:
            if len(stripped) > MIN_DESCRIPTION_LINE_LENGTH:
                self._current.lines.append(stripped)

    def finish(self) -> list[ExperienceEntry]:
        if self.state is ParserState.OPEN_ENTRY:
            self._emit()
        return list(self._entries)

    def _emit(self) -> None:
        if self._current is not None and len(self._entries) < self._max_entries:
            self._entries.append(_close(self._current))
        self._current = None
        self.state = ParserState.IDLE


def extract_experience(span: str | None) -> list[ExperienceEntry]:
    if not span:
        return []
    parser = ExperienceEntryParser()
    for line in span.splitlines():
        parser.feed(line)
    return parser.finish()


def estimate_total_experience_years(text: str, *, current_year: int | None = None) -> float:
    """Sum every year range in the document; overlapping ranges are counted twice."""
    year_now = current_year or date.today().year
    total_months = 0
    for match in YEAR_RANGE_RE.finditer(text or ""):
        start = int(match.group(1))
        end = int(match.group(2)) if match.group(2) else year_now
        if end < start:
            continue
        total_months += (end - start) * 12
    return round(total_months / 12, 1)
