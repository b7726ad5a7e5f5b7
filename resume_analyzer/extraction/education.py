from __future__ import annotations

import re
from dataclasses import dataclass

from resume_analyzer.normalize.utils import normalize_line, strip_bullet_prefix
from resume_analyzer.schemas.resume import MAX_EDUCATION, EducationEntry

from .state import ParserState

MIN_INSTITUTION_LENGTH = 5

_DEGREE_WORD = (
    r"(?:bachelor(?:'s)?|master(?:'s)?|ph\.?\s?d\.?|doctorate|associate(?:'s)?|diploma|mba"
    r"|b\.?\s?sc?\.?|m\.?\s?sc?\.?|b\.?\s?a\.?|m\.?\s?a\.?|b\.?\s?eng\.?|m\.?\s?eng\.?|b\.?\s?tech\.?|m\.?\s?tech\.?)"
)
_YEAR = r"(?:19|20)\d{2}"

DEGREE_RE = re.compile(
    rf"^(?P<degree>{_DEGREE_WORD}(?:\s+(?:of|in)\s+(?:science|arts|engineering|technology|business administration))?)"
    rf"(?![A-Za-z])"
    rf"(?:.*?\s(?:in|of)\s+(?P<major>.+?))?"
    rf"(?:\s*[,\-–]?\s*(?:from|at)\s+(?P<institution>.+?))?"
    rf"(?:\s*[,(]?\s*(?P<year>{_YEAR})\)?)?\s*$",
    re.IGNORECASE,
)
YEAR_RE = re.compile(rf"\b{_YEAR}\b")
GPA_RE = re.compile(r"\bgpa\b[:\s]*(\d+(?:\.\d+)?)", re.IGNORECASE)

# Degree word followed by free-form "major, school, year" parts.
LOOSE_DEGREE_RE = re.compile(
    rf"^(?P<degree>{_DEGREE_WORD}(?:\s+degree)?)(?![A-Za-z])(?P<rest>.*)$",
    re.IGNORECASE,
)
_PART_SPLIT_RE = re.compile(r"\s*[,|]\s*|\s+[-–—]\s+")
_MONTH_RE = re.compile(r"^(?:jan|feb|mar|apr|may|jun|jul|aug|sep|sept|oct|nov|dec)[a-z]*\.?$", re.IGNORECASE)
_INSTITUTION_RE = re.compile(
    r"\b(?:university|college|institute|school|academy|polytechnic|conservatory)\b",
    re.IGNORECASE,
)
_ACRONYM_RE = re.compile(r"^[A-Z]{2,6}$")


@dataclass(slots=True)
class _Draft:
    degree: str = ""
    major: str = ""
    institution: str = ""
    year: str = ""
    gpa: str = ""

    def to_entry(self) -> EducationEntry:
        return EducationEntry(
            degree=self.degree,
            major=self.major,
            institution=self.institution,
            year=self.year,
            gpa=self.gpa,
        )


def _looks_like_institution(part: str) -> bool:
    return bool(_INSTITUTION_RE.search(part) or _ACRONYM_RE.match(part))


def _fields_from_parts(degree: str, rest: str) -> dict[str, str]:
    """Spread "Computer Science - MIT - 2020" style remainders over major, institution and year."""
    fields = {"degree": degree.strip(" ,-–"), "major": "", "institution": "", "year": ""}
    texts: list[str] = []
    for part in _PART_SPLIT_RE.split(rest.strip(" ,-–—|")):
        year = YEAR_RE.search(part)
        if year:
            fields["year"] = fields["year"] or year.group(0)
            part = YEAR_RE.sub("", part)
        part = re.sub(r"^(?:in|of)\s+", "", part.strip(" ()-–—"), flags=re.IGNORECASE)
        if not part or _MONTH_RE.match(part) or GPA_RE.search(part):
            continue
        texts.append(part)

    if len(texts) == 1:
        key = "institution" if _looks_like_institution(texts[0]) else "major"
        fields[key] = texts[0]
    elif texts:
        fields["major"], fields["institution"] = texts[0], texts[1]
    return fields


def match_degree_line(line: str) -> dict[str, str] | None:
    match = DEGREE_RE.match(line)
    if not match:
        loose = LOOSE_DEGREE_RE.match(line)
        return _fields_from_parts(loose.group("degree"), loose.group("rest")) if loose else None
    fields = {key: (value or "").strip(" ,-–") for key, value in match.groupdict().items()}
    # "B.S. in Computer Science, State University" carries the school after a comma.
    if not fields["institution"] and ", " in fields["major"]:
        major, institution = fields["major"].split(", ", 1)
        fields["major"], fields["institution"] = major.strip(), institution.strip()
    return fields


class EducationEntryParser:
    """Two-state parser; a blank line or a second degree line closes the open entry."""

    def __init__(self, *, max_entries: int = MAX_EDUCATION) -> None:
        self.state = ParserState.IDLE
        self._max_entries = max_entries
        self._draft: _Draft | None = None
        self._entries: list[EducationEntry] = []

    def feed(self, line: str) -> None:
        stripped = strip_bullet_prefix(normalize_line(line))
        if not stripped:
            if self.state is ParserState.OPEN_ENTRY:
                self._emit()
            return

        degree = match_degree_line(stripped)
        if degree is not None:
            if self.state is ParserState.OPEN_ENTRY and self._draft is not None and self._draft.degree:
                self._emit()
            if self.state is ParserState.IDLE:
                self._open()
            self._apply_degree(degree)
        elif self.state is ParserState.IDLE:
            self._open()

        draft = self._draft
        if draft is None:
            return
        year = YEAR_RE.search(stripped)
        if year and not draft.year:
            draft.year = year.group(0)
        gpa = GPA_RE.search(stripped)
        if gpa and not draft.gpa:
            draft.gpa = gpa.group(1)
        if (
            degree is None
            and not draft.institution
            and not year
            and not gpa
            and len(stripped) > MIN_INSTITUTION_LENGTH
        ):
            draft.institution = stripped

    def finish(self) -> list[EducationEntry]:
        if self.state is ParserState.OPEN_ENTRY:
            self._emit()
        return list(self._entries)

    def _open(self) -> None:
        self._draft = _Draft()
        self.state = ParserState.OPEN_ENTRY

    def _apply_degree(self, fields: dict[str, str]) -> None:
        draft = self._draft
        if draft is None:
            return
        draft.degree = fields["degree"]
        draft.major = draft.major or fields["major"]
        draft.institution = draft.institution or fields["institution"]
        draft.year = draft.year or fields["year"]

    def _emit(self) -> None:
        draft = self._draft
        if draft is not None and (draft.degree or draft.institution) and len(self._entries) < self._max_entries:
            self._entries.append(draft.to_entry())
        self._draft = None
        self.state = ParserState.IDLE


def extract_education(span: str | None) -> list[EducationEntry]:
    if not span:
        return []
    parser = EducationEntryParser()
    for line in span.splitlines():
        parser.feed(line)
    return parser.finish()
