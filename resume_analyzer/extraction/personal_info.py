from __future__ import annotations

import re

from resume_analyzer.schemas.resume import PersonalInfo

EMAIL_RE = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")
PHONE_RE = re.compile(r"(?<!\w)(?:\+?\d{1,3}[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}(?!\d)")
LINKEDIN_RE = re.compile(r"(?:linkedin\.com/in/|li\.com/)[A-Za-z0-9-]+", re.IGNORECASE)
GITHUB_RE = re.compile(r"github\.com/[A-Za-z0-9-]+", re.IGNORECASE)

_NAME_WORD = r"[A-Z][a-z]+(?:[-'][A-Z]?[a-z]+)?"
_FIRST_LINE_NAME_RE = re.compile(rf"^({_NAME_WORD}(?:[ \t]+{_NAME_WORD}){{1,2}})(?:[ \t]*$|[ \t]*[,|]|\s{{2,}})")
_LABELED_NAME_RE = re.compile(rf"(?i:\bname)[ \t]*:[ \t]*({_NAME_WORD}(?:[ \t]+{_NAME_WORD}){{1,2}})")

_LABELED_LOCATION_RE = re.compile(r"(?:^|\n)[ \t]*(?:location|address|based in)[ \t]*:?[ \t]*([^\n]+)", re.IGNORECASE)
_CITY_STATE_RE = re.compile(r"\b([A-Z][a-z]+(?:[ \t][A-Z][a-z]+)?,[ \t]*[A-Z]{2}(?:[ \t]+\d{5})?)\b")
_WEBSITE_RE = re.compile(r"\b(?:website|portfolio)[ \t]*:[ \t]*(\S+)", re.IGNORECASE)


def _first(pattern: re.Pattern[str], text: str) -> str:
    match = pattern.search(text)
    return match.group(0).strip() if match else ""


def extract_name(text: str) -> str:
    for line in text.splitlines():
        if not line.strip():
            continue
        match = _FIRST_LINE_NAME_RE.match(line.strip())
        if match:
            return match.group(1)
        break

    labeled = _LABELED_NAME_RE.search(text)
    return labeled.group(1).strip() if labeled else ""


def extract_location(text: str) -> str:
    labeled = _LABELED_LOCATION_RE.search(text)
    if labeled:
        value = labeled.group(1).strip(" \t:|")
        if value:
            return value
    city_state = _CITY_STATE_RE.search(text)
    return city_state.group(1).strip() if city_state else ""


def extract_website(text: str) -> str:
    match = _WEBSITE_RE.search(text)
    return match.group(1).strip() if match else ""


def extract_personal_info(text: str) -> PersonalInfo:
    """Contact fields from anywhere in the document; absent values are empty strings."""
    source = text or ""
    return PersonalInfo(
        name=extract_name(source),
        email=_first(EMAIL_RE, source),
        phone=_first(PHONE_RE, source),
        linkedin=_first(LINKEDIN_RE, source),
        github=_first(GITHUB_RE, source),
        location=extract_location(source),
        website=extract_website(source),
    )
