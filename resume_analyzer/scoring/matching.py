from __future__ import annotations

from resume_analyzer.normalize.utils import contains_term

from .weights import points


def skill_found(term: str, skills: list[str], raw_text: str, *, short_term_max_len: int | None = None) -> bool:
    """True when an extracted skill or the raw text contains ``term``, case-insensitively.

    Plain substring matching, so "React" is found in "ReactJS". Very short
    terms ("R", "Go") only match on token boundaries, otherwise they would hit
    inside ordinary words.
    """
    needle = term.strip()
    if not needle:
        return False
    limit = short_term_max_len if short_term_max_len is not None else points("matching.short_term_max_len", 2, max_value=10)
    if len(needle) <= limit:
        return any(contains_term(skill, needle) for skill in skills) or contains_term(raw_text, needle)
    lowered = needle.casefold()
    return any(lowered in skill.casefold() for skill in skills) or lowered in raw_text.casefold()


def partition_terms(terms: tuple[str, ...] | list[str], skills: list[str], raw_text: str) -> tuple[list[str], list[str]]:
    found: list[str] = []
    missing: list[str] = []
    for term in terms:
        (found if skill_found(term, skills, raw_text) else missing).append(term)
    return found, missing


def key_terms_in(text: str, key_terms: tuple[str, ...]) -> list[str]:
    return [term for term in key_terms if contains_term(text, term)]
