from __future__ import annotations

import re

from resume_analyzer.normalize.utils import contains_term, non_blank_lines, strip_bullet_prefix
from resume_analyzer.reference import ReferenceData
from resume_analyzer.schemas.resume import MAX_CERTIFICATIONS, CertificationEntry

MIN_CERTIFICATION_LENGTH = 5
YEAR_RE = re.compile(r"\b(?:19|20)\d{2}\b")


def certification_issuer(line: str, reference: ReferenceData) -> str:
    for issuer in reference.certification_issuers:
        if contains_term(line, issuer):
            return issuer
    return ""


def extract_certifications(span: str | None, reference: ReferenceData) -> list[CertificationEntry]:
    if not span:
        return []
    certifications: list[CertificationEntry] = []
    for line in non_blank_lines(span):
        line = strip_bullet_prefix(line)
        if len(line) <= MIN_CERTIFICATION_LENGTH:
            continue
        year = YEAR_RE.search(line)
        name = YEAR_RE.sub("", line, count=1)
        name = re.sub(r"\(\s*\)", "", name).strip(" ,-–|()")
        certifications.append(
            CertificationEntry(
                name=name,
                year=year.group(0) if year else "",
                issuer=certification_issuer(line, reference),
            )
        )
        if len(certifications) >= MAX_CERTIFICATIONS:
            break
    return certifications
