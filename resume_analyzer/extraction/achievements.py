from __future__ import annotations

import re

from resume_analyzer.normalize.utils import non_blank_lines, split_sentences, strip_bullet_prefix
from resume_analyzer.schemas.resume import MAX_ACHIEVEMENTS, dedupe_casefold

ACCOMPLISHMENT_RE = re.compile(
    r"\b(?:achieved|accomplished|delivered|increased|improved|reduced|built|led|managed)\b[^.]*?\d",
    re.IGNORECASE,
)
AWARD_RE = re.compile(r"^(?:awards?|recognition|honou?rs?|achievements?)\s*:\s*(?P<value>.+)$", re.IGNORECASE)


def extract_achievements(text: str) -> list[str]:
    """Quantified accomplishment sentences and labeled award lines from the whole document."""
    found: list[str] = []
    for line in non_blank_lines(text):
        line = strip_bullet_prefix(line)
        award = AWARD_RE.match(line)
        if award:
            found.append(award.group("value").strip())
            continue
        found.extend(sentence for sentence in split_sentences(line) if ACCOMPLISHMENT_RE.search(sentence))
    return dedupe_casefold(found)[:MAX_ACHIEVEMENTS]
