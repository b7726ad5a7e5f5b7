from __future__ import annotations

import re
from dataclasses import dataclass

from resume_analyzer.normalize.utils import normalize_text

SECTION_NAMES = (
    "summary",
    "skills",
    "experience",
    "education",
    "projects",
    "certifications",
    "languages",
)

# Labels that introduce a field inside an entry rather than a new section.
INLINE_LABELS = frozenset(
    {
        "achievements",
        "backend",
        "cloud",
        "company",
        "databases",
        "demo",
        "duration",
        "environment",
        "frameworks",
        "frontend",
        "github",
        "gpa",
        "libraries",
        "link",
        "location",
        "platforms",
        "repo",
        "repository",
        "responsibilities",
        "role",
        "stack",
        "tech",
        "technologies",
        "tools",
        "url",
        "using",
    }
)

_CAPITALIZED_LABEL_RE = re.compile(r"^[ \t]*([A-Z][A-Za-z]+):")


@dataclass(frozen=True, slots=True)
class SectionRule:
    section: str
    pattern: re.Pattern[str]

    def find(self, text: str) -> re.Match[str] | None:
        return self.pattern.search(text)

    def matches_line(self, line: str) -> bool:
        return bool(self.pattern.match(line))


def heading_rule(section: str, keyword: str) -> SectionRule:
    """Anchor ``keyword`` at the start of a line, optionally followed by a colon."""
    words = r"[ \t]+".join(re.escape(word) for word in keyword.split())
    pattern = re.compile(rf"^[ \t]*{words}[ \t]*(?::|$)", re.IGNORECASE | re.MULTILINE)
    return SectionRule(section=section, pattern=pattern)


# Evaluated top to bottom; within a section the first rule that matches wins.
DEFAULT_SECTION_RULES: tuple[SectionRule, ...] = (
    heading_rule("summary", "professional summary"),
    heading_rule("summary", "career summary"),
    heading_rule("summary", "summary"),
    heading_rule("summary", "career objective"),
    heading_rule("summary", "objective"),
    heading_rule("summary", "profile"),
    heading_rule("summary", "about me"),
    heading_rule("skills", "technical skills"),
    heading_rule("skills", "core skills"),
    heading_rule("skills", "key skills"),
    heading_rule("skills", "skills"),
    heading_rule("experience", "professional experience"),
    heading_rule("experience", "work experience"),
    heading_rule("experience", "work history"),
    heading_rule("experience", "employment history"),
    heading_rule("experience", "experience"),
    heading_rule("experience", "employment"),
    heading_rule("education", "education"),
    heading_rule("education", "academic background"),
    heading_rule("projects", "personal projects"),
    heading_rule("projects", "projects"),
    heading_rule("projects", "project"),
    heading_rule("certifications", "licenses and certifications"),
    heading_rule("certifications", "certifications"),
    heading_rule("certifications", "certification"),
    heading_rule("certifications", "certificates"),
    heading_rule("languages", "languages"),
    heading_rule("languages", "language"),
)


class SectionSegmenter:
    def __init__(
        self,
        rules: tuple[SectionRule, ...] = DEFAULT_SECTION_RULES,
        inline_labels: frozenset[str] = INLINE_LABELS,
    ) -> None:
        self._rules = rules
        self._inline_labels = frozenset(label.lower() for label in inline_labels)

    def is_heading_like(self, line: str) -> bool:
        if any(rule.matches_line(line) for rule in self._rules):
            return True
        match = _CAPITALIZED_LABEL_RE.match(line)
        return bool(match and match.group(1).lower() not in self._inline_labels)

    def is_standalone_heading(self, line: str) -> bool:
        """A section anchor with nothing after it on the same line."""
        for rule in self._rules:
            match = rule.pattern.match(line)
            if match and not line[match.end() :].strip():
                return True
        return False

    def segment(self, text: str) -> dict[str, str | None]:
        normalized = normalize_text(text)
        spans: dict[str, str | None] = {name: None for name in SECTION_NAMES}
        for rule in self._rules:
            if spans.get(rule.section) is not None:
                continue
            match = rule.find(normalized)
            if match is None:
                continue
            spans[rule.section] = self._capture(normalized, match.end())
        return spans

    def _capture(self, text: str, anchor_end: int) -> str | None:
        line_end = text.find("\n", anchor_end)
        if line_end == -1:
            line_end = len(text)
        lines: list[str] = []
        inline = text[anchor_end:line_end].strip()
        if inline:
            lines.append(inline)
        for line in text[line_end + 1 :].split("\n"):
            if self.is_heading_like(line):
                break
            lines.append(line)
        span = "\n".join(lines).strip()
        return span or None
