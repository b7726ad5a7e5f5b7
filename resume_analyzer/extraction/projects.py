from __future__ import annotations

import re

from resume_analyzer.normalize.utils import non_blank_lines, split_blocks, strip_bullet_prefix
from resume_analyzer.schemas.resume import MAX_PROJECT_TECHNOLOGIES, MAX_PROJECTS, ProjectEntry

URL_RE = re.compile(r"https?://[^\s)>\]]+", re.IGNORECASE)
REPOSITORY_RE = re.compile(
    r"(?:https?://)?(?:www\.)?(?:github\.com|gitlab\.com|bitbucket\.org)/[^\s)>\]]+",
    re.IGNORECASE,
)
TECHNOLOGIES_RE = re.compile(
    r"\b(?:technologies|tech stack|built with|using)\b\s*:?\s*(?P<items>.+?)(?:\.(?:\s|$)|$)",
    re.IGNORECASE,
)
_TECH_SPLIT_RE = re.compile(r"[,;|/]|\s+and\s+")


def _clean_url(value: str) -> str:
    return value.rstrip(".,;:")


def extract_technologies(text: str) -> list[str]:
    match = TECHNOLOGIES_RE.search(text)
    if not match:
        return []
    items = [item.strip(" .") for item in _TECH_SPLIT_RE.split(match.group("items"))]
    return [item for item in items if len(item) > 1][:MAX_PROJECT_TECHNOLOGIES]


def parse_project_block(block: str) -> ProjectEntry | None:
    lines = non_blank_lines(block)
    if not lines:
        return None
    title = strip_bullet_prefix(lines[0])
    if not title:
        return None
    body = " ".join(strip_bullet_prefix(line) for line in lines[1:])

    repository = REPOSITORY_RE.search(block)
    repository_url = _clean_url(repository.group(0)) if repository else ""
    url = ""
    for candidate in URL_RE.findall(block):
        if not REPOSITORY_RE.match(candidate):
            url = _clean_url(candidate)
            break

    return ProjectEntry(
        title=title,
        description=body,
        technologies=extract_technologies(body),
        url=url,
        repository_url=repository_url,
    )


def extract_projects(span: str | None) -> list[ProjectEntry]:
    """One project per blank-line separated block: title line, then description."""
    if not span:
        return []
    projects: list[ProjectEntry] = []
    for block in split_blocks(span):
        project = parse_project_block(block)
        if project is not None:
            projects.append(project)
        if len(projects) >= MAX_PROJECTS:
            break
    return projects
