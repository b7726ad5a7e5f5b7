from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from resume_analyzer.reference import RoleProfile
from resume_analyzer.schemas.resume import ResumeProfile

from .weights import points


@dataclass(frozen=True)
class ImprovementContext:
    profile: ResumeProfile
    role_profile: RoleProfile
    missing_required: list[str]


@dataclass(frozen=True)
class ImprovementRule:
    name: str
    check: Callable[[ImprovementContext], str | None]


def _no_experience(ctx: ImprovementContext) -> str | None:
    if ctx.profile.experience:
        return None
    return "Add at least one work experience entry with your role, company and dates."


def _no_projects(ctx: ImprovementContext) -> str | None:
    if ctx.profile.projects:
        return None
    return f"Add a projects section that shows hands-on work relevant to the {ctx.role_profile.label} role."


def _weak_summary(ctx: ImprovementContext) -> str | None:
    min_chars = points("improvements.weak_summary_min_chars", 50, max_value=1000)
    if ctx.profile.summary_source != "default" and len(ctx.profile.summary) >= min_chars:
        return None
    return "Write a professional summary of two or three sentences that states your focus and strengths."


def _missing_required(ctx: ImprovementContext) -> str | None:
    if not ctx.missing_required:
        return None
    named = ctx.missing_required[: points("improvements.missing_required_named", 3, max_value=20)]
    return f"Add or highlight these required skills for {ctx.role_profile.label}: {', '.join(named)}."


def _no_profile_links(ctx: ImprovementContext) -> str | None:
    if ctx.profile.has_profile_links:
        return None
    return "Add links to your LinkedIn profile and GitHub account."


def _missing_contact(ctx: ImprovementContext) -> str | None:
    info = ctx.profile.personal_info
    if info.email and info.phone:
        return None
    return "Include both an email address and a phone number in your contact details."


def _no_quantified_achievements(ctx: ImprovementContext) -> str | None:
    if ctx.profile.achievements or any(entry.achievements for entry in ctx.profile.experience):
        return None
    return "Quantify your impact with numbers such as percentages, revenue or users served."


def _length_out_of_range(ctx: ImprovementContext) -> str | None:
    low = points("improvements.length_words.min", 300, max_value=10000)
    high = points("improvements.length_words.max", 800, max_value=10000)
    words = ctx.profile.metadata.word_count
    if low <= words <= high:
        return None
    return f"Adjust the resume length to between {low} and {high} words (currently {words})."


# Fixed priority order; the most impactful suggestion comes first.
DEFAULT_IMPROVEMENT_RULES: tuple[ImprovementRule, ...] = (
    ImprovementRule("no_experience", _no_experience),
    ImprovementRule("no_projects", _no_projects),
    ImprovementRule("weak_summary", _weak_summary),
    ImprovementRule("missing_required_skills", _missing_required),
    ImprovementRule("no_profile_links", _no_profile_links),
    ImprovementRule("missing_contact", _missing_contact),
    ImprovementRule("no_quantified_achievements", _no_quantified_achievements),
    ImprovementRule("length_out_of_range", _length_out_of_range),
)


def generate_improvements(
    ctx: ImprovementContext,
    rules: tuple[ImprovementRule, ...] = DEFAULT_IMPROVEMENT_RULES,
    *,
    max_items: int | None = None,
) -> list[str]:
    limit = max_items if max_items is not None else points("improvements.max_items", 5, max_value=20)
    output: list[str] = []
    for rule in rules:
        message = rule.check(ctx)
        if message:
            output.append(message)
        if len(output) >= limit:
            break
    return output
