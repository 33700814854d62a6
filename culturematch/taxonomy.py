"""Culture tag vocabulary used by the scorer and the analyzers."""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable

FLEXIBILITY = "flexibility"
MANAGEMENT = "management"
INCLUSION = "inclusion"
GROWTH = "growth"
WORK_ENVIRONMENT = "workEnvironment"

CATEGORIES: tuple[str, ...] = (FLEXIBILITY, MANAGEMENT, INCLUSION, GROWTH, WORK_ENVIRONMENT)

# Tag → category it counts towards when the user cares about that category.
POSITIVE_TAGS: dict[str, str] = {
    # flexibility
    "work-from-home-friendly": FLEXIBILITY,
    "remote-friendly": FLEXIBILITY,
    "remote-first": FLEXIBILITY,
    "hybrid": FLEXIBILITY,
    "flexible-hours": FLEXIBILITY,
    "work-life-balance": FLEXIBILITY,
    "flexibility-carers": FLEXIBILITY,
    "paternity-leave": FLEXIBILITY,
    # management
    "flat-hierarchy": MANAGEMENT,
    "employee-empowerment": MANAGEMENT,
    "transparent-communication": MANAGEMENT,
    "innovation-voice": MANAGEMENT,
    "autonomy": MANAGEMENT,
    # inclusion
    "diverse-workforce": INCLUSION,
    "inclusive-environment": INCLUSION,
    "inclusive": INCLUSION,
    "dei": INCLUSION,
    "equal-opportunity": INCLUSION,
    "women-leadership": INCLUSION,
    "lgbtqa": INCLUSION,
    "lgbtqa-plus": INCLUSION,
    "ramadan-friendly": INCLUSION,
    "diwali-friendly": INCLUSION,
    "onam-friendly": INCLUSION,
    "eid-friendly": INCLUSION,
    "christmas-friendly": INCLUSION,
    "communities-respect": INCLUSION,
    "climate-change": INCLUSION,
    # growth
    "professional-growth": GROWTH,
    "learning-culture": GROWTH,
    "mentorship": GROWTH,
    "career-progression": GROWTH,
    # work environment
    "collaborative": WORK_ENVIRONMENT,
    "supportive-culture": WORK_ENVIRONMENT,
    "wellbeing": WORK_ENVIRONMENT,
    "psychological-safety": WORK_ENVIRONMENT,
}

GENERAL_POSITIVE_TAGS: frozenset[str] = frozenset({
    "integrity",
    "teamwork",
    "communication",
    "customer-centric",
    "purpose",
    "innovation",
})
GENERAL_POSITIVE_BONUS = 0.5

# Weight a category needs before a negative tag costs points.
PENALTY_THRESHOLD = 1

REASON_TEMPLATES: dict[str, str] = {
    FLEXIBILITY: "Strong focus on {label} aligns with your flexibility preference.",
    MANAGEMENT: "Emphasis on {label} aligns with your management preference.",
    INCLUSION: "Commitment to {label} aligns with your inclusion preference.",
    GROWTH: "Investment in {label} aligns with your growth preference.",
    WORK_ENVIRONMENT: "A {label} workplace aligns with your work environment preference.",
}


@dataclass(frozen=True)
class NegativeRule:
    tags: frozenset[str]
    categories: tuple[str, ...]
    multiplier: int
    concern: str
    note: str


NEGATIVE_RULES: tuple[NegativeRule, ...] = (
    NegativeRule(
        tags=frozenset({"micro-managed", "long-hours", "top-down"}),
        categories=(MANAGEMENT, FLEXIBILITY),
        multiplier=1,
        concern="Concern: {label} which conflicts with your preferences.",
        note="Note: {label} may be a factor to consider.",
    ),
    NegativeRule(
        tags=frozenset({"racial-bias", "ethnic-bias", "religious-bias", "caste-bias"}),
        categories=(INCLUSION,),
        multiplier=2,
        concern=(
            "Critical concern: Presence of {label} which heavily conflicts "
            "with your inclusion preference."
        ),
        note="Note: Potential {label} issues were identified.",
    ),
    NegativeRule(
        tags=frozenset({"limited-growth", "no-training"}),
        categories=(GROWTH,),
        multiplier=1,
        concern="Concern: {label} which conflicts with your growth preference.",
        note="Note: {label} may be a factor to consider.",
    ),
    NegativeRule(
        tags=frozenset({"toxic-culture", "high-turnover", "burnout"}),
        categories=(WORK_ENVIRONMENT,),
        multiplier=1,
        concern="Concern: {label} which conflicts with your work environment preference.",
        note="Note: {label} may be a factor to consider.",
    ),
)

_NEGATIVE_INDEX: dict[str, NegativeRule] = {
    tag: rule for rule in NEGATIVE_RULES for tag in rule.tags
}

_SEPARATORS_RE = re.compile(r"[\s_]+")


def normalize_tag(tag: object) -> str:
    """``"Work Life_Balance "`` → ``"work-life-balance"``; non-strings → ``""``."""
    if not isinstance(tag, str):
        return ""
    t = _SEPARATORS_RE.sub("-", tag.strip().lower())
    return re.sub(r"-{2,}", "-", t).strip("-")


def normalize_tags(tags: Iterable[object] | None) -> list[str]:
    """Normalized, de-duplicated tags in first-seen order."""
    out = [normalize_tag(t) for t in (tags or [])]
    return list(dict.fromkeys(t for t in out if t))


def tag_label(tag: str) -> str:
    return tag.replace("-", " ")


def positive_category(tag: str) -> str | None:
    return POSITIVE_TAGS.get(tag)


def negative_rule(tag: str) -> NegativeRule | None:
    return _NEGATIVE_INDEX.get(tag)
