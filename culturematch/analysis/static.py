"""Deterministic culture analysis from the domain string alone.

The domain is lower-cased and checked for industry and culture words; each
hit contributes pre-written tags and one summary sentence. The result depends
only on the domain (and an optional seed), never on call order.
"""
from __future__ import annotations

import random
import re
from dataclasses import dataclass

from culturematch.analysis.base import CultureAnalyzer
from culturematch.domain import clean_domain, is_linkedin_company
from culturematch.log import get_logger
from culturematch.models import CompanySummary

log = get_logger(__name__)


@dataclass(frozen=True)
class Signal:
    keywords: tuple[str, ...]
    tags: tuple[str, ...]
    sentence: str


INDUSTRY_SIGNALS: tuple[Signal, ...] = (
    Signal(
        ("tech", "soft", "cloud", "data", "dev", "digital", "cyber"),
        ("innovation-voice", "flexible-hours", "learning-culture"),
        "Technology companies typically emphasize innovation, continuous learning and flexible working.",
    ),
    Signal(
        ("health", "care", "medic", "pharma", "clinic", "bio"),
        ("communities-respect", "teamwork", "long-hours"),
        "Healthcare organizations tend to be mission-driven and team-oriented, with demanding schedules.",
    ),
    Signal(
        ("bank", "finance", "capital", "invest", "pay", "fund", "insur"),
        ("top-down", "professional-growth", "integrity"),
        "Financial services firms often have structured hierarchies and clear career ladders.",
    ),
    Signal(
        ("edu", "learn", "school", "academy", "university", "college"),
        ("learning-culture", "inclusive-environment", "work-life-balance"),
        "Education organizations usually value learning, inclusion and a sustainable pace.",
    ),
    Signal(
        ("green", "eco", "solar", "energy", "climate", "sustain"),
        ("climate-change", "communities-respect", "purpose"),
        "Energy and sustainability companies commonly highlight climate commitments and purpose.",
    ),
    Signal(
        ("consult", "advis", "agency", "partners"),
        ("long-hours", "professional-growth", "customer-centric"),
        "Consultancies offer fast professional growth, often alongside long client-driven hours.",
    ),
    Signal(
        ("retail", "shop", "store", "market"),
        ("customer-centric", "teamwork"),
        "Retail businesses are customer-centric and rely on close-knit teams.",
    ),
    Signal(
        (".gov", "gov."),
        ("equal-opportunity", "top-down", "work-life-balance"),
        "Public-sector employers usually offer equal-opportunity hiring, formal structures and stable hours.",
    ),
    Signal(
        (".org", "foundation", "charity"),
        ("communities-respect", "inclusive-environment", "purpose"),
        "Non-profit organizations tend to be purpose-driven and community-focused.",
    ),
)

CULTURE_SIGNALS: tuple[Signal, ...] = (
    Signal(
        ("remote", "anywhere", "distributed"),
        ("remote-friendly", "work-from-home-friendly"),
        "The name suggests a remote-friendly, distributed way of working.",
    ),
    Signal(
        ("flex",),
        ("flexible-hours",),
        "Flexibility appears to be part of the brand.",
    ),
    Signal(
        ("divers", "inclus", "equal", "unity"),
        ("diverse-workforce", "inclusive-environment"),
        "The company signals a commitment to diversity and inclusion.",
    ),
    Signal(
        ("women", "femme"),
        ("women-leadership",),
        "Women's leadership looks central to the company's identity.",
    ),
    Signal(
        ("startup", "venture", "labs", ".io"),
        ("flat-hierarchy", "employee-empowerment", "long-hours"),
        "Startup-style teams usually mean flat hierarchies and high ownership, sometimes with long hours.",
    ),
    Signal(
        ("global", "international", "world"),
        ("diverse-workforce", "communication"),
        "A global footprint usually brings a diverse, multicultural workforce.",
    ),
)

LINKEDIN_SUMMARY = CompanySummary(
    summary=(
        "Based on recent LinkedIn content, the company emphasizes DEI, hybrid work, "
        "and purpose-driven innovation."
    ),
    tags=["DEI", "hybrid", "purpose", "inclusive"],
    source="linkedin",
)

DEFAULT_TAGS: tuple[str, ...] = ("teamwork",)

# Extra tags a seeded analyzer may add for variety.
VARIATION_TAGS: tuple[str, ...] = (
    "communication",
    "transparent-communication",
    "collaborative",
    "mentorship",
    "integrity",
    "customer-centric",
)

# Phrases in free text (search snippets, LLM replies) → tags.
TEXT_PATTERNS: tuple[tuple[re.Pattern[str], str], ...] = tuple(
    (re.compile(p, re.IGNORECASE), tag)
    for p, tag in (
        (r"work[\s-]*life[\s-]*balance", "work-life-balance"),
        (r"\bremote\b|work from home|\bwfh\b", "remote-friendly"),
        (r"\bhybrid\b", "hybrid"),
        (r"flexib(le|ility)", "flexible-hours"),
        (r"micro[\s-]*manag", "micro-managed"),
        (r"long hours|overtime|\b(60|70|80)[\s-]*hour", "long-hours"),
        (r"top[\s-]*down|bureaucra|rigid hierarch", "top-down"),
        (r"flat (structure|hierarchy|organi[sz]ation)", "flat-hierarchy"),
        (r"transparen", "transparent-communication"),
        (r"autonom|empower", "employee-empowerment"),
        (r"divers", "diverse-workforce"),
        (r"inclusi", "inclusive-environment"),
        (r"equal opportunit", "equal-opportunity"),
        (r"women in leadership|female leader", "women-leadership"),
        (r"lgbt", "lgbtqa"),
        (r"career (growth|development|progression)|promotion", "professional-growth"),
        (r"learning|training budget|upskill", "learning-culture"),
        (r"mentor", "mentorship"),
        (r"no (career )?growth|dead[\s-]*end|stagnant", "limited-growth"),
        (r"toxic", "toxic-culture"),
        (r"high turnover|people (keep )?leaving|attrition", "high-turnover"),
        (r"burn[\s-]*out|burnt out", "burnout"),
        (r"racis|racial (bias|discrimination)", "racial-bias"),
        (r"religious discrimination", "religious-bias"),
        (r"supportive|great (team|colleagues)", "supportive-culture"),
        (r"collaborat", "collaborative"),
        (r"teamwork|team player", "teamwork"),
        (r"integrity", "integrity"),
        (r"mission[\s-]*driven|purpose", "purpose"),
        (r"innovat", "innovation"),
        (r"climate|sustainab", "climate-change"),
    )
)


def tags_from_text(text: str) -> list[str]:
    """Tags whose phrases occur in *text*, in pattern order."""
    if not text:
        return []
    return list(dict.fromkeys(tag for pattern, tag in TEXT_PATTERNS if pattern.search(text)))


class StaticAnalyzer(CultureAnalyzer):
    name = "static"

    def __init__(self, seed: int | None = None) -> None:
        self.seed = seed

    def analyze(self, domain: str) -> CompanySummary:
        d = clean_domain(domain)
        if is_linkedin_company(d):
            return CompanySummary(LINKEDIN_SUMMARY.summary, list(LINKEDIN_SUMMARY.tags), "linkedin")

        tags: list[str] = []
        sentences: list[str] = []
        for signal in INDUSTRY_SIGNALS + CULTURE_SIGNALS:
            if any(k in d for k in signal.keywords):
                tags.extend(signal.tags)
                sentences.append(signal.sentence)

        if not sentences:
            sentences.append(
                f"No strong culture signals were found for {d or 'this company'}; "
                "the profile reflects common workplace patterns."
            )
            tags.extend(DEFAULT_TAGS)

        tags = list(dict.fromkeys(tags))
        if self.seed is not None:
            rng = random.Random(f"{self.seed}:{d}")
            extra = rng.choice(VARIATION_TAGS)
            if extra not in tags:
                tags.append(extra)

        log.debug("Static analysis for %s → %s", d, tags)
        return CompanySummary(" ".join(sentences), tags, self.name)
