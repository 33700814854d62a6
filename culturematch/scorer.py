"""Score how well a company's culture tags match a user's preferences."""
from __future__ import annotations

import math
from typing import Any, Iterable

from culturematch.log import get_logger
from culturematch.models import MatchResult
from culturematch.preferences import category_weights
from culturematch.taxonomy import (
    GENERAL_POSITIVE_BONUS,
    GENERAL_POSITIVE_TAGS,
    PENALTY_THRESHOLD,
    REASON_TEMPLATES,
    negative_rule,
    normalize_tags,
    positive_category,
    tag_label,
)

log = get_logger(__name__)

ALIGNED_FALLBACK = "The company generally aligns with your selected preferences."
NO_ALIGNMENT_FALLBACK = "No significant cultural alignment found with your preferences."


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def compute_match(company_tags: Iterable[object] | None, preferences: Any) -> MatchResult:
    """Weighted culture match as a 0–100 percentage plus the reasons behind it.

    Positive tags add the weight of the category they belong to; a handful of
    general virtues add a flat bonus; negative tags subtract a weight-scaled
    penalty when the user rated an affected category ``important`` or higher,
    and otherwise only leave a note. The raw score is normalized by the sum of
    the user's weights.
    """
    tags = normalize_tags(company_tags)
    weights = category_weights(preferences)
    max_possible = sum(w for w in weights.values() if w > 0)

    score = 0.0
    reasons: list[str] = []

    # --- Positive signals ---
    for tag in tags:
        label = tag_label(tag)
        category = positive_category(tag)
        if category is not None:
            weight = weights[category]
            if weight > 0:
                score += weight
                reasons.append(REASON_TEMPLATES[category].format(label=label))
        elif tag in GENERAL_POSITIVE_TAGS and max_possible > 0:
            score += GENERAL_POSITIVE_BONUS
            reasons.append(f"General positive attribute: {label}.")

    # --- Negative signals ---
    for tag in tags:
        rule = negative_rule(tag)
        if rule is None:
            continue
        label = tag_label(tag)
        if any(weights[c] > PENALTY_THRESHOLD for c in rule.categories):
            score -= rule.multiplier * sum(weights[c] for c in rule.categories)
            reasons.append(rule.concern.format(label=label))
        else:
            reasons.append(rule.note.format(label=label))

    score = max(0.0, score)
    percentage = _round_half_up(score / max_possible * 100) if max_possible > 0 else 0
    percentage = min(max(percentage, 0), 100)

    if not reasons:
        reasons.append(ALIGNED_FALLBACK if percentage > 0 else NO_ALIGNMENT_FALLBACK)

    log.debug(
        "Match: %d%% from %d tag(s), raw=%.1f, max=%d", percentage, len(tags), score, max_possible,
    )
    return MatchResult(score=percentage, reasons=reasons)
