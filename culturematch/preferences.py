"""Parse user preference input into per-category weights (0–3).

Preferences arrive in several shapes:

* flat labels: ``{"flexibility": "very-important"}``
* slider values: ``{"flexibility": 3}``
* nested sub-preferences from the UI:
  ``{"flexibility": {"workFromHome": "important", "flexibleHours": 1}}``,
  which collapse to the highest weight among the fields.

Anything unrecognized counts as ``not-important`` instead of being rejected.
"""
from __future__ import annotations

import json
import re
from typing import Any, Mapping

from culturematch.log import get_logger
from culturematch.taxonomy import (
    CATEGORIES,
    FLEXIBILITY,
    GROWTH,
    INCLUSION,
    MANAGEMENT,
    WORK_ENVIRONMENT,
)

log = get_logger(__name__)

MAX_WEIGHT = 3

IMPORTANCE_LEVELS: dict[str, int] = {
    "not-important": 0,
    "somewhat-important": 1,
    "slightly-important": 1,
    "important": 2,
    "very-important": 3,
}

# Display labels indexed by weight, as shown on the sliders.
IMPORTANCE_LABELS: list[str] = ["Not Important", "Somewhat Important", "Important", "Very Important"]

# Sub-preferences offered by the UI for each category.
PREFERENCE_FIELDS: dict[str, dict[str, str]] = {
    FLEXIBILITY: {
        "workFromHome": "Work From Home",
        "flexibleHours": "Flexible Hours",
        "remoteLocation": "Remote Location",
    },
    MANAGEMENT: {
        "structure": "Structure",
        "decisionMaking": "Decision Making",
        "autonomy": "Autonomy",
    },
    INCLUSION: {
        "womenLeadership": "Women in Leadership",
        "diversityRepresentation": "Diversity Representation",
        "inclusivePolicies": "Inclusive Policies",
    },
    GROWTH: {
        "learning": "Learning & Training",
        "careerProgression": "Career Progression",
    },
    WORK_ENVIRONMENT: {
        "collaboration": "Collaboration",
        "wellbeing": "Wellbeing",
    },
}

CATEGORY_TITLES: dict[str, str] = {
    FLEXIBILITY: "Flexibility",
    MANAGEMENT: "Management Style",
    INCLUSION: "Inclusion & Diversity",
    GROWTH: "Growth",
    WORK_ENVIRONMENT: "Work Environment",
}

_SEPARATORS_RE = re.compile(r"[\s_]+")


def importance_weight(value: Any) -> int:
    """Map one importance value (label, int or numeric string) to 0–3."""
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, (int, float)):
        if isinstance(value, float) and not value.is_integer():
            log.debug("Fractional importance %r treated as not-important", value)
            return 0
        if 0 <= value <= MAX_WEIGHT:
            return int(value)
        log.debug("Out-of-range importance %r treated as not-important", value)
        return 0
    if isinstance(value, str):
        key = _SEPARATORS_RE.sub("-", value.strip().lower())
        if key.isdecimal():
            return importance_weight(int(key))
        if key in IMPORTANCE_LEVELS:
            return IMPORTANCE_LEVELS[key]
    log.debug("Unknown importance %r treated as not-important", value)
    return 0


def label_for_weight(weight: int) -> str:
    """Slider value → wire label, e.g. ``3`` → ``"very-important"``."""
    weight = min(max(int(weight), 0), MAX_WEIGHT)
    return IMPORTANCE_LABELS[weight].lower().replace(" ", "-")


def category_weights(preferences: Any) -> dict[str, int]:
    """Weight for every known category; never raises."""
    weights = {c: 0 for c in CATEGORIES}
    if preferences is None:
        return weights
    if not isinstance(preferences, Mapping):
        log.debug("Ignoring non-mapping preferences of type %s", type(preferences).__name__)
        return weights

    for category in CATEGORIES:
        value = preferences.get(category)
        if isinstance(value, Mapping):
            weights[category] = max((importance_weight(v) for v in value.values()), default=0)
        else:
            weights[category] = importance_weight(value)
    return weights


def from_query_args(args: Mapping[str, str]) -> dict[str, Any]:
    """Build a preference mapping from GET parameters.

    Accepts a JSON object in ``preferences=`` and/or one parameter per
    category; per-category parameters win.
    """
    prefs: dict[str, Any] = {}
    raw = args.get("preferences")
    if raw:
        try:
            parsed = json.loads(raw)
        except ValueError:
            log.debug("Ignoring malformed preferences parameter: %.80s", raw)
            parsed = None
        if isinstance(parsed, dict):
            prefs.update(parsed)
    for category in CATEGORIES:
        if args.get(category):
            prefs[category] = args[category]
    return prefs


def to_wire_format(sliders: Mapping[str, Mapping[str, int]]) -> dict[str, dict[str, str]]:
    """UI slider values → nested label mapping accepted by the API."""
    return {
        category: {name: label_for_weight(value) for name, value in fields.items()}
        for category, fields in sliders.items()
    }


def empty_sliders() -> dict[str, dict[str, int]]:
    return {category: {name: 0 for name in fields} for category, fields in PREFERENCE_FIELDS.items()}
