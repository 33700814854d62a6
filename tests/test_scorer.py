from __future__ import annotations

import itertools

import pytest

from culturematch.scorer import NO_ALIGNMENT_FALLBACK, compute_match

NOTHING = {
    "flexibility": "not-important",
    "management": "not-important",
    "inclusion": "not-important",
}


def prefs(**levels: str) -> dict[str, str]:
    return {**NOTHING, **levels}


def test_single_flexibility_tag_scores_full_match():
    result = compute_match(["remote-friendly"], prefs(flexibility="very-important"))
    assert result.score == 100
    assert any("flexibility" in r for r in result.reasons)


def test_nothing_important_scores_zero():
    result = compute_match(["remote-friendly", "flat-hierarchy", "teamwork"], NOTHING)
    assert result.score == 0
    assert result.reasons == [NO_ALIGNMENT_FALLBACK]


def test_all_weights_zero_never_score_for_any_tags():
    tags = ["remote-friendly", "diverse-workforce", "teamwork", "micro-managed", "racial-bias"]
    assert compute_match(tags, NOTHING).score == 0
    assert compute_match(tags, {}).score == 0


def test_bias_tag_lowers_score_when_inclusion_matters():
    p = prefs(inclusion="very-important")
    clean = compute_match(["diverse-workforce"], p)
    biased = compute_match(["diverse-workforce", "racial-bias"], p)
    assert clean.score == 100
    assert biased.score < clean.score
    assert any(r.startswith("Critical concern: Presence of racial bias") for r in biased.reasons)


def test_bias_tag_is_only_a_note_below_threshold():
    result = compute_match(["diverse-workforce", "racial-bias"], prefs(inclusion="somewhat-important"))
    assert result.score == 100
    assert "Note: Potential racial bias issues were identified." in result.reasons


def test_management_penalty_scales_with_both_weights():
    p = prefs(management="very-important", flexibility="important")
    tags = ["flat-hierarchy", "remote-friendly", "work-life-balance", "micro-managed"]
    # 3 + 2 + 2 - (3 + 2) = 2 out of 5
    result = compute_match(tags, p)
    assert result.score == 40
    assert "Concern: micro managed which conflicts with your preferences." in result.reasons


def test_negative_without_weight_leaves_note_only():
    result = compute_match(["long-hours"], prefs(inclusion="important"))
    assert result.score == 0
    assert result.reasons == ["Note: long hours may be a factor to consider."]


def test_general_positive_bonus_needs_some_preference():
    assert compute_match(["teamwork"], prefs(flexibility="important")).score == 25
    result = compute_match(["teamwork"], NOTHING)
    assert result.score == 0
    assert result.reasons == [NO_ALIGNMENT_FALLBACK]


def test_rounds_half_up():
    # 0.5 / 4 = 12.5%
    result = compute_match(["integrity"], prefs(flexibility="very-important", management="somewhat-important"))
    assert result.score == 13


def test_score_is_capped_at_100():
    result = compute_match(
        ["remote-friendly", "flexible-hours", "hybrid"], prefs(flexibility="very-important"),
    )
    assert result.score == 100
    assert len(result.reasons) == 3


def test_raw_score_never_goes_negative():
    result = compute_match(["racial-bias", "caste-bias"], prefs(inclusion="very-important"))
    assert result.score == 0


def test_duplicate_tags_count_once():
    p = prefs(flexibility="important", management="important")
    result = compute_match(["remote-friendly", "Remote Friendly", "remote_friendly"], p)
    assert result.score == 50
    assert len(result.reasons) == 1


def test_unknown_tags_are_ignored():
    result = compute_match(["blockchain", "ping-pong-table", 42, None], prefs(flexibility="important"))
    assert result.score == 0
    assert result.reasons == [NO_ALIGNMENT_FALLBACK]


@pytest.mark.parametrize("preferences", [None, "very-important", ["flexibility"], 7])
def test_missing_or_malformed_preferences_do_not_raise(preferences):
    result = compute_match(["remote-friendly"], preferences)
    assert result.score == 0
    assert result.reasons


def test_missing_tags_do_not_raise():
    result = compute_match(None, prefs(flexibility="important"))
    assert result.score == 0
    assert result.reasons == [NO_ALIGNMENT_FALLBACK]


def test_nested_preferences_use_strongest_field():
    p = {"flexibility": {"workFromHome": "somewhat-important", "flexibleHours": "very-important"}}
    result = compute_match(["remote-friendly"], p)
    assert result.score == 100


def test_growth_and_work_environment_categories():
    result = compute_match(
        ["mentorship", "collaborative"],
        {"growth": "important", "workEnvironment": "important"},
    )
    assert result.score == 100
    assert "Investment in mentorship aligns with your growth preference." in result.reasons
    assert "A collaborative workplace aligns with your work environment preference." in result.reasons

    penalized = compute_match(["mentorship", "limited-growth"], {"growth": "very-important"})
    assert penalized.score == 0


def test_llm_style_tags_are_normalized():
    result = compute_match(["DEI", "Hybrid", "Purpose"], prefs(inclusion="important", flexibility="important"))
    # 2 + 2 + 0.5 out of 4
    assert result.score == 100


def test_identical_input_gives_identical_output():
    tags = ["remote-friendly", "top-down", "teamwork", "ethnic-bias"]
    p = prefs(flexibility="important", management="very-important", inclusion="important")
    assert compute_match(tags, p) == compute_match(tags, p)


def test_score_bounds_and_reasons_over_many_inputs():
    levels = ["not-important", "somewhat-important", "important", "very-important"]
    tag_pool = [
        "remote-friendly", "flat-hierarchy", "diverse-workforce", "teamwork",
        "micro-managed", "racial-bias", "long-hours", "unknown-tag",
    ]
    tag_sets = [list(c) for n in range(0, 4) for c in itertools.combinations(tag_pool, n)]
    for flex, mgmt, incl in itertools.product(levels, repeat=3):
        p = {"flexibility": flex, "management": mgmt, "inclusion": incl}
        for tags in tag_sets:
            result = compute_match(tags, p)
            assert 0 <= result.score <= 100
            assert result.reasons
