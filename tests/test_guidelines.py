"""Tests for surgery guideline sheets."""

from bari_score.domain.guidelines import guidelines_for
from bari_score.domain.policies import policy_for
from bari_score.domain.surgery import SurgeryType


def test_bypass_guidelines() -> None:
    guidelines = guidelines_for("Gastric Bypass")

    assert guidelines.surgery_type is SurgeryType.GASTRIC_BYPASS
    assert guidelines.label == "Gastric Bypass (Roux-en-Y)"
    assert guidelines.sugar_limit_g == 10
    assert guidelines.fat_limit_g == 15
    assert guidelines.recommendations.protein_min_g == 60
    assert guidelines.recommendations.protein_max_g == 80
    assert guidelines.eating_guidelines[0] == "Eat protein first, always"
    assert len(guidelines.eating_guidelines) == 9
    assert "With meals" in guidelines.supplement_schedule


def test_bpd_ds_has_highest_needs() -> None:
    guidelines = guidelines_for(SurgeryType.BPD_DS)

    assert guidelines.hydration_goal == "64-80 oz"
    assert guidelines.recommendations.protein_min_g == 80
    assert guidelines.recommendations.protein_max_g == 120
    assert guidelines.recommendations.meal_frequency == "6+ small meals"
    assert len(guidelines.supplement_schedule) == 6


def test_sleeve_schedule_adds_bedtime_vitamin_d() -> None:
    schedule = guidelines_for("sleeve").supplement_schedule

    assert schedule["Bedtime"] == "Vitamin D (2000-3000 IU)"
    assert schedule["Morning"].startswith("B12")


def test_unknown_surgery_gets_general_guidelines() -> None:
    guidelines = guidelines_for(None)

    assert guidelines.surgery_type is SurgeryType.UNSPECIFIED
    assert guidelines.label == "Not specified (general bariatric)"
    assert len(guidelines.eating_guidelines) == 7
    assert guidelines.hydration_goal == "64 oz"
    assert guidelines_for("heart surgery") == guidelines_for("")


def test_limits_match_scoring_policy() -> None:
    for surgery_type in SurgeryType:
        guidelines = guidelines_for(surgery_type)
        policy = policy_for(surgery_type)

        assert guidelines.sugar_limit_g == policy.sugar_limit
        assert guidelines.recommendations.fat_limit_g == policy.fat_limit
        assert guidelines.recommendations.sodium_limit_mg == 2000


def test_schedule_copies_are_independent() -> None:
    first = guidelines_for("Gastric Bypass")
    first.supplement_schedule["Morning"] = "changed"

    assert guidelines_for("Gastric Bypass").supplement_schedule["Morning"] == (
        "Multivitamin with food"
    )
