"""Bariatric suitability scoring."""

from bari_score.domain.nutrition import NutrientProfile, ScoreBand
from bari_score.domain.policies import (
    BASELINE_SCORE,
    MAX_SCORE,
    MIN_SCORE,
    MISSING_CRITICAL_PROTEIN_POINTS,
    SurgeryPolicy,
    policy_for,
)
from bari_score.domain.surgery import SurgeryType

POOR_MAX = 25
FAIR_MAX = 49
GOOD_MAX = 74


def calculate_score(
    profile: NutrientProfile, surgery_type: "str | SurgeryType | None" = None
) -> int:
    """Score a nutrient profile from 0 to 100 for a surgery type.

    Starts from a neutral baseline and adds the point deltas of the resolved
    policy. Unknown surgery types are scored with the general policy.
    """
    return score_with_policy(profile, policy_for(surgery_type))


def score_with_policy(profile: NutrientProfile, policy: SurgeryPolicy) -> int:
    """Score a nutrient profile against an explicit policy."""
    total = BASELINE_SCORE
    total += policy.sugar.points(profile.sugar)
    total += policy.fat.points(profile.fat)
    if profile.protein is not None:
        total += policy.protein.points(profile.protein)
    elif policy.protein_critical:
        total += MISSING_CRITICAL_PROTEIN_POINTS
    for rule in policy.micronutrient_bonuses + policy.general_rules:
        total += rule.points_for(getattr(profile, rule.nutrient))
    return max(MIN_SCORE, min(MAX_SCORE, total))


def score_band(score: int) -> ScoreBand:
    """Map a numeric score to its qualitative band."""
    if score <= POOR_MAX:
        return ScoreBand.POOR
    if score <= FAIR_MAX:
        return ScoreBand.FAIR
    if score <= GOOD_MAX:
        return ScoreBand.GOOD
    return ScoreBand.EXCELLENT
