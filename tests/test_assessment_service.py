"""Tests for the assessment service."""

from bari_score.domain.nutrition import NutrientProfile, ScoreBand
from bari_score.domain.surgery import SurgeryType
from bari_score.services.alternatives import FOUNDATIONAL_ALTERNATIVES
from bari_score.services.assessment import AssessmentService
from tests.conftest import make_profile


def test_assess_excellent_food() -> None:
    service = AssessmentService()
    profile = NutrientProfile(
        fat=5, sodium=100, sugar=3, calories=120, protein=28
    )

    assessment = service.assess_food(profile, "Sleeve Gastrectomy")

    assert assessment.surgery_type is SurgeryType.SLEEVE
    assert assessment.score == 95
    assert assessment.band is ScoreBand.EXCELLENT
    assert assessment.alternatives == []
    assert assessment.explanations[0].tag == "sugar"


def test_assess_poor_food_suggests_staples() -> None:
    service = AssessmentService()
    profile = NutrientProfile(
        fat=25, sodium=700, sugar=22, calories=450, protein=8
    )

    assessment = service.assess_food(profile, "Gastric Bypass (Roux-en-Y)")

    assert assessment.score == 0
    assert assessment.band is ScoreBand.POOR
    assert assessment.alternatives == list(FOUNDATIONAL_ALTERNATIVES)


def test_assess_good_food_uses_name_in_tips(container) -> None:
    assessment = container.assessment_service.assess_food(
        make_profile(protein=16), food_name="Granola"
    )

    assert assessment.score == 65
    assert assessment.band is ScoreBand.GOOD
    assert len(assessment.alternatives) == 2
    assert all("Granola" in tip for tip in assessment.alternatives)


def test_assess_recipe_explains_totals(container) -> None:
    ingredient = NutrientProfile(calories=200, protein=10, fat=5, sugar=2, sodium=50)

    assessment = container.assessment_service.assess_recipe(
        [ingredient] * 3, servings=2, recipe_name="Chicken bowl"
    )

    assert assessment.recipe.score == 90
    assert assessment.band is ScoreBand.EXCELLENT
    assert assessment.alternatives == []
    assert [e.tag for e in assessment.explanations] == [
        "sugar",
        "protein",
        "sodium",
        "calories",
    ]
    assert not assessment.explanations[-1].positive


def test_substitutes_and_safety(container) -> None:
    service = container.assessment_service

    assert service.substitutes("white rice")[0].name == "Brown rice"
    assert service.safety(make_profile(sugar=12), "Gastric Bypass").is_safe is False
    assert service.guidelines("sleeve").surgery_type is SurgeryType.SLEEVE
