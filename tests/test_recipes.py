"""Tests for recipe aggregation and per-serving classification."""

import pytest

from bari_score.domain.nutrition import NutrientProfile, nutrient_names
from bari_score.domain.surgery import SurgeryType
from bari_score.errors import InvalidServingsError
from bari_score.services.recipes import (
    aggregate,
    build_recipe,
    dietary_label,
    macro_percentages,
    macro_summary,
    net_carbs,
    nutrient_density,
    per_serving,
    recipe_guidance,
    recipe_warnings,
)
from bari_score.services.scoring import calculate_score
from tests.conftest import make_profile


def _ingredient() -> NutrientProfile:
    return NutrientProfile(calories=200, protein=10, fat=5, sugar=2, sodium=50)


def test_build_recipe_scores_totals_and_classifies_serving() -> None:
    recipe = build_recipe([_ingredient()] * 3, servings=2)

    assert recipe.totals.calories == 600
    assert recipe.per_serving.calories == 300
    assert recipe.per_serving.protein == 15
    assert recipe.score == calculate_score(recipe.totals) == 90
    assert recipe.surgery_type is SurgeryType.UNSPECIFIED
    assert recipe.dietary_label == "High Protein, Low Carb, Low Sugar, Bariatric Friendly"
    assert recipe.warnings == ()
    assert recipe.benefits == ("Good protein source", "Low sugar", "Bariatric-friendly")
    assert recipe.guidance == (
        "Consult your bariatric team for personalized nutrition guidance"
    )


def test_recipe_classifications_are_read_only() -> None:
    recipe = build_recipe([_ingredient()], servings=1)

    with pytest.raises(TypeError):
        recipe.macro_percentages["protein"] = 0.0  # type: ignore[index]
    assert isinstance(recipe.warnings, tuple)
    assert isinstance(recipe.benefits, tuple)


def test_aggregate_equals_field_sums() -> None:
    profiles = [
        make_profile(protein=5, iron=2),
        make_profile(calories=150, fiber=3),
        make_profile(sugar=1.5, protein=None),
    ]

    totals = aggregate(profiles)

    for name in nutrient_names():
        expected = sum(getattr(p, name) or 0 for p in profiles)
        assert getattr(totals, name) == expected
    assert totals.protein == 5
    assert totals.calories == 550


def test_aggregate_of_nothing_is_all_zero() -> None:
    totals = aggregate([])

    assert all(getattr(totals, name) == 0 for name in nutrient_names())


@pytest.mark.parametrize("servings", [0, -1])
def test_per_serving_rejects_non_positive_servings(servings: int) -> None:
    with pytest.raises(InvalidServingsError) as exc_info:
        per_serving(make_profile(), servings)

    assert exc_info.value.servings == servings
    assert isinstance(exc_info.value, ValueError)


def test_build_recipe_rejects_zero_servings() -> None:
    with pytest.raises(InvalidServingsError):
        build_recipe([_ingredient()], servings=0)


def test_per_serving_keeps_unknown_values_unknown() -> None:
    serving = per_serving(make_profile(fiber=4), 2)

    assert serving.calories == 100
    assert serving.fiber == 2
    assert serving.protein is None


def test_macro_breakdown() -> None:
    profile = make_profile(protein=30, carbohydrates=10, fat=5, sugar=2, sodium=100)

    macros = macro_percentages(profile)

    assert sum(macros.values()) == pytest.approx(100)
    assert macro_summary(profile) == "Protein: 58.5% | Carbs: 19.5% | Fat: 22.0%"
    assert dietary_label(profile) == (
        "High Protein, Low Carb, Low Fat, Low Sugar, Bariatric Friendly"
    )


def test_macro_breakdown_without_macro_calories() -> None:
    profile = make_profile(fat=0)

    assert macro_percentages(profile) == {"protein": 0.0, "carbs": 0.0, "fat": 0.0}


def test_balanced_label_when_nothing_applies() -> None:
    profile = make_profile(protein=10, carbohydrates=30, fat=10, sugar=15)

    assert dietary_label(profile) == "Balanced"


def test_net_carbs_and_density() -> None:
    assert net_carbs(make_profile(carbohydrates=10, fiber=12)) == 0
    assert net_carbs(make_profile(carbohydrates=20, fiber=5)) == 15

    profile = make_profile(calories=250, protein=10, fiber=2, potassium=300, iron=1)
    assert nutrient_density(profile) == pytest.approx(10.0)
    assert nutrient_density(make_profile(calories=0)) == 0.0


def test_recipe_warnings() -> None:
    warnings = recipe_warnings(
        make_profile(sugar=12, fat=16, saturated_fat=6, sodium=450, protein=5)
    )

    assert warnings == [
        "⚠️ High sugar - may cause dumping syndrome",
        "⚠️ High fat - may cause discomfort",
        "⚠️ High saturated fat",
        "⚠️ High sodium - stay hydrated",
        "ℹ️ Low protein - consider adding protein supplement",
    ]


def test_recipe_guidance_per_surgery() -> None:
    sugary = make_profile(sugar=12, protein=25)
    lean = make_profile(sugar=4, protein=32, fat=8)

    assert "dumping" in recipe_guidance(sugary, "Gastric Bypass")
    assert recipe_guidance(lean, "Gastric Bypass").startswith("✅")
    assert recipe_guidance(make_profile(protein=10), "sleeve") == (
        "⚠️ Consider adding more protein to support healing"
    )
    assert "chew" in recipe_guidance(make_profile(fiber=12), "lap band")
    assert recipe_guidance(lean, "BPD/DS") == (
        "✅ Excellent protein - critical for BPD/DS patients"
    )
    assert recipe_guidance(lean, "Mini Bypass") == "Focus on lean protein and vegetables"
