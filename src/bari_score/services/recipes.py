"""Recipe and meal aggregation with derived classifications."""

from collections.abc import Sequence
from types import MappingProxyType

from bari_score.domain.nutrition import (
    NutrientProfile,
    RecipeAggregate,
    nutrient_names,
)
from bari_score.domain.surgery import SurgeryType, resolve_surgery_type
from bari_score.errors import InvalidServingsError
from bari_score.services.scoring import calculate_score

PROTEIN_KCAL_PER_G = 4
CARBS_KCAL_PER_G = 4
FAT_KCAL_PER_G = 9
HIGH_PROTEIN_PCT = 30.0
LOW_CARB_PCT = 30.0
LOW_FAT_PCT = 30.0
LOW_SUGAR_G = 10.0


def aggregate(profiles: Sequence[NutrientProfile]) -> NutrientProfile:
    """Sum every nutrient across profiles.

    Unknown values count as zero here, so an item missing a nutrient does not
    hide the contribution of items that report it.
    """
    totals = {
        name: sum(profile.amount(name) for profile in profiles)
        for name in nutrient_names()
    }
    return NutrientProfile(**totals)


def per_serving(profile: NutrientProfile, servings: int) -> NutrientProfile:
    """Divide every known nutrient by the serving count."""
    if servings <= 0:
        raise InvalidServingsError(servings)
    values = {}
    for name in nutrient_names():
        value = getattr(profile, name)
        values[name] = None if value is None else value / servings
    return NutrientProfile(**values)


def build_recipe(
    profiles: Sequence[NutrientProfile],
    servings: int,
    surgery_type: "str | SurgeryType | None" = None,
) -> RecipeAggregate:
    """Aggregate ingredients into a scored recipe.

    The score is computed on the totals; classifications describe a single
    serving.
    """
    resolved = resolve_surgery_type(surgery_type)
    totals = aggregate(profiles)
    serving = per_serving(totals, servings)
    return RecipeAggregate(
        totals=totals,
        servings=servings,
        per_serving=serving,
        score=calculate_score(totals, resolved),
        surgery_type=resolved,
        macro_percentages=MappingProxyType(macro_percentages(serving)),
        macro_summary=macro_summary(serving),
        net_carbs=net_carbs(serving),
        nutrient_density=nutrient_density(serving),
        dietary_label=dietary_label(serving),
        warnings=tuple(recipe_warnings(serving)),
        benefits=tuple(recipe_benefits(serving)),
        guidance=recipe_guidance(serving, resolved),
    )


def macro_percentages(profile: NutrientProfile) -> dict[str, float]:
    """Share of macro calories from protein, carbs and fat."""
    protein_kcal = profile.amount("protein") * PROTEIN_KCAL_PER_G
    carbs_kcal = profile.amount("carbohydrates") * CARBS_KCAL_PER_G
    fat_kcal = profile.fat * FAT_KCAL_PER_G
    total_kcal = protein_kcal + carbs_kcal + fat_kcal
    if total_kcal == 0:
        return {"protein": 0.0, "carbs": 0.0, "fat": 0.0}
    return {
        "protein": protein_kcal / total_kcal * 100,
        "carbs": carbs_kcal / total_kcal * 100,
        "fat": fat_kcal / total_kcal * 100,
    }


def macro_summary(profile: NutrientProfile) -> str:
    macros = macro_percentages(profile)
    return (
        f"Protein: {macros['protein']:.1f}% | "
        f"Carbs: {macros['carbs']:.1f}% | "
        f"Fat: {macros['fat']:.1f}%"
    )


def net_carbs(profile: NutrientProfile) -> float:
    """Carbohydrates minus fiber, never negative."""
    return max(0.0, profile.amount("carbohydrates") - profile.amount("fiber"))


def nutrient_density(profile: NutrientProfile) -> float:
    """Nutrients per calorie; higher is better."""
    if profile.calories == 0:
        return 0.0
    nutrients = (
        profile.amount("protein")
        + profile.amount("fiber")
        + profile.amount("potassium") / 100
        + profile.amount("iron") * 10
    )
    return nutrients / profile.calories * 100


def is_high_protein(profile: NutrientProfile) -> bool:
    return macro_percentages(profile)["protein"] >= HIGH_PROTEIN_PCT


def is_low_carb(profile: NutrientProfile) -> bool:
    return macro_percentages(profile)["carbs"] < LOW_CARB_PCT


def is_low_fat(profile: NutrientProfile) -> bool:
    return macro_percentages(profile)["fat"] < LOW_FAT_PCT


def is_low_sugar(profile: NutrientProfile) -> bool:
    return profile.sugar < LOW_SUGAR_G


def is_bariatric_friendly(profile: NutrientProfile) -> bool:
    return (
        is_high_protein(profile)
        and is_low_sugar(profile)
        and profile.fat < 20.0
        and profile.sodium < 400.0
    )


def dietary_label(profile: NutrientProfile) -> str:
    """Comma-separated dietary labels, or "Balanced" when none apply."""
    checks = (
        ("High Protein", is_high_protein),
        ("Low Carb", is_low_carb),
        ("Low Fat", is_low_fat),
        ("Low Sugar", is_low_sugar),
        ("Bariatric Friendly", is_bariatric_friendly),
    )
    labels = [label for label, check in checks if check(profile)]
    return ", ".join(labels) if labels else "Balanced"


def recipe_warnings(profile: NutrientProfile) -> list[str]:
    warnings = []
    if profile.sugar > 10.0:
        warnings.append("⚠️ High sugar - may cause dumping syndrome")
    if profile.fat > 15.0:
        warnings.append("⚠️ High fat - may cause discomfort")
    if profile.amount("saturated_fat") > 5.0:
        warnings.append("⚠️ High saturated fat")
    if profile.sodium > 400.0:
        warnings.append("⚠️ High sodium - stay hydrated")
    if profile.amount("protein") < 15.0:
        warnings.append("ℹ️ Low protein - consider adding protein supplement")
    return warnings


def recipe_benefits(profile: NutrientProfile) -> list[str]:
    benefits = []
    protein = profile.amount("protein")
    if protein >= 20.0:
        benefits.append("Excellent protein source")
    elif protein >= 15.0:
        benefits.append("Good protein source")
    if profile.amount("fiber") >= 5.0:
        benefits.append("High fiber")
    if profile.amount("iron") >= 3.0:
        benefits.append("Good iron source")
    if is_low_sugar(profile):
        benefits.append("Low sugar")
    if is_bariatric_friendly(profile):
        benefits.append("Bariatric-friendly")
    return benefits


def recipe_guidance(  # noqa: PLR0911
    profile: NutrientProfile, surgery_type: "str | SurgeryType | None"
) -> str:
    """One line of advice for eating this recipe after a given surgery."""
    resolved = resolve_surgery_type(surgery_type)
    protein = profile.amount("protein")
    if resolved is SurgeryType.GASTRIC_BYPASS:
        if profile.sugar > 10:
            return "⚠️ High sugar content may cause dumping syndrome with gastric bypass"
        if protein >= 20:
            return "✅ Good protein content for gastric bypass recovery"
        return "Monitor portion sizes and eat slowly"
    if resolved is SurgeryType.SLEEVE:
        if protein < 15:
            return "⚠️ Consider adding more protein to support healing"
        return "Eat slowly and avoid carbonated beverages"
    if resolved is SurgeryType.GASTRIC_BAND:
        if profile.amount("fiber") > 10:
            return "ℹ️ High fiber - chew thoroughly to prevent band obstruction"
        return "Focus on small, frequent meals"
    if resolved is SurgeryType.BPD_DS:
        if profile.fat > 15:
            return "⚠️ High fat may not be well absorbed with BPD/DS"
        if protein >= 30:
            return "✅ Excellent protein - critical for BPD/DS patients"
        return "Prioritize protein and take all prescribed vitamins"
    if resolved is SurgeryType.MINI_BYPASS:
        if profile.sugar > 10:
            return "⚠️ Avoid high sugar to prevent dumping syndrome"
        if profile.fat > 15:
            return "⚠️ High fat content may cause discomfort"
        return "Focus on lean protein and vegetables"
    return "Consult your bariatric team for personalized nutrition guidance"
