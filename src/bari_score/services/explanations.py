"""Human-readable justifications for a score.

These bands are maintained separately from the scoring tiers and do not line
up with them exactly (sugar 5/10/20 here versus 5/10/15 when scoring).
"""

from bari_score.domain.nutrition import Explanation, NutrientProfile
from bari_score.domain.policies import policy_for
from bari_score.domain.surgery import (
    BYPASS_OR_SLEEVE,
    SurgeryType,
    resolve_surgery_type,
)

SUGAR_VERY_LOW = 5
SUGAR_MODERATE = 10
SUGAR_HIGH = 20
PROTEIN_EXCELLENT = 25
PROTEIN_GOOD = 15
PROTEIN_LOW = 10
FAT_LOW = 10
FAT_HIGH = 20
SODIUM_LOW = 300
SODIUM_HIGH = 500
CALORIES_LIGHT = 150
CALORIES_HEAVY = 400


def explain(
    profile: NutrientProfile, surgery_type: "str | SurgeryType | None" = None
) -> list[Explanation]:
    """Return ranked justifications in a fixed order.

    Order: sugar, protein, fat, sodium, calories, then a surgery-specific note.
    """
    entries = [_sugar_entry(profile.sugar)]
    if profile.protein is not None:
        entries.append(_protein_entry(profile.protein))
    entries.append(_fat_entry(profile.fat))
    entries.append(_sodium_entry(profile.sodium))
    entries.append(_calories_entry(profile.calories))
    entries.append(_surgery_entry(profile.sugar, resolve_surgery_type(surgery_type)))
    return [entry for entry in entries if entry is not None]


def _sugar_entry(sugar: float) -> Explanation:
    if sugar <= SUGAR_VERY_LOW:
        return Explanation("sugar", f"Very low sugar ({sugar:g}g) - minimal risk", True)
    if sugar <= SUGAR_MODERATE:
        return Explanation("sugar", f"Moderate sugar ({sugar:g}g) - acceptable", True)
    if sugar <= SUGAR_HIGH:
        return Explanation(
            "sugar", f"High sugar ({sugar:g}g) - may trigger dumping syndrome", False
        )
    return Explanation(
        "sugar", f"Very high sugar ({sugar:g}g) - significant dumping risk", False
    )


def _protein_entry(protein: float) -> Explanation | None:
    if protein >= PROTEIN_EXCELLENT:
        return Explanation(
            "protein", f"Excellent protein ({protein:g}g) - supports healing", True
        )
    if protein >= PROTEIN_GOOD:
        return Explanation("protein", f"Good protein ({protein:g}g)", True)
    if protein < PROTEIN_LOW:
        return Explanation(
            "protein", f"Low protein ({protein:g}g) - pair with a protein source", False
        )
    return None


def _fat_entry(fat: float) -> Explanation | None:
    if fat <= FAT_LOW:
        return Explanation("fat", f"Low fat ({fat:g}g) - easy to tolerate", True)
    if fat > FAT_HIGH:
        return Explanation("fat", f"High fat ({fat:g}g) - may cause discomfort", False)
    return None


def _sodium_entry(sodium: float) -> Explanation | None:
    if sodium < SODIUM_LOW:
        return Explanation("sodium", f"Low sodium ({sodium:g}mg)", True)
    if sodium > SODIUM_HIGH:
        return Explanation(
            "sodium", f"High sodium ({sodium:g}mg) - stay well hydrated", False
        )
    return None


def _calories_entry(calories: float) -> Explanation | None:
    if calories <= CALORIES_LIGHT:
        return Explanation("calories", f"Light portion ({calories:g} kcal)", True)
    if calories > CALORIES_HEAVY:
        return Explanation(
            "calories", f"Calorie dense ({calories:g} kcal) - keep portions small", False
        )
    return None


def _surgery_entry(sugar: float, surgery_type: SurgeryType) -> Explanation | None:
    # Keyed on the resolved variant, not on the raw text: "roux-en-y" gets the
    # note, while an unrecognized "Bypass" falls back to general and does not.
    if surgery_type not in BYPASS_OR_SLEEVE:
        return None
    limit = policy_for(surgery_type).sugar_limit
    if sugar <= limit:
        return None
    return Explanation(
        "surgery",
        f"Sugar above the {limit:g}g limit for {surgery_type.value}",
        False,
    )
