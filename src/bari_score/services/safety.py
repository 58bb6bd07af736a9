"""Safety check of a single food against surgery-specific limits."""

from dataclasses import dataclass, field

from bari_score.domain.nutrition import NutrientProfile
from bari_score.domain.policies import policy_for
from bari_score.domain.surgery import SurgeryType

SATURATED_FAT_LIMIT = 5
SODIUM_HIGH = 600
SODIUM_LOW = 300
PROTEIN_GOOD = 15
PROTEIN_LOW = 10
FIBER_GOOD = 5
FIBER_MODERATE = 3

_SURGERY_TIPS = {
    SurgeryType.GASTRIC_BYPASS: (
        "Remember to take your B12, Iron, Calcium, and Folate supplements",
    ),
    SurgeryType.SLEEVE: (
        "Avoid carbonated beverages - they can stretch your sleeve over time",
        "Remember to take your B12, Vitamin D, and Calcium supplements",
    ),
    SurgeryType.GASTRIC_BAND: (
        "Make sure to chew this food thoroughly to avoid band blockage",
        "Take small bites and eat slowly",
    ),
    SurgeryType.BPD_DS: (
        "Don't forget your fat-soluble vitamins (A/D/E/K) - crucial for BPD/DS",
    ),
    SurgeryType.MINI_BYPASS: (
        "Absolutely avoid alcohol - absorption is greatly increased after mini bypass",
        "Remember your B12, Iron, Calcium, and Vitamin D supplements",
    ),
}


@dataclass
class FoodSafetyReport:
    """Outcome of checking a food against surgery limits."""

    is_safe: bool
    sugar_status: str
    fat_status: str
    protein_status: str
    warnings: list[str] = field(default_factory=list)
    positives: list[str] = field(default_factory=list)
    tips: list[str] = field(default_factory=list)


def check_food_safety(  # noqa: PLR0912
    profile: NutrientProfile, surgery_type: "str | SurgeryType | None" = None
) -> FoodSafetyReport:
    """Flag sugar and fat above the surgery limits and summarize the rest.

    Only sugar and fat limits make a food unsafe; everything else is advice.
    Protein checks are skipped when protein is unknown.
    """
    policy = policy_for(surgery_type)
    resolved = policy.surgery_type
    sugar_ok = profile.sugar <= policy.sugar_limit
    fat_ok = profile.fat <= policy.fat_limit
    report = FoodSafetyReport(
        is_safe=sugar_ok and fat_ok,
        sugar_status="safe" if sugar_ok else "warning",
        fat_status="safe" if fat_ok else "warning",
        protein_status="unknown",
    )

    if not sugar_ok:
        report.warnings.append(
            f"⚠️ High sugar (>{policy.sugar_limit:g}g) - may cause dumping syndrome"
        )
    elif profile.sugar <= 5:
        report.positives.append("✅ Low sugar - excellent choice")
    elif profile.sugar <= 10:
        report.positives.append("✅ Moderate sugar - acceptable")

    if not fat_ok:
        report.warnings.append(
            f"⚠️ High fat (>{policy.fat_limit:g}g) - may cause discomfort"
        )
    elif profile.fat <= 10:
        report.positives.append("✅ Low fat - good choice")

    if profile.saturated_fat is not None and profile.saturated_fat > SATURATED_FAT_LIMIT:
        report.warnings.append("⚠️ High saturated fat (>5g)")

    if profile.sodium > SODIUM_HIGH:
        report.warnings.append("⚠️ High sodium - stay well hydrated")
    elif profile.sodium < SODIUM_LOW:
        report.positives.append("✅ Low sodium")

    protein = profile.protein
    if protein is not None:
        report.protein_status = "good" if protein >= PROTEIN_GOOD else "low"
        target = 25.0 if resolved is SurgeryType.BPD_DS else 20.0
        if protein >= target:
            report.positives.append("✅ Excellent protein content!")
        elif protein >= PROTEIN_GOOD:
            report.positives.append("✅ Good protein content")
        elif protein < PROTEIN_LOW:
            report.warnings.append("ℹ️ Low protein - consider adding supplement")
            report.tips.append(
                "Try adding: Greek yogurt, protein powder, cottage cheese, or lean meat"
            )
        else:
            report.tips.append("Moderate protein - could add more for optimal healing")

    if profile.fiber is not None:
        if profile.fiber >= FIBER_GOOD:
            report.positives.append("✅ Good fiber content")
        elif profile.fiber >= FIBER_MODERATE:
            report.positives.append("✅ Moderate fiber")

    if resolved is SurgeryType.GASTRIC_BYPASS and profile.sugar > 10:
        report.tips.append(
            "Gastric bypass patients are especially prone to dumping syndrome "
            "with sugar >10g"
        )
    if resolved is SurgeryType.BPD_DS and (protein is None or protein < 25):
        report.tips.append("BPD/DS patients need higher protein (aim for 80-120g/day)")
    report.tips.extend(_SURGERY_TIPS.get(resolved, ()))
    return report
