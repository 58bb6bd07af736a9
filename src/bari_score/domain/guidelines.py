"""Surgery-specific nutrition guidelines shown alongside scores."""

from dataclasses import dataclass
from types import MappingProxyType

from bari_score.domain.policies import policy_for
from bari_score.domain.surgery import SurgeryType, resolve_surgery_type


@dataclass(frozen=True)
class NutritionRecommendations:
    """Daily targets for a surgery variant."""

    protein_min_g: int
    protein_max_g: int
    sugar_limit_g: float
    fat_limit_g: float
    sodium_limit_mg: int
    calorie_target: str
    fluid_goal: str
    meal_frequency: str
    portion_size: str
    critical_nutrients: tuple[str, ...]
    avoid_foods: tuple[str, ...]


@dataclass(frozen=True)
class SurgeryGuidelines:
    """Everything a patient should know about eating after a given surgery."""

    surgery_type: SurgeryType
    label: str
    guidance: str
    warning: str
    protein_target: str
    sugar_limit_g: float
    fat_limit_g: float
    supplements: tuple[str, ...]
    eating_guidelines: tuple[str, ...]
    recommendations: NutritionRecommendations
    hydration_goal: str
    hydration_tips: tuple[str, ...]
    supplement_schedule: dict[str, str]


MEAL_TIMING_GUIDELINES = (
    "Wait 30 minutes before meals to drink fluids",
    "Wait 30 minutes after meals to drink fluids",
    "Sip fluids slowly throughout the day",
    "Eat meals every 3-4 hours",
    "Don't skip meals - this can slow metabolism",
    "Stop eating immediately if you feel full",
    "Take 20-30 minutes to eat each meal",
)

HYDRATION_TIPS = (
    "Sip water throughout the day",
    "Avoid drinking 30 minutes before and after meals",
    "Choose water, herbal tea, or sugar-free beverages",
    "Avoid carbonated drinks (especially for sleeve)",
    "Carry a water bottle with you",
)

_COMMON_EATING_GUIDELINES = (
    "Eat protein first, always",
    "Take small bites and chew thoroughly",
    "Eat slowly (meals should take 20-30 minutes)",
    "Stop eating when full",
    "Wait 30 minutes before/after meals to drink",
    "Stay hydrated between meals",
    "Take vitamins as prescribed",
)

_BASE_SCHEDULE = MappingProxyType(
    {
        "Morning": "Multivitamin with food",
        "Afternoon": "Calcium citrate (500mg)",
        "Evening": "Calcium citrate (500mg)",
    }
)

_BYPASS_SCHEDULE = MappingProxyType(
    {
        **_BASE_SCHEDULE,
        "Morning with Multivitamin": "B12 sublingual (1000mcg)",
        "With meals": "Iron (if prescribed) - separate from calcium",
    }
)


@dataclass(frozen=True)
class _GuidelineRow:
    guidance: str
    warning: str
    protein_target: str
    supplements: tuple[str, ...]
    extra_guidelines: tuple[str, ...]
    protein_range: tuple[int, int]
    calorie_target: str
    fluid_goal: str
    meal_frequency: str
    critical_nutrients: tuple[str, ...]
    avoid_foods: tuple[str, ...]
    supplement_schedule: MappingProxyType


_ROWS = MappingProxyType(
    {
        SurgeryType.GASTRIC_BYPASS: _GuidelineRow(
            guidance=(
                "Focus on: Protein 60-80g/day, avoid sugar >10g (dumping syndrome), "
                "limit fat >15g. Take B12, Iron, Calcium, Folate daily."
            ),
            warning=(
                "⚠️ CRITICAL: Avoid sugar >10g to prevent dumping syndrome. "
                "Protein is essential for healing."
            ),
            protein_target="60-80g per day",
            supplements=("B12", "Iron", "Calcium", "Folate", "Vitamin D", "Multivitamin"),
            extra_guidelines=(
                "Avoid sugar to prevent dumping syndrome",
                "Limit high-fat foods",
            ),
            protein_range=(60, 80),
            calorie_target="1000-1200",
            fluid_goal="64 oz per day",
            meal_frequency="5-6 small meals",
            critical_nutrients=("Protein", "B12", "Iron", "Calcium", "Folate"),
            avoid_foods=("High sugar items", "High fat foods", "Alcohol"),
            supplement_schedule=_BYPASS_SCHEDULE,
        ),
        SurgeryType.SLEEVE: _GuidelineRow(
            guidance=(
                "Focus on: Protein 60-80g/day, avoid sugar >15g, no carbonated "
                "beverages. Take B12, Vitamin D, Calcium daily."
            ),
            warning=(
                "⚠️ CRITICAL: Prioritize protein. Avoid carbonated drinks - they "
                "can stretch your sleeve."
            ),
            protein_target="60-80g per day",
            supplements=("B12", "Vitamin D", "Calcium", "Multivitamin"),
            extra_guidelines=(
                "Avoid carbonated beverages",
                "Focus on nutrient-dense foods",
            ),
            protein_range=(60, 80),
            calorie_target="1000-1200",
            fluid_goal="64 oz per day",
            meal_frequency="5-6 small meals",
            critical_nutrients=("Protein", "B12", "Vitamin D", "Calcium"),
            avoid_foods=("Carbonated drinks", "High sugar items", "Tough meats"),
            supplement_schedule=MappingProxyType(
                {
                    **_BASE_SCHEDULE,
                    "Morning": "B12 sublingual (1000mcg), Multivitamin",
                    "Bedtime": "Vitamin D (2000-3000 IU)",
                }
            ),
        ),
        SurgeryType.GASTRIC_BAND: _GuidelineRow(
            guidance=(
                "Focus on: Protein 50-60g/day, avoid sugar >15g and tough/fibrous "
                "foods, limit fat >20g. Take multivitamins and Calcium daily."
            ),
            warning=(
                "⚠️ CRITICAL: Chew thoroughly. Avoid tough meats, bread, and "
                "fibrous vegetables that can cause blockage."
            ),
            protein_target="50-60g per day",
            supplements=("Multivitamin", "Calcium", "Vitamin D"),
            extra_guidelines=(
                "Avoid tough, dry, or fibrous foods",
                "Chew extra thoroughly to prevent blockage",
            ),
            protein_range=(50, 60),
            calorie_target="1000-1200",
            fluid_goal="64 oz per day",
            meal_frequency="3-4 small meals",
            critical_nutrients=("Protein", "Multivitamin", "Calcium"),
            avoid_foods=("Tough meats", "Bread", "Pasta", "Fibrous vegetables", "Nuts"),
            supplement_schedule=_BASE_SCHEDULE,
        ),
        SurgeryType.BPD_DS: _GuidelineRow(
            guidance=(
                "Focus on: HIGH protein 80-120g/day (most critical), avoid sugar "
                ">15g and fat >15g (malabsorption). Take Vitamins A/D/E/K, "
                "Calcium, Iron, B12 daily."
            ),
            warning=(
                "⚠️ CRITICAL: Highest protein needs (80-120g/day). Severe "
                "malabsorption - lifelong vitamins required."
            ),
            protein_target="80-120g per day (highest needs)",
            supplements=(
                "Vitamins A/D/E/K (fat-soluble)",
                "Calcium",
                "Iron",
                "B12",
                "Zinc",
                "Multivitamin",
            ),
            extra_guidelines=(
                "Prioritize HIGH protein (80-120g/day)",
                "Take fat-soluble vitamins (A/D/E/K)",
                "Monitor for malabsorption symptoms",
            ),
            protein_range=(80, 120),
            calorie_target="1200-1500",
            fluid_goal="64-80 oz per day",
            meal_frequency="6+ small meals",
            critical_nutrients=(
                "HIGH Protein",
                "Vitamins A/D/E/K",
                "Calcium",
                "Iron",
                "B12",
                "Zinc",
            ),
            avoid_foods=("High sugar items", "Very high fat foods", "Alcohol"),
            supplement_schedule=MappingProxyType(
                {
                    "Morning": "Fat-soluble vitamins (A/D/E/K), Multivitamin, B12",
                    "Mid-morning": "Calcium citrate (500mg)",
                    "Lunch": "Iron (with vitamin C for absorption)",
                    "Afternoon": "Calcium citrate (500mg)",
                    "Dinner": "Zinc supplement",
                    "Evening": "Calcium citrate (500mg)",
                }
            ),
        ),
        SurgeryType.MINI_BYPASS: _GuidelineRow(
            guidance=(
                "Focus on: Protein 60-80g/day, avoid sugar >15g, fat >15g, and "
                "alcohol. Take B12, Iron, Calcium, Vitamin D daily."
            ),
            warning=(
                "⚠️ CRITICAL: Avoid sugar >15g (dumping risk) and all alcohol "
                "(increased absorption)."
            ),
            protein_target="60-80g per day",
            supplements=("B12", "Iron", "Calcium", "Vitamin D", "Multivitamin"),
            extra_guidelines=(
                "Absolutely avoid alcohol",
                "Monitor for dumping syndrome",
            ),
            protein_range=(60, 80),
            calorie_target="1000-1200",
            fluid_goal="64 oz per day",
            meal_frequency="5-6 small meals",
            critical_nutrients=("Protein", "B12", "Iron", "Calcium", "Vitamin D"),
            avoid_foods=("Alcohol (STRICT)", "High sugar items", "High fat foods"),
            supplement_schedule=_BYPASS_SCHEDULE,
        ),
        SurgeryType.UNSPECIFIED: _GuidelineRow(
            guidance=(
                "Using general bariatric nutrition guidelines. Protein first, "
                "avoid sugar, take prescribed vitamins daily."
            ),
            warning=(
                "⚠️ General bariatric guidelines: Protein first, avoid sugar, "
                "stay hydrated, take vitamins."
            ),
            protein_target="60-80g per day",
            supplements=("Multivitamin", "Calcium", "Vitamin D", "B12"),
            extra_guidelines=(),
            protein_range=(60, 80),
            calorie_target="1000-1200",
            fluid_goal="64 oz per day",
            meal_frequency="5-6 small meals",
            critical_nutrients=("Protein", "Multivitamin", "Calcium", "B12"),
            avoid_foods=(
                "High sugar items",
                "Very high fat foods",
                "Carbonated drinks",
            ),
            supplement_schedule=_BASE_SCHEDULE,
        ),
    }
)

SODIUM_LIMIT_MG = 2000
PORTION_SIZE = "1/2 to 1 cup"


def guidelines_for(surgery_type: "str | SurgeryType | None") -> SurgeryGuidelines:
    """Return the guideline sheet for a surgery type, general when unknown."""
    resolved = resolve_surgery_type(surgery_type)
    row = _ROWS[resolved]
    policy = policy_for(resolved)
    protein_min, protein_max = row.protein_range
    recommendations = NutritionRecommendations(
        protein_min_g=protein_min,
        protein_max_g=protein_max,
        sugar_limit_g=policy.sugar_limit,
        fat_limit_g=policy.fat_limit,
        sodium_limit_mg=SODIUM_LIMIT_MG,
        calorie_target=row.calorie_target,
        fluid_goal=row.fluid_goal,
        meal_frequency=row.meal_frequency,
        portion_size=PORTION_SIZE,
        critical_nutrients=row.critical_nutrients,
        avoid_foods=row.avoid_foods,
    )
    return SurgeryGuidelines(
        surgery_type=resolved,
        label=resolved.value,
        guidance=row.guidance,
        warning=row.warning,
        protein_target=row.protein_target,
        sugar_limit_g=policy.sugar_limit,
        fat_limit_g=policy.fat_limit,
        supplements=row.supplements,
        eating_guidelines=_COMMON_EATING_GUIDELINES + row.extra_guidelines,
        recommendations=recommendations,
        hydration_goal="64-80 oz" if resolved is SurgeryType.BPD_DS else "64 oz",
        hydration_tips=HYDRATION_TIPS,
        supplement_schedule=dict(row.supplement_schedule),
    )
