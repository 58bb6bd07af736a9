"""Nutrition domain models."""

from collections.abc import Mapping
from dataclasses import dataclass, fields
from enum import Enum
from types import MappingProxyType

from bari_score.domain.surgery import SurgeryType
from bari_score.errors import NutrientValueError

REQUIRED_NUTRIENTS = ("calories", "fat", "sugar", "sodium")


@dataclass(frozen=True)
class NutrientProfile:
    """Nutrient record for a food, normalized per 100g or per serving.

    Optional nutrients default to ``None``, which means "unknown" rather than
    zero. Grams for macronutrients, milligrams for sodium, potassium, iron,
    cholesterol and calcium, micrograms for B12, folate and vitamins A/D/K.
    """

    calories: float
    fat: float
    sugar: float
    sodium: float
    protein: float | None = None
    fiber: float | None = None
    saturated_fat: float | None = None
    monounsaturated_fat: float | None = None
    trans_fat: float | None = None
    potassium: float | None = None
    carbohydrates: float | None = None
    iron: float | None = None
    cholesterol: float | None = None
    calcium: float | None = None
    vitamin_b12: float | None = None
    vitamin_d: float | None = None
    vitamin_a: float | None = None
    vitamin_e: float | None = None
    vitamin_k: float | None = None
    folate: float | None = None
    cobalt: float | None = None

    def __post_init__(self) -> None:
        for name in nutrient_names():
            value = getattr(self, name)
            if value is not None and not value >= 0:
                raise NutrientValueError(f"{name} must be >= 0 (got {value})")

    def amount(self, name: str) -> float:
        """Return a nutrient value, treating unknown as zero."""
        value = getattr(self, name)
        return 0.0 if value is None else float(value)


def nutrient_names() -> tuple[str, ...]:
    """Return every nutrient field name in declaration order."""
    return tuple(field.name for field in fields(NutrientProfile))


class ScoreBand(Enum):
    """Qualitative label for a numeric score."""

    POOR = "Poor"
    FAIR = "Fair"
    GOOD = "Good"
    EXCELLENT = "Excellent"

    @property
    def face(self) -> str:
        """Emoji shown next to the score bar."""
        return _BAND_FACES[self]


_BAND_FACES = MappingProxyType(
    {
        ScoreBand.POOR: "😠",
        ScoreBand.FAIR: "☹️",
        ScoreBand.GOOD: "😐",
        ScoreBand.EXCELLENT: "😄",
    }
)


@dataclass(frozen=True)
class Explanation:
    """Single justification line for a score."""

    tag: str
    text: str
    positive: bool


@dataclass(frozen=True)
class Substitute:
    """Suggested replacement for an ingredient."""

    name: str
    health_score: int


@dataclass(frozen=True)
class RecipeAggregate:
    """Totals, per-serving values and classifications for a recipe."""

    totals: NutrientProfile
    servings: int
    per_serving: NutrientProfile
    score: int
    surgery_type: SurgeryType
    macro_percentages: Mapping[str, float]
    macro_summary: str
    net_carbs: float
    nutrient_density: float
    dietary_label: str
    warnings: tuple[str, ...]
    benefits: tuple[str, ...]
    guidance: str
