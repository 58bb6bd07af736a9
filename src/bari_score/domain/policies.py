"""Per-surgery scoring policy table."""

import operator
from collections.abc import Callable
from dataclasses import dataclass
from types import MappingProxyType

from bari_score.domain.surgery import SurgeryType, resolve_surgery_type

BASELINE_SCORE = 50
MIN_SCORE = 0
MAX_SCORE = 100
MISSING_CRITICAL_PROTEIN_POINTS = -20


@dataclass(frozen=True)
class CeilingTiers:
    """Points awarded by the first ceiling (inclusive) a value fits under.

    Values above every ceiling receive ``above_points``.
    """

    bands: tuple[tuple[float, int], ...]
    above_points: int

    def points(self, value: float) -> int:
        for ceiling, points in self.bands:
            if value <= ceiling:
                return points
        return self.above_points


@dataclass(frozen=True)
class ProteinTiers:
    """Protein rewards from the highest floor reached, and a deficit penalty."""

    rewards: tuple[tuple[float, int], ...]
    deficit_below: float
    deficit_points: int

    def points(self, value: float) -> int:
        for floor, points in self.rewards:
            if value >= floor:
                return points
        if value < self.deficit_below:
            return self.deficit_points
        return 0


@dataclass(frozen=True)
class ThresholdRule:
    """Flat adjustment applied when an optional nutrient passes a comparison."""

    nutrient: str
    compare: Callable[[float, float], bool]
    threshold: float
    points: int

    def points_for(self, value: float | None) -> int:
        if value is None:
            return 0
        return self.points if self.compare(value, self.threshold) else 0


def at_least(nutrient: str, threshold: float, points: int) -> ThresholdRule:
    return ThresholdRule(nutrient, operator.ge, threshold, points)


def above(nutrient: str, threshold: float, points: int) -> ThresholdRule:
    return ThresholdRule(nutrient, operator.gt, threshold, points)


def below(nutrient: str, threshold: float, points: int) -> ThresholdRule:
    return ThresholdRule(nutrient, operator.lt, threshold, points)


@dataclass(frozen=True)
class SurgeryPolicy:
    """Immutable scoring thresholds and point deltas for one surgery variant."""

    surgery_type: SurgeryType
    sugar: CeilingTiers
    fat: CeilingTiers
    protein: ProteinTiers
    sugar_limit: float
    fat_limit: float
    micronutrient_bonuses: tuple[ThresholdRule, ...] = ()
    general_rules: tuple[ThresholdRule, ...] = ()
    protein_critical: bool = False


_POLICIES = {
    SurgeryType.GASTRIC_BYPASS: SurgeryPolicy(
        surgery_type=SurgeryType.GASTRIC_BYPASS,
        sugar=CeilingTiers(bands=((5, 25), (10, 10), (15, -15)), above_points=-35),
        fat=CeilingTiers(bands=((10, 15), (15, 5), (20, 0)), above_points=-20),
        protein=ProteinTiers(
            rewards=((25, 20), (20, 15), (15, 8)),
            deficit_below=10,
            deficit_points=-15,
        ),
        sugar_limit=10,
        fat_limit=15,
        micronutrient_bonuses=(
            at_least("calcium", 200, 8),
            at_least("vitamin_b12", 2.4, 5),
            at_least("iron", 3, 5),
            at_least("folate", 200, 5),
        ),
    ),
    SurgeryType.SLEEVE: SurgeryPolicy(
        surgery_type=SurgeryType.SLEEVE,
        sugar=CeilingTiers(bands=((5, 20), (10, 10), (15, 0)), above_points=-25),
        fat=CeilingTiers(bands=((20, 0),), above_points=-10),
        protein=ProteinTiers(
            rewards=((25, 25), (20, 18), (15, 10)),
            deficit_below=10,
            deficit_points=-15,
        ),
        sugar_limit=15,
        fat_limit=20,
        micronutrient_bonuses=(
            at_least("vitamin_b12", 2.4, 8),
            at_least("vitamin_d", 10, 8),
            at_least("calcium", 200, 8),
        ),
    ),
    SurgeryType.GASTRIC_BAND: SurgeryPolicy(
        surgery_type=SurgeryType.GASTRIC_BAND,
        sugar=CeilingTiers(bands=((5, 20), (10, 10), (15, 0)), above_points=-20),
        fat=CeilingTiers(bands=((10, 15), (15, 5), (20, 0)), above_points=-20),
        protein=ProteinTiers(
            rewards=((20, 20), (15, 12)),
            deficit_below=10,
            deficit_points=-15,
        ),
        sugar_limit=15,
        fat_limit=20,
        micronutrient_bonuses=(at_least("calcium", 200, 10),),
    ),
    SurgeryType.BPD_DS: SurgeryPolicy(
        surgery_type=SurgeryType.BPD_DS,
        sugar=CeilingTiers(bands=((5, 15), (15, 0)), above_points=-25),
        fat=CeilingTiers(bands=((10, 10), (20, 0)), above_points=-25),
        protein=ProteinTiers(
            rewards=((30, 30), (25, 20), (20, 10)),
            deficit_below=15,
            deficit_points=-25,
        ),
        sugar_limit=15,
        fat_limit=15,
        micronutrient_bonuses=(
            at_least("vitamin_a", 700, 5),
            at_least("vitamin_d", 10, 5),
            at_least("vitamin_e", 10, 5),
            at_least("vitamin_k", 80, 5),
            at_least("calcium", 300, 8),
            at_least("iron", 5, 5),
            at_least("vitamin_b12", 2.4, 5),
        ),
        protein_critical=True,
    ),
    SurgeryType.MINI_BYPASS: SurgeryPolicy(
        surgery_type=SurgeryType.MINI_BYPASS,
        sugar=CeilingTiers(bands=((5, 25), (10, 10), (15, 0)), above_points=-30),
        fat=CeilingTiers(bands=((10, 15), (20, 0)), above_points=-20),
        protein=ProteinTiers(
            rewards=((25, 25), (20, 15)),
            deficit_below=10,
            deficit_points=-15,
        ),
        sugar_limit=15,
        fat_limit=15,
        micronutrient_bonuses=(
            at_least("vitamin_b12", 2.4, 8),
            at_least("iron", 3, 8),
            at_least("calcium", 200, 8),
            at_least("vitamin_d", 10, 5),
        ),
    ),
    SurgeryType.UNSPECIFIED: SurgeryPolicy(
        surgery_type=SurgeryType.UNSPECIFIED,
        sugar=CeilingTiers(bands=((5, 20), (10, 10), (15, 0)), above_points=-25),
        fat=CeilingTiers(bands=((10, 15), (20, 0)), above_points=-15),
        protein=ProteinTiers(
            rewards=((20, 25), (15, 15)),
            deficit_below=10,
            deficit_points=-20,
        ),
        sugar_limit=15,
        fat_limit=15,
        general_rules=(
            at_least("fiber", 5, 10),
            below("sodium", 300, 5),
            above("sodium", 600, -10),
            above("saturated_fat", 5, -10),
        ),
    ),
}

POLICIES = MappingProxyType(_POLICIES)


def policy_for(surgery_type: "str | SurgeryType | None") -> SurgeryPolicy:
    """Return the scoring policy for a surgery type, general when unknown."""
    return POLICIES[resolve_surgery_type(surgery_type)]
