"""Assessment service combining scoring, explanations and suggestions."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from bari_score.domain.guidelines import SurgeryGuidelines, guidelines_for
from bari_score.domain.nutrition import (
    Explanation,
    NutrientProfile,
    RecipeAggregate,
    ScoreBand,
    Substitute,
)
from bari_score.domain.surgery import SurgeryType, resolve_surgery_type
from bari_score.services.alternatives import find_substitutes, suggest_alternatives
from bari_score.services.explanations import explain
from bari_score.services.recipes import build_recipe
from bari_score.services.safety import FoodSafetyReport, check_food_safety
from bari_score.services.scoring import calculate_score, score_band

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FoodAssessment:
    """Score of a single food with its justifications."""

    surgery_type: SurgeryType
    score: int
    band: ScoreBand
    explanations: list[Explanation]
    alternatives: list[str]


@dataclass(frozen=True)
class RecipeAssessment:
    """Score of an aggregated recipe with its justifications."""

    recipe: RecipeAggregate
    band: ScoreBand
    explanations: list[Explanation]
    alternatives: list[str]


@dataclass
class AssessmentService:
    """Stateless service for scoring foods and recipes."""

    debug: bool = False

    def assess_food(
        self,
        profile: NutrientProfile,
        surgery_type: str | None = None,
        food_name: str | None = None,
    ) -> FoodAssessment:
        """Score a food and explain the result."""
        resolved = resolve_surgery_type(surgery_type)
        score = calculate_score(profile, resolved)
        assessment = FoodAssessment(
            surgery_type=resolved,
            score=score,
            band=score_band(score),
            explanations=explain(profile, resolved),
            alternatives=suggest_alternatives(score, food_name),
        )
        if self.debug:
            _logger.info(
                "Assess food: name=%s surgery=%s score=%s band=%s",
                food_name,
                resolved.name,
                score,
                assessment.band.value,
            )
        return assessment

    def assess_recipe(
        self,
        profiles: Sequence[NutrientProfile],
        servings: int,
        surgery_type: str | None = None,
        recipe_name: str | None = None,
    ) -> RecipeAssessment:
        """Aggregate ingredients, score the totals and explain the result."""
        recipe = build_recipe(profiles, servings, surgery_type)
        assessment = RecipeAssessment(
            recipe=recipe,
            band=score_band(recipe.score),
            explanations=explain(recipe.totals, recipe.surgery_type),
            alternatives=suggest_alternatives(recipe.score, recipe_name),
        )
        if self.debug:
            _logger.info(
                "Assess recipe: items=%s servings=%s surgery=%s score=%s",
                len(profiles),
                servings,
                recipe.surgery_type.name,
                recipe.score,
            )
        return assessment

    def substitutes(self, food_name: str) -> list[Substitute]:
        """Return ranked substitutes for an ingredient."""
        results = find_substitutes(food_name)
        if self.debug:
            _logger.info(
                "Substitutes: name=%s results=%s", food_name, [s.name for s in results]
            )
        return results

    def safety(
        self, profile: NutrientProfile, surgery_type: str | None = None
    ) -> FoodSafetyReport:
        """Check a food against the surgery's sugar and fat limits."""
        return check_food_safety(profile, surgery_type)

    def guidelines(self, surgery_type: str | None = None) -> SurgeryGuidelines:
        """Return the nutrition guideline sheet for a surgery type."""
        return guidelines_for(surgery_type)
