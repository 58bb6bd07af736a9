"""FastAPI application factory."""

import logging
from dataclasses import asdict
from typing import Any

from fastapi import FastAPI, HTTPException, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from bari_score.api.models import (
    ExplanationPayload,
    FoodScoreRequest,
    FoodScoreResponse,
    NutrientProfilePayload,
    RecipeScoreRequest,
    RecipeScoreResponse,
    SafetyRequest,
    SafetyResponse,
    SubstitutePayload,
    SubstitutesResponse,
)
from bari_score.app_logging import configure_logging
from bari_score.containers import AppContainer
from bari_score.domain.guidelines import MEAL_TIMING_GUIDELINES
from bari_score.domain.nutrition import Explanation, NutrientProfile
from bari_score.domain.surgery import all_surgery_types, resolve_surgery_type
from bari_score.errors import InvalidServingsError

UNPROCESSABLE_STATUS = 422


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(logging.DEBUG if container.settings.debug else logging.INFO)
    logger = logging.getLogger(__name__)

    app = FastAPI(title=container.settings.api_title)
    app.state.container = container

    @app.exception_handler(RequestValidationError)
    async def validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Report invalid payloads without echoing inputs such as NaN."""
        errors = [
            {key: value for key, value in error.items() if key != "input"}
            for error in exc.errors()
        ]
        return JSONResponse(
            status_code=UNPROCESSABLE_STATUS,
            content={"detail": jsonable_encoder(errors)},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/score")
    async def score_food(
        payload: FoodScoreRequest, request: Request
    ) -> FoodScoreResponse:
        """Score a single food for a surgery type."""
        state_container: AppContainer = request.app.state.container
        assessment = state_container.assessment_service.assess_food(
            payload.profile.to_domain(),
            surgery_type=payload.surgery_type,
            food_name=payload.food_name,
        )
        return FoodScoreResponse(
            surgery_type=assessment.surgery_type.value,
            score=assessment.score,
            band=assessment.band.value,
            face=assessment.band.face,
            explanations=_explanations(assessment.explanations),
            alternatives=assessment.alternatives,
        )

    @app.post("/recipes/score")
    async def score_recipe(
        payload: RecipeScoreRequest, request: Request
    ) -> RecipeScoreResponse:
        """Aggregate recipe items and score the totals."""
        state_container: AppContainer = request.app.state.container
        max_items = state_container.settings.max_recipe_items
        if len(payload.items) > max_items:
            raise HTTPException(
                status_code=UNPROCESSABLE_STATUS,
                detail=f"A recipe may contain at most {max_items} items",
            )
        try:
            assessment = state_container.assessment_service.assess_recipe(
                [item.to_domain() for item in payload.items],
                servings=payload.servings,
                surgery_type=payload.surgery_type,
                recipe_name=payload.name,
            )
        except InvalidServingsError as exc:
            logger.warning("Rejected recipe: %s", exc)
            raise HTTPException(
                status_code=UNPROCESSABLE_STATUS, detail=str(exc)
            ) from exc
        recipe = assessment.recipe
        return RecipeScoreResponse(
            surgery_type=recipe.surgery_type.value,
            servings=recipe.servings,
            score=recipe.score,
            band=assessment.band.value,
            totals=_profile_payload(recipe.totals),
            per_serving=_profile_payload(recipe.per_serving),
            macro_percentages=dict(recipe.macro_percentages),
            macro_summary=recipe.macro_summary,
            net_carbs=recipe.net_carbs,
            nutrient_density=recipe.nutrient_density,
            dietary_label=recipe.dietary_label,
            warnings=list(recipe.warnings),
            benefits=list(recipe.benefits),
            guidance=recipe.guidance,
            explanations=_explanations(assessment.explanations),
            alternatives=assessment.alternatives,
        )

    @app.post("/safety")
    async def food_safety(payload: SafetyRequest, request: Request) -> SafetyResponse:
        """Check a food against surgery-specific sugar and fat limits."""
        state_container: AppContainer = request.app.state.container
        report = state_container.assessment_service.safety(
            payload.profile.to_domain(), payload.surgery_type
        )
        return SafetyResponse(
            surgery_type=resolve_surgery_type(payload.surgery_type).value,
            is_safe=report.is_safe,
            sugar_status=report.sugar_status,
            fat_status=report.fat_status,
            protein_status=report.protein_status,
            warnings=report.warnings,
            positives=report.positives,
            tips=report.tips,
        )

    @app.get("/substitutes")
    async def substitutes(name: str, request: Request) -> SubstitutesResponse:
        """Return substitutes for an ingredient."""
        state_container: AppContainer = request.app.state.container
        results = state_container.assessment_service.substitutes(name)
        return SubstitutesResponse(
            name=name,
            substitutes=[
                SubstitutePayload(name=item.name, health_score=item.health_score)
                for item in results
            ],
        )

    @app.get("/surgery-types")
    async def surgery_types() -> dict[str, list[str]]:
        """List supported surgery types."""
        return {"surgery_types": all_surgery_types()}

    @app.get("/surgery-types/guidelines")
    async def surgery_guidelines(
        request: Request, surgery_type: str | None = None
    ) -> dict[str, Any]:
        """Return the nutrition guideline sheet for a surgery type."""
        state_container: AppContainer = request.app.state.container
        guidelines = state_container.assessment_service.guidelines(surgery_type)
        data = asdict(guidelines)
        data["surgery_type"] = guidelines.surgery_type.name
        data["meal_timing"] = list(MEAL_TIMING_GUIDELINES)
        return data

    return app


def _explanations(entries: list[Explanation]) -> list[ExplanationPayload]:
    return [
        ExplanationPayload(tag=entry.tag, text=entry.text, positive=entry.positive)
        for entry in entries
    ]


def _profile_payload(profile: NutrientProfile) -> NutrientProfilePayload:
    return NutrientProfilePayload(**asdict(profile))
