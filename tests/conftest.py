"""Shared test fixtures."""

import pytest

from bari_score.config import Settings
from bari_score.containers import AppContainer
from bari_score.domain.nutrition import NutrientProfile
from bari_score.services.assessment import AssessmentService


def make_profile(**overrides: float | None) -> NutrientProfile:
    """Build a mid-range profile: 12g sugar, 12g fat, 400mg sodium, no extras."""
    values: dict[str, float | None] = {
        "calories": 200,
        "fat": 12,
        "sugar": 12,
        "sodium": 400,
    }
    values.update(overrides)
    return NutrientProfile(**values)


@pytest.fixture
def settings() -> Settings:
    return Settings(environment="test", debug=True, max_recipe_items=5)


@pytest.fixture
def container(settings: Settings) -> AppContainer:
    return AppContainer(
        settings=settings,
        assessment_service=AssessmentService(debug=settings.debug),
    )
