"""Dependency container wiring for the application."""

from dataclasses import dataclass

from bari_score.config import Settings
from bari_score.services.assessment import AssessmentService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    assessment_service: AssessmentService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    return AppContainer(
        settings=resolved_settings,
        assessment_service=AssessmentService(debug=resolved_settings.debug),
    )
