"""Errors raised by the scoring engine."""


class NutrientValueError(ValueError):
    """Raised when a nutrient profile carries a negative value."""


class InvalidServingsError(ValueError):
    """Raised when a serving count is not a positive integer."""

    def __init__(self, servings: int) -> None:
        super().__init__(f"Servings must be greater than 0 (got {servings})")
        self.servings = servings
