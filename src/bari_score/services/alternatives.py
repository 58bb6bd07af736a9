"""Substitute-food suggestions for low-scoring foods and ingredients."""

from types import MappingProxyType

from bari_score.domain.nutrition import Substitute
from bari_score.services.scoring import FAIR_MAX, GOOD_MAX, POOR_MAX

FALLBACK_HEALTH_SCORE = 50

FOUNDATIONAL_ALTERNATIVES = (
    "Plain nonfat Greek yogurt",
    "Low-fat cottage cheese",
    "Grilled chicken breast",
    "Eggs or egg whites",
)

TARGETED_ALTERNATIVES = (
    "Sugar-free protein shake",
    "Tuna or salmon canned in water",
    "Sliced turkey breast",
    "Unsweetened almond milk",
)

# First match wins during partial matching, so order matters.
SUBSTITUTES: tuple[tuple[str, tuple[Substitute, ...]], ...] = (
    (
        "ground beef",
        (
            Substitute("Ground turkey", 85),
            Substitute("Ground chicken", 80),
            Substitute("Lean ground beef", 70),
            Substitute("Plant-based meat", 75),
        ),
    ),
    (
        "butter",
        (
            Substitute("Olive oil", 90),
            Substitute("Coconut oil", 75),
            Substitute("Avocado oil", 85),
            Substitute("Greek yogurt", 80),
        ),
    ),
    (
        "sugar",
        (
            Substitute("Honey", 70),
            Substitute("Maple syrup", 75),
            Substitute("Stevia", 90),
            Substitute("Monk fruit sweetener", 95),
        ),
    ),
    (
        "white rice",
        (
            Substitute("Brown rice", 85),
            Substitute("Quinoa", 90),
            Substitute("Cauliflower rice", 95),
            Substitute("Wild rice", 88),
        ),
    ),
    (
        "milk",
        (
            Substitute("Almond milk", 80),
            Substitute("Oat milk", 75),
            Substitute("Soy milk", 85),
            Substitute("Coconut milk", 70),
        ),
    ),
)

_SUBSTITUTE_INDEX = MappingProxyType(dict(SUBSTITUTES))


def suggest_alternatives(score: int, food_name: str | None = None) -> list[str]:
    """Return up to four suggestions gated by score band.

    Excellent scores need nothing, poor scores get protein staples, fair
    scores get targeted swaps and good scores get two behavioural tips.
    """
    if score > GOOD_MAX:
        return []
    if score <= POOR_MAX:
        return list(FOUNDATIONAL_ALTERNATIVES)
    if score <= FAIR_MAX:
        return list(TARGETED_ALTERNATIVES)
    subject = food_name.strip() if food_name and food_name.strip() else "this food"
    return [
        f"Pair {subject} with a lean protein and eat the protein first",
        f"Keep {subject} to a small portion (1/2 cup or less)",
    ]


def find_substitutes(food_name: str) -> list[Substitute]:
    """Look up healthier substitutes for an ingredient.

    Tries an exact lowercase match, then a substring match in either
    direction in table order, then a generic two-item fallback.
    """
    key = food_name.strip().lower()
    if key:
        exact = _SUBSTITUTE_INDEX.get(key)
        if exact is not None:
            return list(exact)
        for name, substitutes in SUBSTITUTES:
            if name in key or key in name:
                return list(substitutes)
    return [
        Substitute("No specific substitutes found", FALLBACK_HEALTH_SCORE),
        Substitute(
            f'Try searching online for "{food_name.strip()} alternatives"',
            FALLBACK_HEALTH_SCORE,
        ),
    ]
