"""Pydantic models for scoring request and response payloads."""

from pydantic import BaseModel, Field

from bari_score.domain.nutrition import NutrientProfile


class NutrientProfilePayload(BaseModel):
    """Nutrient values for one food, per 100g or per serving."""

    calories: float = Field(ge=0)
    fat: float = Field(ge=0)
    sugar: float = Field(ge=0)
    sodium: float = Field(ge=0)
    protein: float | None = Field(default=None, ge=0)
    fiber: float | None = Field(default=None, ge=0)
    saturated_fat: float | None = Field(default=None, ge=0)
    monounsaturated_fat: float | None = Field(default=None, ge=0)
    trans_fat: float | None = Field(default=None, ge=0)
    potassium: float | None = Field(default=None, ge=0)
    carbohydrates: float | None = Field(default=None, ge=0)
    iron: float | None = Field(default=None, ge=0)
    cholesterol: float | None = Field(default=None, ge=0)
    calcium: float | None = Field(default=None, ge=0)
    vitamin_b12: float | None = Field(default=None, ge=0)
    vitamin_d: float | None = Field(default=None, ge=0)
    vitamin_a: float | None = Field(default=None, ge=0)
    vitamin_e: float | None = Field(default=None, ge=0)
    vitamin_k: float | None = Field(default=None, ge=0)
    folate: float | None = Field(default=None, ge=0)
    cobalt: float | None = Field(default=None, ge=0)

    def to_domain(self) -> NutrientProfile:
        return NutrientProfile(**self.model_dump())


class FoodScoreRequest(BaseModel):
    """Score request for a single food."""

    profile: NutrientProfilePayload
    surgery_type: str | None = None
    food_name: str | None = None


class RecipeScoreRequest(BaseModel):
    """Score request for a recipe or meal made of several items."""

    items: list[NutrientProfilePayload]
    servings: int = 1
    surgery_type: str | None = None
    name: str | None = None


class SafetyRequest(BaseModel):
    """Safety check request for a single food."""

    profile: NutrientProfilePayload
    surgery_type: str | None = None


class ExplanationPayload(BaseModel):
    """Justification line."""

    tag: str
    text: str
    positive: bool


class FoodScoreResponse(BaseModel):
    """Score of a single food."""

    surgery_type: str
    score: int
    band: str
    face: str
    explanations: list[ExplanationPayload]
    alternatives: list[str]


class RecipeScoreResponse(BaseModel):
    """Score and classifications of a recipe."""

    surgery_type: str
    servings: int
    score: int
    band: str
    totals: NutrientProfilePayload
    per_serving: NutrientProfilePayload
    macro_percentages: dict[str, float]
    macro_summary: str
    net_carbs: float
    nutrient_density: float
    dietary_label: str
    warnings: list[str]
    benefits: list[str]
    guidance: str
    explanations: list[ExplanationPayload]
    alternatives: list[str]


class SubstitutePayload(BaseModel):
    """Ingredient substitute."""

    name: str
    health_score: int


class SafetyResponse(BaseModel):
    """Food safety report."""

    surgery_type: str
    is_safe: bool
    sugar_status: str
    fat_status: str
    protein_status: str
    warnings: list[str]
    positives: list[str]
    tips: list[str]


class SubstitutesResponse(BaseModel):
    """Substitutes found for an ingredient."""

    name: str
    substitutes: list[SubstitutePayload]
