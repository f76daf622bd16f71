"""Pydantic models for conversion request and response payloads."""

from pydantic import BaseModel, Field

from serving_units.domain.servings import MacroProfile, NutritionServing


class ServingPayload(BaseModel):
    """A known serving of a food with its macros."""

    serving_id: str
    serving_size: str
    calories: float = 0.0
    protein_g: float = 0.0
    fat_g: float = 0.0
    carbs_g: float = 0.0

    def to_domain(self) -> NutritionServing:
        """Convert the payload into a domain serving."""
        return NutritionServing(
            serving_id=self.serving_id,
            serving_size=self.serving_size,
            nutrition=MacroProfile(
                calories=self.calories,
                protein_g=self.protein_g,
                fat_g=self.fat_g,
                carbs_g=self.carbs_g,
            ),
        )


class ConversionRequest(BaseModel):
    """Food name and its known servings."""

    food_name: str
    servings: list[ServingPayload] = Field(default_factory=list)


class NutritionRequest(ConversionRequest):
    """Conversion request for a quantity of a specific unit."""

    unit_key: str
    quantity: float = Field(gt=0)


class ParseRequest(BaseModel):
    """Free-text serving description."""

    text: str


class ConversionOptionPayload(BaseModel):
    """One selectable unit and its factor."""

    label: str
    unit_key: str
    factor: float


class ConversionResponse(BaseModel):
    """Conversion menu for a food."""

    bridge_serving_id: str | None = None
    options: list[ConversionOptionPayload] = Field(default_factory=list)


class ParsedServingPayload(BaseModel):
    """Structured serving quantity."""

    amount: float
    unit_key: str
    domain: str


class MacroPayload(BaseModel):
    """Macronutrients for a converted quantity."""

    calories: float
    protein_g: float
    fat_g: float
    carbs_g: float
