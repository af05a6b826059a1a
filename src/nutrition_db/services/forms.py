"""Parsing of free-text food form input."""

import logging

from pydantic import BaseModel, ConfigDict, field_validator

from nutrition_db.domain.foods import Food

_logger = logging.getLogger(__name__)

NUMERIC_FIELDS = (
    "calories",
    "protein_g",
    "carbs_g",
    "fat_g",
    "fiber_g",
    "potassium_mg",
    "vitamin_c_mg",
    "iron_mg",
)


class InvalidNutrientValueError(ValueError):
    """Raised in strict mode when a nutrient field is not a number."""

    def __init__(self, field_name: str, raw: str) -> None:
        super().__init__(f"Invalid value for {field_name}: {raw!r}")
        self.field_name = field_name
        self.raw = raw


def parse_nutrient_value(
    raw: str | None, field_name: str, strict: bool = False
) -> float:
    """Parse a text field; blanks are 0.0, malformed text is 0.0 unless strict."""
    if raw is None or not raw.strip():
        return 0.0
    try:
        return float(raw.strip())
    except ValueError:
        if strict:
            raise InvalidNutrientValueError(field_name, raw) from None
        _logger.warning("Substituting 0.0 for %s=%r", field_name, raw)
        return 0.0


class FoodForm(BaseModel):
    """Raw text values from the add/edit food form."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str
    calories: str = ""
    protein_g: str = ""
    carbs_g: str = ""
    fat_g: str = ""
    fiber_g: str = ""
    potassium_mg: str = ""
    vitamin_c_mg: str = ""
    iron_mg: str = ""

    @field_validator("name")
    @classmethod
    def _require_name(cls, value: str) -> str:
        if not value:
            raise ValueError("Please enter a food name")
        return value

    @classmethod
    def from_food(cls, food: Food) -> "FoodForm":
        """Fill a form with the current values of a food."""
        values = {name: str(getattr(food, name)) for name in NUMERIC_FIELDS}
        return cls(name=food.name, **values)

    def parsed_values(self, strict: bool = False) -> dict[str, float]:
        """Return the parsed numeric fields keyed by food attribute."""
        return {
            name: parse_nutrient_value(getattr(self, name), name, strict=strict)
            for name in NUMERIC_FIELDS
        }

    def to_food(self, strict: bool = False) -> Food:
        return Food(name=self.name, **self.parsed_values(strict=strict))

    def apply_to(self, food: Food, strict: bool = False) -> Food:
        """Edit `food` in place; nothing changes if parsing fails."""
        values = self.parsed_values(strict=strict)
        food.name = self.name
        for name, value in values.items():
            setattr(food, name, value)
        return food
