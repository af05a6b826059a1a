"""Shared contract for anything that reports nutrient values."""

from collections.abc import Callable, Mapping
from typing import Protocol

from nutrition_db.domain.nutrition import (
    CALORIES,
    FIBER,
    IRON,
    PROTEIN,
    VITAMIN_C,
    NutrientMap,
)

DENSITY_THRESHOLD = 0.05
SCORE_THRESHOLD = 5.0


class NutritionalItem(Protocol):
    """Item that can report nutrients, a score and a category."""

    name: str

    def nutritional_info(self, amount: float = ...) -> NutrientMap:
        """Return nutrient values scaled to the given amount."""

    def nutrition_score(self) -> float:
        """Return a unitless quality score."""

    def category(self) -> str:
        """Return a classification label."""

    def is_suitable_for(self, need: str) -> bool:
        """Return whether the item fits a dietary need."""


SuitabilityRules = Mapping[str, Callable[..., bool]]


def _nutrient(item: NutritionalItem, key: str) -> float:
    return item.nutritional_info().get(key, 0.0)


BASE_SUITABILITY_RULES: SuitabilityRules = {
    "high-protein": lambda item: _nutrient(item, PROTEIN) > 15.0,
    "low-calorie": lambda item: _nutrient(item, CALORIES) < 100.0,
    "high-fiber": lambda item: _nutrient(item, FIBER) > 5.0,
    "high-iron": lambda item: _nutrient(item, IRON) > 2.0,
}


def check_suitability(
    item: NutritionalItem, need: str, rules: SuitabilityRules | None = None
) -> bool:
    """Evaluate a dietary need against item rules, then the base rules.

    Needs that no rule table recognises are treated as suitable.
    """
    key = need.lower()
    if rules and key in rules:
        return rules[key](item)
    if key in BASE_SUITABILITY_RULES:
        return BASE_SUITABILITY_RULES[key](item)
    return True


def nutritional_density(item: NutritionalItem) -> float:
    """Return important nutrients per calorie."""
    nutrients = item.nutritional_info()
    calories = nutrients.get(CALORIES, 1.0)
    if calories <= 0:
        calories = 1.0
    important = (
        nutrients.get(PROTEIN, 0.0)
        + nutrients.get(FIBER, 0.0)
        + nutrients.get(IRON, 0.0)
        + nutrients.get(VITAMIN_C, 0.0) / 10.0
    )
    return important / calories


def contributes_to_food_security(item: NutritionalItem) -> bool:
    """Return True for nutrient-dense, high-scoring items."""
    return (
        nutritional_density(item) > DENSITY_THRESHOLD
        and item.nutrition_score() > SCORE_THRESHOLD
    )


def nutrition_summary(item: NutritionalItem) -> str:
    """Format a short multi-line nutrition summary for display."""
    nutrients = item.nutritional_info()
    return (
        f"{item.name} ({item.category()})\n"
        f"Nutrition Score: {item.nutrition_score():.1f}\n"
        f"Calories: {nutrients.get(CALORIES, 0.0):.1f}\n"
        f"Protein: {nutrients.get(PROTEIN, 0.0):.1f} g\n"
        f"Nutritional Density: {nutritional_density(item):.3f}"
    )
