"""Recipes composed of shared food references."""

from dataclasses import dataclass, field
from typing import Any

from nutrition_db.domain.foods import HIGH_FAT, HIGH_PROTEIN, Food
from nutrition_db.domain.items import SuitabilityRules, check_suitability
from nutrition_db.domain.nutrition import CALORIES, NutrientMap

EMPTY_RECIPE = "Empty Recipe"
LIGHT_MEAL = "Light Meal"
HEARTY_MEAL = "Hearty Meal"
PROTEIN_RICH_MEAL = "Protein-Rich Meal"
HIGH_FAT_MEAL = "High-Fat Meal"
BALANCED_MEAL = "Balanced Meal"

EASY = "Easy"
MEDIUM = "Medium"
HARD = "Hard"

BUDGET_FRIENDLY = "Budget-Friendly"
MODERATE_COST = "Moderate Cost"
HIGHER_COST = "Higher Cost"

BASE_COOKING_MINUTES = 15
MINUTES_PER_INGREDIENT = 5
MINUTES_PER_MEAT = 10
MAX_COMPLEXITY_BONUS = 5.0
LARGE_AMOUNT_G = 200.0


@dataclass(frozen=True)
class Ingredient:
    """A food and the grams of it used in a recipe."""

    food: Food
    grams: float


def _is_meat_protein(food: Food) -> bool:
    return food.category() == HIGH_PROTEIN and "meat" in food.name.lower()


@dataclass(eq=False)
class Recipe:
    """Named combination of foods, reported per serving.

    Ingredients reference foods without owning them; the same food can
    appear in many recipes and edits to it show up in every one.
    """

    name: str
    servings: int = 1
    _ingredients: list[Ingredient] = field(
        default_factory=list, init=False, repr=False
    )

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "servings" and value < 1:
            raise ValueError(f"Servings must be positive, got {value}")
        super().__setattr__(name, value)

    @property
    def ingredients(self) -> tuple[Ingredient, ...]:
        """Return a read-only snapshot of the ingredients."""
        return tuple(self._ingredients)

    def add_ingredient(self, food: Food, grams: float) -> None:
        """Append an ingredient; non-positive amounts are rejected."""
        if grams <= 0:
            raise ValueError("Amount must be positive")
        self._ingredients.append(Ingredient(food=food, grams=grams))

    def remove_ingredient(self, index: int) -> None:
        """Remove the ingredient at `index`; out-of-range indexes are ignored."""
        if 0 <= index < len(self._ingredients):
            del self._ingredients[index]

    def remove_food(self, food: Food) -> int:
        """Drop every ingredient referencing `food` and return how many."""
        kept = [item for item in self._ingredients if item.food is not food]
        removed = len(self._ingredients) - len(kept)
        self._ingredients[:] = kept
        return removed

    def uses_food(self, food: Food) -> bool:
        """Return True if any ingredient references `food`."""
        return any(item.food is food for item in self._ingredients)

    def nutritional_info(self, amount: float = 1.0) -> NutrientMap:
        """Return per-serving nutrients, scaled by a recipe multiplier."""
        totals: NutrientMap = {}
        for ingredient in self._ingredients:
            nutrients = ingredient.food.nutritional_info(ingredient.grams)
            for nutrient, value in nutrients.items():
                totals[nutrient] = totals.get(nutrient, 0.0) + value * amount
        return {nutrient: value / self.servings for nutrient, value in totals.items()}

    def nutrition_score(self) -> float:
        """Weighted ingredient score plus a bonus for variety."""
        if not self._ingredients:
            return 0.0
        total_weight = sum(item.grams for item in self._ingredients)
        if total_weight == 0:
            return 0.0
        weighted = sum(
            item.food.nutrition_score() * (item.grams / total_weight)
            for item in self._ingredients
        )
        bonus = min(len(self._ingredients) * 0.5, MAX_COMPLEXITY_BONUS)
        return weighted + bonus

    def category(self) -> str:
        """Classify the recipe by calories per serving and ingredients."""
        if not self._ingredients:
            return EMPTY_RECIPE
        calories = self.nutritional_info().get(CALORIES, 0.0)
        if calories < 200:
            return LIGHT_MEAL
        if calories > 600:
            return HEARTY_MEAL
        categories = {item.food.category() for item in self._ingredients}
        if HIGH_PROTEIN in categories:
            return PROTEIN_RICH_MEAL
        if HIGH_FAT in categories:
            return HIGH_FAT_MEAL
        return BALANCED_MEAL

    def estimated_cooking_time(self) -> int:
        """Estimate minutes from ingredient count and meat preparation."""
        meat_count = sum(
            1 for item in self._ingredients if _is_meat_protein(item.food)
        )
        return (
            BASE_COOKING_MINUTES
            + MINUTES_PER_INGREDIENT * len(self._ingredients)
            + MINUTES_PER_MEAT * meat_count
        )

    def difficulty_level(self) -> str:
        """Rate preparation effort from ingredient count and meat or fish."""
        count = len(self._ingredients)
        has_complex = any(
            "meat" in item.food.name.lower() or "fish" in item.food.name.lower()
            for item in self._ingredients
        )
        if count <= 3 and not has_complex:
            return EASY
        if count <= 6:
            return MEDIUM
        return HARD

    def is_suitable_for_meal_prep(self) -> bool:
        """Return True when nothing needs immediate refrigeration."""
        perishable = any(
            "refrigerate immediately" in item.food.storage_info().lower()
            for item in self._ingredients
        )
        return not perishable and len(self._ingredients) >= 2

    def estimated_cost_category(self) -> str:
        """Bucket cost by meat, salmon and large ingredient amounts."""
        expensive = sum(
            1
            for item in self._ingredients
            if _is_meat_protein(item.food)
            or "salmon" in item.food.name.lower()
            or item.grams > LARGE_AMOUNT_G
        )
        if expensive == 0:
            return BUDGET_FRIENDLY
        if expensive <= 2:
            return MODERATE_COST
        return HIGHER_COST

    def is_suitable_for(self, need: str) -> bool:
        """Return whether the recipe fits a dietary need."""
        return check_suitability(self, need, RECIPE_SUITABILITY_RULES)

    def recipe_summary(self) -> str:
        """Format servings, cooking and cost details for display."""
        calories = self.nutritional_info().get(CALORIES, 0.0)
        return (
            f"{self.name} ({self.category()})\n"
            f"Servings: {self.servings}\n"
            f"Calories per serving: {calories:.0f}\n"
            f"Cooking time: {self.estimated_cooking_time()} minutes\n"
            f"Difficulty: {self.difficulty_level()}\n"
            f"Cost category: {self.estimated_cost_category()}\n"
            f"Ingredients: {len(self._ingredients)}"
        )

    def __str__(self) -> str:
        return f"{self.name} ({len(self._ingredients)} ingredients)"


RECIPE_SUITABILITY_RULES: SuitabilityRules = {
    "meal-prep": lambda recipe: recipe.is_suitable_for_meal_prep(),
    "quick-meal": lambda recipe: recipe.estimated_cooking_time() <= 30,
    "budget": lambda recipe: recipe.estimated_cost_category() == BUDGET_FRIENDLY,
    "complex-nutrition": lambda recipe: (
        len(recipe.ingredients) >= 4 and recipe.nutrition_score() > 20
    ),
}
