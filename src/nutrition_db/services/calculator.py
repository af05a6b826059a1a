"""Batch analysis over collections of foods and recipes."""

import logging
import math
from collections import Counter
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from nutrition_db.domain.foods import (
    CARBOHYDRATE_RICH,
    HIGH_FAT,
    HIGH_FIBER,
    HIGH_PROTEIN,
    LOW_CALORIE,
    Food,
)
from nutrition_db.domain.items import NutritionalItem, contributes_to_food_security
from nutrition_db.domain.nutrition import (
    CALORIES,
    CARBOHYDRATES,
    CARBS_KCAL_PER_G,
    FAT_KCAL_PER_G,
    FATS,
    FIBER,
    PROTEIN,
    PROTEIN_KCAL_PER_G,
    NutrientMap,
)
from nutrition_db.domain.recipes import Recipe

T = TypeVar("T", bound=NutritionalItem)

DIVERSITY_SCALE = 10
MEAL_PREP_STORAGE_BONUS = 20.0

_logger = logging.getLogger(__name__)


@dataclass
class NutritionCalculator(Generic[T]):
    """Aggregate, filter and rank items that report nutrition."""

    def calculate_total_nutrition(
        self, items: Sequence[T], amounts: Sequence[float] | None = None
    ) -> NutrientMap:
        """Sum nutrients across items, using 1.0 per item without amounts."""
        if amounts and len(amounts) != len(items):
            raise ValueError("Items and amounts must have same length")
        totals: NutrientMap = {}
        for index, item in enumerate(items):
            amount = amounts[index] if amounts else 1.0
            for nutrient, value in item.nutritional_info(amount).items():
                totals[nutrient] = totals.get(nutrient, 0.0) + value
        return totals

    def find_items_matching(
        self, items: Sequence[T], predicate: Callable[[T], bool]
    ) -> list[T]:
        return [item for item in items if predicate(item)]

    def sort_by_nutrition_score(
        self, items: Sequence[T], ascending: bool = False
    ) -> list[T]:
        """Sort by score, best first unless `ascending` is set."""
        return sorted(
            items, key=lambda item: item.nutrition_score(), reverse=not ascending
        )

    def group_by_category(self, items: Sequence[T]) -> dict[str, list[T]]:
        groups: dict[str, list[T]] = {}
        for item in items:
            groups.setdefault(item.category(), []).append(item)
        return groups

    def calculate_average_score(self, items: Sequence[T]) -> float:
        if not items:
            return 0.0
        return sum(item.nutrition_score() for item in items) / len(items)

    def get_top_n_items(self, items: Sequence[T], n: int) -> list[T]:
        """Return at most `n` items with the highest scores."""
        return self.sort_by_nutrition_score(items)[: max(n, 0)]

    def calculate_nutritional_diversity(self, items: Sequence[T]) -> float:
        """Shannon entropy of the category mix, scaled by 10."""
        if not items:
            return 0.0
        counts = Counter(item.category() for item in items)
        total = len(items)
        entropy = 0.0
        for count in counts.values():
            proportion = count / total
            entropy -= proportion * math.log(proportion)
        return entropy * DIVERSITY_SCALE


@dataclass
class FoodNutritionCalculator(NutritionCalculator[Food]):
    """Calculator with food-specific queries."""

    def find_foods_for_diet(self, foods: Sequence[Food], need: str) -> list[Food]:
        return self.find_items_matching(foods, lambda food: food.is_suitable_for(need))

    def calculate_macro_balance(
        self, foods: Sequence[Food], amounts: Sequence[float] | None = None
    ) -> NutrientMap:
        """Return the share of calories from protein, carbs and fat."""
        totals = self.calculate_total_nutrition(foods, amounts)
        calories = totals.get(CALORIES, 0.0)
        if calories == 0:
            return {PROTEIN: 0.0, CARBOHYDRATES: 0.0, FATS: 0.0}
        return {
            PROTEIN: totals.get(PROTEIN, 0.0) * PROTEIN_KCAL_PER_G / calories * 100,
            CARBOHYDRATES: (
                totals.get(CARBOHYDRATES, 0.0) * CARBS_KCAL_PER_G / calories * 100
            ),
            FATS: totals.get(FATS, 0.0) * FAT_KCAL_PER_G / calories * 100,
        }

    def find_complementary_foods(
        self, primary: Food, available: Sequence[Food]
    ) -> list[Food]:
        """Return foods that round out the primary food's profile."""
        primary_category = primary.category()
        primary_score = primary.nutrition_score()

        def complements(food: Food) -> bool:
            category = food.category()
            nutrients = food.nutritional_info()
            if primary_category == HIGH_PROTEIN:
                return category == CARBOHYDRATE_RICH or nutrients[FIBER] > 3.0
            if primary_category == CARBOHYDRATE_RICH:
                return category in {HIGH_PROTEIN, HIGH_FAT}
            if primary_category == HIGH_FAT:
                return category == HIGH_FIBER or nutrients[PROTEIN] > 10.0
            if primary_category == LOW_CALORIE:
                return nutrients[PROTEIN] > 15.0 or nutrients[FATS] > 10.0
            return food.nutrition_score() > primary_score

        return [food for food in available if complements(food)]


@dataclass
class RecipeNutritionCalculator(NutritionCalculator[Recipe]):
    """Calculator with recipe-specific queries."""

    def find_quick_recipes(
        self, recipes: Sequence[Recipe], max_time: int
    ) -> list[Recipe]:
        return self.find_items_matching(
            recipes, lambda recipe: recipe.estimated_cooking_time() <= max_time
        )

    def find_recipes_by_difficulty(
        self, recipes: Sequence[Recipe], difficulty: str
    ) -> list[Recipe]:
        return self.find_items_matching(
            recipes, lambda recipe: recipe.difficulty_level() == difficulty
        )

    def calculate_meal_prep_efficiency(
        self, recipes: Sequence[Recipe]
    ) -> dict[Recipe, float]:
        """Score recipes for batch cooking from score, time and storage."""
        efficiency: dict[Recipe, float] = {}
        for recipe in recipes:
            time_efficiency = max(0, 60 - recipe.estimated_cooking_time()) / 60 * 100
            storage_bonus = (
                MEAL_PREP_STORAGE_BONUS if recipe.is_suitable_for_meal_prep() else 0.0
            )
            efficiency[recipe] = (
                recipe.nutrition_score() + time_efficiency + storage_bonus
            ) / 3
        return efficiency


def for_foods() -> FoodNutritionCalculator:
    return FoodNutritionCalculator()


def for_recipes() -> RecipeNutritionCalculator:
    return RecipeNutritionCalculator()


def for_items() -> NutritionCalculator[NutritionalItem]:
    return NutritionCalculator()


def compare_nutritional_value(first: NutritionalItem, second: NutritionalItem) -> int:
    """Return -1, 0 or 1 comparing the two items' scores."""
    first_score = first.nutrition_score()
    second_score = second.nutrition_score()
    if first_score < second_score:
        return -1
    if first_score > second_score:
        return 1
    return 0


def calculate_food_security_impact(items: Sequence[NutritionalItem]) -> float:
    """Average of mean score, diversity and percent of secure items."""
    if not items:
        return 0.0
    calculator = for_items()
    average_score = calculator.calculate_average_score(items)
    diversity = calculator.calculate_nutritional_diversity(items)
    secure = sum(1 for item in items if contributes_to_food_security(item))
    security_percent = secure / len(items) * 100
    _logger.debug(
        "Food security impact: items=%s avg_score=%.2f diversity=%.2f secure=%s",
        len(items),
        average_score,
        diversity,
        secure,
    )
    return (average_score + diversity + security_percent) / 3
