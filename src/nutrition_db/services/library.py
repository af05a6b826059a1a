"""Services for managing the in-memory food and recipe library."""

import logging
from dataclasses import dataclass, field
from typing import Literal, Protocol, TypeVar

from nutrition_db.domain.foods import Food
from nutrition_db.domain.recipes import Recipe
from nutrition_db.services.forms import FoodForm
from nutrition_db.services.sample_data import sample_foods, sample_recipes

DeletePolicy = Literal["block", "cascade"]

_logger = logging.getLogger(__name__)

T = TypeVar("T")


class FoodInUseError(RuntimeError):
    """Raised when deleting a food that recipes still reference."""

    def __init__(self, food: Food, recipes: list[Recipe]) -> None:
        names = ", ".join(recipe.name for recipe in recipes)
        super().__init__(f"{food.name} is used by: {names}")
        self.food = food
        self.recipes = recipes


class LibraryRepository(Protocol):
    """Storage interface for foods and recipes."""

    def add_food(self, food: Food) -> None:
        """Store a food."""

    def remove_food(self, food: Food) -> bool:
        """Remove a food, returning False if it was not stored."""

    def list_foods(self) -> list[Food]:
        """Return stored foods in insertion order."""

    def add_recipe(self, recipe: Recipe) -> None:
        """Store a recipe."""

    def remove_recipe(self, recipe: Recipe) -> bool:
        """Remove a recipe, returning False if it was not stored."""

    def list_recipes(self) -> list[Recipe]:
        """Return stored recipes in insertion order."""


def _remove_by_identity(items: list[T], target: T) -> bool:
    for index, item in enumerate(items):
        if item is target:
            del items[index]
            return True
    return False


@dataclass
class InMemoryLibraryRepository(LibraryRepository):
    """Process-lifetime storage backed by plain lists."""

    foods: list[Food] = field(default_factory=list)
    recipes: list[Recipe] = field(default_factory=list)

    def add_food(self, food: Food) -> None:
        self.foods.append(food)

    def remove_food(self, food: Food) -> bool:
        return _remove_by_identity(self.foods, food)

    def list_foods(self) -> list[Food]:
        return list(self.foods)

    def add_recipe(self, recipe: Recipe) -> None:
        self.recipes.append(recipe)

    def remove_recipe(self, recipe: Recipe) -> bool:
        return _remove_by_identity(self.recipes, recipe)

    def list_recipes(self) -> list[Recipe]:
        return list(self.recipes)


@dataclass
class LibraryService:
    """Application service for library operations."""

    repository: LibraryRepository
    delete_policy: DeletePolicy = "block"
    strict_numeric_input: bool = False

    def add_food(self, food: Food) -> Food:
        self.repository.add_food(food)
        _logger.info("Added food: %s", food.name)
        return food

    def create_food_from_form(self, form: FoodForm) -> Food:
        """Parse a form and store the resulting food."""
        return self.add_food(form.to_food(strict=self.strict_numeric_input))

    def update_food(self, food: Food, form: FoodForm) -> Food:
        """Edit a food in place; recipes using it see the new values."""
        form.apply_to(food, strict=self.strict_numeric_input)
        _logger.info("Updated food: %s", food.name)
        return food

    def delete_food(self, food: Food) -> bool:
        """Delete a food according to the configured policy.

        With the ``block`` policy a food that recipes still use raises
        `FoodInUseError`. With ``cascade`` its ingredients are removed from
        those recipes first.
        """
        users = self.recipes_using(food)
        if users and self.delete_policy == "block":
            raise FoodInUseError(food, users)
        for recipe in users:
            removed = recipe.remove_food(food)
            _logger.info(
                "Removed %s ingredient(s) of %s from %s",
                removed,
                food.name,
                recipe.name,
            )
        deleted = self.repository.remove_food(food)
        if deleted:
            _logger.info("Deleted food: %s", food.name)
        return deleted

    def list_foods(self) -> list[Food]:
        return self.repository.list_foods()

    def add_recipe(self, recipe: Recipe) -> Recipe:
        self.repository.add_recipe(recipe)
        _logger.info("Added recipe: %s", recipe.name)
        return recipe

    def remove_recipe(self, recipe: Recipe) -> bool:
        return self.repository.remove_recipe(recipe)

    def list_recipes(self) -> list[Recipe]:
        return self.repository.list_recipes()

    def recipes_using(self, food: Food) -> list[Recipe]:
        """Return stored recipes with an ingredient referencing `food`."""
        return [recipe for recipe in self.list_recipes() if recipe.uses_food(food)]

    def load_sample_data(self) -> None:
        """Populate the library with the built-in sample set."""
        foods = sample_foods()
        for food in foods:
            self.repository.add_food(food)
        for recipe in sample_recipes(foods):
            self.repository.add_recipe(recipe)
        _logger.info(
            "Loaded sample data: foods=%s recipes=%s",
            len(self.list_foods()),
            len(self.list_recipes()),
        )
