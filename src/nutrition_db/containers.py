"""Dependency container wiring for the application."""

from dataclasses import dataclass

from nutrition_db.config import Settings
from nutrition_db.services.calculator import (
    FoodNutritionCalculator,
    RecipeNutritionCalculator,
    for_foods,
    for_recipes,
)
from nutrition_db.services.library import InMemoryLibraryRepository, LibraryService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    library_service: LibraryService
    food_calculator: FoodNutritionCalculator
    recipe_calculator: RecipeNutritionCalculator


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    library_service = LibraryService(
        repository=InMemoryLibraryRepository(),
        delete_policy=resolved_settings.food_delete_policy,
        strict_numeric_input=resolved_settings.strict_numeric_input,
    )
    if resolved_settings.load_sample_data:
        library_service.load_sample_data()

    return AppContainer(
        settings=resolved_settings,
        library_service=library_service,
        food_calculator=for_foods(),
        recipe_calculator=for_recipes(),
    )
