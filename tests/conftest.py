"""Shared test fixtures."""

import logging
from collections.abc import Iterator

import pytest

from nutrition_db.config import Settings
from nutrition_db.domain.foods import Food
from nutrition_db.domain.recipes import Recipe
from nutrition_db.services.library import InMemoryLibraryRepository, LibraryService
from nutrition_db.services.sample_data import sample_foods, sample_recipes


@pytest.fixture
def settings() -> Settings:
    return Settings(
        strict_numeric_input=False,
        food_delete_policy="block",
        load_sample_data=True,
        log_level="INFO",
    )


@pytest.fixture
def foods() -> dict[str, Food]:
    """Sample foods keyed by name."""
    return {food.name: food for food in sample_foods()}


@pytest.fixture
def apple(foods: dict[str, Food]) -> Food:
    return foods["Apple"]


@pytest.fixture
def chicken(foods: dict[str, Food]) -> Food:
    return foods["Chicken Breast"]


@pytest.fixture
def lean_meat() -> Food:
    return Food("Lean Meat", 150.0, 30.0, 0.0, 3.0, 0.0, 300.0, 0.0, 2.5)


@pytest.fixture
def recipes(foods: dict[str, Food]) -> dict[str, Recipe]:
    """Sample recipes built from the `foods` fixture, keyed by name."""
    return {recipe.name: recipe for recipe in sample_recipes(list(foods.values()))}


@pytest.fixture
def library() -> LibraryService:
    service = LibraryService(InMemoryLibraryRepository())
    service.load_sample_data()
    return service


@pytest.fixture(autouse=True)
def _reset_app_logger() -> Iterator[None]:
    """Undo handlers and propagation changes made by configure_logging."""
    logger = logging.getLogger("nutrition_db")
    yield
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
