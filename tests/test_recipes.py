"""Tests for recipe aggregation."""

import pytest

from nutrition_db.domain.foods import Food
from nutrition_db.domain.recipes import Recipe


def test_single_ingredient_is_divided_by_servings(apple: Food) -> None:
    recipe = Recipe("Apple Slices", servings=4)
    recipe.add_ingredient(apple, 200.0)

    info = recipe.nutritional_info(1.0)

    expected = apple.nutritional_info(200)["Calories"] / 4
    assert info["Calories"] == pytest.approx(expected)
    assert recipe.nutritional_info(2.0)["Calories"] == pytest.approx(52.0)


def test_add_ingredient_rejects_non_positive_amounts(apple: Food) -> None:
    recipe = Recipe("Snack")
    recipe.add_ingredient(apple, 100.0)

    with pytest.raises(ValueError, match="Amount must be positive"):
        recipe.add_ingredient(apple, 0)
    with pytest.raises(ValueError):
        recipe.add_ingredient(apple, -5.0)

    assert len(recipe.ingredients) == 1


def test_recipe_requires_positive_servings() -> None:
    with pytest.raises(ValueError):
        Recipe("Broken", servings=0)


def test_servings_stay_positive_after_construction(apple: Food) -> None:
    recipe = Recipe("Pie", servings=2)
    recipe.add_ingredient(apple, 100.0)

    with pytest.raises(ValueError, match="Servings must be positive"):
        recipe.servings = 0

    assert recipe.servings == 2
    assert recipe.nutritional_info()["Calories"] == pytest.approx(26.0)

    recipe.servings = 4
    assert recipe.nutritional_info()["Calories"] == pytest.approx(13.0)


def test_remove_ingredient_out_of_range_is_noop(foods: dict[str, Food]) -> None:
    recipe = Recipe("Mix")
    recipe.add_ingredient(foods["Apple"], 100.0)
    recipe.add_ingredient(foods["Banana"], 100.0)
    recipe.add_ingredient(foods["Almonds"], 20.0)

    recipe.remove_ingredient(3)
    recipe.remove_ingredient(-1)
    assert len(recipe.ingredients) == 3

    recipe.remove_ingredient(1)
    assert [item.food.name for item in recipe.ingredients] == ["Apple", "Almonds"]


def test_empty_recipe_defaults() -> None:
    recipe = Recipe("Empty")

    assert recipe.nutrition_score() == 0.0
    assert recipe.category() == "Empty Recipe"
    assert recipe.estimated_cooking_time() == 15
    assert recipe.nutritional_info() == {}
    assert not recipe.is_suitable_for_meal_prep()


def test_sample_salad(recipes: dict[str, Recipe], foods: dict[str, Food]) -> None:
    salad = recipes["Healthy Salad"]
    broccoli_score = foods["Broccoli"].nutrition_score()
    avocado_score = foods["Avocado"].nutrition_score()

    assert salad.nutritional_info()["Calories"] == pytest.approx(57.0)
    assert salad.category() == "Light Meal"
    assert salad.nutrition_score() == pytest.approx(
        broccoli_score * 100 / 150 + avocado_score * 50 / 150 + 1.0
    )
    assert salad.estimated_cooking_time() == 25
    assert salad.difficulty_level() == "Easy"
    assert salad.is_suitable_for_meal_prep()
    assert salad.estimated_cost_category() == "Budget-Friendly"


def test_sample_bowl(recipes: dict[str, Recipe]) -> None:
    bowl = recipes["Protein Power Bowl"]

    assert bowl.nutritional_info()["Calories"] == pytest.approx(396.0)
    assert bowl.category() == "Protein-Rich Meal"
    assert bowl.estimated_cooking_time() == 30
    assert bowl.is_suitable_for("quick-meal")
    assert bowl.is_suitable_for("budget")
    assert bowl.is_suitable_for("high-protein")
    assert bowl.is_suitable_for("unknown-need")
    assert str(bowl) == "Protein Power Bowl (3 ingredients)"


@pytest.mark.parametrize(
    ("name", "grams", "expected"),
    [
        ("Almonds", 200.0, "Hearty Meal"),
        ("Avocado", 250.0, "High-Fat Meal"),
        ("Brown Rice", 300.0, "Balanced Meal"),
    ],
)
def test_category_bands(
    foods: dict[str, Food], name: str, grams: float, expected: str
) -> None:
    recipe = Recipe("Single")
    recipe.add_ingredient(foods[name], grams)

    assert recipe.category() == expected


def test_meat_ingredients_change_time_difficulty_and_prep(
    lean_meat: Food, foods: dict[str, Food]
) -> None:
    recipe = Recipe("Meat and Rice")
    recipe.add_ingredient(lean_meat, 100.0)
    recipe.add_ingredient(foods["Brown Rice"], 100.0)

    assert recipe.estimated_cooking_time() == 35
    assert recipe.difficulty_level() == "Medium"
    assert not recipe.is_suitable_for_meal_prep()
    assert not recipe.is_suitable_for("meal-prep")
    assert recipe.estimated_cost_category() == "Moderate Cost"


def test_fish_makes_small_recipe_medium() -> None:
    fish = Food("White Fish", 90.0, 19.0, 0.0, 1.0, 0.0, 300.0, 0.0, 0.3)
    recipe = Recipe("Poached Fish")
    recipe.add_ingredient(fish, 150.0)

    assert recipe.difficulty_level() == "Medium"


def test_many_ingredients_are_hard(foods: dict[str, Food]) -> None:
    recipe = Recipe("Everything", servings=4)
    for food in foods.values():
        recipe.add_ingredient(food, 50.0)

    assert recipe.difficulty_level() == "Hard"
    assert recipe.nutrition_score() > 4.0


def test_large_amounts_raise_cost(foods: dict[str, Food]) -> None:
    recipe = Recipe("Big Batch", servings=6)
    recipe.add_ingredient(foods["Brown Rice"], 500.0)
    recipe.add_ingredient(foods["Broccoli"], 300.0)
    recipe.add_ingredient(foods["Salmon"], 150.0)

    assert recipe.estimated_cost_category() == "Higher Cost"
    assert not recipe.is_suitable_for("budget")


def test_complex_nutrition(foods: dict[str, Food]) -> None:
    recipe = Recipe("Green Plate")
    recipe.add_ingredient(foods["Broccoli"], 200.0)
    recipe.add_ingredient(foods["Apple"], 50.0)
    recipe.add_ingredient(foods["Banana"], 50.0)
    recipe.add_ingredient(foods["Chicken Breast"], 50.0)

    assert recipe.nutrition_score() > 20
    assert recipe.is_suitable_for("complex-nutrition")

    recipe.remove_ingredient(3)
    assert not recipe.is_suitable_for("complex-nutrition")


def test_food_edits_flow_into_recipes(apple: Food) -> None:
    first = Recipe("Pie")
    second = Recipe("Sauce")
    first.add_ingredient(apple, 100.0)
    second.add_ingredient(apple, 100.0)

    apple.calories = 60.0

    assert first.nutritional_info()["Calories"] == pytest.approx(60.0)
    assert second.nutritional_info()["Calories"] == pytest.approx(60.0)


def test_remove_food_strips_every_reference(apple: Food, chicken: Food) -> None:
    recipe = Recipe("Odd Mix")
    recipe.add_ingredient(apple, 50.0)
    recipe.add_ingredient(chicken, 50.0)
    recipe.add_ingredient(apple, 25.0)

    assert recipe.remove_food(apple) == 2
    assert not recipe.uses_food(apple)
    assert recipe.uses_food(chicken)


def test_recipe_summary(recipes: dict[str, Recipe]) -> None:
    assert recipes["Healthy Salad"].recipe_summary() == (
        "Healthy Salad (Light Meal)\n"
        "Servings: 2\n"
        "Calories per serving: 57\n"
        "Cooking time: 25 minutes\n"
        "Difficulty: Easy\n"
        "Cost category: Budget-Friendly\n"
        "Ingredients: 2"
    )
