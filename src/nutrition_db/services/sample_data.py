"""Built-in sample foods and recipes."""

from nutrition_db.domain.foods import Food
from nutrition_db.domain.recipes import Recipe


def sample_foods() -> list[Food]:
    """Return fresh copies of the sample foods (values per 100g)."""
    return [
        Food("Apple", 52.0, 0.3, 13.8, 0.2, 2.4, 107.0, 4.0, 0.12),
        Food("Banana", 89.0, 1.1, 22.8, 0.3, 2.6, 358.0, 8.7, 0.37),
        Food("Chicken Breast", 165.0, 31.0, 0.0, 3.6, 0.0, 256.0, 0.0, 0.89),
        Food("Brown Rice", 123.0, 2.6, 23.0, 0.9, 1.8, 43.0, 0.0, 0.15),
        Food("Broccoli", 34.0, 2.8, 6.6, 0.4, 2.6, 316.0, 89.2, 0.12),
        Food("Salmon", 208.0, 25.4, 0.0, 12.4, 0.0, 363.0, 0.0, 0.38),
        Food("Avocado", 160.0, 2.0, 8.5, 14.7, 6.7, 485.0, 10.0, 0.55),
        Food("Almonds", 579.0, 21.2, 21.6, 49.9, 12.5, 733.0, 0.0, 3.71),
    ]


def sample_recipes(foods: list[Food]) -> list[Recipe]:
    """Build the sample recipes from foods returned by `sample_foods`."""
    by_name = {food.name: food for food in foods}

    salad = Recipe("Healthy Salad", servings=2)
    salad.add_ingredient(by_name["Broccoli"], 100.0)
    salad.add_ingredient(by_name["Avocado"], 50.0)

    bowl = Recipe("Protein Power Bowl", servings=1)
    bowl.add_ingredient(by_name["Chicken Breast"], 150.0)
    bowl.add_ingredient(by_name["Brown Rice"], 100.0)
    bowl.add_ingredient(by_name["Broccoli"], 75.0)

    return [salad, bowl]
