"""Print a nutrition overview of the library."""

from nutrition_db.app_logging import configure_logging
from nutrition_db.config import Settings
from nutrition_db.containers import build_container
from nutrition_db.domain.items import nutrition_summary
from nutrition_db.services.reports import build_recommendations, render_recommendations


def main(settings: Settings | None = None) -> None:
    resolved_settings = settings or Settings()
    configure_logging(resolved_settings.log_level)
    container = build_container(resolved_settings)
    library = container.library_service

    print("Nutrition Database")
    print()
    for food in library.list_foods():
        print(nutrition_summary(food))
        print()
    for recipe in library.list_recipes():
        print(recipe.recipe_summary())
        print()
    report = build_recommendations(library.list_foods(), container.food_calculator)
    print(render_recommendations(report))


if __name__ == "__main__":
    main()
