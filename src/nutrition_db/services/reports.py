"""Dietary recommendations built from the food library."""

from dataclasses import dataclass, field

from nutrition_db.domain.foods import Food
from nutrition_db.services.calculator import (
    FoodNutritionCalculator,
    calculate_food_security_impact,
)


@dataclass
class RecommendationReport:
    """Foods grouped by dietary goal plus food security figures."""

    weight_loss: list[Food]
    high_protein: list[Food]
    heart_healthy: list[Food]
    food_security_impact: float
    primary_food: Food | None = None
    complementary: list[Food] = field(default_factory=list)


def build_recommendations(
    foods: list[Food], calculator: FoodNutritionCalculator | None = None
) -> RecommendationReport:
    """Build recommendations; the first food is matched against the rest."""
    calculator = calculator or FoodNutritionCalculator()
    primary = foods[0] if foods else None
    complementary = (
        calculator.find_complementary_foods(primary, foods[1:]) if primary else []
    )
    return RecommendationReport(
        weight_loss=calculator.find_foods_for_diet(foods, "weight-loss"),
        high_protein=calculator.find_foods_for_diet(foods, "high-protein"),
        heart_healthy=calculator.find_foods_for_diet(foods, "heart-healthy"),
        food_security_impact=calculate_food_security_impact(foods),
        primary_food=primary,
        complementary=complementary,
    )


def _names(foods: list[Food]) -> str:
    return ", ".join(food.name for food in foods)


def render_recommendations(report: RecommendationReport) -> str:
    lines = [
        "DIETARY RECOMMENDATIONS:",
        f"For Weight Loss: {_names(report.weight_loss)}",
        f"High Protein Foods: {_names(report.high_protein)}",
        f"Heart Healthy Options: {_names(report.heart_healthy)}",
        "",
        "FOOD SECURITY ANALYSIS:",
        f"Overall food security impact score: {report.food_security_impact:.1f}",
    ]
    if report.primary_food is not None:
        lines.append("")
        lines.append(f"Foods that complement {report.primary_food.name}:")
        lines.append(_names(report.complementary))
    return "\n".join(lines)
