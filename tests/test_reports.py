"""Tests for recommendation reports."""

import pytest

from nutrition_db.domain.foods import Food
from nutrition_db.services.calculator import calculate_food_security_impact
from nutrition_db.services.reports import build_recommendations, render_recommendations


def test_build_recommendations(foods: dict[str, Food]) -> None:
    items = list(foods.values())

    report = build_recommendations(items)

    assert [food.name for food in report.weight_loss] == [
        "Apple",
        "Banana",
        "Broccoli",
    ]
    assert [food.name for food in report.high_protein] == [
        "Chicken Breast",
        "Salmon",
        "Almonds",
    ]
    assert [food.name for food in report.heart_healthy] == ["Avocado"]
    assert report.primary_food is foods["Apple"]
    assert [food.name for food in report.complementary] == [
        "Chicken Breast",
        "Salmon",
        "Avocado",
        "Almonds",
    ]
    assert report.food_security_impact == pytest.approx(
        calculate_food_security_impact(items)
    )


def test_empty_recommendations() -> None:
    report = build_recommendations([])

    assert report.primary_food is None
    assert report.complementary == []
    assert report.food_security_impact == 0.0
    assert "complement" not in render_recommendations(report)


def test_render_recommendations(foods: dict[str, Food]) -> None:
    text = render_recommendations(build_recommendations(list(foods.values())))

    assert "For Weight Loss: Apple, Banana, Broccoli" in text
    assert "Heart Healthy Options: Avocado" in text
    assert "Foods that complement Apple:" in text
