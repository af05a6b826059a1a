"""Nutrient names and reference values."""

CALORIES = "Calories"
PROTEIN = "Protein"
CARBOHYDRATES = "Carbohydrates"
FATS = "Fats"
FIBER = "Fiber"
POTASSIUM = "Potassium"
VITAMIN_C = "Vitamin C"
IRON = "Iron"

NUTRIENTS = (
    CALORIES,
    PROTEIN,
    CARBOHYDRATES,
    FATS,
    FIBER,
    POTASSIUM,
    VITAMIN_C,
    IRON,
)

# Reference daily values (grams or milligrams, matching the per-100g units).
DAILY_VALUES = {
    PROTEIN: 50.0,
    FIBER: 25.0,
    VITAMIN_C: 90.0,
    IRON: 18.0,
    POTASSIUM: 3500.0,
}

PROTEIN_KCAL_PER_G = 4
CARBS_KCAL_PER_G = 4
FAT_KCAL_PER_G = 9

NutrientMap = dict[str, float]
