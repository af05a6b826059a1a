"""Food records with per-100g nutrient values."""

from dataclasses import dataclass

from nutrition_db.domain.items import (
    SuitabilityRules,
    check_suitability,
    contributes_to_food_security,
    nutritional_density,
)
from nutrition_db.domain.nutrition import (
    CALORIES,
    CARBOHYDRATES,
    CARBS_KCAL_PER_G,
    DAILY_VALUES,
    FAT_KCAL_PER_G,
    FATS,
    FIBER,
    IRON,
    POTASSIUM,
    PROTEIN,
    PROTEIN_KCAL_PER_G,
    VITAMIN_C,
    NutrientMap,
)

HIGH_FAT = "High-Fat"
HIGH_PROTEIN = "High-Protein"
CARBOHYDRATE_RICH = "Carbohydrate-Rich"
HIGH_FIBER = "High-Fiber"
LOW_CALORIE = "Low-Calorie"
BALANCED = "Balanced"

PERISHABLE_STORAGE = "Refrigerate immediately, use within 3-5 days"
FRUIT_STORAGE = "Store in cool, dry place, consume within 1 week"
DRY_STORAGE = "Store in airtight container, shelf-stable for months"
DEFAULT_STORAGE = "Follow standard food storage guidelines"


@dataclass(eq=False)
class Food:
    """Food item with nutrient values per 100 grams."""

    name: str
    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float
    fiber_g: float
    potassium_mg: float
    vitamin_c_mg: float
    iron_mg: float

    def nutritional_info(self, amount: float = 100.0) -> NutrientMap:
        """Return nutrients for `amount` grams."""
        factor = amount / 100.0
        return {
            CALORIES: self.calories * factor,
            PROTEIN: self.protein_g * factor,
            CARBOHYDRATES: self.carbs_g * factor,
            FATS: self.fat_g * factor,
            FIBER: self.fiber_g * factor,
            POTASSIUM: self.potassium_mg * factor,
            VITAMIN_C: self.vitamin_c_mg * factor,
            IRON: self.iron_mg * factor,
        }

    def nutrition_score(self) -> float:
        """Score nutrients per calorie; higher is more nutritious."""
        if self.calories <= 0:
            return 0.0
        nutrient_sum = (
            self.protein_g
            + self.fiber_g
            + self.vitamin_c_mg / 10
            + self.iron_mg * 10
        )
        return nutrient_sum / self.calories * 100

    def category(self) -> str:
        """Classify the food by its dominant source of calories."""
        nutrients = self.nutritional_info()
        total = nutrients[CALORIES]
        if total > 0:
            fat_share = nutrients[FATS] * FAT_KCAL_PER_G / total
            protein_share = nutrients[PROTEIN] * PROTEIN_KCAL_PER_G / total
            carbs_share = nutrients[CARBOHYDRATES] * CARBS_KCAL_PER_G / total
        else:
            fat_share = protein_share = carbs_share = 0.0

        if fat_share > 0.5:
            return HIGH_FAT
        if protein_share > 0.4:
            return HIGH_PROTEIN
        if carbs_share > 0.6:
            return CARBOHYDRATE_RICH
        if nutrients[FIBER] > 5.0:
            return HIGH_FIBER
        if total < 50:
            return LOW_CALORIE
        return BALANCED

    def is_suitable_for(self, need: str) -> bool:
        """Return whether the food fits a dietary need."""
        return check_suitability(self, need, FOOD_SUITABILITY_RULES)

    def is_nutrient_dense(self) -> bool:
        """Return True when the food packs nutrients into few calories."""
        return nutritional_density(self) > 0.1 and contributes_to_food_security(self)

    def daily_value_contribution(self, amount: float = 100.0) -> NutrientMap:
        """Return percent of daily reference values, capped at 100."""
        nutrients = self.nutritional_info(amount)
        return {
            nutrient: min(nutrients.get(nutrient, 0.0) / reference * 100, 100.0)
            for nutrient, reference in DAILY_VALUES.items()
        }

    def storage_info(self) -> str:
        """Return storage guidance for the food."""
        category = self.category()
        name = self.name.lower()
        if category == HIGH_PROTEIN and "meat" in name:
            return PERISHABLE_STORAGE
        if category == HIGH_FIBER and "fruit" in name:
            return FRUIT_STORAGE
        if category == CARBOHYDRATE_RICH:
            return DRY_STORAGE
        return DEFAULT_STORAGE

    def __str__(self) -> str:
        return f"{self.name} ({self.category()})"


FOOD_SUITABILITY_RULES: SuitabilityRules = {
    "weight-loss": lambda food: (
        food.calories < 150 and food.fiber_g > 2.0 and food.fat_g < 10.0
    ),
    "muscle-building": lambda food: food.protein_g > 20.0,
    "heart-healthy": lambda food: (
        food.potassium_mg > 200 and food.fiber_g > 3.0 and food.fat_g < 15.0
    ),
    "immune-support": lambda food: food.vitamin_c_mg > 10.0 or food.iron_mg > 1.0,
    "diabetic-friendly": lambda food: food.fiber_g > 3.0 and food.carbs_g < 15.0,
    "low-fat": lambda food: food.fat_g < 3.0,
    "high-energy": lambda food: food.calories > 200 and food.fat_g > 10.0,
    "keto-friendly": lambda food: food.fat_g > 15.0 and food.carbs_g < 5.0,
}
