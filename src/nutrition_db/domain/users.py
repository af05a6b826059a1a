"""Personal profile with body metrics and daily targets."""

from dataclasses import dataclass

ACTIVITY_FACTORS = {
    "Sedentary": 1.0,
    "Light": 1.2,
    "Moderate": 1.4,
    "Active": 1.6,
}
DEFAULT_ACTIVITY_FACTOR = 1.2
PROTEIN_G_PER_KG = 0.8


@dataclass(eq=False)
class User:
    """A person used for personalised targets."""

    name: str
    age: int
    gender: str
    weight_kg: float
    height_cm: float
    activity_level: str

    def bmi(self) -> float:
        """Return body mass index, or 0.0 without a usable height."""
        if self.height_cm <= 0:
            return 0.0
        height_m = self.height_cm / 100.0
        return self.weight_kg / (height_m * height_m)

    def bmi_category(self) -> str:
        """Return the standard BMI band name."""
        bmi = self.bmi()
        if bmi < 18.5:
            return "Underweight"
        if bmi < 25:
            return "Normal"
        if bmi < 30:
            return "Overweight"
        return "Obese"

    def daily_calorie_needs(self) -> float:
        """Estimate daily calories from gender, age and activity."""
        base = 2000 if self.gender.lower() == "male" else 1800
        age_factor = 0.9 if self.age > 50 else 1.0
        activity_factor = ACTIVITY_FACTORS.get(
            self.activity_level, DEFAULT_ACTIVITY_FACTOR
        )
        return base * age_factor * activity_factor

    def protein_needs(self) -> float:
        """Return daily protein in grams."""
        return self.weight_kg * PROTEIN_G_PER_KG

    def user_summary(self) -> str:
        """Format age, BMI and calorie needs on one line."""
        return (
            f"{self.name} - Age: {self.age}, BMI: {self.bmi():.1f} "
            f"({self.bmi_category()}), "
            f"Daily Calories: {self.daily_calorie_needs():.0f}"
        )

    def __str__(self) -> str:
        return self.name
