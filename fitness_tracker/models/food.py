"""
Food Model
Stores nutritional information for foods.

All nutritional values are per serving; serving_size says how many grams
one serving is. Consumed portions are tracked by FoodItem, which multiplies
these values by the number of servings eaten.
"""

from sqlalchemy import Column, Float, String
from sqlalchemy.orm import validates

from fitness_tracker.core.exceptions import ValidationError
from fitness_tracker.models.base import BaseModel
from fitness_tracker.models.validation import require_positive


def _require_serving_size(value, field: str) -> float:
    if not Food.is_valid_serving_size(value):
        raise ValidationError(f"{field} must be greater than zero.", field)
    return value


class Food(BaseModel):
    """
    Food catalog entry.

    Example:
        oats = Food("Oats", serving_size=40, calories_per_serving=150,
                    protein_per_serving=5, carbohydrates_per_serving=27,
                    fats_per_serving=3)
        str(oats)  # "Oats: 40g, 150 kcal, 5g protein, 27g carbs, 3g fats"
    """

    __tablename__ = "foods"

    name = Column(
        String(255),
        nullable=False,
        index=True,
        comment="Food name (e.g., 'Oats', 'Chicken breast')"
    )

    serving_size = Column(
        Float,
        nullable=False,
        comment="Grams per serving"
    )

    # Macronutrients (per serving)
    calories_per_serving = Column(Float, nullable=False, default=0.0)
    protein_per_serving = Column(Float, nullable=False, default=0.0)
    carbohydrates_per_serving = Column(Float, nullable=False, default=0.0)
    fats_per_serving = Column(Float, nullable=False, default=0.0)

    def __init__(
        self,
        name: str,
        serving_size: float,
        calories_per_serving: float,
        protein_per_serving: float,
        carbohydrates_per_serving: float,
        fats_per_serving: float,
    ):
        _require_serving_size(serving_size, "serving_size")

        self.name = name
        self.serving_size = serving_size
        self.calories_per_serving = calories_per_serving
        self.protein_per_serving = protein_per_serving
        self.carbohydrates_per_serving = carbohydrates_per_serving
        self.fats_per_serving = fats_per_serving

    @validates("serving_size")
    def _validate_serving_size(self, key, value):
        return _require_serving_size(value, key)

    @staticmethod
    def is_valid_serving_size(size: float) -> bool:
        """Check a serving size without raising: a finite number above zero."""
        try:
            require_positive(size, "serving_size")
        except ValidationError:
            return False
        return True

    def __str__(self):
        return (
            f"{self.name}: {self.serving_size:g}g, {self.calories_per_serving:g} kcal, "
            f"{self.protein_per_serving:g}g protein, {self.carbohydrates_per_serving:g}g carbs, "
            f"{self.fats_per_serving:g}g fats"
        )

    def __repr__(self):
        return f"<Food(name='{self.name}', serving_size={self.serving_size})>"
