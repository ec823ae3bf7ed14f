"""
Metrics Pydantic Schemas
Serializable snapshots of values computed from the ORM models.

These schemas define the structure of data for:
    - A user's derived health metrics
    - A meal's nutrition totals
"""

from datetime import date, datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from fitness_tracker.core.enums import ActivityLevel, FitnessGoal


# ============================================================================
# USER METRICS
# ============================================================================

class UserMetrics(BaseModel):
    """
    Derived metrics of a user at a point in time.

    Optional fields are None while the user has no weight entries.

    Example:
    {
        "user_id": "0d3c...",
        "age": 30,
        "current_weight": 180.0,
        "bmi": 25.82,
        "bmr": 1782.8,
        "calorie_target": 1639,
        "activity_level": "sedentary",
        "goal": "weight_loss",
        "calculated_on": "2024-05-01"
    }
    """
    user_id: Optional[UUID] = None
    age: int = Field(..., ge=0)
    current_weight: Optional[float] = Field(None, description="Pounds, from the latest weight entry")
    bmi: Optional[float] = None
    bmr: Optional[float] = Field(None, description="kcal/day, Mifflin-St Jeor")
    calorie_target: int = Field(..., description="kcal/day, 0 when no weight is recorded")
    activity_level: ActivityLevel
    goal: FitnessGoal
    calculated_on: date


# ============================================================================
# MEAL TOTALS
# ============================================================================

class MealTotals(BaseModel):
    """Summed nutrition of a meal."""
    meal_id: Optional[UUID] = None
    name: str
    meal_date: datetime
    item_count: int = Field(0, ge=0)
    calories: float = 0.0
    protein: float = 0.0
    carbohydrates: float = 0.0
    fats: float = 0.0
