"""
Meal Service
Business logic for the food catalog and logged meals.

This service provides reusable functions for:
    - Adding foods to the catalog
    - Logging meals for a user from (food, servings) pairs
    - Summarizing a meal's nutrition totals
    - Deleting meals (food items go with them)
"""

import logging
from datetime import datetime
from typing import Iterable, Optional, Tuple
from uuid import UUID

from sqlalchemy.orm import Session

from fitness_tracker.models.food import Food
from fitness_tracker.models.meal import FoodItem, Meal
from fitness_tracker.models.user import User
from fitness_tracker.schemas.metrics import MealTotals

logger = logging.getLogger(__name__)


# ============================================================================
# FOOD CATALOG
# ============================================================================

def create_food(
    db: Session,
    name: str,
    serving_size: float,
    calories_per_serving: float,
    protein_per_serving: float,
    carbohydrates_per_serving: float,
    fats_per_serving: float,
) -> Food:
    """Create and persist a catalog food. Values are per serving."""
    food = Food(
        name,
        serving_size,
        calories_per_serving,
        protein_per_serving,
        carbohydrates_per_serving,
        fats_per_serving,
    )

    db.add(food)
    db.commit()

    logger.info("Created food '%s' (%s)", food.name, food.id)
    return food


def get_food(db: Session, food_id: UUID) -> Optional[Food]:
    return db.get(Food, food_id)


# ============================================================================
# MEALS
# ============================================================================

def log_meal(
    db: Session,
    user: User,
    name: str,
    meal_date: datetime,
    portions: Iterable[Tuple[Food, float]] = (),
) -> Meal:
    """
    Log a meal for a user.

    Args:
        db: Database session
        user: Owner of the meal
        name: Meal name (not blank)
        meal_date: When it was eaten (not in the future)
        portions: (food, servings_consumed) pairs, in the order eaten

    Returns:
        Meal: The persisted meal

    Example:
        log_meal(db, user, "Breakfast", datetime.now(), [(oats, 1.5), (milk, 1)])
    """
    items = [FoodItem(food, servings) for food, servings in portions]
    meal = Meal(name, meal_date, items)
    user.add_meal(meal)

    db.commit()

    logger.info(
        "Logged meal '%s' for user %s: %.1f kcal",
        meal.name, user.id, meal.calculate_total_calories(),
    )
    return meal


def get_meal_totals(meal: Meal) -> MealTotals:
    """Sum a meal's nutrition into a serializable snapshot."""
    return MealTotals(
        meal_id=meal.id,
        name=meal.name,
        meal_date=meal.meal_date,
        item_count=len(meal.food_items),
        calories=meal.calculate_total_calories(),
        protein=meal.calculate_total_protein(),
        carbohydrates=meal.calculate_total_carbohydrates(),
        fats=meal.calculate_total_fats(),
    )


def delete_meal(db: Session, meal_id: UUID) -> bool:
    """
    Delete a meal and its food items.

    Returns:
        bool: True if deleted, False if not found
    """
    meal = db.get(Meal, meal_id)
    if not meal:
        return False

    db.delete(meal)
    db.commit()

    logger.info("Deleted meal %s", meal_id)
    return True
