"""
User Service
Business logic for user profiles and body tracking.

This service provides reusable functions for:
    - Creating, reading and deleting users
    - Recording weight entries (and refreshing the calorie target)
    - Recording body measurements
    - Building a snapshot of a user's derived metrics

Every function takes the database session as its first argument and
commits its own unit of work. Validation errors raised by the models
propagate unchanged, before anything is added to the session.
"""

import logging
from datetime import date
from typing import Optional
from uuid import UUID

from sqlalchemy.orm import Session

from fitness_tracker.core.enums import ActivityLevel, FitnessGoal
from fitness_tracker.models.body_measurement import BodyMeasurement
from fitness_tracker.models.user import User
from fitness_tracker.models.validation import today
from fitness_tracker.models.weight_entry import WeightEntry
from fitness_tracker.schemas.metrics import UserMetrics

logger = logging.getLogger(__name__)


# ============================================================================
# USER PROFILE
# ============================================================================

def create_user(
    db: Session,
    height_feet: int,
    height_inches: int,
    date_of_birth: date,
    goal: FitnessGoal,
    gender: str,
    activity_level: ActivityLevel = ActivityLevel.SEDENTARY,
) -> User:
    """
    Create and persist a new user profile.

    Args:
        db: Database session
        height_feet: Height, feet part (> 0)
        height_inches: Height, inches part (0-11)
        date_of_birth: Must be before today
        goal: Fitness goal
        gender: "male" or "female"
        activity_level: Defaults to sedentary

    Returns:
        User: Created user with its id assigned

    Example:
        user = create_user(db, 5, 10, date(1994, 3, 2), FitnessGoal.MAINTENANCE, "female")
    """
    user = User(height_feet, height_inches, date_of_birth, goal, gender, activity_level)

    db.add(user)
    db.commit()

    logger.info("Created user %s", user.id)
    return user


def get_user(db: Session, user_id: UUID) -> Optional[User]:
    """Get a user by ID, or None if not found."""
    return db.get(User, user_id)


def delete_user(db: Session, user_id: UUID) -> bool:
    """
    Delete a user and everything they logged.

    Weight entries, body measurements, workout sessions (with exercises and
    sets) and meals (with food items) are removed in the same transaction.

    Returns:
        bool: True if deleted, False if not found
    """
    user = get_user(db, user_id)
    if not user:
        return False

    db.delete(user)
    db.commit()

    logger.info("Deleted user %s", user_id)
    return True


# ============================================================================
# BODY TRACKING
# ============================================================================

def record_weight(
    db: Session,
    user: User,
    entry_date: date,
    weight: float,
    body_fat_percentage: float = 0.0,
) -> WeightEntry:
    """
    Append a weight entry to the user's history.

    The new entry becomes the user's current weight, so the calorie
    target is recomputed in the same commit.

    Returns:
        WeightEntry: The persisted entry
    """
    entry = WeightEntry(entry_date, weight, body_fat_percentage)
    user.add_weight_entry(entry)
    user.update_calorie_target()

    db.commit()

    logger.info(
        "Recorded weight %.1f lb for user %s (calorie target %d)",
        weight, user.id, user.calorie_target,
    )
    return entry


def record_body_measurement(
    db: Session,
    user: User,
    measurement_date: date,
    waist_size: float,
    hip_size: float,
    chest_size: float,
    arm_size: float,
    thigh_size: float,
) -> BodyMeasurement:
    """Append a body measurement to the user's history."""
    measurement = BodyMeasurement(
        measurement_date, waist_size, hip_size, chest_size, arm_size, thigh_size
    )
    user.add_body_measurement(measurement)

    db.commit()

    logger.info("Recorded body measurement for user %s", user.id)
    return measurement


# ============================================================================
# METRICS
# ============================================================================

def get_user_metrics(user: User) -> UserMetrics:
    """
    Build a snapshot of the user's derived metrics.

    Reads the cached calorie target as is; call
    user.update_calorie_target() first to refresh it.
    """
    return UserMetrics(
        user_id=user.id,
        age=user.age,
        current_weight=user.current_weight,
        bmi=user.current_bmi,
        bmr=user.calculate_bmr(),
        calorie_target=user.calorie_target,
        activity_level=user.activity_level,
        goal=user.goal,
        calculated_on=today(),
    )
