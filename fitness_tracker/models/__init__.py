"""
Database Models Module
Contains SQLAlchemy ORM models for all database tables.

This module serves as the central import point for all models.
All models must be imported here to be registered with SQLAlchemy
and created during Base.metadata.create_all().
"""

from fitness_tracker.core.enums import ActivityLevel, FitnessGoal
from fitness_tracker.db.base import Base
from fitness_tracker.models.base import BaseModel
from fitness_tracker.models.body_measurement import BodyMeasurement
from fitness_tracker.models.exercise_category import ExerciseCategory
from fitness_tracker.models.food import Food
from fitness_tracker.models.meal import FoodItem, Meal
from fitness_tracker.models.user import User
from fitness_tracker.models.weight_entry import WeightEntry
from fitness_tracker.models.workout import Exercise, ExerciseSet, WorkoutSession

# Export all models so they can be imported from fitness_tracker.models
# This also ensures they are registered with SQLAlchemy Base
__all__ = [
    "Base",
    "BaseModel",
    "ActivityLevel",
    "FitnessGoal",
    "User",
    "WeightEntry",
    "BodyMeasurement",
    "WorkoutSession",
    "Exercise",
    "ExerciseSet",
    "ExerciseCategory",
    "Food",
    "FoodItem",
    "Meal",
]
