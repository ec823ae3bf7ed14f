"""
ExerciseCategory Model
Classifies exercises (e.g. "Strength", "Cardio", "Mobility").

Categories are shared reference data. Exercises point at their category
with ON DELETE RESTRICT, so a category cannot be removed while any
exercise still uses it; see workout_service.delete_exercise_category.
"""

from sqlalchemy import Column, String, Text

from fitness_tracker.models.base import BaseModel


class ExerciseCategory(BaseModel):
    """Exercise category reference data."""

    __tablename__ = "exercise_categories"

    name = Column(
        String(100),
        nullable=False,
        index=True,
        comment="Category name (e.g., 'Strength', 'Cardio')"
    )

    description = Column(
        Text,
        nullable=False,
        default="",
        comment="Free-text description of the category"
    )

    def __init__(self, name: str, description: str = ""):
        self.name = name
        self.description = description

    def __repr__(self):
        return f"<ExerciseCategory(name='{self.name}')>"
