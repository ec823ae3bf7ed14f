"""
Workout Service
Business logic for exercise categories and workout sessions.

Categories are shared reference data: they can be created freely but only
deleted once no exercise refers to them. delete_exercise_category raises
RestrictedDeleteError in that case; the database enforces the same rule
with ON DELETE RESTRICT.
"""

import logging
from datetime import date
from typing import Iterable, Optional
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from fitness_tracker.core.exceptions import RestrictedDeleteError
from fitness_tracker.models.exercise_category import ExerciseCategory
from fitness_tracker.models.user import User
from fitness_tracker.models.workout import Exercise, WorkoutSession

logger = logging.getLogger(__name__)


# ============================================================================
# EXERCISE CATEGORIES
# ============================================================================

def create_exercise_category(db: Session, name: str, description: str = "") -> ExerciseCategory:
    """Create and persist an exercise category."""
    category = ExerciseCategory(name, description)

    db.add(category)
    db.commit()

    logger.info("Created exercise category '%s' (%s)", category.name, category.id)
    return category


def get_exercise_category(db: Session, category_id: UUID) -> Optional[ExerciseCategory]:
    return db.get(ExerciseCategory, category_id)


def count_exercises_in_category(db: Session, category_id: UUID) -> int:
    """Number of exercises referencing a category."""
    db.flush()
    return db.scalar(
        select(func.count(Exercise.id)).where(Exercise.exercise_category_id == category_id)
    )


def delete_exercise_category(db: Session, category_id: UUID) -> bool:
    """
    Delete an exercise category that no exercise uses.

    Returns:
        bool: True if deleted, False if not found

    Raises:
        RestrictedDeleteError: one or more exercises still reference it
    """
    category = get_exercise_category(db, category_id)
    if not category:
        return False

    in_use = count_exercises_in_category(db, category_id)
    if in_use:
        logger.warning(
            "Refused to delete exercise category '%s': used by %d exercise(s)",
            category.name, in_use,
        )
        raise RestrictedDeleteError(
            f"Exercise category '{category.name}' is used by {in_use} exercise(s)."
        )

    db.delete(category)
    db.commit()

    logger.info("Deleted exercise category %s", category_id)
    return True


# ============================================================================
# WORKOUT SESSIONS
# ============================================================================

def log_workout_session(
    db: Session,
    user: User,
    session_date: date,
    exercises: Optional[Iterable[Exercise]] = None,
) -> WorkoutSession:
    """
    Append a workout session, with its exercises and sets, to the user's history.

    Example:
        squat = Exercise("Back Squat", strength)
        squat.add_set(1, weight=225, reps=5)
        log_workout_session(db, user, date.today(), [squat])
    """
    session = WorkoutSession(session_date, exercises)
    user.add_workout_session(session)

    db.commit()

    logger.info(
        "Logged workout session for user %s with %d exercise(s)",
        user.id, len(session.exercises),
    )
    return session


def delete_workout_session(db: Session, session_id: UUID) -> bool:
    """Delete a workout session together with its exercises and sets."""
    session = db.get(WorkoutSession, session_id)
    if not session:
        return False

    db.delete(session)
    db.commit()

    logger.info("Deleted workout session %s", session_id)
    return True
