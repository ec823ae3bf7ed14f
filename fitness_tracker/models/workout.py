"""
Workout Models
Workout sessions, their exercises and the sets performed for each exercise.

Hierarchy (each level owns the next, deletes cascade downward):

    WorkoutSession
      └── Exercise  (references one ExerciseCategory)
            └── ExerciseSet  (set_number unique within the exercise)

Collections keep insertion order through a `position` column maintained by
ordering_list, so a session reloaded from the database lists exercises and
sets in the order they were logged.
"""

from typing import Optional

from sqlalchemy import Column, Date, Float, ForeignKey, Integer, String, Uuid
from sqlalchemy.ext.orderinglist import ordering_list
from sqlalchemy.orm import relationship, validates

from fitness_tracker.core.exceptions import DuplicateKeyError
from fitness_tracker.models.base import BaseModel
from fitness_tracker.models.validation import (
    as_date,
    reject_reassignment,
    require_integer,
    require_not_future,
    require_positive,
    require_present,
)


class WorkoutSession(BaseModel):
    """
    A training session on a given day.

    Example:
        session = WorkoutSession(date.today())
        bench = Exercise("Bench Press", strength)
        bench.add_set(1, weight=135, reps=10)
        session.add_exercise(bench)
        user.add_workout_session(session)
    """

    __tablename__ = "workout_sessions"

    user_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="User who performed this session"
    )

    position = Column(Integer, nullable=False, default=0)

    session_date = Column(Date, nullable=False, index=True)

    exercises = relationship(
        "Exercise",
        order_by="Exercise.position",
        collection_class=ordering_list("position"),
        cascade="all, delete-orphan",
    )

    def __init__(self, session_date, exercises=None):
        require_not_future(session_date, "session_date")
        exercises = list(exercises or [])
        for exercise in exercises:
            require_present(exercise, "exercise")

        self.session_date = as_date(session_date, "session_date")
        for exercise in exercises:
            self.exercises.append(exercise)

    @validates("session_date")
    def _validate_session_date(self, key, value):
        return reject_reassignment(self, key, value)

    def add_exercise(self, exercise: "Exercise") -> None:
        self.exercises.append(require_present(exercise, "exercise"))

    def __repr__(self):
        return f"<WorkoutSession(user_id={self.user_id}, session_date={self.session_date})>"


class Exercise(BaseModel):
    """
    One exercise within a workout session, with its sets.

    Set numbers are unique within an exercise. Lookups by set number that
    find nothing (update_set, remove_set) are no-ops.
    """

    __tablename__ = "exercises"

    workout_session_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("workout_sessions.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    # Category is shared reference data: deleting a used category must fail
    exercise_category_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("exercise_categories.id", ondelete="RESTRICT"),
        nullable=False,
        index=True
    )

    position = Column(Integer, nullable=False, default=0)

    name = Column(String(255), nullable=False)

    category = relationship("ExerciseCategory")

    sets = relationship(
        "ExerciseSet",
        order_by="ExerciseSet.position",
        collection_class=ordering_list("position"),
        cascade="all, delete-orphan",
    )

    def __init__(self, name: str, category):
        require_present(category, "category")
        self.name = name
        self.category = category

    def get_set(self, set_number: int) -> Optional["ExerciseSet"]:
        """Return the set with this number, or None."""
        return next((s for s in self.sets if s.set_number == set_number), None)

    def add_set(self, set_number: int, weight: float, reps: int) -> "ExerciseSet":
        """
        Append a new set.

        Raises:
            DuplicateKeyError: set_number already used in this exercise
            ValidationError: set_number, weight or reps not positive
        """
        if self.get_set(set_number) is not None:
            raise DuplicateKeyError(f"Set number {set_number} already exists.")

        exercise_set = ExerciseSet(set_number, weight, reps)
        self.sets.append(exercise_set)
        return exercise_set

    def update_set(self, set_number: int, weight: float, reps: int) -> None:
        """
        Overwrite weight and repetitions of an existing set.

        Both values are checked before either is written, so a rejected
        update leaves the set unchanged.
        """
        exercise_set = self.get_set(set_number)
        if exercise_set is None:
            return

        require_positive(weight, "weight")
        require_positive(require_integer(reps, "repetitions"), "repetitions")
        exercise_set.weight = weight
        exercise_set.repetitions = reps

    def remove_set(self, set_number: int) -> None:
        exercise_set = self.get_set(set_number)
        if exercise_set is not None:
            self.sets.remove(exercise_set)

    def __repr__(self):
        return f"<Exercise(name='{self.name}', sets={len(self.sets)})>"


class ExerciseSet(BaseModel):
    """A single set: set number, load in pounds and repetitions."""

    __tablename__ = "exercise_sets"

    exercise_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("exercises.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    position = Column(Integer, nullable=False, default=0)

    set_number = Column(Integer, nullable=False)
    weight = Column(Float, nullable=False, comment="Load in pounds")
    repetitions = Column(Integer, nullable=False)

    def __init__(self, set_number: int, weight: float, repetitions: int):
        require_positive(require_integer(set_number, "set_number"), "set_number")
        require_positive(weight, "weight")
        require_positive(require_integer(repetitions, "repetitions"), "repetitions")

        self.set_number = set_number
        self.weight = weight
        self.repetitions = repetitions

    # Fixed after creation: Exercise looks sets up by number
    @validates("set_number")
    def _validate_set_number(self, key, value):
        return reject_reassignment(self, key, value)

    @validates("weight")
    def _validate_weight(self, key, value):
        return require_positive(value, key)

    @validates("repetitions")
    def _validate_repetitions(self, key, value):
        return require_positive(require_integer(value, key), key)

    def __repr__(self):
        return (
            f"<ExerciseSet(set_number={self.set_number}, weight={self.weight}, "
            f"repetitions={self.repetitions})>"
        )
