"""
User Model
Represents a person's fitness profile and is the root of everything they log.

Each user has:
- Fixed profile data (height, date of birth, gender), validated once
- Adjustable settings (activity level, fitness goal)
- A cached daily calorie target
- Ordered histories of weight entries, body measurements, workout sessions
  and meals, all deleted together with the user

Derived metrics (age, BMI, BMR, calorie target) are computed from the
profile and the most recent weight entry; see services.health_metrics for
the formulas.
"""

from datetime import date
from typing import Optional

from sqlalchemy import Column, Date, Enum as SQLEnum, Integer, String
from sqlalchemy.ext.orderinglist import ordering_list
from sqlalchemy.orm import relationship, validates

from fitness_tracker.core.constants import (
    INCHES_PER_FOOT,
    MAX_HEIGHT_INCHES,
    MIN_HEIGHT_INCHES,
    VALID_GENDERS,
)
from fitness_tracker.core.enums import ActivityLevel, FitnessGoal
from fitness_tracker.core.exceptions import ValidationError
from fitness_tracker.models.base import BaseModel
from fitness_tracker.models.validation import (
    as_date,
    reject_reassignment,
    require_past,
    require_integer,
    require_positive,
    require_present,
    require_range,
    today,
)
from fitness_tracker.services import health_metrics


def _require_gender(value) -> str:
    if not isinstance(value, str) or value.lower() not in VALID_GENDERS:
        raise ValidationError("Gender must be either 'Male' or 'Female'.", "gender")
    return value


def _coerce_enum(enum_cls, value, field: str):
    try:
        return enum_cls(value)
    except ValueError:
        raise ValidationError(f"{field} must be one of {[e.value for e in enum_cls]}.", field) from None


class User(BaseModel):
    """
    User profile model and aggregate root.

    Fields:
        id (UUID): Primary key, inherited from BaseModel
        height_feet (int): Height, feet part (> 0), fixed
        height_inches (int): Height, inches part (0-11), fixed
        date_of_birth (date): Strictly in the past, fixed
        gender (str): "male" or "female" in any case, fixed
        activity_level (ActivityLevel): Scales BMR into TDEE
        goal (FitnessGoal): Adjusts TDEE into the calorie target
        calorie_target (int): Last value computed by update_calorie_target()

    Relationships (parent -> children only, cascade delete):
        weight_entries, body_measurements, workout_sessions, meals

    Example usage:
        user = User(5, 10, date(1994, 3, 2), FitnessGoal.WEIGHT_LOSS, "Male")
        user.add_weight_entry(WeightEntry(date.today(), 180))
        user.current_bmi           # 25.8...
        user.update_calorie_target()
    """

    __tablename__ = "users"

    # Profile (fixed after creation)
    height_feet = Column(Integer, nullable=False)
    height_inches = Column(Integer, nullable=False)
    date_of_birth = Column(Date, nullable=False)
    gender = Column(String(10), nullable=False)

    # Settings (adjustable)
    activity_level = Column(
        SQLEnum(ActivityLevel),
        default=ActivityLevel.SEDENTARY,
        nullable=False,
        comment="Activity level used for TDEE"
    )
    goal = Column(
        SQLEnum(FitnessGoal),
        nullable=False,
        comment="Fitness goal used for the calorie target"
    )

    calorie_target = Column(
        Integer,
        default=0,
        nullable=False,
        comment="Daily calorie target (kcal), 0 until a weight is recorded"
    )

    # Histories, in insertion order
    weight_entries = relationship(
        "WeightEntry",
        order_by="WeightEntry.position",
        collection_class=ordering_list("position"),
        cascade="all, delete-orphan",
    )
    body_measurements = relationship(
        "BodyMeasurement",
        order_by="BodyMeasurement.position",
        collection_class=ordering_list("position"),
        cascade="all, delete-orphan",
    )
    workout_sessions = relationship(
        "WorkoutSession",
        order_by="WorkoutSession.position",
        collection_class=ordering_list("position"),
        cascade="all, delete-orphan",
    )
    meals = relationship(
        "Meal",
        order_by="Meal.position",
        collection_class=ordering_list("position"),
        cascade="all, delete-orphan",
    )

    def __init__(
        self,
        height_feet: int,
        height_inches: int,
        date_of_birth: date,
        goal: FitnessGoal,
        gender: str,
        activity_level: ActivityLevel = ActivityLevel.SEDENTARY,
    ):
        require_past(date_of_birth, "date_of_birth")
        require_positive(require_integer(height_feet, "height_feet"), "height_feet")
        require_range(
            require_integer(height_inches, "height_inches"),
            MIN_HEIGHT_INCHES, MAX_HEIGHT_INCHES, "height_inches",
        )
        _require_gender(gender)
        goal = _coerce_enum(FitnessGoal, goal, "goal")
        activity_level = _coerce_enum(ActivityLevel, activity_level, "activity_level")

        self.height_feet = height_feet
        self.height_inches = height_inches
        self.date_of_birth = as_date(date_of_birth, "date_of_birth")
        self.gender = gender
        self.goal = goal
        self.activity_level = activity_level
        self.calorie_target = 0

    @validates("height_feet", "height_inches", "date_of_birth", "gender")
    def _validate_fixed(self, key, value):
        return reject_reassignment(self, key, value)

    @validates("goal")
    def _validate_goal(self, key, value):
        return _coerce_enum(FitnessGoal, value, key)

    @validates("activity_level")
    def _validate_activity_level(self, key, value):
        return _coerce_enum(ActivityLevel, value, key)

    # ------------------------------------------------------------------
    # Histories
    # ------------------------------------------------------------------

    def add_weight_entry(self, entry) -> None:
        self.weight_entries.append(require_present(entry, "entry"))

    def add_body_measurement(self, measurement) -> None:
        self.body_measurements.append(require_present(measurement, "measurement"))

    def add_workout_session(self, session) -> None:
        self.workout_sessions.append(require_present(session, "session"))

    def add_meal(self, meal) -> None:
        self.meals.append(require_present(meal, "meal"))

    # ------------------------------------------------------------------
    # Derived metrics
    # ------------------------------------------------------------------

    @property
    def total_height_inches(self) -> int:
        return self.height_feet * INCHES_PER_FOOT + self.height_inches

    def age_on(self, day: date) -> int:
        """Whole years between date of birth and `day`."""
        age = day.year - self.date_of_birth.year
        if (day.month, day.day) < (self.date_of_birth.month, self.date_of_birth.day):
            age -= 1
        return age

    @property
    def age(self) -> int:
        """Current age, one less if this year's birthday is still ahead."""
        return self.age_on(today())

    @property
    def current_weight(self) -> Optional[float]:
        """Weight of the most recent entry, or None without entries."""
        if not self.weight_entries:
            return None
        return self.weight_entries[-1].weight

    def calculate_bmi(self, weight: float) -> float:
        """
        BMI for a given weight in pounds at this user's height.

        Raises:
            ValidationError: weight <= 0
            InvalidStateError: total height <= 0
        """
        return health_metrics.bmi(weight, self.total_height_inches)

    @property
    def current_bmi(self) -> Optional[float]:
        weight = self.current_weight
        return self.calculate_bmi(weight) if weight is not None else None

    def calculate_bmr(self) -> Optional[float]:
        """Mifflin-St Jeor BMR from the latest weight, or None without entries."""
        weight = self.current_weight
        if weight is None:
            return None
        return health_metrics.mifflin_st_jeor_bmr(
            weight, self.total_height_inches, self.age, self.gender
        )

    def update_calorie_target(self) -> int:
        """
        Recompute and store calorie_target.

        Sets 0 when BMR is unavailable (no weight recorded).

        Returns:
            int: The new calorie target
        """
        bmr = self.calculate_bmr()
        if bmr is None:
            self.calorie_target = 0
        else:
            self.calorie_target = health_metrics.calorie_target(bmr, self.activity_level, self.goal)
        return self.calorie_target

    def __repr__(self):
        """String representation for debugging."""
        return f"<User(id={self.id}, goal={self.goal}, calorie_target={self.calorie_target})>"
