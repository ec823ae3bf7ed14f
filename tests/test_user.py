"""Tests for the user profile and its derived metrics."""

from datetime import date, datetime, timedelta

import pytest

from fitness_tracker.core.enums import ActivityLevel, FitnessGoal
from fitness_tracker.core.exceptions import InvalidStateError, NullReferenceError, ValidationError
from fitness_tracker.models import User, WeightEntry
from tests.conftest import age_exactly, years_before


def make_user(**overrides) -> User:
    fields = {
        "height_feet": 5,
        "height_inches": 10,
        "date_of_birth": age_exactly(30),
        "goal": FitnessGoal.MAINTENANCE,
        "gender": "male",
    }
    fields.update(overrides)
    return User(**fields)


# ============================================================================
# CONSTRUCTION
# ============================================================================

def test_user_defaults() -> None:
    user = make_user()

    assert user.activity_level is ActivityLevel.SEDENTARY
    assert user.calorie_target == 0
    assert user.weight_entries == []
    assert user.meals == []


@pytest.mark.parametrize("dob", [date.today(), date.today() + timedelta(days=1)])
def test_user_rejects_date_of_birth_not_in_past(dob) -> None:
    with pytest.raises(ValidationError) as exc_info:
        make_user(date_of_birth=dob)

    assert exc_info.value.field == "date_of_birth"


def test_user_accepts_yesterday_as_date_of_birth() -> None:
    user = make_user(date_of_birth=date.today() - timedelta(days=1))

    assert user.age == 0


@pytest.mark.parametrize(
    ("feet", "inches"),
    [(0, 5), (-1, 5), (5, -1), (5, 12)],
)
def test_user_rejects_invalid_height(feet, inches) -> None:
    with pytest.raises(ValidationError):
        make_user(height_feet=feet, height_inches=inches)


@pytest.mark.parametrize("inches", [0, 11])
def test_user_accepts_inch_bounds(inches) -> None:
    assert make_user(height_inches=inches).height_inches == inches


@pytest.mark.parametrize("gender", ["Male", "FEMALE", "female"])
def test_user_gender_is_case_insensitive(gender) -> None:
    assert make_user(gender=gender).gender == gender


@pytest.mark.parametrize("gender", ["", "   ", "other", " male", None])
def test_user_rejects_unknown_gender(gender) -> None:
    with pytest.raises(ValidationError):
        make_user(gender=gender)


def test_user_goal_accepts_enum_value_string() -> None:
    user = make_user(goal="muscle_gain")

    assert user.goal is FitnessGoal.MUSCLE_GAIN


def test_user_rejects_unknown_goal() -> None:
    with pytest.raises(ValidationError):
        make_user(goal="bulk")


def test_user_profile_fields_are_fixed_after_creation() -> None:
    user = make_user()

    with pytest.raises(InvalidStateError):
        user.height_feet = 6
    with pytest.raises(InvalidStateError):
        user.date_of_birth = date(1990, 1, 1)
    with pytest.raises(InvalidStateError):
        user.gender = "female"

    assert user.height_feet == 5
    assert user.gender == "male"


def test_user_goal_and_activity_level_stay_mutable() -> None:
    user = make_user()

    user.goal = FitnessGoal.STRENGTH
    user.activity_level = ActivityLevel.VERY_ACTIVE

    assert user.goal is FitnessGoal.STRENGTH
    assert user.activity_level is ActivityLevel.VERY_ACTIVE


def test_add_history_rejects_none() -> None:
    user = make_user()

    with pytest.raises(NullReferenceError):
        user.add_weight_entry(None)
    with pytest.raises(NullReferenceError):
        user.add_meal(None)


# ============================================================================
# AGE
# ============================================================================

def test_age_born_thirty_years_and_one_day_ago() -> None:
    assert make_user(date_of_birth=age_exactly(30)).age == 30


def test_age_before_birthday_this_year() -> None:
    tomorrow = date.today() + timedelta(days=1)
    user = make_user(date_of_birth=years_before(tomorrow, 25))

    assert user.age == 24


@pytest.mark.parametrize(
    ("day", "expected"),
    [
        (date(2024, 3, 14), 33),
        (date(2024, 3, 15), 34),
        (date(2024, 12, 31), 34),
    ],
)
def test_age_on_reference_day(day, expected) -> None:
    user = make_user(date_of_birth=date(1990, 3, 15))

    assert user.age_on(day) == expected


def test_age_for_leap_day_birthday() -> None:
    user = make_user(date_of_birth=date(2000, 2, 29))

    assert user.age_on(date(2025, 2, 28)) == 24
    assert user.age_on(date(2025, 3, 1)) == 25


# ============================================================================
# WEIGHT-DERIVED METRICS
# ============================================================================

def test_metrics_absent_without_weight_entries() -> None:
    user = make_user(goal=FitnessGoal.WEIGHT_LOSS)
    user.calorie_target = 1800

    assert user.current_weight is None
    assert user.current_bmi is None
    assert user.calculate_bmr() is None
    assert user.update_calorie_target() == 0
    assert user.calorie_target == 0


def test_current_weight_is_last_entry_not_latest_date() -> None:
    user = make_user()
    user.add_weight_entry(WeightEntry(date.today(), 200))
    user.add_weight_entry(WeightEntry(date.today() - timedelta(days=30), 190))

    assert user.current_weight == 190


def test_calculate_bmi() -> None:
    user = make_user()

    assert user.calculate_bmi(180) == pytest.approx(180 / 70**2 * 703)


def test_calculate_bmi_rejects_non_positive_weight() -> None:
    with pytest.raises(ValidationError):
        make_user().calculate_bmi(0)


def test_current_bmi_uses_latest_weight() -> None:
    user = make_user(height_feet=6, height_inches=0)
    user.add_weight_entry(WeightEntry(date.today(), 200))

    assert user.current_bmi == pytest.approx(200 / 72**2 * 703)


def test_calculate_bmr_male() -> None:
    user = make_user(date_of_birth=age_exactly(30), gender="Male")
    user.add_weight_entry(WeightEntry(date.today(), 180))

    expected = 10 * (180 * 0.453592) + 6.25 * (70 * 2.54) - 5 * 30 + 5
    assert user.calculate_bmr() == pytest.approx(expected, abs=1e-6)


def test_calculate_bmr_female() -> None:
    user = make_user(height_feet=5, height_inches=4, date_of_birth=age_exactly(40), gender="female")
    user.add_weight_entry(WeightEntry(date.today(), 140))

    expected = 10 * (140 * 0.453592) + 6.25 * (64 * 2.54) - 5 * 40 - 161
    assert user.calculate_bmr() == pytest.approx(expected, abs=1e-6)


@pytest.mark.parametrize(
    ("goal", "adjustment"),
    [
        (FitnessGoal.WEIGHT_LOSS, -500),
        (FitnessGoal.MUSCLE_GAIN, 300),
        (FitnessGoal.MAINTENANCE, 0),
        (FitnessGoal.ENDURANCE, 0),
    ],
)
def test_update_calorie_target(goal, adjustment) -> None:
    user = make_user(goal=goal, activity_level=ActivityLevel.MODERATELY_ACTIVE)
    user.add_weight_entry(WeightEntry(date.today(), 180))

    target = user.update_calorie_target()

    assert target == int(user.calculate_bmr() * 1.55 + adjustment)
    assert user.calorie_target == target


def test_user_accepts_datetime_date_of_birth() -> None:
    user = make_user(date_of_birth=datetime(1990, 6, 1, 8, 30))

    assert user.date_of_birth == date(1990, 6, 1)


@pytest.mark.parametrize(("feet", "inches"), [(5.5, 10), (5, 10.5), (5.0, 10), (True, 10)])
def test_user_height_must_be_whole_numbers(feet, inches) -> None:
    with pytest.raises(ValidationError):
        make_user(height_feet=feet, height_inches=inches)
