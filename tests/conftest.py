"""Shared test fixtures."""

from datetime import date, timedelta

import pytest
from sqlalchemy.orm import sessionmaker

from fitness_tracker.core.enums import ActivityLevel, FitnessGoal
from fitness_tracker.db.session import build_engine, init_db
from fitness_tracker.models import ExerciseCategory, Food, User


def years_before(day: date, years: int) -> date:
    """Same calendar day `years` earlier (Feb 29 falls back to Feb 28)."""
    try:
        return day.replace(year=day.year - years)
    except ValueError:
        return day.replace(year=day.year - years, day=28)


def age_exactly(years: int) -> date:
    """Date of birth for someone who turns `years` today minus one day."""
    return years_before(date.today(), years) - timedelta(days=1)


@pytest.fixture
def engine():
    engine = build_engine("sqlite://")
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def user() -> User:
    return User(
        height_feet=5,
        height_inches=10,
        date_of_birth=age_exactly(30),
        goal=FitnessGoal.MAINTENANCE,
        gender="Male",
        activity_level=ActivityLevel.SEDENTARY,
    )


@pytest.fixture
def strength() -> ExerciseCategory:
    return ExerciseCategory("Strength", "Resistance training")


@pytest.fixture
def oats() -> Food:
    return Food(
        "Oats",
        serving_size=40,
        calories_per_serving=150,
        protein_per_serving=5,
        carbohydrates_per_serving=27,
        fats_per_serving=3,
    )


@pytest.fixture
def milk() -> Food:
    return Food(
        "Milk",
        serving_size=240,
        calories_per_serving=122,
        protein_per_serving=8.1,
        carbohydrates_per_serving=11.7,
        fats_per_serving=4.8,
    )
