"""Tests for weight entries and body measurements."""

from datetime import date, timedelta

import pytest

from fitness_tracker.core.exceptions import InvalidStateError, ValidationError
from fitness_tracker.models import BodyMeasurement, WeightEntry


TOMORROW = date.today() + timedelta(days=1)


def make_measurement(**overrides) -> BodyMeasurement:
    fields = {
        "measurement_date": date.today(),
        "waist_size": 32,
        "hip_size": 38,
        "chest_size": 40,
        "arm_size": 14,
        "thigh_size": 22,
    }
    fields.update(overrides)
    return BodyMeasurement(**fields)


# ============================================================================
# WEIGHT ENTRY
# ============================================================================

def test_weight_entry_defaults_body_fat_to_zero() -> None:
    entry = WeightEntry(date.today(), 180.5)

    assert entry.weight == 180.5
    assert entry.body_fat_percentage == 0


@pytest.mark.parametrize(
    ("entry_date", "weight", "body_fat"),
    [
        (date.today(), 0, 10),
        (date.today(), -1, 10),
        (date.today(), 180, -0.1),
        (date.today(), 180, 101),
        (TOMORROW, 180, 10),
    ],
)
def test_weight_entry_rejects_invalid_values(entry_date, weight, body_fat) -> None:
    with pytest.raises(ValidationError):
        WeightEntry(entry_date, weight, body_fat)


@pytest.mark.parametrize("body_fat", [0, 100])
def test_weight_entry_body_fat_bounds_are_inclusive(body_fat) -> None:
    assert WeightEntry(date.today(), 180, body_fat).body_fat_percentage == body_fat


def test_weight_entry_assignments_are_validated() -> None:
    entry = WeightEntry(date.today(), 180, 20)

    entry.weight = 175
    entry.body_fat_percentage = 18.5

    with pytest.raises(ValidationError):
        entry.weight = 0
    with pytest.raises(ValidationError):
        entry.body_fat_percentage = 150

    assert entry.weight == 175
    assert entry.body_fat_percentage == 18.5


def test_weight_entry_date_is_fixed() -> None:
    entry = WeightEntry(date(2024, 1, 8), 180)

    with pytest.raises(InvalidStateError):
        entry.entry_date = date(2024, 1, 9)

    assert entry.entry_date == date(2024, 1, 8)


def test_weight_entry_rejects_non_numeric_weight() -> None:
    with pytest.raises(ValidationError):
        WeightEntry(date.today(), "180")
    with pytest.raises(ValidationError):
        WeightEntry(date.today(), True)


# ============================================================================
# BODY MEASUREMENT
# ============================================================================

def test_body_measurement_stores_sizes() -> None:
    measurement = make_measurement()

    assert measurement.measurement_date == date.today()
    assert measurement.waist_size == 32
    assert measurement.hip_size == 38
    assert measurement.chest_size == 40
    assert measurement.arm_size == 14
    assert measurement.thigh_size == 22


@pytest.mark.parametrize("field", ["waist_size", "hip_size", "chest_size", "arm_size", "thigh_size"])
def test_body_measurement_rejects_non_positive_size(field) -> None:
    with pytest.raises(ValidationError) as exc_info:
        make_measurement(**{field: 0})

    assert exc_info.value.field == field


def test_body_measurement_rejects_future_date() -> None:
    with pytest.raises(ValidationError):
        make_measurement(measurement_date=TOMORROW)


def test_body_measurement_size_assignment_is_validated() -> None:
    measurement = make_measurement()

    measurement.waist_size = 31.5
    with pytest.raises(ValidationError):
        measurement.arm_size = -2

    assert measurement.waist_size == 31.5
    assert measurement.arm_size == 14


def test_body_measurement_date_is_fixed() -> None:
    measurement = make_measurement()

    with pytest.raises(InvalidStateError):
        measurement.measurement_date = date(2020, 1, 1)


@pytest.mark.parametrize("weight", [float("nan"), float("inf"), float("-inf")])
def test_weight_entry_rejects_non_finite_weight(weight) -> None:
    with pytest.raises(ValidationError):
        WeightEntry(date.today(), weight)


def test_weight_entry_rejects_non_finite_assignment() -> None:
    entry = WeightEntry(date.today(), 180, 20)

    with pytest.raises(ValidationError):
        entry.weight = float("nan")
    with pytest.raises(ValidationError):
        entry.body_fat_percentage = float("nan")

    assert entry.weight == 180
    assert entry.body_fat_percentage == 20


@pytest.mark.parametrize("size", [float("nan"), float("inf")])
def test_body_measurement_rejects_non_finite_size(size) -> None:
    with pytest.raises(ValidationError):
        make_measurement(waist_size=size)
