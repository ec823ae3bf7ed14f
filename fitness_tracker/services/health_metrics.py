"""
Health Metrics Service
Closed-form formulas behind the user profile metrics.

This module contains the arithmetic for:
    - BMI from weight (lb) and height (in), imperial formula
    - BMR with the Mifflin-St Jeor equation (metric units)
    - TDEE from BMR and activity level
    - Daily calorie target from TDEE and fitness goal

Inputs are imperial, because that is how the profile stores them; the
BMR formula works in kg and cm, so conversions happen here.

Example:
    bmr = mifflin_st_jeor_bmr(weight_lb=180, height_in=70, age=30, gender="male")
    target = calorie_target(bmr, ActivityLevel.SEDENTARY, FitnessGoal.WEIGHT_LOSS)
"""

from fitness_tracker.core.constants import (
    BMI_IMPERIAL_FACTOR,
    BMR_AGE_COEFFICIENT,
    BMR_FEMALE_OFFSET,
    BMR_HEIGHT_COEFFICIENT,
    BMR_MALE_OFFSET,
    BMR_WEIGHT_COEFFICIENT,
    GENDER_MALE,
    INCH_TO_CM,
    LB_TO_KG,
    MUSCLE_GAIN_SURPLUS,
    WEIGHT_LOSS_DEFICIT,
)
from fitness_tracker.core.enums import ActivityLevel, FitnessGoal
from fitness_tracker.core.exceptions import InvalidStateError, ValidationError


# Activity multipliers (BMR -> TDEE)
ACTIVITY_MULTIPLIERS = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHTLY_ACTIVE: 1.375,
    ActivityLevel.MODERATELY_ACTIVE: 1.55,
    ActivityLevel.VERY_ACTIVE: 1.725,
    ActivityLevel.EXTREMELY_ACTIVE: 1.9,
}

# Goal adjustments (kcal added to TDEE); goals not listed keep TDEE as is
GOAL_ADJUSTMENTS = {
    FitnessGoal.WEIGHT_LOSS: -WEIGHT_LOSS_DEFICIT,
    FitnessGoal.MUSCLE_GAIN: MUSCLE_GAIN_SURPLUS,
}


def bmi(weight_lb: float, height_in: float) -> float:
    """
    Calculate Body Mass Index with the imperial formula.

    BMI = weight / height² × 703

    Args:
        weight_lb: Weight in pounds (must be > 0)
        height_in: Total height in inches

    Returns:
        float: BMI value

    Raises:
        ValidationError: weight is zero or negative
        InvalidStateError: height is zero or negative (BMI undefined)
    """
    if weight_lb <= 0:
        raise ValidationError("Weight must be greater than zero.", "weight")
    if height_in <= 0:
        raise InvalidStateError("Height must be greater than zero to calculate BMI.")
    return (weight_lb / (height_in * height_in)) * BMI_IMPERIAL_FACTOR


def mifflin_st_jeor_bmr(weight_lb: float, height_in: float, age: int, gender: str) -> float:
    """
    Calculate Basal Metabolic Rate (kcal/day) with the Mifflin-St Jeor formula.

    Male:   BMR = 10 × kg + 6.25 × cm − 5 × age + 5
    Female: BMR = 10 × kg + 6.25 × cm − 5 × age − 161

    Args:
        weight_lb: Weight in pounds
        height_in: Total height in inches
        age: Age in whole years
        gender: "male" or "female", any case; anything not male uses the female offset

    Returns:
        float: BMR in kcal/day
    """
    weight_kg = weight_lb * LB_TO_KG
    height_cm = height_in * INCH_TO_CM

    offset = BMR_MALE_OFFSET if gender.lower() == GENDER_MALE else BMR_FEMALE_OFFSET
    return (
        (BMR_WEIGHT_COEFFICIENT * weight_kg)
        + (BMR_HEIGHT_COEFFICIENT * height_cm)
        - (BMR_AGE_COEFFICIENT * age)
        + offset
    )


def activity_multiplier(level: ActivityLevel) -> float:
    """Multiplier for the activity level; unknown levels fall back to sedentary."""
    return ACTIVITY_MULTIPLIERS.get(level, ACTIVITY_MULTIPLIERS[ActivityLevel.SEDENTARY])


def tdee(bmr: float, level: ActivityLevel) -> float:
    """Total Daily Energy Expenditure: BMR scaled by activity level."""
    return bmr * activity_multiplier(level)


def calorie_target(bmr: float, level: ActivityLevel, goal: FitnessGoal) -> int:
    """
    Daily calorie target for a goal.

    Weight loss subtracts a 500 kcal deficit, muscle gain adds a 300 kcal
    surplus, every other goal keeps TDEE. The result is truncated toward
    zero.

    Example:
        calorie_target(1700, ActivityLevel.SEDENTARY, FitnessGoal.WEIGHT_LOSS)  # 1540
    """
    return int(tdee(bmr, level) + GOAL_ADJUSTMENTS.get(goal, 0))
