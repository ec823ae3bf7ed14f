"""
Profile Enumerations
Enumerated profile attributes shared by the User model and the metrics service.
"""

import enum


class ActivityLevel(str, enum.Enum):
    """Activity level of a user, used to scale BMR into TDEE."""
    SEDENTARY = "sedentary"  # Little/no exercise
    LIGHTLY_ACTIVE = "lightly_active"  # 1-3 days/week
    MODERATELY_ACTIVE = "moderately_active"  # 3-5 days/week
    VERY_ACTIVE = "very_active"  # 6-7 days/week
    EXTREMELY_ACTIVE = "extremely_active"  # Athlete/physical job


class FitnessGoal(str, enum.Enum):
    """Fitness goal of a user's training program."""
    WEIGHT_LOSS = "weight_loss"
    MUSCLE_GAIN = "muscle_gain"
    ENDURANCE = "endurance"
    STRENGTH = "strength"
    MAINTENANCE = "maintenance"
    GENERAL_FITNESS = "general_fitness"
