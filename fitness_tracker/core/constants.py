"""
Application Constants
Defines constant values used throughout the application.

This module contains:
- Unit conversion factors (imperial input, metric formulas)
- Mifflin-St Jeor coefficients
- Goal calorie adjustments
- Accepted gender values and body-fat bounds
"""

# Unit Conversions
LB_TO_KG = 0.453592  # 1 pound in kilograms
INCH_TO_CM = 2.54  # 1 inch in centimeters
INCHES_PER_FOOT = 12

# BMI (imperial formula)
BMI_IMPERIAL_FACTOR = 703  # BMI = weight_lb / height_in^2 * 703

# Mifflin-St Jeor BMR Formula
BMR_WEIGHT_COEFFICIENT = 10  # per kg
BMR_HEIGHT_COEFFICIENT = 6.25  # per cm
BMR_AGE_COEFFICIENT = 5  # per year
BMR_MALE_OFFSET = 5
BMR_FEMALE_OFFSET = -161

# Goal adjustments applied to TDEE (kcal/day)
WEIGHT_LOSS_DEFICIT = 500
MUSCLE_GAIN_SURPLUS = 300

# Gender values accepted by the BMR formula (compared case-insensitively)
GENDER_MALE = "male"
GENDER_FEMALE = "female"

VALID_GENDERS = [GENDER_MALE, GENDER_FEMALE]

# Height bounds
MIN_HEIGHT_INCHES = 0
MAX_HEIGHT_INCHES = 11

# Body fat percentage bounds (inclusive)
MIN_BODY_FAT_PERCENTAGE = 0
MAX_BODY_FAT_PERCENTAGE = 100

# Label used in meal summaries when a food item has no food attached
UNKNOWN_FOOD_NAME = "Unknown"
