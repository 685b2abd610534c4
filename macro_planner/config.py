"""Application configuration and constants."""

import os

# Logging
LOG_LEVEL = os.environ.get("MACRO_PLANNER_LOG_LEVEL", "WARNING")
LOG_JSON = os.environ.get("MACRO_PLANNER_LOG_JSON", "0") == "1"

# Unit conversion (full precision, nothing is rounded before the result)
LBS_PER_KG = 2.20462262185
CM_PER_INCH = 2.54
INCHES_PER_FOOT = 12

# Harris-Benedict equation, imperial form (lbs, inches, years)
HARRIS_BENEDICT_COEFFICIENTS = {
    "male": {"base": 66.473, "weight": 6.23762, "height": 12.7084, "age": 6.755},
    "female": {"base": 655.0955, "weight": 4.33789, "height": 4.69798, "age": 4.6756},
}

# Activity level multipliers for TDEE calculation
ACTIVITY_MULTIPLIERS = {
    "sedentary": 1.2,
    "lightly_active": 1.375,
    "moderately_active": 1.55,
    "very_active": 1.725,
    "extra_active": 1.9,
}

ACTIVITY_DESCRIPTIONS = {
    "sedentary": "Little or no exercise",
    "lightly_active": "Light exercise 1-3 days/week",
    "moderately_active": "Moderate exercise 3-5 days/week",
    "very_active": "Hard exercise 6-7 days/week",
    "extra_active": "Very intense exercise",
}

# Goal-based calorie adjustments (kcal added to TDEE)
GOAL_CALORIE_ADJUSTMENTS = {
    "lose_weight": -500,
    "maintain": 0,
    "gain_weight": 500,
}

# Macro calorie multipliers (calories per gram)
CALORIES_PER_GRAM = {
    "protein": 4,
    "carbs": 4,
    "fat": 9,
}

# Form defaults
DEFAULT_MACRO_SPLIT = {"protein": 40, "carbs": 40, "fat": 20}
DEFAULT_WEIGHT_UNIT = "kg"
DEFAULT_HEIGHT_UNIT = "ft"
DEFAULT_GENDER = "male"
DEFAULT_ACTIVITY_LEVEL = "sedentary"
DEFAULT_GOAL = "lose_weight"

# Recommended macro ranges in percent, as (low, high)
MACRO_RECOMMENDATIONS = {
    "male": {
        "lose_weight": {"protein": (30, 30), "carbs": (40, 40), "fat": (30, 30)},
        "gain_weight": {"protein": (20, 30), "carbs": (50, 60), "fat": (20, 30)},
        "maintain": {"protein": (25, 30), "carbs": (55, 60), "fat": (15, 20)},
    },
    "female": {
        "lose_weight": {"protein": (25, 35), "carbs": (40, 50), "fat": (20, 30)},
        "gain_weight": {"protein": (25, 35), "carbs": (45, 55), "fat": (20, 30)},
        "maintain": {"protein": (25, 30), "carbs": (50, 55), "fat": (20, 25)},
    },
}

DISCLAIMER = (
    "DISCLAIMER: This calculator is for informational purposes only. The "
    "information provided is not medical advice and should not be used as a "
    "substitute for professional medical guidance. Always consult with a "
    "healthcare provider or registered dietitian before starting any diet or "
    "exercise program. By using this calculator, you acknowledge that the "
    "creator assumes no responsibility or liability for any consequences "
    "resulting from the use of this tool."
)
