"""Macro calculation engine.

Uses:
- Harris-Benedict equation (imperial form) for Basal Metabolic Rate (BMR)
- Activity multipliers for Total Daily Energy Expenditure (TDEE)
- A fixed goal adjustment of -500 / 0 / +500 kcal
- Atwater factors (4/4/9 kcal per gram) to turn calories into grams

Every function here is pure; the same input always gives the same output.
"""

from decimal import ROUND_HALF_UP, Decimal

import structlog

from macro_planner.config import (
    ACTIVITY_MULTIPLIERS,
    CALORIES_PER_GRAM,
    GOAL_CALORIE_ADJUSTMENTS,
    HARRIS_BENEDICT_COEFFICIENTS,
)
from macro_planner.errors import DomainError
from macro_planner.models import MacroBreakdown, MacroResult, MacroSplit, ProfileInput
from macro_planner.units import height_to_inches, weight_to_pounds
from macro_planner.validation import validate_profile

log = structlog.get_logger(__name__)


def round_half_away(value: float, places: int = 0) -> float:
    """Round to ``places`` decimals, ties away from zero.

    Works on the shortest repr of the float, so 0.25 rounds to 0.3 and
    -2.5 to -3.0 (builtin round() gives 0.2 and -2.0).
    """
    exponent = Decimal(1).scaleb(-places)
    return float(Decimal(repr(float(value))).quantize(exponent, rounding=ROUND_HALF_UP))


def _lookup(table: dict, field: str, key):
    try:
        return table[key]
    except KeyError:
        raise DomainError(field, key, table.keys()) from None


def calculate_bmr(weight_lbs: float, height_in: float, age: int, gender) -> float:
    """Calculate Basal Metabolic Rate using the Harris-Benedict equation.

    Male:   BMR = 66.473 + 6.23762 × weight(lb) + 12.7084 × height(in) − 6.755 × age(y)
    Female: BMR = 655.0955 + 4.33789 × weight(lb) + 4.69798 × height(in) − 4.6756 × age(y)
    """
    c = _lookup(HARRIS_BENEDICT_COEFFICIENTS, "gender", gender)
    return c["base"] + c["weight"] * weight_lbs + c["height"] * height_in - c["age"] * age


def calculate_tdee(bmr: float, activity_level) -> float:
    """Calculate Total Daily Energy Expenditure.

    TDEE = BMR × activity multiplier
    """
    return bmr * _lookup(ACTIVITY_MULTIPLIERS, "activity_level", activity_level)


def apply_goal(tdee: float, goal) -> float:
    """Add the goal's fixed calorie adjustment to TDEE (unrounded)."""
    return tdee + _lookup(GOAL_CALORIE_ADJUSTMENTS, "goal", goal)


def allocate_macros(daily_calories: float, split: MacroSplit) -> MacroResult:
    """Split a calorie target into protein/carb/fat grams.

    The split is used as given; callers check that it totals 100 first.
    """
    protein_calories = daily_calories * (split.protein_pct / 100)
    carbs_calories = daily_calories * (split.carbs_pct / 100)
    fat_calories = daily_calories * (split.fat_pct / 100)

    return MacroResult(
        daily_calories=int(round_half_away(daily_calories)),
        protein=round_half_away(protein_calories / CALORIES_PER_GRAM["protein"], 1),
        carbs=round_half_away(carbs_calories / CALORIES_PER_GRAM["carbs"], 1),
        fat=round_half_away(fat_calories / CALORIES_PER_GRAM["fat"], 1),
        protein_pct=round_half_away(split.protein_pct, 1),
        carbs_pct=round_half_away(split.carbs_pct, 1),
        fat_pct=round_half_away(split.fat_pct, 1),
    )


def compute_breakdown(profile: ProfileInput) -> MacroBreakdown:
    """Validate a profile and run the full pipeline, keeping intermediates.

    Steps:
    1. Normalize weight to pounds and height to inches
    2. Calculate BMR via Harris-Benedict
    3. Multiply by activity factor to get TDEE
    4. Apply goal-based calorie adjustment
    5. Convert percentages to grams using 4/4/9 cal/g
    """
    profile = validate_profile(profile)

    weight_lbs = weight_to_pounds(profile.weight, profile.weight_unit)
    height_in = height_to_inches(
        profile.height_unit,
        height_cm=profile.height_cm,
        feet=profile.height_feet,
        inches=profile.height_inches,
    )
    bmr = calculate_bmr(weight_lbs, height_in, profile.age, profile.gender)
    tdee = calculate_tdee(bmr, profile.activity_level)
    daily_calories = apply_goal(tdee, profile.goal)
    result = allocate_macros(daily_calories, profile.macro_split)

    log.debug(
        "macros_computed",
        weight_lbs=weight_lbs,
        height_in=height_in,
        bmr=bmr,
        tdee=tdee,
        daily_calories=daily_calories,
    )
    return MacroBreakdown(
        weight_lbs=weight_lbs,
        height_in=height_in,
        bmr=bmr,
        tdee=tdee,
        daily_calories=daily_calories,
        result=result,
    )


def compute_macros(profile: ProfileInput) -> MacroResult:
    """Calculate the daily calorie target and macro grams for a profile."""
    return compute_breakdown(profile).result


def format_result(result: MacroResult, breakdown: MacroBreakdown = None) -> str:
    """Format a macro result for display."""
    lines = []
    if breakdown is not None:
        lines += [
            f"BMR:      {breakdown.bmr:.0f} kcal",
            f"TDEE:     {breakdown.tdee:.0f} kcal",
        ]
    lines += [
        f"Calories: {result.daily_calories} kcal/day",
        f"Protein:  {result.protein}g ({result.protein_pct:g}%)",
        f"Carbs:    {result.carbs}g ({result.carbs_pct:g}%)",
        f"Fat:      {result.fat}g ({result.fat_pct:g}%)",
    ]
    return "\n".join(lines)
