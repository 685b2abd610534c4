"""Unit normalization.

The engine works in imperial units internally (pounds, inches) because the
Harris-Benedict coefficients it uses are the imperial ones. Nothing is
rounded here; full precision is carried into the BMR step.
"""

from macro_planner.config import CM_PER_INCH, INCHES_PER_FOOT, LBS_PER_KG
from macro_planner.models import HeightUnit, WeightUnit


def weight_to_pounds(weight: float, unit: WeightUnit) -> float:
    """Convert a weight to pounds."""
    if unit == WeightUnit.KG:
        return weight * LBS_PER_KG
    return float(weight)


def height_to_inches(unit: HeightUnit, height_cm: float = None,
                     feet: float = None, inches: float = None) -> float:
    """Convert a height to total inches.

    A missing inches value counts as 0, so "5 ft" is 60 inches.
    """
    if unit == HeightUnit.CM:
        return height_cm / CM_PER_INCH
    return float(feet) * INCHES_PER_FOOT + (float(inches) if inches else 0.0)


def pounds_to_kg(lbs: float) -> float:
    return lbs / LBS_PER_KG


def inches_to_ft_in(total_inches: float) -> tuple:
    """Split total inches into (feet, inches), inches rounded to one decimal."""
    feet = int(total_inches // INCHES_PER_FOOT)
    inches = round(total_inches - feet * INCHES_PER_FOOT, 1)
    if inches >= INCHES_PER_FOOT:
        feet += 1
        inches = 0.0
    return feet, inches
