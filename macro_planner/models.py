"""Data models for the macro calculator."""

from dataclasses import asdict, dataclass
from decimal import Decimal
from enum import Enum
from typing import Optional

from macro_planner.config import CALORIES_PER_GRAM


class WeightUnit(str, Enum):
    KG = "kg"
    LBS = "lbs"


class HeightUnit(str, Enum):
    CM = "cm"
    FT = "ft"  # feet + inches


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"


class ActivityLevel(str, Enum):
    SEDENTARY = "sedentary"
    LIGHTLY_ACTIVE = "lightly_active"
    MODERATELY_ACTIVE = "moderately_active"
    VERY_ACTIVE = "very_active"
    EXTRA_ACTIVE = "extra_active"


class Goal(str, Enum):
    LOSE_WEIGHT = "lose_weight"
    MAINTAIN = "maintain"
    GAIN_WEIGHT = "gain_weight"


@dataclass(frozen=True)
class MacroSplit:
    """Percentage of daily calories given to each macro."""
    protein_pct: float
    carbs_pct: float
    fat_pct: float

    @property
    def total(self) -> Decimal:
        """Exact decimal sum of the three percentages.

        Summing the shortest repr of each float avoids binary drift, so
        33.3 + 33.3 + 33.4 totals exactly 100.
        """
        return sum(
            (Decimal(repr(float(p))) for p in (self.protein_pct, self.carbs_pct, self.fat_pct)),
            Decimal(0),
        )


@dataclass(frozen=True)
class ProfileInput:
    """Everything needed for one macro computation."""
    weight: float
    weight_unit: WeightUnit
    height_unit: HeightUnit
    age: int
    gender: Gender
    activity_level: ActivityLevel
    goal: Goal
    macro_split: MacroSplit
    height_cm: Optional[float] = None  # when height_unit is cm
    height_feet: Optional[float] = None  # when height_unit is ft
    height_inches: Optional[float] = None  # optional, defaults to 0


@dataclass(frozen=True)
class MacroResult:
    """Daily calorie target and macro grams, rounded for display."""
    daily_calories: int
    protein: float
    carbs: float
    fat: float
    protein_pct: float
    carbs_pct: float
    fat_pct: float

    def macro_calories(self) -> float:
        """Calories implied by the rounded gram values."""
        return (
            self.protein * CALORIES_PER_GRAM["protein"]
            + self.carbs * CALORIES_PER_GRAM["carbs"]
            + self.fat * CALORIES_PER_GRAM["fat"]
        )

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class MacroBreakdown:
    """Unrounded intermediates of a computation, with the final result."""
    weight_lbs: float
    height_in: float
    bmr: float
    tdee: float
    daily_calories: float
    result: MacroResult
