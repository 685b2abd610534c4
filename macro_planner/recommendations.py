"""Recommended macro split ranges by gender and goal."""

from dataclasses import dataclass

from macro_planner.config import MACRO_RECOMMENDATIONS
from macro_planner.models import Gender, Goal
from macro_planner.validation import coerce_enum


@dataclass(frozen=True)
class MacroRecommendation:
    """Suggested percentage ranges, each as (low, high)."""
    gender: Gender
    goal: Goal
    protein: tuple
    carbs: tuple
    fat: tuple

    def contains(self, protein_pct: float, carbs_pct: float, fat_pct: float) -> bool:
        """True when every percentage falls inside its recommended range."""
        return all(
            low <= pct <= high
            for pct, (low, high) in (
                (protein_pct, self.protein),
                (carbs_pct, self.carbs),
                (fat_pct, self.fat),
            )
        )


def recommended_split(gender, goal) -> MacroRecommendation:
    gender = coerce_enum(Gender, "gender", gender)
    goal = coerce_enum(Goal, "goal", goal)
    ranges = MACRO_RECOMMENDATIONS[gender.value][goal.value]
    return MacroRecommendation(
        gender=gender,
        goal=goal,
        protein=ranges["protein"],
        carbs=ranges["carbs"],
        fat=ranges["fat"],
    )


def format_range(bounds: tuple) -> str:
    low, high = bounds
    if low == high:
        return f"{low}%"
    return f"{low}-{high}%"


def recommendation_title(rec: MacroRecommendation) -> str:
    """Heading such as "Recommended macros for Women - Lose Weight"."""
    who = "Men" if rec.gender == Gender.MALE else "Women"
    return f"Recommended macros for {who} - {rec.goal.value.replace('_', ' ').title()}"


def format_recommendation(rec: MacroRecommendation) -> str:
    """Format a recommendation for display."""
    lines = [
        f"{recommendation_title(rec)}:",
        f"  Protein: {format_range(rec.protein)}",
        f"  Carbs:   {format_range(rec.carbs)}",
        f"  Fat:     {format_range(rec.fat)}",
    ]
    return "\n".join(lines)
