"""Tests for profile parsing and validation."""

import unittest
from dataclasses import replace

from macro_planner.errors import ConstraintError, DomainError, ValidationError
from macro_planner.models import ActivityLevel, Gender, Goal, HeightUnit, MacroSplit, ProfileInput, WeightUnit
from macro_planner.validation import check_macro_split, macro_split_warning, parse_profile, validate_profile


def make_request(**overrides) -> dict:
    data = {
        "weight": "70",
        "weight_unit": "kg",
        "height_unit": "cm",
        "height_cm": "175",
        "age": "30",
        "gender": "male",
        "activity_level": "sedentary",
        "goal": "maintain",
        "protein_pct": "40",
        "carbs_pct": "40",
        "fat_pct": "20",
    }
    data.update(overrides)
    return data


class TestParseProfile(unittest.TestCase):
    def test_parses_strings(self):
        profile = parse_profile(make_request())
        self.assertEqual(profile.weight, 70.0)
        self.assertIs(profile.weight_unit, WeightUnit.KG)
        self.assertIs(profile.height_unit, HeightUnit.CM)
        self.assertEqual(profile.height_cm, 175.0)
        self.assertEqual(profile.age, 30)
        self.assertIsInstance(profile.age, int)
        self.assertIs(profile.gender, Gender.MALE)
        self.assertIs(profile.activity_level, ActivityLevel.SEDENTARY)
        self.assertIs(profile.goal, Goal.MAINTAIN)
        self.assertEqual(profile.macro_split, MacroSplit(40.0, 40.0, 20.0))

    def test_parses_numbers(self):
        profile = parse_profile(make_request(weight=70.5, age=30, protein_pct=30, carbs_pct=50))
        self.assertEqual(profile.weight, 70.5)
        self.assertEqual(profile.macro_split.carbs_pct, 50.0)

    def test_feet_and_inches(self):
        profile = parse_profile(make_request(
            height_unit="ft", height_cm=None, height_feet="5", height_inches="6",
        ))
        self.assertIs(profile.height_unit, HeightUnit.FT)
        self.assertEqual(profile.height_feet, 5.0)
        self.assertEqual(profile.height_inches, 6.0)
        self.assertIsNone(profile.height_cm)

    def test_empty_inches_allowed(self):
        profile = parse_profile(make_request(height_unit="ft", height_feet="5", height_inches=""))
        self.assertIsNone(profile.height_inches)

    def test_cm_ignored_for_feet(self):
        profile = parse_profile(make_request(height_unit="ft", height_feet="6"))
        self.assertIsNone(profile.height_cm)

    def test_unit_aliases(self):
        profile = parse_profile(make_request(weight_unit="Pound", height_unit="centimeters"))
        self.assertIs(profile.weight_unit, WeightUnit.LBS)
        self.assertIs(profile.height_unit, HeightUnit.CM)

    def test_enum_case_insensitive(self):
        profile = parse_profile(make_request(gender="Female", goal=" GAIN_WEIGHT "))
        self.assertIs(profile.gender, Gender.FEMALE)
        self.assertIs(profile.goal, Goal.GAIN_WEIGHT)

    def test_split_with_decimals(self):
        profile = parse_profile(make_request(protein_pct="33.3", carbs_pct="33.3", fat_pct="33.4"))
        self.assertEqual(profile.macro_split.fat_pct, 33.4)


class TestParseProfileErrors(unittest.TestCase):
    def assertField(self, exc_type, field, **overrides):
        with self.assertRaises(exc_type) as ctx:
            parse_profile(make_request(**overrides))
        self.assertEqual(ctx.exception.field, field)
        return ctx.exception

    def test_missing_weight(self):
        err = self.assertField(ValidationError, "weight", weight="")
        self.assertIn("weight", str(err))

    def test_weight_not_numeric(self):
        self.assertField(ValidationError, "weight", weight="seventy")

    def test_weight_bool(self):
        self.assertField(ValidationError, "weight", weight=True)

    def test_weight_nan(self):
        self.assertField(ValidationError, "weight", weight="nan")

    def test_negative_weight(self):
        self.assertField(ValidationError, "weight", weight="-70")

    def test_zero_height(self):
        self.assertField(ValidationError, "height_cm", height_cm="0")

    def test_missing_feet(self):
        self.assertField(ValidationError, "height_feet", height_unit="ft", height_feet=None)

    def test_negative_inches(self):
        self.assertField(ValidationError, "height_inches", height_unit="ft",
                         height_feet="5", height_inches="-1")

    def test_zero_total_height(self):
        self.assertField(ValidationError, "height_feet", height_unit="ft",
                         height_feet="0", height_inches="")

    def test_fractional_age(self):
        self.assertField(ValidationError, "age", age="30.5")

    def test_zero_age(self):
        self.assertField(ValidationError, "age", age=0)

    def test_negative_percentage(self):
        self.assertField(ValidationError, "fat_pct", protein_pct="50", carbs_pct="60", fat_pct="-10")

    def test_unknown_gender(self):
        err = self.assertField(DomainError, "gender", gender="other")
        self.assertEqual(err.allowed, ["male", "female"])

    def test_unknown_activity(self):
        self.assertField(DomainError, "activity_level", activity_level="couch")

    def test_unknown_goal(self):
        self.assertField(DomainError, "goal", goal="bulk")

    def test_unknown_weight_unit(self):
        self.assertField(DomainError, "weight_unit", weight_unit="stone")

    def test_missing_goal(self):
        self.assertField(ValidationError, "goal", goal=None)

    def test_split_not_100(self):
        with self.assertRaises(ConstraintError) as ctx:
            parse_profile(make_request(fat_pct="21"))
        self.assertEqual(ctx.exception.total, 101)
        self.assertEqual(
            str(ctx.exception),
            "Your macro split percentages total 101%. They must add up to exactly 100%.",
        )


class TestValidateProfile(unittest.TestCase):
    def test_returns_normalized_copy(self):
        raw = ProfileInput(
            weight="70", weight_unit="KG", height_unit="ft", height_feet="5", height_inches="6",
            age="30", gender="Female", activity_level="VERY_ACTIVE", goal="lose_weight",
            macro_split=MacroSplit("30", "45", "25"),
        )
        profile = validate_profile(raw)
        self.assertEqual(profile.weight, 70.0)
        self.assertIsInstance(profile.weight, float)
        self.assertIs(profile.weight_unit, WeightUnit.KG)
        self.assertIs(profile.height_unit, HeightUnit.FT)
        self.assertEqual((profile.height_feet, profile.height_inches), (5.0, 6.0))
        self.assertEqual(profile.age, 30)
        self.assertIs(profile.gender, Gender.FEMALE)
        self.assertIs(profile.activity_level, ActivityLevel.VERY_ACTIVE)
        self.assertEqual(profile.macro_split, MacroSplit(30.0, 45.0, 25.0))
        self.assertEqual(raw.weight, "70")

    def test_string_age_must_be_whole(self):
        raw = parse_profile(make_request())
        with self.assertRaises(ValidationError) as ctx:
            validate_profile(replace(raw, age="30.5"))
        self.assertEqual(ctx.exception.field, "age")


class TestCheckMacroSplit(unittest.TestCase):
    def test_exact_100(self):
        check_macro_split(MacroSplit(40, 40, 20))
        check_macro_split(MacroSplit(33.3, 33.3, 33.4))
        check_macro_split(MacroSplit(0.1, 0.2, 99.7))

    def test_off_by_fraction(self):
        with self.assertRaises(ConstraintError) as ctx:
            check_macro_split(MacroSplit(33.3, 33.3, 33.3))
        self.assertIn("99.9%", str(ctx.exception))


class TestMacroSplitWarning(unittest.TestCase):
    def test_balanced(self):
        self.assertEqual(macro_split_warning(40, 40, 20), "")
        self.assertEqual(macro_split_warning("30", "45", "25"), "")

    def test_over(self):
        self.assertEqual(macro_split_warning(40, 40, 21), "Total is 101%. Please adjust to equal 100%.")

    def test_under(self):
        self.assertEqual(macro_split_warning(40, 40, 19.5), "Total is 99.5%. Please adjust to equal 100%.")

    def test_blank_fields_count_as_zero(self):
        self.assertEqual(macro_split_warning(40, "", None), "Total is 40%. Please adjust to equal 100%.")


if __name__ == "__main__":
    unittest.main()
