"""Input validation for macro computations.

Two separate concerns live here:

- ``parse_profile`` / ``validate_profile`` / ``check_macro_split`` are the
  one-shot precondition checks run before a computation.
- ``macro_split_warning`` is the incremental check a form runs while the
  user is still editing the percentages. It never raises.
"""

import math
from dataclasses import replace
from decimal import Decimal
from typing import Mapping

import structlog

from macro_planner.errors import ConstraintError, DomainError, ValidationError
from macro_planner.models import (
    ActivityLevel,
    Gender,
    Goal,
    HeightUnit,
    MacroSplit,
    ProfileInput,
    WeightUnit,
)

log = structlog.get_logger(__name__)

WEIGHT_UNIT_ALIASES = {
    "kilogram": WeightUnit.KG,
    "kilograms": WeightUnit.KG,
    "pound": WeightUnit.LBS,
    "pounds": WeightUnit.LBS,
    "lb": WeightUnit.LBS,
}

HEIGHT_UNIT_ALIASES = {
    "centimeter": HeightUnit.CM,
    "centimeters": HeightUnit.CM,
    "feet": HeightUnit.FT,
    "ft_in": HeightUnit.FT,
}


def _is_blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _to_number(field: str, value) -> float:
    if isinstance(value, bool):
        raise ValidationError(field, f"must be a number, got {value!r}")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(field, f"must be a number, got {value!r}") from None
    if not math.isfinite(number):
        raise ValidationError(field, f"must be a finite number, got {value!r}")
    return number


def _number(data: Mapping, field: str, required: bool = True):
    value = data.get(field)
    if _is_blank(value):
        if required:
            raise ValidationError(field, "is required")
        return None
    return _to_number(field, value)


def coerce_enum(enum_cls, field: str, value, aliases: Mapping = None):
    """Return the ``enum_cls`` member for ``value`` or raise DomainError."""
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        key = value.strip().lower()
        if aliases and key in aliases:
            return aliases[key]
        try:
            return enum_cls(key)
        except ValueError:
            pass
    raise DomainError(field, value, [member.value for member in enum_cls])


def _enum(data: Mapping, enum_cls, field: str, aliases: Mapping = None):
    value = data.get(field)
    if _is_blank(value):
        raise ValidationError(field, "is required")
    return coerce_enum(enum_cls, field, value, aliases)


def parse_profile(data: Mapping) -> ProfileInput:
    """Build a ProfileInput from a raw request mapping.

    Values may be numbers or numeric strings. An empty ``height_inches``
    is treated as 0 rather than an error. Raises ValidationError,
    DomainError or ConstraintError; the returned profile has already
    passed ``validate_profile``.
    """
    weight_unit = _enum(data, WeightUnit, "weight_unit", WEIGHT_UNIT_ALIASES)
    height_unit = _enum(data, HeightUnit, "height_unit", HEIGHT_UNIT_ALIASES)

    height_cm = height_feet = height_inches = None
    if height_unit == HeightUnit.CM:
        height_cm = _number(data, "height_cm")
    else:
        height_feet = _number(data, "height_feet")
        height_inches = _number(data, "height_inches", required=False)

    age = _number(data, "age")
    if not age.is_integer():
        raise ValidationError("age", f"must be a whole number of years, got {data.get('age')!r}")

    profile = ProfileInput(
        weight=_number(data, "weight"),
        weight_unit=weight_unit,
        height_unit=height_unit,
        height_cm=height_cm,
        height_feet=height_feet,
        height_inches=height_inches,
        age=int(age),
        gender=_enum(data, Gender, "gender"),
        activity_level=_enum(data, ActivityLevel, "activity_level"),
        goal=_enum(data, Goal, "goal"),
        macro_split=MacroSplit(
            protein_pct=_number(data, "protein_pct"),
            carbs_pct=_number(data, "carbs_pct"),
            fat_pct=_number(data, "fat_pct"),
        ),
    )
    return validate_profile(profile)


def _check_positive(field: str, value) -> float:
    if _is_blank(value):
        raise ValidationError(field, "is required")
    number = _to_number(field, value)
    if number <= 0:
        raise ValidationError(field, f"must be greater than 0, got {value!r}")
    return number


def _check_non_negative(field: str, value) -> float:
    number = _to_number(field, value)
    if number < 0:
        raise ValidationError(field, f"must not be negative, got {value!r}")
    return number


def _check_age(value) -> int:
    if _is_blank(value):
        raise ValidationError("age", "is required")
    number = _to_number("age", value)
    if not number.is_integer():
        raise ValidationError("age", f"must be a whole number of years, got {value!r}")
    if number <= 0:
        raise ValidationError("age", f"must be greater than 0, got {value!r}")
    return int(number)


def validate_profile(profile: ProfileInput) -> ProfileInput:
    """Check every field of a profile and return it normalized.

    The returned copy holds enum members and plain numbers, so the
    engine never sees ``"KG"`` or ``"70"``. Enumerated fields are checked
    first; a bad enum is an integration error, reported as DomainError.
    The split total is checked last.
    """
    weight_unit = coerce_enum(WeightUnit, "weight_unit", profile.weight_unit, WEIGHT_UNIT_ALIASES)
    height_unit = coerce_enum(HeightUnit, "height_unit", profile.height_unit, HEIGHT_UNIT_ALIASES)
    gender = coerce_enum(Gender, "gender", profile.gender)
    activity_level = coerce_enum(ActivityLevel, "activity_level", profile.activity_level)
    goal = coerce_enum(Goal, "goal", profile.goal)

    weight = _check_positive("weight", profile.weight)

    height_cm = height_feet = height_inches = None
    if height_unit == HeightUnit.CM:
        height_cm = _check_positive("height_cm", profile.height_cm)
    else:
        if _is_blank(profile.height_feet):
            raise ValidationError("height_feet", "is required")
        height_feet = _check_non_negative("height_feet", profile.height_feet)
        if not _is_blank(profile.height_inches):
            height_inches = _check_non_negative("height_inches", profile.height_inches)
        if height_feet == 0 and not height_inches:
            raise ValidationError("height_feet", "height must be greater than 0")

    age = _check_age(profile.age)

    split = profile.macro_split
    split = MacroSplit(
        protein_pct=_check_non_negative("protein_pct", split.protein_pct),
        carbs_pct=_check_non_negative("carbs_pct", split.carbs_pct),
        fat_pct=_check_non_negative("fat_pct", split.fat_pct),
    )
    check_macro_split(split)

    return replace(
        profile,
        weight=weight,
        weight_unit=weight_unit,
        height_unit=height_unit,
        height_cm=height_cm,
        height_feet=height_feet,
        height_inches=height_inches,
        age=age,
        gender=gender,
        activity_level=activity_level,
        goal=goal,
        macro_split=split,
    )


def check_macro_split(split: MacroSplit) -> None:
    """Raise ConstraintError unless the percentages total exactly 100."""
    total = split.total
    if total != 100:
        log.info("macro_split_rejected", total=float(total))
        raise ConstraintError(float(total))


def macro_split_warning(protein_pct, carbs_pct, fat_pct) -> str:
    """Running-total message for a form being edited.

    Blank or unparsable entries count as 0 so a half-typed form still
    gets a message. Returns "" once the total is 100.
    """
    total = Decimal(0)
    for value in (protein_pct, carbs_pct, fat_pct):
        if _is_blank(value) or isinstance(value, bool):
            continue
        try:
            number = float(value)
        except (TypeError, ValueError):
            continue
        if math.isfinite(number):
            total += Decimal(repr(number))
    if total == 100:
        return ""
    return f"Total is {float(total):g}%. Please adjust to equal 100%."
