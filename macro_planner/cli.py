"""Command-line interface for the macro calculator."""

import argparse
import json
import sys

import structlog

from macro_planner.config import (
    ACTIVITY_MULTIPLIERS,
    DEFAULT_MACRO_SPLIT,
    DISCLAIMER,
    GOAL_CALORIE_ADJUSTMENTS,
    LOG_LEVEL,
)
from macro_planner.errors import MacroPlannerError
from macro_planner.log import configure_logging
from macro_planner.macro_calculator import compute_breakdown, format_result
from macro_planner.models import Gender, HeightUnit, WeightUnit
from macro_planner.recommendations import format_recommendation, recommended_split
from macro_planner.validation import parse_profile

log = structlog.get_logger(__name__)


def _fail(message: str) -> None:
    print(f"Error: {message}", file=sys.stderr)
    sys.exit(1)


def _profile_request(args) -> dict:
    """Turn parsed flags into the same mapping a JSON request would carry."""
    if args.height_cm is not None:
        height = {"height_unit": HeightUnit.CM.value, "height_cm": args.height_cm}
    elif args.feet is not None:
        height = {
            "height_unit": HeightUnit.FT.value,
            "height_feet": args.feet,
            "height_inches": args.inches,
        }
    else:
        _fail("Provide a height with --height-cm or --feet [--inches]")
    return {
        "weight": args.weight,
        "weight_unit": args.weight_unit,
        **height,
        "age": args.age,
        "gender": args.gender,
        "activity_level": args.activity,
        "goal": args.goal,
        "protein_pct": args.protein,
        "carbs_pct": args.carbs,
        "fat_pct": args.fat,
    }


# --- Command handlers ---

def cmd_compute(args):
    try:
        profile = parse_profile(_profile_request(args))
        breakdown = compute_breakdown(profile)
    except MacroPlannerError as e:
        _fail(str(e))

    if args.json:
        print(json.dumps(breakdown.result.to_dict(), indent=2))
        return

    print("Your daily macros:")
    print(format_result(breakdown.result, breakdown if args.verbose else None))


def cmd_compute_json(args):
    try:
        if args.file == "-":
            request = json.load(sys.stdin)
        else:
            with open(args.file) as f:
                request = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        _write_json_error({"code": "E_BAD_REQUEST", "message": str(e), "field": None})
        return

    if not isinstance(request, dict):
        _write_json_error({
            "code": "E_BAD_REQUEST",
            "message": "Request must be a JSON object",
            "field": None,
        })
        return

    try:
        result = compute_breakdown(parse_profile(request)).result
    except MacroPlannerError as e:
        log.info("request_rejected", code=e.code, field=e.field)
        _write_json_error(e.to_dict())
        return

    print(json.dumps({"ok": True, "data": result.to_dict()}, indent=2))


def _write_json_error(error: dict) -> None:
    print(json.dumps({"ok": False, "error": error}, indent=2))
    sys.exit(1)


def cmd_recommend(args):
    print(format_recommendation(recommended_split(args.gender, args.goal)))


def cmd_disclaimer(args):
    print(DISCLAIMER)


# --- Argument parser ---

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="macro_planner",
        description="Daily Macro Calculator - calories and macros for your fitness goals",
    )
    parser.add_argument("--log-level", default=LOG_LEVEL, help="Logging level (default: %(default)s)")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    genders = [g.value for g in Gender]
    activity_levels = list(ACTIVITY_MULTIPLIERS.keys())
    goals = list(GOAL_CALORIE_ADJUSTMENTS.keys())

    # --- compute ---
    compute_p = subparsers.add_parser("compute", help="Calculate daily calories and macros")
    compute_p.add_argument("--weight", type=float, required=True)
    compute_p.add_argument("--weight-unit", choices=[u.value for u in WeightUnit],
                           default=WeightUnit.KG.value)
    height_g = compute_p.add_mutually_exclusive_group()
    height_g.add_argument("--height-cm", type=float, help="Height in centimeters")
    height_g.add_argument("--feet", type=float, help="Height (feet)")
    compute_p.add_argument("--inches", type=float, help="Height (inches), used with --feet")
    compute_p.add_argument("--age", type=int, required=True)
    compute_p.add_argument("--gender", choices=genders, required=True)
    compute_p.add_argument("--activity", choices=activity_levels, required=True,
                           help="Activity level")
    compute_p.add_argument("--goal", choices=goals, required=True, help="Fitness goal")
    compute_p.add_argument("--protein", type=float, default=DEFAULT_MACRO_SPLIT["protein"],
                           help="Protein %% (default: %(default)s)")
    compute_p.add_argument("--carbs", type=float, default=DEFAULT_MACRO_SPLIT["carbs"],
                           help="Carbs %% (default: %(default)s)")
    compute_p.add_argument("--fat", type=float, default=DEFAULT_MACRO_SPLIT["fat"],
                           help="Fat %% (default: %(default)s)")
    compute_p.add_argument("--json", action="store_true", help="Print the result as JSON")
    compute_p.add_argument("--verbose", action="store_true", help="Also show BMR and TDEE")
    compute_p.set_defaults(func=cmd_compute)

    # --- compute-json ---
    json_p = subparsers.add_parser("compute-json", help="Compute from a JSON request object")
    json_p.add_argument("file", nargs="?", default="-", help="Request file, or - for stdin")
    json_p.set_defaults(func=cmd_compute_json)

    # --- recommend ---
    rec_p = subparsers.add_parser("recommend", help="Show recommended macro ranges")
    rec_p.add_argument("--gender", choices=genders, required=True)
    rec_p.add_argument("--goal", choices=goals, required=True)
    rec_p.set_defaults(func=cmd_recommend)

    # --- disclaimer ---
    disc_p = subparsers.add_parser("disclaimer", help="Show the disclaimer")
    disc_p.set_defaults(func=cmd_disclaimer)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if getattr(args, "height_cm", None) is not None and args.inches is not None:
        parser.error("argument --inches: not allowed with argument --height-cm")
    configure_logging(args.log_level)

    if not args.command:
        parser.print_help()
        return

    args.func(args)
