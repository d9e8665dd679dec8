"""Command-line interface for wind activity recommendations."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from wind_activities.config import get_settings
from wind_activities.models.activity import ActivityRule
from wind_activities.models.forecast import LocationWeather
from wind_activities.models.recommendation import DayPlan
from wind_activities.models.units import WindUnit, convert_wind_speed, wind_unit_label
from wind_activities.recommendations.planner import DayPlanner
from wind_activities.rules.compass import degrees_to_compass
from wind_activities.rules.engine import ActivityMatcher
from wind_activities.rules.ordering import sort_by_priority

logger = logging.getLogger(__name__)

_rules_adapter = TypeAdapter(list[ActivityRule])
_weather_adapter = TypeAdapter(list[LocationWeather])


def parse_hours(value: str) -> list[int]:
    """Parse a comma-separated list of hours, e.g. '10,12,14'."""
    try:
        hours = [int(part) for part in value.split(",") if part.strip()]
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid hour list: '{value}'")
    for hour in hours:
        if not 0 <= hour <= 23:
            raise argparse.ArgumentTypeError(f"Hour out of range: {hour}")
    return hours


def format_plan(plan: DayPlan, unit: WindUnit) -> str:
    """Render a day plan as a few lines of text."""
    label = wind_unit_label(unit)
    if plan.has_recommendation:
        header = f"{plan.date.isoformat()}: {plan.activity.label} @ {plan.location_name}"
    else:
        header = f"{plan.date.isoformat()}: no matching activity"

    lines = [header]
    for summary in plan.locations:
        if not summary.has_forecast:
            lines.append(f"  {summary.location_name}: no forecast")
            continue
        gust = convert_wind_speed(summary.max_gust, unit)
        activities = ", ".join(a.label for a in summary.activities) or "-"
        lines.append(
            f"  {summary.location_name}: max gust {gust:.1f} {label}, {activities}"
        )
    return "\n".join(lines)


def run_daily(args: argparse.Namespace) -> int:
    """Print the recommended activity for each day in the forecasts."""
    settings = get_settings()
    try:
        rules = _rules_adapter.validate_json(Path(args.rules).read_bytes())
        weather = _weather_adapter.validate_json(Path(args.locations).read_bytes())
    except OSError as e:
        logger.error(f"Could not read input: {e}")
        return 1
    except ValidationError as e:
        logger.error(f"Invalid input: {e}")
        return 1

    hours = args.display_hours or settings.display_hours
    planner = DayPlanner(matcher=ActivityMatcher(display_hours=hours))
    unit = args.unit or settings.wind_unit

    plans = planner.plan(sort_by_priority(rules), weather)
    if not plans:
        print("No forecast days found.")
        return 0

    for plan in plans:
        print(format_plan(plan, unit))
    return 0


def run_compass(args: argparse.Namespace) -> int:
    """Print the compass octant for a direction in degrees."""
    print(degrees_to_compass(args.degrees).value)
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="wind-activities",
        description="Wind Activities - Pick a water sport from wind forecasts",
    )
    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s 0.1.0",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Logging level (default: from settings)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Daily command
    daily_parser = subparsers.add_parser(
        "daily", help="Recommend an activity for each forecast day"
    )
    daily_parser.add_argument("rules", help="JSON file with a list of activity rules")
    daily_parser.add_argument(
        "locations", help="JSON file with a list of locations and their forecasts"
    )
    daily_parser.add_argument(
        "--display-hours",
        type=parse_hours,
        default=None,
        help="Comma-separated hours to consider (default: from settings)",
    )
    daily_parser.add_argument(
        "--unit",
        type=WindUnit,
        choices=list(WindUnit),
        default=None,
        help="Unit for printed wind speeds",
    )
    daily_parser.set_defaults(handler=run_daily)

    # Compass command
    compass_parser = subparsers.add_parser(
        "compass", help="Convert a wind direction in degrees to a compass octant"
    )
    compass_parser.add_argument("degrees", type=float, help="Direction in degrees")
    compass_parser.set_defaults(handler=run_compass)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level or get_settings().log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 0

    return args.handler(args)


if __name__ == "__main__":
    sys.exit(main())
