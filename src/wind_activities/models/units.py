"""Wind speed units.

Forecasts and rule bounds are always stored in meters per second. Knots are a
display preference only, so values entered in knots are converted before they
reach a rule.
"""

from __future__ import annotations

from enum import Enum


# 1 m/s = 1.94384 knots
MS_TO_KNOTS = 1.94384


class WindUnit(str, Enum):
    """Units a user can choose for displaying wind speed."""

    METERS_PER_SECOND = "ms"
    KNOTS = "knots"


def convert_wind_speed(value_ms: float, unit: WindUnit) -> float:
    """Convert a speed in m/s to the given display unit."""
    if unit == WindUnit.KNOTS:
        return value_ms * MS_TO_KNOTS
    return value_ms


def to_meters_per_second(value: float, unit: WindUnit) -> float:
    """Convert a speed entered in the given unit back to m/s.

    Used when a rule's gust bounds are authored in knots.
    """
    if unit == WindUnit.KNOTS:
        return value / MS_TO_KNOTS
    return value


def wind_unit_label(unit: WindUnit) -> str:
    """Short label for a unit, e.g. for table headers."""
    return "kn" if unit == WindUnit.KNOTS else "m/s"
