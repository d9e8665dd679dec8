"""Constraint predicates for activity rules.

Each rule carries up to three independent constraints: a gust range, a set
of allowed wind directions, and a temperature range. Every bound is optional,
and a constraint with no bounds always passes. A sample that lacks the value
a constraint needs cannot satisfy it.
"""

from __future__ import annotations

from collections.abc import Collection
from enum import Enum
from typing import Any

from pydantic import BaseModel

from wind_activities.models.activity import ActivityRule, WindDirection
from wind_activities.models.forecast import WindForecastSample
from wind_activities.rules.compass import degrees_to_compass


class ConditionType(str, Enum):
    """Constraints a rule can place on a forecast sample."""

    WIND_GUST = "wind_gust"
    WIND_DIRECTION = "wind_direction"
    TEMPERATURE = "temperature"


class ConditionResult(BaseModel):
    """Result of checking a single constraint against a sample."""

    condition_type: ConditionType
    passed: bool
    actual_value: Any
    expected_value: Any
    message: str


def _in_range(value: float | None, minimum: float | None, maximum: float | None) -> bool:
    if minimum is None and maximum is None:
        return True
    if value is None:
        return False  # Can't satisfy a bound without data
    if minimum is not None and value < minimum:
        return False
    if maximum is not None and value > maximum:
        return False
    return True


def gust_in_range(
    gust: float | None,
    min_gust: float | None,
    max_gust: float | None,
) -> bool:
    """Check a gust against inclusive, optional bounds."""
    return _in_range(gust, min_gust, max_gust)


def direction_allowed(
    direction_deg: float | None,
    allowed: Collection[WindDirection] | None,
) -> bool:
    """Check whether a wind direction falls in one of the allowed octants.

    An empty or missing set of octants allows every direction.
    """
    if not allowed:
        return True
    if direction_deg is None:
        return False
    return degrees_to_compass(direction_deg) in allowed


def temperature_in_range(
    temperature: float | None,
    min_temp: float | None,
    max_temp: float | None,
) -> bool:
    """Check a temperature against inclusive, optional bounds.

    A missing temperature only passes when neither bound is set.
    """
    return _in_range(temperature, min_temp, max_temp)


def sample_satisfies(sample: WindForecastSample, rule: ActivityRule) -> bool:
    """Check whether a single hourly sample satisfies all of a rule's constraints."""
    return (
        gust_in_range(sample.wind_gust, rule.min_gust, rule.max_gust)
        and direction_allowed(sample.wind_direction, rule.wind_directions)
        and temperature_in_range(sample.temperature, rule.min_temp, rule.max_temp)
    )


def _format_range(minimum: float | None, maximum: float | None, unit: str) -> str:
    if minimum is not None and maximum is not None:
        return f"{minimum}-{maximum} {unit}"
    if minimum is not None:
        return f"at least {minimum} {unit}"
    if maximum is not None:
        return f"at most {maximum} {unit}"
    return "any"


def explain_sample(
    sample: WindForecastSample, rule: ActivityRule
) -> list[ConditionResult]:
    """Check each of a rule's constraints against a sample and report why.

    Args:
        sample: Hourly sample to check
        rule: Rule whose constraints are checked

    Returns:
        One ConditionResult per constraint type, in gust, direction,
        temperature order
    """
    gust_ok = gust_in_range(sample.wind_gust, rule.min_gust, rule.max_gust)
    gust_expected = _format_range(rule.min_gust, rule.max_gust, "m/s")

    direction_ok = direction_allowed(sample.wind_direction, rule.wind_directions)
    octant = (
        degrees_to_compass(sample.wind_direction)
        if sample.wind_direction is not None
        else None
    )
    allowed = [d.value for d in rule.wind_directions] if rule.wind_directions else None

    temp_ok = temperature_in_range(sample.temperature, rule.min_temp, rule.max_temp)
    temp_expected = _format_range(rule.min_temp, rule.max_temp, "°C")

    return [
        ConditionResult(
            condition_type=ConditionType.WIND_GUST,
            passed=gust_ok,
            actual_value=sample.wind_gust,
            expected_value=gust_expected,
            message=(
                f"gust {sample.wind_gust} meets {gust_expected}"
                if gust_ok
                else f"gust {sample.wind_gust} outside {gust_expected}"
            ),
        ),
        ConditionResult(
            condition_type=ConditionType.WIND_DIRECTION,
            passed=direction_ok,
            actual_value=octant.value if octant else None,
            expected_value=allowed,
            message=(
                f"direction {octant.value if octant else None} allowed"
                if direction_ok
                else f"direction {octant.value if octant else None} not in {allowed}"
            ),
        ),
        ConditionResult(
            condition_type=ConditionType.TEMPERATURE,
            passed=temp_ok,
            actual_value=sample.temperature,
            expected_value=temp_expected,
            message=(
                f"temperature {sample.temperature} meets {temp_expected}"
                if temp_ok
                else f"temperature {sample.temperature} outside {temp_expected}"
            ),
        ),
    ]
