"""Recommendation helpers built on top of the rule engine."""

from wind_activities.recommendations.hours import (
    blank_elapsed_hours,
    blank_sample,
    hour_has_elapsed,
)
from wind_activities.recommendations.planner import (
    DayPlanner,
    plan_days,
)

__all__ = [
    "blank_elapsed_hours",
    "blank_sample",
    "hour_has_elapsed",
    "DayPlanner",
    "plan_days",
]
