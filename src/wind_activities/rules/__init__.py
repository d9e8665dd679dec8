"""Rule engine for matching activity rules against wind forecasts."""

from wind_activities.rules.engine import (
    ActivityMatcher,
    DailyActivity,
    find_all_matching_activities,
    find_daily_activity,
    find_matching_activity,
    get_max_gust_for_day,
    has_matching_conditions,
)
from wind_activities.rules.compass import degrees_to_compass
from wind_activities.rules.conditions import (
    ConditionResult,
    ConditionType,
    direction_allowed,
    explain_sample,
    gust_in_range,
    sample_satisfies,
    temperature_in_range,
)
from wind_activities.rules.ordering import (
    next_top_priority,
    reprioritize,
    sort_by_priority,
)

__all__ = [
    "ActivityMatcher",
    "DailyActivity",
    "find_all_matching_activities",
    "find_daily_activity",
    "find_matching_activity",
    "get_max_gust_for_day",
    "has_matching_conditions",
    "degrees_to_compass",
    "ConditionResult",
    "ConditionType",
    "direction_allowed",
    "explain_sample",
    "gust_in_range",
    "sample_satisfies",
    "temperature_in_range",
    "next_top_priority",
    "reprioritize",
    "sort_by_priority",
]
