"""Wind activity recommendations from user rules and wind forecasts."""

from wind_activities.rules.engine import (
    ActivityMatcher,
    DailyActivity,
    find_all_matching_activities,
    find_daily_activity,
    find_matching_activity,
    get_max_gust_for_day,
)

__version__ = "0.1.0"

__all__ = [
    "ActivityMatcher",
    "DailyActivity",
    "find_all_matching_activities",
    "find_daily_activity",
    "find_matching_activity",
    "get_max_gust_for_day",
]
