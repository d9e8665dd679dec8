"""Day planner for multi-day, multi-location forecasts.

The forecast provider delivers one forecast per location, each covering
several days. The planner regroups them by date and runs the matcher once per
day, so a dashboard can show the recommended activity for each upcoming day
alongside a per-location breakdown.
"""

from __future__ import annotations

import datetime as dt
import logging
from collections.abc import Sequence

from wind_activities.models.activity import ActivityRule
from wind_activities.models.forecast import LocationWeather, LocationWithForecast
from wind_activities.models.recommendation import DayPlan, LocationDaySummary
from wind_activities.rules.engine import ActivityMatcher, get_default_matcher

logger = logging.getLogger(__name__)


class DayPlanner:
    """Builds per-day recommendations from rules and location forecasts.

    Example:
        ```python
        planner = DayPlanner(matcher=ActivityMatcher(display_hours={12, 14, 16}))

        for plan in planner.plan(rules, weather):
            if plan.has_recommendation:
                print(f"{plan.date}: {plan.activity.label} @ {plan.location_name}")
        ```
    """

    def __init__(self, matcher: ActivityMatcher | None = None):
        """Initialize the planner.

        Args:
            matcher: ActivityMatcher to use. Defaults to one built from the
                configured display hours.
        """
        self.matcher = matcher or get_default_matcher()

    def dates(self, weather: Sequence[LocationWeather]) -> list[dt.date]:
        """Get every date covered by at least one location, ascending."""
        return sorted({day.date for lw in weather for day in lw.days})

    def plan_day(
        self,
        rules: Sequence[ActivityRule],
        weather: Sequence[LocationWeather],
        day: dt.date,
        loading_ids: frozenset[str] = frozenset(),
    ) -> DayPlan:
        """Build the plan for a single date.

        Args:
            rules: Rules sorted by priority, highest priority first
            weather: Forecasts for all saved locations
            day: Date to plan
            loading_ids: Locations currently being refreshed

        Returns:
            DayPlan with the day's pick and per-location summaries
        """
        candidates = [
            LocationWithForecast(
                location=lw.location,
                forecast=lw.get_day(day),
                is_loading=lw.location.id in loading_ids,
            )
            for lw in weather
        ]

        summaries = [
            LocationDaySummary(
                location_id=c.location.id,
                location_name=c.location.name,
                has_forecast=c.forecast is not None,
                max_gust=self.matcher.get_max_gust_for_day(c.forecast),
                activities=self.matcher.find_all_matching_activities(
                    rules, c.location.id, c.forecast
                ),
            )
            for c in candidates
        ]

        daily = self.matcher.find_daily_activity(rules, candidates)
        if daily is None:
            return DayPlan(date=day, locations=summaries)

        return DayPlan(
            date=day,
            activity=daily.activity,
            location_id=daily.location_id,
            location_name=daily.location_name,
            locations=summaries,
        )

    def plan(
        self,
        rules: Sequence[ActivityRule],
        weather: Sequence[LocationWeather],
        loading_ids: frozenset[str] = frozenset(),
    ) -> list[DayPlan]:
        """Build plans for every date in the forecasts, in date order."""
        plans = [
            self.plan_day(rules, weather, day, loading_ids) for day in self.dates(weather)
        ]
        matched = sum(1 for p in plans if p.has_recommendation)
        logger.info(f"Planned {len(plans)} days, {matched} with a recommendation")
        return plans


def plan_days(
    rules: Sequence[ActivityRule],
    weather: Sequence[LocationWeather],
    matcher: ActivityMatcher | None = None,
) -> list[DayPlan]:
    """Convenience function to plan every day in a set of forecasts.

    Args:
        rules: Rules sorted by priority, highest priority first
        weather: Forecasts for all saved locations
        matcher: Optional matcher with custom display hours

    Returns:
        One DayPlan per date, ascending
    """
    return DayPlanner(matcher=matcher).plan(rules, weather)
