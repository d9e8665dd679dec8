"""Rule engine for picking activities from wind forecasts.

The engine evaluates user rules against a day's hourly samples. Only samples
at the configured display hours count, and a rule matches a day when any one
of those samples satisfies it. Rules are trusted to arrive sorted by priority,
and the first matching rule wins.

Every operation is total: missing forecasts, unknown locations and empty rule
lists all produce "no match" rather than an error.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from pydantic import BaseModel

from wind_activities.config import DEFAULT_DISPLAY_HOURS, get_settings
from wind_activities.models.activity import ActivityRule, ActivityType
from wind_activities.models.forecast import (
    DayForecast,
    LocationWithForecast,
    WindForecastSample,
)
from wind_activities.rules.conditions import sample_satisfies

logger = logging.getLogger(__name__)


class DailyActivity(BaseModel):
    """The activity recommended for a day, and where."""

    activity: ActivityType
    location_name: str
    location_id: str


class ActivityMatcher:
    """Matches activity rules against day forecasts.

    Example:
        ```python
        matcher = ActivityMatcher(display_hours={10, 12, 14, 16})

        # Best activity at one location
        activity = matcher.find_matching_activity(rules, "hvasser", day)

        # Best activity across all locations
        daily = matcher.find_daily_activity(rules, locations)
        ```
    """

    def __init__(self, display_hours: Iterable[int] | None = None):
        """Initialize the matcher.

        Args:
            display_hours: Hours of the day to consider. Defaults to
                DEFAULT_DISPLAY_HOURS; use get_default_matcher() for the
                configured hours.
        """
        if display_hours is None:
            display_hours = DEFAULT_DISPLAY_HOURS
        self.display_hours: frozenset[int] = frozenset(display_hours)

    def relevant_samples(self, forecast: DayForecast) -> list[WindForecastSample]:
        """Get the samples that fall on a display hour."""
        return [f for f in forecast.forecasts if f.hour in self.display_hours]

    def get_max_gust_for_day(self, forecast: DayForecast | None) -> float:
        """Get the strongest gust within the display hours.

        Returns:
            The maximum gust in m/s, or 0 if there is no forecast or no
            sample with a gust at a display hour
        """
        if forecast is None:
            return 0
        gusts = [
            f.wind_gust for f in self.relevant_samples(forecast) if f.wind_gust is not None
        ]
        return max(gusts, default=0)

    def has_matching_conditions(
        self, forecast: DayForecast, rule: ActivityRule
    ) -> bool:
        """Check whether any display-hour sample satisfies the rule."""
        return any(sample_satisfies(f, rule) for f in self.relevant_samples(forecast))

    def find_matching_activity(
        self,
        rules: Sequence[ActivityRule],
        location_id: str,
        forecast: DayForecast | None,
    ) -> ActivityType | None:
        """Find the activity of the first rule for a location that matches.

        Args:
            rules: Rules sorted by priority, highest priority first
            location_id: Location to match rules for
            forecast: The location's forecast for the day

        Returns:
            The matched activity, or None
        """
        if forecast is None:
            return None

        for rule in rules:
            if rule.location_id == location_id and self.has_matching_conditions(
                forecast, rule
            ):
                logger.debug(
                    f"Rule {rule.id} matched {rule.activity.value} at {location_id}"
                )
                return rule.activity
        return None

    def find_all_matching_activities(
        self,
        rules: Sequence[ActivityRule],
        location_id: str,
        forecast: DayForecast | None,
    ) -> list[ActivityType]:
        """Find every distinct activity whose rule matches at a location.

        Args:
            rules: Rules sorted by priority, highest priority first
            location_id: Location to match rules for
            forecast: The location's forecast for the day

        Returns:
            Matched activities without duplicates, in order of the first rule
            that produced each. Empty if there is no forecast.
        """
        if forecast is None:
            return []

        activities: dict[ActivityType, None] = {}
        for rule in rules:
            if rule.location_id == location_id and self.has_matching_conditions(
                forecast, rule
            ):
                activities.setdefault(rule.activity, None)
        return list(activities)

    def find_daily_activity(
        self,
        rules: Sequence[ActivityRule],
        locations: Sequence[LocationWithForecast],
    ) -> DailyActivity | None:
        """Find the highest-priority matching rule across all locations.

        Rules are walked in order, not locations, so a higher-priority rule
        at one location beats a lower-priority rule anywhere else. Locations
        that are still loading are considered as long as they have a forecast.

        Args:
            rules: Rules sorted by priority, highest priority first
            locations: Candidate locations with their forecast for the day

        Returns:
            DailyActivity for the first matching rule, or None
        """
        for rule in rules:
            entry = next(
                (lf for lf in locations if lf.location.id == rule.location_id), None
            )
            if entry is None or entry.forecast is None:
                logger.debug(
                    f"Skipping rule {rule.id}: no forecast for location {rule.location_id}"
                )
                continue

            if self.has_matching_conditions(entry.forecast, rule):
                logger.debug(
                    f"Daily activity {rule.activity.value} at {rule.location_id} "
                    f"from rule {rule.id}"
                )
                return DailyActivity(
                    activity=rule.activity,
                    location_name=rule.location_name,
                    location_id=rule.location_id,
                )
        return None


def get_default_matcher() -> ActivityMatcher:
    """Get a matcher using the configured display hours."""
    return ActivityMatcher(display_hours=get_settings().display_hours)


def get_max_gust_for_day(forecast: DayForecast | None) -> float:
    """Get the strongest display-hour gust of a day, or 0."""
    return get_default_matcher().get_max_gust_for_day(forecast)


def has_matching_conditions(forecast: DayForecast, rule: ActivityRule) -> bool:
    """Check whether any display-hour sample of a day satisfies a rule."""
    return get_default_matcher().has_matching_conditions(forecast, rule)


def find_matching_activity(
    rules: Sequence[ActivityRule],
    location_id: str,
    forecast: DayForecast | None,
) -> ActivityType | None:
    """Find the activity of the first matching rule for a location."""
    return get_default_matcher().find_matching_activity(rules, location_id, forecast)


def find_all_matching_activities(
    rules: Sequence[ActivityRule],
    location_id: str,
    forecast: DayForecast | None,
) -> list[ActivityType]:
    """Find every distinct matching activity for a location."""
    return get_default_matcher().find_all_matching_activities(
        rules, location_id, forecast
    )


def find_daily_activity(
    rules: Sequence[ActivityRule],
    locations: Sequence[LocationWithForecast],
) -> DailyActivity | None:
    """Find the highest-priority matching rule across all locations."""
    return get_default_matcher().find_daily_activity(rules, locations)
