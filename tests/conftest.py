"""Pytest fixtures for wind activity recommendation tests.

This module provides test fixtures that ensure:
1. Settings come from defaults, not from the developer's environment
2. Rules, samples and forecasts are built the same way in every test
"""

import os
from datetime import date

import pytest

# Clear configuration BEFORE importing application modules
for _key in list(os.environ):
    if _key.startswith("WIND_ACTIVITIES_"):
        del os.environ[_key]

from wind_activities.models.activity import ActivityRule, ActivityType
from wind_activities.models.forecast import (
    DayForecast,
    LocationWeather,
    LocationWithForecast,
    WindForecastSample,
)
from wind_activities.models.location import Coordinates, Location

DISPLAY_HOURS = [10, 12, 14, 16, 18, 20]
TEST_DATE = date(2024, 1, 15)


# =============================================================================
# Test Isolation Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache():
    """Reset settings cache before each test to ensure clean state."""
    from wind_activities.config import get_settings
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# =============================================================================
# Builders
# =============================================================================


def make_sample(**overrides) -> WindForecastSample:
    """Build a sample: 8 m/s wind, 12 m/s gusts from the south, 15°C."""
    values = {
        "hour": 12,
        "wind_speed": 8,
        "wind_gust": 12,
        "wind_direction": 180,
        "temperature": 15,
    }
    values.update(overrides)
    return WindForecastSample(**values)


def make_day(samples: list[dict] | None = None, day: date = TEST_DATE) -> DayForecast:
    """Build a day forecast, assigning display hours to samples in order."""
    forecasts = []
    for i, overrides in enumerate(samples or []):
        values = {"hour": DISPLAY_HOURS[i] if i < len(DISPLAY_HOURS) else 12}
        values.update(overrides)
        forecasts.append(make_sample(**values))
    return DayForecast(date=day, forecasts=forecasts)


def make_rule(**overrides) -> ActivityRule:
    """Build an unconstrained wingfoil rule for loc-1."""
    values = {
        "id": "rule-1",
        "user_id": "user-1",
        "location_id": "loc-1",
        "location_name": "Test Location",
        "activity": ActivityType.WINGFOIL,
        "priority": 1,
    }
    values.update(overrides)
    return ActivityRule(**values)


def make_location(**overrides) -> Location:
    """Build a location with coordinates on the Oslofjord."""
    values = {
        "id": "loc-1",
        "name": "Test Location",
        "coordinates": Coordinates(lat=59.0, lon=10.0),
    }
    values.update(overrides)
    return Location(**values)


def make_candidate(
    forecast: DayForecast | None, is_loading: bool = False, **location
) -> LocationWithForecast:
    """Build a location entry for cross-location matching."""
    return LocationWithForecast(
        location=make_location(**location),
        forecast=forecast,
        is_loading=is_loading,
    )


# =============================================================================
# Sample Data Fixtures
# =============================================================================


@pytest.fixture
def sample_rules() -> list[ActivityRule]:
    """Rules for two spots, sorted by priority."""
    return [
        make_rule(
            id="rule-1",
            location_id="hvasser",
            location_name="Hvasser",
            activity=ActivityType.WINDSURFING,
            min_gust=12,
            wind_directions=["SW", "S"],
            priority=0,
        ),
        make_rule(
            id="rule-2",
            location_id="hvasser",
            location_name="Hvasser",
            activity=ActivityType.WINGFOIL,
            min_gust=7,
            max_gust=12,
            priority=1,
        ),
        make_rule(
            id="rule-3",
            location_id="sandvika",
            location_name="Sandvika",
            activity=ActivityType.SUP,
            max_gust=4,
            min_temp=15,
            priority=2,
        ),
    ]


@pytest.fixture
def sample_weather() -> list[LocationWeather]:
    """Two days of forecasts for two spots."""
    hvasser = LocationWeather(
        location=make_location(id="hvasser", name="Hvasser"),
        days=[
            make_day(
                [
                    {"wind_gust": 9, "wind_direction": 200},
                    {"wind_gust": 14, "wind_direction": 220},
                    {"wind_gust": 11, "wind_direction": 90},
                ],
                day=date(2024, 6, 1),
            ),
            make_day(
                [{"wind_gust": 2, "wind_direction": 10}],
                day=date(2024, 6, 2),
            ),
        ],
    )
    sandvika = LocationWeather(
        location=make_location(id="sandvika", name="Sandvika"),
        days=[
            make_day(
                [{"wind_gust": 3, "temperature": 18}],
                day=date(2024, 6, 2),
            ),
        ],
    )
    return [hvasser, sandvika]
