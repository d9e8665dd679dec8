"""Domain models for wind activity recommendations."""

from wind_activities.models.location import Coordinates, Location
from wind_activities.models.activity import (
    ACTIVITY_LABELS,
    ActivityRule,
    ActivityType,
    WindDirection,
)
from wind_activities.models.forecast import (
    DayForecast,
    LocationWeather,
    LocationWithForecast,
    WindForecastSample,
)
from wind_activities.models.recommendation import DayPlan, LocationDaySummary
from wind_activities.models.units import (
    MS_TO_KNOTS,
    WindUnit,
    convert_wind_speed,
    to_meters_per_second,
    wind_unit_label,
)

__all__ = [
    # Location
    "Coordinates",
    "Location",
    # Activity
    "ACTIVITY_LABELS",
    "ActivityRule",
    "ActivityType",
    "WindDirection",
    # Forecast
    "DayForecast",
    "LocationWeather",
    "LocationWithForecast",
    "WindForecastSample",
    # Recommendation
    "DayPlan",
    "LocationDaySummary",
    # Units
    "MS_TO_KNOTS",
    "WindUnit",
    "convert_wind_speed",
    "to_meters_per_second",
    "wind_unit_label",
]
