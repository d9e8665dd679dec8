"""Forecast models consumed by the matcher."""

from __future__ import annotations

import datetime as dt

from pydantic import BaseModel, Field

from wind_activities.models.location import Location
from wind_activities.models.units import MS_TO_KNOTS


class WindForecastSample(BaseModel):
    """Forecast for a single hour of a day.

    Wind values are ``None`` when the sample has been marked stale by the
    caller (its hour is already over). Temperature is ``None`` when the
    upstream provider does not report it.
    """

    hour: int = Field(..., ge=0, le=23, description="Hour of day (local time)")
    wind_speed: float | None = Field(
        default=None, ge=0, description="Sustained wind speed in m/s"
    )
    wind_gust: float | None = Field(
        default=None, ge=0, description="Wind gust speed in m/s"
    )
    wind_direction: float | None = Field(
        default=None,
        ge=0,
        le=360,
        description="Direction the wind comes from, in degrees (0=N, 90=E)",
    )
    temperature: float | None = Field(
        default=None, description="Air temperature in Celsius"
    )

    # Sea current, when the provider has it
    sea_current_speed: float | None = Field(
        default=None, ge=0, description="Sea current speed in cm/s"
    )
    sea_current_direction: float | None = Field(
        default=None, ge=0, le=360, description="Sea current direction in degrees"
    )

    @property
    def wind_speed_knots(self) -> float | None:
        """Wind speed in knots."""
        return self.wind_speed * MS_TO_KNOTS if self.wind_speed is not None else None

    @property
    def wind_gust_knots(self) -> float | None:
        """Wind gust speed in knots."""
        return self.wind_gust * MS_TO_KNOTS if self.wind_gust is not None else None

    @property
    def is_stale(self) -> bool:
        """Whether the wind values have been blanked out."""
        return self.wind_speed is None and self.wind_gust is None


class DayForecast(BaseModel):
    """All hourly samples for one location on one calendar day.

    Samples are not guaranteed to be sorted or to cover every hour.
    """

    date: dt.date = Field(..., description="Calendar date of the forecast")
    forecasts: list[WindForecastSample] = Field(
        default_factory=list, description="Hourly samples, in any order"
    )

    def get_hour(self, hour: int) -> WindForecastSample | None:
        """Get the sample for a given hour, if present."""
        for sample in self.forecasts:
            if sample.hour == hour:
                return sample
        return None


class LocationWeather(BaseModel):
    """A location with its multi-day forecast, as returned by the provider."""

    location: Location
    days: list[DayForecast] = Field(default_factory=list)

    def get_day(self, day: dt.date) -> DayForecast | None:
        """Get the forecast for a given date, if present."""
        for forecast in self.days:
            if forecast.date == day:
                return forecast
        return None


class LocationWithForecast(BaseModel):
    """One candidate location for cross-location matching on a single day.

    ``is_loading`` is informational. A location that is refreshing but still
    holds a forecast is eligible for matching.
    """

    location: Location
    forecast: DayForecast | None = None
    is_loading: bool = False
