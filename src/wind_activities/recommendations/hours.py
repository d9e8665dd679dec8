"""Hour relevance policy for today's forecast.

Which hours are still worth showing is decided by the caller, not by the
matcher. The policy here keeps every sample but blanks the wind values of
hours that have already ended, so stale hours stay visible in a table and
simply stop matching gust and direction constraints.
"""

from __future__ import annotations

import datetime as dt

from wind_activities.config import get_settings
from wind_activities.models.forecast import DayForecast, WindForecastSample


def hour_has_elapsed(
    day: dt.date,
    hour: int,
    now: dt.datetime,
    grace: dt.timedelta,
) -> bool:
    """Check whether an hour on a given day ended more than ``grace`` ago.

    ``now`` must be in the same timezone as the forecast hours.
    """
    hour_end = dt.datetime.combine(day, dt.time(hour)) + dt.timedelta(hours=1)
    return now.replace(tzinfo=None) >= hour_end + grace


def blank_sample(sample: WindForecastSample) -> WindForecastSample:
    """Copy a sample with its wind values removed."""
    return sample.model_copy(
        update={"wind_speed": None, "wind_gust": None, "wind_direction": None}
    )


def blank_elapsed_hours(
    forecast: DayForecast,
    now: dt.datetime,
    grace: dt.timedelta | None = None,
) -> DayForecast:
    """Mark samples whose hour is over as stale.

    Args:
        forecast: Forecast for one day
        now: Current local time
        grace: How long after an hour ends it still counts. Defaults to the
            configured ``stale_grace_minutes``.

    Returns:
        A copy of the forecast; the input is not modified
    """
    if grace is None:
        grace = dt.timedelta(minutes=get_settings().stale_grace_minutes)

    forecasts = [
        blank_sample(f) if hour_has_elapsed(forecast.date, f.hour, now, grace) else f
        for f in forecast.forecasts
    ]
    return forecast.model_copy(update={"forecasts": forecasts})
