"""Recommendation models produced from matched rules."""

from __future__ import annotations

import datetime as dt

from pydantic import BaseModel, Field

from wind_activities.models.activity import ActivityType


class LocationDaySummary(BaseModel):
    """What one location looks like on one day."""

    location_id: str = Field(..., description="Location identifier")
    location_name: str = Field(..., description="Location display name")
    has_forecast: bool = Field(
        ..., description="Whether the location has a forecast for this day"
    )
    max_gust: float = Field(
        default=0, ge=0, description="Strongest display-hour gust in m/s"
    )
    activities: list[ActivityType] = Field(
        default_factory=list, description="All activities whose rules match"
    )


class DayPlan(BaseModel):
    """The recommendation for a single calendar day across all locations."""

    date: dt.date = Field(..., description="Calendar date")

    # Best pick for the day
    activity: ActivityType | None = Field(
        default=None, description="Highest-priority matching activity"
    )
    location_id: str | None = Field(
        default=None, description="Where the recommended activity applies"
    )
    location_name: str | None = Field(
        default=None, description="Location name stored on the matching rule"
    )

    locations: list[LocationDaySummary] = Field(
        default_factory=list, description="Per-location summaries"
    )

    @property
    def has_recommendation(self) -> bool:
        """Whether any rule matched on this day."""
        return self.activity is not None
