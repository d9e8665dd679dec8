"""Location models for saved spots."""

from __future__ import annotations

import re
from typing import Self

from pydantic import BaseModel, Field


# Regex for parsing lat/long coordinates: "latitude,longitude"
# Supports optional +/- prefix for both values
COORDINATE_PATTERN = re.compile(
    r"^(?P<lat>[-+]?\d*\.?\d+)\s*,\s*(?P<lon>[-+]?\d*\.?\d+)$"
)


class Coordinates(BaseModel):
    """Geographic coordinates (latitude/longitude) in decimal degrees."""

    lat: float = Field(..., ge=-90, le=90, description="Latitude in decimal degrees")
    lon: float = Field(..., ge=-180, le=180, description="Longitude in decimal degrees")

    @classmethod
    def from_string(cls, value: str) -> Self:
        """Parse coordinates from string format 'latitude,longitude'.

        Examples:
            '59.9139,10.7522' -> Oslo
            '58.1599,8.0182' -> Kristiansand
        """
        match = COORDINATE_PATTERN.match(value.strip())
        if not match:
            raise ValueError(
                f"Invalid coordinate format: '{value}'. "
                "Expected format: 'latitude,longitude' (e.g., '59.9139,10.7522')"
            )
        return cls(lat=float(match.group("lat")), lon=float(match.group("lon")))

    def __str__(self) -> str:
        return f"{self.lat},{self.lon}"


class Location(BaseModel):
    """A saved location that rules and forecasts refer to by id."""

    id: str = Field(..., description="Unique location identifier")
    name: str = Field(..., description="Display name")
    region: str | None = Field(default=None, description="Region or county")
    country: str | None = Field(default=None, description="Country name")
    coordinates: Coordinates | None = Field(
        default=None, description="Geographic coordinates"
    )

    def display_name(self) -> str:
        """Get a display name, including region when known."""
        if self.region:
            return f"{self.name}, {self.region}"
        return self.name
