"""Application configuration.

Configuration is loaded from environment variables using pydantic-settings.
Every value has a sensible default, so the package works without any
environment at all.

## Optional Environment Variables

- WIND_ACTIVITIES_DISPLAY_HOURS: JSON list of hours considered for matching
  (default: [10, 12, 14, 16, 18, 20])
- WIND_ACTIVITIES_WIND_UNIT: Unit for displayed wind speeds, "ms" or "knots"
- WIND_ACTIVITIES_STALE_GRACE_MINUTES: Minutes after an hour ends before its
  sample is considered stale (default: 30)
- WIND_ACTIVITIES_LOG_LEVEL: Logging level for the CLI (default: INFO)

## Example .env file

```
WIND_ACTIVITIES_DISPLAY_HOURS=[10, 12, 14, 16]
WIND_ACTIVITIES_WIND_UNIT=knots
```
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from wind_activities.models.units import WindUnit

DEFAULT_DISPLAY_HOURS = (10, 12, 14, 16, 18, 20)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="WIND_ACTIVITIES_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Wind Activities"
    app_version: str = "0.1.0"

    # Matching
    display_hours: list[int] = Field(
        default=list(DEFAULT_DISPLAY_HOURS),
        description="Hours of the day considered when matching rules",
    )
    stale_grace_minutes: int = Field(default=30, ge=0, le=24 * 60)

    # Display
    wind_unit: WindUnit = WindUnit.METERS_PER_SECOND

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    @field_validator("display_hours")
    @classmethod
    def validate_display_hours(cls, v: list[int]) -> list[int]:
        """Ensure display hours are valid hours of the day, deduplicated and sorted."""
        for hour in v:
            if not 0 <= hour <= 23:
                raise ValueError(f"Display hour out of range: {hour}")
        return sorted(set(v))

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Settings are loaded once and cached. To reload, clear the cache:
    ```python
    get_settings.cache_clear()
    ```
    """
    return Settings()


def get_settings_uncached() -> Settings:
    """Get fresh settings without caching.

    Useful for testing when environment variables change.
    """
    return Settings()
