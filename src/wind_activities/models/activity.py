"""Activity models: the activities we recommend and the rules that pick them."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Self

from pydantic import BaseModel, Field, model_validator


class ActivityType(str, Enum):
    """Water-sport activities a rule can recommend."""

    WINDSURFING = "windsurfing"
    WINDFOIL = "windfoil"
    WINGFOIL = "wingfoil"
    SUP_FOIL = "sup-foil"
    KITING = "kiting"
    SUP = "sup"

    @property
    def label(self) -> str:
        """Human-readable activity name."""
        return ACTIVITY_LABELS[self]


ACTIVITY_LABELS: dict[ActivityType, str] = {
    ActivityType.WINDSURFING: "Windsurfing",
    ActivityType.WINDFOIL: "Windfoil",
    ActivityType.WINGFOIL: "Wingfoil",
    ActivityType.SUP_FOIL: "SUP-foil",
    ActivityType.KITING: "Kiting",
    ActivityType.SUP: "SUP",
}


class WindDirection(str, Enum):
    """Compass octants, in clockwise order starting at north."""

    N = "N"
    NE = "NE"
    E = "E"
    SE = "SE"
    S = "S"
    SW = "SW"
    W = "W"
    NW = "NW"


class ActivityRule(BaseModel):
    """A user-authored rule mapping forecast conditions to an activity.

    Every constraint is optional. A missing bound means no restriction on
    that side, and a rule without any constraints matches every sample at its
    location. ``None`` is kept distinct from ``0``: a gust of 0 m/s is a real
    value.

    Rules are evaluated in the order they are handed to the matcher; the rule
    store is expected to sort them by ascending ``priority`` first.

    Example:
        ```python
        rule = ActivityRule(
            id="r1",
            location_id="hvasser",
            location_name="Hvasser",
            activity=ActivityType.WINGFOIL,
            min_gust=8,
            max_gust=14,
            wind_directions=[WindDirection.SW, WindDirection.S],
            priority=0,
        )
        ```
    """

    # Identity
    id: str = Field(..., description="Unique rule identifier")
    user_id: str | None = Field(default=None, description="Owner of the rule")
    location_id: str = Field(..., description="Location this rule applies to")
    location_name: str = Field(
        default="", description="Location name copied when the rule was saved"
    )

    # Outcome
    activity: ActivityType = Field(..., description="Activity recommended on match")

    # Constraints
    min_gust: float | None = Field(
        default=None, ge=0, description="Minimum gust in m/s (inclusive)"
    )
    max_gust: float | None = Field(
        default=None, ge=0, description="Maximum gust in m/s (inclusive)"
    )
    wind_directions: list[WindDirection] | None = Field(
        default=None, description="Allowed wind directions, empty or None for any"
    )
    min_temp: float | None = Field(
        default=None, description="Minimum temperature in Celsius (inclusive)"
    )
    max_temp: float | None = Field(
        default=None, description="Maximum temperature in Celsius (inclusive)"
    )

    # Ordering
    priority: int = Field(default=0, description="Lower values are checked first")
    created_at: datetime | None = Field(default=None)

    @model_validator(mode="after")
    def validate_bounds(self) -> Self:
        """Reject ranges whose lower bound exceeds the upper bound."""
        if (
            self.min_gust is not None
            and self.max_gust is not None
            and self.min_gust > self.max_gust
        ):
            raise ValueError(
                f"min_gust ({self.min_gust}) is greater than max_gust ({self.max_gust})"
            )
        if (
            self.min_temp is not None
            and self.max_temp is not None
            and self.min_temp > self.max_temp
        ):
            raise ValueError(
                f"min_temp ({self.min_temp}) is greater than max_temp ({self.max_temp})"
            )
        return self

    @property
    def has_constraints(self) -> bool:
        """Whether any constraint is set."""
        return any(
            value is not None
            for value in (self.min_gust, self.max_gust, self.min_temp, self.max_temp)
        ) or bool(self.wind_directions)
