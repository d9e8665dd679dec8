"""Conversion from wind direction in degrees to compass octants."""

from __future__ import annotations

import math

from wind_activities.models.activity import WindDirection

OCTANTS: tuple[WindDirection, ...] = tuple(WindDirection)


def degrees_to_compass(degrees: float) -> WindDirection:
    """Convert a direction in degrees to one of the eight compass octants.

    Each octant spans 45°, centred on its direction. Halfway points round up,
    so 22.5° is NE, and 360° wraps to N.

    Examples:
        22 -> N, 23 -> NE, 337 -> NW, 338 -> N
    """
    # round() would round 0.5 to even; the boundary must always round up
    index = math.floor(degrees / 45 + 0.5) % 8
    return OCTANTS[index]
