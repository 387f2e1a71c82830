# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Horizon definitions for rise/set events.

Each horizon is the solar altitude (degrees, negative below the geometric
horizon) at which the event is considered to happen.
"""
from enum import Enum


class Horizon(Enum):
    NORMAL = "normal"
    CIVIL = "civil"
    NAUTICAL = "nautical"
    ASTRONOMICAL = "astronomical"


# NORMAL: 34' mean refraction + 16' solar semi-diameter.
_DEPRESSION_ANGLE_DEG: dict[Horizon, float] = {
    Horizon.NORMAL: -0.833,
    Horizon.CIVIL: -6.0,
    Horizon.NAUTICAL: -12.0,
    Horizon.ASTRONOMICAL: -18.0,
}


def depression_angle_deg(horizon: Horizon) -> float:
    """Solar altitude in degrees defining the given horizon."""
    if not isinstance(horizon, Horizon):
        raise TypeError(f"Expected Horizon, got {type(horizon).__name__}")
    return _DEPRESSION_ANGLE_DEG[horizon]
