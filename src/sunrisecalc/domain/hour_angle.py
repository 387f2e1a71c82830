# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Hour angle of a horizon crossing.

Solves the altitude equation

    sin(h0) = sin(lat) sin(dec) + cos(lat) cos(dec) cos(H)

for H, the half-width of the diurnal arc above altitude h0. When no real
solution exists the Sun never crosses h0 that day; the hour angle is then
clamped to the nearest domain boundary so event times stay defined:

    cos H < -1  -> Sun always above, H = 180 deg (arc spans the whole day)
    cos H > +1  -> Sun always below, H = 0 deg   (rise = set = solar noon)
"""
import math
from dataclasses import dataclass
from enum import Enum

import numpy as np


class HourAngleOutcome(Enum):
    CROSSING = "crossing"
    POLAR_ABOVE = "polar_above"
    POLAR_BELOW = "polar_below"


@dataclass(frozen=True)
class HourAngleSolution:
    """Hour angle and whether it is a true crossing or a clamped placeholder."""
    outcome: HourAngleOutcome
    hour_angle_deg: float
    cos_hour_angle: float  # unclamped, may lie outside [-1, 1]


_FULL_ARC_DEG = 180.0
_NO_ARC_DEG = 0.0


def cos_hour_angle(
    latitude_deg: float,
    declination_deg: float,
    depression_deg: float,
) -> float:
    """Unclamped cos(H) for the given horizon altitude.

    At the geographic poles cos(lat) vanishes; the result is then an
    infinity carrying the sign of the numerator.
    """
    lat_rad = float(np.radians(latitude_deg))
    dec_rad = float(np.radians(declination_deg))
    h0_rad = float(np.radians(depression_deg))

    numerator = float(np.sin(h0_rad)) - float(np.sin(lat_rad)) * float(np.sin(dec_rad))
    denominator = float(np.cos(lat_rad)) * float(np.cos(dec_rad))
    if denominator == 0.0:
        return math.copysign(math.inf, numerator)
    return numerator / denominator


def solve_hour_angle(
    latitude_deg: float,
    declination_deg: float,
    depression_deg: float,
) -> HourAngleSolution:
    """Hour angle (degrees) at which the Sun crosses ``depression_deg``.

    Args:
        latitude_deg: Observer latitude in degrees, north positive.
        declination_deg: Solar declination in degrees.
        depression_deg: Horizon altitude in degrees (negative below the
            geometric horizon).

    Returns:
        HourAngleSolution. For polar outcomes ``hour_angle_deg`` is the
        clamped boundary value, not a real crossing.
    """
    cos_h = cos_hour_angle(latitude_deg, declination_deg, depression_deg)

    if cos_h < -1.0:
        return HourAngleSolution(HourAngleOutcome.POLAR_ABOVE, _FULL_ARC_DEG, cos_h)
    if cos_h > 1.0:
        return HourAngleSolution(HourAngleOutcome.POLAR_BELOW, _NO_ARC_DEG, cos_h)

    hour_angle_deg = float(np.degrees(np.arccos(cos_h)))
    return HourAngleSolution(HourAngleOutcome.CROSSING, hour_angle_deg, cos_h)
