# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Sunrise Calculator

Sunrise, sunset and day length for any latitude, longitude and calendar
day, for the normal, civil, nautical and astronomical horizons. Days on
which the Sun never crosses the chosen horizon are classified as polar
day or polar night instead of raising. Results are UTC unless an IANA
timezone is requested.
"""

from sunrisecalc.domain.errors import (
    OutOfRangeError,
    TimezoneLookupError,
)
from sunrisecalc.domain.horizon import (
    Horizon,
    depression_angle_deg,
)
from sunrisecalc.domain.solar import (
    SolarEphemerisResult,
    solar_ephemeris,
)
from sunrisecalc.domain.hour_angle import (
    HourAngleOutcome,
    HourAngleSolution,
    solve_hour_angle,
)
from sunrisecalc.domain.event_times import (
    compose_event_times,
    solar_noon_utc,
)
from sunrisecalc.domain.diurnal import (
    DiurnalResult,
    SolarEvent,
    SolarEvents,
)
from sunrisecalc.domain.location import (
    GeoCoordinate,
    MAX_LATITUDE,
    MIN_LATITUDE,
    MAX_LONGITUDE,
    MIN_LONGITUDE,
)
from sunrisecalc.ports.timezone import TimezoneProjector
from sunrisecalc.adapters.zoneinfo_projector import ZoneInfoProjector
from sunrisecalc.calculator import SolarCalculator

__all__ = [
    "OutOfRangeError",
    "TimezoneLookupError",
    "Horizon",
    "depression_angle_deg",
    "SolarEphemerisResult",
    "solar_ephemeris",
    "HourAngleOutcome",
    "HourAngleSolution",
    "solve_hour_angle",
    "compose_event_times",
    "solar_noon_utc",
    "DiurnalResult",
    "SolarEvent",
    "SolarEvents",
    "GeoCoordinate",
    "MAX_LATITUDE",
    "MIN_LATITUDE",
    "MAX_LONGITUDE",
    "MIN_LONGITUDE",
    "TimezoneProjector",
    "ZoneInfoProjector",
    "SolarCalculator",
]
