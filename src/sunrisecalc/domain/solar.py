# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Analytical solar ephemeris for a calendar day.

Low-precision Sun position and equation of time using Meeus "Astronomical
Algorithms" Ch. 25 (solar coordinates) and Ch. 28 (equation of time).
Accuracy ~0.01° in declination and a few seconds in the equation of time,
well below the one-minute resolution needed for rise/set times.

The ephemeris is evaluated at 12:00 UTC of the requested day.
"""
import math
from dataclasses import dataclass
from datetime import date, datetime, timezone

import numpy as np

# J2000.0 reference epoch
_J2000 = datetime(2000, 1, 1, 12, 0, 0, tzinfo=timezone.utc)

_SECONDS_PER_JULIAN_CENTURY = 36525.0 * 86400.0

# Minutes of time per degree of hour angle
_MINUTES_PER_DEGREE = 4.0


@dataclass(frozen=True)
class SolarEphemerisResult:
    """Sun declination and equation of time for a calendar day."""
    day_of_year: int
    julian_centuries: float
    declination_deg: float
    equation_of_time_min: float  # apparent minus mean solar time


def julian_centuries_j2000(epoch: datetime) -> float:
    """Julian centuries since J2000.0 (2000-01-01 12:00:00 UTC)."""
    dt_seconds = (epoch - _J2000).total_seconds()
    return dt_seconds / _SECONDS_PER_JULIAN_CENTURY


def day_of_year(day: date) -> int:
    """Ordinal day within the year, 1..366."""
    return day.timetuple().tm_yday


def solar_ephemeris(day: date) -> SolarEphemerisResult:
    """Declination and equation of time for the given day.

    Args:
        day: Calendar date (proleptic Gregorian).

    Returns:
        SolarEphemerisResult evaluated at 12:00 UTC of ``day``.
    """
    noon_utc = datetime(day.year, day.month, day.day, 12, 0, 0, tzinfo=timezone.utc)
    T = julian_centuries_j2000(noon_utc)

    # Geometric mean longitude and mean anomaly (degrees)
    L0_deg = (280.46646 + 36000.76983 * T + 0.0003032 * T * T) % 360.0
    M_deg = (357.52911 + 35999.05029 * T - 0.0001537 * T * T) % 360.0
    M_rad = float(np.radians(M_deg))

    # Eccentricity of Earth's orbit
    e = 0.016708634 - 0.000042037 * T - 0.0000001267 * T * T

    # Equation of center and true longitude
    C_deg = ((1.914602 - 0.004817 * T - 0.000014 * T * T) * float(np.sin(M_rad))
             + (0.019993 - 0.000101 * T) * float(np.sin(2.0 * M_rad))
             + 0.000289 * float(np.sin(3.0 * M_rad)))
    true_long_deg = L0_deg + C_deg

    # Apparent longitude (nutation + aberration)
    omega_rad = float(np.radians(125.04 - 1934.136 * T))
    lambda_deg = true_long_deg - 0.00569 - 0.00478 * float(np.sin(omega_rad))
    lambda_rad = float(np.radians(lambda_deg))

    # Obliquity of the ecliptic, corrected
    eps0_deg = 23.0 + (26.0 + (21.448 - T * (46.8150 + T * (0.00059 - T * 0.001813))) / 60.0) / 60.0
    eps_deg = eps0_deg + 0.00256 * float(np.cos(omega_rad))
    eps_rad = float(np.radians(eps_deg))

    dec_rad = float(np.arcsin(np.sin(eps_rad) * np.sin(lambda_rad)))

    # Equation of time (Meeus 28.3), radians
    y = math.tan(eps_rad / 2.0) ** 2
    L0_rad = float(np.radians(L0_deg))
    eot_rad = (y * float(np.sin(2.0 * L0_rad))
               - 2.0 * e * float(np.sin(M_rad))
               + 4.0 * e * y * float(np.sin(M_rad)) * float(np.cos(2.0 * L0_rad))
               - 0.5 * y * y * float(np.sin(4.0 * L0_rad))
               - 1.25 * e * e * float(np.sin(2.0 * M_rad)))

    return SolarEphemerisResult(
        day_of_year=day_of_year(day),
        julian_centuries=T,
        declination_deg=float(np.degrees(dec_rad)),
        equation_of_time_min=float(np.degrees(eot_rad)) * _MINUTES_PER_DEGREE,
    )
