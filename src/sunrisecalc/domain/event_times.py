# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Rise and set instants from solar noon and hour angle.

All instants are UTC. Events falling before midnight or after the end of
the day carry into the neighbouring UTC calendar day.
"""
from datetime import date, datetime, timedelta, timezone

_DEGREES_PER_HOUR = 15.0
_MINUTES_PER_HOUR = 60.0


def solar_noon_utc(
    day: date,
    longitude_deg: float,
    equation_of_time_min: float,
) -> datetime:
    """Instant of local apparent noon, UTC.

    noon = 12h - longitude / 15 - EoT / 60 (hours), east longitude positive.
    """
    midnight = datetime(day.year, day.month, day.day, tzinfo=timezone.utc)
    offset_hours = (
        12.0
        - longitude_deg / _DEGREES_PER_HOUR
        - equation_of_time_min / _MINUTES_PER_HOUR
    )
    return midnight + timedelta(hours=offset_hours)


def half_arc(hour_angle_deg: float) -> timedelta:
    """Time between solar noon and either event."""
    return timedelta(hours=hour_angle_deg / _DEGREES_PER_HOUR)


def compose_event_times(
    day: date,
    longitude_deg: float,
    equation_of_time_min: float,
    hour_angle_deg: float,
) -> tuple[datetime, datetime, datetime]:
    """Solar noon, rise and set for the day, all UTC.

    Rise and set are symmetric offsets from a single noon instant, so
    ``set - rise`` is exactly twice the half arc.

    Returns:
        (noon, rise, set) as timezone-aware UTC datetimes.
    """
    noon = solar_noon_utc(day, longitude_deg, equation_of_time_min)
    arc = half_arc(hour_angle_deg)
    return noon, noon - arc, noon + arc
