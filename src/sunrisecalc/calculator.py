# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Sunrise/sunset calculator for a location and calendar day.

Pipeline per query (nothing is cached):

    day -> solar_ephemeris -> solve_hour_angle -> compose_event_times
        -> classify_events -> optional timezone projection

All astronomy runs in UTC; a timezone only affects the returned instants.
"""
import logging
from datetime import date, datetime, timedelta

from sunrisecalc.adapters.zoneinfo_projector import ZoneInfoProjector
from sunrisecalc.domain.diurnal import SolarEvent, SolarEvents, classify_events
from sunrisecalc.domain.event_times import compose_event_times, solar_noon_utc
from sunrisecalc.domain.horizon import Horizon, depression_angle_deg
from sunrisecalc.domain.hour_angle import solve_hour_angle
from sunrisecalc.domain.location import (
    MAX_LATITUDE,
    MAX_LONGITUDE,
    MIN_LATITUDE,
    MIN_LONGITUDE,
    GeoCoordinate,
)
from sunrisecalc.domain.solar import SolarEphemerisResult, solar_ephemeris
from sunrisecalc.ports.timezone import TimezoneProjector

logger = logging.getLogger(__name__)


def _as_day(value: date) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    raise TypeError(f"day must be a date, got {type(value).__name__}")


class SolarCalculator:
    """Rise, set and day length for a mutable location and day.

    ``latitude``, ``longitude`` and ``day`` may be reassigned between
    queries. A rejected assignment leaves the previous value in place.
    """

    MAX_LATITUDE = MAX_LATITUDE
    MIN_LATITUDE = MIN_LATITUDE
    MAX_LONGITUDE = MAX_LONGITUDE
    MIN_LONGITUDE = MIN_LONGITUDE

    def __init__(
        self,
        latitude: float,
        longitude: float,
        day: date | None = None,
        projector: TimezoneProjector | None = None,
    ):
        self._location = GeoCoordinate(latitude, longitude)
        self._day = _as_day(day) if day is not None else date.today()
        self._projector = projector if projector is not None else ZoneInfoProjector()

    # -- State ---------------------------------------------------------- #

    @property
    def location(self) -> GeoCoordinate:
        return self._location

    @property
    def latitude(self) -> float:
        return self._location.latitude_deg

    @latitude.setter
    def latitude(self, value: float) -> None:
        self._location = GeoCoordinate(value, self._location.longitude_deg)

    @property
    def longitude(self) -> float:
        return self._location.longitude_deg

    @longitude.setter
    def longitude(self, value: float) -> None:
        self._location = GeoCoordinate(self._location.latitude_deg, value)

    @property
    def day(self) -> date:
        return self._day

    @day.setter
    def day(self, value: date) -> None:
        self._day = _as_day(value)

    def with_location(self, latitude: float, longitude: float) -> "SolarCalculator":
        """New calculator at another location, same day and projector."""
        return SolarCalculator(latitude, longitude, self._day, self._projector)

    def with_day(self, day: date) -> "SolarCalculator":
        """New calculator for another day, same location and projector."""
        return SolarCalculator(
            self._location.latitude_deg, self._location.longitude_deg,
            day, self._projector,
        )

    def __repr__(self) -> str:
        return (
            f"SolarCalculator(latitude={self.latitude}, "
            f"longitude={self.longitude}, day={self._day.isoformat()})"
        )

    # -- Queries -------------------------------------------------------- #

    def ephemeris(self) -> SolarEphemerisResult:
        """Declination and equation of time for the current day."""
        return solar_ephemeris(self._day)

    def rise_and_set(
        self,
        horizon: Horizon = Horizon.NORMAL,
        timezone: str | None = None,
    ) -> SolarEvents:
        """Classification with rise and set instants.

        Under SUN_ALWAYS_ABOVE the pair spans solar noon +/- 12 h; under
        SUN_ALWAYS_BELOW both instants equal solar noon.
        """
        events = self._compute_utc(self._day, horizon)
        if timezone is None:
            return events
        return SolarEvents(
            diurnal=events.diurnal,
            rise=self._project(events.rise, timezone),
            set=self._project(events.set, timezone),
        )

    def sunrise(
        self,
        horizon: Horizon = Horizon.NORMAL,
        timezone: str | None = None,
    ) -> SolarEvent:
        events = self.rise_and_set(horizon, timezone)
        return SolarEvent(diurnal=events.diurnal, instant=events.rise)

    def sunset(
        self,
        horizon: Horizon = Horizon.NORMAL,
        timezone: str | None = None,
    ) -> SolarEvent:
        events = self.rise_and_set(horizon, timezone)
        return SolarEvent(diurnal=events.diurnal, instant=events.set)

    def day_length(self, horizon: Horizon = Horizon.NORMAL) -> timedelta:
        """Set minus rise in UTC; ~24 h or 0 for polar day/night."""
        events = self._compute_utc(self._day, horizon)
        return events.set - events.rise

    def solar_noon(self, timezone: str | None = None) -> datetime:
        """Instant the Sun crosses the local meridian."""
        eph = solar_ephemeris(self._day)
        noon = solar_noon_utc(self._day, self.longitude, eph.equation_of_time_min)
        if timezone is None:
            return noon
        return self._project(noon, timezone)

    def rise_and_set_series(
        self,
        num_days: int,
        horizon: Horizon = Horizon.NORMAL,
        timezone: str | None = None,
        start: date | None = None,
    ) -> list[tuple[date, SolarEvents]]:
        """Rise and set for ``num_days`` consecutive days.

        Starts at ``start`` (default: the calculator's day). The
        calculator's own state is not modified.
        """
        if num_days < 0:
            raise ValueError(f"num_days must be >= 0, got {num_days}")
        first = _as_day(start) if start is not None else self._day
        series: list[tuple[date, SolarEvents]] = []
        for offset in range(num_days):
            day = first + timedelta(days=offset)
            series.append((day, self.with_day(day).rise_and_set(horizon, timezone)))
        return series

    # -- Internals ------------------------------------------------------ #

    def _compute_utc(self, day: date, horizon: Horizon) -> SolarEvents:
        location = self._location
        depression = depression_angle_deg(horizon)
        eph = solar_ephemeris(day)
        solution = solve_hour_angle(location.latitude_deg, eph.declination_deg, depression)
        _, rise, set_ = compose_event_times(
            day, location.longitude_deg, eph.equation_of_time_min, solution.hour_angle_deg,
        )
        events = classify_events(solution.outcome, rise, set_)

        logger.debug(
            "Rise/set: lat=%s, lon=%s, day=%s, horizon=%s, dec=%.4f, eot=%.3f, "
            "cos_h=%.6f, diurnal=%s, rise=%s, set=%s",
            location.latitude_deg,
            location.longitude_deg,
            day.isoformat(),
            horizon.value,
            eph.declination_deg,
            eph.equation_of_time_min,
            solution.cos_hour_angle,
            events.diurnal.value,
            rise.isoformat(),
            set_.isoformat(),
        )
        return events

    def _project(self, instant: datetime, timezone: str) -> datetime:
        return self._projector.to_local(instant, timezone)
