# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Command-line interface for sunrise/sunset tables.

Usage:
    # Today, UTC
    sunrisecalc --lat 40.7128 --lon -74.006

    # Specific day, local time
    sunrisecalc --lat 40.7128 --lon -74.006 --date 2021-07-08 --tz America/New_York

    # Civil twilight for a week
    sunrisecalc --lat 49.8209 --lon 18.2625 --horizon civil --days 7

    # Polar latitudes print their classification
    sunrisecalc --lat 85 --lon 0 --date 2021-06-21
"""
import argparse
import logging
import sys
from datetime import date, timedelta, timezone as dt_timezone

from sunrisecalc.calculator import SolarCalculator
from sunrisecalc.domain.diurnal import SolarEvents
from sunrisecalc.domain.errors import OutOfRangeError, TimezoneLookupError
from sunrisecalc.domain.horizon import Horizon

logger = logging.getLogger(__name__)


def format_duration(duration: timedelta) -> str:
    """H:MM:SS, hours not wrapped at 24."""
    total = int(round(duration.total_seconds()))
    hours, rem = divmod(total, 3600)
    minutes, seconds = divmod(rem, 60)
    return f"{hours}:{minutes:02d}:{seconds:02d}"


def format_row(day: date, events: SolarEvents) -> str:
    # Subtract in UTC; same-zone aware datetimes subtract as wall time.
    length = events.set.astimezone(dt_timezone.utc) - events.rise.astimezone(dt_timezone.utc)
    return (
        f"{day.isoformat()} {events.diurnal.value} "
        f"rise={events.rise.isoformat(timespec='seconds')} "
        f"set={events.set.isoformat(timespec='seconds')} "
        f"length={format_duration(length)}"
    )


def run(
    latitude: float,
    longitude: float,
    day: date | None = None,
    horizon: Horizon = Horizon.NORMAL,
    timezone: str | None = None,
    num_days: int = 1,
) -> list[str]:
    """
    Compute rise/set rows for consecutive days.

    Returns:
        One formatted line per day.
    """
    calc = SolarCalculator(latitude, longitude, day)
    rows = [
        format_row(d, events)
        for d, events in calc.rise_and_set_series(num_days, horizon, timezone)
    ]
    logger.info("Computed %d day(s) for lat=%s, lon=%s", len(rows), latitude, longitude)
    return rows


def _parse_day(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid date '{value}', expected YYYY-MM-DD")


def main():
    parser = argparse.ArgumentParser(
        description="Compute sunrise, sunset and day length for a location"
    )
    parser.add_argument(
        '--lat', type=float, required=True,
        help="Latitude in degrees, north positive (-90..90)"
    )
    parser.add_argument(
        '--lon', type=float, required=True,
        help="Longitude in degrees, east positive (-180..180)"
    )
    parser.add_argument(
        '--date', type=_parse_day, default=None,
        help="Calendar day as YYYY-MM-DD (default: today)"
    )
    parser.add_argument(
        '--horizon', choices=[h.value for h in Horizon], default=Horizon.NORMAL.value,
        help="Horizon definition (default: normal)"
    )
    parser.add_argument(
        '--tz', default=None,
        help="IANA timezone for output, e.g. Europe/Prague (default: UTC)"
    )
    parser.add_argument(
        '--days', type=int, default=1,
        help="Number of consecutive days to compute (default: 1)"
    )
    parser.add_argument(
        '--log-level', default='WARNING',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help="Logging verbosity (default: WARNING)"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.days < 1:
        parser.error("--days must be at least 1")

    try:
        rows = run(
            latitude=args.lat,
            longitude=args.lon,
            day=args.date,
            horizon=Horizon(args.horizon),
            timezone=args.tz,
            num_days=args.days,
        )
    except (OutOfRangeError, TimezoneLookupError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    for row in rows:
        print(row)


if __name__ == '__main__':
    main()
