# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Timezone projection backed by the IANA database via zoneinfo.

The ``tzdata`` distribution supplies the database where the host has none.
"""
import logging
import zoneinfo
from datetime import datetime

from sunrisecalc.domain.errors import TimezoneLookupError
from sunrisecalc.ports.timezone import TimezoneProjector

logger = logging.getLogger(__name__)


class ZoneInfoProjector(TimezoneProjector):
    """Projects UTC instants into IANA timezones."""

    def resolve(self, timezone_name: str) -> zoneinfo.ZoneInfo:
        try:
            return zoneinfo.ZoneInfo(timezone_name)
        except (zoneinfo.ZoneInfoNotFoundError, ValueError, TypeError, OSError) as exc:
            logger.warning("Failed to load timezone %r: %s", timezone_name, exc)
            raise TimezoneLookupError(timezone_name, str(exc)) from exc

    def to_local(self, instant_utc: datetime, timezone_name: str) -> datetime:
        if instant_utc.tzinfo is None:
            raise ValueError("instant_utc must be timezone-aware")
        return instant_utc.astimezone(self.resolve(timezone_name))
