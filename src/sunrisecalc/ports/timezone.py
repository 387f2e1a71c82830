# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interface for timezone projection.

Adapters resolve a timezone identifier against a timezone database and
convert UTC instants into local, offset-adjusted instants.
"""
from datetime import datetime
from typing import Protocol, runtime_checkable


@runtime_checkable
class TimezoneProjector(Protocol):
    """Port for projecting UTC instants into a named timezone."""

    def to_local(self, instant_utc: datetime, timezone_name: str) -> datetime:
        """
        Convert a UTC instant to local time in ``timezone_name``.

        Args:
            instant_utc: Timezone-aware instant.
            timezone_name: IANA identifier, e.g. "America/New_York".

        Returns:
            The same instant, expressed in the local zone (DST-aware).

        Raises:
            TimezoneLookupError: If the identifier cannot be resolved.
        """
        ...
