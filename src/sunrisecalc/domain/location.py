# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Geographic coordinate value object with range validation."""
from dataclasses import dataclass

from sunrisecalc.domain.errors import OutOfRangeError

MAX_LATITUDE: float = 90.0
MIN_LATITUDE: float = -90.0
MAX_LONGITUDE: float = 180.0
MIN_LONGITUDE: float = -180.0


def validate_latitude(latitude_deg: float) -> float:
    """Return ``latitude_deg`` as float or raise OutOfRangeError (NaN included)."""
    value = float(latitude_deg)
    if not (MIN_LATITUDE <= value <= MAX_LATITUDE):
        raise OutOfRangeError("Latitude", latitude_deg, MIN_LATITUDE, MAX_LATITUDE)
    return value


def validate_longitude(longitude_deg: float) -> float:
    """Return ``longitude_deg`` as float or raise OutOfRangeError (NaN included)."""
    value = float(longitude_deg)
    if not (MIN_LONGITUDE <= value <= MAX_LONGITUDE):
        raise OutOfRangeError("Longitude", longitude_deg, MIN_LONGITUDE, MAX_LONGITUDE)
    return value


@dataclass(frozen=True)
class GeoCoordinate:
    """Observer position. East longitude and north latitude are positive."""
    latitude_deg: float
    longitude_deg: float

    def __post_init__(self) -> None:
        object.__setattr__(self, 'latitude_deg', validate_latitude(self.latitude_deg))
        object.__setattr__(self, 'longitude_deg', validate_longitude(self.longitude_deg))
