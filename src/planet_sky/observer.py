"""Observer location on the Earth's surface."""

from __future__ import annotations

import math
from dataclasses import dataclass

from planet_sky.angle_utils import parse_angle
from planet_sky.errors import InvalidInputError


@dataclass(frozen=True)
class ObserverLocation:
    """Geodetic latitude and east longitude of an observer, in degrees."""

    latitude_deg: float
    longitude_deg: float

    def __post_init__(self) -> None:
        try:
            lat = float(self.latitude_deg)
            lon = float(self.longitude_deg)
        except (TypeError, ValueError) as e:
            raise InvalidInputError(
                f'latitude and longitude must be numbers, got {self.latitude_deg!r}, {self.longitude_deg!r}'
            ) from e
        if not math.isfinite(lat) or not -90.0 <= lat <= 90.0:
            raise InvalidInputError(f'latitude must be in [-90, 90], got {self.latitude_deg!r}')
        if not math.isfinite(lon) or not -180.0 <= lon <= 180.0:
            raise InvalidInputError(f'longitude must be in [-180, 180], got {self.longitude_deg!r}')
        object.__setattr__(self, 'latitude_deg', lat)
        object.__setattr__(self, 'longitude_deg', lon)


def parse_observer(latitude: str, longitude: str) -> ObserverLocation:
    """Build an ObserverLocation from decimal or sexagesimal text.

    Parameters:
        latitude: e.g. "32.78" or "32 46 49.3"; negative is south.
        longitude: e.g. "-105 49 13.5"; negative is west.

    Raises:
        InvalidInputError: Unparseable text or out-of-range values.
    """
    lat = parse_angle(latitude)
    lon = parse_angle(longitude)
    if lat is None:
        raise InvalidInputError(f'Invalid latitude {latitude!r}')
    if lon is None:
        raise InvalidInputError(f'Invalid longitude {longitude!r}')
    return ObserverLocation(latitude_deg=lat, longitude_deg=lon)
