"""Greenwich/local mean sidereal time and the observer's zenith direction."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime

from planet_sky.angle_utils import degrees_to_hours, normalize_degrees, normalize_hours
from planet_sky.constants import (
    DAYS_PER_JULIAN_CENTURY,
    GMST_AT_J2000_DEG,
    GMST_RATE_DEG_PER_DAY,
    GMST_T2_COEFF,
    GMST_T3_DIVISOR,
    J2000_JD,
    MILLIS_PER_DAY,
    UNIX_EPOCH_JD,
)
from planet_sky.observer import ObserverLocation
from planet_sky.time_utils import Instant, resolve_instant

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Zenith:
    """Equatorial direction of the observer's zenith."""

    ra_hours: float
    dec_deg: float
    local_sidereal_deg: float


def julian_date_from_unix_millis(millis: float) -> float:
    """Julian Date for milliseconds since 1970-01-01T00:00:00 UTC."""
    return millis / MILLIS_PER_DAY + UNIX_EPOCH_JD


def greenwich_mean_sidereal_time(jd: float) -> float:
    """Greenwich mean sidereal time in degrees, [0, 360).

    GMST = 280.46061837 + 360.98564736629 d + 0.000387933 T^2 - T^3/38710000,
    with d = JD - 2451545.0 and T = d / 36525.
    """
    d = jd - J2000_JD
    t = d / DAYS_PER_JULIAN_CENTURY
    gmst = GMST_AT_J2000_DEG + GMST_RATE_DEG_PER_DAY * d + GMST_T2_COEFF * t * t - t * t * t / GMST_T3_DIVISOR
    return normalize_degrees(gmst)


def local_sidereal_time(jd: float, longitude_deg: float) -> float:
    """Local mean sidereal time in degrees, [0, 360); longitude positive east."""
    return normalize_degrees(greenwich_mean_sidereal_time(jd) + longitude_deg)


def compute_zenith(
    instant: Instant | datetime | str,
    latitude_deg: float,
    longitude_deg: float,
) -> Zenith:
    """Right ascension and declination of the zenith for an observer.

    Parameters:
        instant: Instant, datetime (naive = UTC) or date/time string.
        latitude_deg: Observer latitude, [-90, 90].
        longitude_deg: Observer east longitude, [-180, 180].

    Returns:
        Zenith with RA = local sidereal time (hours) and Dec = latitude.

    Raises:
        InvalidInputError: Bad instant or observer coordinates.
    """
    observer = ObserverLocation(latitude_deg, longitude_deg)
    resolved = resolve_instant(instant)
    jd = julian_date_from_unix_millis(resolved.unix_millis)
    lst = local_sidereal_time(jd, observer.longitude_deg)
    logger.debug('JD %.6f lon %.4f -> LST %.6f deg', jd, observer.longitude_deg, lst)
    return Zenith(
        ra_hours=normalize_hours(degrees_to_hours(lst)),
        dec_deg=observer.latitude_deg,
        local_sidereal_deg=lst,
    )
