"""Instant resolution: UTC dates to days since J2000.0, Julian Dates and Unix millis.

String parsing goes through rms-julian, which reports UTC as (day, sec) with
day 0 = 2000-01-01. J2000.0 is noon of that day, hence the half-day offset.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

import julian

from planet_sky.config import get_leapsecs_path, get_max_year, get_min_year
from planet_sky.constants import (
    DAYS_PER_JULIAN_CENTURY,
    J2000_JD,
    MILLIS_PER_DAY,
    SECONDS_PER_DAY,
    UNIX_EPOCH_JD,
)
from planet_sky.errors import InvalidInputError

logger = logging.getLogger(__name__)

EPOCH = datetime(2000, 1, 1, 12, 0, 0, tzinfo=timezone.utc)

# Leap seconds loaded once at first use.
_leapsecs_loaded = False


def _ensure_leapsecs() -> None:
    """Load the leap seconds kernel for rms-julian if not already loaded.

    A configured JULIAN_LEAPSECS file that is missing or unreadable falls back
    to the kernel bundled with rms-julian.
    """
    global _leapsecs_loaded
    if _leapsecs_loaded:
        return
    julian.set_ut_model('SPICE')
    path = get_leapsecs_path()
    if path is not None:
        try:
            julian.load_lsk(path)
            _leapsecs_loaded = True
            return
        except (OSError, KeyError, ValueError) as e:
            logger.info('Leap seconds from %s not used (%s); using rms-julian bundled LSK.', path, e)
    julian.load_lsk()
    _leapsecs_loaded = True


def parse_datetime(string: str) -> float | None:
    """Parse a UTC date/time string to days since J2000.0.

    Parameters:
        string: Any format accepted by rms-julian; a trailing ISO 'Z' is allowed.

    Returns:
        Days since J2000.0 (negative before the epoch), or None on parse failure.
    """
    _ensure_leapsecs()
    candidates = [string]
    stripped = string.strip()
    if stripped.endswith(('Z', 'z')):
        # rms-julian does not take the ISO UTC suffix; the value is UTC either way.
        candidates.append(stripped[:-1])
    for candidate in candidates:
        try:
            day, sec = julian.day_sec_from_string(candidate)[:2]
        except (ValueError, TypeError, LookupError, OSError):
            continue
        return float(day) + float(sec) / SECONDS_PER_DAY - 0.5
    return None


@dataclass(frozen=True)
class Instant:
    """A UTC instant expressed as fractional days relative to J2000.0."""

    days_since_epoch: float

    @classmethod
    def from_datetime(cls, value: datetime) -> Instant:
        """Build from a datetime; naive values are taken as UTC."""
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        delta = value - EPOCH
        return cls(delta.total_seconds() / SECONDS_PER_DAY)

    @classmethod
    def from_string(cls, value: str) -> Instant:
        """Build from a date/time string (see parse_datetime)."""
        days = parse_datetime(value)
        if days is None:
            raise InvalidInputError(f'Invalid time: {value!r}')
        return cls(days)

    @classmethod
    def from_unix_millis(cls, millis: float) -> Instant:
        """Build from milliseconds since 1970-01-01T00:00:00 UTC."""
        return cls.from_julian_date(millis / MILLIS_PER_DAY + UNIX_EPOCH_JD)

    @classmethod
    def from_julian_date(cls, jd: float) -> Instant:
        """Build from a (UTC-based) Julian Date."""
        return cls(jd - J2000_JD)

    @property
    def julian_date(self) -> float:
        return J2000_JD + self.days_since_epoch

    @property
    def unix_millis(self) -> float:
        return (self.julian_date - UNIX_EPOCH_JD) * MILLIS_PER_DAY

    @property
    def julian_centuries(self) -> float:
        """Julian centuries since J2000.0."""
        return self.days_since_epoch / DAYS_PER_JULIAN_CENTURY

    def to_datetime(self) -> datetime:
        """Return the instant as an aware UTC datetime (raises OverflowError if unrepresentable)."""
        return EPOCH + timedelta(days=self.days_since_epoch)


def check_supported(instant: Instant) -> Instant:
    """Verify the instant falls within the configured supported years.

    Raises:
        InvalidInputError: If the instant is non-finite or outside
            [PLANET_SKY_MIN_YEAR-01-01, PLANET_SKY_MAX_YEAR-12-31T24:00].
    """
    days = instant.days_since_epoch
    if not math.isfinite(days):
        raise InvalidInputError(f'Instant is not finite: {days!r}')
    min_year = get_min_year()
    max_year = get_max_year()
    try:
        first = Instant.from_datetime(datetime(min_year, 1, 1, tzinfo=timezone.utc))
        last = Instant.from_datetime(datetime(max_year + 1, 1, 1, tzinfo=timezone.utc))
    except ValueError as e:
        raise InvalidInputError(f'Unsupported year range {min_year}-{max_year}: {e}') from e
    if not first.days_since_epoch <= days < last.days_since_epoch:
        raise InvalidInputError(
            f'Instant {days:.3f} days from J2000.0 is outside the supported range '
            f'{min_year}-01-01 to {max_year}-12-31'
        )
    return instant


def resolve_instant(value: Instant | datetime | str) -> Instant:
    """Convert caller input to an Instant within the supported range.

    Parameters:
        value: Instant, datetime (naive = UTC) or date/time string.

    Returns:
        Resolved Instant.

    Raises:
        InvalidInputError: Unparseable or out-of-range input, or an unsupported type.
    """
    if isinstance(value, Instant):
        instant = value
    elif isinstance(value, datetime):
        instant = Instant.from_datetime(value)
    elif isinstance(value, str):
        instant = Instant.from_string(value)
    else:
        raise InvalidInputError(f'Unsupported instant type: {type(value).__name__}')
    return check_supported(instant)
