"""Angle normalization, unit conversion, and sexagesimal parsing/formatting."""

from __future__ import annotations

import math
import re

from planet_sky.constants import DEGREES_PER_CIRCLE, DEGREES_PER_HOUR_RA, HOURS_PER_CIRCLE, TWOPI


def normalize_degrees(angle: float) -> float:
    """Reduce an angle in degrees to [0, 360).

    Python's float modulo already returns a non-negative result for negative
    input, but tiny negative values round up to exactly 360.0; those map to 0.
    """
    out = angle % DEGREES_PER_CIRCLE
    if out >= DEGREES_PER_CIRCLE:
        out = 0.0
    return out


def normalize_hours(hours: float) -> float:
    """Reduce a right ascension in hours to [0, 24)."""
    out = hours % HOURS_PER_CIRCLE
    if out >= HOURS_PER_CIRCLE:
        out = 0.0
    return out


def normalize_radians(angle: float) -> float:
    """Reduce an angle in radians to [0, 2*pi)."""
    out = angle % TWOPI
    if out >= TWOPI:
        out = 0.0
    return out


def hours_to_degrees(hours: float) -> float:
    """Convert right ascension hours to degrees."""
    return hours * DEGREES_PER_HOUR_RA


def degrees_to_hours(degrees: float) -> float:
    """Convert degrees to right ascension hours."""
    return degrees / DEGREES_PER_HOUR_RA


def radians_to_hours(angle: float) -> float:
    """Convert radians to hours, normalized to [0, 24)."""
    return normalize_hours(degrees_to_hours(math.degrees(angle)))


def parse_angle(string: str) -> float | None:
    """Parse an angle written as degrees (or hours), minutes and seconds.

    Accepts one, two or three whitespace- or colon-separated numbers. Minutes
    and seconds must be non-negative; a leading minus makes the whole value
    negative (so "-0 30" is -0.5).

    Parameters:
        string: Text such as "12 30 45", "-5:30" or "17.25".

    Returns:
        Angle in the unit of the first field, or None on parse failure.
    """
    s = string.strip()
    if not s:
        return None
    parts = [p for p in re.split(r'[\s:]+', s) if p]
    if not 1 <= len(parts) <= 3:
        return None
    try:
        values = [float(p) for p in parts]
    except ValueError:
        return None
    if any(v < 0 for v in values[1:]):
        return None
    angle = abs(values[0])
    for power, value in enumerate(values[1:], start=1):
        angle += value / 60.0**power
    if s.startswith('-'):
        angle = -angle
    return angle


def dms_string(
    value: float,
    separator: str = '   ',
    ndecimal: int = 1,
    period: float | None = None,
) -> str:
    """Format an angle as degrees (or hours), minutes and seconds.

    Parameters:
        value: Angle in degrees, or hours for right ascension.
        separator: Three characters placed after each field (e.g. 'hms', 'dms'
            or three blanks).
        ndecimal: Number of decimal places on the seconds field.
        period: If given, the value is reduced to [0, period) after rounding,
            e.g. 24 for right ascension so 23h 59m 59.99s prints as 0h.

    Returns:
        Formatted string, e.g. "19h 20m 29.5s" or "-24d 19m 55.1s".
    """
    if len(separator) < 3:
        sep1 = sep2 = sep3 = ' '
    else:
        sep1, sep2, sep3 = separator[0], separator[1], separator[2]
    scale = 10**ndecimal
    if period is not None:
        full = round(period * 3600.0 * scale)
        # Round once in integer units of the last printed digit, then wrap.
        ticks = round((value % period) * 3600.0 * scale) % full
        negative = False
    else:
        # Round once in integer units of the last printed digit so 59.96s carries.
        ticks = round(abs(value) * 3600.0 * scale)
        negative = value < 0
    sign = '-' if negative and ticks > 0 else ''
    whole_secs, frac = divmod(ticks, scale)
    minutes, secs = divmod(whole_secs, 60)
    degrees, minutes = divmod(minutes, 60)
    if ndecimal > 0:
        sec_text = f'{secs:02d}.{frac:0{ndecimal}d}'
    else:
        sec_text = f'{secs:02d}'
    return f'{sign}{degrees:d}{sep1} {minutes:02d}{sep2} {sec_text}{sep3}'.rstrip()
