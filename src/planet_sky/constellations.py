"""Zodiacal constellation lookup by rectangular (RA, Dec) boxes.

The boxes are a coarse stand-in for the irregular IAU boundaries. They leave
gaps and share edges; a point on a shared edge belongs to whichever box comes
first in the table.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

UNKNOWN_CONSTELLATION = 'Unknown'


@dataclass(frozen=True)
class ConstellationBounds:
    """Inclusive RA (hours) and Dec (degrees) box; ra_start > ra_end wraps past 0h."""

    name: str
    abbreviation: str
    ra_start: float
    ra_end: float
    dec_min: float
    dec_max: float

    def contains(self, ra_hours: float, dec_deg: float) -> bool:
        if self.ra_start <= self.ra_end:
            in_ra = self.ra_start <= ra_hours <= self.ra_end
        else:
            in_ra = ra_hours >= self.ra_start or ra_hours <= self.ra_end
        return in_ra and self.dec_min <= dec_deg <= self.dec_max


ZODIAC_BOUNDS: tuple[ConstellationBounds, ...] = (
    ConstellationBounds('Pisces', 'Psc', 0.0, 2.0, -5.0, 25.0),
    ConstellationBounds('Aries', 'Ari', 2.0, 4.0, 0.0, 30.0),
    ConstellationBounds('Taurus', 'Tau', 4.0, 7.0, 5.0, 35.0),
    ConstellationBounds('Gemini', 'Gem', 7.0, 9.0, 10.0, 35.0),
    ConstellationBounds('Cancer', 'Cnc', 9.0, 10.0, 5.0, 35.0),
    ConstellationBounds('Leo', 'Leo', 10.0, 12.0, 0.0, 30.0),
    ConstellationBounds('Virgo', 'Vir', 12.0, 15.0, -15.0, 15.0),
    ConstellationBounds('Libra', 'Lib', 15.0, 16.0, -25.0, 0.0),
    ConstellationBounds('Scorpius', 'Sco', 16.0, 18.0, -45.0, -5.0),
    ConstellationBounds('Sagittarius', 'Sgr', 18.0, 20.0, -45.0, -15.0),
    ConstellationBounds('Capricornus', 'Cap', 20.0, 22.0, -25.0, -5.0),
    ConstellationBounds('Aquarius', 'Aqr', 22.0, 24.0, -25.0, 5.0),
)


def find_constellation_bounds(
    ra_hours: float,
    dec_deg: float,
    table: Iterable[ConstellationBounds] = ZODIAC_BOUNDS,
) -> ConstellationBounds | None:
    """Return the first box in table order containing the point, or None."""
    for bounds in table:
        if bounds.contains(ra_hours, dec_deg):
            return bounds
    return None


def find_constellation(
    ra_hours: float,
    dec_deg: float,
    table: Iterable[ConstellationBounds] = ZODIAC_BOUNDS,
) -> str:
    """Return the constellation name for (RA, Dec), or UNKNOWN_CONSTELLATION.

    Parameters:
        ra_hours: Right ascension in hours, [0, 24).
        dec_deg: Declination in degrees.
        table: Ordered boxes to search; first match wins.
    """
    bounds = find_constellation_bounds(ra_hours, dec_deg, table)
    return UNKNOWN_CONSTELLATION if bounds is None else bounds.name
