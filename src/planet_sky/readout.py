"""Text readouts of computed positions for the display layer."""

from __future__ import annotations

from planet_sky.angle_utils import dms_string
from planet_sky.constants import HOURS_PER_CIRCLE
from planet_sky.positions import BodyPositionResult, PositionBatch

_TABLE_HEADER = f'{"Body":<8} {"Constellation":<12} {"RA":>13} {"Dec":>14} {"Dist(AU)":>9} {"Mag":>6}'


def format_ra(ra_hours: float) -> str:
    """Right ascension as e.g. '19h 20m 29.5s'."""
    return dms_string(ra_hours, 'hms', 1, period=HOURS_PER_CIRCLE)


def format_dec(dec_deg: float) -> str:
    """Declination as e.g. '-24d 19m 55.1s'."""
    return dms_string(dec_deg, 'dms', 1)


def format_summary(result: BodyPositionResult) -> str:
    """One-line readout: name, constellation, RA (h), Dec (deg) and magnitude."""
    c = result.celestial
    return (
        f'{result.name} in {result.constellation}: '
        f'RA {c.ra_hours:.1f}h, Dec {c.dec_deg:.1f}°, mag {result.magnitude:.1f}'
    )


def position_table(batch: PositionBatch) -> list[str]:
    """Fixed-width table lines for a batch; failed bodies are listed after the rows."""
    lines = [_TABLE_HEADER]
    for result in batch.values():
        c = result.celestial
        lines.append(
            f'{result.name:<8} {result.constellation:<12} {format_ra(c.ra_hours):>13} '
            f'{format_dec(c.dec_deg):>14} {c.distance_au:9.4f} {result.magnitude:6.2f}'
        )
    for body_id, err in batch.errors.items():
        lines.append(f'{body_id:<8} error: {err}')
    return lines
