"""Configuration: solver limits, scene scale and supported years from environment."""

from __future__ import annotations

import logging
import os

from planet_sky.constants import (
    DEFAULT_KEPLER_MAX_ITER,
    DEFAULT_MAX_YEAR,
    DEFAULT_MIN_YEAR,
    DEFAULT_SCENE_SCALE,
)

logger = logging.getLogger(__name__)


def _env_int(name: str, default: int, minimum: int | None = None) -> int:
    """Read an integer env var, falling back to default when unset or invalid."""
    raw = os.environ.get(name, '').strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning('Ignoring %s=%r (not an integer); using %d.', name, raw, default)
        return default
    if minimum is not None and value < minimum:
        logger.warning('Ignoring %s=%d (must be >= %d); using %d.', name, value, minimum, default)
        return default
    return value


def _env_float(name: str, default: float) -> float:
    """Read a positive float env var, falling back to default when unset or invalid."""
    raw = os.environ.get(name, '').strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning('Ignoring %s=%r (not a number); using %s.', name, raw, default)
        return default
    if not value > 0.0:
        logger.warning('Ignoring %s=%r (must be positive); using %s.', name, raw, default)
        return default
    return value


def get_kepler_max_iterations() -> int:
    """Return Newton-Raphson iteration cap (PLANET_SKY_KEPLER_MAX_ITER or 100).

    Returns:
        Positive iteration count.
    """
    return _env_int('PLANET_SKY_KEPLER_MAX_ITER', DEFAULT_KEPLER_MAX_ITER, minimum=1)


def get_scene_scale() -> float:
    """Return renderer units per AU (PLANET_SKY_SCENE_SCALE or 50).

    Returns:
        Positive scale factor.
    """
    return _env_float('PLANET_SKY_SCENE_SCALE', DEFAULT_SCENE_SCALE)


def get_min_year() -> int:
    """Return earliest supported calendar year (PLANET_SKY_MIN_YEAR or 1900)."""
    return _env_int('PLANET_SKY_MIN_YEAR', DEFAULT_MIN_YEAR, minimum=1)


def get_max_year() -> int:
    """Return latest supported calendar year (PLANET_SKY_MAX_YEAR or 2100)."""
    return _env_int('PLANET_SKY_MAX_YEAR', DEFAULT_MAX_YEAR, minimum=1)


def get_leapsecs_path() -> str | None:
    """Return path to a NAIF LSK leap seconds file for rms-julian.

    Uses JULIAN_LEAPSECS when set; otherwise None, meaning the LSK bundled
    with rms-julian.

    Returns:
        Path string or None.
    """
    path = os.environ.get('JULIAN_LEAPSECS', '').strip()
    return path or None
