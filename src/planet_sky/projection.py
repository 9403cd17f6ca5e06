"""Celestial sphere <-> Cartesian projection for the renderer.

The renderer's scene is y-up: declination lifts points along +y and right
ascension turns from +x toward +z. This is a display convention, not an
astronomical frame, so only this module knows about it.
"""

from __future__ import annotations

import math

from planet_sky.angle_utils import degrees_to_hours, hours_to_degrees, normalize_degrees
from planet_sky.constants import DEFAULT_SPHERE_RADIUS
from planet_sky.errors import InvalidInputError, NumericalError
from planet_sky.frames import Vector3

_RA_UNITS = ('hours', 'degrees')


def _check_units(ra_units: str) -> str:
    u = ra_units.strip().lower()
    if u not in _RA_UNITS:
        raise InvalidInputError(f'Unknown RA unit {ra_units!r}; expected one of {_RA_UNITS}')
    return u


def project_to_sphere(
    ra: float,
    dec_deg: float,
    radius: float = DEFAULT_SPHERE_RADIUS,
    *,
    ra_units: str = 'hours',
) -> Vector3:
    """Place (RA, Dec) on a sphere of the given radius, y as the polar axis.

    x = r cos(dec) cos(ra), y = r sin(dec), z = r cos(dec) sin(ra).

    Parameters:
        ra: Right ascension, in ``ra_units``.
        dec_deg: Declination in degrees.
        radius: Sphere radius in scene units.
        ra_units: 'hours' or 'degrees'.
    """
    u = _check_units(ra_units)
    ra_deg = hours_to_degrees(ra) if u == 'hours' else ra
    ra_rad = math.radians(ra_deg)
    dec_rad = math.radians(dec_deg)
    return Vector3(
        radius * math.cos(dec_rad) * math.cos(ra_rad),
        radius * math.sin(dec_rad),
        radius * math.cos(dec_rad) * math.sin(ra_rad),
    )


def sphere_to_celestial(point: Vector3, *, ra_units: str = 'hours') -> tuple[float, float, float]:
    """Inverse of project_to_sphere.

    Returns:
        (ra in ``ra_units``, normalized; dec_deg; radius).

    Raises:
        NumericalError: Point at the origin.
    """
    u = _check_units(ra_units)
    radius = point.norm()
    if radius == 0.0:
        raise NumericalError('Cannot recover RA/Dec from the sphere center')
    dec_deg = math.degrees(math.asin(max(-1.0, min(1.0, point.y / radius))))
    ra_deg = normalize_degrees(math.degrees(math.atan2(point.z, point.x)))
    ra = degrees_to_hours(ra_deg) if u == 'hours' else ra_deg
    return (ra, dec_deg, radius)
