"""Frame rotations: orbital plane -> heliocentric ecliptic -> equatorial RA/Dec."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from planet_sky.angle_utils import radians_to_hours
from planet_sky.constants import OBLIQUITY_DEG
from planet_sky.errors import NumericalError


@dataclass(frozen=True)
class Vector3:
    """Immutable Cartesian 3-vector."""

    x: float
    y: float
    z: float

    @classmethod
    def from_array(cls, arr: np.ndarray) -> Vector3:
        return cls(float(arr[0]), float(arr[1]), float(arr[2]))

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=float)

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def scaled(self, factor: float) -> Vector3:
        return Vector3(factor * self.x, factor * self.y, factor * self.z)

    def norm(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)


def orbital_rotation_matrix(
    inclination_deg: float,
    periapsis_arg_deg: float,
    ascending_node_deg: float,
) -> np.ndarray:
    """Rotation taking orbital-plane vectors (periapsis on +x) to the ecliptic frame.

    Equivalent to Rz(node) @ Rx(i) @ Rz(periapsis argument).

    Returns:
        3x3 rotation matrix (row-major).
    """
    i = math.radians(inclination_deg)
    w = math.radians(periapsis_arg_deg)
    node = math.radians(ascending_node_deg)
    cos_w, sin_w = math.cos(w), math.sin(w)
    cos_i, sin_i = math.cos(i), math.sin(i)
    cos_n, sin_n = math.cos(node), math.sin(node)
    return np.array(
        [
            [cos_w * cos_n - sin_w * sin_n * cos_i, -sin_w * cos_n - cos_w * sin_n * cos_i, sin_n * sin_i],
            [cos_w * sin_n + sin_w * cos_n * cos_i, -sin_w * sin_n + cos_w * cos_n * cos_i, -cos_n * sin_i],
            [sin_w * sin_i, cos_w * sin_i, cos_i],
        ]
    )


def orbit_to_ecliptic(
    x: float,
    y: float,
    inclination_deg: float,
    periapsis_arg_deg: float,
    ascending_node_deg: float,
) -> Vector3:
    """Rotate planar orbital coordinates (x, y, 0) into heliocentric ecliptic coordinates.

    Parameters:
        x, y: Position in the orbital plane, periapsis along +x.
        inclination_deg: Orbital inclination i.
        periapsis_arg_deg: Argument of periapsis omega.
        ascending_node_deg: Longitude of the ascending node Omega.

    Returns:
        Heliocentric ecliptic position, same units as x and y.
    """
    rot = orbital_rotation_matrix(inclination_deg, periapsis_arg_deg, ascending_node_deg)
    return Vector3.from_array(rot @ np.array([x, y, 0.0]))


def ecliptic_to_equatorial_matrix(obliquity_deg: float = OBLIQUITY_DEG) -> np.ndarray:
    """Rotation about +x by the obliquity (ecliptic -> equatorial)."""
    eps = math.radians(obliquity_deg)
    cos_e, sin_e = math.cos(eps), math.sin(eps)
    return np.array(
        [
            [1.0, 0.0, 0.0],
            [0.0, cos_e, -sin_e],
            [0.0, sin_e, cos_e],
        ]
    )


def ecliptic_to_equatorial(
    vec: Vector3,
    obliquity_deg: float = OBLIQUITY_DEG,
) -> tuple[float, float]:
    """Convert a geocentric ecliptic vector to right ascension and declination.

    Parameters:
        vec: Geocentric ecliptic position (any length unit).
        obliquity_deg: Ecliptic obliquity; fixed mean value by default.

    Returns:
        (ra_hours in [0, 24), dec_deg in [-90, 90]).

    Raises:
        NumericalError: Zero-length or non-finite vector.
    """
    eq = ecliptic_to_equatorial_matrix(obliquity_deg) @ vec.as_array()
    r = float(np.linalg.norm(eq))
    if not math.isfinite(r):
        raise NumericalError(f'Equatorial conversion of non-finite vector {vec!r}')
    if r == 0.0:
        raise NumericalError('Equatorial conversion of zero-length vector (observer at body)')
    ra_hours = radians_to_hours(math.atan2(eq[1], eq[0]))
    dec_deg = math.degrees(math.asin(max(-1.0, min(1.0, eq[2] / r))))
    return (ra_hours, dec_deg)
