"""Tests for the renderer's celestial sphere projection."""

from __future__ import annotations

import math

import pytest

from planet_sky.errors import InvalidInputError, NumericalError
from planet_sky.frames import Vector3
from planet_sky.projection import project_to_sphere, sphere_to_celestial


def _close(a: Vector3, b: tuple[float, float, float]) -> bool:
    return (a.x, a.y, a.z) == pytest.approx(b, abs=1e-12)


def test_cardinal_directions() -> None:
    """y is the polar axis; RA turns from +x toward +z."""
    assert _close(project_to_sphere(0.0, 0.0), (1.0, 0.0, 0.0))
    assert _close(project_to_sphere(6.0, 0.0), (0.0, 0.0, 1.0))
    assert _close(project_to_sphere(12.0, 0.0), (-1.0, 0.0, 0.0))
    assert _close(project_to_sphere(0.0, 90.0), (0.0, 1.0, 0.0))
    assert _close(project_to_sphere(3.0, -90.0), (0.0, -1.0, 0.0))


def test_radius_and_degree_units() -> None:
    """Radius scales the point; RA may be given in degrees."""
    p = project_to_sphere(90.0, 0.0, 100.0, ra_units='degrees')
    assert _close(p, (0.0, 0.0, 100.0))
    q = project_to_sphere(4.0, 30.0, 2.0)
    assert q.norm() == pytest.approx(2.0)


@pytest.mark.parametrize('ra,dec', [(0.0, 0.0), (5.25, 12.5), (19.3415, -24.3320), (23.9, 60.0)])
def test_inverse_recovers_coordinates(ra: float, dec: float) -> None:
    """sphere_to_celestial undoes project_to_sphere."""
    ra2, dec2, r = sphere_to_celestial(project_to_sphere(ra, dec, 50.0))
    assert ra2 == pytest.approx(ra, abs=1e-9)
    assert dec2 == pytest.approx(dec, abs=1e-9)
    assert r == pytest.approx(50.0)


def test_inverse_in_degrees() -> None:
    """The inverse can report RA in degrees, normalized to [0, 360)."""
    ra, dec, _ = sphere_to_celestial(Vector3(0.0, 0.0, -1.0), ra_units='degrees')
    assert ra == pytest.approx(270.0)
    assert dec == 0.0


def test_origin_has_no_direction() -> None:
    """The sphere center has no RA/Dec."""
    with pytest.raises(NumericalError):
        sphere_to_celestial(Vector3(0.0, 0.0, 0.0))


def test_unknown_units_rejected() -> None:
    """Only hours and degrees are accepted."""
    with pytest.raises(InvalidInputError):
        project_to_sphere(1.0, 0.0, ra_units='radians')
    with pytest.raises(InvalidInputError):
        sphere_to_celestial(Vector3(1.0, 0.0, 0.0), ra_units='arcmin')


def test_dec_only_affects_y() -> None:
    """Declination sets the height above the equatorial plane."""
    p = project_to_sphere(7.0, 30.0)
    assert p.y == pytest.approx(0.5)
    assert math.hypot(p.x, p.z) == pytest.approx(math.sqrt(3.0) / 2.0)
