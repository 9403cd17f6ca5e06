"""Apparent sky positions of the classical planets from simplified Keplerian orbits.

The package computes, for any UTC instant, each planet's geocentric position,
right ascension and declination, constellation and apparent magnitude, plus
the sidereal-time orientation of the sky for an observer. It is a pure
in-process library consumed by a visualization front end.

Dates are resolved with rms-julian; vector algebra uses numpy.
"""

from planet_sky.errors import InvalidInputError, NumericalError, PlanetSkyError
from planet_sky.frames import Vector3
from planet_sky.observer import ObserverLocation
from planet_sky.positions import (
    BodyPositionResult,
    CelestialCoordinates,
    OrbitInfo,
    PositionBatch,
    compute_all_positions,
    compute_position,
)
from planet_sky.projection import project_to_sphere, sphere_to_celestial
from planet_sky.sidereal import Zenith, compute_zenith
from planet_sky.time_utils import Instant

__all__: list[str] = [
    'BodyPositionResult',
    'CelestialCoordinates',
    'Instant',
    'InvalidInputError',
    'NumericalError',
    'ObserverLocation',
    'OrbitInfo',
    'PlanetSkyError',
    'PositionBatch',
    'Vector3',
    'Zenith',
    'compute_all_positions',
    'compute_position',
    'compute_zenith',
    'project_to_sphere',
    'sphere_to_celestial',
]
