"""Simplified heliocentric position of the Earth.

Earth's orbit defines the ecliptic, so inclination, node and periapsis
argument are all zero and the position stays in the x-y plane.
"""

from __future__ import annotations

import math

from planet_sky.constants import (
    EARTH_ECCENTRICITY,
    EARTH_MEAN_ANOMALY_AT_EPOCH_DEG,
    EARTH_MEAN_DAILY_MOTION_DEG,
    EARTH_SEMI_MAJOR_AXIS_AU,
)
from planet_sky.frames import Vector3
from planet_sky.kepler import heliocentric_distance, mean_anomaly, solve_kepler, true_anomaly
from planet_sky.planets.base import OrbitalElements

EARTH_ELEMENTS = OrbitalElements(
    semi_major_axis_au=EARTH_SEMI_MAJOR_AXIS_AU,
    eccentricity=EARTH_ECCENTRICITY,
    inclination_deg=0.0,
    ascending_node_deg=0.0,
    periapsis_arg_deg=0.0,
    mean_anomaly_at_epoch_deg=EARTH_MEAN_ANOMALY_AT_EPOCH_DEG,
    mean_daily_motion_deg=EARTH_MEAN_DAILY_MOTION_DEG,
)


def earth_heliocentric_position(days_since_epoch: float) -> Vector3:
    """Earth's heliocentric ecliptic position in AU (z is always 0).

    Parameters:
        days_since_epoch: Days from J2000.0.
    """
    el = EARTH_ELEMENTS
    m = mean_anomaly(el, days_since_epoch)
    e_anom = solve_kepler(m, el.eccentricity)
    nu = math.radians(true_anomaly(e_anom, el.eccentricity))
    r = heliocentric_distance(el.semi_major_axis_au, el.eccentricity, e_anom)
    return Vector3(r * math.cos(nu), r * math.sin(nu), 0.0)


def geocentric(heliocentric: Vector3, days_since_epoch: float) -> Vector3:
    """Shift a heliocentric ecliptic position to Earth's center."""
    return heliocentric - earth_heliocentric_position(days_since_epoch)
