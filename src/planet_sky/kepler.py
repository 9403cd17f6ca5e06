"""Kepler's equation, true anomaly, orbital radius and mean-anomaly propagation."""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from planet_sky.angle_utils import normalize_degrees
from planet_sky.config import get_kepler_max_iterations
from planet_sky.constants import HIGH_ECCENTRICITY, KEPLER_TOLERANCE_RAD
from planet_sky.errors import InvalidInputError, NumericalError

if TYPE_CHECKING:
    from planet_sky.planets.base import OrbitalElements

logger = logging.getLogger(__name__)


def _check_eccentricity(eccentricity: float) -> None:
    if not 0.0 <= eccentricity < 1.0:
        raise InvalidInputError(f'eccentricity must be in [0, 1), got {eccentricity!r}')


def solve_kepler(
    mean_anomaly_deg: float,
    eccentricity: float,
    tolerance: float = KEPLER_TOLERANCE_RAD,
    max_iterations: int | None = None,
) -> float:
    """Solve E - e*sin(E) = M for the eccentric anomaly by Newton-Raphson.

    Iteration starts from E = M (radians), or from pi when e exceeds 0.8, and
    stops once the Newton step is smaller than ``tolerance``.

    Parameters:
        mean_anomaly_deg: Mean anomaly M in degrees (any value; reduced to [0, 360)).
        eccentricity: Orbital eccentricity in [0, 1).
        tolerance: Convergence threshold on the step size, radians.
        max_iterations: Iteration cap; None uses the configured cap (default 100).

    Returns:
        Eccentric anomaly E in degrees, normalized to [0, 360).

    Raises:
        InvalidInputError: Eccentricity outside [0, 1).
        NumericalError: No convergence within the iteration cap.
    """
    _check_eccentricity(eccentricity)
    if max_iterations is None:
        max_iterations = get_kepler_max_iterations()
    if max_iterations < 1:
        raise InvalidInputError(f'max_iterations must be positive, got {max_iterations!r}')
    m = math.radians(normalize_degrees(mean_anomaly_deg))
    e_anom = math.pi if eccentricity > HIGH_ECCENTRICITY else m
    for iteration in range(1, max_iterations + 1):
        f = e_anom - eccentricity * math.sin(e_anom) - m
        fp = 1.0 - eccentricity * math.cos(e_anom)
        delta = f / fp
        e_anom -= delta
        if abs(delta) < tolerance:
            logger.debug('Kepler converged in %d iterations (M=%.6f, e=%.4f)', iteration, mean_anomaly_deg, eccentricity)
            return normalize_degrees(math.degrees(e_anom))
    logger.error(
        'Kepler solver did not converge after %d iterations (M=%r, e=%r, last step=%r)',
        max_iterations,
        mean_anomaly_deg,
        eccentricity,
        delta,
    )
    raise NumericalError(
        f'Kepler equation did not converge in {max_iterations} iterations '
        f'(M={mean_anomaly_deg!r} deg, e={eccentricity!r})'
    )


def true_anomaly(eccentric_anomaly_deg: float, eccentricity: float) -> float:
    """Convert eccentric anomaly to true anomaly (degrees, [0, 360))."""
    _check_eccentricity(eccentricity)
    half = math.radians(eccentric_anomaly_deg) / 2.0
    nu = 2.0 * math.atan2(
        math.sqrt(1.0 + eccentricity) * math.sin(half),
        math.sqrt(1.0 - eccentricity) * math.cos(half),
    )
    return normalize_degrees(math.degrees(nu))


def heliocentric_distance(semi_major_axis: float, eccentricity: float, eccentric_anomaly_deg: float) -> float:
    """Orbital radius r = a(1 - e cos E), in the units of ``semi_major_axis``."""
    return semi_major_axis * (1.0 - eccentricity * math.cos(math.radians(eccentric_anomaly_deg)))


def mean_anomaly(elements: OrbitalElements, days_since_epoch: float) -> float:
    """Propagate the mean anomaly linearly from J2000.0.

    Parameters:
        elements: Orbital elements supplying M0 and the mean daily motion.
        days_since_epoch: Days from J2000.0; may be negative.

    Returns:
        Mean anomaly in degrees, [0, 360).
    """
    return normalize_degrees(
        elements.mean_anomaly_at_epoch_deg + elements.mean_daily_motion_deg * days_since_epoch
    )
