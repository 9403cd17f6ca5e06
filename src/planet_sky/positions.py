"""Planet position pipeline: elements + instant -> apparent geocentric position.

Each call recomputes everything from the element table. Results are frozen
value objects, so callers may scrub time in either direction freely.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from datetime import datetime
from types import MappingProxyType

from planet_sky.config import get_scene_scale
from planet_sky.constellations import find_constellation
from planet_sky.earth import geocentric
from planet_sky.errors import PlanetSkyError
from planet_sky.frames import Vector3, ecliptic_to_equatorial, orbit_to_ecliptic
from planet_sky.kepler import heliocentric_distance, mean_anomaly, solve_kepler, true_anomaly
from planet_sky.photometry import apparent_magnitude
from planet_sky.planets import PlanetConfig, body_ids, get_planet_config, normalize_body_id
from planet_sky.time_utils import Instant, resolve_instant

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CelestialCoordinates:
    """Geocentric equatorial coordinates (fixed mean obliquity)."""

    ra_hours: float
    dec_deg: float
    distance_au: float


@dataclass(frozen=True)
class OrbitInfo:
    """Intermediate orbital angles and the Sun-body distance."""

    mean_anomaly_deg: float
    eccentric_anomaly_deg: float
    true_anomaly_deg: float
    heliocentric_distance_au: float


@dataclass(frozen=True)
class BodyPositionResult:
    """Apparent position, brightness and constellation of one body at one instant."""

    body_id: str
    name: str
    color: str
    position: Vector3  # geocentric ecliptic, AU
    celestial: CelestialCoordinates
    magnitude: float
    constellation: str
    orbit: OrbitInfo

    @property
    def scene_position(self) -> Vector3:
        """Geocentric position in renderer units (AU times the configured scene scale)."""
        return self.position.scaled(get_scene_scale())


class PositionBatch(Mapping):
    """Results for several bodies: maps body id -> BodyPositionResult.

    Only bodies that computed successfully appear in the mapping; failures
    are kept in ``errors`` so one bad body never hides the others.
    """

    def __init__(
        self,
        instant: Instant,
        results: dict[str, BodyPositionResult],
        errors: dict[str, PlanetSkyError],
    ) -> None:
        self.instant = instant
        self._results = MappingProxyType(dict(results))
        self.errors: Mapping[str, PlanetSkyError] = MappingProxyType(dict(errors))

    def __getitem__(self, body_id: str) -> BodyPositionResult:
        return self._results[body_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._results)

    def __len__(self) -> int:
        return len(self._results)

    @property
    def ok(self) -> bool:
        """True when every requested body succeeded."""
        return not self.errors

    def __repr__(self) -> str:
        return f'PositionBatch(bodies={list(self._results)!r}, errors={list(self.errors)!r})'


def _position_for(cfg: PlanetConfig, days: float) -> BodyPositionResult:
    """Run the full pipeline for one planet at days since J2000.0."""
    el = cfg.elements
    m = mean_anomaly(el, days)
    e_anom = solve_kepler(m, el.eccentricity)
    nu = true_anomaly(e_anom, el.eccentricity)
    r = heliocentric_distance(el.semi_major_axis_au, el.eccentricity, e_anom)

    nu_rad = math.radians(nu)
    helio = orbit_to_ecliptic(
        r * math.cos(nu_rad),
        r * math.sin(nu_rad),
        el.inclination_deg,
        el.periapsis_arg_deg,
        el.ascending_node_deg,
    )
    geo = geocentric(helio, days)
    ra_hours, dec_deg = ecliptic_to_equatorial(geo)
    distance = geo.norm()
    constellation = find_constellation(ra_hours, dec_deg)
    magnitude = apparent_magnitude(cfg.base_magnitude, r, distance)
    logger.debug(
        '%s at %+.5f d: M=%.4f E=%.4f nu=%.4f r=%.5f RA=%.5fh Dec=%.4f mag=%.2f (%s)',
        cfg.body_id,
        days,
        m,
        e_anom,
        nu,
        r,
        ra_hours,
        dec_deg,
        magnitude,
        constellation,
    )
    return BodyPositionResult(
        body_id=cfg.body_id,
        name=cfg.display_name,
        color=cfg.color,
        position=geo,
        celestial=CelestialCoordinates(ra_hours=ra_hours, dec_deg=dec_deg, distance_au=distance),
        magnitude=magnitude,
        constellation=constellation,
        orbit=OrbitInfo(
            mean_anomaly_deg=m,
            eccentric_anomaly_deg=e_anom,
            true_anomaly_deg=nu,
            heliocentric_distance_au=r,
        ),
    )


def compute_position(body_id: str, instant: Instant | datetime | str) -> BodyPositionResult:
    """Compute one body's apparent position at an instant.

    Parameters:
        body_id: Planet id, case-insensitive (e.g. 'mercury').
        instant: Instant, datetime (naive = UTC) or date/time string.

    Returns:
        A new BodyPositionResult.

    Raises:
        InvalidInputError: Unknown body or unusable instant.
        NumericalError: Solver non-convergence or degenerate geometry.
    """
    cfg = get_planet_config(body_id)
    resolved = resolve_instant(instant)
    return _position_for(cfg, resolved.days_since_epoch)


def compute_all_positions(
    instant: Instant | datetime | str,
    bodies: Iterable[str] | None = None,
) -> PositionBatch:
    """Compute positions for every tabulated body (or the given ids).

    A failure for one body is logged and recorded in ``PositionBatch.errors``;
    the remaining bodies are still computed.

    Parameters:
        instant: Instant, datetime (naive = UTC) or date/time string.
        bodies: Optional ids to compute (a single id string is allowed);
            defaults to the full table order.

    Raises:
        InvalidInputError: The instant itself is unusable (affects every body).
    """
    resolved = resolve_instant(instant)
    if bodies is None:
        requested = body_ids()
    elif isinstance(bodies, str):
        requested = (bodies,)
    else:
        requested = tuple(bodies)
    results: dict[str, BodyPositionResult] = {}
    errors: dict[str, PlanetSkyError] = {}
    for body_id in requested:
        key = normalize_body_id(body_id) if isinstance(body_id, str) else repr(body_id)
        try:
            results[key] = _position_for(get_planet_config(body_id), resolved.days_since_epoch)
        except PlanetSkyError as e:
            logger.warning('Position for %r at %+.5f d failed: %s', body_id, resolved.days_since_epoch, e)
            errors[key] = e
    return PositionBatch(resolved, results, errors)
