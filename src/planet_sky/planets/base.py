"""Orbital element and planet configuration dataclasses."""

from __future__ import annotations

import math
from dataclasses import dataclass

from planet_sky.errors import InvalidInputError


@dataclass(frozen=True)
class OrbitalElements:
    """Simplified Keplerian elements at J2000.0 (angles in degrees, distances in AU)."""

    semi_major_axis_au: float
    eccentricity: float
    inclination_deg: float
    ascending_node_deg: float
    periapsis_arg_deg: float
    mean_anomaly_at_epoch_deg: float
    mean_daily_motion_deg: float  # degrees per day

    def __post_init__(self) -> None:
        if not all(math.isfinite(v) for v in (
            self.semi_major_axis_au,
            self.eccentricity,
            self.inclination_deg,
            self.ascending_node_deg,
            self.periapsis_arg_deg,
            self.mean_anomaly_at_epoch_deg,
            self.mean_daily_motion_deg,
        )):
            raise InvalidInputError('Orbital elements contain NaN or Inf')
        if not self.semi_major_axis_au > 0.0:
            raise InvalidInputError(f'semi-major axis must be positive, got {self.semi_major_axis_au!r}')
        if not 0.0 <= self.eccentricity < 1.0:
            raise InvalidInputError(f'eccentricity must be in [0, 1), got {self.eccentricity!r}')


@dataclass(frozen=True)
class PlanetConfig:
    """Planet table entry: elements plus display metadata and base magnitude."""

    body_id: str
    display_name: str
    color: str  # hex RGB used by the renderer
    elements: OrbitalElements
    base_magnitude: float
