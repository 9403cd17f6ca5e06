"""Mercury orbital elements and display configuration."""

from __future__ import annotations

from planet_sky.planets.base import OrbitalElements, PlanetConfig

MERCURY_CONFIG = PlanetConfig(
    body_id='mercury',
    display_name='Mercury',
    color='#8C7853',
    elements=OrbitalElements(
        semi_major_axis_au=0.387,
        eccentricity=0.206,
        inclination_deg=7.0,
        ascending_node_deg=48.3,
        periapsis_arg_deg=77.5,
        mean_anomaly_at_epoch_deg=174.8,
        mean_daily_motion_deg=4.0923,
    ),
    base_magnitude=-0.6,
)
