"""Mars orbital elements and display configuration."""

from __future__ import annotations

from planet_sky.planets.base import OrbitalElements, PlanetConfig

MARS_CONFIG = PlanetConfig(
    body_id='mars',
    display_name='Mars',
    color='#CD5C5C',
    elements=OrbitalElements(
        semi_major_axis_au=1.524,
        eccentricity=0.093,
        inclination_deg=1.9,
        ascending_node_deg=49.6,
        periapsis_arg_deg=336.1,
        mean_anomaly_at_epoch_deg=19.4,
        mean_daily_motion_deg=0.5240,
    ),
    base_magnitude=-2.9,
)
