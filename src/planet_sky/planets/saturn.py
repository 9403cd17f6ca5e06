"""Saturn orbital elements and display configuration."""

from __future__ import annotations

from planet_sky.planets.base import OrbitalElements, PlanetConfig

SATURN_CONFIG = PlanetConfig(
    body_id='saturn',
    display_name='Saturn',
    color='#FAD5A5',
    elements=OrbitalElements(
        semi_major_axis_au=9.537,
        eccentricity=0.057,
        inclination_deg=2.5,
        ascending_node_deg=113.7,
        periapsis_arg_deg=93.0,
        mean_anomaly_at_epoch_deg=317.0,
        mean_daily_motion_deg=0.0334,
    ),
    base_magnitude=-0.5,
)
