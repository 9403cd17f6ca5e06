"""Venus orbital elements and display configuration."""

from __future__ import annotations

from planet_sky.planets.base import OrbitalElements, PlanetConfig

VENUS_CONFIG = PlanetConfig(
    body_id='venus',
    display_name='Venus',
    color='#FFC649',
    elements=OrbitalElements(
        semi_major_axis_au=0.723,
        eccentricity=0.007,
        inclination_deg=3.4,
        ascending_node_deg=76.7,
        periapsis_arg_deg=131.6,
        mean_anomaly_at_epoch_deg=50.1,
        mean_daily_motion_deg=1.6022,
    ),
    base_magnitude=-4.4,
)
