"""Jupiter orbital elements and display configuration."""

from __future__ import annotations

from planet_sky.planets.base import OrbitalElements, PlanetConfig

JUPITER_CONFIG = PlanetConfig(
    body_id='jupiter',
    display_name='Jupiter',
    color='#D8CA9D',
    elements=OrbitalElements(
        semi_major_axis_au=5.203,
        eccentricity=0.049,
        inclination_deg=1.3,
        ascending_node_deg=100.5,
        periapsis_arg_deg=14.8,
        mean_anomaly_at_epoch_deg=20.0,
        mean_daily_motion_deg=0.0831,
    ),
    base_magnitude=-2.9,
)
