"""Apparent magnitude estimate and magnitude-driven display helpers.

The brightness law is the base magnitude plus the distance modulus
5*log10(r*delta), with no phase-angle or illuminated-fraction term.
"""

from __future__ import annotations

import math

from planet_sky.errors import NumericalError


def apparent_magnitude(
    base_magnitude: float,
    heliocentric_distance_au: float,
    geocentric_distance_au: float,
) -> float:
    """Apparent magnitude from Sun and Earth distances.

    Parameters:
        base_magnitude: Tabulated base magnitude of the body.
        heliocentric_distance_au: Sun-body distance (AU), > 0.
        geocentric_distance_au: Earth-body distance (AU), > 0.

    Returns:
        Apparent visual magnitude (smaller is brighter).

    Raises:
        NumericalError: Either distance non-positive or non-finite.
    """
    for label, dist in (
        ('heliocentric', heliocentric_distance_au),
        ('geocentric', geocentric_distance_au),
    ):
        if not math.isfinite(dist) or dist <= 0.0:
            raise NumericalError(f'{label} distance must be positive and finite, got {dist!r}')
    return base_magnitude + 5.0 * math.log10(heliocentric_distance_au * geocentric_distance_au)


def magnitude_to_size(magnitude: float) -> float:
    """Marker size for a magnitude: brighter bodies are larger, never below 0.5."""
    return max(0.5, 5.0 - magnitude)


def magnitude_to_intensity(magnitude: float) -> float:
    """Relative display intensity: a factor of ~100 per 5 magnitudes."""
    return 2.512 ** (-magnitude) * 0.3
