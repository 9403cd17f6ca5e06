"""Exception taxonomy for position, sidereal-time and lookup failures."""

from __future__ import annotations


class PlanetSkyError(Exception):
    """Base class for all errors raised by planet_sky."""


class NumericalError(PlanetSkyError, ArithmeticError):
    """A computation could not produce a finite, well-defined result.

    Raised for Kepler non-convergence, non-positive distances in the magnitude
    law, and zero-length vectors in the equatorial conversion.
    """


class InvalidInputError(PlanetSkyError, ValueError):
    """Caller supplied an unknown body, a bad instant, or out-of-range values."""
