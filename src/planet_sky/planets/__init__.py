"""Planet table: orbital elements, base magnitudes and display metadata per body."""

from __future__ import annotations

import logging
from types import MappingProxyType

from planet_sky.errors import InvalidInputError
from planet_sky.planets.base import OrbitalElements, PlanetConfig
from planet_sky.planets.jupiter import JUPITER_CONFIG
from planet_sky.planets.mars import MARS_CONFIG
from planet_sky.planets.mercury import MERCURY_CONFIG
from planet_sky.planets.saturn import SATURN_CONFIG
from planet_sky.planets.venus import VENUS_CONFIG

logger = logging.getLogger(__name__)

# Read-only registry in display order; extend by adding a config module here.
PLANET_CONFIGS: MappingProxyType[str, PlanetConfig] = MappingProxyType(
    {
        cfg.body_id: cfg
        for cfg in (MERCURY_CONFIG, VENUS_CONFIG, MARS_CONFIG, JUPITER_CONFIG, SATURN_CONFIG)
    }
)


def normalize_body_id(body_id: str) -> str:
    """Return the canonical (lowercase, stripped) form of a body id."""
    return body_id.strip().lower()


def get_planet_config(body_id: str) -> PlanetConfig:
    """Return the PlanetConfig for a body id (case-insensitive).

    Parameters:
        body_id: e.g. 'mars' or 'Jupiter'.

    Returns:
        The shared, immutable PlanetConfig.

    Raises:
        InvalidInputError: Unknown body id.
    """
    if not isinstance(body_id, str):
        raise InvalidInputError(f'body id must be a string, got {type(body_id).__name__}')
    cfg = PLANET_CONFIGS.get(normalize_body_id(body_id))
    if cfg is None:
        logger.debug('Unknown body id %r', body_id)
        raise InvalidInputError(
            f'Unknown body {body_id!r}; expected one of {", ".join(PLANET_CONFIGS)}'
        )
    return cfg


def body_ids() -> tuple[str, ...]:
    """Body ids in table order."""
    return tuple(PLANET_CONFIGS)


__all__ = [
    'JUPITER_CONFIG',
    'MARS_CONFIG',
    'MERCURY_CONFIG',
    'PLANET_CONFIGS',
    'SATURN_CONFIG',
    'VENUS_CONFIG',
    'OrbitalElements',
    'PlanetConfig',
    'body_ids',
    'get_planet_config',
    'normalize_body_id',
]
