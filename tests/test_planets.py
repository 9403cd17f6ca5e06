"""Tests for the planet element table and registry."""

from __future__ import annotations

import math

import pytest

from planet_sky.errors import InvalidInputError
from planet_sky.planets import (
    MARS_CONFIG,
    MERCURY_CONFIG,
    PLANET_CONFIGS,
    OrbitalElements,
    body_ids,
    get_planet_config,
    normalize_body_id,
)


def test_registry_order_and_contents() -> None:
    """Five planets in display order, keyed by their ids."""
    assert body_ids() == ('mercury', 'venus', 'mars', 'jupiter', 'saturn')
    for body_id, cfg in PLANET_CONFIGS.items():
        assert cfg.body_id == body_id
        assert cfg.display_name == body_id.capitalize()
        assert cfg.color.startswith('#') and len(cfg.color) == 7


def test_registry_is_read_only() -> None:
    """The registry cannot be modified in place."""
    with pytest.raises(TypeError):
        PLANET_CONFIGS['pluto'] = MARS_CONFIG  # type: ignore[index]


def test_mercury_elements() -> None:
    """Mercury's tabulated elements and base magnitude."""
    el = MERCURY_CONFIG.elements
    assert (el.semi_major_axis_au, el.eccentricity, el.inclination_deg) == (0.387, 0.206, 7.0)
    assert (el.ascending_node_deg, el.periapsis_arg_deg) == (48.3, 77.5)
    assert (el.mean_anomaly_at_epoch_deg, el.mean_daily_motion_deg) == (174.8, 4.0923)
    assert MERCURY_CONFIG.base_magnitude == -0.6


def test_elements_are_physical() -> None:
    """Every table entry is a bound orbit with positive motion."""
    for cfg in PLANET_CONFIGS.values():
        el = cfg.elements
        assert el.semi_major_axis_au > 0.0
        assert 0.0 <= el.eccentricity < 1.0
        assert el.mean_daily_motion_deg > 0.0
        assert math.isfinite(cfg.base_magnitude)


def test_lookup_normalizes_ids() -> None:
    """Lookup ignores case and surrounding whitespace."""
    assert normalize_body_id('  MaRs ') == 'mars'
    assert get_planet_config('MARS') is MARS_CONFIG


def test_lookup_rejects_unknown_and_non_string() -> None:
    """Unknown ids and non-strings raise InvalidInputError."""
    with pytest.raises(InvalidInputError, match='Unknown body'):
        get_planet_config('pluto')
    with pytest.raises(InvalidInputError):
        get_planet_config(4)  # type: ignore[arg-type]


@pytest.mark.parametrize(
    'kwargs',
    [
        {'semi_major_axis_au': 0.0},
        {'eccentricity': 1.0},
        {'eccentricity': -0.1},
        {'inclination_deg': math.nan},
    ],
)
def test_orbital_elements_validation(kwargs: dict[str, float]) -> None:
    """Unbound or non-finite elements are rejected at construction."""
    values = {
        'semi_major_axis_au': 1.0,
        'eccentricity': 0.1,
        'inclination_deg': 1.0,
        'ascending_node_deg': 0.0,
        'periapsis_arg_deg': 0.0,
        'mean_anomaly_at_epoch_deg': 0.0,
        'mean_daily_motion_deg': 1.0,
    }
    values.update(kwargs)
    with pytest.raises(InvalidInputError):
        OrbitalElements(**values)
