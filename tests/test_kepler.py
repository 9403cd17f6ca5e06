"""Tests for the Kepler solver, true anomaly, orbital radius and mean anomaly."""

from __future__ import annotations

import math

import pytest

from planet_sky.errors import InvalidInputError, NumericalError
from planet_sky.kepler import heliocentric_distance, mean_anomaly, solve_kepler, true_anomaly
from planet_sky.planets import MERCURY_CONFIG, PLANET_CONFIGS


def _wrapped_residual(e_deg: float, e: float, m_deg: float) -> float:
    e_rad = math.radians(e_deg)
    residual = e_rad - e * math.sin(e_rad) - math.radians(m_deg)
    return (residual + math.pi) % (2.0 * math.pi) - math.pi


@pytest.mark.parametrize('e', [0.0, 0.007, 0.05, 0.206, 0.3, 0.5, 0.7, 0.8, 0.85, 0.89])
def test_solver_satisfies_kepler_equation(e: float) -> None:
    """Solution satisfies E - e sin E = M to 1e-6 rad over the whole circle."""
    for step in range(0, 720):
        m = step * 0.5
        e_anom = solve_kepler(m, e)
        assert 0.0 <= e_anom < 360.0
        assert abs(_wrapped_residual(e_anom, e, m)) < 1e-6


def test_solver_circular_orbit_is_identity() -> None:
    """With e = 0 the eccentric anomaly equals the mean anomaly."""
    assert solve_kepler(123.4, 0.0) == pytest.approx(123.4, abs=1e-12)
    assert solve_kepler(0.0, 0.5) == 0.0


def test_solver_reduces_mean_anomaly_outside_circle() -> None:
    """Mean anomalies outside [0, 360) give the same answer as their reduced form."""
    assert solve_kepler(-45.0, 0.2) == pytest.approx(solve_kepler(315.0, 0.2), abs=1e-9)
    assert solve_kepler(725.0, 0.2) == pytest.approx(solve_kepler(5.0, 0.2), abs=1e-9)


def test_solver_iteration_cap_raises_numerical_error() -> None:
    """Exceeding the iteration cap is a NumericalError."""
    with pytest.raises(NumericalError):
        solve_kepler(100.0, 0.5, max_iterations=1)


def test_solver_uses_configured_iteration_cap(monkeypatch: pytest.MonkeyPatch) -> None:
    """PLANET_SKY_KEPLER_MAX_ITER overrides the default cap."""
    monkeypatch.setenv('PLANET_SKY_KEPLER_MAX_ITER', '1')
    with pytest.raises(NumericalError):
        solve_kepler(100.0, 0.5)
    monkeypatch.setenv('PLANET_SKY_KEPLER_MAX_ITER', '100')
    assert 0.0 <= solve_kepler(100.0, 0.5) < 360.0


@pytest.mark.parametrize('e', [-0.1, 1.0, 1.5, float('nan')])
def test_solver_rejects_non_elliptic_eccentricity(e: float) -> None:
    """Only 0 <= e < 1 is accepted."""
    with pytest.raises(InvalidInputError):
        solve_kepler(10.0, e)


def test_solver_rejects_non_positive_cap() -> None:
    """An iteration cap below one is invalid input."""
    with pytest.raises(InvalidInputError):
        solve_kepler(10.0, 0.1, max_iterations=0)


def test_true_anomaly_known_values() -> None:
    """True anomaly matches closed-form cases."""
    assert true_anomaly(90.0, 0.0) == pytest.approx(90.0)
    assert true_anomaly(180.0, 0.3) == pytest.approx(180.0)
    # tan(nu/2) = sqrt(3) tan(45 deg) -> nu = 120 deg
    assert true_anomaly(90.0, 0.5) == pytest.approx(120.0)
    assert true_anomaly(270.0, 0.5) == pytest.approx(240.0)


def test_true_anomaly_is_normalized() -> None:
    """True anomaly always lands in [0, 360)."""
    for e_deg in range(0, 360, 15):
        nu = true_anomaly(float(e_deg), 0.2)
        assert 0.0 <= nu < 360.0


def test_heliocentric_distance_periapsis_and_apoapsis() -> None:
    """r = a(1 - e cos E) gives a(1-e) at E=0 and a(1+e) at E=180."""
    assert heliocentric_distance(2.0, 0.5, 0.0) == pytest.approx(1.0)
    assert heliocentric_distance(2.0, 0.5, 180.0) == pytest.approx(3.0)


def test_mean_anomaly_at_epoch_equals_table_value() -> None:
    """At J2000.0 every body's mean anomaly is exactly its tabulated value."""
    for cfg in PLANET_CONFIGS.values():
        assert mean_anomaly(cfg.elements, 0.0) == cfg.elements.mean_anomaly_at_epoch_deg


@pytest.mark.parametrize('days', [-1.0e7, -73049.5, -1.0, -1e-12, 1e-12, 36524.5, 1.0e7])
def test_mean_anomaly_normalized_far_from_epoch(days: float) -> None:
    """Mean anomaly stays in [0, 360) for instants long before or after the epoch."""
    for cfg in PLANET_CONFIGS.values():
        m = mean_anomaly(cfg.elements, days)
        assert 0.0 <= m < 360.0


def test_mean_anomaly_negative_days_wraps_forward() -> None:
    """Going back one full Mercury period returns to the epoch value."""
    el = MERCURY_CONFIG.elements
    period_days = 360.0 / el.mean_daily_motion_deg
    assert mean_anomaly(el, -period_days) == pytest.approx(el.mean_anomaly_at_epoch_deg, abs=1e-9)
    assert mean_anomaly(el, -10.0) == pytest.approx(174.8 - 40.923)
