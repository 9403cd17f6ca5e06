"""Tests for angle normalization, conversion and sexagesimal text."""

from __future__ import annotations

import math

import pytest

from planet_sky.angle_utils import (
    degrees_to_hours,
    dms_string,
    hours_to_degrees,
    normalize_degrees,
    normalize_hours,
    normalize_radians,
    parse_angle,
    radians_to_hours,
)


def test_normalize_degrees() -> None:
    """Angles reduce into [0, 360)."""
    assert normalize_degrees(370.0) == 10.0
    assert normalize_degrees(-10.0) == 350.0
    assert normalize_degrees(360.0) == 0.0
    assert normalize_degrees(-1e-20) == 0.0


def test_normalize_hours_and_radians() -> None:
    """Hours reduce into [0, 24); radians into [0, 2pi)."""
    assert normalize_hours(25.5) == 1.5
    assert normalize_hours(-1e-20) == 0.0
    assert normalize_radians(-math.pi) == pytest.approx(math.pi)
    assert normalize_radians(-1e-20) == 0.0


def test_unit_conversions() -> None:
    """15 degrees per hour of right ascension."""
    assert hours_to_degrees(6.0) == 90.0
    assert degrees_to_hours(270.0) == 18.0
    assert radians_to_hours(-math.pi / 2.0) == pytest.approx(18.0)


@pytest.mark.parametrize(
    'text,expected',
    [
        ('17.25', 17.25),
        ('12 30', 12.5),
        ('12:30:45', 12.5125),
        ('-5 30', -5.5),
        ('-0 30', -0.5),
        ('  32 46 49.3 ', 32.0 + 46.0 / 60.0 + 49.3 / 3600.0),
    ],
)
def test_parse_angle(text: str, expected: float) -> None:
    """Decimal and sexagesimal forms parse to decimal units."""
    assert parse_angle(text) == pytest.approx(expected)


@pytest.mark.parametrize('text', ['', '   ', 'abc', '1 2 3 4', '10 -5', '1:x'])
def test_parse_angle_rejects(text: str) -> None:
    """Bad text returns None."""
    assert parse_angle(text) is None


def test_dms_string_formats() -> None:
    """Fields carry the separators and seconds rounding carries upward."""
    assert dms_string(19.3415174843, 'hms', 1) == '19h 20m 29.5s'
    assert dms_string(-24.3319808873, 'dms', 1) == '-24d 19m 55.1s'
    assert dms_string(0.99999, 'dms', 1) == '1d 00m 00.0s'
    assert dms_string(-0.5, 'dms', 1) == '-0d 30m 00.0s'
    assert dms_string(1.5, 'dms', 0) == '1d 30m 00s'
    assert dms_string(1.5) == '1  30  00.0'


def test_dms_string_negative_zero_has_no_sign() -> None:
    """A tiny negative value that rounds to zero prints without a minus."""
    assert dms_string(-1e-9, 'dms', 1) == '0d 00m 00.0s'
    assert dms_string(-0.00002, 'dms', 1) == '-0d 00m 00.1s'


def test_dms_string_period_wraps() -> None:
    """With a period the rounded value is reduced to [0, period)."""
    assert dms_string(359.99999, 'dms', 1, period=360.0) == '0d 00m 00.0s'
    assert dms_string(-90.0, 'dms', 1, period=360.0) == '270d 00m 00.0s'
