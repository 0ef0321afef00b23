"""
Service tests for unit conversion following kkb_fastapi pattern.
"""

import math

import pytest

from app.services.calculators.unit_converter import UnitConverter


@pytest.mark.parametrize(
    "value, expected",
    [
        (5.8986675, 5.9),
        (0.125, 0.13),
        (-0.125, -0.13),
        (1.004, 1.0),
        (0, 0.0),
    ],
)
def test_round2_halves_away_from_zero(value, expected):
    assert UnitConverter.round2(value) == expected


def test_round2_passes_through_non_finite():
    assert math.isinf(UnitConverter.round2(math.inf))
    assert math.isnan(UnitConverter.round2(math.nan))


def test_total_minutes_prefers_explicit_total():
    assert UnitConverter.total_minutes(
        duration_hours=2, duration_minutes=5, total_minutes=45
    ) == 45.0


def test_total_minutes_combines_hours_and_minutes():
    assert UnitConverter.total_minutes(duration_hours=1, duration_minutes=30) == 90.0
    assert UnitConverter.total_minutes() == 0.0


def test_minutes_to_km():
    assert UnitConverter.minutes_to_km(60, 30) == 30.0
    assert UnitConverter.minutes_to_km(20, 15) == 5.0
    assert UnitConverter.minutes_to_km(0, 800) == 0.0
