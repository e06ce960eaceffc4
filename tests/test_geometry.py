"""
Tests for the circle/cylinder formulas and the fixed PI constant.
"""

from __future__ import annotations

import math

import pytest

from cylinder_calc.core.domain import geometry


def test_pi_is_the_six_decimal_constant() -> None:
    """PI is 3.141592 exactly, not math.pi."""
    assert geometry.PI == 3.141592
    assert geometry.PI != math.pi


@pytest.mark.parametrize("radius", [1, 2, 3, 10, 12345])
def test_diameter_is_exactly_twice_the_radius(radius: int) -> None:
    assert geometry.diameter(float(radius)) == 2 * radius


def test_circle_formulas_for_radius_three() -> None:
    assert geometry.circumference(3.0) == 18.849552000000003
    assert geometry.area(3.0) == 28.274328


def test_results_differ_from_full_precision_pi() -> None:
    """math.pi would give different circumference and area for radius 3."""
    assert geometry.circumference(3.0) != 2 * math.pi * 3.0
    assert geometry.area(3.0) != 3.0**2 * math.pi


def test_cylinder_formulas_for_known_circle() -> None:
    """volume/lateral/total use base area and circumference as given."""
    assert geometry.volume(28.274328, 5.0) == 28.274328 * 5.0
    assert geometry.lateral_surface_area(18.849552000000003, 5.0) == 94.24776000000001
    assert geometry.total_surface_area(28.274328, 94.24776000000001) == 150.79641600000002


def test_total_surface_area_counts_both_ends() -> None:
    assert geometry.total_surface_area(1.0, 0.0) == 2.0
