"""Tests for the real-root quadratic solver."""

import math

import pytest

from orbitalview.geometry.quadratic import solve_quadratic


def test_two_roots_ascending() -> None:
    roots = solve_quadratic(1.0, 0.0, -4.0)

    assert len(roots) == 2
    assert roots[0] == pytest.approx(-2.0)
    assert roots[1] == pytest.approx(2.0)


def test_two_roots_with_negative_leading_coefficient() -> None:
    # -(x - 1)(x - 3)
    roots = solve_quadratic(-1.0, 4.0, -3.0)

    assert roots.to_list() == pytest.approx([1.0, 3.0])


def test_repeated_root_reported_once() -> None:
    roots = solve_quadratic(1.0, -2.0, 1.0)

    assert len(roots) == 1
    assert roots[0] == pytest.approx(1.0)


def test_negative_discriminant_has_no_roots() -> None:
    assert len(solve_quadratic(1.0, 0.0, 1.0)) == 0


def test_tiny_negative_discriminant_snaps_to_zero() -> None:
    # (x - 0.1)² with rounding in the coefficients
    b = -0.2
    c = 0.1 * 0.1 + 1e-18
    roots = solve_quadratic(1.0, b, c)

    assert len(roots) == 1
    assert not math.isnan(roots[0])
    assert roots[0] == pytest.approx(0.1)


def test_zero_leading_coefficient_is_linear() -> None:
    roots = solve_quadratic(0.0, 2.0, -4.0)

    assert roots.to_list() == pytest.approx([2.0])


def test_near_zero_leading_coefficient_is_linear() -> None:
    roots = solve_quadratic(1e-20, 2.0, -4.0)

    assert roots.to_list() == pytest.approx([2.0])


def test_small_leading_coefficient_with_far_roots_stays_quadratic() -> None:
    # A short direction vector scales A down but the roots stay real and finite
    roots = solve_quadratic(1e-14, -1e-6, 24.0)

    assert roots.to_list() == pytest.approx([4e7, 6e7], rel=1e-9)


def test_roots_keep_precision_when_b_dominates() -> None:
    # x² - 1e8x + 1 has roots near 1e-8 and 1e8
    roots = solve_quadratic(1.0, -1e8, 1.0)

    assert roots[0] == pytest.approx(1e-8, rel=1e-12)
    assert roots[1] == pytest.approx(1e8, rel=1e-12)


def test_constant_equation_has_no_roots() -> None:
    assert len(solve_quadratic(0.0, 0.0, 5.0)) == 0
    assert len(solve_quadratic(0.0, 0.0, 0.0)) == 0


def test_result_capacity_is_two() -> None:
    assert solve_quadratic(1.0, 0.0, -1.0).capacity == 2
