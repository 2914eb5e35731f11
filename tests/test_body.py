"""Tests for Kepler helpers and bodies walking their trajectory ellipse."""

import math

import pytest

from orbitalview.geometry.body import OrbitalBody
from orbitalview.geometry.compute import (
    mean_motion,
    orbital_period,
    solve_kepler,
    standard_grav_param,
    true_anomaly,
    vis_viva,
)
from orbitalview.geometry.constants import AU, G, S_PER_DAY, S_PER_YEAR
from orbitalview.geometry.ellipse import Ellipse
from orbitalview.geometry.errors import DomainError

M_SUN = 1.98892e30


@pytest.mark.parametrize("M, e", [(0.0, 0.0), (1.0, 0.4), (2.5, 0.9), (5.0, 0.99)])
def test_solve_kepler_residual(M: float, e: float) -> None:
    E = solve_kepler(M, e)

    assert E - e * math.sin(E) - M == pytest.approx(0.0, abs=1e-10)


def test_true_anomaly_of_circle_equals_eccentric_anomaly() -> None:
    assert true_anomaly(1.2, 0.0) == pytest.approx(1.2)


def test_earth_period_is_one_year() -> None:
    mu = standard_grav_param(M_SUN, G=G)

    assert orbital_period(mu, AU) == pytest.approx(S_PER_YEAR, rel=1e-3)
    assert mean_motion(mu, AU) == pytest.approx(2 * math.pi / S_PER_YEAR, rel=1e-3)


def test_vis_viva_circular_orbit() -> None:
    # On a circle the speed is sqrt(GM / r)
    assert vis_viva(1.0, 4.0, 2.0, 2.0) == pytest.approx(math.sqrt(2.0))


def test_body_starts_at_periapsis() -> None:
    orbit = Ellipse(2.0, 0.5)
    body = OrbitalBody("voyager", 1.0, 1.0, orbit)

    assert body.position == pytest.approx((1.0, 0.0))
    assert body.distance == pytest.approx(orbit.a * (1 - orbit.e))


def test_body_reaches_apoapsis_after_half_period() -> None:
    orbit = Ellipse(2.0, 0.5)
    body = OrbitalBody("voyager", 1.0, 1.0, orbit)
    central_mass = 3.0
    period = orbital_period(standard_grav_param(central_mass), orbit.a)

    body.step(central_mass, period / 2, G=1.0)

    assert body.mean_anomaly == pytest.approx(math.pi)
    assert body.position == pytest.approx((-3.0, 0.0), abs=1e-9)
    assert body.distance == pytest.approx(orbit.a * (1 + orbit.e))


def test_body_mean_anomaly_wraps() -> None:
    body = OrbitalBody("earth", 5.97e24, 6.371e6, Ellipse(AU, 0.0167))

    for _ in range(400):
        body.step(M_SUN, S_PER_DAY)

    assert 0.0 <= body.mean_anomaly < 2 * math.pi
    assert body.distance == pytest.approx(AU, rel=0.02)


@pytest.mark.parametrize("mass, radius", [(0.0, 1.0), (1.0, -1.0)])
def test_body_rejects_invalid_parameters(mass: float, radius: float) -> None:
    with pytest.raises(DomainError):
        OrbitalBody("bad", mass, radius, Ellipse(1.0, 0.0))


def test_body_str() -> None:
    body = OrbitalBody("moon", 500.0, 2.0, Ellipse(1.0, 0.6))

    assert str(body) == "moon (m=500, r=2) a: 1 b: 0.8 e: 0.6"
