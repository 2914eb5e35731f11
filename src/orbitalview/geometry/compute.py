import math

def standard_grav_param(M1: float, M2: float = 0.0, G: float = 1.0) -> float:
    """
    Standard gravitational parameter μ = G (M1 + M2).
    Use consistent units for G, masses, positions, and velocities.
    """
    return G * (M1 + M2)

def vis_viva(G, M, r, a):
    """Find the velocity of a bound object at a specific radius from a central mass.

    Args:
        G (float): Gravitational constant
        M (float): Mass of central body
        r (float): Current distance from central body
        a (float): Semi-major axis
    """
    return math.sqrt((G * M) * ((2.0/r) - (1/a)))

def mean_motion(mu: float, a: float) -> float:
    """Mean angular velocity n = sqrt(μ / a³) in rad per time unit."""
    return math.sqrt(mu / a**3)

def orbital_period(mu: float, a: float) -> float:
    return 2.0 * math.pi / mean_motion(mu, a)

def solve_kepler(M, e, tol=1e-12, max_iter=50):
    """Eccentric anomaly E for mean anomaly M, solving M = E - e·sin(E) (Newton)."""
    # Starting at π converges for highly eccentric orbits where E=M overshoots
    E = M if e < 0.8 else math.pi
    for _ in range(max_iter):
        delta = E - e * math.sin(E) - M
        if abs(delta) < tol:
            break
        E -= delta / (1 - e * math.cos(E))
    return E

def true_anomaly(E, e):
    """True anomaly ν (angle at the focus) for eccentric anomaly E."""
    return 2 * math.atan2(
        math.sqrt(1 + e) * math.sin(E / 2),
        math.sqrt(1 - e) * math.cos(E / 2)
    )
