import math
from dataclasses import dataclass, field

from orbitalview.geometry import logger
from orbitalview.geometry.compute import mean_motion, solve_kepler, standard_grav_param
from orbitalview.geometry.constants import G as GRAVITATIONAL_CONSTANT, TWO_PI
from orbitalview.geometry.ellipse import Ellipse
from orbitalview.geometry.errors import DomainError
from orbitalview.geometry.fmt import format_vec, mag_format
from orbitalview.geometry.vec import Vec2, v_norm


@dataclass
class OrbitalBody:
    """A body moving along a fixed elliptic trajectory.

    The central mass sits at the right-hand focus ``(a·e, 0)`` of the
    trajectory; ``position`` is measured from there.
    """
    name: str
    mass: float
    radius: float
    trajectory: Ellipse
    mean_anomaly: float = 0.0
    position: Vec2 = field(init=False)

    def __post_init__(self):
        if self.mass <= 0:
            raise DomainError(f"{self.name}: mass must be positive, got {self.mass}")
        if self.radius <= 0:
            raise DomainError(f"{self.name}: radius must be positive, got {self.radius}")
        self._update_position()

    def _update_position(self):
        E = solve_kepler(self.mean_anomaly, self.trajectory.e)
        x, y = self.trajectory.point(E)
        self.position = (x - self.trajectory.focus, y)

    @property
    def distance(self) -> float:
        """Distance from the central mass."""
        return v_norm(self.position)

    def step(self, M: float, dt: float, G: float = GRAVITATIONAL_CONSTANT):
        """Advance the body by ``dt`` around a central mass ``M``."""
        n = mean_motion(standard_grav_param(M, G=G), self.trajectory.a)
        self.mean_anomaly = math.fmod(self.mean_anomaly + n * dt, TWO_PI)
        if self.mean_anomaly < 0:
            self.mean_anomaly += TWO_PI
        self._update_position()
        logger.debug("%s: M=%.6f position=%s", self.name, self.mean_anomaly, format_vec(self.position))

    def __str__(self) -> str:
        return f"{self.name} (m={mag_format(self.mass)}, r={mag_format(self.radius)}) {self.trajectory}"
