import math

## Gravitational constant [m^3 / (kg s^2)]
G = 6.67408e-11

## Factor to convert astronomical units to meters
AU = 1.495978707e11

PI = math.pi
TWO_PI = 2.0 * math.pi

## Smallest value to use for 0 where 0 is forbidden
ZERO = 1e-300

S_PER_MIN = 60.0
S_PER_HOUR = 60.0 * S_PER_MIN
S_PER_DAY = 24.0 * S_PER_HOUR
S_PER_MONTH = 30.0 * S_PER_DAY
S_PER_YEAR = 365.25 * S_PER_DAY

## Tolerance used for degenerate-geometry checks and angle merging.
EPSILON = 1e-9

## Evaluation points used by the arc length quadrature when none is given.
DEFAULT_ARC_RESOLUTION = 1000

## A line crosses an ellipse at most twice, a rectangle has four edges.
MAX_LINE_CROSSINGS = 2
MAX_EDGE_CROSSINGS = 4 * MAX_LINE_CROSSINGS
