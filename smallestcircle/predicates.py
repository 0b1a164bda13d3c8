"""
GEOMETRIC PREDICATES

Orientation and in-circle tests on pairs of floats. Each predicate is evaluated
in floating point first; only when the result falls inside the rounding error
bound is it re-evaluated exactly with rationals, so the sign is always exact.

Error bounds are from Shewchuk, "Adaptive Precision Floating-Point Arithmetic
and Fast Robust Geometric Predicates" (1997).
"""

from enum import Enum
from fractions import Fraction
from typing import Sequence

_EPSILON: float = 2.0**-53
_CCW_ERRBOUND: float = (3.0 + 16.0 * _EPSILON) * _EPSILON
_ICC_ERRBOUND: float = (10.0 + 96.0 * _EPSILON) * _EPSILON


class Orientation(Enum):
    COUNTER_CLOCKWISE = 1
    CLOCKWISE = -1
    COLLINEAR = 0


class InCircle(Enum):
    INSIDE = 1
    OUTSIDE = -1
    ON = 0


def orientation_area(a: Sequence[float], b: Sequence[float], c: Sequence[float]) -> float:
    """Twice the signed area of triangle a-b-c.

    Positive if a, b, c are in counter-clockwise order (upward y-axis), negative
    if clockwise, and exactly zero iff the points are collinear.
    """

    detleft: float = (a[0] - c[0]) * (b[1] - c[1])
    detright: float = (a[1] - c[1]) * (b[0] - c[0])
    det: float = detleft - detright

    errbound: float = _CCW_ERRBOUND * (abs(detleft) + abs(detright))
    if det > errbound or -det > errbound:
        return det

    return float(_exact_orientation(a, b, c))


def orientation(a: Sequence[float], b: Sequence[float], c: Sequence[float]) -> Orientation:
    det: float = orientation_area(a, b, c)
    if det > 0.0:
        return Orientation.COUNTER_CLOCKWISE
    if det < 0.0:
        return Orientation.CLOCKWISE
    return Orientation.COLLINEAR


def incircle_determinant(
    a: Sequence[float], b: Sequence[float], c: Sequence[float], d: Sequence[float]
) -> float:
    """Positive if d lies inside the circle through counter-clockwise a, b, c.

    The sign flips when a, b, c are clockwise; zero iff the four points are
    cocircular (or a, b, c are collinear and d is on their line).
    """

    adx: float = a[0] - d[0]
    ady: float = a[1] - d[1]
    bdx: float = b[0] - d[0]
    bdy: float = b[1] - d[1]
    cdx: float = c[0] - d[0]
    cdy: float = c[1] - d[1]

    bdxcdy: float = bdx * cdy
    cdxbdy: float = cdx * bdy
    alift: float = adx * adx + ady * ady

    cdxady: float = cdx * ady
    adxcdy: float = adx * cdy
    blift: float = bdx * bdx + bdy * bdy

    adxbdy: float = adx * bdy
    bdxady: float = bdx * ady
    clift: float = cdx * cdx + cdy * cdy

    det: float = (
        alift * (bdxcdy - cdxbdy)
        + blift * (cdxady - adxcdy)
        + clift * (adxbdy - bdxady)
    )

    permanent: float = (
        (abs(bdxcdy) + abs(cdxbdy)) * alift
        + (abs(cdxady) + abs(adxcdy)) * blift
        + (abs(adxbdy) + abs(bdxady)) * clift
    )
    errbound: float = _ICC_ERRBOUND * permanent
    if det > errbound or -det > errbound:
        return det

    return float(_exact_incircle(a, b, c, d))


def in_circle(
    a: Sequence[float], b: Sequence[float], c: Sequence[float], point: Sequence[float]
) -> InCircle:
    """Locate point relative to the circle through a, b and c, in either order."""

    turn: float = orientation_area(a, b, c)
    if turn == 0.0:
        raise ValueError("The three points are collinear")

    det: float = incircle_determinant(a, b, c, point)
    if turn < 0.0:
        det = -det

    if det > 0.0:
        return InCircle.INSIDE
    if det < 0.0:
        return InCircle.OUTSIDE
    return InCircle.ON


### EXACT EVALUATION ###


def _exact_orientation(
    a: Sequence[float], b: Sequence[float], c: Sequence[float]
) -> Fraction:
    acx: Fraction = Fraction(a[0]) - Fraction(c[0])
    acy: Fraction = Fraction(a[1]) - Fraction(c[1])
    bcx: Fraction = Fraction(b[0]) - Fraction(c[0])
    bcy: Fraction = Fraction(b[1]) - Fraction(c[1])

    return acx * bcy - acy * bcx


def _exact_incircle(
    a: Sequence[float], b: Sequence[float], c: Sequence[float], d: Sequence[float]
) -> Fraction:
    dx: Fraction = Fraction(d[0])
    dy: Fraction = Fraction(d[1])

    adx, ady = Fraction(a[0]) - dx, Fraction(a[1]) - dy
    bdx, bdy = Fraction(b[0]) - dx, Fraction(b[1]) - dy
    cdx, cdy = Fraction(c[0]) - dx, Fraction(c[1]) - dy

    alift: Fraction = adx * adx + ady * ady
    blift: Fraction = bdx * bdx + bdy * bdy
    clift: Fraction = cdx * cdx + cdy * cdy

    return (
        alift * (bdx * cdy - cdx * bdy)
        + blift * (cdx * ady - adx * cdy)
        + clift * (adx * bdy - bdx * ady)
    )


### END ###
