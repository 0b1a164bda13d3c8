"""
CIRCLE GEOMETRY

A circle is pinned by the 0-3 points on its boundary, so it is represented by
one of four variants -- Empty, One, Two, Three -- that hold those points.
Center and radius are derived from them on demand.
"""

import logging
import math
from typing import Any, Iterable, List, NamedTuple, Optional, Sequence, Tuple, Union

from .predicates import InCircle, in_circle, orientation_area

logger = logging.getLogger(__name__)

# Slack for membership tests, in units of rounding error (2**-53) per r * m
DEFAULT_TOLERANCE: float = 64 * 2.0**-53


class DegenerateInputError(ValueError):
    """A circle was requested from more points than can pin one."""


class Point(NamedTuple):
    x: float
    y: float


class Empty(NamedTuple):
    """No points processed yet."""

    def center(self) -> Optional[Point]:
        return None

    def radius(self) -> float:
        return 0.0

    def support(self) -> Tuple[Point, ...]:
        return ()

    def contains(self, point: Sequence[float], tolerance: float = DEFAULT_TOLERANCE) -> bool:
        return False

    def is_spanned_by(self, point: Sequence[float]) -> bool:
        return False


class One(NamedTuple):
    """A single point: radius zero, centered on it."""

    p: Point

    def center(self) -> Optional[Point]:
        return self.p

    def radius(self) -> float:
        return 0.0

    def support(self) -> Tuple[Point, ...]:
        return (self.p,)

    def contains(self, point: Sequence[float], tolerance: float = DEFAULT_TOLERANCE) -> bool:
        return contains(self, point, tolerance)

    def is_spanned_by(self, point: Sequence[float]) -> bool:
        return is_spanned_by(self, point)


class Two(NamedTuple):
    """Two points at opposite ends of a diameter."""

    a: Point
    b: Point

    def center(self) -> Optional[Point]:
        return center(self)

    def radius(self) -> float:
        return radius(self)

    def support(self) -> Tuple[Point, ...]:
        return (self.a, self.b)

    def contains(self, point: Sequence[float], tolerance: float = DEFAULT_TOLERANCE) -> bool:
        return contains(self, point, tolerance)

    def is_spanned_by(self, point: Sequence[float]) -> bool:
        return is_spanned_by(self, point)


class Three(NamedTuple):
    """Three boundary points.

    If circumscribed is True, the circle is the circumcircle of a-b-c.
    Otherwise the points are collinear and the circle is the diameter circle
    of the two that lie farthest apart; all three are kept for provenance.
    """

    a: Point
    b: Point
    c: Point
    circumscribed: bool

    def center(self) -> Optional[Point]:
        return center(self)

    def radius(self) -> float:
        return radius(self)

    def support(self) -> Tuple[Point, ...]:
        return (self.a, self.b, self.c)

    def contains(self, point: Sequence[float], tolerance: float = DEFAULT_TOLERANCE) -> bool:
        return contains(self, point, tolerance)

    def is_spanned_by(self, point: Sequence[float]) -> bool:
        return is_spanned_by(self, point)


Circle = Union[Empty, One, Two, Three]


### POINTS ###


def as_point(value: Any) -> Point:
    """Coerce an (x, y) pair to a Point with finite float coordinates."""

    try:
        x, y = value
        point: Point = Point(float(x), float(y))
    except (TypeError, ValueError) as e:
        raise ValueError(f"Not an (x, y) point: {value!r}") from e

    if not (math.isfinite(point.x) and math.isfinite(point.y)):
        raise ValueError(f"Point coordinates must be finite: {value!r}")

    return point


def as_points(values: Iterable[Any]) -> List[Point]:
    return [as_point(v) for v in values]


### CONSTRUCTION ###


def circle_from(points: Sequence[Point]) -> Circle:
    """Build the circle pinned by 0-3 boundary points.

    Coincident points collapse to a smaller variant. Collinear triples, and
    triples whose circumcircle is not representable, reduce to the diameter
    circle of their farthest pair.
    """

    if len(points) == 0:
        return Empty()
    elif len(points) == 1:
        return One(points[0])
    elif len(points) == 2:
        a, b = points
        if a == b:
            return One(a)
        return Two(a, b)
    elif len(points) == 3:
        a, b, c = points
        ab, bc, ca = a == b, b == c, c == a
        if ab and bc:
            return One(a)
        if ab or bc:
            return Two(a, c)
        if ca:
            return Two(a, b)

        if orientation_area(a, b, c) == 0.0:
            logger.debug(f"Collinear boundary points {a}, {b}, {c}")
            return Three(a, b, c, False)

        x, y, r = _circumcircle(a, b, c)
        if not (math.isfinite(x) and math.isfinite(y) and math.isfinite(r)):
            logger.debug(f"Circumcircle of {a}, {b}, {c} overflows")
            return Three(a, b, c, False)

        return Three(a, b, c, True)
    else:
        raise DegenerateInputError(
            f"A circle is pinned by at most 3 points, got {len(points)}"
        )


def center(circle: Circle) -> Optional[Point]:
    disk: Optional[Tuple[float, float, float]] = _disk(circle)
    if disk is None:
        return None

    return Point(disk[0], disk[1])


def radius(circle: Circle) -> float:
    disk: Optional[Tuple[float, float, float]] = _disk(circle)
    if disk is None:
        return 0.0

    return disk[2]


### MEMBERSHIP ###


def contains(
    circle: Circle, point: Sequence[float], tolerance: float = DEFAULT_TOLERANCE
) -> bool:
    """Is point inside or on the circle, allowing for rounding?

    The squared distance may exceed r^2 by tolerance * r * m, where m is the
    largest coordinate magnitude involved. Rounding error in both quantities
    grows with that product, so one tolerance serves every coordinate scale.
    """

    disk: Optional[Tuple[float, float, float]] = _disk(circle)
    if disk is None:
        return False

    cx, cy, r = disk
    px, py = point[0], point[1]
    dx: float = px - cx
    dy: float = py - cy

    magnitude: float = max(r, abs(cx), abs(cy), abs(px), abs(py))
    slack: float = tolerance * r * magnitude

    return dx * dx + dy * dy <= r * r + slack


def is_spanned_by(circle: Circle, point: Sequence[float]) -> bool:
    """Is point one of those that pin the circle?

    For a circumcircle, any point exactly on it qualifies.
    """

    if isinstance(circle, Empty):
        return False
    if isinstance(circle, One):
        return tuple(point) == tuple(circle.p)
    if isinstance(circle, Two):
        return tuple(point) in (tuple(circle.a), tuple(circle.b))
    if isinstance(circle, Three):
        if circle.circumscribed:
            return in_circle(circle.a, circle.b, circle.c, point) == InCircle.ON
        p, q = _farthest_pair(circle.a, circle.b, circle.c)
        return tuple(point) in (tuple(p), tuple(q))

    raise TypeError(f"Not a circle: {circle!r}")


### HELPERS ###


def _disk(circle: Circle) -> Optional[Tuple[float, float, float]]:
    """Center x, center y, radius; None for Empty."""

    if isinstance(circle, Empty):
        return None
    if isinstance(circle, One):
        return (circle.p.x, circle.p.y, 0.0)
    if isinstance(circle, Two):
        return _diameter(circle.a, circle.b)
    if isinstance(circle, Three):
        if circle.circumscribed:
            return _circumcircle(circle.a, circle.b, circle.c)
        return _diameter(*_farthest_pair(circle.a, circle.b, circle.c))

    raise TypeError(f"Not a circle: {circle!r}")


def _diameter(a: Point, b: Point) -> Tuple[float, float, float]:
    cx: float = (a.x + b.x) / 2
    cy: float = (a.y + b.y) / 2
    r: float = math.hypot(a.x - b.x, a.y - b.y) / 2

    return (cx, cy, r)


def _farthest_pair(a: Point, b: Point, c: Point) -> Tuple[Point, Point]:
    pairs: List[Tuple[Point, Point]] = [(a, b), (b, c), (c, a)]

    return max(pairs, key=lambda pq: math.hypot(pq[0].x - pq[1].x, pq[0].y - pq[1].y))


# Computed relative to c, which keeps the products small when the triangle is
# far from the origin. The radius is the largest distance to the three points,
# so none of them falls outside through rounding.
def _circumcircle(a: Point, b: Point, c: Point) -> Tuple[float, float, float]:
    denominator: float = 2.0 * orientation_area(a, b, c)

    acx: float = a.x - c.x
    acy: float = a.y - c.y
    bcx: float = b.x - c.x
    bcy: float = b.y - c.y
    ac2: float = acx * acx + acy * acy
    bc2: float = bcx * bcx + bcy * bcy

    x: float = c.x + (ac2 * bcy - bc2 * acy) / denominator
    y: float = c.y + (acx * bc2 - bcx * ac2) / denominator
    r: float = max(
        math.hypot(x - a.x, y - a.y),
        math.hypot(x - b.x, y - b.y),
        math.hypot(x - c.x, y - c.y),
    )

    return (x, y, r)


### END ###
