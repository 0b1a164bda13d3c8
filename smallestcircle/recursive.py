"""
RECURSIVE DRIVER

Welzl's algorithm as the textbook recursion, with the move-to-front heuristic.

Recursion depth grows linearly with the number of points, so large inputs
exhaust the interpreter's stack and raise RecursionError. It is kept for
demonstration and for cross-checking the iterative driver.
"""

import logging
from typing import Any, Iterable, List

from .circle import DEFAULT_TOLERANCE, Circle, Empty, Point, as_points, contains
from .support import Observer, Support, move_to_front, update

logger = logging.getLogger(__name__)


def smallest_enclosing_circle_recursive(
    points: Iterable[Any],
    *,
    tolerance: float = DEFAULT_TOLERANCE,
    observer: Observer = None,
) -> Circle:
    """The smallest circle enclosing points, found recursively."""

    working: List[Point] = as_points(points)
    logger.debug(f"Recursive driver: {len(working)} points")

    circle: Circle = _minidisk(working, len(working), Empty(), (), tolerance, observer)

    logger.debug(f"Recursive driver: {circle}")

    return circle


# The smallest circle enclosing points[:n] with every point of support on its
# boundary. circle is the one pinned by support alone.
def _minidisk(
    points: List[Point],
    n: int,
    circle: Circle,
    support: Support,
    tolerance: float,
    observer: Observer,
) -> Circle:
    if n == 0 or len(support) == 3:
        return circle

    circle = _minidisk(points, n - 1, circle, support, tolerance, observer)

    p: Point = points[n - 1]
    if contains(circle, p, tolerance):
        return circle

    return _minidisk_boundary(points, n - 1, support, p, tolerance, observer)


# p = points[n] lies outside, so it goes on the boundary. Afterwards p moves
# to the front of points[:n + 1]; later passes try it first.
def _minidisk_boundary(
    points: List[Point],
    n: int,
    support: Support,
    p: Point,
    tolerance: float,
    observer: Observer,
) -> Circle:
    circle, boundary = update(support, p)
    if observer is not None:
        observer(circle, boundary)

    circle = _minidisk(points, n, circle, boundary, tolerance, observer)
    move_to_front(points, n)

    return circle


### END ###
