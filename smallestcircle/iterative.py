"""
ITERATIVE DRIVER

The recursive driver re-expressed with an explicit stack of frames, so input
size is bounded by heap memory rather than the interpreter's stack.

Each simulated call of the recursion becomes a CALL frame. A frame that must
resume after a deeper call returns is pushed beneath it: TEST to check the
next point against the returned circle, MOVE to move a boundary point to the
front once its nested pass is done. The returned circle travels in a single
register, so the order of circles and support sets produced matches the
recursive driver step for step.
"""

import logging
from typing import Any, Iterable, List, NamedTuple

from .circle import DEFAULT_TOLERANCE, Circle, Empty, Point, as_points, contains
from .support import Observer, Support, move_to_front, update

logger = logging.getLogger(__name__)

CALL: int = 0
TEST: int = 1
MOVE: int = 2


class Frame(NamedTuple):
    remaining: int  # length of the prefix of points this frame covers
    phase: int
    support: Support


def smallest_enclosing_circle_iterative(
    points: Iterable[Any],
    *,
    tolerance: float = DEFAULT_TOLERANCE,
    observer: Observer = None,
) -> Circle:
    """The smallest circle enclosing points, without native recursion."""

    working: List[Point] = as_points(points)
    logger.debug(f"Iterative driver: {len(working)} points")

    # On entry to a CALL frame, circle holds the circle pinned by its support.
    # On exit, it holds the frame's result.
    circle: Circle = Empty()
    stack: List[Frame] = [Frame(len(working), CALL, ())]
    high_water: int = 1

    while stack:
        n, phase, support = stack.pop()

        if phase == CALL:
            if n == 0 or len(support) == 3:
                continue
            stack.append(Frame(n, TEST, support))
            stack.append(Frame(n - 1, CALL, support))
            high_water = max(high_water, len(stack))

        elif phase == TEST:
            p: Point = working[n - 1]
            if contains(circle, p, tolerance):
                continue
            circle, boundary = update(support, p)
            if observer is not None:
                observer(circle, boundary)
            stack.append(Frame(n - 1, MOVE, boundary))
            stack.append(Frame(n - 1, CALL, boundary))
            high_water = max(high_water, len(stack))

        elif phase == MOVE:
            move_to_front(working, n)

        else:
            raise ValueError("phase out of range")

    logger.debug(f"Iterative driver: {circle}, at most {high_water} frames")

    return circle


### END ###
