"""
SUPPORT-SET UPDATE

The base case of Welzl's algorithm, shared by both drivers: a point has been
found outside the circle pinned by support set R, so it joins R and the circle
is rebuilt from the enlarged set.

Welzl, E. (1991). Smallest enclosing disks (balls and ellipsoids).
In New results and new trends in computer science (pp. 359-370).
"""

from typing import Callable, List, Optional, Sequence, Tuple

from .circle import Circle, DegenerateInputError, Point, circle_from

Support = Tuple[Point, ...]

# Called with each newly constructed circle and the support set that pins it
Observer = Optional[Callable[[Circle, Support], None]]


def update(support: Sequence[Point], point: Point) -> Tuple[Circle, Support]:
    """The smallest circle enclosing support + [point] with point on its boundary.

    Returns the circle and the new support set, ordered as support then point.
    """

    if len(support) > 2:
        raise DegenerateInputError(
            f"Support set is already full ({len(support)} points)"
        )

    boundary: Support = tuple(support) + (point,)

    return circle_from(boundary), boundary


def move_to_front(points: List[Point], index: int) -> None:
    """Move points[index] to the front, shifting points[:index] back by one."""

    points.insert(0, points.pop(index))


### END ###
