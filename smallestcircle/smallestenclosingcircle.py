"""
SMALLEST ENCLOSING CIRCLE

Entry point: the smallest circle enclosing a sequence of points, by Welzl's
algorithm.

Expected linear time holds only when the points arrive in random order.
Shuffle them first if their order may be adversarial, e.g., polygon vertices.
"""

from typing import Any, Callable, Dict, Iterable

from .circle import DEFAULT_TOLERANCE, Circle
from .iterative import smallest_enclosing_circle_iterative
from .recursive import smallest_enclosing_circle_recursive
from .support import Observer

DEFAULT_DRIVER: str = "iterative"

DRIVERS: Dict[str, Callable[..., Circle]] = {
    "iterative": smallest_enclosing_circle_iterative,
    "recursive": smallest_enclosing_circle_recursive,
}


def smallest_enclosing_circle(
    points: Iterable[Any],
    *,
    driver: str = DEFAULT_DRIVER,
    tolerance: float = DEFAULT_TOLERANCE,
    observer: Observer = None,
) -> Circle:
    """Return the smallest circle enclosing points.

    points    - (x, y) pairs with finite coordinates; duplicates are fine
    driver    - "iterative" (default) or "recursive"; the recursive driver
                raises RecursionError on large inputs
    tolerance - relative slack for deciding whether a point is inside
    observer  - called with each intermediate circle and its support set

    An empty input gives Empty(), whose center() is None and radius() is 0.
    """

    if driver not in DRIVERS:
        raise ValueError(f"Unknown driver: {driver!r} (choose from {sorted(DRIVERS)})")

    return DRIVERS[driver](points, tolerance=tolerance, observer=observer)


### END ###
