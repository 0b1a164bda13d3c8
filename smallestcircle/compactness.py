"""
COMPACTNESS

Reock and Polsby-Popper compactness of shapes. Reock compares a shape's area
to that of its smallest enclosing circle.
"""

import random
from typing import Any, Dict, List, Tuple

import rdapy as rda

from .circle import Circle, Point, as_points
from .smallestenclosingcircle import smallest_enclosing_circle


def shape_diameter(exterior: List[Tuple[float, float]]) -> float:
    """Diameter of the smallest circle enclosing a shape's exterior vertices."""

    if not exterior:
        raise ValueError("Shape has no exterior points")

    # Vertices arrive in boundary order, the worst case for Welzl
    shuffled: List[Point] = as_points(exterior)
    random.shuffle(shuffled)

    circle: Circle = smallest_enclosing_circle(shuffled)

    return 2 * circle.radius()


def calc_compactness_metrics(shapes: List[Dict[str, Any]]) -> Dict[str, float]:
    """Average Reock & Polsby-Popper scores of shapes.

    Each shape has an "area", a "perimeter", and "exterior" vertices.
    """

    if not shapes:
        raise ValueError("No shapes to score")

    tot_reock: float = 0
    tot_polsby: float = 0

    for shape in shapes:
        diameter: float = shape_diameter(shape["exterior"])

        reock: float = rda.reock_formula(shape["area"], diameter / 2)
        polsby: float = rda.polsby_formula(shape["area"], shape["perimeter"])

        tot_reock += reock
        tot_polsby += polsby

    compactness_metrics: Dict[str, float] = dict()
    compactness_metrics["reock"] = tot_reock / len(shapes)
    compactness_metrics["polsby_popper"] = tot_polsby / len(shapes)

    return compactness_metrics


### END ###
