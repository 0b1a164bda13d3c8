# smallestcircle/__init__.py

from .circle import (
    DEFAULT_TOLERANCE,
    DegenerateInputError,
    Point,
    Empty,
    One,
    Two,
    Three,
    Circle,
    as_point,
    as_points,
    circle_from,
    center,
    radius,
    contains,
    is_spanned_by,
)
from .predicates import (
    Orientation,
    InCircle,
    orientation,
    orientation_area,
    in_circle,
)
from .support import update, move_to_front
from .recursive import smallest_enclosing_circle_recursive
from .iterative import smallest_enclosing_circle_iterative
from .smallestenclosingcircle import (
    DEFAULT_DRIVER,
    smallest_enclosing_circle,
)
from .compactness import shape_diameter, calc_compactness_metrics

name: str = "smallestcircle"
