#!/usr/bin/env python3

"""
SAMPLE CODE

To run:

$ sample/sample_code.py

"""

import math
import random
from typing import List, Tuple

from smallestcircle import (
    Circle,
    smallest_enclosing_circle,
)

# Specify a point cloud

n: int = 1000
seed: int = 518

### GENERATE POINTS ###

rng: random.Random = random.Random(seed)
points: List[Tuple[float, float]] = [
    (rng.gauss(0.0, 1.0), rng.gauss(0.0, 1.0)) for _ in range(n)
]

### BOILERPLATE - DON'T CHANGE THIS ###

# Expected linear time depends on the points arriving in random order
rng.shuffle(points)

### FIND THE SMALLEST ENCLOSING CIRCLE ###

for driver in ["iterative", "recursive"]:
    try:
        circle: Circle = smallest_enclosing_circle(points, driver=driver)

        print()
        print(f"Driver: {driver}")
        print(f"Circle: {circle}")
        print(f"Center: {circle.center()}")
        print(f"Radius: {circle.radius()}")
        print(f"Area: {math.pi * circle.radius() ** 2: 0.4f}")
        print()

    except RecursionError as e:
        print(f"Driver {driver} ran out of stack on {n} points: {e}")

### END ###
