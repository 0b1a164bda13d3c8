"""
TEST THE RECURSIVE & ITERATIVE DRIVERS
"""

import math
import random
import sys
from itertools import permutations
from typing import Callable, List, Tuple

import pytest
import rdapy as rda

from rdabase import approx_equal

from smallestcircle import (
    Point,
    Empty,
    One,
    Circle,
    circle_from,
    contains,
    smallest_enclosing_circle_iterative,
    smallest_enclosing_circle_recursive,
)

drivers: List[Callable[..., Circle]] = [
    smallest_enclosing_circle_iterative,
    smallest_enclosing_circle_recursive,
]


def same_circle(actual: Circle, expected: Circle, places: int = 9) -> bool:
    if expected.center() is None:
        return actual.center() is None
    if actual.center() is None:
        return False

    ax, ay = actual.center()
    ex, ey = expected.center()

    return (
        approx_equal(ax, ex, places=places)
        and approx_equal(ay, ey, places=places)
        and approx_equal(actual.radius(), expected.radius(), places=places)
    )


def random_points(rng: random.Random, n: int) -> List[Tuple[float, float]]:
    return [(rng.uniform(-10.0, 10.0), rng.uniform(-10.0, 10.0)) for _ in range(n)]


def grid_points(rng: random.Random, n: int) -> List[Tuple[float, float]]:
    """Small integer coordinates: lots of duplicates & collinear triples."""

    return [(float(rng.randint(-3, 3)), float(rng.randint(-3, 3))) for _ in range(n)]


# Input points & the points that pin the expected circle
cases: List[Tuple[str, List[List[float]], List[List[float]]]] = [
    ("collinear", [[0.0, 0.0], [1.0, 0.0], [2.0, 0.0]], [[2.0, 0.0], [0.0, 0.0]]),
    ("duplicate", [[0.0, 0.0], [1.0, 0.0], [1.0, 0.0]], [[1.0, 0.0], [0.0, 0.0]]),
    ("duplicate2", [[1.0, 0.0], [0.0, 0.0], [1.0, 0.0]], [[0.0, 0.0], [1.0, 0.0]]),
    ("empty", [], []),
    ("single", [[0.0, 0.0]], [[0.0, 0.0]]),
    ("double", [[0.0, 0.0], [1.0, 0.0]], [[1.0, 0.0], [0.0, 0.0]]),
    ("double_duplicate", [[1.0, 0.0], [1.0, 0.0]], [[1.0, 0.0]]),
    ("opposite_zero", [[-1.0, 0.0], [1.0, 0.0]], [[1.0, 0.0], [-1.0, 0.0]]),
    (
        "cocircular",
        [[1.0, 0.0], [0.0, 1.0], [-1.0, 0.0], [0.0, -1.0]],
        [[-1.0, 0.0], [1.0, 0.0]],
    ),
    (
        "multiple",
        [[-1.0, -1.0], [-1.0, -1.0], [0.0, 0.0], [0.0, 0.0], [1.0, 1.0], [1.0, 1.0]],
        [[1.0, 1.0], [-1.0, -1.0]],
    ),
    (
        "triangle",
        [[0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [1.0, 1.0]],
        [[1.0, 1.0], [0.0, 0.0]],
    ),
]

# Too many points to try every permutation
small: List[List[float]] = [
    [0.0, 0.0],
    [1e-12, 0.0],
    [0.5, 0.0],
    [1.0, 0.0],
    [1.1, 0.0],
    [1.5, 0.0],
    [2.0 - 1e-12, 0.0],
    [2.0, 0.0],
]


class TestKnownCircles:
    def test_every_permutation(self) -> None:
        for driver in drivers:
            for label, points, pinned in cases:
                expected: Circle = circle_from([Point(*p) for p in pinned])
                for permutation in permutations(points):
                    actual: Circle = driver(list(permutation))
                    assert same_circle(actual, expected), f"{label}: {actual}"

    def test_small_separations(self) -> None:
        rng = random.Random(1991)
        expected: Circle = circle_from([Point(2.0, 0.0), Point(0.0, 0.0)])

        for driver in drivers:
            for _ in range(200):
                points = list(small)
                rng.shuffle(points)
                assert same_circle(driver(points), expected)

    def test_empty_and_single(self) -> None:
        for driver in drivers:
            assert driver([]) == Empty()
            assert driver([(2, 3)]) == One(Point(2.0, 3.0))


class TestDriverEquivalence:
    def test_identical_steps(self) -> None:
        rng = random.Random(42)

        for trial in range(40):
            n: int = rng.randint(0, 120)
            points = random_points(rng, n) if trial % 2 else grid_points(rng, n)

            traces: List[List[Tuple[Circle, Tuple[Point, ...]]]] = []
            results: List[Circle] = []
            for driver in drivers:
                steps: List[Tuple[Circle, Tuple[Point, ...]]] = []
                circle: Circle = driver(
                    points, observer=lambda c, s: steps.append((c, s))
                )
                traces.append(steps)
                results.append(circle)

            assert traces[0] == traces[1]
            assert results[0] == results[1]

    def test_input_left_alone(self) -> None:
        rng = random.Random(7)
        points = random_points(rng, 50)
        before = list(points)

        for driver in drivers:
            driver(points)
            assert points == before


class TestProperties:
    def test_containment(self) -> None:
        rng = random.Random(2024)

        for driver in drivers:
            for n in [3, 10, 50, 120]:
                for points in [random_points(rng, n), grid_points(rng, n)]:
                    circle: Circle = driver(points)
                    for p in points:
                        assert contains(circle, p)

    def test_minimality(self) -> None:
        rng = random.Random(5)

        for driver in drivers:
            for n in [2, 3, 5, 20, 100]:
                points = random_points(rng, n)
                circle: Circle = driver(points)
                support = circle.support()
                assert 1 <= len(support) <= 3

                for i in range(len(support)):
                    rest = support[:i] + support[i + 1 :]
                    smaller: Circle = circle_from(rest)
                    assert not all(contains(smaller, p) for p in points)

    def test_support_points_are_inputs(self) -> None:
        rng = random.Random(11)
        points = random_points(rng, 80)
        inputs = {Point(*p) for p in points}

        for driver in drivers:
            circle: Circle = driver(points)
            for p in circle.support():
                assert p in inputs
                assert circle.is_spanned_by(p)

    def test_duplicates(self) -> None:
        rng = random.Random(99)

        for driver in drivers:
            points = random_points(rng, 60)
            circle: Circle = driver(points)

            padded = points + [rng.choice(points) for _ in range(30)]
            rng.shuffle(padded)
            assert same_circle(driver(padded), circle)

    def test_order_invariance(self) -> None:
        rng = random.Random(3)
        points = random_points(rng, 6)
        expected: Circle = smallest_enclosing_circle_iterative(points)

        for driver in drivers:
            for permutation in permutations(points):
                assert same_circle(driver(list(permutation)), expected)

    def test_against_rdapy(self) -> None:
        rng = random.Random(1234)

        for size in range(3, 60):
            points = random_points(rng, size)
            x, y, r = rda.make_circle(points)

            for driver in drivers:
                circle: Circle = driver(points)
                cx, cy = circle.center()
                assert approx_equal(cx, x, places=6)
                assert approx_equal(cy, y, places=6)
                assert approx_equal(circle.radius(), r, places=6)

    def test_sorted_input(self) -> None:
        # Vertices in boundary order are the slow case, not a wrong one
        n: int = 300
        points = [
            (math.cos(2 * math.pi * i / n), math.sin(2 * math.pi * i / n))
            for i in range(n)
        ]
        circle: Circle = smallest_enclosing_circle_iterative(points)

        x, y = circle.center()
        assert approx_equal(x, 0.0, places=9)
        assert approx_equal(y, 0.0, places=9)
        assert approx_equal(circle.radius(), 1.0, places=9)


class TestFarFromOrigin:
    base: float = 1.0e12
    triangle: List[Tuple[float, float]] = [
        (base, base),
        (base + 1.0, base),
        (base + 0.5, base + 0.85),
    ]

    def test_third_point_not_absorbed(self) -> None:
        # Circumradius of the triangle is about 0.572, not the 0.5 of its base
        for driver in drivers:
            circle: Circle = driver(self.triangle)
            assert circle.radius() > 0.55
            for p in self.triangle:
                assert contains(circle, p)

    def test_shuffled_cloud(self) -> None:
        rng = random.Random(1012)
        cx, cy = self.base + 0.5, self.base + 0.28
        points: List[Tuple[float, float]] = list(self.triangle)
        for _ in range(5):
            theta: float = rng.uniform(0.0, 2 * math.pi)
            rho: float = rng.uniform(0.0, 0.3)
            points.append((cx + rho * math.cos(theta), cy + rho * math.sin(theta)))

        # Coordinates here are only good to one ulp of the base
        slop: float = 1000 * math.ulp(self.base)
        radii: List[float] = []

        for driver in drivers:
            for _ in range(100):
                rng.shuffle(points)
                circle: Circle = driver(points)
                x, y = circle.center()
                r: float = circle.radius()
                radii.append(r)

                for px, py in points:
                    assert math.hypot(px - x, py - y) <= r + slop
                    assert contains(circle, (px, py))

        assert min(radii) > 0.55
        assert max(radii) - min(radii) < 1.0e-3


class TestStackDepth:
    def test_recursive_driver_exhausts_stack(self) -> None:
        rng = random.Random(0)
        points = random_points(rng, sys.getrecursionlimit() + 100)

        with pytest.raises(RecursionError):
            smallest_enclosing_circle_recursive(points)

        circle: Circle = smallest_enclosing_circle_iterative(points)
        for p in points:
            assert contains(circle, p)

    def test_iterative_driver_large_input(self) -> None:
        rng = random.Random(10)
        points = random_points(rng, 10000)
        circle: Circle = smallest_enclosing_circle_iterative(points)

        inputs = {Point(*p) for p in points}
        for p in points:
            assert contains(circle, p)
        for p in circle.support():
            assert p in inputs


### END ###
