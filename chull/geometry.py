"""Planar points and the Graham scan convex hull."""

from __future__ import annotations

from dataclasses import dataclass
from functools import cmp_to_key
from typing import Iterable

EPSILON = 1e-9


@dataclass(frozen=True)
class Point:
    """A point in the plane."""

    x: float = 0.0
    y: float = 0.0

    def matches(self, other: Point) -> bool:
        """Return True if both coordinates agree within ``EPSILON``."""
        return abs(self.x - other.x) < EPSILON and abs(self.y - other.y) < EPSILON


def cross_product(p1: Point, p2: Point, p3: Point) -> float:
    """Cross product of the vectors p1->p2 and p1->p3."""
    return (p2.x - p1.x) * (p3.y - p1.y) - (p2.y - p1.y) * (p3.x - p1.x)


def distance_squared(p1: Point, p2: Point) -> float:
    """Squared Euclidean distance between two points."""
    return (p2.x - p1.x) ** 2 + (p2.y - p1.y) ** 2


def graham_scan(points: Iterable[Point]) -> list[Point]:
    """Return the convex hull of ``points`` in counter-clockwise order.

    The hull starts at the lowest point (leftmost on ties). Inputs of two
    points or fewer are returned unchanged. The input is not modified.
    """
    pts = list(points)
    if len(pts) <= 2:
        return pts

    pivot = min(pts, key=lambda p: (p.y, p.x))
    lowest = pts.index(pivot)
    pts[0], pts[lowest] = pts[lowest], pts[0]

    def compare(p1: Point, p2: Point) -> int:
        cross = cross_product(pivot, p1, p2)
        if abs(cross) < EPSILON:
            d1 = distance_squared(pivot, p1)
            d2 = distance_squared(pivot, p2)
            return (d1 > d2) - (d1 < d2)
        return -1 if cross > 0 else 1

    ordered = [pts[0], *sorted(pts[1:], key=cmp_to_key(compare))]

    hull = ordered[:2]
    for point in ordered[2:]:
        while len(hull) > 1 and cross_product(hull[-2], hull[-1], point) <= 0:
            hull.pop()
        hull.append(point)
    return hull


def hull_area(hull: Iterable[Point]) -> float:
    """Area of a polygon by the shoelace formula; 0.0 below three vertices."""
    vertices = list(hull)
    if len(vertices) < 3:
        return 0.0
    following = vertices[1:] + vertices[:1]
    total = sum(a.x * b.y - b.x * a.y for a, b in zip(vertices, following))
    return abs(total) / 2.0