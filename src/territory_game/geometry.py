"""Planar helpers for polygon cells on a rectangular board."""

from __future__ import annotations

from typing import Iterable, Sequence

Point = tuple[float, float]


def open_ring(points: Sequence[Point]) -> list[Point]:
    """Drop the duplicated closing vertex of a closed ring, if present."""

    ring = [(float(x), float(y)) for x, y in points]
    if len(ring) > 1 and ring[0] == ring[-1]:
        ring.pop()
    return ring


def bounding_box(points: Iterable[Point]) -> tuple[float, float, float, float]:
    """Return ``(min_x, min_y, max_x, max_y)`` over a point cloud."""

    xs = []
    ys = []
    for x, y in points:
        xs.append(float(x))
        ys.append(float(y))
    if not xs:
        raise ValueError("bounding box of an empty point set")
    return min(xs), min(ys), max(xs), max(ys)


def is_border_point(
    point: Point,
    bounds: tuple[float, float, float, float],
    tolerance: float,
) -> bool:
    """True when a point lies on (or outside) the outer rectangle within tolerance."""

    x, y = point
    min_x, min_y, max_x, max_y = bounds
    return (
        x < min_x + tolerance
        or y < min_y + tolerance
        or x > max_x - tolerance
        or y > max_y - tolerance
    )


def point_in_polygon(point: Point, polygon: Sequence[Point]) -> bool:
    """Even-odd ray casting test; accepts open or closed rings."""

    x, y = point
    ring = open_ring(polygon)
    inside = False
    for (x1, y1), (x2, y2) in zip(ring, ring[1:] + ring[:1]):
        if (y1 > y) == (y2 > y):
            continue
        crossing_x = x1 + (x2 - x1) * (y - y1) / (y2 - y1)
        if x < crossing_x:
            inside = not inside
    return inside


def vertex_centroid(polygon: Sequence[Point]) -> Point:
    """Mean of the polygon vertices."""

    ring = open_ring(polygon)
    if not ring:
        raise ValueError("centroid of an empty polygon")
    count = len(ring)
    return (
        sum(x for x, _ in ring) / count,
        sum(y for _, y in ring) / count,
    )


def squared_distance(a: Point, b: Point) -> float:
    dx = a[0] - b[0]
    dy = a[1] - b[1]
    return dx * dx + dy * dy


__all__ = [
    "Point",
    "open_ring",
    "bounding_box",
    "is_border_point",
    "point_in_polygon",
    "vertex_centroid",
    "squared_distance",
]
