"""Geometry helpers for the compass playground.

Every other module trades in :class:`Point`. The helpers here are the small
amount of vector math the construction tools need: distances, projection onto
a segment, angle normalisation for arc sweeps, and evenly spaced sampling along
a segment.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Tuple

import numpy as np

EPS = 1e-12


@dataclass(frozen=True)
class Point:
    """A 2D coordinate pair."""

    x: float
    y: float

    def distance_to(self, other: Point) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def lerp(self, other: Point, t: float) -> Point:
        return Point(self.x + (other.x - self.x) * t, self.y + (other.y - self.y) * t)

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


def distance(a: Point, b: Point) -> float:
    """Return the Euclidean distance between two points."""
    return a.distance_to(b)


def project_point_to_segment(p: Point, a: Point, b: Point) -> Tuple[Point, float]:
    """Return the closest point on segment ``a``-``b`` and its clamped parameter."""
    abx = b.x - a.x
    aby = b.y - a.y
    denom = abx * abx + aby * aby
    if denom <= EPS:
        return a, 0.0
    t = ((p.x - a.x) * abx + (p.y - a.y) * aby) / denom
    t = max(0.0, min(1.0, t))
    return Point(a.x + abx * t, a.y + aby * t), t


def angle_of(origin: Point, target: Point) -> float:
    return math.atan2(target.y - origin.y, target.x - origin.x)


def normalize_angle(angle: float) -> float:
    """Wrap ``angle`` into (-pi, pi]."""
    normalized = math.fmod(angle, 2.0 * math.pi)
    if normalized <= -math.pi:
        normalized += 2.0 * math.pi
    elif normalized > math.pi:
        normalized -= 2.0 * math.pi
    if abs(normalized + math.pi) < 1e-10:
        normalized = math.pi
    return normalized


def shortest_signed_delta(from_angle: float, to_angle: float) -> float:
    """Signed angular step from ``from_angle`` to ``to_angle`` in (-pi, pi]."""
    return normalize_angle(to_angle - from_angle)


def interior_points(a: Point, b: Point, parts: int) -> List[Point]:
    """Sample the ``parts - 1`` interior points splitting ``a``-``b`` into equal parts.

    Point ``k`` is ``a + (b - a) * (k / parts)``. Coincident endpoints scale the
    zero vector, so every sample equals ``a``.
    """
    if parts <= 1:
        return []
    t = np.arange(1, parts, dtype=float) / float(parts)
    xs = a.x + (b.x - a.x) * t
    ys = a.y + (b.y - a.y) * t
    return [Point(float(x), float(y)) for x, y in zip(xs, ys)]


__all__ = [
    "Point",
    "distance",
    "project_point_to_segment",
    "angle_of",
    "normalize_angle",
    "shortest_signed_delta",
    "interior_points",
]
