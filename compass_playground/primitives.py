"""Drawable construction primitives: straightedge lines and compass arcs.

Both primitives are built point by point from raw input coordinates. Setters
never validate; an element is *complete* once both of its defining points are
present, and only complete elements can be divided.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from compass_playground.errors import ArcStateError, IncompleteElementError
from compass_playground.geometry import Point, angle_of, shortest_signed_delta

FULL_CIRCLE_EPS = 0.05
MIN_RADIUS = 0.001


@dataclass
class Line:
    """Straightedge segment defined by two clicked points."""

    first_point: Optional[Point] = None
    second_point: Optional[Point] = None

    def set_first_point(self, x: float, y: float) -> None:
        self.first_point = Point(float(x), float(y))

    def set_second_point(self, x: float, y: float) -> None:
        self.second_point = Point(float(x), float(y))

    def is_complete(self) -> bool:
        return self.first_point is not None and self.second_point is not None

    @property
    def length(self) -> float:
        if self.first_point is None or self.second_point is None:
            return 0.0
        return self.first_point.distance_to(self.second_point)

    @property
    def angle(self) -> float:
        if self.first_point is None or self.second_point is None:
            return 0.0
        return angle_of(self.first_point, self.second_point)

    def reset(self) -> None:
        self.first_point = None
        self.second_point = None

    def copy(self) -> Line:
        return Line(first_point=self.first_point, second_point=self.second_point)


class ArcState(str, Enum):
    IDLE = "idle"
    CENTER_SET = "center_set"
    RADIUS_SET = "radius_set"
    DRAWING = "drawing"


@dataclass
class CompassArc:
    """Compass construction: a center, a radius point, and the swept arc.

    The radius point fixes both the radius length and the start angle of the
    sweep. While drawing, :meth:`update_drawing` accumulates the signed sweep
    so a full turn can be told apart from a short back-and-forth.
    """

    center: Optional[Point] = None
    radius_point: Optional[Point] = None
    current_point: Optional[Point] = None
    state: ArcState = ArcState.IDLE
    net_angle: float = 0.0
    total_angle: float = 0.0
    last_angle: Optional[float] = None

    def set_center(self, x: float, y: float) -> None:
        self.center = Point(float(x), float(y))
        self.current_point = None
        self.state = ArcState.RADIUS_SET if self.radius_point is not None else ArcState.CENTER_SET
        self._reset_sweep()

    def set_radius(self, x: float, y: float) -> None:
        self.radius_point = Point(float(x), float(y))
        self.state = ArcState.RADIUS_SET

    def is_complete(self) -> bool:
        return self.center is not None and self.radius_point is not None

    @property
    def radius(self) -> float:
        if self.center is None or self.radius_point is None:
            return 0.0
        return self.center.distance_to(self.radius_point)

    def set_radius_distance(self, radius: float) -> None:
        """Place the radius point ``radius`` units to the right of the center."""
        if self.center is None:
            raise IncompleteElementError("Center point must be set before setting radius")
        self.radius_point = Point(self.center.x + float(radius), self.center.y)
        self.state = ArcState.RADIUS_SET

    def set_radius_at_angle(self, angle: float, radius: float, start_drawing: bool = False) -> None:
        if self.center is None:
            raise IncompleteElementError("Center point must be set before setting radius at angle")
        if radius <= MIN_RADIUS:
            raise ValueError(f"Radius must be greater than {MIN_RADIUS}")
        self.radius_point = Point(
            self.center.x + radius * math.cos(angle),
            self.center.y + radius * math.sin(angle),
        )
        if start_drawing:
            self.state = ArcState.DRAWING
            self._reset_sweep()
        else:
            self.state = ArcState.RADIUS_SET

    def set_radius_and_start_drawing(self, x: float, y: float) -> None:
        """Put the radius point at ``(x, y)`` and begin sweeping from it in one step.

        A click on the center gives a zero radius.
        """
        if self.center is None:
            raise IncompleteElementError("Center point must be set before setting radius and starting drawing")
        self.radius_point = Point(float(x), float(y))
        self.current_point = None
        self.state = ArcState.DRAWING
        self._reset_sweep()

    # ------------------------------------------------------------------
    # Sweep
    def start_drawing(self) -> None:
        if self.state is not ArcState.RADIUS_SET:
            raise ArcStateError("Radius must be set before drawing")
        self.state = ArcState.DRAWING
        self._reset_sweep()

    def update_drawing(self, x: float, y: float) -> None:
        if self.state is not ArcState.DRAWING:
            raise ArcStateError("Must start drawing before updating")
        self.current_point = Point(float(x), float(y))
        self._accumulate_sweep()

    @property
    def start_angle(self) -> float:
        if self.center is None or self.radius_point is None:
            return 0.0
        return angle_of(self.center, self.radius_point)

    @property
    def end_angle(self) -> float:
        if self.center is None or self.current_point is None:
            return 0.0
        return angle_of(self.center, self.current_point)

    def is_full_circle(self) -> bool:
        if self.state is not ArcState.DRAWING:
            return False
        if self.radius_point is None or self.current_point is None:
            return False
        revolved = abs(self.net_angle) >= 2.0 * math.pi - FULL_CIRCLE_EPS
        closed = abs(shortest_signed_delta(self.start_angle, self.end_angle)) <= FULL_CIRCLE_EPS
        return revolved and closed

    def reset(self) -> None:
        self.center = None
        self.radius_point = None
        self.current_point = None
        self.state = ArcState.IDLE
        self._reset_sweep()

    def copy(self) -> CompassArc:
        return replace(self)

    def _reset_sweep(self) -> None:
        self.last_angle = None
        self.net_angle = 0.0
        self.total_angle = 0.0

    def _accumulate_sweep(self) -> None:
        if self.center is None or self.radius_point is None or self.current_point is None:
            return
        if self.last_angle is None:
            self.last_angle = self.start_angle
            self.net_angle = 0.0
            self.total_angle = 0.0
        current = self.end_angle
        delta = shortest_signed_delta(self.last_angle, current)
        self.net_angle += delta
        self.total_angle += abs(delta)
        self.last_angle = current


__all__ = ["Line", "CompassArc", "ArcState", "FULL_CIRCLE_EPS", "MIN_RADIUS"]
