"""Mouse-driven compass tool.

A normal click places the center, the next click opens the compass to the
remembered radius in the direction of the cursor and starts sweeping, and a
click while sweeping starts a new arc. Shift-click enters radius setting: the
shift-click point anchors the compass, dragging opens it, and releasing
stores the new radius. Escape or a right click cancels the current gesture.
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import Optional, Tuple

from compass_playground.geometry import Point
from compass_playground.primitives import ArcState, CompassArc
from compass_playground.radius_state import CompassRadiusState

logger = logging.getLogger(__name__)

CANCEL_KEYS = ("Escape", "Esc")


class ControllerState(str, Enum):
    IDLE = "idle"
    CENTER_SET = "center_set"
    DRAWING = "drawing"
    SETTING_RADIUS = "setting_radius"


class CompassController:
    def __init__(
        self,
        arc: Optional[CompassArc] = None,
        radius_state: Optional[CompassRadiusState] = None,
    ) -> None:
        self._arc = arc if arc is not None else CompassArc()
        self.radius_state = radius_state if radius_state is not None else CompassRadiusState()
        self._anchor: Optional[Point] = None
        self._preview_radius: Optional[float] = None
        self.cursor: Optional[Point] = None

    # ------------------------------------------------------------------
    # Readers
    @property
    def compass_arc(self) -> CompassArc:
        return self._arc

    @property
    def state(self) -> ControllerState:
        if self._anchor is not None:
            return ControllerState.SETTING_RADIUS
        if self._arc.state is ArcState.DRAWING:
            return ControllerState.DRAWING
        if self._arc.state is ArcState.IDLE:
            return ControllerState.IDLE
        # a radius point left over from an earlier arc is replaced on the next click
        return ControllerState.CENTER_SET

    @property
    def center_point(self) -> Optional[Point]:
        return self._arc.center

    @property
    def compass_center(self) -> Optional[Point]:
        """Anchor of the radius-setting gesture, None outside it."""
        return self._anchor

    @property
    def preview_radius(self) -> Optional[float]:
        """Radius the compass is being dragged open to, None before the first drag."""
        return self._preview_radius

    def get_current_radius(self) -> float:
        return self.radius_state.current_radius

    def get_last_radius(self) -> float:
        return self.radius_state.last_radius

    def set_current_radius(self, radius: float) -> None:
        self.radius_state.update_radius(radius)

    def use_last_radius(self) -> None:
        self.radius_state.use_last_radius()

    # ------------------------------------------------------------------
    # Input
    def handle_click(self, x: float, y: float, shift: bool = False) -> None:
        self.cursor = Point(float(x), float(y))
        if shift:
            self._shift_click(self.cursor)
        else:
            self._normal_click(self.cursor)

    def handle_mouse_drag(self, x: float, y: float) -> None:
        self.cursor = Point(float(x), float(y))
        if self._anchor is not None:
            self._preview_radius = self.radius_state.clamp(self._anchor.distance_to(self.cursor))
        elif self._arc.state is ArcState.DRAWING:
            self._arc.update_drawing(self.cursor.x, self.cursor.y)

    def handle_mouse_release(self, x: float, y: float) -> Optional[CompassArc]:
        """Finish the current gesture.

        Returns a copy of the arc when the release closes a full circle; the
        compass is then reset for the next arc.
        """
        self.cursor = Point(float(x), float(y))
        if self._anchor is not None:
            self._finish_radius_setting()
        if self._arc.state is ArcState.DRAWING and self._arc.is_full_circle():
            completed = self._arc.copy()
            logger.debug("Full circle closed at radius %.3f", completed.radius)
            self.reset()
            return completed
        return None

    def handle_key_press(self, key: str) -> None:
        if key in CANCEL_KEYS:
            self.cancel()

    def handle_right_click(self) -> None:
        self.cancel()

    def cancel(self) -> None:
        """Abort radius setting if it is under way, otherwise drop the arc in progress."""
        if self._anchor is not None:
            logger.debug("Radius setting cancelled")
            self._anchor = None
            self._preview_radius = None
            return
        self.reset()

    def reset(self) -> None:
        """Clear the arc; the remembered radius is kept."""
        self._arc.reset()

    # ------------------------------------------------------------------
    def _normal_click(self, point: Point) -> None:
        state = self.state
        if state is ControllerState.IDLE:
            self._arc.set_center(point.x, point.y)
        elif state is ControllerState.CENTER_SET:
            rx, ry = self._radius_point_toward(point)
            self._arc.set_radius_and_start_drawing(rx, ry)
            self._arc.update_drawing(point.x, point.y)
        elif state is ControllerState.DRAWING:
            self.reset()
            self._arc.set_center(point.x, point.y)

    def _shift_click(self, point: Point) -> None:
        if self._anchor is not None:
            self.cancel()
            return
        self._anchor = point
        self._preview_radius = None
        logger.debug("Radius setting from (%g, %g)", point.x, point.y)

    def _finish_radius_setting(self) -> None:
        radius = self._preview_radius
        self._anchor = None
        self._preview_radius = None
        if radius is None:
            return
        self.radius_state.update_radius(radius)
        logger.debug("Compass radius set to %.3f", self.radius_state.current_radius)

    def _radius_point_toward(self, toward: Point) -> Tuple[float, float]:
        """Point at the remembered radius from the center, in the direction of ``toward``."""
        center = self._arc.center
        assert center is not None
        radius = self.radius_state.current_radius
        distance = center.distance_to(toward)
        if distance == 0:
            return center.x + radius, center.y
        scale = radius / distance
        return center.x + (toward.x - center.x) * scale, center.y + (toward.y - center.y) * scale


__all__ = ["CANCEL_KEYS", "CompassController", "ControllerState"]
