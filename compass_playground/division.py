"""Equal division of segments and compass radii.

``divide_two_points`` is the only numeric routine; the element-bound variants
check completeness and delegate to it. :class:`DivisionMode` keeps the
division points of one selected element live while the user picks a snap
target among them.
"""
from __future__ import annotations

import logging
import numbers
from typing import Callable, Dict, List, Optional

from compass_playground.errors import IncompleteElementError, InvalidDivisionCountError
from compass_playground.geometry import Point, interior_points
from compass_playground.primitives import CompassArc, Line
from compass_playground.selection import ElementKind, SelectableElement, resolve_kind
from compass_playground.surface import MarkerSurface

logger = logging.getLogger(__name__)

DivisionPoint = Point

DIVISION_BLUE = "#1E6FFF"
DEFAULT_MARKER_SIZE = 6.0
DEFAULT_DIVISIONS = 2


def _check_divisions(divisions: int) -> None:
    if isinstance(divisions, bool) or not isinstance(divisions, numbers.Integral) or divisions <= 0:
        raise InvalidDivisionCountError(divisions)


def divide_two_points(point_a: Point, point_b: Point, divisions: int) -> List[DivisionPoint]:
    """Return the ``divisions - 1`` points splitting ``point_a``-``point_b`` into equal parts.

    One division yields no interior points. Coincident endpoints yield copies
    of ``point_a``.
    """
    _check_divisions(divisions)
    return interior_points(point_a, point_b, divisions)


def divide_line_segment(line: Line, divisions: int) -> List[DivisionPoint]:
    if line.first_point is None or line.second_point is None:
        raise IncompleteElementError("Line must be completed (have both points) before division")
    _check_divisions(divisions)
    return divide_two_points(line.first_point, line.second_point, divisions)


def divide_radius_points(arc: CompassArc, divisions: int) -> List[DivisionPoint]:
    """Divide the straight radius segment from the arc's center to its radius point."""
    if arc.center is None or arc.radius_point is None:
        raise IncompleteElementError("Arc must have both center and radius set before division")
    _check_divisions(divisions)
    return divide_two_points(arc.center, arc.radius_point, divisions)


_DIVIDERS: Dict[ElementKind, Callable[..., List[DivisionPoint]]] = {
    ElementKind.LINE: divide_line_segment,
    ElementKind.ARC: divide_radius_points,
}


def divide_element(selectable: SelectableElement, divisions: int) -> List[DivisionPoint]:
    """Dispatch to the divider matching the element's kind."""
    kind = resolve_kind(selectable)
    return _DIVIDERS[kind](selectable.element, divisions)


class DivisionMode:
    """Division state for the currently selected element.

    While active, ``division_points`` always holds the division of the selected
    element for the current count. While inactive there is no selection and no
    points.
    """

    def __init__(self) -> None:
        self._active = False
        self._selected: Optional[SelectableElement] = None
        self._divisions = DEFAULT_DIVISIONS
        self._points: List[DivisionPoint] = []

    def is_active(self) -> bool:
        return self._active

    def get_selected_element(self) -> Optional[SelectableElement]:
        return self._selected

    def get_divisions(self) -> int:
        return self._divisions

    def get_division_points(self) -> List[DivisionPoint]:
        return list(self._points)

    def activate(self, element: SelectableElement, divisions: int) -> None:
        """Select ``element`` and compute its division points.

        Errors from the division are propagated and leave the previous state
        untouched.
        """
        resolve_kind(element)
        _check_divisions(divisions)
        points = divide_element(element, divisions)
        self._selected = element
        self._divisions = divisions
        self._points = points
        self._active = True
        logger.debug("Division mode active: %s into %d parts", element.kind, divisions)

    def set_divisions(self, divisions: int) -> None:
        """Change the division count; ignored while inactive."""
        _check_divisions(divisions)
        if not self._active or self._selected is None:
            logger.debug("set_divisions(%d) ignored: division mode inactive", divisions)
            return
        self._points = divide_element(self._selected, divisions)
        self._divisions = divisions

    def deactivate(self) -> None:
        self._active = False
        self._selected = None
        self._points = []

    def get_closest_division_point(self, query: Point, threshold: float) -> Optional[DivisionPoint]:
        """Return the division point nearest ``query`` if it lies within ``threshold``.

        Ties go to the earlier point.
        """
        best: Optional[DivisionPoint] = None
        best_dist = float("inf")
        for point in self._points:
            dist = query.distance_to(point)
            if dist < best_dist:
                best = point
                best_dist = dist
        if best is None or best_dist > threshold:
            return None
        return best

    def draw(
        self,
        surface: MarkerSurface,
        color: str = DIVISION_BLUE,
        size: float = DEFAULT_MARKER_SIZE,
    ) -> None:
        if not self._active or not self._points:
            return
        surface.begin()
        try:
            for point in self._points:
                surface.draw_marker(point, color, size)
        finally:
            surface.end()


__all__ = [
    "DivisionPoint",
    "DivisionMode",
    "DIVISION_BLUE",
    "DEFAULT_MARKER_SIZE",
    "DEFAULT_DIVISIONS",
    "divide_two_points",
    "divide_line_segment",
    "divide_radius_points",
    "divide_element",
]
