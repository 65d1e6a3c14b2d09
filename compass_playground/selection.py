"""Element selection: the line/arc tagged union and nearest-element hit-testing."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Union

from compass_playground.errors import UnsupportedElementTypeError
from compass_playground.geometry import Point, project_point_to_segment
from compass_playground.primitives import CompassArc, Line

Element = Union[Line, CompassArc]


class ElementKind(str, Enum):
    LINE = "line"
    ARC = "arc"


_PAYLOAD_TYPES = {
    ElementKind.LINE: Line,
    ElementKind.ARC: CompassArc,
}


@dataclass(frozen=True, eq=False)
class SelectableElement:
    """A selected primitive together with its kind tag.

    The element is referenced, never copied: the selection follows the live
    primitive owned by the canvas.
    """

    kind: Union[ElementKind, str]
    element: Element

    @classmethod
    def line(cls, line: Line) -> SelectableElement:
        return cls(ElementKind.LINE, line)

    @classmethod
    def arc(cls, arc: CompassArc) -> SelectableElement:
        return cls(ElementKind.ARC, arc)

    @classmethod
    def wrap(cls, element: object) -> SelectableElement:
        if isinstance(element, Line):
            return cls.line(element)
        if isinstance(element, CompassArc):
            return cls.arc(element)
        raise UnsupportedElementTypeError(f"Cannot select element of type {type(element).__name__}")


def resolve_kind(selectable: SelectableElement) -> ElementKind:
    """Return the validated kind of ``selectable``.

    Raises :class:`UnsupportedElementTypeError` for tags outside ``line``/``arc``
    and for payloads that do not match their tag. Anything that is not a
    :class:`SelectableElement` is rejected the same way.
    """
    if not isinstance(selectable, SelectableElement):
        raise UnsupportedElementTypeError(
            f"Expected a SelectableElement, got {type(selectable).__name__}"
        )
    try:
        kind = ElementKind(selectable.kind)
    except ValueError as exc:
        raise UnsupportedElementTypeError(
            f"Unsupported element type for division: {selectable.kind!r}"
        ) from exc
    if not isinstance(selectable.element, _PAYLOAD_TYPES[kind]):
        raise UnsupportedElementTypeError(
            f"Element tagged {kind.value!r} is a {type(selectable.element).__name__}"
        )
    return kind


class Selection:
    """Tracks the selected element and finds the element under the cursor."""

    def __init__(self) -> None:
        self._selected: Optional[SelectableElement] = None

    @property
    def selected_element(self) -> Optional[SelectableElement]:
        return self._selected

    @selected_element.setter
    def selected_element(self, element: Optional[SelectableElement]) -> None:
        self._selected = element

    def clear(self) -> None:
        self._selected = None

    def is_selected(self, element: SelectableElement) -> bool:
        if self._selected is None:
            return False
        return self._selected.kind == element.kind and self._selected.element is element.element

    @staticmethod
    def distance_to_line(point: Point, line: Line) -> float:
        if line.first_point is None or line.second_point is None:
            return float("inf")
        proj, _ = project_point_to_segment(point, line.first_point, line.second_point)
        return point.distance_to(proj)

    @staticmethod
    def distance_to_arc(point: Point, arc: CompassArc) -> float:
        """Distance from ``point`` to the arc's circle."""
        if arc.center is None or arc.radius_point is None:
            return float("inf")
        return abs(point.distance_to(arc.center) - arc.radius)

    def distance_to(self, point: Point, element: SelectableElement) -> float:
        kind = resolve_kind(element)
        if kind is ElementKind.LINE:
            return self.distance_to_line(point, element.element)  # type: ignore[arg-type]
        return self.distance_to_arc(point, element.element)  # type: ignore[arg-type]

    def find_closest_element(
        self,
        point: Point,
        elements: Iterable[SelectableElement],
        max_distance: Optional[float] = None,
    ) -> Optional[SelectableElement]:
        best: Optional[SelectableElement] = None
        best_dist = float("inf")
        for element in elements:
            dist = self.distance_to(point, element)
            if dist < best_dist:
                best = element
                best_dist = dist
        if best is None:
            return None
        if max_distance is not None and best_dist > max_distance:
            return None
        return best


__all__ = ["Element", "ElementKind", "SelectableElement", "Selection", "resolve_kind"]
