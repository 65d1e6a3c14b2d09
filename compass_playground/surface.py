# compass_playground/surface.py
"""
Qt-agnostic rendering contract for construction guides.
A surface provides:
- begin() / end(): a state bracket (save/restore) around a batch of markers
- draw_marker(point, color, size): one filled marker centred on a world point
The core only issues calls; it never reads surface state back.
See qt_surface.QtMarkerSurface for the QPainter-backed implementation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from compass_playground.geometry import Point


class MarkerSurface(Protocol):
    def begin(self) -> None:
        ...

    def end(self) -> None:
        ...

    def draw_marker(self, point: Point, color: str, size: float) -> None:
        ...


__all__ = ["MarkerSurface"]
