"""QPainter adapter for the marker surface contract."""
from __future__ import annotations

from typing import Callable, Optional, Tuple

from PySide6.QtCore import QPointF, Qt
from PySide6.QtGui import QBrush, QColor, QPainter

from compass_playground.geometry import Point

ScreenTransform = Callable[[float, float], Tuple[float, float]]


class QtMarkerSurface:
    """Draws division markers with a caller-owned ``QPainter``.

    ``begin``/``end`` map onto ``QPainter.save``/``restore`` so pen and brush
    changes never leak into the rest of the paint event.
    """

    def __init__(self, painter: QPainter, to_screen: Optional[ScreenTransform] = None):
        self._painter = painter
        self._to_screen = to_screen
        self._depth = 0

    def _color(self, value: str) -> QColor:
        return QColor(value) if value else QColor(30, 111, 255)

    def begin(self) -> None:
        self._painter.save()
        self._depth += 1

    def end(self) -> None:
        if self._depth == 0:
            return
        self._painter.restore()
        self._depth -= 1

    def draw_marker(self, point: Point, color: str, size: float) -> None:
        x, y = point.x, point.y
        if self._to_screen is not None:
            x, y = self._to_screen(x, y)
        radius = max(0.5, float(size) / 2.0)
        self._painter.setPen(Qt.NoPen)
        self._painter.setBrush(QBrush(self._color(color)))
        self._painter.drawEllipse(QPointF(float(x), float(y)), radius, radius)


__all__ = ["QtMarkerSurface", "ScreenTransform"]
