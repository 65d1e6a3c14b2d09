"""
Division helper for canvas integration. Framework-light: the host forwards
commands and cursor positions, the helper answers with plain results.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from compass_playground.division import DivisionMode, DivisionPoint
from compass_playground.geometry import Point
from compass_playground.selection import SelectableElement
from compass_playground.settings import DivisionSettings
from compass_playground.surface import MarkerSurface

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DivisionResult:
    success: bool
    error: Optional[str] = None


@dataclass(frozen=True)
class DivisionStatus:
    is_active: bool
    point_count: int = 0
    selected_element_type: Optional[str] = None
    divisions: Optional[int] = None


class DivisionIntegrationHelper:
    """Wraps one :class:`DivisionMode` for toolbar and mouse handling."""

    def __init__(
        self,
        mode: Optional[DivisionMode] = None,
        settings: Optional[DivisionSettings] = None,
        on_status: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.mode = mode if mode is not None else DivisionMode()
        self.settings = settings if settings is not None else DivisionSettings()
        self._on_status = on_status

    def activate_quick_division(
        self, element: Optional[SelectableElement], divisions: Optional[int] = None
    ) -> DivisionResult:
        if element is None:
            return DivisionResult(success=False, error="No element selected")
        count = self.settings.default_divisions if divisions is None else divisions
        self.mode.activate(element, count)
        self._post_status()
        return DivisionResult(success=True)

    def get_division_status(self) -> DivisionStatus:
        if not self.mode.is_active():
            return DivisionStatus(is_active=False, point_count=0)
        selected = self.mode.get_selected_element()
        kind = getattr(selected.kind, "value", selected.kind) if selected is not None else None
        return DivisionStatus(
            is_active=True,
            point_count=len(self.mode.get_division_points()),
            selected_element_type=kind,
            divisions=self.mode.get_divisions(),
        )

    def handle_mouse_interaction(self, point: Point, on_select: Callable[[DivisionPoint], None]) -> bool:
        """Hand the division point under the cursor to ``on_select``.

        Returns False without hit-testing while division mode is inactive.
        """
        if not self.mode.is_active():
            return False
        hit = self.mode.get_closest_division_point(point, self.settings.hit_threshold)
        if hit is None:
            return False
        on_select(hit)
        return True

    def cycle_divisions(self) -> None:
        if not self.mode.is_active():
            return
        presets = self.settings.presets
        current = self.mode.get_divisions()
        if current in presets:
            nxt = presets[(presets.index(current) + 1) % len(presets)]
        else:
            nxt = presets[0]
        self.mode.set_divisions(nxt)
        self._post_status()

    def deactivate(self) -> None:
        self.mode.deactivate()
        self._post_status()

    def draw(self, surface: MarkerSurface) -> None:
        self.mode.draw(surface, self.settings.color, self.settings.marker_size)

    def _post_status(self) -> None:
        status = self.get_division_status()
        if status.is_active:
            message = (
                f"Divide {status.selected_element_type}: {status.divisions} parts "
                f"({status.point_count} points)"
            )
        else:
            message = "Divide: off"
        logger.debug(message)
        if self._on_status is not None:
            self._on_status(message)


__all__ = ["DivisionIntegrationHelper", "DivisionResult", "DivisionStatus"]
