"""Current and previous compass radius, so the compass can be reopened to the last setting.

Radii are kept in screen pixels. A :class:`WorldConverter` maps them to world
units for display; a :class:`RadiusStore` carries them between sessions.
"""
from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Optional, Protocol, Union

from compass_playground.primitives import CompassArc, Line
from compass_playground.radius_store import RadiusStore

if TYPE_CHECKING:
    from compass_playground.settings import RadiusSettings

logger = logging.getLogger(__name__)


class WorldConverter(Protocol):
    def pixels_to_world(self, pixels: float) -> float:
        ...

    def world_to_pixels(self, world: float) -> float:
        ...


class CompassRadiusState:
    def __init__(
        self,
        default_radius: float = 50.0,
        min_radius: float = 1.0,
        max_radius: float = 10000.0,
        world_converter: Optional[WorldConverter] = None,
        store: Optional[RadiusStore] = None,
    ) -> None:
        self.min_radius = float(min_radius)
        self.max_radius = float(max_radius)
        self.default_radius = float(default_radius)
        self.world_converter = world_converter
        self.store = store

        stored = store.load() if store is not None else None
        if stored is not None:
            self._current = self.clamp(stored.current_radius)
            last = stored.last_radius if stored.last_radius is not None else self.default_radius
            self._last = self.clamp(last)
            logger.debug("Restored compass radius %.3f (last %.3f)", self._current, self._last)
        else:
            self._current = self.clamp(default_radius)
            self._last = self._current

    @classmethod
    def from_settings(
        cls,
        settings: RadiusSettings,
        world_converter: Optional[WorldConverter] = None,
    ) -> CompassRadiusState:
        store = None
        if settings.store_path:
            store = RadiusStore(settings.store_path, settings.storage_key)
        return cls(
            settings.default_radius,
            settings.min_radius,
            settings.max_radius,
            world_converter=world_converter,
            store=store,
        )

    @property
    def current_radius(self) -> float:
        return self._current

    @property
    def last_radius(self) -> float:
        return self._last

    def current_radius_world(self) -> float:
        return self._to_world(self._current)

    def last_radius_world(self) -> float:
        return self._to_world(self._last)

    def _to_world(self, pixels: float) -> float:
        if self.world_converter is None:
            return pixels
        try:
            return float(self.world_converter.pixels_to_world(pixels))
        except Exception as exc:  # converter belongs to the host; keep the pixel radius
            logger.debug("World conversion of %.3f failed: %s", pixels, exc)
            return pixels

    def clamp(self, radius: float) -> float:
        if math.isnan(radius):
            return self.min_radius
        return max(self.min_radius, min(self.max_radius, float(radius)))

    def update_radius(self, radius: float) -> None:
        self._last = self._current
        self._current = self.clamp(radius)
        self._persist()

    def use_last_radius(self) -> None:
        self._current, self._last = self._last, self._current
        self._persist()

    def set_radius_from_shape(self, shape: Optional[Union[Line, CompassArc]]) -> None:
        """Take the radius from a line's length or an arc's radius; other inputs are ignored."""
        if isinstance(shape, Line):
            self.update_radius(shape.length)
        elif isinstance(shape, CompassArc):
            self.update_radius(shape.radius)

    def _persist(self) -> None:
        if self.store is not None:
            self.store.save(self._current, self._last)


__all__ = ["CompassRadiusState", "WorldConverter"]
