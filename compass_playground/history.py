"""Undo/redo history over snapshots of the drawing.

The history is an append-only list of snapshots plus a cursor. Cursor ``-1``
addresses the empty drawing that precedes the first snapshot; it is never
stored. Pushing after an undo truncates the redo branch.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional

from compass_playground.primitives import CompassArc, Line

if TYPE_CHECKING:
    from compass_playground.settings import HistorySettings

logger = logging.getLogger(__name__)


@dataclass
class HistoryState:
    """All lines and arcs on the canvas at one edit step."""

    lines: List[Line] = field(default_factory=list)
    arcs: List[CompassArc] = field(default_factory=list)

    @classmethod
    def empty(cls) -> HistoryState:
        return cls(lines=[], arcs=[])

    def copy(self) -> HistoryState:
        return HistoryState(
            lines=[line.copy() for line in self.lines],
            arcs=[arc.copy() for arc in self.arcs],
        )


class History:
    def __init__(self, max_states: Optional[int] = None) -> None:
        if max_states is not None and max_states < 1:
            raise ValueError("max_states must be at least 1")
        self._states: List[HistoryState] = []
        self._index = -1
        self._max_states = max_states

    @classmethod
    def from_settings(cls, settings: HistorySettings) -> History:
        return cls(max_states=settings.max_states)

    def push_history(self, state: HistoryState) -> None:
        """Record ``state`` as the newest snapshot, dropping any redo branch."""
        del self._states[self._index + 1:]
        self._states.append(state.copy())
        if self._max_states is not None and len(self._states) > self._max_states:
            del self._states[: len(self._states) - self._max_states]
        self._index = len(self._states) - 1
        logger.debug("History push: %d states, index %d", len(self._states), self._index)

    def can_undo(self) -> bool:
        return self._index >= 0

    def can_redo(self) -> bool:
        return self._index < len(self._states) - 1

    def undo(self) -> Optional[HistoryState]:
        if not self.can_undo():
            logger.debug("Undo ignored: already at the empty state")
            return None
        self._index -= 1
        logger.debug("Undo to index %d", self._index)
        if self._index < 0:
            return HistoryState.empty()
        return self._states[self._index].copy()

    def redo(self) -> Optional[HistoryState]:
        if not self.can_redo():
            logger.debug("Redo ignored: already at the newest state")
            return None
        self._index += 1
        logger.debug("Redo to index %d", self._index)
        return self._states[self._index].copy()

    def get_current_state(self) -> Optional[HistoryState]:
        if self._index < 0:
            return None
        return self._states[self._index].copy()

    def get_history_index(self) -> int:
        return self._index

    def get_history_length(self) -> int:
        return len(self._states)

    def clear_history(self) -> None:
        self._states = []
        self._index = -1


__all__ = ["History", "HistoryState"]
