"""File-backed memory of the compass radius between sessions.

The store is one JSON object; each key holds ``{"current_radius": ..,
"last_radius": ..}``. Unreadable files and unusable values are treated as
"nothing stored" so a damaged file never blocks the compass.
"""
from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "compass.radius"


@dataclass(frozen=True)
class StoredRadius:
    current_radius: float
    last_radius: Optional[float] = None


def parse_radius(value: Any) -> Optional[float]:
    """Return ``value`` as a float radius, or None for blank, NaN or non-numeric values."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    else:
        return None
    if math.isnan(number):
        return None
    return number


class RadiusStore:
    def __init__(self, path: Union[str, Path], key: str = DEFAULT_STORAGE_KEY):
        self.path = Path(path).expanduser()
        self.key = key

    def _read_document(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with self.path.open("r", encoding="utf-8") as handle:
                data = json.load(handle)
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning("Could not read radius store %s (%s)", self.path, exc)
            return {}
        if not isinstance(data, dict):
            logger.warning("Radius store %s is not a JSON object, ignoring it", self.path)
            return {}
        return data

    def load(self) -> Optional[StoredRadius]:
        entry = self._read_document().get(self.key)
        if isinstance(entry, dict):
            current = parse_radius(entry.get("current_radius"))
            last = parse_radius(entry.get("last_radius"))
        else:
            # a bare value stores only the current radius
            current = parse_radius(entry)
            last = None
        if current is None:
            return None
        return StoredRadius(current, last)

    def save(self, current_radius: float, last_radius: Optional[float] = None) -> bool:
        """Write the radius under this store's key, keeping other keys in the file.

        Returns False when the file cannot be written.
        """
        document = self._read_document()
        document[self.key] = {"current_radius": current_radius, "last_radius": last_radius}
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("w", encoding="utf-8") as handle:
                json.dump(document, handle, indent=2)
        except OSError as exc:
            logger.warning("Could not save compass radius to %s (%s)", self.path, exc)
            return False
        logger.debug("Saved compass radius %.3f under %r", current_radius, self.key)
        return True

    def clear(self) -> None:
        document = self._read_document()
        if document.pop(self.key, None) is None:
            return
        try:
            with self.path.open("w", encoding="utf-8") as handle:
                json.dump(document, handle, indent=2)
        except OSError as exc:
            logger.warning("Could not update radius store %s (%s)", self.path, exc)


__all__ = ["DEFAULT_STORAGE_KEY", "RadiusStore", "StoredRadius", "parse_radius"]
