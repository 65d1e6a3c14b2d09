"""Pydantic settings for the construction core."""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel, Field, field_validator, model_validator

from compass_playground.division import DEFAULT_DIVISIONS, DEFAULT_MARKER_SIZE, DIVISION_BLUE
from compass_playground.logging_config import resolve_level
from compass_playground.radius_store import DEFAULT_STORAGE_KEY

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "COMPASS_PLAYGROUND_CONFIG"
DIVISION_PRESETS = (2, 3, 4, 5)
HIT_TEST_THRESHOLD = 10.0


class DivisionSettings(BaseModel):
    color: str = Field(DIVISION_BLUE, min_length=1, description="Colour of division markers.")
    marker_size: float = Field(DEFAULT_MARKER_SIZE, gt=0.0, description="Marker diameter in screen units.")
    hit_threshold: float = Field(
        HIT_TEST_THRESHOLD, ge=0.0, description="Maximum cursor distance for picking a division point."
    )
    presets: list[int] = Field(
        default_factory=lambda: list(DIVISION_PRESETS),
        min_length=1,
        description="Division counts visited by cycling, in order.",
    )
    default_divisions: int = Field(DEFAULT_DIVISIONS, ge=1, description="Count used by quick division.")

    @field_validator("presets")
    @classmethod
    def _positive_presets(cls, value: list[int]) -> list[int]:
        for count in value:
            if count < 1:
                raise ValueError("Division presets must be positive")
        return value


class HistorySettings(BaseModel):
    max_states: Optional[int] = Field(
        None, ge=1, description="Oldest snapshots are dropped beyond this many; unbounded when unset."
    )


class RadiusSettings(BaseModel):
    default_radius: float = Field(50.0, description="Initial compass radius.")
    min_radius: float = Field(1.0, gt=0.0)
    max_radius: float = Field(10000.0, gt=0.0)
    store_path: Optional[str] = Field(None, description="JSON file remembering the radius between sessions.")
    storage_key: str = Field(DEFAULT_STORAGE_KEY, min_length=1, description="Key of the radius entry in the store.")

    @model_validator(mode="after")
    def _ordered_bounds(self) -> RadiusSettings:
        if self.min_radius > self.max_radius:
            raise ValueError("min_radius must not exceed max_radius")
        return self


class PlaygroundSettings(BaseModel):
    division: DivisionSettings = Field(default_factory=DivisionSettings)
    history: HistorySettings = Field(default_factory=HistorySettings)
    radius: RadiusSettings = Field(default_factory=RadiusSettings)
    log_level: str = Field("INFO", description="Level name handed to setup_logging.")

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        return logging.getLevelName(resolve_level(value))


def load_settings(path: Union[str, Path, None] = None) -> PlaygroundSettings:
    """Load settings from ``path`` or ``$COMPASS_PLAYGROUND_CONFIG``.

    A missing or unreadable file falls back to defaults; a readable file with
    invalid values raises ``pydantic.ValidationError``.
    """
    if path is None:
        path = os.environ.get(CONFIG_ENV_VAR)
    if not path:
        return PlaygroundSettings()
    config_path = Path(path)
    if not config_path.exists():
        logger.warning("Config file %s not found, using defaults", config_path)
        return PlaygroundSettings()
    try:
        with config_path.open("r", encoding="utf-8") as handle:
            data = json.load(handle)
    except (OSError, json.JSONDecodeError) as exc:
        logger.warning("Could not read config %s (%s), using defaults", config_path, exc)
        return PlaygroundSettings()
    return PlaygroundSettings.model_validate(data)


__all__ = [
    "CONFIG_ENV_VAR",
    "DIVISION_PRESETS",
    "HIT_TEST_THRESHOLD",
    "DivisionSettings",
    "HistorySettings",
    "RadiusSettings",
    "PlaygroundSettings",
    "load_settings",
]
