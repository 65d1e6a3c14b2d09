"""Compass-and-straightedge construction core: primitives, equal division, undo/redo."""
from compass_playground.compass_controller import CompassController, ControllerState
from compass_playground.division import (
    DivisionMode,
    divide_element,
    divide_line_segment,
    divide_radius_points,
    divide_two_points,
)
from compass_playground.division_tools import DivisionIntegrationHelper, DivisionResult, DivisionStatus
from compass_playground.errors import (
    ArcStateError,
    ConstructionError,
    IncompleteElementError,
    InvalidDivisionCountError,
    UnsupportedElementTypeError,
)
from compass_playground.geometry import Point
from compass_playground.history import History, HistoryState
from compass_playground.primitives import ArcState, CompassArc, Line
from compass_playground.radius_state import CompassRadiusState
from compass_playground.radius_store import RadiusStore
from compass_playground.selection import ElementKind, SelectableElement, Selection
from compass_playground.settings import PlaygroundSettings, load_settings

__version__ = "0.1.0"

__all__ = [
    "ArcState",
    "ArcStateError",
    "CompassArc",
    "CompassController",
    "CompassRadiusState",
    "ControllerState",
    "ConstructionError",
    "DivisionIntegrationHelper",
    "DivisionMode",
    "DivisionResult",
    "DivisionStatus",
    "ElementKind",
    "History",
    "HistoryState",
    "IncompleteElementError",
    "InvalidDivisionCountError",
    "Line",
    "PlaygroundSettings",
    "Point",
    "RadiusStore",
    "SelectableElement",
    "Selection",
    "UnsupportedElementTypeError",
    "divide_element",
    "divide_line_segment",
    "divide_radius_points",
    "divide_two_points",
    "load_settings",
]
