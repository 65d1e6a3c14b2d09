"""Exceptions raised by the construction core."""
from __future__ import annotations


class ConstructionError(Exception):
    """Base class for contract violations in the construction core."""


class InvalidDivisionCountError(ConstructionError, ValueError):
    """A division count was not a positive integer."""

    def __init__(self, divisions: object):
        super().__init__(f"Division count must be an integer greater than 0 (got {divisions!r})")
        self.divisions = divisions


class IncompleteElementError(ConstructionError, ValueError):
    """An element is missing one of the points an operation needs."""


class UnsupportedElementTypeError(ConstructionError, TypeError):
    """A selection carried a tag other than ``line`` or ``arc``."""


class ArcStateError(ConstructionError, RuntimeError):
    """A compass arc was driven out of its construction order."""


__all__ = [
    "ConstructionError",
    "InvalidDivisionCountError",
    "IncompleteElementError",
    "UnsupportedElementTypeError",
    "ArcStateError",
]
