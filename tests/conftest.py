"""Shared fixtures for the construction core tests."""
import pytest

from compass_playground.primitives import CompassArc, Line


class RecordingSurface:
    """Marker surface that records every call in order."""

    def __init__(self):
        self.calls = []
        self.depth = 0

    def begin(self):
        self.depth += 1
        self.calls.append(("begin",))

    def end(self):
        self.depth -= 1
        self.calls.append(("end",))

    def draw_marker(self, point, color, size):
        self.calls.append(("marker", point, color, size))

    @property
    def markers(self):
        return [call for call in self.calls if call[0] == "marker"]


def make_line(x1, y1, x2, y2):
    line = Line()
    line.set_first_point(x1, y1)
    line.set_second_point(x2, y2)
    return line


def make_arc(cx, cy, rx, ry):
    arc = CompassArc()
    arc.set_center(cx, cy)
    arc.set_radius(rx, ry)
    return arc


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def horizontal_line():
    """Line from (0, 0) to (9, 0)."""
    return make_line(0, 0, 9, 0)


@pytest.fixture
def unit_arc():
    """Arc centred on the origin with radius point (10, 0)."""
    return make_arc(0, 0, 10, 0)


@pytest.fixture
def line_factory():
    return make_line


@pytest.fixture
def arc_factory():
    return make_arc
