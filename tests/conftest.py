"""
Test fixtures for Squiggles tests.

Widget tests run on Qt's offscreen platform with one shared QApplication.
"""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest


@pytest.fixture(scope="session")
def qapp():
    """Shared QApplication for widget tests."""
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication(["squiggles-tests"])
    yield app


@pytest.fixture
def brush_factory():
    """Brush factory with a fixed seed."""
    from squiggles.core.brush_factory import BrushFactory

    return BrushFactory(seed=1234)


@pytest.fixture
def state(brush_factory):
    """Fresh widget state."""
    from squiggles.core.capture import WidgetState

    return WidgetState(brush_factory)


class RecordingContext:
    """Draw context that records every call."""

    def __init__(self):
        self.calls = []
        self._next_path = 0

    def begin_path(self):
        self._next_path += 1
        self.calls.append(("begin_path", self._next_path))
        return self._next_path

    def move_to(self, path, x, y):
        self.calls.append(("move_to", path, x, y))

    def line_to(self, path, x, y):
        self.calls.append(("line_to", path, x, y))

    def close_path(self, path):
        self.calls.append(("close_path", path))

    def stroke(self, path, brush, style):
        self.calls.append(("stroke", path, brush, style))

    def fill(self, path, brush):
        self.calls.append(("fill", path, brush))

    def ops(self):
        return [call[0] for call in self.calls]

    def paints(self):
        return [call for call in self.calls if call[0] in ("stroke", "fill")]


@pytest.fixture
def recorder():
    """Recording draw context."""
    return RecordingContext()
