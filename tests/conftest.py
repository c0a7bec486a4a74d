"""
Pytest configuration and shared fixtures for sketchboard tests.
"""

import os

import pytest

# QImage/QPainter and the host widgets need an application object; run it headless
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication

from sketchboard.raster import RasterBuffer
from sketchboard.history import HistoryStack
from sketchboard.tool_state import ToolState
from sketchboard.engine import DrawingEngine


# ============== Qt Fixtures ==============

@pytest.fixture(scope="session", autouse=True)
def qt_app():
    """One QApplication for the whole session."""
    app = QApplication.instance() or QApplication([])
    yield app


# ============== Core Fixtures ==============

@pytest.fixture
def buffer() -> RasterBuffer:
    """A small white buffer."""
    return RasterBuffer(200, 100)


@pytest.fixture
def history(buffer: RasterBuffer) -> HistoryStack:
    return HistoryStack(buffer)


@pytest.fixture
def tool_state() -> ToolState:
    return ToolState()


class FakeClock:
    """Returns queued timestamps in order, then repeats the last one."""

    def __init__(self, *times):
        self.times = list(times) or [0.0]
        self.calls = 0

    def __call__(self):
        value = self.times[min(self.calls, len(self.times) - 1)]
        self.calls += 1
        return value


@pytest.fixture
def make_engine():
    """Factory for 800x600 engines driven by a fake clock."""
    def _make(*times, **kwargs):
        return DrawingEngine(800, 600, clock=FakeClock(*times), **kwargs)
    return _make


@pytest.fixture
def engine(make_engine) -> DrawingEngine:
    return make_engine(0.0)
