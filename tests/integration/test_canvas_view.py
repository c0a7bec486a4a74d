"""
Integration tests for the Qt host widgets wired to the engine.
"""

import pytest
from PyQt6.QtCore import QEvent, QPointF, Qt
from PyQt6.QtGui import QMouseEvent

from sketchboard.engine import Phase
from sketchboard.tool_state import MAX_LINE_WIDTH
from sketchboard.ui import CanvasView, WidthPopover

pytestmark = pytest.mark.integration

LEFT = Qt.MouseButton.LeftButton
NONE = Qt.MouseButton.NoButton


def rgb(color):
    return (color.red(), color.green(), color.blue())


def mouse(kind, x, y, button=LEFT, buttons=LEFT):
    pos = QPointF(x, y)
    return QMouseEvent(kind, pos, pos, button, buttons, Qt.KeyboardModifier.NoModifier)


def press(view, x, y):
    view.mousePressEvent(mouse(QEvent.Type.MouseButtonPress, x, y))


def move(view, x, y):
    view.mouseMoveEvent(mouse(QEvent.Type.MouseMove, x, y, button=NONE))


def release(view, x, y):
    view.mouseReleaseEvent(mouse(QEvent.Type.MouseButtonRelease, x, y, buttons=NONE))


class TestCanvasView:

    def test_press_move_release_commits(self, engine):
        view = CanvasView(engine)
        engine.tools.set_line_width(8)
        press(view, 100, 100)
        move(view, 200, 100)
        release(view, 200, 100)

        assert engine.phase is Phase.IDLE
        assert len(engine.history) == 2
        assert rgb(engine.buffer.pixel(150, 100)) == (0, 0, 0)

    def test_dragging_out_of_the_canvas_commits(self, engine):
        """Leaving the widget with the button held ends the stroke."""
        view = CanvasView(engine)
        engine.tools.set_line_width(8)
        press(view, 100, 100)
        move(view, 200, 100)
        move(view, -5, 100)

        assert engine.phase is Phase.IDLE
        assert len(engine.history) == 2

        # coming back in with the button still held paints nothing
        move(view, 300, 100)
        release(view, 300, 100)
        assert rgb(engine.buffer.pixel(250, 100)) == (255, 255, 255)
        assert len(engine.history) == 2

    def test_moves_past_the_right_edge_stop_painting(self, engine):
        view = CanvasView(engine)
        engine.tools.set_line_width(8)
        press(view, 700, 300)
        move(view, 900, 300)

        assert engine.phase is Phase.IDLE
        assert rgb(engine.buffer.pixel(750, 300)) == (255, 255, 255)

    def test_right_button_is_ignored(self, engine):
        view = CanvasView(engine)
        view.mousePressEvent(mouse(QEvent.Type.MouseButtonPress, 100, 100,
                                   button=Qt.MouseButton.RightButton,
                                   buttons=Qt.MouseButton.RightButton))
        assert engine.phase is Phase.IDLE


class TestWidthPopover:

    def test_slider_sets_width_and_label(self, tool_state):
        popover = WidthPopover(tool_state)
        assert popover.slider.maximum() == MAX_LINE_WIDTH
        assert popover.value_label.text() == "5"

        popover.slider.setValue(12)
        assert tool_state.line_width == 12
        assert popover.value_label.text() == "12"
