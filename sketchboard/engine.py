import math
import time
import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Callable, Optional, Tuple

from PyQt6.QtGui import QColor

from .raster import RasterBuffer
from .history import HistoryStack
from .tool_state import Tool, ToolState, rainbow_color
from .symmetry import SymmetryRenderer
from .shapes import Shape, ShapeType, ShapeRegistry
from .capture import export_png


def wall_clock_ms():
    return time.time() * 1000


class Phase(Enum):
    IDLE = auto()
    STROKING = auto()
    SHAPE_DRAGGING = auto()


@dataclass
class PointerStroke:
    start: Tuple[float, float]
    last: Tuple[float, float]
    color: Optional[QColor] = None
    shape: Optional[Shape] = None   # not owned; lives in the registry


@dataclass
class EngineState:
    buffer: RasterBuffer
    history: HistoryStack
    tools: ToolState = field(default_factory=ToolState)
    shapes: ShapeRegistry = field(default_factory=ShapeRegistry)
    phase: Phase = Phase.IDLE
    stroke: Optional[PointerStroke] = None


class DrawingEngine:
    """Routes pointer events to the buffer, history and shape overlay."""

    def __init__(self, width=800, height=600, background=None, tool_state=None,
                 clock: Callable[[], float] = wall_clock_ms, on_change: Optional[Callable[[], None]] = None):
        buffer = RasterBuffer(width, height, background)
        self.state = EngineState(
            buffer=buffer,
            history=HistoryStack(buffer),
            tools=tool_state or ToolState(),
        )
        self.symmetry = SymmetryRenderer()
        self.clock = clock
        self.on_change = on_change
        logging.info(f"Engine: {width}x{height} surface ready.")

    # Shortcuts
    @property
    def buffer(self):
        return self.state.buffer

    @property
    def history(self):
        return self.state.history

    @property
    def tools(self):
        return self.state.tools

    @property
    def shapes(self):
        return self.state.shapes

    @property
    def phase(self):
        return self.state.phase

    def _changed(self):
        if self.on_change:
            self.on_change()

    def _stroke_color(self):
        if self.tools.rainbow_mode:
            return rainbow_color(self.clock())
        if self.tools.tool is Tool.ERASER:
            return QColor(self.buffer.background)
        return QColor(self.tools.color)

    # -----------------
    # Pointer events
    # -----------------
    def pointer_down(self, x, y):
        if self.state.phase is not Phase.IDLE:
            return

        point = (float(x), float(y))
        tool = self.tools.tool

        if tool is Tool.SELECT:
            shape = self.shapes.hit_test(point)
            if shape is None:
                return
            self.state.stroke = PointerStroke(start=point, last=point, shape=shape)
            self.state.phase = Phase.SHAPE_DRAGGING
            return

        self.state.stroke = PointerStroke(start=point, last=point, color=self._stroke_color())
        self.state.phase = Phase.STROKING

    def pointer_move(self, x, y):
        phase = self.state.phase
        if phase is Phase.IDLE:
            return

        point = (float(x), float(y))
        stroke = self.state.stroke

        if phase is Phase.SHAPE_DRAGGING:
            self.shapes.move_shape(stroke.shape, point)
            stroke.last = point
            self.redraw()
            return

        tool = self.tools.tool
        if tool.is_shape:
            self._draw_preview(stroke, point)
        else:
            if self.tools.rainbow_mode:
                stroke.color = rainbow_color(self.clock())
            self.symmetry.stroke(self.buffer, stroke.last, point, self.tools, stroke.color)

        stroke.last = point
        self._changed()

    def _draw_preview(self, stroke, point):
        # Start from the committed image so previews never pile up
        self.buffer.restore(self.history.current())
        sx, sy = stroke.start
        x, y = point
        width = self.tools.line_width

        if self.tools.tool is Tool.SQUARE:
            self.buffer.draw_rect(sx, sy, x - sx, y - sy, stroke.color, width)
        else:
            self.buffer.draw_ellipse(sx + (x - sx) / 2, sy + (y - sy) / 2,
                                     abs(x - sx) / 2, abs(y - sy) / 2, stroke.color, width)

    def pointer_up(self):
        phase = self.state.phase
        stroke = self.state.stroke
        self.state.phase = Phase.IDLE
        self.state.stroke = None

        if phase is Phase.SHAPE_DRAGGING:
            # Shape moves are overlay-only; nothing goes into history
            return

        if phase is Phase.STROKING:
            tool = self.tools.tool
            if tool.is_shape:
                size = math.dist(stroke.start, self.buffer.center)
                shape = self.shapes.add(Shape(ShapeType(tool.value), stroke.start, size))
                logging.debug(f"Engine: added {shape.type.value} at {shape.anchor} size {size:.1f}")
            self.history.push(self.buffer.snapshot())
            if len(self.shapes):
                # Overlay stays out of history; put it back on top
                self.redraw()

    def pointer_leave(self):
        self.pointer_up()

    # -----------------
    # Commands
    # -----------------
    def undo(self):
        if self.state.phase is not Phase.IDLE:
            return False

        snapshot = self.history.undo()
        if snapshot is None:
            return False

        # Shapes are not in history; redraw puts them back over the restored image
        self.redraw()
        return True

    def redraw(self):
        self.buffer.restore(self.history.current())
        self.shapes.render_all(self.buffer, self.tools.color, self.tools.line_width)
        self._changed()

    def export(self, path=None, directory="captures"):
        if self.state.phase is Phase.IDLE:
            snapshot = self.buffer.snapshot()
        else:
            snapshot = self.history.current()
        return export_png(snapshot, path=path, directory=directory)
