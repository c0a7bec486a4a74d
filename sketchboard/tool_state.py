from PyQt6.QtGui import QColor
from enum import Enum

MIN_LINE_WIDTH = 1
MAX_LINE_WIDTH = 20
MAX_SYMMETRY = 8


class Tool(Enum):
    BRUSH = "brush"
    ERASER = "eraser"
    SQUARE = "square"
    CIRCLE = "circle"
    SELECT = "select"

    @property
    def is_freehand(self):
        return self in (Tool.BRUSH, Tool.ERASER)

    @property
    def is_shape(self):
        return self in (Tool.SQUARE, Tool.CIRCLE)


def rainbow_color(t_ms):
    """HSL(hue=(t/10) mod 360, 100%, 50%) for a timestamp in milliseconds."""
    hue = (t_ms / 10) % 360
    return QColor.fromHslF(hue / 360, 1.0, 0.5)


class ToolState:
    def __init__(self):
        self.tool = Tool.BRUSH
        self.color = QColor(0, 0, 0)
        self.line_width = 5
        self.rainbow_mode = False
        self.mirror_mode = False
        self.symmetry_count = 1

    def set_tool(self, tool):
        # Accepts a Tool or its name; unknown names raise ValueError
        self.tool = tool if isinstance(tool, Tool) else Tool(tool)

    def set_color(self, color):
        self.color = QColor(color)

    def set_line_width(self, width):
        self.line_width = max(MIN_LINE_WIDTH, min(MAX_LINE_WIDTH, int(width)))

    def set_rainbow_mode(self, enabled):
        self.rainbow_mode = bool(enabled)

    def set_mirror_mode(self, enabled):
        self.mirror_mode = bool(enabled)

    def cycle_symmetry(self):
        # 1 -> 2 -> ... -> 8 -> 1
        self.symmetry_count = (self.symmetry_count % MAX_SYMMETRY) + 1
        return self.symmetry_count
