import logging

from PyQt6.QtWidgets import (
    QMainWindow, QWidget, QFrame, QHBoxLayout, QVBoxLayout,
    QPushButton, QColorDialog, QSlider, QLabel, QMessageBox
)
from PyQt6.QtCore import Qt, QPoint
from PyQt6.QtGui import QPainter, QColor, QKeySequence, QShortcut

from .engine import DrawingEngine
from .tool_state import Tool, ToolState, MIN_LINE_WIDTH, MAX_LINE_WIDTH


# -------------------------
# Line Width Popover
# -------------------------
class WidthPopover(QFrame):
    """Slider for the stroke width, with the current value next to it."""

    def __init__(self, tool_state, parent=None):
        super().__init__(parent)
        self.tool_state = tool_state

        self.setWindowFlags(Qt.WindowType.FramelessWindowHint | Qt.WindowType.Tool)
        self.setObjectName("WidthPopover")
        self.setStyleSheet("""
            QFrame#WidthPopover {
                background: rgb(28, 28, 32);
                border: 1px solid rgba(255, 255, 255, 40);
                border-radius: 12px;
            }
            QLabel { color: rgba(255,255,255,200); }
        """)
        self.setFixedSize(240, 50)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(12, 10, 12, 10)

        self.slider = QSlider(Qt.Orientation.Horizontal)
        self.slider.setRange(MIN_LINE_WIDTH, MAX_LINE_WIDTH)
        self.slider.setValue(self.tool_state.line_width)

        self.value_label = QLabel(str(self.tool_state.line_width))
        self.value_label.setFixedWidth(24)
        self.value_label.setAlignment(Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter)

        self.slider.valueChanged.connect(self.set_width)

        layout.addWidget(self.slider)
        layout.addWidget(self.value_label)

    def set_width(self, value):
        self.tool_state.set_line_width(value)
        self.value_label.setText(str(self.tool_state.line_width))


# -------------------------
# Canvas
# -------------------------
class CanvasView(QWidget):
    """Shows the engine's buffer 1:1, so widget coordinates are buffer coordinates."""

    def __init__(self, engine, parent=None):
        super().__init__(parent)
        self.engine = engine
        self.engine.on_change = self.update
        self.setFixedSize(engine.buffer.width, engine.buffer.height)
        self.setCursor(Qt.CursorShape.CrossCursor)

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.drawImage(0, 0, self.engine.buffer.image())

    def mousePressEvent(self, event):
        if event.button() != Qt.MouseButton.LeftButton:
            return
        pos = event.position()
        self.engine.pointer_down(pos.x(), pos.y())
        self.update()

    def mouseMoveEvent(self, event):
        pos = event.position()
        # Qt keeps sending moves outside the widget while a button is held,
        # and leaveEvent only arrives after release; treat leaving as a release
        if not self.rect().contains(pos.toPoint()):
            self.engine.pointer_leave()
            self.update()
            return
        self.engine.pointer_move(pos.x(), pos.y())

    def mouseReleaseEvent(self, event):
        if event.button() != Qt.MouseButton.LeftButton:
            return
        self.engine.pointer_up()
        self.update()

    def leaveEvent(self, event):
        self.engine.pointer_leave()
        self.update()
        super().leaveEvent(event)


# -------------------------
# Main Window
# -------------------------
class SketchboardWindow(QMainWindow):
    TOOL_BUTTONS = [
        (Tool.BRUSH, "✏", "Brush"),
        (Tool.ERASER, "⌫", "Eraser"),
        (Tool.SQUARE, "□", "Square"),
        (Tool.CIRCLE, "○", "Circle"),
        (Tool.SELECT, "➚", "Select"),
    ]

    def __init__(self, settings):
        super().__init__()
        self.setWindowTitle("Sketchboard")

        self.settings = settings
        self.tool_state = ToolState()
        self.engine = DrawingEngine(
            settings.width, settings.height,
            background=QColor(settings.background),
            tool_state=self.tool_state,
        )
        self.width_popover = None

        central = QWidget(self)
        outer = QVBoxLayout(central)
        outer.setContentsMargins(12, 12, 12, 12)

        # -----------------
        # Toolbar
        # -----------------
        self.toolbar = QWidget(central)
        self.toolbar.setObjectName("Toolbar")
        self.toolbar.setStyleSheet("""
            QWidget#Toolbar {
                background: rgba(28, 28, 32, 220);
                border: 1px solid rgba(255, 255, 255, 40);
                border-radius: 22px;
            }
            QPushButton {
                background: transparent;
                border: none;
                color: rgba(255,255,255,200);
                border-radius: 10px;
            }
            QPushButton:hover {
                background: rgba(255,255,255,35);
            }
            QPushButton:checked {
                background: rgba(255,255,255,60);
            }
        """)

        layout = QHBoxLayout(self.toolbar)
        layout.setContentsMargins(12, 8, 12, 8)
        layout.setSpacing(6)

        def tool_btn(icon, tip, checkable=True):
            b = QPushButton(icon)
            b.setFixedSize(34, 34)
            b.setCheckable(checkable)
            b.setToolTip(tip)
            b.setCursor(Qt.CursorShape.PointingHandCursor)
            layout.addWidget(b)
            return b

        self.tool_buttons = {}
        for tool, icon, tip in self.TOOL_BUTTONS:
            b = tool_btn(icon, tip)
            b.clicked.connect(lambda checked, t=tool: self.select_tool(t))
            self.tool_buttons[tool] = b

        layout.addSpacing(10)
        self.btn_rainbow = tool_btn("🌈", "Rainbow Mode")
        self.btn_mirror = tool_btn("⇋", "Mirror Mode")
        self.btn_symmetry = tool_btn("1", "Symmetry Lines", checkable=False)

        layout.addSpacing(10)
        self.btn_color = tool_btn("🎨", "Color", checkable=False)
        self.btn_width = tool_btn("▓", "Brush Size", checkable=False)

        layout.addSpacing(10)
        self.btn_undo = tool_btn("↶", "Undo (Ctrl+Z)", checkable=False)
        self.btn_download = tool_btn("⤓", "Download", checkable=False)

        self.btn_rainbow.toggled.connect(self.tool_state.set_rainbow_mode)
        self.btn_mirror.toggled.connect(self.tool_state.set_mirror_mode)
        self.btn_symmetry.clicked.connect(self.cycle_symmetry)
        self.btn_color.clicked.connect(self.pick_color)
        self.btn_width.clicked.connect(self.toggle_width_popover)
        self.btn_undo.clicked.connect(self.engine.undo)
        self.btn_download.clicked.connect(self.download)

        outer.addWidget(self.toolbar)

        self.canvas = CanvasView(self.engine, central)
        outer.addWidget(self.canvas, alignment=Qt.AlignmentFlag.AlignCenter)

        self.setCentralWidget(central)

        QShortcut(QKeySequence.StandardKey.Undo, self, activated=self.engine.undo)

        self.select_tool(self.tool_state.tool)

    # -----------------
    # Tool Modes
    # -----------------
    def select_tool(self, tool):
        self.tool_state.set_tool(tool)
        for t, b in self.tool_buttons.items():
            b.setChecked(t is tool)
        self.canvas.setCursor(
            Qt.CursorShape.PointingHandCursor if tool is Tool.SELECT else Qt.CursorShape.CrossCursor
        )

    def cycle_symmetry(self):
        count = self.tool_state.cycle_symmetry()
        self.btn_symmetry.setText(str(count))

    # -----------------
    # Color & Width
    # -----------------
    def pick_color(self):
        color = QColorDialog.getColor(self.tool_state.color, self, "Pick Color")
        if color.isValid():
            self.tool_state.set_color(color)

    def toggle_width_popover(self):
        if self.width_popover and self.width_popover.isVisible():
            self.width_popover.close()
            self.width_popover = None
            return

        self.width_popover = WidthPopover(self.tool_state, self)
        pos = self.btn_width.mapToGlobal(QPoint(0, self.btn_width.height() + 6))
        self.width_popover.move(pos)
        self.width_popover.show()

    # -----------------
    # Export
    # -----------------
    def download(self):
        try:
            path = self.engine.export(directory=self.settings.export_dir)
        except OSError as e:
            logging.error(f"Export failed: {e}")
            QMessageBox.warning(self, "Download", f"Could not save image:\n{e}")
            return
        self.statusBar().showMessage(f"Saved {path}", 4000)

    # -----------------
    # Keyboard & Exit
    # -----------------
    def keyPressEvent(self, event):
        if event.key() == Qt.Key.Key_Escape:
            self.close()
        else:
            super().keyPressEvent(event)

    def closeEvent(self, event):
        if self.width_popover:
            self.width_popover.close()
            self.width_popover = None
        super().closeEvent(event)
