from contextlib import contextmanager
from dataclasses import dataclass

from PyQt6.QtCore import Qt, QPointF, QRectF
from PyQt6.QtGui import QImage, QPainter, QColor, QPen


class SurfaceError(RuntimeError):
    """Raised when there is no usable surface to draw on."""


@dataclass(frozen=True)
class RasterSnapshot:
    """Full-buffer pixel capture. The image is a private copy."""
    image: QImage

    @property
    def width(self):
        return self.image.width()

    @property
    def height(self):
        return self.image.height()


class RasterBuffer:
    """The single flat pixel grid everything is painted onto."""

    FORMAT = QImage.Format.Format_RGB32

    def __init__(self, width, height, background=None):
        if width <= 0 or height <= 0:
            raise SurfaceError(f"Invalid surface size {width}x{height}")

        self._image = QImage(width, height, self.FORMAT)
        if self._image.isNull():
            raise SurfaceError(f"Could not allocate a {width}x{height} surface")

        self.background = QColor(background) if background is not None else QColor(255, 255, 255)
        self.clear(self.background)

    # -----------------
    # Geometry
    # -----------------
    @property
    def width(self):
        return self._image.width()

    @property
    def height(self):
        return self._image.height()

    @property
    def center(self):
        return (self.width / 2, self.height / 2)

    def image(self):
        # Host widgets paint from this; don't keep it across restores
        return self._image

    def pixel(self, x, y) -> QColor:
        return self._image.pixelColor(int(x), int(y))

    # -----------------
    # Snapshots
    # -----------------
    def clear(self, fill_color):
        self._image.fill(QColor(fill_color))

    def snapshot(self) -> RasterSnapshot:
        return RasterSnapshot(self._image.copy())

    def restore(self, snapshot: RasterSnapshot):
        if (snapshot.width, snapshot.height) != (self.width, self.height):
            raise SurfaceError(
                f"Snapshot is {snapshot.width}x{snapshot.height}, "
                f"surface is {self.width}x{self.height}"
            )
        # Copy again so painting never reaches the stored snapshot
        self._image = snapshot.image.copy()

    # -----------------
    # Drawing
    # -----------------
    @contextmanager
    def _pen(self, color, width):
        painter = QPainter(self._image)
        try:
            painter.setRenderHint(QPainter.RenderHint.Antialiasing)
            pen = QPen(QColor(color), width, Qt.PenStyle.SolidLine, Qt.PenCapStyle.RoundCap, Qt.PenJoinStyle.RoundJoin)
            painter.setPen(pen)
            painter.setBrush(Qt.BrushStyle.NoBrush)
            yield painter
        finally:
            painter.end()

    def draw_segment(self, start, end, color, width):
        with self._pen(color, width) as painter:
            painter.drawLine(QPointF(*start), QPointF(*end))

    def draw_rect(self, x, y, w, h, color, width):
        with self._pen(color, width) as painter:
            painter.drawRect(QRectF(x, y, w, h).normalized())

    def draw_ellipse(self, cx, cy, rx, ry, color, width):
        with self._pen(color, width) as painter:
            painter.drawEllipse(QPointF(cx, cy), abs(rx), abs(ry))
