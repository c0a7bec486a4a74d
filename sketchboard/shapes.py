import math
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple


class ShapeType(Enum):
    SQUARE = "square"
    CIRCLE = "circle"


@dataclass(eq=False)
class Shape:
    type: ShapeType
    anchor: Tuple[float, float]
    size: float

    def contains(self, point):
        # Strict: a point exactly `size` away is outside
        return math.dist(point, self.anchor) < self.size


class ShapeRegistry:
    """Finalized squares and circles, drawn over the raster on redraw."""

    def __init__(self):
        self._shapes: List[Shape] = []

    def __len__(self):
        return len(self._shapes)

    def __iter__(self):
        return iter(self._shapes)

    @property
    def shapes(self):
        return tuple(self._shapes)

    def add(self, shape: Shape):
        self._shapes.append(shape)
        return shape

    def hit_test(self, point) -> Optional[Shape]:
        # First match in insertion order wins
        for shape in self._shapes:
            if shape.contains(point):
                return shape
        return None

    def move_shape(self, shape: Shape, new_anchor):
        shape.anchor = (float(new_anchor[0]), float(new_anchor[1]))

    def render_all(self, buffer, color, width):
        """Draw every shape with the given (current) color and width."""
        for shape in self._shapes:
            x, y = shape.anchor
            if shape.type is ShapeType.SQUARE:
                buffer.draw_rect(x, y, shape.size, shape.size, color, width)
            elif shape.type is ShapeType.CIRCLE:
                r = shape.size / 2
                buffer.draw_ellipse(x + r, y + r, r, r, color, width)
