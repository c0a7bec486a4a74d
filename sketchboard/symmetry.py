import math
from typing import List, NamedTuple, Tuple

Point = Tuple[float, float]


class Segment(NamedTuple):
    start: Point
    end: Point


def _rotate(point, center, angle):
    cx, cy = center
    dx, dy = point[0] - cx, point[1] - cy
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    return (cx + dx * cos_a - dy * sin_a, cy + dx * sin_a + dy * cos_a)


def _mirror(point, center):
    cx, _ = center
    return (cx - (point[0] - cx), point[1])


class SymmetryRenderer:
    """Replicates one stroke segment around the buffer center.

    Rotation i of N turns both endpoints by i * 2pi/N. Mirror mode adds the
    horizontally reflected segment for every rotation, right after the
    primary one. N == 1 without mirror is just the segment itself.
    """

    def replicate(self, start: Point, end: Point, count: int, mirror: bool, center: Point) -> List[Segment]:
        count = max(1, int(count))
        step = (math.pi * 2) / count
        segments = []

        for i in range(count):
            angle = step * i
            if i == 0:
                segments.append(Segment(tuple(start), tuple(end)))
            else:
                segments.append(Segment(_rotate(start, center, angle), _rotate(end, center, angle)))

            if mirror:
                segments.append(Segment(
                    _rotate(_mirror(start, center), center, angle),
                    _rotate(_mirror(end, center), center, angle),
                ))

        return segments

    def stroke(self, buffer, start, end, tool_state, color) -> List[Segment]:
        segments = self.replicate(start, end, tool_state.symmetry_count, tool_state.mirror_mode, buffer.center)
        for seg in segments:
            buffer.draw_segment(seg.start, seg.end, color, tool_state.line_width)
        return segments
