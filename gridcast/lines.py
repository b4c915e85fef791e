"""
Line segments queued for drawing, independent of the GL backend.
"""

from __future__ import annotations
from typing import Iterable, Iterator, List, NamedTuple, Optional, Tuple

import numpy as np

from .projector import WallSlice

Point = Tuple[float, float]
Color = Tuple[float, float, float]

# Floats per vertex: position (x, y, z) + colour (r, g, b)
VERTEX_SIZE = 6


class Segment(NamedTuple):
    """A line in screen coordinates centred on the viewport, y up."""

    start: Point
    end: Point
    color: Color


class LineBatch:
    """Segments queued for one frame, in any order."""

    def __init__(self, segments: Optional[Iterable[Segment]] = None) -> None:
        self.segments: List[Segment] = list(segments or [])

    def __len__(self) -> int:
        return len(self.segments)

    def __iter__(self) -> Iterator[Segment]:
        return iter(self.segments)

    def add(self, start: Point, end: Point, color: Color) -> None:
        self.segments.append(Segment(start, end, color))

    def extend(self, segments: Iterable[Segment]) -> None:
        self.segments.extend(segments)

    def add_slice(self, wall: WallSlice) -> None:
        """Queue the vertical line for a projected wall column."""
        self.add(wall.bottom, wall.top, wall.color)

    def to_vertices(self, width: float, height: float) -> np.ndarray:
        """
        Pack the segments into a (2 * n, 6) float32 array of
        [x, y, z, r, g, b] rows in normalized device coordinates.
        """
        if not self.segments:
            return np.zeros((0, VERTEX_SIZE), dtype=np.float32)
        data = np.array(
            [
                (*point, *seg.color)
                for seg in self.segments
                for point in (seg.start, seg.end)
            ],
            dtype=np.float32,
        )
        verts = np.zeros((len(data), VERTEX_SIZE), dtype=np.float32)
        verts[:, 0] = data[:, 0] / (width / 2.0)
        verts[:, 1] = data[:, 1] / (height / 2.0)
        verts[:, 3:6] = data[:, 2:5]
        return verts
