"""
Per-column projection: turns the player's view into vertical wall slices.

Screen coordinates are centred on the viewport with y pointing up, so a slice
spans [-height/2, +height/2] around the horizon.
"""

from __future__ import annotations
import math
from typing import Container, List, NamedTuple, Optional, Tuple, TYPE_CHECKING
from .config import RAYCAST_DEPTH, SHADE_FACTOR
from .raycaster import cast

if TYPE_CHECKING:
    from .player import PlayerPose

# Corrected distances are clamped to this to keep slice heights finite
MIN_DISTANCE = 1e-3


class WallSlice(NamedTuple):
    """One projected wall column."""

    column: int
    x: float
    half_height: float
    distance: float
    corrected_distance: float
    shade: float

    @property
    def height(self) -> float:
        return 2.0 * self.half_height

    @property
    def top(self) -> Tuple[float, float]:
        return (self.x, self.half_height)

    @property
    def bottom(self) -> Tuple[float, float]:
        return (self.x, -self.half_height)

    @property
    def color(self) -> Tuple[float, float, float]:
        return (self.shade, self.shade, self.shade)


def check_view(screen_width: float, screen_height: float, fov: float) -> None:
    """Raise ValueError for a viewport or field of view that cannot be projected."""
    if screen_width <= 0 or screen_height <= 0:
        raise ValueError(
            f"Viewport must have positive size, got {screen_width}x{screen_height}"
        )
    if not 0.0 < fov < math.pi:
        raise ValueError(f"Field of view must be in (0, pi), got {fov!r}")


def focal_length(screen_width: float, fov: float) -> float:
    """Distance from the eye to the projection plane, in pixels."""
    return screen_width / (2.0 * math.tan(fov / 2.0))


def column_angle(column: int, screen_width: float, fov: float) -> float:
    """View angle of a screen column relative to the facing direction."""
    return math.atan((column - screen_width / 2.0) / focal_length(screen_width, fov))


def ray_direction(angle: float, rotation: float) -> Tuple[float, float]:
    """Unit vector at `angle` from the facing direction `rotation`."""
    # Complex multiplication of the two unit vectors
    ca, sa = math.cos(angle), math.sin(angle)
    cr, sr = math.cos(rotation), math.sin(rotation)
    return (ca * cr - sa * sr, ca * sr + sa * cr)


def shade(distance: float) -> float:
    """Grey lightness for a wall at `distance`; saturates at 1.0 up close."""
    if distance <= 0.0:
        return 1.0
    return min(1.0, SHADE_FACTOR / distance)


def project_column(
    pose: PlayerPose,
    walls: Container[Tuple[int, int]],
    column: int,
    screen_width: float,
    screen_height: float,
    fov: float,
    max_depth: int = RAYCAST_DEPTH,
) -> Optional[WallSlice]:
    """
    Cast the ray for one screen column and project the hit into a wall slice.
    Returns None when the ray finds no wall within `max_depth` cells.
    """
    check_view(screen_width, screen_height, fov)
    angle = column_angle(column, screen_width, fov)
    direction = ray_direction(angle, pose.rotation)
    distance = cast(walls, pose.position, direction, max_depth)
    if distance is None:
        return None
    # Perpendicular distance to the projection plane removes the fisheye bulge
    corrected = max(distance * math.cos(angle), MIN_DISTANCE)
    height = screen_height / corrected
    return WallSlice(
        column=column,
        x=screen_width / 2.0 - column,
        half_height=height / 2.0,
        distance=distance,
        corrected_distance=corrected,
        shade=shade(corrected),
    )


def project_view(
    pose: PlayerPose,
    walls: Container[Tuple[int, int]],
    screen_width: int,
    screen_height: float,
    fov: float,
    max_depth: int = RAYCAST_DEPTH,
) -> List[Optional[WallSlice]]:
    """Project every column of the viewport; misses are None."""
    return [
        project_column(
            pose, walls, column, screen_width, screen_height, fov, max_depth
        )
        for column in range(int(screen_width))
    ]
