"""
Top-down diagnostic view: the wall grid, the player marker and every column's
ray, drawn from the same cast() results the first-person view uses.
"""

from __future__ import annotations
import math
from typing import List, Tuple, TYPE_CHECKING
from .config import DEBUG_MAP_SCALE, DEBUG_MISS_LENGTH, RAYCAST_DEPTH
from .lines import Color, Segment
from .projector import check_view, column_angle, ray_direction
from .raycaster import Ray, cast_ray, hit_point

if TYPE_CHECKING:
    from .player import PlayerPose
    from .world import WallMap

AXIS_COLOR: Color = (0.5, 0.5, 0.5)
WALL_COLOR: Color = (1.0, 1.0, 1.0)
HIT_COLOR: Color = (0.0, 1.0, 0.0)
MISS_COLOR: Color = (1.0, 0.0, 0.0)
# Player marker corner colours: nose, left tail, right tail
MARKER_COLORS: Tuple[Color, Color, Color] = (
    (0.0, 0.0, 1.0),
    (1.0, 0.0, 0.0),
    (0.0, 1.0, 0.0),
)


def _scaled(p: Tuple[float, float], scale: float) -> Tuple[float, float]:
    return (p[0] * scale, p[1] * scale)


def axis_segments(scale: float = DEBUG_MAP_SCALE) -> List[Segment]:
    """Arrows along +x and +y from the world origin, one cell long."""
    head = scale / 8.0
    return [
        Segment((0.0, 0.0), (scale, 0.0), AXIS_COLOR),
        Segment((scale, 0.0), (scale - head, head / 2.0), AXIS_COLOR),
        Segment((scale, 0.0), (scale - head, -head / 2.0), AXIS_COLOR),
        Segment((0.0, 0.0), (0.0, scale), AXIS_COLOR),
        Segment((0.0, scale), (head / 2.0, scale - head), AXIS_COLOR),
        Segment((0.0, scale), (-head / 2.0, scale - head), AXIS_COLOR),
    ]


def player_marker(pose: PlayerPose, scale: float = DEBUG_MAP_SCALE) -> List[Segment]:
    """Triangle pointing along the player's facing."""
    px, py = _scaled(pose.position, scale)
    fx, fy = pose.facing()
    # Left of facing
    lx, ly = -fy, fx
    nose = (px + fx * scale / 3.0, py + fy * scale / 3.0)
    back_x = px - fx * scale / 6.0
    back_y = py - fy * scale / 6.0
    left = (back_x + lx * scale / 6.0, back_y + ly * scale / 6.0)
    right = (back_x - lx * scale / 6.0, back_y - ly * scale / 6.0)
    corners = (nose, left, right)
    return [
        Segment(corners[i], corners[(i + 1) % 3], MARKER_COLORS[i])
        for i in range(3)
    ]


def wall_outlines(walls: WallMap, scale: float = DEBUG_MAP_SCALE) -> List[Segment]:
    """Four edges per wall cell."""
    segments = []
    for cx, cy in walls:
        x0, y0 = cx * scale, cy * scale
        x1, y1 = x0 + scale, y0 + scale
        segments.extend(
            [
                Segment((x0, y0), (x1, y0), WALL_COLOR),
                Segment((x1, y0), (x1, y1), WALL_COLOR),
                Segment((x1, y1), (x0, y1), WALL_COLOR),
                Segment((x0, y1), (x0, y0), WALL_COLOR),
            ]
        )
    return segments


def ray_segments(
    pose: PlayerPose,
    walls: WallMap,
    screen_width: int,
    fov: float,
    max_depth: int = RAYCAST_DEPTH,
    scale: float = DEBUG_MAP_SCALE,
) -> List[Segment]:
    """
    One line per screen column: green up to the wall it hits, or a long red
    line when the ray finds nothing.
    """
    segments = []
    start = _scaled(pose.position, scale)
    for column in range(int(screen_width)):
        angle = column_angle(column, screen_width, fov)
        ray = Ray(pose.position, ray_direction(angle, pose.rotation))
        distance = cast_ray(walls, ray, max_depth)
        if distance is not None:
            end = hit_point(ray, distance)
            segments.append(Segment(start, _scaled(end, scale), HIT_COLOR))
        else:
            end = hit_point(ray, DEBUG_MISS_LENGTH)
            segments.append(Segment(start, _scaled(end, scale), MISS_COLOR))
    return segments


def debug_map_segments(
    pose: PlayerPose,
    walls: WallMap,
    screen_width: int,
    screen_height: float,
    fov: float,
    max_depth: int = RAYCAST_DEPTH,
    scale: float = DEBUG_MAP_SCALE,
) -> List[Segment]:
    """Everything the top-down view draws for one frame."""
    check_view(screen_width, screen_height, fov)
    if scale <= 0 or not math.isfinite(scale):
        raise ValueError(f"Map scale must be positive, got {scale!r}")
    return (
        axis_segments(scale)
        + player_marker(pose, scale)
        + wall_outlines(walls, scale)
        + ray_segments(pose, walls, screen_width, fov, max_depth, scale)
    )
