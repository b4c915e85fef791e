"""
Grid ray casting: walks a ray from cell boundary to cell boundary (a digital
differential analyzer) and reports the distance to the first wall cell.
"""

from __future__ import annotations
import math
from typing import Container, NamedTuple, Optional, Tuple
from .config import RAYCAST_DEPTH

Vec2 = Tuple[float, float]


class Ray(NamedTuple):
    origin: Vec2
    direction: Vec2


def _sign(v: float) -> int:
    return 1 if v > 0 else -1


def _check_ray(origin: Vec2, direction: Vec2, max_depth: int) -> None:
    if not all(math.isfinite(v) for v in (*origin, *direction)):
        raise ValueError(
            f"Ray origin and direction must be finite, got {origin!r}, {direction!r}"
        )
    if direction[0] == 0.0 and direction[1] == 0.0:
        raise ValueError("Ray direction must be a non-zero vector")
    if isinstance(max_depth, bool) or not isinstance(max_depth, int) or max_depth < 1:
        raise ValueError(f"max_depth must be an integer >= 1, got {max_depth!r}")


def _cast_axis_aligned(
    walls: Container[Tuple[int, int]],
    origin: Vec2,
    direction: Vec2,
    max_depth: int,
) -> Optional[float]:
    """Cast a ray parallel to one of the grid axes."""
    cx = math.floor(origin[0])
    cy = math.floor(origin[1])
    if direction[1] == 0.0:
        step_x, step_y = _sign(direction[0]), 0
        frac = origin[0] - cx
        negative = direction[0] < 0
    else:
        step_x, step_y = 0, _sign(direction[1])
        frac = origin[1] - cy
        negative = direction[1] < 0
    # Distance to the first boundary, then one full cell per step
    distance = frac if negative else 1.0 - frac
    for _ in range(max_depth):
        cx += step_x
        cy += step_y
        if (cx, cy) in walls:
            return distance
        distance += 1.0
    return None


def cast(
    walls: Container[Tuple[int, int]],
    origin: Vec2,
    direction: Vec2,
    max_depth: int = RAYCAST_DEPTH,
) -> Optional[float]:
    """
    Return the distance along `direction` from `origin` to the first wall cell,
    or None if no wall is found within `max_depth` cell steps.

    walls: any container answering `(cx, cy) in walls` (e.g. a WallMap).
    origin: ray start in continuous grid units.
    direction: non-zero vector. The general case measures distance in units
        of its length, while a ray parallel to an axis ignores the magnitude
        and counts whole cells. Only unit vectors give cell distances that
        agree between the two cases.
    max_depth: number of cells entered (and tested) before giving up. The cell
        containing the origin is never tested.

    When the next x boundary and the next y boundary are crossed at exactly the
    same distance (a ray through a grid corner), the ray steps along y first.
    """
    _check_ray(origin, direction, max_depth)
    dx, dy = direction
    if dx == 0.0 or dy == 0.0:
        return _cast_axis_aligned(walls, origin, direction, max_depth)

    start_x = math.floor(origin[0])
    start_y = math.floor(origin[1])
    frac_x = origin[0] - start_x
    frac_y = origin[1] - start_y
    step_x = _sign(dx)
    step_y = _sign(dy)

    def x_intercept(ix: int) -> float:
        # Distance to the boundary `ix` cells away from the start cell's origin
        a = ix - frac_x
        if dx < 0:
            a += 1.0
        return a / dx

    def y_intercept(iy: int) -> float:
        a = iy - frac_y
        if dy < 0:
            a += 1.0
        return a / dy

    cx, cy = start_x, start_y
    for _ in range(max_depth):
        x_dist = x_intercept(cx - start_x + step_x)
        y_dist = y_intercept(cy - start_y + step_y)
        if x_dist < y_dist:
            cx += step_x
            distance = x_dist
        else:
            cy += step_y
            distance = y_dist
        if (cx, cy) in walls:
            return distance
    return None


def cast_ray(
    walls: Container[Tuple[int, int]],
    ray: Ray,
    max_depth: int = RAYCAST_DEPTH,
) -> Optional[float]:
    """Cast a Ray value; see cast()."""
    return cast(walls, ray.origin, ray.direction, max_depth)


def hit_point(ray: Ray, distance: float) -> Vec2:
    """Return the point `distance` units along the ray."""
    return (
        ray.origin[0] + ray.direction[0] * distance,
        ray.origin[1] + ray.direction[1] * distance,
    )
