from __future__ import annotations
import os
import json
import math
import logging
from typing import (
    Iterable,
    Iterator,
    Optional,
    Tuple,
)
from .config import WORLD_FILE
from .player import PlayerPose

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]

# One-cell-thick loop of walls enclosing the origin
SAMPLE_WALLS: Tuple[Cell, ...] = (
    (-3, -3), (-2, -3), (-1, -3), (-1, -4), (0, -4), (1, -4),
    (2, -4), (2, -3), (2, -2), (3, -2), (3, -1), (3, 0),
    (3, 1), (3, 2), (2, 2), (1, 2), (0, 2), (-1, 2),
    (-2, 2), (-3, 2), (-3, 1), (-3, 0), (-3, -1), (-3, -2),
)


def _as_cell(item) -> Cell:
    if not (isinstance(item, (list, tuple)) and len(item) == 2):
        raise ValueError(f"Wall cell must be an (x, y) pair, got {item!r}")
    x, y = item
    for v in (x, y):
        # bool is an int subclass but never a meaningful coordinate
        if isinstance(v, bool) or not isinstance(v, int):
            raise ValueError(
                f"Wall cell coordinates must be integers, got {item!r}"
            )
    return (x, y)


class WallMap:
    """Immutable set of occupied grid cells."""

    def __init__(self, cells: Iterable[Cell] = ()) -> None:
        self._cells = frozenset(_as_cell(c) for c in cells)

    def contains(self, cell: Cell) -> bool:
        """Return True if the unit square at `cell` is a wall."""
        return cell in self._cells

    def __contains__(self, cell: object) -> bool:
        return cell in self._cells

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(sorted(self._cells))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WallMap):
            return NotImplemented
        return self._cells == other._cells

    def __hash__(self) -> int:
        return hash(self._cells)

    def __repr__(self) -> str:
        return f"<WallMap cells={len(self._cells)}>"

    def bounds(self) -> Optional[Tuple[int, int, int, int]]:
        """Return (min_x, min_y, max_x, max_y) over all cells, or None if empty."""
        if not self._cells:
            return None
        xs = [c[0] for c in self._cells]
        ys = [c[1] for c in self._cells]
        return (min(xs), min(ys), max(xs), max(ys))

    @classmethod
    def from_json(cls, path: str) -> WallMap:
        """Load the "walls" list of a world file."""
        return load_world(path)[0]


def default_world_path() -> str:
    return os.path.join(os.path.dirname(__file__), WORLD_FILE)


def load_world(path: Optional[str] = None) -> Tuple[WallMap, PlayerPose]:
    """
    Load the wall cells and the player's starting pose from a JSON world file.
    The file looks like:
        {"walls": [[x, y], ...], "player": {"pos": [x, y], "angle": deg}}
    "player" is optional; the player then starts at the origin facing +x.
    Raises RuntimeError if the file is missing or malformed.
    """
    world_path = path or default_world_path()
    try:
        with open(world_path, "r") as f:
            data = json.load(f)
        walls = WallMap(data.get("walls", []))
        x, y, angle = 0.0, 0.0, 0.0
        pl = data.get("player")
        if isinstance(pl, dict):
            pos = pl.get("pos")
            if pos is not None:
                if not (isinstance(pos, (list, tuple)) and len(pos) == 2):
                    raise ValueError(f"player pos must be [x, y], got {pos!r}")
                x, y = float(pos[0]), float(pos[1])
            # Angle stored in degrees for readability
            angle = math.radians(float(pl.get("angle", 0.0)))
        pose = PlayerPose(x=x, y=y, rotation=angle)
    except Exception as e:
        logger.error("Failed to load world from %s: %s", world_path, e)
        raise RuntimeError(f"Failed to load world map from {world_path}: {e}")
    logger.debug(
        "Loaded %d wall cells from %s, player at (%.2f, %.2f)",
        len(walls),
        world_path,
        pose.x,
        pose.y,
    )
    return walls, pose
