from __future__ import annotations
import enum
import math
from typing import Iterable, Tuple
from .config import PLAYER_SPEED, PLAYER_TURN_SPEED

TAU = 2.0 * math.pi


class Intent(enum.Enum):
    """Movement and turning requests gathered from the input state."""

    TURN_LEFT = "turn_left"
    TURN_RIGHT = "turn_right"
    MOVE_FORWARD = "move_forward"
    MOVE_BACKWARD = "move_backward"
    STRAFE_LEFT = "strafe_left"
    STRAFE_RIGHT = "strafe_right"


# Unit vectors in the player's local frame: forward is +x, left is +y
_LOCAL_DIRECTIONS = {
    Intent.MOVE_FORWARD: (1.0, 0.0),
    Intent.MOVE_BACKWARD: (-1.0, 0.0),
    Intent.STRAFE_LEFT: (0.0, 1.0),
    Intent.STRAFE_RIGHT: (0.0, -1.0),
}


def wrap_angle(angle: float) -> float:
    """Reduce an angle in radians into [0, 2*pi)."""
    wrapped = angle % TAU
    # Tiny negative angles round up to exactly TAU
    if wrapped >= TAU:
        wrapped = 0.0
    return wrapped


class PlayerPose:
    """Player position and facing, updated once per frame from input."""

    def __init__(
        self,
        x: float = 0.0,
        y: float = 0.0,
        rotation: float = 0.0,
        speed: float = PLAYER_SPEED,
        turn_speed: float = PLAYER_TURN_SPEED,
    ) -> None:
        """
        x, y: position in map cells (floats allowed).
        rotation: facing direction in radians, 0 = +x, counter-clockwise.
        speed: movement speed in cells per second.
        turn_speed: turning speed in radians per second.
        """
        if not (math.isfinite(x) and math.isfinite(y)):
            raise ValueError(f"Player position must be finite, got {(x, y)!r}")
        if not math.isfinite(rotation):
            raise ValueError(f"Player rotation must be finite, got {rotation!r}")
        self.x = float(x)
        self.y = float(y)
        self.rotation = wrap_angle(rotation)
        self.speed = speed
        self.turn_speed = turn_speed

    def __repr__(self) -> str:
        return (
            f"<PlayerPose x={self.x:.2f} y={self.y:.2f} "
            f"rotation={self.rotation:.3f}>"
        )

    @property
    def position(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def facing(self) -> Tuple[float, float]:
        """Return the unit vector the player is looking along."""
        return (math.cos(self.rotation), math.sin(self.rotation))

    def turn(self, intents: Iterable[Intent], dt: float) -> None:
        """Apply turn-left/turn-right intents, keeping rotation in [0, 2*pi)."""
        rotation = self.rotation
        for intent in intents:
            if intent is Intent.TURN_LEFT:
                rotation += self.turn_speed * dt
            elif intent is Intent.TURN_RIGHT:
                rotation -= self.turn_speed * dt
        self.rotation = wrap_angle(rotation)

    def move(self, intents: Iterable[Intent], dt: float) -> None:
        """Move along the normalized sum of the active directional intents."""
        lx = ly = 0.0
        for intent in intents:
            d = _LOCAL_DIRECTIONS.get(intent)
            if d is not None:
                lx += d[0]
                ly += d[1]
        length = math.hypot(lx, ly)
        if length == 0.0:
            return
        lx /= length
        ly /= length
        cos_r = math.cos(self.rotation)
        sin_r = math.sin(self.rotation)
        step = self.speed * dt
        self.x += (lx * cos_r - ly * sin_r) * step
        self.y += (lx * sin_r + ly * cos_r) * step

    def update(self, intents: Iterable[Intent], dt: float) -> None:
        """
        Advance the pose by one frame: turn first, then move relative to the
        new facing. `intents` is the set of currently active intents.
        """
        if dt < 0:
            raise ValueError(f"Frame time must be non-negative, got {dt!r}")
        active = set(intents)
        self.turn(active, dt)
        self.move(active, dt)
