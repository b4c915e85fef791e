import math

# Screen settings
SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600
FPS = 60
# Clear color for the view (RGB floats)
BACKGROUND_COLOR = (0.0, 0.0, 0.0)

# Player settings
# Movement speed in map units per second
PLAYER_SPEED = 3.0
# Turning speed in radians per second
PLAYER_TURN_SPEED = math.pi

# Raycasting settings
# Field of view angle (in radians)
FOV = math.pi / 2
# Number of cell tests before a ray gives up
RAYCAST_DEPTH = 100
# Walls nearer than this distance are drawn at full brightness
SHADE_FACTOR = 3.0

# Debug overlay
# Start in the top-down map view instead of the first-person view
DEBUG_MAP_MODE = False
# Pixels per map cell in the top-down view
DEBUG_MAP_SCALE = 100.0
# Length of the ray drawn for columns that hit nothing (map units)
DEBUG_MISS_LENGTH = 100.0

# World file: JSON definition of the wall cells and player start
WORLD_FILE = "worlds/default.json"

# Logging level name passed to logging.basicConfig
LOG_LEVEL = "INFO"


def validate_config() -> None:
    """
    Reject configuration values that would make the renderer degenerate.
    Raises ValueError naming the offending setting.
    """
    if not 0.0 < FOV < math.pi:
        raise ValueError(f"FOV must be in (0, pi), got {FOV!r}")
    if not isinstance(RAYCAST_DEPTH, int) or RAYCAST_DEPTH < 1:
        raise ValueError(
            f"RAYCAST_DEPTH must be an integer >= 1, got {RAYCAST_DEPTH!r}"
        )
    if SCREEN_WIDTH <= 0 or SCREEN_HEIGHT <= 0:
        raise ValueError(
            f"Screen size must be positive, got {SCREEN_WIDTH}x{SCREEN_HEIGHT}"
        )
    if FPS <= 0:
        raise ValueError(f"FPS must be positive, got {FPS!r}")
    if PLAYER_SPEED < 0 or PLAYER_TURN_SPEED < 0:
        raise ValueError("Player speeds must be non-negative")
    if SHADE_FACTOR <= 0:
        raise ValueError(f"SHADE_FACTOR must be positive, got {SHADE_FACTOR!r}")
