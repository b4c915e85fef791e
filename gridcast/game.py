from __future__ import annotations
import logging
import pygame
from typing import Optional, Tuple

from .world import WallMap, load_world
from .player import PlayerPose
from .renderer import Renderer
from .lines import LineBatch
from .projector import project_view
from .debug_map import debug_map_segments
from .input_handler import InputHandler
from . import config

logger = logging.getLogger(__name__)


class Game:
    """Owns the world and the player and drives the update/draw frame loop."""

    def __init__(
        self,
        clock: Optional[pygame.time.Clock] = None,
        world_path: Optional[str] = None,
    ) -> None:
        config.validate_config()
        pygame.init()
        self.screen_width = config.SCREEN_WIDTH
        self.screen_height = config.SCREEN_HEIGHT
        self.screen = pygame.display.set_mode(
            (self.screen_width, self.screen_height),
            pygame.OPENGL | pygame.DOUBLEBUF | pygame.RESIZABLE,
        )
        pygame.display.set_caption("gridcast")
        # Clock for frame rate (injectable for testing)
        self.clock = clock or pygame.time.Clock()
        self.fps = config.FPS
        self.fov = config.FOV
        self.max_depth = config.RAYCAST_DEPTH
        self.debug_map = config.DEBUG_MAP_MODE
        # World and player are created once and live for the whole run
        self.walls: WallMap
        self.player: PlayerPose
        self.walls, self.player = load_world(world_path)
        self.renderer = Renderer(self.screen_width, self.screen_height)
        self.input = InputHandler()
        self.running = True

    def handle_events(self) -> None:
        """Process input events via InputHandler and apply quit/toggle/resize."""
        self.input.process_events()
        if self.input.should_quit():
            self.running = False
        if self.input.toggle_debug_map_pressed():
            self.debug_map = not self.debug_map
            logger.info("Debug map %s", "on" if self.debug_map else "off")
        size = self.input.resized_to()
        if size is not None:
            width, height = size
            # Minimised windows can report an empty size; keep the last one
            if width > 0 and height > 0:
                self.screen_width, self.screen_height = width, height
            else:
                logger.debug("Ignoring resize to %dx%d", width, height)

    def update(self, dt: float) -> None:
        """Move the player according to the keys held this frame."""
        self.player.update(self.input.active_intents(), dt)

    def viewport(self) -> Tuple[int, int]:
        """Current drawable size; the window may have been resized."""
        return self.screen_width, self.screen_height

    def frame_segments(self, width: int, height: int) -> LineBatch:
        """Build the line batch for one frame at the given viewport size."""
        batch = LineBatch()
        if self.debug_map:
            batch.extend(
                debug_map_segments(
                    self.player,
                    self.walls,
                    width,
                    height,
                    self.fov,
                    self.max_depth,
                )
            )
            return batch
        for wall in project_view(
            self.player, self.walls, width, height, self.fov, self.max_depth
        ):
            # Open sight line: nothing to draw in this column
            if wall is not None:
                batch.add_slice(wall)
        return batch

    def render(self) -> None:
        """Render the current frame and present it."""
        width, height = self.viewport()
        self.renderer.resize(width, height)
        self.renderer.draw(self.frame_segments(width, height))
        pygame.display.flip()

    def run(self) -> None:
        """Main loop: handle events, update, and render."""
        while self.running:
            dt = self.clock.tick(self.fps) / 1000.0
            self.handle_events()
            # Movement for this frame is complete before drawing starts
            self.update(dt)
            self.render()
        self.renderer.shutdown()
        pygame.quit()
