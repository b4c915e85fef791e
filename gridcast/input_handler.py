"""
Input handling abstraction to decouple Pygame input from the player update.
"""

from __future__ import annotations
import pygame
from typing import Optional, Sequence, Set, Tuple

from .player import Intent

# Key bindings: arrows turn, WASD moves
KEY_BINDINGS = (
    (pygame.K_LEFT, Intent.TURN_LEFT),
    (pygame.K_RIGHT, Intent.TURN_RIGHT),
    (pygame.K_w, Intent.MOVE_FORWARD),
    (pygame.K_s, Intent.MOVE_BACKWARD),
    (pygame.K_a, Intent.STRAFE_LEFT),
    (pygame.K_d, Intent.STRAFE_RIGHT),
)


def key_intents(keys: Sequence[bool]) -> Set[Intent]:
    """Map a pygame key-state sequence to the set of active intents."""
    return {intent for key, intent in KEY_BINDINGS if keys[key]}


class InputHandler:
    """
    Gathers input state once per frame: quit and debug-toggle requests from
    the event queue, window resizes, and the held movement keys.
    """

    def __init__(self) -> None:
        self._quit = False
        # Toggle top-down map view (Tab)
        self._toggle_debug_map = False
        self._resize: Optional[Tuple[int, int]] = None
        self._keys: Sequence[bool] = ()

    def process_events(self) -> None:
        """
        Poll Pygame events, update the per-frame flags, and capture key states.
        """
        self._quit = False
        self._toggle_debug_map = False
        self._resize = None
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._quit = True
            elif event.type == pygame.KEYDOWN:
                if event.key in (pygame.K_x, pygame.K_ESCAPE):
                    self._quit = True
                elif event.key == pygame.K_TAB:
                    self._toggle_debug_map = True
            elif event.type == pygame.VIDEORESIZE:
                self._resize = (event.w, event.h)
        self._keys = pygame.key.get_pressed()

    def should_quit(self) -> bool:
        """Return True if a quit command was issued this frame."""
        return self._quit

    def toggle_debug_map_pressed(self) -> bool:
        """Return True if Tab was pressed this frame."""
        return self._toggle_debug_map

    def resized_to(self) -> Optional[Tuple[int, int]]:
        """New window size if the window was resized this frame."""
        return self._resize

    def active_intents(self) -> Set[Intent]:
        """Movement and turn intents for the keys currently held."""
        if not self._keys:
            return set()
        return key_intents(self._keys)
