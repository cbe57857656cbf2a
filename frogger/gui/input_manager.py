"""
Keyboard input handling for the Frogger window
"""

import pygame

from frogger.core.input import KeyEvent
from frogger.core.input import KeyEventType
from frogger.core.input import Keyboard

PYGAME_KEY_EVENTS = {
    pygame.KEYDOWN: KeyEventType.KEY_DOWN,
    pygame.KEYUP: KeyEventType.KEY_UP,
}


class InputManager:
    """Routes pygame events to the game keyboard"""

    def __init__(self, keyboard: Keyboard) -> None:
        self.keyboard = keyboard

    def handle_event(self, event: pygame.event.Event) -> str | None:
        """
        Handle pygame events

        Returns:
            String indicating application actions (quit, toggle_fps) or None
        """
        if event.type == pygame.QUIT:
            return "quit"

        if event.type == pygame.KEYDOWN:
            # Application keys never reach the game
            if event.key == pygame.K_ESCAPE:
                return "quit"
            elif event.key == pygame.K_F2:
                return "toggle_fps"

        event_type = PYGAME_KEY_EVENTS.get(event.type)
        if event_type is not None:
            self.keyboard.dispatch(KeyEvent(event_type, event.key))

        return None
