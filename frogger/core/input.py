"""
Keyboard listener registry used by the game loop
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

import pygame


class KeyEventType(Enum):
    """Kinds of keyboard events"""

    KEY_DOWN = "keydown"
    KEY_UP = "keyup"


@dataclass(frozen=True)
class KeyEvent:
    """A single key press or release"""

    type: KeyEventType
    key: int

    @property
    def is_enter(self) -> bool:
        return self.key in (pygame.K_RETURN, pygame.K_KP_ENTER)


KeyListener = Callable[[KeyEvent], None]


class Keyboard:
    """
    Event target for keyboard listeners.

    Behaves like a document: a listener attached twice fires twice, and
    detaching a listener that is not attached does nothing. Callers decide
    when to attach, the registry only keeps the bookkeeping.
    """

    def __init__(self) -> None:
        self._listeners: dict[KeyEventType, list[KeyListener]] = {
            event_type: [] for event_type in KeyEventType
        }

    def attach(self, event_type: KeyEventType, listener: KeyListener) -> None:
        self._listeners[event_type].append(listener)

    def detach(self, event_type: KeyEventType, listener: KeyListener) -> None:
        listeners = self._listeners[event_type]
        if listener in listeners:
            listeners.remove(listener)

    def is_attached(self, event_type: KeyEventType, listener: KeyListener) -> bool:
        return listener in self._listeners[event_type]

    def listener_count(self, event_type: KeyEventType) -> int:
        return len(self._listeners[event_type])

    def dispatch(self, event: KeyEvent) -> None:
        """Calls every listener attached for the event type"""
        # Copy so listeners may detach themselves while being called
        for listener in list(self._listeners[event.type]):
            listener(event)
