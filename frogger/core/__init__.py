"""
Core module of the Frogger game
"""

from frogger.core.collision import CollisionDetector
from frogger.core.collision import CollisionReport
from frogger.core.collision import Hitbox
from frogger.core.entities import Direction
from frogger.core.entities import Enemy
from frogger.core.entities import Player
from frogger.core.entities import Vector2D
from frogger.core.game_loop import FrameClock
from frogger.core.game_loop import GameContext
from frogger.core.game_loop import GameLoop
from frogger.core.input import KeyEvent
from frogger.core.input import KeyEventType
from frogger.core.input import Keyboard
from frogger.core.phases import GamePhase
from frogger.core.phases import PhaseEvent
from frogger.core.phases import PhaseMachine

__all__ = [
    "CollisionDetector",
    "CollisionReport",
    "Direction",
    "Enemy",
    "FrameClock",
    "GameContext",
    "GameLoop",
    "GamePhase",
    "Hitbox",
    "KeyEvent",
    "KeyEventType",
    "Keyboard",
    "PhaseEvent",
    "PhaseMachine",
    "Player",
    "Vector2D",
]
