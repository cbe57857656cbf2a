"""
Frogger game entities: player and enemy bugs
"""

from abc import ABC
from abc import abstractmethod
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Any

import numpy as np

from frogger.core.interfaces import DrawingSurface
from frogger.core.interfaces import ResourceProvider
from frogger.utils.config import GameConfig
from frogger.utils.config import game_config


class Direction(Enum):
    """Player movement directions"""

    LEFT = "left"
    UP = "up"
    RIGHT = "right"
    DOWN = "down"


@dataclass
class Vector2D:
    """Simple 2D vector for positions"""

    x: float
    y: float

    def __add__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Vector2D":
        return Vector2D(self.x * scalar, self.y * scalar)

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def copy(self) -> "Vector2D":
        return Vector2D(self.x, self.y)


class Entity(ABC):
    """Anything with a position and a sprite"""

    sprite: str = ""

    def __init__(self, x: float, y: float):
        self.position = Vector2D(x, y)

    @property
    def x(self) -> float:
        return self.position.x

    @x.setter
    def x(self, value: float) -> None:
        self.position.x = value

    @property
    def y(self) -> float:
        return self.position.y

    @y.setter
    def y(self, value: float) -> None:
        self.position.y = value

    @abstractmethod
    def update(self, *args: Any) -> None:
        """Advances the entity by one frame"""

    def render(self, surface: DrawingSurface, resources: ResourceProvider) -> None:
        """Draws the entity sprite at its position"""
        surface.draw_image(resources.get(self.sprite), self.position.x, self.position.y)


class Player(Entity):
    """The player character, moved one tile per key press"""

    sprite = "images/char-boy.png"

    def __init__(self, config: GameConfig | None = None):
        self.config = config if config is not None else game_config
        super().__init__(self.config.PLAYER_START_X, self.config.PLAYER_START_Y)
        self.pending_moves: deque[Direction] = deque()

        # Horizontal bounds: keep at least half a tile on the board
        half_tile = self.config.TILE_WIDTH / 2
        self.min_x = -half_tile
        self.max_x = self.config.CANVAS_WIDTH - half_tile
        self.max_y = self.config.PLAYER_START_Y

    def handle_input(self, direction: Direction | None) -> None:
        """Queues a move request, applied on the next update"""
        if direction is not None:
            self.pending_moves.append(direction)

    def update(self) -> None:  # type: ignore[override]
        """Applies every queued move, in order"""
        while self.pending_moves:
            self._step(self.pending_moves.popleft())

    def _step(self, direction: Direction) -> None:
        step_x = self.config.TILE_WIDTH
        step_y = self.config.TILE_HEIGHT

        if direction == Direction.LEFT and self.x - step_x >= self.min_x:
            self.x -= step_x
        elif direction == Direction.RIGHT and self.x + step_x <= self.max_x:
            self.x += step_x
        elif direction == Direction.UP:
            # Moving off the top row is how the game is won
            self.y -= step_y
        elif direction == Direction.DOWN and self.y + step_y <= self.max_y:
            self.y += step_y

    def reset(self) -> None:
        """Puts the player back on the start tile"""
        self.position = Vector2D(self.config.PLAYER_START_X, self.config.PLAYER_START_Y)
        self.pending_moves.clear()

    def reached_goal(self) -> bool:
        """True once the player stepped past the top row"""
        return self.y < 0


class Enemy(Entity):
    """Enemy bug crossing the board from left to right"""

    sprite = "images/enemy-bug.png"

    def __init__(
        self,
        x: float,
        y: float,
        speed: float,
        config: GameConfig | None = None,
        rng: np.random.Generator | None = None,
    ):
        super().__init__(x, y)
        self.speed = speed
        self.config = config if config is not None else game_config
        self.rng = rng if rng is not None else np.random.default_rng()

    def update(self, dt: float) -> None:  # type: ignore[override]
        """Moves the bug and wraps it around once it left the board"""
        self.x += self.speed * dt

        if self.x > self.config.CANVAS_WIDTH:
            self.x = -self.config.TILE_WIDTH
            self.speed = random_enemy_speed(self.rng, self.config)


def random_enemy_speed(rng: np.random.Generator, config: GameConfig | None = None) -> float:
    """Draws an enemy speed in the configured range"""
    config = config if config is not None else game_config
    return float(rng.uniform(config.ENEMY_MIN_SPEED, config.ENEMY_MAX_SPEED))


def spawn_enemies(
    config: GameConfig | None = None, rng: np.random.Generator | None = None
) -> list[Enemy]:
    """
    Creates the enemies for every lane

    Enemies sharing a lane are spread evenly across the board width so they
    do not start stacked on top of each other.

    Args:
        config: Game configuration (global config by default)
        rng: Random generator for the speeds (fresh generator by default)

    Returns:
        list[Enemy]: One entry per lane and slot
    """
    config = config if config is not None else game_config
    rng = rng if rng is not None else np.random.default_rng()

    enemies = []
    per_lane = config.ENEMIES_PER_LANE
    for lane_y in config.ENEMY_LANES:
        for slot in range(per_lane):
            x = -config.TILE_WIDTH + slot * (config.CANVAS_WIDTH / per_lane)
            enemies.append(Enemy(x, lane_y, random_enemy_speed(rng, config), config, rng))
    return enemies
