"""
Collision detection system for Frogger
"""

from dataclasses import dataclass
from dataclasses import field

from frogger.core.entities import Enemy
from frogger.core.entities import Entity
from frogger.core.entities import Player
from frogger.utils.config import GameConfig
from frogger.utils.config import game_config


@dataclass(frozen=True)
class Hitbox:
    """Size of the collidable rectangle anchored at an entity position"""

    width: float
    height: float

    def rect_at(self, x: float, y: float) -> tuple[float, float, float, float]:
        """Returns the collision rectangle properties (x, y, width, height)"""
        return (x, y, self.width, self.height)


@dataclass
class CollisionReport:
    """Outcome of one collision pass"""

    hit_enemies: list[Enemy] = field(default_factory=list)
    reached_goal: bool = False

    @property
    def player_reset(self) -> bool:
        return self.reached_goal or bool(self.hit_enemies)


def rects_overlap(
    rect_a: tuple[float, float, float, float], rect_b: tuple[float, float, float, float]
) -> bool:
    """Strict axis-aligned overlap test, touching edges do not count"""
    ax, ay, aw, ah = rect_a
    bx, by, bw, bh = rect_b
    return ax < bx + bw and ax + aw > bx and ay < by + bh and ay + ah > by


class CollisionDetector:
    """Hitbox based player/enemy collision checks"""

    def __init__(self, player_hitbox: Hitbox, enemy_hitbox: Hitbox):
        self.player_hitbox = player_hitbox
        self.enemy_hitbox = enemy_hitbox

    @classmethod
    def from_config(cls, config: GameConfig | None = None) -> "CollisionDetector":
        """Builds a detector with the hitbox sizes of a configuration"""
        config = config if config is not None else game_config
        return cls(
            Hitbox(config.PLAYER_HITBOX_WIDTH, config.PLAYER_HITBOX_HEIGHT),
            Hitbox(config.ENEMY_HITBOX_WIDTH, config.ENEMY_HITBOX_HEIGHT),
        )

    def player_rect(self, player: Entity) -> tuple[float, float, float, float]:
        return self.player_hitbox.rect_at(player.x, player.y)

    def enemy_rect(self, enemy: Entity) -> tuple[float, float, float, float]:
        return self.enemy_hitbox.rect_at(enemy.x, enemy.y)

    def check_player_enemy(self, player: Entity, enemy: Entity) -> bool:
        """Checks if the player touches one enemy"""
        return rects_overlap(self.player_rect(player), self.enemy_rect(enemy))

    def check_player_enemies(self, player: Player, enemies: list[Enemy]) -> list[Enemy]:
        """Returns every enemy touching the player"""
        return [enemy for enemy in enemies if self.check_player_enemy(player, enemy)]
