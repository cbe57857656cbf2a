"""
Frogger game loop: timing, phase handling, update and render dispatch
"""

import logging
from dataclasses import dataclass
from dataclasses import field

import numpy as np

from frogger.core.board import GAME_OVER_OVERLAY
from frogger.core.board import NEW_GAME_OVERLAY
from frogger.core.board import draw_board
from frogger.core.board import draw_overlay
from frogger.core.collision import CollisionDetector
from frogger.core.collision import CollisionReport
from frogger.core.entities import Direction
from frogger.core.entities import Enemy
from frogger.core.entities import Player
from frogger.core.entities import spawn_enemies
from frogger.core.input import KeyEvent
from frogger.core.input import KeyEventType
from frogger.core.input import Keyboard
from frogger.core.interfaces import DrawingSurface
from frogger.core.interfaces import FrameScheduler
from frogger.core.interfaces import ResourceProvider
from frogger.core.phases import GamePhase
from frogger.core.phases import PhaseEvent
from frogger.core.phases import PhaseMachine
from frogger.utils.config import GameConfig
from frogger.utils.config import game_config

logger = logging.getLogger(__name__)


@dataclass
class FrameClock:
    """Timestamp of the previous frame, in milliseconds"""

    last_timestamp: float = 0.0
    max_dt: float = 0.25

    def reset(self, now: float) -> None:
        self.last_timestamp = now

    def delta(self, now: float) -> float:
        """Seconds elapsed since the previous frame, clamped to [0, max_dt]"""
        dt = (now - self.last_timestamp) / 1000.0
        if dt > self.max_dt:
            # Window dragged, process suspended... do not jump the simulation
            logger.debug("Clamping frame delta %.3fs to %.3fs", dt, self.max_dt)
            return self.max_dt
        return max(dt, 0.0)

    def advance(self, now: float) -> None:
        self.last_timestamp = now


@dataclass
class GameContext:
    """Everything the game loop mutates from frame to frame"""

    player: Player
    enemies: list[Enemy]
    phases: PhaseMachine = field(default_factory=PhaseMachine)
    clock: FrameClock = field(default_factory=FrameClock)

    @classmethod
    def create(
        cls, config: GameConfig | None = None, rng: np.random.Generator | None = None
    ) -> "GameContext":
        """Creates a fresh game: player on the start tile, bugs in every lane"""
        config = config if config is not None else game_config
        return cls(
            player=Player(config),
            enemies=spawn_enemies(config, rng),
            clock=FrameClock(max_dt=config.MAX_FRAME_DT),
        )


class GameLoop:
    """
    Drives the game one frame at a time.

    Each frame computes the elapsed time, updates the simulation, renders the
    whole scene and asks the scheduler for the next frame. Keyboard listeners
    are attached and detached by the phase machine hooks, once per phase
    change:

    - new game / game over: Enter key-down starts (or restarts) the game
    - in game: key-up events move the player
    """

    def __init__(
        self,
        context: GameContext,
        surface: DrawingSurface,
        resources: ResourceProvider,
        keyboard: Keyboard,
        scheduler: FrameScheduler,
        config: GameConfig | None = None,
    ):
        self.context = context
        self.surface = surface
        self.resources = resources
        self.keyboard = keyboard
        self.scheduler = scheduler
        self.config = config if config is not None else game_config

        self.collision_detector = CollisionDetector.from_config(self.config)
        self.key_directions = self._build_key_directions()

        self.running = False
        self.frame_count = 0

        self._register_phase_hooks()

    @property
    def phase(self) -> GamePhase:
        return self.context.phases.phase

    @property
    def player(self) -> Player:
        return self.context.player

    @property
    def enemies(self) -> list[Enemy]:
        return self.context.enemies

    def _build_key_directions(self) -> dict[int, Direction]:
        """Maps arrow keys and the layout letter keys to directions"""
        layout = self.config.get_keyboard_layout()
        key_directions = {}
        for keys in (layout.letter_keys, layout.arrow_keys):
            for name, key in keys.items():
                key_directions[key] = Direction(name)
        return key_directions

    def _register_phase_hooks(self) -> None:
        phases = self.context.phases
        for phase in (GamePhase.NEW_GAME, GamePhase.GAME_OVER):
            phases.on_enter(phase, self._attach_start_listener)
            phases.on_exit(phase, self._detach_start_listener)
        phases.on_enter(GamePhase.IN_GAME, self._attach_movement_listener)
        phases.on_exit(GamePhase.IN_GAME, self._detach_movement_listener)

    def _attach_start_listener(self) -> None:
        self.keyboard.attach(KeyEventType.KEY_DOWN, self._on_start_key)

    def _detach_start_listener(self) -> None:
        self.keyboard.detach(KeyEventType.KEY_DOWN, self._on_start_key)

    def _attach_movement_listener(self) -> None:
        self.keyboard.attach(KeyEventType.KEY_UP, self._on_movement_key)

    def _detach_movement_listener(self) -> None:
        self.keyboard.detach(KeyEventType.KEY_UP, self._on_movement_key)

    def _on_start_key(self, event: KeyEvent) -> None:
        if event.is_enter:
            self.context.phases.post(PhaseEvent.START_PRESSED)

    def _on_movement_key(self, event: KeyEvent) -> None:
        self.player.handle_input(self.key_directions.get(event.key))

    def init(self) -> None:
        """Records the start time, enters the first phase and runs the first frame"""
        if self.running:
            raise RuntimeError("Game loop already started")
        self.running = True

        now = self.scheduler.now()
        self.context.clock.reset(now)
        if not self.context.phases.started:
            self.context.phases.start()

        logger.info("Game loop started in phase %s", self.phase.value)
        self.tick(now)

    def tick(self, timestamp: float | None = None) -> None:
        """
        Runs one frame and schedules the next one

        Args:
            timestamp: Frame time in milliseconds, as handed over by the
                scheduler. Read from the scheduler clock when omitted.
        """
        now = self.scheduler.now() if timestamp is None else timestamp
        dt = self.context.clock.delta(now)

        self.update(dt)
        self.render()

        self.context.clock.advance(now)
        self.frame_count += 1
        self.scheduler.request_frame(self.tick)

    def update(self, dt: float) -> None:
        """Applies pending input transitions, then advances the current phase"""
        self.context.phases.process_pending()

        if self.phase == GamePhase.IN_GAME:
            self.update_entities(dt)
            self.check_collisions()

    def update_entities(self, dt: float) -> None:
        """Moves every enemy, then applies the player's pending move"""
        for enemy in self.enemies:
            enemy.update(dt)
        self.player.update()

    def check_collisions(self) -> CollisionReport:
        """
        Resolves the player against the goal row and the enemies

        Reaching the goal wins the game even if a bug touches the player on
        the same frame. Both outcomes put the player back on the start tile.

        Returns:
            CollisionReport: What happened this frame
        """
        report = CollisionReport()
        if self.phase != GamePhase.IN_GAME:
            return report

        if self.player.reached_goal():
            report.reached_goal = True
            logger.debug("Player reached the goal at %s", self.player.position.to_tuple())
            self.player.reset()
            self.context.phases.fire(PhaseEvent.GOAL_REACHED)
            return report

        report.hit_enemies = self.collision_detector.check_player_enemies(
            self.player, self.enemies
        )
        if report.hit_enemies:
            logger.debug("Player hit by %d bug(s), back to start", len(report.hit_enemies))
            self.player.reset()

        return report

    def render(self) -> None:
        """Clears the surface and draws the current phase"""
        self.surface.clear(0, 0, self.surface.width, self.surface.height)
        draw_board(self.surface, self.resources, self.config)

        if self.phase == GamePhase.NEW_GAME:
            draw_overlay(self.surface, NEW_GAME_OVERLAY, self.config)
        elif self.phase == GamePhase.IN_GAME:
            self.render_entities()
        elif self.phase == GamePhase.GAME_OVER:
            draw_overlay(self.surface, GAME_OVER_OVERLAY, self.config)

    def render_entities(self) -> None:
        """Draws the enemies, then the player on top"""
        for enemy in self.enemies:
            enemy.render(self.surface, self.resources)
        self.player.render(self.surface, self.resources)
