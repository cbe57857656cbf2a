"""
Game phases and the transition table between them
"""

import logging
from collections import defaultdict
from collections import deque
from collections.abc import Callable
from enum import Enum

logger = logging.getLogger(__name__)

PhaseHook = Callable[[], None]


class GamePhase(Enum):
    """Coarse mode of the game"""

    NEW_GAME = "new game"
    IN_GAME = "in game"
    GAME_OVER = "game over"


class PhaseEvent(Enum):
    """Inputs of the transition table"""

    START_PRESSED = "start_pressed"
    GOAL_REACHED = "goal_reached"


# (phase, event) -> next phase; pairs not listed are ignored
TRANSITIONS: dict[tuple[GamePhase, PhaseEvent], GamePhase] = {
    (GamePhase.NEW_GAME, PhaseEvent.START_PRESSED): GamePhase.IN_GAME,
    (GamePhase.IN_GAME, PhaseEvent.GOAL_REACHED): GamePhase.GAME_OVER,
    (GamePhase.GAME_OVER, PhaseEvent.START_PRESSED): GamePhase.IN_GAME,
}


class PhaseMachine:
    """
    Table driven finite-state machine for the game phase.

    Enter hooks run once when a phase is entered and exit hooks once when it
    is left, so side effects such as listener attachment are edge triggered
    instead of being repeated every frame.

    Events coming from input listeners are queued with post() and applied by
    process_pending() at the start of the next update. The loop's own
    conditions use fire() to transition immediately.
    """

    def __init__(
        self,
        initial: GamePhase = GamePhase.NEW_GAME,
        transitions: dict[tuple[GamePhase, PhaseEvent], GamePhase] | None = None,
    ):
        self._phase = initial
        self.transitions = dict(TRANSITIONS if transitions is None else transitions)
        self._enter_hooks: dict[GamePhase, list[PhaseHook]] = defaultdict(list)
        self._exit_hooks: dict[GamePhase, list[PhaseHook]] = defaultdict(list)
        self._pending: deque[PhaseEvent] = deque()
        self.started = False

    @property
    def phase(self) -> GamePhase:
        return self._phase

    def on_enter(self, phase: GamePhase, hook: PhaseHook) -> None:
        self._enter_hooks[phase].append(hook)

    def on_exit(self, phase: GamePhase, hook: PhaseHook) -> None:
        self._exit_hooks[phase].append(hook)

    def start(self) -> None:
        """Enters the initial phase"""
        if self.started:
            raise RuntimeError("Phase machine already started")
        self.started = True
        logger.debug("Entering initial phase %s", self._phase.value)
        self._run_hooks(self._enter_hooks[self._phase])

    def next_phase(self, event: PhaseEvent) -> GamePhase | None:
        """Phase the event would lead to from the current phase, if any"""
        return self.transitions.get((self._phase, event))

    def fire(self, event: PhaseEvent) -> bool:
        """
        Applies an event immediately

        Returns:
            bool: True if a transition happened, False if the event is not
            handled in the current phase
        """
        target = self.next_phase(event)
        if target is None:
            logger.debug("Ignoring %s in phase %s", event.value, self._phase.value)
            return False

        source = self._phase
        self._run_hooks(self._exit_hooks[source])
        self._phase = target
        self._run_hooks(self._enter_hooks[target])

        logger.info("Phase %s -> %s (%s)", source.value, target.value, event.value)
        return True

    def post(self, event: PhaseEvent) -> None:
        """Queues an event for the next process_pending() call"""
        self._pending.append(event)

    def process_pending(self) -> int:
        """Applies queued events in order and returns the number of transitions"""
        transitions = 0
        while self._pending:
            if self.fire(self._pending.popleft()):
                transitions += 1
        return transitions

    def pending_count(self) -> int:
        return len(self._pending)

    @staticmethod
    def _run_hooks(hooks: list[PhaseHook]) -> None:
        for hook in hooks:
            hook()
