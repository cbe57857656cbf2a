"""
Display-synchronised frame scheduler
"""

import pygame

from frogger.core.interfaces import FrameCallback


class DisplayFrameScheduler:
    """
    requestAnimationFrame for a pygame main loop.

    Callbacks requested during a frame run once, on the next call to
    run_pending(), which the application makes once per presented frame.
    """

    def __init__(self) -> None:
        self._callbacks: list[FrameCallback] = []

    def request_frame(self, callback: FrameCallback) -> None:
        self._callbacks.append(callback)

    def now(self) -> float:
        return float(pygame.time.get_ticks())

    def pending_count(self) -> int:
        return len(self._callbacks)

    def run_pending(self) -> int:
        """
        Runs the callbacks requested so far with this frame's timestamp

        Callbacks requested while running are kept for the next frame.

        Returns:
            int: Number of callbacks run
        """
        callbacks, self._callbacks = self._callbacks, []
        timestamp = self.now()
        for callback in callbacks:
            callback(timestamp)
        return len(callbacks)
