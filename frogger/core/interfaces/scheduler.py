"""
Frame scheduler protocol - the host's animation frame primitive
"""

from collections.abc import Callable
from typing import Protocol

FrameCallback = Callable[[float], None]


class FrameScheduler(Protocol):
    """
    Protocol for frame scheduling backends.

    Implementations must run requested callbacks once, in step with the
    display refresh, passing the frame timestamp in milliseconds.
    """

    def request_frame(self, callback: FrameCallback) -> None:
        """Run callback once on the next displayed frame"""
        ...

    def now(self) -> float:
        """Current time in milliseconds, on the same clock as frame timestamps"""
        ...
