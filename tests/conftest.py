"""
Shared fixtures: headless pygame, recording surface, manual scheduler
"""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "hide")

from typing import Any  # noqa: E402

import numpy as np  # noqa: E402
import pytest  # noqa: E402

from frogger.core.game_loop import GameContext  # noqa: E402
from frogger.core.game_loop import GameLoop  # noqa: E402
from frogger.core.input import Keyboard  # noqa: E402
from frogger.utils.config import GameConfig  # noqa: E402


class RecordingSurface:
    """Drawing surface that records every call"""

    def __init__(self, width: int = 505, height: int = 606):
        self.width = width
        self.height = height
        self.calls: list[tuple[Any, ...]] = []

    def clear(self, x, y, width, height):
        self.calls.append(("clear", x, y, width, height))

    def draw_image(self, image, x, y):
        self.calls.append(("draw_image", image, x, y))

    def set_font(self, size, family):
        self.calls.append(("set_font", size, family))

    def set_fill_color(self, color):
        self.calls.append(("set_fill_color", color))

    def set_text_align(self, align):
        self.calls.append(("set_text_align", align))

    def fill_text(self, text, x, y):
        self.calls.append(("fill_text", text, x, y))

    def names(self) -> list[str]:
        return [call[0] for call in self.calls]

    def texts(self) -> list[str]:
        return [call[1] for call in self.calls if call[0] == "fill_text"]

    def images(self) -> list[tuple[Any, float, float]]:
        return [call[1:] for call in self.calls if call[0] == "draw_image"]


class PathResources:
    """Resource provider returning the path itself as the image handle"""

    def get(self, path: str) -> str:
        return path


class ManualScheduler:
    """Frame scheduler driven by the test"""

    def __init__(self, start: float = 1000.0):
        self.time = start
        self.requests: list[Any] = []

    def request_frame(self, callback):
        self.requests.append(callback)

    def now(self) -> float:
        return self.time

    def advance(self, ms: float) -> None:
        self.time += ms

    def run_frame(self, ms: float = 16.0) -> None:
        """Advances the clock and runs the callbacks requested so far"""
        self.advance(ms)
        callbacks, self.requests = self.requests, []
        for callback in callbacks:
            callback(self.time)


@pytest.fixture
def config() -> GameConfig:
    return GameConfig()


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()


@pytest.fixture
def resources() -> PathResources:
    return PathResources()


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def keyboard() -> Keyboard:
    return Keyboard()


@pytest.fixture
def context(config) -> GameContext:
    return GameContext.create(config, np.random.default_rng(42))


@pytest.fixture
def game_loop(context, surface, resources, keyboard, scheduler, config) -> GameLoop:
    return GameLoop(context, surface, resources, keyboard, scheduler, config)
