"""
Image loader with ready callbacks
"""

import logging
from collections.abc import Callable
from collections.abc import Iterable
from pathlib import Path

import pygame

from frogger.gui.sprites import SPRITE_FACTORIES

logger = logging.getLogger(__name__)

ReadyCallback = Callable[[], None]


class ResourceLoader:
    """
    Loads and caches the game images.

    Usage mirrors a browser resource cache: load() the paths, register
    on_ready() callbacks, then get() images once loaded. Paths are resolved
    against the assets directory; the built-in sprites stand in for known
    game images that are missing on disk.
    """

    def __init__(
        self,
        assets_dir: str | Path = ".",
        fallbacks: dict[str, Callable[[], pygame.Surface]] | None = None,
    ):
        self.assets_dir = Path(assets_dir)
        self.fallbacks = SPRITE_FACTORIES if fallbacks is None else fallbacks
        self._cache: dict[str, pygame.Surface] = {}
        self._requested: set[str] = set()
        self._ready_callbacks: list[ReadyCallback] = []

    def load(self, paths: Iterable[str]) -> None:
        """Loads every path, then notifies the ready callbacks"""
        for path in paths:
            self._requested.add(path)
            if path not in self._cache:
                self._cache[path] = self._load_image(path)

        if self.is_ready():
            self._notify_ready()

    def _load_image(self, path: str) -> pygame.Surface:
        file_path = self.assets_dir / path
        if file_path.exists():
            image = pygame.image.load(str(file_path))
            logger.debug("Loaded %s", file_path)
        elif path in self.fallbacks:
            image = self.fallbacks[path]()
            logger.debug("Using built-in sprite for %s", path)
        else:
            raise FileNotFoundError(f"Image not found: {file_path}")

        # convert_alpha needs a display mode, skip it when running headless
        if pygame.display.get_init() and pygame.display.get_surface() is not None:
            image = image.convert_alpha()
        return image

    def is_ready(self) -> bool:
        """True when every requested path is loaded"""
        return all(path in self._cache for path in self._requested)

    def on_ready(self, callback: ReadyCallback) -> None:
        """Runs callback once every requested image is loaded"""
        if self._requested and self.is_ready():
            callback()
        else:
            self._ready_callbacks.append(callback)

    def _notify_ready(self) -> None:
        callbacks, self._ready_callbacks = self._ready_callbacks, []
        for callback in callbacks:
            callback()

    def get(self, path: str) -> pygame.Surface:
        """Returns a loaded image"""
        if path not in self._cache:
            raise KeyError(f"Image not loaded: {path}")
        return self._cache[path]
