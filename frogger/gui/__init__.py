"""
PyGame front end of the Frogger game
"""

from frogger.gui.frame_scheduler import DisplayFrameScheduler
from frogger.gui.game_app import FroggerApp
from frogger.gui.input_manager import InputManager
from frogger.gui.pygame_renderer import PygameRenderer
from frogger.gui.pygame_renderer import PygameSurface
from frogger.gui.resources import ResourceLoader

__all__ = [
    "DisplayFrameScheduler",
    "FroggerApp",
    "InputManager",
    "PygameRenderer",
    "PygameSurface",
    "ResourceLoader",
]
