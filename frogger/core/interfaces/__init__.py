"""
Protocols for the collaborators of the game loop
"""

from frogger.core.interfaces.resources import ResourceProvider
from frogger.core.interfaces.scheduler import FrameCallback
from frogger.core.interfaces.scheduler import FrameScheduler
from frogger.core.interfaces.surface import DrawingSurface

__all__ = ["DrawingSurface", "FrameCallback", "FrameScheduler", "ResourceProvider"]
