"""
Utility modules of the Frogger game
"""

from frogger.utils.config import GameConfig
from frogger.utils.config import game_config
from frogger.utils.config import game_config_tmp

__all__ = ["game_config", "game_config_tmp", "GameConfig"]
