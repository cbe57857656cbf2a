"""
Static tile board and the text overlays drawn on top of it
"""

from dataclasses import dataclass

from frogger.core.interfaces import DrawingSurface
from frogger.core.interfaces import ResourceProvider
from frogger.utils.config import GameConfig
from frogger.utils.config import game_config

WATER_BLOCK = "images/water-block.png"
STONE_BLOCK = "images/stone-block.png"
GRASS_BLOCK = "images/grass-block.png"
ENEMY_BUG = "images/enemy-bug.png"
CHAR_BOY = "images/char-boy.png"

# Image for each board row, top to bottom
ROW_IMAGES = [
    WATER_BLOCK,  # Top row is water
    STONE_BLOCK,  # Row 1 of 3 of stone
    STONE_BLOCK,  # Row 2 of 3 of stone
    STONE_BLOCK,  # Row 3 of 3 of stone
    GRASS_BLOCK,  # Row 1 of 2 of grass
    GRASS_BLOCK,  # Row 2 of 2 of grass
]

# Everything the game draws, loaded before the loop starts
GAME_IMAGES = [STONE_BLOCK, WATER_BLOCK, GRASS_BLOCK, ENEMY_BUG, CHAR_BOY]


@dataclass(frozen=True)
class OverlayLine:
    """One centred line of overlay text"""

    text: str
    font_size: int
    y_divisor: float  # baseline at surface height / y_divisor


NEW_GAME_OVERLAY = [
    OverlayLine("FEND Arcade Game", 40, 3),
    OverlayLine("Press Enter To Start", 20, 2.5),
    OverlayLine("Use the arrow keys to move", 16, 1.7),
    OverlayLine("Avoid the bugs to win the game!", 16, 1.5),
    OverlayLine("Good Luck!", 20, 1.2),
]

GAME_OVER_OVERLAY = [
    OverlayLine("CONGRATULATIONS!", 40, 3),
    OverlayLine("You won!", 40, 2.3),
    OverlayLine("Press Enter To Restart", 20, 2),
]


def row_image(row: int) -> str:
    """Image of a board row, rows past the table repeat the last image"""
    return ROW_IMAGES[min(row, len(ROW_IMAGES) - 1)]


def draw_board(
    surface: DrawingSurface, resources: ResourceProvider, config: GameConfig | None = None
) -> None:
    """Draws the tile grid, row by row"""
    config = config if config is not None else game_config
    for row in range(config.NUM_ROWS):
        image = resources.get(row_image(row))
        for col in range(config.NUM_COLS):
            surface.draw_image(image, col * config.TILE_WIDTH, row * config.TILE_HEIGHT)


def draw_overlay(
    surface: DrawingSurface, lines: list[OverlayLine], config: GameConfig | None = None
) -> None:
    """Draws overlay lines centred horizontally"""
    config = config if config is not None else game_config
    surface.set_fill_color(config.TEXT_COLOR)
    surface.set_text_align("center")
    for line in lines:
        surface.set_font(line.font_size, config.FONT_FAMILY)
        surface.fill_text(line.text, surface.width / 2, surface.height / line.y_divisor)
