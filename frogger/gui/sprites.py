"""
Built-in placeholder sprites, used when an image file is not shipped
"""

from collections.abc import Callable

import pygame

from frogger.core.board import CHAR_BOY
from frogger.core.board import ENEMY_BUG
from frogger.core.board import GRASS_BLOCK
from frogger.core.board import STONE_BLOCK
from frogger.core.board import WATER_BLOCK

# Same footprint as the PNG tiles: 101x171 with a transparent top, rows overlap vertically
SPRITE_SIZE = (101, 171)
BLOCK_TOP = 50
BLOCK_FACE_HEIGHT = 83
BLOCK_SIDE_HEIGHT = 38


def _blank() -> pygame.Surface:
    return pygame.Surface(SPRITE_SIZE, pygame.SRCALPHA)


def _block(top_color: tuple[int, int, int], side_color: tuple[int, int, int]) -> pygame.Surface:
    surface = _blank()
    width = SPRITE_SIZE[0]
    pygame.draw.rect(
        surface, side_color, (0, BLOCK_TOP + BLOCK_FACE_HEIGHT, width, BLOCK_SIDE_HEIGHT)
    )
    pygame.draw.rect(surface, top_color, (0, BLOCK_TOP, width, BLOCK_FACE_HEIGHT))
    return surface


def water_block() -> pygame.Surface:
    return _block((64, 128, 255), (40, 80, 200))


def stone_block() -> pygame.Surface:
    return _block((150, 150, 150), (100, 100, 100))


def grass_block() -> pygame.Surface:
    return _block((90, 200, 90), (60, 140, 60))


def enemy_bug() -> pygame.Surface:
    surface = _blank()
    pygame.draw.ellipse(surface, (200, 30, 30), (5, 80, 90, 60))
    pygame.draw.circle(surface, (60, 0, 0), (85, 110), 14)
    pygame.draw.circle(surface, (255, 255, 255), (90, 104), 4)
    return surface


def char_boy() -> pygame.Surface:
    surface = _blank()
    pygame.draw.ellipse(surface, (250, 210, 160), (25, 60, 51, 51))
    pygame.draw.rect(surface, (30, 90, 200), (33, 105, 35, 35), border_radius=6)
    pygame.draw.circle(surface, (0, 0, 0), (42, 83), 4)
    pygame.draw.circle(surface, (0, 0, 0), (59, 83), 4)
    return surface


SPRITE_FACTORIES: dict[str, Callable[[], pygame.Surface]] = {
    WATER_BLOCK: water_block,
    STONE_BLOCK: stone_block,
    GRASS_BLOCK: grass_block,
    ENEMY_BUG: enemy_bug,
    CHAR_BOY: char_boy,
}
