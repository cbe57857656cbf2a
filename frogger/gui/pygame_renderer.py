"""
PyGame renderer for the Frogger game
"""

import pygame

from frogger.utils.config import GameConfig
from frogger.utils.config import game_config


class PygameSurface:
    """Canvas-like drawing API on top of a pygame.Surface"""

    def __init__(self, target: pygame.Surface, background_color: tuple[int, int, int] = (255, 255, 255)):
        self.target = target
        self.width, self.height = target.get_size()
        self.background_color = background_color

        self.fill_color: tuple[int, int, int] = (0, 0, 0)
        self.text_align = "left"
        self.font_size = 10
        self.font_family = ""
        self._fonts: dict[tuple[str, int], pygame.font.Font] = {}

    def clear(self, x: float, y: float, width: float, height: float) -> None:
        self.target.fill(self.background_color, pygame.Rect(int(x), int(y), int(width), int(height)))

    def draw_image(self, image: pygame.Surface, x: float, y: float) -> None:
        self.target.blit(image, (int(x), int(y)))

    def set_font(self, size: int, family: str) -> None:
        self.font_size = size
        self.font_family = family

    def set_fill_color(self, color: tuple[int, int, int]) -> None:
        self.fill_color = color

    def set_text_align(self, align: str) -> None:
        if align not in ("left", "center", "right"):
            raise ValueError(f"Unknown text alignment: {align}")
        self.text_align = align

    def _font(self) -> pygame.font.Font:
        key = (self.font_family, self.font_size)
        if key not in self._fonts:
            if not pygame.font.get_init():
                pygame.font.init()
            # SysFont falls back to the default font when the family is missing
            self._fonts[key] = pygame.font.SysFont(self.font_family, self.font_size)
        return self._fonts[key]

    def fill_text(self, text: str, x: float, y: float) -> None:
        """Draws text with its baseline at y, like a canvas context"""
        font = self._font()
        text_surface = font.render(text, True, self.fill_color)
        text_rect = text_surface.get_rect()

        text_rect.top = int(y) - font.get_ascent()
        if self.text_align == "center":
            text_rect.centerx = int(x)
        elif self.text_align == "right":
            text_rect.right = int(x)
        else:
            text_rect.left = int(x)

        self.target.blit(text_surface, text_rect)


class PygameRenderer:
    """PyGame window hosting the game surface"""

    def __init__(self, config: GameConfig | None = None):
        """Initialize the PyGame renderer"""
        self.config = config if config is not None else game_config
        self.width = self.config.CANVAS_WIDTH
        self.height = self.config.CANVAS_HEIGHT

        # Initialize PyGame
        pygame.init()

        # Create the display, vsync is a request the driver may refuse
        try:
            self.screen = pygame.display.set_mode(
                (self.width, self.height), vsync=1 if self.config.VSYNC else 0
            )
        except pygame.error:
            self.screen = pygame.display.set_mode((self.width, self.height))
        pygame.display.set_caption("Frogger")

        self.surface = PygameSurface(self.screen)

        # Clock for controlling frame rate
        self.clock = pygame.time.Clock()

        self.text_color: tuple[int, int, int] = (255, 255, 255)
        self.font_small = pygame.font.Font(None, 24)

        # UI state
        self.show_fps = False

    def toggle_fps_display(self) -> None:
        self.show_fps = not self.show_fps

    def draw_fps(self) -> None:
        """Draw the frame rate counter in the top left corner"""
        if not self.show_fps:
            return
        fps_surface = self.font_small.render(f"FPS: {self.clock.get_fps():.0f}", True, self.text_color)
        self.screen.blit(fps_surface, (10, 10))

    def present(self) -> None:
        """Present the rendered frame"""
        self.draw_fps()
        pygame.display.flip()

    def update(self, fps: int | None = None) -> None:
        """Waits for the next frame slot"""
        self.clock.tick(fps or self.config.FPS)

    def cleanup(self) -> None:
        """Clean up renderer resources"""
        pygame.display.quit()
