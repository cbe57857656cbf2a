"""
Drawing surface protocol - defines what the game loop needs from a 2D canvas
"""

from typing import Any, Protocol


class DrawingSurface(Protocol):
    """
    Protocol for 2D drawing surfaces.

    Mirrors the small part of a canvas 2D context the game uses, so the loop
    can draw to a pygame window, an off-screen surface or a test recorder.
    """

    width: int
    height: int

    def clear(self, x: float, y: float, width: float, height: float) -> None:
        """Clear a rectangular region to transparent/background"""
        ...

    def draw_image(self, image: Any, x: float, y: float) -> None:
        """
        Draw an image with its top-left corner at (x, y).

        Args:
            image: Image handle returned by the resource loader
            x: Destination x coordinate
            y: Destination y coordinate
        """
        ...

    def set_font(self, size: int, family: str) -> None:
        """Select the font used by subsequent fill_text calls"""
        ...

    def set_fill_color(self, color: tuple[int, int, int]) -> None:
        """Select the color used by subsequent fill_text calls"""
        ...

    def set_text_align(self, align: str) -> None:
        """Select horizontal text alignment: "left", "center" or "right" """
        ...

    def fill_text(self, text: str, x: float, y: float) -> None:
        """
        Draw text using the current font, color and alignment.

        Args:
            text: Text to draw
            x: Anchor x coordinate (meaning depends on alignment)
            y: Baseline y coordinate
        """
        ...
