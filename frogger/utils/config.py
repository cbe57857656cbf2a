"""
Frogger game configuration with Pydantic validation
"""

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any

import pygame
from pydantic import BaseModel
from pydantic import Field
from pydantic import field_validator
from pydantic import model_validator


@dataclass
class KeyboardLayout:
    """Configuration for keyboard layouts"""

    name: str
    letter_keys: dict[str, int]
    arrow_keys: dict[str, int]
    display_names: dict[str, str]


ARROW_KEYS = {
    "up": pygame.K_UP,
    "down": pygame.K_DOWN,
    "left": pygame.K_LEFT,
    "right": pygame.K_RIGHT,
}

# Keyboard layouts definition
KEYBOARD_LAYOUTS = {
    "qwerty": KeyboardLayout(
        name="QWERTY",
        letter_keys={"up": pygame.K_w, "down": pygame.K_s, "left": pygame.K_a, "right": pygame.K_d},
        arrow_keys=ARROW_KEYS,
        display_names={"up": "W", "down": "S", "left": "A", "right": "D"},
    ),
    "azerty": KeyboardLayout(
        name="AZERTY",
        letter_keys={
            "up": pygame.K_z,  # Z instead of W
            "down": pygame.K_s,
            "left": pygame.K_q,  # Q instead of A
            "right": pygame.K_d,
        },
        arrow_keys=ARROW_KEYS,
        display_names={"up": "Z", "down": "S", "left": "Q", "right": "D"},
    ),
    "qwertz": KeyboardLayout(
        name="QWERTZ",
        letter_keys={"up": pygame.K_w, "down": pygame.K_s, "left": pygame.K_a, "right": pygame.K_d},
        arrow_keys=ARROW_KEYS,
        display_names={"up": "W", "down": "S", "left": "A", "right": "D"},
    ),
}


class GameConfig(BaseModel):
    """Main game configuration with Pydantic validation"""

    # Allow mutation for compatibility with existing code
    model_config = {"validate_assignment": True}

    # Drawing surface
    CANVAS_WIDTH: int = Field(default=505, gt=0, description="Surface width in pixels")
    CANVAS_HEIGHT: int = Field(default=606, gt=0, description="Surface height in pixels")

    # Tile board
    TILE_WIDTH: int = Field(default=101, gt=0, description="Tile width in pixels")
    TILE_HEIGHT: int = Field(default=83, gt=0, description="Row height in pixels")
    NUM_ROWS: int = Field(default=6, gt=1, description="Number of board rows")
    NUM_COLS: int = Field(default=5, gt=0, description="Number of board columns")

    # Player
    PLAYER_START_X: float = Field(default=200.0, description="Player start x")
    PLAYER_START_Y: float = Field(default=380.0, description="Player start y")
    PLAYER_HITBOX_WIDTH: float = Field(default=37.0, gt=0, description="Player hitbox width")
    PLAYER_HITBOX_HEIGHT: float = Field(default=30.0, gt=0, description="Player hitbox height")

    # Enemies
    ENEMY_HITBOX_WIDTH: float = Field(default=60.0, gt=0, description="Enemy hitbox width")
    ENEMY_HITBOX_HEIGHT: float = Field(default=25.0, gt=0, description="Enemy hitbox height")
    ENEMY_LANES: tuple[float, ...] = Field(
        default=(60.0, 143.0, 226.0), description="Enemy lane y coordinates"
    )
    ENEMIES_PER_LANE: int = Field(default=1, ge=0, description="Enemies spawned per lane")
    ENEMY_MIN_SPEED: float = Field(default=100.0, gt=0, description="Slowest enemy speed")
    ENEMY_MAX_SPEED: float = Field(default=300.0, gt=0, description="Fastest enemy speed")

    # Timing
    MAX_FRAME_DT: float = Field(
        default=0.25, gt=0, description="Largest frame delta in seconds before clamping"
    )
    FPS: int = Field(default=60, gt=0, description="Frame rate cap when vsync is unavailable")
    VSYNC: bool = Field(default=True, description="Request a vsync'd display")

    # Keyboard layout
    KEYBOARD_LAYOUT: str = Field(default="qwerty", description="Keyboard layout name")

    # Display
    FONT_FAMILY: str = Field(default="Comic Sans MS", description="Overlay font family")
    TEXT_COLOR: tuple[int, int, int] = Field(default=(0, 0, 0), description="RGB color")
    ASSETS_DIR: str = Field(default=".", description="Directory holding the images/ folder")

    @field_validator("KEYBOARD_LAYOUT")
    @classmethod
    def validate_keyboard_layout(cls, v: str) -> str:
        """Validate keyboard layout exists"""
        if v not in KEYBOARD_LAYOUTS:
            raise ValueError(
                f"Unknown keyboard layout '{v}'. Available: {list(KEYBOARD_LAYOUTS.keys())}"
            )
        return v

    @model_validator(mode="after")
    def validate_enemy_speed(self) -> "GameConfig":
        """Validate that the speed range is not inverted, on creation and on assignment"""
        if self.ENEMY_MAX_SPEED < self.ENEMY_MIN_SPEED:
            raise ValueError(
                f"ENEMY_MAX_SPEED ({self.ENEMY_MAX_SPEED}) must not be below "
                f"ENEMY_MIN_SPEED ({self.ENEMY_MIN_SPEED})"
            )
        return self

    @model_validator(mode="after")
    def validate_board_dimensions(self) -> "GameConfig":
        """Validate the board fits the surface and the player starts on it"""
        if self.NUM_COLS * self.TILE_WIDTH > self.CANVAS_WIDTH:
            raise ValueError(
                f"Board ({self.NUM_COLS} x {self.TILE_WIDTH}px) is wider than CANVAS_WIDTH"
            )
        if self.NUM_ROWS * self.TILE_HEIGHT > self.CANVAS_HEIGHT:
            raise ValueError(
                f"Board ({self.NUM_ROWS} x {self.TILE_HEIGHT}px) is taller than CANVAS_HEIGHT"
            )

        if not 0 <= self.PLAYER_START_X <= self.CANVAS_WIDTH - self.TILE_WIDTH:
            raise ValueError(f"PLAYER_START_X ({self.PLAYER_START_X}) is off the board")
        if not 0 <= self.PLAYER_START_Y <= self.CANVAS_HEIGHT - self.TILE_HEIGHT:
            raise ValueError(f"PLAYER_START_Y ({self.PLAYER_START_Y}) is off the board")

        return self

    def get_keyboard_layout(self) -> KeyboardLayout:
        """Get the current keyboard layout configuration"""
        return KEYBOARD_LAYOUTS.get(self.KEYBOARD_LAYOUT, KEYBOARD_LAYOUTS["qwerty"])

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary for serialization"""
        return self.model_dump()

    def save_to_file(self, filepath: str = "frogger_config.json") -> None:
        """Save configuration to a JSON file"""
        import json
        from pathlib import Path

        config_dict = self.to_dict()
        config_path = Path(filepath)

        with open(config_path, "w") as f:
            json.dump(config_dict, f, indent=2)

    @classmethod
    def load_from_file(cls, filepath: str = "frogger_config.json") -> "GameConfig":
        """Load configuration from a JSON file"""
        import json
        from pathlib import Path

        config_path = Path(filepath)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {filepath}")

        with open(config_path) as f:
            config_dict = json.load(f)

        return cls(**config_dict)

    def reset_to_defaults(self) -> None:
        """Reset all fields to their default values"""
        defaults = GameConfig()
        for field_name in type(self).model_fields.keys():
            # Bypass per-field validation, the defaults are consistent as a whole
            object.__setattr__(self, field_name, getattr(defaults, field_name))


# Global configuration instance with validation
game_config = GameConfig()


def load_config_from_file(filepath: str = "frogger_config.json") -> bool:
    """Load configuration from file into global game_config"""
    try:
        loaded_config = GameConfig.load_from_file(filepath)
    except FileNotFoundError:
        return False
    except ValueError as e:
        print(f"Error loading config: {e}")
        return False

    for field_name in GameConfig.model_fields.keys():
        object.__setattr__(game_config, field_name, getattr(loaded_config, field_name))
    return True


def _change_values(obj: BaseModel, **kwargs: Any) -> dict[str, Any]:
    """Helper to change config values temporarily"""
    old_values: dict[str, Any] = {}
    for name, new_value in kwargs.items():
        old_values[name] = getattr(obj, name)
        setattr(obj, name, new_value)
    return old_values


@contextmanager
def game_config_tmp(**kwargs: Any) -> Iterator[None]:
    """Temporarily modify game config (with validation)"""
    old_values = _change_values(game_config, **kwargs)
    try:
        yield
    finally:
        _change_values(game_config, **old_values)
