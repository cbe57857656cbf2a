"""
Main game application with PyGame GUI
"""

import sys
import traceback

import numpy as np
import pygame

from frogger.core.board import GAME_IMAGES
from frogger.core.game_loop import GameContext
from frogger.core.game_loop import GameLoop
from frogger.core.input import Keyboard
from frogger.gui.frame_scheduler import DisplayFrameScheduler
from frogger.gui.input_manager import InputManager
from frogger.gui.pygame_renderer import PygameRenderer
from frogger.gui.resources import ResourceLoader
from frogger.utils.config import GameConfig
from frogger.utils.config import game_config


class FroggerApp:
    """Main application class for Frogger with PyGame GUI"""

    def __init__(self, config: GameConfig | None = None, seed: int | None = None) -> None:
        """Initialize the application"""
        self.config = config if config is not None else game_config

        # Initialize game components
        self.renderer = PygameRenderer(self.config)
        self.keyboard = Keyboard()
        self.input_manager = InputManager(self.keyboard)
        self.scheduler = DisplayFrameScheduler()
        self.resources = ResourceLoader(self.config.ASSETS_DIR)

        self.context = GameContext.create(self.config, np.random.default_rng(seed))
        self.game_loop = GameLoop(
            self.context,
            self.renderer.surface,
            self.resources,
            self.keyboard,
            self.scheduler,
            self.config,
        )

        self.running = True

        print("Frogger initialized successfully!")

    def start(self) -> None:
        """Loads the images, the loop starts once they are ready"""
        self.resources.on_ready(self.game_loop.init)
        self.resources.load(GAME_IMAGES)

    def handle_event(self, event: pygame.event.Event) -> None:
        action = self.input_manager.handle_event(event)

        if action == "quit":
            self.running = False
        elif action == "toggle_fps":
            self.renderer.toggle_fps_display()

    def run(self) -> None:
        """Main application loop"""
        print("Starting Frogger...")

        try:
            self.start()

            while self.running:
                # Handle events
                for event in pygame.event.get():
                    self.handle_event(event)

                # Run the frame requested by the game loop
                if self.scheduler.run_pending():
                    self.renderer.present()

                # Wait for the next frame
                self.renderer.update(self.config.FPS)

        finally:
            self.cleanup()

    def cleanup(self) -> None:
        """Clean up resources"""
        print("Cleaning up resources...")
        self.renderer.cleanup()
        pygame.quit()
        print("Frogger closed properly.")


def main(config: GameConfig | None = None, seed: int | None = None) -> None:
    """Main entry point"""
    try:
        app = FroggerApp(config, seed)
        app.run()
    except KeyboardInterrupt:
        print("\nUser interruption")
    except Exception as e:
        print(f"Fatal error: {e}")
        traceback.print_exc()
        sys.exit(1)
    finally:
        # Ensure pygame is properly closed
        pygame.quit()


if __name__ == "__main__":
    main()
