#!/usr/bin/env python3
"""
Main script to launch Frogger with PyGame graphical interface
"""

import argparse
import logging
import os

os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "hide"

from frogger.gui.game_app import main  # noqa: E402
from frogger.utils.config import game_config  # noqa: E402
from frogger.utils.config import load_config_from_file  # noqa: E402


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Frogger arcade game")
    parser.add_argument("--config", help="JSON configuration file")
    parser.add_argument("--assets", help="Directory holding the images/ folder")
    parser.add_argument("--layout", help="Keyboard layout: qwerty, azerty or qwertz")
    parser.add_argument("--seed", type=int, help="Seed for enemy speeds")
    parser.add_argument("--debug", action="store_true", help="Verbose logging")
    return parser.parse_args()


if __name__ == "__main__":
    args = parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.config and not load_config_from_file(args.config):
        print(f"Could not load {args.config}, using default configuration")
    if args.assets:
        game_config.ASSETS_DIR = args.assets
    if args.layout:
        game_config.KEYBOARD_LAYOUT = args.layout

    print("=== FROGGER ===")
    print("Cross the road without touching the bugs")
    print()
    print("CONTROLS:")
    print("  ENTER: Start / Restart")
    print("  Arrow keys: Move")
    print("  F2: Show FPS")
    print("  ESC: Quit")
    print()

    main(seed=args.seed)
