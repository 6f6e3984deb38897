"""
main.py
-------
Entry point: build the configuration, wire the collaborators and run.

Usage:
    cosmic-defender                      # default settings
    cosmic-defender --seed 42            # reproducible spawns
    cosmic-defender --config my.yaml     # custom settings file
"""

import argparse
import random
import sys

from cosmic_defender.core.debug.debug_logger import DebugLogger, LoggerConfig
from cosmic_defender.core.runtime.game_settings import Display
from cosmic_defender.core.runtime.main_loop import MainLoop
from cosmic_defender.core.runtime.world import World
from cosmic_defender.core.services.config_manager import (
    DEFAULT_SETTINGS_FILE,
    game_config_from_settings,
    load_config,
    settings_section,
)
from cosmic_defender.core.services.event_manager import EventManager
from cosmic_defender.core.services.input_manager import InputManager, bindings_from_names
from cosmic_defender.graphics.draw_manager import DrawManager
from cosmic_defender.ui.hud_manager import HUDManager


def build_parser():
    parser = argparse.ArgumentParser(description="Cosmic Defender arcade shooter")
    parser.add_argument("--config", default=DEFAULT_SETTINGS_FILE,
                        help="Settings file (.yaml or .json)")
    parser.add_argument("--width", type=int, default=Display.WIDTH,
                        help="Initial window width")
    parser.add_argument("--height", type=int, default=Display.HEIGHT,
                        help="Initial window height")
    parser.add_argument("--fps", type=int, default=Display.FPS,
                        help="Target frame rate")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for spawn positions and particles")
    parser.add_argument("--log-level", default=LoggerConfig.LOG_LEVEL,
                        choices=["NONE", "ERROR", "WARN", "INFO", "VERBOSE"],
                        help="Console log verbosity")
    parser.add_argument("--hitboxes", action="store_true",
                        help="Draw collision boxes")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    LoggerConfig.LOG_LEVEL = args.log_level

    DebugLogger.section("Initializing Cosmic Defender")

    settings = load_config(args.config)
    try:
        config = game_config_from_settings(settings)
    except ValueError as e:
        DebugLogger.fail(f"Invalid settings in {args.config}: {e}", category="loading")
        return 1
    controls = settings_section(settings, "controls")

    events = EventManager()
    rng = random.Random(args.seed)
    world = World(config, width=args.width, height=args.height, events=events, rng=rng)

    input_manager = InputManager(bindings_from_names(controls), state=world.input)
    draw_manager = DrawManager()
    if args.hitboxes:
        draw_manager.toggle_hitboxes()
    hud = HUDManager(events)

    MainLoop(world, input_manager, draw_manager, hud, fps=args.fps).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
