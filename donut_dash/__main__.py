"""
__main__.py
-----------
Command-line entry point.

Usage:
    python -m donut_dash [--config FILE] [--seed N] [--log-level LEVEL] [--fps N]
"""

import argparse
import random
import sys

from donut_dash.core.debug.debug_logger import DebugLogger
from donut_dash.core.runtime.game_settings import Display
from donut_dash.core.runtime.main_loop import GameInitError, MainLoop
from donut_dash.core.services.config_manager import apply_settings_overrides, load_config
from donut_dash.systems.entity_management.spawn_manager import SpawnManager


def build_parser():
    parser = argparse.ArgumentParser(prog="donut-dash", description="Side-scrolling donut runner")
    parser.add_argument("--config", metavar="FILE",
                        help="Settings override file (.yaml, .json or .py)")
    parser.add_argument("--seed", type=int,
                        help="Seed for enemy spawning")
    parser.add_argument("--log-level", choices=sorted(DebugLogger.LEVEL_VALUES),
                        type=str.upper, help="Console log verbosity")
    parser.add_argument("--fps", type=int,
                        help="Target frame rate")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    if args.log_level:
        DebugLogger.set_level(args.log_level)

    if args.config:
        apply_settings_overrides(load_config(args.config))

    if args.fps:
        Display.FPS = args.fps

    spawn_manager = None
    if args.seed is not None:
        spawn_manager = SpawnManager(rng=random.Random(args.seed))
        DebugLogger.system(f"Spawn seed {args.seed}", category="entity_spawn")

    try:
        game = MainLoop(spawn_manager=spawn_manager)
    except GameInitError as e:
        DebugLogger.fail(str(e))
        return 1

    game.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
