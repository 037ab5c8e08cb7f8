#!/usr/bin/env python3
"""
main.py
=======
Entry point.

Usage::

    python main.py                      # play in a pygame window
    python main.py play --seed 7
    python main.py headless --ticks 3600 --seed 7
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

import config
from logging_setup import setup_logging
from sim.sim_bridge import InputEdge, SimBridge


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Night Highway Patrol")
    parser.add_argument("--log-level", default=config.LOG_LEVEL,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--no-log-file", action="store_true",
                        help="Log to the console only")
    subparsers = parser.add_subparsers(dest="command")

    common_parent = argparse.ArgumentParser(add_help=False)
    common_parent.add_argument("--seed", type=int, default=config.DEFAULT_SEED)

    sub = subparsers.add_parser("play", parents=[common_parent], help="Open the game window")
    sub.add_argument("--fps", type=int, default=config.TARGET_FPS)
    sub.set_defaults(func=cmd_play)

    sub = subparsers.add_parser("headless", parents=[common_parent],
                                help="Run the simulation without a window")
    sub.add_argument("--ticks", type=int, default=config.HEADLESS_TICKS)
    sub.add_argument("--steer", choices=["none", "left", "right"], default="none",
                     help="Hold one direction for the whole run")
    sub.set_defaults(func=cmd_headless)
    return parser


def cmd_play(args: argparse.Namespace) -> int:
    # pygame is only needed for the window
    from ui.pygame_view import run_pygame_view

    bridge = SimBridge(random_seed=args.seed, max_catch_up_ticks=config.MAX_CATCH_UP_TICKS)
    run_pygame_view(bridge, width=config.WINDOW_WIDTH, height=config.WINDOW_HEIGHT, fps=args.fps)
    return 0


def cmd_headless(args: argparse.Namespace) -> int:
    log = logging.getLogger("main")
    bridge = SimBridge(random_seed=args.seed)
    if args.steer == "left":
        bridge.handle(InputEdge.LEFT_DOWN)
    elif args.steer == "right":
        bridge.handle(InputEdge.RIGHT_DOWN)

    ticks = 0
    while ticks < args.ticks and not bridge.is_finished():
        bridge.state.step()
        ticks += 1

    snap = bridge.snapshot()
    log.info(
        "headless run: ticks=%d ended=%s score=%d caught=%d speed=%.0f%%",
        ticks, snap.ended, snap.score, snap.caught, snap.game_speed * 100,
    )
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        base = sys.argv[1:] if argv is None else list(argv)
        args = parser.parse_args(base + ["play"])

    setup_logging(
        getattr(logging, args.log_level),
        log_file=None if args.no_log_file else config.LOG_FILE,
        world_log_file=None if args.no_log_file else config.WORLD_DEBUG_LOG_FILE,
    )
    logging.getLogger("main").info("Starting %s...", args.command)
    try:
        return args.func(args)
    except KeyboardInterrupt:
        logging.getLogger("main").info("Shutting down...")
        return 0


if __name__ == "__main__":
    raise SystemExit(main())
