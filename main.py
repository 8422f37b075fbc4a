from __future__ import annotations

import argparse
import logging

from tictactoe.app.config import GameConfig, parse_log_level, parse_player
from tictactoe.app.controller import CliController


def run_play(cfg: GameConfig) -> None:
    ctrl = CliController(config=cfg)
    ctrl.run()


def build_config(args: argparse.Namespace) -> GameConfig:
    cfg = GameConfig.from_env()
    if args.first is not None:
        cfg.first_player = parse_player(args.first)
    if args.clear is not None:
        cfg.clear_screen = args.clear
    if args.log_level is not None:
        cfg.log_level = parse_log_level(args.log_level)
    return cfg


def main():
    ap = argparse.ArgumentParser(description="Two-player tic-tac-toe with move replay")
    ap.add_argument(
        "--first",
        choices=["X", "O", "x", "o"],
        default=None,
        help="Player who moves first (default: X)",
    )
    ap.add_argument(
        "--clear",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Clear the screen before each redraw (default: True)",
    )
    ap.add_argument(
        "--log-level",
        default=None,
        help="Logging level, e.g. DEBUG or INFO (default: WARNING)",
    )

    args = ap.parse_args()
    try:
        cfg = build_config(args)
    except ValueError as exc:
        ap.error(str(exc))

    logging.basicConfig(
        level=cfg.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    run_play(cfg)


if __name__ == "__main__":
    main()
