from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from tictactoe.core.board import Player

ENV_FIRST_PLAYER = "TICTACTOE_FIRST_PLAYER"
ENV_CLEAR_SCREEN = "TICTACTOE_CLEAR_SCREEN"
ENV_LOG_LEVEL = "TICTACTOE_LOG_LEVEL"

_TRUE = ("1", "true", "yes", "on")
_FALSE = ("0", "false", "no", "off")


def parse_player(text: str) -> Player:
    sym = text.strip().upper()
    if sym == "X":
        return Player.X
    if sym == "O":
        return Player.O
    raise ValueError(f"first player must be X or O, got {text!r}")


def parse_bool(text: str) -> bool:
    val = text.strip().lower()
    if val in _TRUE:
        return True
    if val in _FALSE:
        return False
    raise ValueError(f"expected a boolean, got {text!r}")


def parse_log_level(text: str) -> str:
    level = text.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"unknown log level {text!r}")
    return level


@dataclass
class GameConfig:
    first_player: Player = Player.X
    clear_screen: bool = True
    prompt: str = "> "
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "GameConfig":
        """Build a config from TICTACTOE_* environment variables."""
        env = os.environ if env is None else env
        cfg = cls()
        if env.get(ENV_FIRST_PLAYER):
            cfg.first_player = parse_player(env[ENV_FIRST_PLAYER])
        if env.get(ENV_CLEAR_SCREEN):
            cfg.clear_screen = parse_bool(env[ENV_CLEAR_SCREEN])
        if env.get(ENV_LOG_LEVEL):
            cfg.log_level = parse_log_level(env[ENV_LOG_LEVEL])
        return cfg
