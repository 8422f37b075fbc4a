from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from tictactoe.core.board import BOARD_SIZE, Position


class CommandType(Enum):
    MOVE = "move"
    NEW = "new"
    REPLAY = "replay"
    NEXT = "next"
    PREV = "prev"
    HELP = "help"
    QUIT = "quit"


_SLASH_COMMANDS = {
    "new": CommandType.NEW,
    "replay": CommandType.REPLAY,
    "next": CommandType.NEXT,
    "n": CommandType.NEXT,
    "prev": CommandType.PREV,
    "p": CommandType.PREV,
    "help": CommandType.HELP,
    "quit": CommandType.QUIT,
}

_INVALID_MSG = "Invalid input. Use 'row col' or /help"


@dataclass(frozen=True)
class Command:
    """Parsed command from user input."""
    type: CommandType
    raw: str


@dataclass(frozen=True)
class ParseResult:
    """
    Result of parsing one line input.
    Exactly one of (command, position) should be set on success.
    """
    command: Optional[Command] = None
    position: Optional[Position] = None
    error: str = ""

    @property
    def ok(self) -> bool:
        return self.error == "" and (self.command is not None or self.position is not None)


class CommandProcessor:
    """
    Parses user input line into:
      - Command (e.g. /replay)
      - Position (e.g. '1 2' or '1,2')

    This class does NOT execute anything. dispatch() decides what to do.
    """

    def __init__(self, board_size: int = BOARD_SIZE) -> None:
        if board_size <= 0:
            raise ValueError("board_size must be positive")
        self.board_size = board_size

    @property
    def help_cmds(self) -> str:
        return "/new, /replay, /next (/n), /prev (/p), /help, /quit"

    def help_text(self) -> str:
        last = self.board_size - 1
        return (
            f"Move: 'row col' or 'row,col' (0-{last}).  "
            f"Commands: {self.help_cmds}"
        )

    # ---------- Public parse API ----------

    def parse(self, text: str) -> ParseResult:
        """
        Parse a raw input line.
        Returns ParseResult with either command or position on success.
        """
        raw = (text or "").strip()
        if not raw:
            return ParseResult(error="")  # treat as no-op line

        if raw.startswith("/"):
            name = raw[1:].strip().lower()
            cmd_type = _SLASH_COMMANDS.get(name)
            if cmd_type is None:
                return ParseResult(error=f"Unknown command: {raw}")
            return ParseResult(command=Command(cmd_type, raw))

        parts = raw.replace(",", " ").split()
        if len(parts) == 2:
            try:
                row, col = int(parts[0]), int(parts[1])
            except ValueError:
                return ParseResult(error=_INVALID_MSG)
            if not self._is_in_bounds(row, col):
                return ParseResult(error=self._oob_msg(row, col))
            return ParseResult(position=Position(row, col))

        return ParseResult(error=_INVALID_MSG)

    # ---------- Helpers ----------

    def _is_in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.board_size and 0 <= col < self.board_size

    def _oob_msg(self, row: int, col: int) -> str:
        return f"Out of bounds: {row}, {col} (must be 0..{self.board_size - 1})"
