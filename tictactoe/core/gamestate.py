from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol, Tuple

from tictactoe.core.board import Player, Position


class StatusKind(Enum):
    IN_PROGRESS = "in_progress"
    WIN = "win"
    DRAW = "draw"


@dataclass(frozen=True)
class GameStatus:
    """
    Outcome of the game so far.

    A WIN carries the winner and the coordinates of the winning line,
    so consumers never rescan the board to highlight it.
    """
    kind: StatusKind
    winner: Optional[Player] = None
    line: Tuple[Position, ...] = ()

    @staticmethod
    def in_progress() -> "GameStatus":
        return GameStatus(StatusKind.IN_PROGRESS)

    @staticmethod
    def win(player: Player, line: Tuple[Position, ...]) -> "GameStatus":
        return GameStatus(StatusKind.WIN, winner=player, line=tuple(line))

    @staticmethod
    def draw() -> "GameStatus":
        return GameStatus(StatusKind.DRAW)

    @property
    def is_terminal(self) -> bool:
        return self.kind != StatusKind.IN_PROGRESS

    def __str__(self) -> str:
        if self.kind == StatusKind.WIN:
            return f"{self.winner.symbol()} wins!"
        if self.kind == StatusKind.DRAW:
            return "Draw."
        return "In progress"


class BoardReader(Protocol):
    """Read-only view of a board, the only thing renderers depend on."""

    @property
    def size(self) -> int: ...

    def cell_at(self, row: int, col: int) -> Player: ...
