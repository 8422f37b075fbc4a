from __future__ import annotations
from dataclasses import dataclass
from tictactoe.core.board import Position, Player

@dataclass(frozen=True)
class Move:
    """Represents an accepted move on the board."""
    row: int
    col: int
    player: Player

    @property
    def position(self) -> Position:
        return Position(self.row, self.col)

    def __str__(self) -> str:
        """String representation."""
        return f"Player {self.player.symbol()} at ({self.row}, {self.col})"

@dataclass
class MoveResult:
    """Result of executing a move."""
    success: bool
    error_message: str = ""

    @staticmethod
    def ok() -> "MoveResult":
        return MoveResult(success=True, error_message="")

    @staticmethod
    def fail(msg: str) -> "MoveResult":
        return MoveResult(success=False, error_message=msg)
