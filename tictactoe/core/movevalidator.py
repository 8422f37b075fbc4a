from __future__ import annotations

from dataclasses import dataclass

from tictactoe.core.board import Board, Position, Player
from tictactoe.core.move import MoveResult
from tictactoe.core.gamestate import GameStatus


@dataclass
class MoveValidator:
    """
    Validates moves and evaluates the outcome according to tic-tac-toe rules.

    Win scan order is fixed: rows ascending, columns ascending, main
    diagonal, anti-diagonal. The first completed line is the one reported.
    """

    def validate(self, board: Board, status: GameStatus, pos: Position) -> MoveResult:
        if status.is_terminal:
            return MoveResult.fail("Game is already over.")

        if not pos.in_bounds(board.size):
            return MoveResult.fail("Move is out of bounds.")

        if not board.is_empty(pos):
            return MoveResult.fail("Cell is already occupied.")

        return MoveResult.ok()

    def evaluate(self, board: Board) -> GameStatus:
        """Compute the status of `board` after a write."""
        for line in board.lines():
            owner = board.line_owner(line)
            if owner != Player.EMPTY:
                return GameStatus.win(owner, line)

        if board.is_full():
            return GameStatus.draw()
        return GameStatus.in_progress()
