# game.py
from __future__ import annotations

import logging
from typing import Optional

from tictactoe.core.board import BOARD_SIZE, Board, Player, Position
from tictactoe.core.move import Move, MoveResult
from tictactoe.core.gamestate import GameStatus
from tictactoe.core.movelog import MoveLog
from tictactoe.core.movevalidator import MoveValidator

logger = logging.getLogger(__name__)


class Game:
    """
    Main game state machine.

    Owns:
      - Board (the live position; make_move is its only mutator)
      - MoveValidator
      - current_player, status
      - MoveLog (replaced on every new game)

    Note:
      - current_player does not alternate once the game is over.
      - Game satisfies BoardReader, so views can render it directly.
    """

    def __init__(self, starting_player: Player = Player.X) -> None:
        """
        Initialize game.

        Args:
            starting_player: Player who moves first in every game (default: X)
        """
        if starting_player == Player.EMPTY:
            raise ValueError("starting_player must be X or O")
        self.starting_player: Player = starting_player
        self.validator = MoveValidator()
        self.new_game()

    # -------------------------
    # Reset
    # -------------------------

    def new_game(self) -> None:
        """Start over: empty board, first player to move, fresh history."""
        self.board = Board(BOARD_SIZE)
        self._current_player: Player = self.starting_player
        self._status: GameStatus = GameStatus.in_progress()
        self._history = MoveLog()
        logger.info("new game, %s moves first", self.starting_player.symbol())

    # -------------------------
    # Accessors
    # -------------------------

    @property
    def size(self) -> int:
        return self.board.size

    @property
    def current_player(self) -> Player:
        return self._current_player

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def history(self) -> MoveLog:
        return self._history

    @property
    def winner(self) -> Optional[Player]:
        return self._status.winner

    @property
    def last_move(self) -> Optional[Move]:
        return self._history.last

    def cell_at(self, row: int, col: int) -> Player:
        return self.board.cell_at(row, col)

    def is_game_over(self) -> bool:
        return self._status.is_terminal

    # -------------------------
    # Moves
    # -------------------------

    def make_move(self, position: Position) -> MoveResult:
        """
        Execute a move for the current player.

        Returns:
            MoveResult (success, error_message). The board is untouched on failure.
        """
        result = self.validator.validate(self.board, self._status, position)
        if not result.success:
            logger.debug("rejected %s for %s: %s",
                         position, self._current_player.symbol(), result.error_message)
            return result

        player = self._current_player
        self.board.place(position, player)
        self._history.append(Move(position.row, position.col, player))
        logger.debug("accepted %s for %s", position, player.symbol())

        self._status = self.validator.evaluate(self.board)
        if self._status.is_terminal:
            logger.info("game over: %s", self._status)
            return result

        self._switch_player()
        return result

    def apply_move(self, row: int, col: int) -> bool:
        """Boolean form of make_move taking raw coordinates."""
        return self.make_move(Position(row, col)).success

    def _switch_player(self) -> None:
        """Switch to next player."""
        self._current_player = self._current_player.opponent()
