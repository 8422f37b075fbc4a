from __future__ import annotations

import logging
from typing import Optional, Tuple

from tictactoe.cli.commands import CommandType
from tictactoe.cli.view import Message, MessageType, replay_line, status_line
from tictactoe.core.board import Board, Position
from tictactoe.core.game import Game
from tictactoe.core.gamestate import BoardReader, StatusKind

logger = logging.getLogger(__name__)


class Session:
    """
    One interactive session: the live game plus replay-mode bookkeeping.

    While replaying, the displayed board is rebuilt from the game's move
    log and the live board is left alone.
    """

    def __init__(self, game: Optional[Game] = None) -> None:
        self.game = game if game is not None else Game()
        self.replaying: bool = False
        self.replay_board: Board = Board(self.game.size)

    def display_board(self) -> BoardReader:
        return self.replay_board if self.replaying else self.game

    def highlight(self) -> Tuple[Position, ...]:
        if self.replaying:
            return ()
        return self.game.status.line

    def state_line(self) -> str:
        if self.replaying:
            log = self.game.history
            return replay_line(log.cursor, log.total_moves)
        return status_line(self.game.status, self.game.current_player)

    def rebuild_replay_board(self) -> None:
        """Redraw the replay board from scratch with moves [0, cursor)."""
        log = self.game.history
        self.replay_board = Board(self.game.size)
        for move in log.moves[:log.cursor]:
            self.replay_board.place(move.position, move.player)


# =========================
# Dispatch
# =========================

def dispatch(session: Session, command: CommandType, position: Optional[Position] = None) -> Message:
    """
    Route one command to the core and return the message to show.

    QUIT is a controller concern and is answered with a QUIT message only.
    """
    if command == CommandType.MOVE:
        return _move(session, position)
    if command == CommandType.NEW:
        return _new_game(session)
    if command == CommandType.REPLAY:
        return _start_replay(session)
    if command == CommandType.NEXT:
        return _next(session)
    if command == CommandType.PREV:
        return _prev(session)
    if command == CommandType.QUIT:
        return Message(MessageType.QUIT, "Exiting...")
    return Message(MessageType.INFO, "")


def _move(session: Session, position: Optional[Position]) -> Message:
    if position is None:
        raise ValueError("MOVE requires a position")
    if session.replaying:
        return Message(MessageType.ERR, "Cannot make moves during replay. Use /new to play.")

    game = session.game
    player = game.current_player
    result = game.make_move(position)
    if not result.success:
        return Message(MessageType.ERR, result.error_message)

    if game.status.kind == StatusKind.WIN:
        return Message(MessageType.INFO, f"Player {player.symbol()} wins!")
    if game.status.kind == StatusKind.DRAW:
        return Message(MessageType.INFO, "It's a draw!")
    return Message(MessageType.MOVE, f"Player {player.symbol()} at {position}")


def _new_game(session: Session) -> Message:
    session.game.new_game()
    session.replaying = False
    session.replay_board = Board(session.game.size)
    return Message(MessageType.NEW, "New game started.")


def _start_replay(session: Session) -> Message:
    log = session.game.history
    if log.total_moves == 0:
        return Message(MessageType.ERR, "No moves to replay. Play a game first!")

    session.replaying = True
    log.start_replay()
    session.replay_board = Board(session.game.size)
    logger.debug("entering replay mode")
    return _next(session)


def _next(session: Session) -> Message:
    if not session.replaying:
        return Message(MessageType.ERR, "Not in replay mode. Use /replay first.")

    log = session.game.history
    move = log.next_move()
    if move is None:
        return Message(MessageType.REPLAY, "Replay finished!")

    session.replay_board.place(move.position, move.player)
    logger.debug("replay forward to %d/%d", log.cursor, log.total_moves)
    return Message(MessageType.REPLAY, f"Move {log.cursor}/{log.total_moves}: {move}")


def _prev(session: Session) -> Message:
    log = session.game.history
    if not session.replaying or log.previous_move() is None:
        return Message(MessageType.REPLAY, "No previous moves.")

    session.rebuild_replay_board()
    logger.debug("replay back to %d/%d", log.cursor, log.total_moves)
    return Message(MessageType.REPLAY, f"Move {log.cursor}/{log.total_moves}")
