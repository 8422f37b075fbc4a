import unittest

from tictactoe.app.dispatch import Session, dispatch
from tictactoe.cli.commands import CommandType
from tictactoe.cli.view import MessageType
from tictactoe.core.board import Board, Player, Position

MOVES = [(0, 0), (1, 1), (0, 1), (1, 0), (0, 2)]


def _play(session, moves):
    for r, c in moves:
        msg = dispatch(session, CommandType.MOVE, Position(r, c))
        assert msg.type != MessageType.ERR, msg


def _cells(reader):
    return [[reader.cell_at(r, c) for c in range(3)] for r in range(3)]


class TestDispatch(unittest.TestCase):
    def setUp(self):
        self.session = Session()

    def test_given_moves_when_dispatched_then_messages_describe_them(self):
        msg = dispatch(self.session, CommandType.MOVE, Position(1, 1))
        self.assertEqual(msg.type, MessageType.MOVE)
        self.assertEqual(msg.text, "Player X at (1, 1)")
        err = dispatch(self.session, CommandType.MOVE, Position(1, 1))
        self.assertEqual(err.type, MessageType.ERR)
        self.assertEqual(err.text, "Cell is already occupied.")

    def test_given_winning_move_when_dispatched_then_win_message_and_highlight(self):
        _play(self.session, MOVES[:4])
        msg = dispatch(self.session, CommandType.MOVE, Position(0, 2))
        self.assertEqual(msg.text, "Player X wins!")
        self.assertEqual(self.session.highlight(), (Position(0, 0), Position(0, 1), Position(0, 2)))
        self.assertIn("X WINS", self.session.state_line())

    def test_given_empty_history_when_replay_then_error(self):
        msg = dispatch(self.session, CommandType.REPLAY)
        self.assertEqual(msg.type, MessageType.ERR)
        self.assertFalse(self.session.replaying)

    def test_given_history_when_replay_then_first_move_shown(self):
        _play(self.session, MOVES)
        msg = dispatch(self.session, CommandType.REPLAY)
        self.assertEqual(msg.type, MessageType.REPLAY)
        self.assertEqual(msg.text, "Move 1/5: Player X at (0, 0)")
        self.assertTrue(self.session.replaying)
        self.assertEqual(self.session.game.history.cursor, 1)
        board = self.session.display_board()
        self.assertIsInstance(board, Board)
        self.assertEqual(board.cell_at(0, 0), Player.X)
        self.assertEqual(board.moves, 1)
        self.assertEqual(self.session.highlight(), ())
        self.assertIn("REPLAY 1/5", self.session.state_line())

    def test_given_replay_when_stepping_to_end_then_board_matches_live(self):
        _play(self.session, MOVES)
        dispatch(self.session, CommandType.REPLAY)
        for _ in range(4):
            self.assertEqual(dispatch(self.session, CommandType.NEXT).type, MessageType.REPLAY)
        self.assertEqual(_cells(self.session.display_board()), _cells(self.session.game))
        msg = dispatch(self.session, CommandType.NEXT)
        self.assertEqual(msg.text, "Replay finished!")

    def test_given_replay_when_stepping_back_then_board_rebuilt_from_prefix(self):
        _play(self.session, MOVES)
        dispatch(self.session, CommandType.REPLAY)
        dispatch(self.session, CommandType.NEXT)
        dispatch(self.session, CommandType.NEXT)
        msg = dispatch(self.session, CommandType.PREV)
        self.assertEqual(msg.text, "Move 2/5")
        board = self.session.display_board()
        self.assertEqual(board.moves, 2)
        self.assertEqual(board.cell_at(0, 1), Player.EMPTY)
        self.assertEqual(board.cell_at(1, 1), Player.O)
        dispatch(self.session, CommandType.PREV)
        dispatch(self.session, CommandType.PREV)
        self.assertEqual(self.session.display_board().moves, 0)
        msg = dispatch(self.session, CommandType.PREV)
        self.assertEqual(msg.text, "No previous moves.")

    def test_given_replay_when_moving_then_refused_and_live_board_untouched(self):
        self.session = Session()
        _play(self.session, MOVES[:2])
        dispatch(self.session, CommandType.REPLAY)
        msg = dispatch(self.session, CommandType.MOVE, Position(2, 2))
        self.assertEqual(msg.type, MessageType.ERR)
        self.assertEqual(self.session.game.history.total_moves, 2)
        self.assertEqual(self.session.game.board.moves, 2)

    def test_given_not_replaying_when_navigating_then_errors(self):
        _play(self.session, MOVES[:2])
        self.assertEqual(dispatch(self.session, CommandType.NEXT).type, MessageType.ERR)
        self.assertEqual(dispatch(self.session, CommandType.PREV).text, "No previous moves.")

    def test_given_replay_when_new_game_then_live_mode_and_empty_history(self):
        _play(self.session, MOVES)
        dispatch(self.session, CommandType.REPLAY)
        msg = dispatch(self.session, CommandType.NEW)
        self.assertEqual(msg.type, MessageType.NEW)
        self.assertFalse(self.session.replaying)
        self.assertIs(self.session.display_board(), self.session.game)
        self.assertEqual(self.session.game.history.total_moves, 0)
        self.assertEqual(dispatch(self.session, CommandType.REPLAY).type, MessageType.ERR)

    def test_given_move_without_position_when_dispatched_then_value_error(self):
        with self.assertRaises(ValueError):
            dispatch(self.session, CommandType.MOVE)

    def test_given_quit_when_dispatched_then_quit_message(self):
        self.assertEqual(dispatch(self.session, CommandType.QUIT).type, MessageType.QUIT)


if __name__ == "__main__":
    unittest.main()
