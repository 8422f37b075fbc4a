import unittest

from tictactoe.app.config import GameConfig
from tictactoe.app.controller import CliController
from tictactoe.cli.view import CliView, MessageType
from tictactoe.core.board import Player
from tictactoe.core.gamestate import StatusKind


def _scripted(lines):
    it = iter(lines)

    def _input(prompt):
        try:
            return next(it)
        except StopIteration:
            raise EOFError
    return _input


class TestCliController(unittest.TestCase):
    def _controller(self, lines, cfg=None):
        self.out = []
        view = CliView(clear=False, out=self.out.append)
        return CliController(config=cfg, input_fn=_scripted(lines), view=view)

    def test_given_scripted_win_when_running_then_game_won_and_loop_ends_on_eof(self):
        ctrl = self._controller(["0 0", "1 1", "0,1", "1 0", "0 2"])
        ctrl.run()
        game = ctrl.session.game
        self.assertEqual(game.status.kind, StatusKind.WIN)
        self.assertEqual(game.winner, Player.X)
        self.assertIn("*** X WINS ***", self.out)
        self.assertTrue(any("0  [X][X][X]" in chunk for chunk in self.out))

    def test_given_quit_when_running_then_stops_before_remaining_input(self):
        ctrl = self._controller(["1 1", "/quit", "2 2"])
        ctrl.run()
        self.assertFalse(ctrl.running)
        self.assertEqual(ctrl.session.game.history.total_moves, 1)
        self.assertEqual(ctrl.view.message.type, MessageType.QUIT)
        self.assertEqual(self.out[-2], "[QUIT] Exiting...")

    def test_given_bad_input_when_handled_then_error_message_and_still_running(self):
        ctrl = self._controller([])
        ctrl.handle_line("what")
        self.assertEqual(ctrl.view.message.type, MessageType.ERR)
        ctrl.handle_line("1 1")
        ctrl.handle_line("1 1")
        self.assertEqual(ctrl.view.message.text, "Cell is already occupied.")
        ctrl.handle_line("² 1")
        self.assertEqual(ctrl.view.message.type, MessageType.ERR)
        self.assertTrue(ctrl.running)

    def test_given_help_when_handled_then_help_text_shown(self):
        ctrl = self._controller([])
        ctrl.handle_line("/help")
        self.assertEqual(ctrl.view.message.type, MessageType.INFO)
        self.assertIn("/replay", ctrl.view.message.text)

    def test_given_game_when_replaying_through_controller_then_replay_board_rendered(self):
        ctrl = self._controller(["0 0", "1 1", "/replay", "/next", "/prev"])
        ctrl.run()
        self.assertTrue(ctrl.session.replaying)
        self.assertEqual(ctrl.session.game.history.cursor, 1)
        self.assertIn(">>> REPLAY 2/2 <<<", self.out)
        self.assertEqual(self.out[-1], ">>> REPLAY 1/2 <<<")

    def test_given_config_with_o_first_when_playing_then_o_marks_first(self):
        ctrl = self._controller(["2 2"], cfg=GameConfig(first_player=Player.O, clear_screen=False))
        ctrl.run()
        self.assertEqual(ctrl.session.game.cell_at(2, 2), Player.O)


if __name__ == "__main__":
    unittest.main()
