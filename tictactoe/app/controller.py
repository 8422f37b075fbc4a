from __future__ import annotations

import logging
from typing import Callable, Optional

from tictactoe.app.config import GameConfig
from tictactoe.app.dispatch import Session, dispatch
from tictactoe.cli.commands import Command, CommandProcessor, CommandType
from tictactoe.cli.view import CliView, Message, MessageType
from tictactoe.core.board import Position
from tictactoe.core.game import Game

logger = logging.getLogger(__name__)


class CliController:
    """
    Terminal controller loop:
      - render(board + message + state) when dirty
      - read one line of input
      - parse input into Command/Position
      - dispatch to the session

    OOP rule:
      - Controller orchestrates.
      - Game handles gameplay.
      - View renders only.
      - CommandProcessor parses only.
    """

    def __init__(
        self,
        *,
        config: Optional[GameConfig] = None,
        input_fn: Callable[[str], str] = input,
        view: Optional[CliView] = None,
    ) -> None:
        self.cfg = config if config is not None else GameConfig()
        self.session = Session(Game(starting_player=self.cfg.first_player))
        self.view = view if view is not None else CliView(prompt=self.cfg.prompt, clear=self.cfg.clear_screen)
        self.cmd = CommandProcessor(board_size=self.session.game.size)
        self._input = input_fn
        self._running = True
        self._dirty = True

    @property
    def running(self) -> bool:
        return self._running

    # ---------- Main loop ----------

    def run(self) -> None:
        """Loop until /quit or end of input."""
        self.view.set_message(Message(MessageType.NEW, "Type /help for commands."))
        self._dirty = True

        while self._running:
            self._render()
            try:
                line = self._input(self.view.prompt)
            except EOFError:
                logger.debug("input closed")
                break
            self.handle_line(line)

        logger.info("session ended after %d moves", self.session.game.history.total_moves)

    def handle_line(self, line: str) -> None:
        parsed = self.cmd.parse(line)
        if not parsed.ok:
            # empty input is ok-noop
            if parsed.error:
                self.view.set_error(parsed.error)
                self._dirty = True
            return

        if parsed.command is not None:
            self._handle_command(parsed.command)
        elif parsed.position is not None:
            self._handle_move(parsed.position)

    # ---------- Rendering ----------

    def _render(self) -> None:
        if not self._dirty:
            return
        self.view.render(
            self.session.display_board(),
            self.session.state_line(),
            self.session.highlight(),
        )
        self._dirty = False

    # ---------- Input dispatch ----------

    def _handle_command(self, command: Command) -> None:
        if command.type == CommandType.HELP:
            self.view.set_info(self.cmd.help_text())
            self._dirty = True
            return

        self.view.set_message(dispatch(self.session, command.type))
        self._dirty = True
        if command.type == CommandType.QUIT:
            self._running = False
            self._render()

    def _handle_move(self, pos: Position) -> None:
        self.view.set_message(dispatch(self.session, CommandType.MOVE, pos))
        self._dirty = True
