from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Collection, List, Optional

from tictactoe.core.board import Player, Position
from tictactoe.core.gamestate import BoardReader, GameStatus, StatusKind


# =========================
# Message types
# =========================

class MessageType(Enum):
    ERR = "ERR"
    INFO = "INFO"
    MOVE = "MOVE"
    NEW = "NEW"
    REPLAY = "REPLAY"
    QUIT = "QUIT"


@dataclass(frozen=True)
class Message:
    """
    A UI message shown between board and state.
    Examples:
      [ERR] Cell is already occupied.
      [REPLAY] Move 2/5: Player O at (1, 1)
    """
    type: MessageType
    text: str = ""

    def render(self) -> str:
        if self.text:
            return f"[{self.type.value}] {self.text}"
        return f"[{self.type.value}]"


# =========================
# Screen utils
# =========================

def clear_screen() -> None:
    os.system("cls" if os.name == "nt" else "clear")


def render_board(board: BoardReader, highlight: Collection[Position] = ()) -> str:
    """
    Render any BoardReader as text with 0-based row/column indices.
    Highlighted cells are wrapped in brackets, e.g. [X].
    """
    marked = set(highlight)
    lines: List[str] = []
    lines.append("   " + "".join(f" {c} " for c in range(board.size)))
    for r in range(board.size):
        row: List[str] = []
        for c in range(board.size):
            sym = board.cell_at(r, c).symbol()
            if Position(r, c) in marked:
                row.append(f"[{sym}]")
            else:
                row.append(f" {sym} ")
        lines.append(f"{r}  " + "".join(row))
    return "\n".join(lines)


def status_line(status: GameStatus, current_player: Player) -> str:
    if status.kind == StatusKind.WIN:
        return f"*** {status.winner.symbol()} WINS ***"
    if status.kind == StatusKind.DRAW:
        return "*** DRAW ***"
    return f">>> {current_player.symbol()} TO MOVE <<<"


def replay_line(cursor: int, total: int) -> str:
    return f">>> REPLAY {cursor}/{total} <<<"


# =========================
# View (board + message + state)
# =========================

class CliView:
    """
    Responsible ONLY for rendering:
      1) board
      2) message
      3) state line

    It does NOT:
      - parse input
      - execute game logic
    """

    def __init__(
        self,
        *,
        prompt: str = "> ",
        clear: bool = True,
        out: Callable[[str], None] = print,
    ) -> None:
        self.prompt = prompt
        self.clear = clear
        self._out = out
        self._message: Optional[Message] = None

    # ---------- Message API ----------

    @property
    def message(self) -> Optional[Message]:
        return self._message

    def set_message(self, msg: Optional[Message]) -> None:
        self._message = msg

    def set_error(self, text: str) -> None:
        self._message = Message(MessageType.ERR, text)

    def set_info(self, text: str = "") -> None:
        self._message = Message(MessageType.INFO, text) if text else None

    # ---------- Render ----------

    def render(
        self,
        board: BoardReader,
        state: str,
        highlight: Collection[Position] = (),
    ) -> None:
        """
        Render:
          - board
          - message
          - state
        """
        if self.clear:
            clear_screen()

        self._out(render_board(board, highlight))
        self._out("")
        self._out(self._message.render() if self._message is not None else "")
        self._out(state)
