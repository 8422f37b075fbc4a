from __future__ import annotations

import logging
from typing import Iterator, List, Optional, Tuple

from tictactoe.core.move import Move

logger = logging.getLogger(__name__)

NOT_REPLAYING = -1


class MoveLog:
    """
    Append-only history of accepted moves with a replay cursor.

    The cursor counts how many moves have been shown during replay, so a
    board rebuilt from moves [0, cursor) is exactly the replayed position.
    It is NOT_REPLAYING (-1) until start_replay() is called and is only
    moved by the replay navigation methods, never by append().
    """

    def __init__(self) -> None:
        self._moves: List[Move] = []
        self._cursor: int = NOT_REPLAYING

    def __len__(self) -> int:
        return len(self._moves)

    def __iter__(self) -> Iterator[Move]:
        return iter(list(self._moves))

    # ---------- Recording ----------

    def append(self, move: Move) -> None:
        self._moves.append(move)

    def clear(self) -> None:
        self._moves.clear()
        self._cursor = NOT_REPLAYING

    # ---------- Replay navigation ----------

    def start_replay(self) -> None:
        """Rewind the cursor to the first move. Safe to call repeatedly."""
        self._cursor = 0
        logger.debug("replay started over %d moves", len(self._moves))

    def has_next(self) -> bool:
        return 0 <= self._cursor < len(self._moves)

    def next_move(self) -> Optional[Move]:
        """Return the move at the cursor and advance, or None at the end."""
        if not self.has_next():
            return None
        move = self._moves[self._cursor]
        self._cursor += 1
        return move

    def has_previous(self) -> bool:
        return self._cursor > 0

    def previous_move(self) -> Optional[Move]:
        """Step the cursor back and return the move now under it, or None."""
        if not self.has_previous():
            return None
        self._cursor -= 1
        return self._moves[self._cursor]

    # ---------- Accessors ----------

    @property
    def total_moves(self) -> int:
        return len(self._moves)

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def is_replaying(self) -> bool:
        return self._cursor != NOT_REPLAYING

    @property
    def moves(self) -> Tuple[Move, ...]:
        return tuple(self._moves)

    @property
    def last(self) -> Optional[Move]:
        return self._moves[-1] if self._moves else None
