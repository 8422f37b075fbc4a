from numbers import Integral
from typing import List, Tuple
import numpy as np
from dataclasses import dataclass
from enum import Enum

BOARD_SIZE = 3


class Player(Enum):
    """Cell occupant / player constants."""
    EMPTY = 0
    X = 1
    O = 2

    def symbol(self) -> str:
        return {0: ".", 1: "X", 2: "O"}[self.value]

    def opponent(self) -> "Player":
        if self == Player.X:
            return Player.O
        if self == Player.O:
            return Player.X
        return Player.EMPTY

    def __str__(self) -> str:
        return self.symbol()


@dataclass(frozen=True)
class Position:
    """
    Immutable position on the board.
    Coordinates are 0-based: (row, col), row-major.
    """
    row: int
    col: int

    def __post_init__(self):
        if not isinstance(self.row, Integral) or not isinstance(self.col, Integral):
            raise TypeError("Position coordinates must be integers")
        # numpy integers and the like are stored as plain int
        object.__setattr__(self, "row", int(self.row))
        object.__setattr__(self, "col", int(self.col))

    def __str__(self) -> str:
        return f"({self.row}, {self.col})"

    def in_bounds(self, size: int) -> bool:
        """Check if this position is within board size."""
        return 0 <= self.row < size and 0 <= self.col < size


Line = Tuple[Position, ...]


class Board:
    """
    Represents the game board.

    - Uses 0-based Position (row, col) externally.
    - Internally stores a size x size numpy grid of Player values.
    """

    def __init__(self, size: int = BOARD_SIZE) -> None:
        if not isinstance(size, int) or size <= 0:
            raise ValueError("size must be a positive integer")
        self._size: int = size
        self._grid: np.ndarray = np.full((size, size), Player.EMPTY.value, dtype=np.int8)
        self._moves: int = 0  # number of occupied cells

    @property
    def size(self) -> int:
        return self._size

    @property
    def moves(self) -> int:
        return self._moves

    def copy(self) -> "Board":
        """Create a deep copy of the board."""
        new_board = Board(self.size)
        new_board._grid = np.copy(self._grid)
        new_board._moves = self._moves
        return new_board

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._size == other._size and bool(np.array_equal(self._grid, other._grid))

    # ---------- Cell access ----------

    def get(self, pos: Position) -> Player:
        if not pos.in_bounds(self._size):
            raise ValueError(f"Out of bounds: {pos} for size={self._size}")
        return Player(int(self._grid[pos.row, pos.col]))

    def cell_at(self, row: int, col: int) -> Player:
        return self.get(Position(row, col))

    def is_empty(self, pos: Position) -> bool:
        return self.get(pos) == Player.EMPTY

    def place(self, pos: Position, player: Player) -> None:
        """
        Place a mark at pos.

        Raises:
            ValueError if out of bounds, occupied, or player is EMPTY.
        """
        if player == Player.EMPTY:
            raise ValueError("Cannot place EMPTY")
        if not self.is_empty(pos):
            raise ValueError(f"Cell occupied at {pos}")
        self._grid[pos.row, pos.col] = player.value
        self._moves += 1

    def is_full(self) -> bool:
        return not bool(np.any(self._grid == Player.EMPTY.value))

    def is_empty_board(self) -> bool:
        return self._moves == 0

    # ---------- Lines ----------

    def lines(self) -> List[Line]:
        """
        All lines in scan order: rows ascending, columns ascending,
        main diagonal, anti-diagonal.
        """
        n = self._size
        out: List[Line] = []
        for r in range(n):
            out.append(tuple(Position(r, c) for c in range(n)))
        for c in range(n):
            out.append(tuple(Position(r, c) for r in range(n)))
        out.append(tuple(Position(i, i) for i in range(n)))
        out.append(tuple(Position(i, n - 1 - i) for i in range(n)))
        return out

    def line_owner(self, line: Line) -> Player:
        """Player occupying every cell of `line`, or EMPTY if mixed/empty."""
        values = self._grid[[p.row for p in line], [p.col for p in line]]
        first = int(values[0])
        if first == Player.EMPTY.value or not bool(np.all(values == first)):
            return Player.EMPTY
        return Player(first)
