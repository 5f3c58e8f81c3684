from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple

import numpy as np
from numpy.typing import NDArray

from .errors import CellTakenError, OutOfRangeError, TurnOrderError
from .state import EMPTY, Cell, MoveRecord, Player, player_for_turn
from .topology import NeighborTable, build_neighbor_table

BoardArray = NDArray[np.int8]


@dataclass(frozen=True)
class BoardSnapshot:
    """Read-only view of a board handed to renderers."""

    size: int
    cells: BoardArray  # shape (size, size), 0 empty, 1 first, 2 second; not writeable
    turn: int
    last_move: Optional[MoveRecord]

    def occupancy_of(self, cell: Cell) -> Optional[Player]:
        value = int(self.cells[cell.row, cell.col])
        return None if value == EMPTY else Player(value)


class Board:
    def __init__(self, size: int, neighbors: Optional[NeighborTable] = None) -> None:
        if size < 1:
            raise ValueError("Board size must be at least 1.")
        if neighbors is not None and neighbors.size != size:
            raise ValueError("Neighbor table size does not match board size.")
        self.size = size
        self.neighbors = neighbors if neighbors is not None else build_neighbor_table(size)
        self._cells: BoardArray = np.zeros((size, size), dtype=np.int8)
        self.turn = 0
        self.history: List[MoveRecord] = []

    @classmethod
    def from_moves(cls, size: int, moves: Iterable[Tuple[int, int]]) -> "Board":
        """Build a board by applying (row, col) moves in order, alternating players."""
        board = cls(size)
        for row, col in moves:
            board.apply_move(Cell(row, col))
        return board

    @property
    def cells(self) -> BoardArray:
        view = self._cells.view()
        view.flags.writeable = False
        return view

    @property
    def active_player(self) -> Player:
        return player_for_turn(self.turn)

    @property
    def last_move(self) -> Optional[MoveRecord]:
        return self.history[-1] if self.history else None

    @property
    def is_full(self) -> bool:
        return self.turn >= self.size * self.size

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def occupancy_of(self, cell: Cell) -> Optional[Player]:
        if not self.in_bounds(cell.row, cell.col):
            raise OutOfRangeError(f"Cell {cell.as_tuple()} is outside the board.", cell)
        value = int(self._cells[cell.row, cell.col])
        return None if value == EMPTY else Player(value)

    def is_empty(self, cell: Cell) -> bool:
        return self.occupancy_of(cell) is None

    def apply_move(self, cell: Cell, player: Optional[Player] = None) -> MoveRecord:
        expected = self.active_player
        if player is None:
            player = expected
        elif player != expected:
            raise TurnOrderError(
                f"Turn {self.turn} belongs to {expected.name}, not {Player(player).name}."
            )
        if not self.in_bounds(cell.row, cell.col):
            raise OutOfRangeError(f"Cell {cell.as_tuple()} is outside the board.", cell)
        if self._cells[cell.row, cell.col] != EMPTY:
            raise CellTakenError(f"Cell {cell.as_tuple()} is already taken.", cell)

        self._cells[cell.row, cell.col] = int(player)
        record = MoveRecord(cell=cell, player=Player(player), turn=self.turn)
        self.history.append(record)
        self.turn += 1
        return record

    def empty_cells(self) -> List[Cell]:
        return [Cell(int(r), int(c)) for r, c in np.argwhere(self._cells == EMPTY)]

    def cells_of(self, player: Player) -> Iterator[Cell]:
        for r, c in np.argwhere(self._cells == int(player)):
            yield Cell(int(r), int(c))

    def copy(self) -> "Board":
        clone = Board(self.size, self.neighbors)
        clone._cells = self._cells.copy()
        clone.turn = self.turn
        clone.history = list(self.history)
        return clone

    def snapshot(self) -> BoardSnapshot:
        cells = self._cells.copy()
        cells.flags.writeable = False
        return BoardSnapshot(size=self.size, cells=cells, turn=self.turn, last_move=self.last_move)

    def __repr__(self) -> str:
        board_str = "\n".join(" ".join(str(int(cell)) for cell in row) for row in self._cells)
        return f"Board(size={self.size}, turn={self.turn})\n{board_str}"
