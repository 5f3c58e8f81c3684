"""Neighbor rule for the hex lattice stored as a square index grid.

Each cell takes the eight king offsets minus two diagonals that depend on the
row parity, which leaves at most six neighbors. Even rows drop (-1, +1) and
(+1, +1); odd rows drop (-1, -1) and (+1, -1). The rule is symmetric: if B is
a neighbor of A then A is a neighbor of B.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Dict, Iterator, Tuple

from .state import Cell

Offset = Tuple[int, int]

_KING_OFFSETS: Tuple[Offset, ...] = tuple(
    (dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)
)
_EXCLUDED: Dict[int, Tuple[Offset, ...]] = {
    0: ((-1, 1), (1, 1)),
    1: ((-1, -1), (1, -1)),
}


def neighbor_offsets(row: int) -> Tuple[Offset, ...]:
    excluded = _EXCLUDED[row % 2]
    return tuple(offset for offset in _KING_OFFSETS if offset not in excluded)


def neighbors_of(size: int, row: int, col: int) -> Tuple[Cell, ...]:
    if size < 1:
        raise ValueError("Board size must be at least 1.")
    result = []
    for dr, dc in neighbor_offsets(row):
        r, c = row + dr, col + dc
        if 0 <= r < size and 0 <= c < size:
            result.append(Cell(r, c))
    return tuple(result)


class NeighborTable:
    """Precomputed neighbors for every cell of one board size."""

    __slots__ = ("size", "_table")

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("Board size must be at least 1.")
        self.size = size
        self._table: Tuple[Tuple[Tuple[Cell, ...], ...], ...] = tuple(
            tuple(neighbors_of(size, row, col) for col in range(size)) for row in range(size)
        )

    def __getitem__(self, cell: Cell) -> Tuple[Cell, ...]:
        return self._table[cell.row][cell.col]

    def neighbors(self, row: int, col: int) -> Tuple[Cell, ...]:
        return self._table[row][col]

    def cells(self) -> Iterator[Cell]:
        for row in range(self.size):
            for col in range(self.size):
                yield Cell(row, col)

    def __len__(self) -> int:
        return self.size * self.size

    def __repr__(self) -> str:
        return f"NeighborTable(size={self.size})"


@lru_cache(maxsize=None)
def build_neighbor_table(size: int) -> NeighborTable:
    return NeighborTable(size)
