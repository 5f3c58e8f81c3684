"""Edge-to-edge connection checks.

First owns the top and bottom rows, Second owns the left and right columns.
A search starts from every owned cell on the player's start edge and walks
same-owner neighbors until it reaches the terminal edge. The whole board is
traversed again after every move; at O(size**2) per call this is cheap enough
that no incremental structure is needed here.
"""

from __future__ import annotations

from collections import deque
from typing import Dict, List, Optional

from .board import Board
from .state import Cell, Player
from .topology import NeighborTable


def start_edge(size: int, player: Player) -> List[Cell]:
    if player == Player.FIRST:
        return [Cell(0, col) for col in range(size)]
    return [Cell(row, 0) for row in range(size)]


def terminal_edge(size: int, player: Player) -> List[Cell]:
    if player == Player.FIRST:
        return [Cell(size - 1, col) for col in range(size)]
    return [Cell(row, size - 1) for row in range(size)]


def on_start_edge(cell: Cell, size: int, player: Player) -> bool:
    return (cell.row if player == Player.FIRST else cell.col) == 0


def on_terminal_edge(cell: Cell, size: int, player: Player) -> bool:
    return (cell.row if player == Player.FIRST else cell.col) == size - 1


def winning_path(board: Board, neighbor_table: NeighborTable, player: Player) -> Optional[List[Cell]]:
    """Return one chain of the player's cells joining both edges, or None."""
    size = board.size
    cells = board.cells
    owner = int(player)

    parents: Dict[Cell, Optional[Cell]] = {}
    frontier = deque()
    for cell in start_edge(size, player):
        if cells[cell.row, cell.col] == owner:
            parents[cell] = None
            frontier.append(cell)

    while frontier:
        cell = frontier.popleft()
        if on_terminal_edge(cell, size, player):
            path = [cell]
            parent = parents[cell]
            while parent is not None:
                path.append(parent)
                parent = parents[parent]
            path.reverse()
            return path
        for neighbor in neighbor_table[cell]:
            if neighbor in parents:
                continue
            if cells[neighbor.row, neighbor.col] == owner:
                parents[neighbor] = cell
                frontier.append(neighbor)
    return None


def has_won(board: Board, neighbor_table: NeighborTable, player: Player) -> bool:
    return winning_path(board, neighbor_table, player) is not None


def winner(board: Board, neighbor_table: Optional[NeighborTable] = None) -> Optional[Player]:
    table = neighbor_table if neighbor_table is not None else board.neighbors
    for player in Player:
        if has_won(board, table, player):
            return player
    return None
