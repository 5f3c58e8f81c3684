"""Distance estimates used by the automated move source.

Distances count the empty cells a player still has to fill: own stones are
free, empty cells cost one, opponent stones are impassable. Searches stop
once the cost exceeds ``max_depth`` and report None, which is also the answer
when the player is cut off completely.
"""

from __future__ import annotations

from collections import deque
from typing import Callable, Dict, Iterable, Optional

import numpy as np

from hexgame.core import EMPTY, Board, Cell, Player, on_terminal_edge, start_edge


def _step_cost(cells: np.ndarray, cell: Cell, player: Player) -> Optional[int]:
    value = cells[cell.row, cell.col]
    if value == int(player):
        return 0
    if value == EMPTY:
        return 1
    return None


def _zero_one_search(
    board: Board,
    player: Player,
    seeds: Dict[Cell, int],
    is_goal: Callable[[Cell], bool],
    max_depth: Optional[int],
) -> Optional[int]:
    cells = board.cells
    dist: Dict[Cell, int] = {}
    queue = deque()
    for cell, cost in sorted(seeds.items(), key=lambda item: item[1]):
        dist[cell] = cost
        queue.append((cost, cell))

    while queue:
        d, cell = queue.popleft()
        if d > dist[cell]:
            continue
        if max_depth is not None and d > max_depth:
            return None
        if is_goal(cell):
            return d
        for neighbor in board.neighbors[cell]:
            cost = _step_cost(cells, neighbor, player)
            if cost is None:
                continue
            nd = d + cost
            if nd < dist.get(neighbor, nd + 1):
                dist[neighbor] = nd
                if cost == 0:
                    queue.appendleft((nd, neighbor))
                else:
                    queue.append((nd, neighbor))
    return None


def edge_distance(board: Board, player: Player, max_depth: Optional[int] = None) -> Optional[int]:
    """Empty cells the player still needs to join both of their edges."""
    seeds = {}
    cells = board.cells
    for cell in start_edge(board.size, player):
        cost = _step_cost(cells, cell, player)
        if cost is not None:
            seeds[cell] = cost
    return _zero_one_search(
        board,
        player,
        seeds,
        lambda cell: on_terminal_edge(cell, board.size, player),
        max_depth,
    )


def bridge_distance(
    board: Board,
    source: Iterable[Cell],
    target: Iterable[Cell],
    player: Player,
    max_depth: Optional[int] = None,
) -> Optional[int]:
    """Empty cells needed to join two groups of the player's stones."""
    goals = frozenset(target)
    seeds = {cell: 0 for cell in source}
    if not seeds or not goals:
        return None
    return _zero_one_search(board, player, seeds, goals.__contains__, max_depth)
