from __future__ import annotations

from typing import List

import numpy as np

from .board import Board
from .connectivity import has_won
from .errors import GameInvariantError
from .state import Cell, GameState, InProgress, Won


def derive_state(board: Board) -> GameState:
    """Compute the game state from occupancy and the turn counter.

    Only the player who moved last can have just completed a chain, so only
    that player is checked. A full board without a winner cannot occur in hex
    and is reported as an invariant violation instead of a tie.
    """
    last = board.last_move
    if last is not None and has_won(board, board.neighbors, last.player):
        return Won(last.player)
    if board.is_full:
        raise GameInvariantError(
            f"Board of size {board.size} is full after {board.turn} moves with no winner."
        )
    return InProgress(board.active_player)


def legal_moves(board: Board) -> List[Cell]:
    return board.empty_cells()


def legal_move_mask(board: Board) -> np.ndarray:
    return (board.cells == 0).astype(np.int8).reshape(-1)
