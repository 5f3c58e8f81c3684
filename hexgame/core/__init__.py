"""Board, topology and connectivity for the hex game."""

from .state import (
    EMPTY,
    Cell,
    GameState,
    InProgress,
    MoveRecord,
    Player,
    Won,
    player_for_turn,
)
from .errors import (
    CellTakenError,
    GameInvariantError,
    GameOverError,
    HexError,
    IllegalMoveError,
    MoveSourceExhausted,
    OutOfRangeError,
    TurnOrderError,
)
from .topology import NeighborTable, build_neighbor_table, neighbor_offsets, neighbors_of
from .board import Board, BoardSnapshot
from .connectivity import (
    has_won,
    on_start_edge,
    on_terminal_edge,
    start_edge,
    terminal_edge,
    winner,
    winning_path,
)
from .rules import derive_state, legal_move_mask, legal_moves

__all__ = [
    "EMPTY",
    "Cell",
    "GameState",
    "InProgress",
    "MoveRecord",
    "Player",
    "Won",
    "player_for_turn",
    "CellTakenError",
    "GameInvariantError",
    "GameOverError",
    "HexError",
    "IllegalMoveError",
    "MoveSourceExhausted",
    "OutOfRangeError",
    "TurnOrderError",
    "NeighborTable",
    "build_neighbor_table",
    "neighbor_offsets",
    "neighbors_of",
    "Board",
    "BoardSnapshot",
    "has_won",
    "on_start_edge",
    "on_terminal_edge",
    "start_edge",
    "terminal_edge",
    "winner",
    "winning_path",
    "derive_state",
    "legal_move_mask",
    "legal_moves",
]
