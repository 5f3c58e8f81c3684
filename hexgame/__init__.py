"""Two-player hex connection game."""

from . import core, engine, env, evaluation, players
from .core import (
    Board,
    BoardSnapshot,
    Cell,
    GameState,
    InProgress,
    NeighborTable,
    Player,
    Won,
    build_neighbor_table,
    derive_state,
    has_won,
    neighbors_of,
)
from .display import describe_state, render_board
from .engine import GameEngine
from .env import HexEnv
from .evaluation import EvaluationResult, evaluate_sources, play_game
from .players import (
    AutomatedConfig,
    AutomatedMoveSource,
    ComponentTracker,
    ConnectedComponent,
    InteractiveMoveSource,
    MoveSource,
    ScriptedMoveSource,
)

__all__ = [
    "core",
    "engine",
    "env",
    "evaluation",
    "players",
    "Board",
    "BoardSnapshot",
    "Cell",
    "GameState",
    "InProgress",
    "NeighborTable",
    "Player",
    "Won",
    "build_neighbor_table",
    "derive_state",
    "has_won",
    "neighbors_of",
    "describe_state",
    "render_board",
    "GameEngine",
    "HexEnv",
    "EvaluationResult",
    "evaluate_sources",
    "play_game",
    "AutomatedConfig",
    "AutomatedMoveSource",
    "ComponentTracker",
    "ConnectedComponent",
    "InteractiveMoveSource",
    "MoveSource",
    "ScriptedMoveSource",
]
