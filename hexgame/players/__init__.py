"""Move sources: console input, scripted moves and the computer player."""

from .base import MoveSource
from .interactive import InteractiveMoveSource, QUIT_TOKENS, parse_move
from .scripted import ScriptedMoveSource
from .components import ComponentTracker, ConnectedComponent
from .heuristics import bridge_distance, edge_distance
from .automated import STRATEGIES, AutomatedConfig, AutomatedMoveSource

__all__ = [
    "MoveSource",
    "InteractiveMoveSource",
    "QUIT_TOKENS",
    "parse_move",
    "ScriptedMoveSource",
    "ComponentTracker",
    "ConnectedComponent",
    "bridge_distance",
    "edge_distance",
    "STRATEGIES",
    "AutomatedConfig",
    "AutomatedMoveSource",
]
