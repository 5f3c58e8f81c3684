"""Head-to-head matches between move sources."""

from .match import EvaluationResult, SourceFactory, evaluate_sources, play_game

__all__ = ["EvaluationResult", "SourceFactory", "evaluate_sources", "play_game"]
