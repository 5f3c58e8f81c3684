"""Turn-taking game engine."""

from .game import GameEngine, TransitionCallback

__all__ = ["GameEngine", "TransitionCallback"]
