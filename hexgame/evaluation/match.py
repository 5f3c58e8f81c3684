from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Tuple

from hexgame.core import Player
from hexgame.engine import GameEngine
from hexgame.players.base import MoveSource

logger = logging.getLogger(__name__)

SourceFactory = Callable[[int, Player], MoveSource]


@dataclass
class EvaluationResult:
    games_played: int
    first_wins: int
    second_wins: int
    average_length: float

    def winrate_first(self) -> float:
        return self.first_wins / max(1, self.games_played)

    def winrate_second(self) -> float:
        return self.second_wins / max(1, self.games_played)


def play_game(first: MoveSource, second: MoveSource, size: int) -> Tuple[Player, int]:
    engine = GameEngine(size, first, second)
    result = engine.run()
    return result.winner, engine.board.turn


def evaluate_sources(
    first_factory: SourceFactory,
    second_factory: SourceFactory,
    *,
    episodes: int,
    size: int,
) -> EvaluationResult:
    first_wins = 0
    second_wins = 0
    total_moves = 0

    for episode in range(episodes):
        first = first_factory(size, Player.FIRST)
        second = second_factory(size, Player.SECOND)
        winner, moves = play_game(first, second, size)
        logger.debug("Episode %d: %s won in %d moves", episode, winner.name, moves)
        total_moves += moves
        if winner == Player.FIRST:
            first_wins += 1
        else:
            second_wins += 1

    return EvaluationResult(
        games_played=episodes,
        first_wins=first_wins,
        second_wins=second_wins,
        average_length=total_moves / max(1, episodes),
    )
