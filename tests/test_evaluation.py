import numpy as np

from hexgame.core import Player
from hexgame.evaluation import EvaluationResult, evaluate_sources, play_game
from hexgame.players import AutomatedConfig, AutomatedMoveSource, ScriptedMoveSource


def random_factory(seed):
    rng = np.random.default_rng(seed)

    def factory(size, player):
        return AutomatedMoveSource(size, player, AutomatedConfig(strategy="random"), rng=rng)

    return factory


def test_play_game_reports_winner_and_length():
    winner, moves = play_game(
        ScriptedMoveSource([(0, 0), (1, 0)]),
        ScriptedMoveSource([(1, 1)]),
        2,
    )
    assert winner == Player.FIRST
    assert moves == 3


def test_evaluate_random_vs_random_small():
    result = evaluate_sources(random_factory(0), random_factory(1), episodes=4, size=4)
    assert result.games_played == 4
    assert result.first_wins + result.second_wins == 4
    assert 4 <= result.average_length <= 16


def test_winrates():
    result = EvaluationResult(games_played=10, first_wins=7, second_wins=3, average_length=20.0)
    assert result.winrate_first() == 0.7
    assert result.winrate_second() == 0.3
    assert EvaluationResult(0, 0, 0, 0.0).winrate_first() == 0.0
