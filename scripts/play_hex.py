#!/usr/bin/env python3
"""Play hex in the console, against another person or the computer."""

import argparse
import logging
import sys
from typing import List, Optional

import numpy as np

from hexgame import (
    AutomatedConfig,
    AutomatedMoveSource,
    GameEngine,
    InteractiveMoveSource,
    MoveSource,
    Player,
    describe_state,
    render_board,
)
from hexgame.core import GameState, winning_path
from hexgame.players import STRATEGIES

DEFAULT_SIZE = 14


def positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid board size: {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"board size must be positive, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="hex", description="Hex board game", add_help=False)
    parser.add_argument("-h", "-help", "--help", action="help", help="show this help message and exit")
    parser.add_argument(
        "-s",
        dest="size",
        metavar="SIZE",
        type=positive_int,
        default=DEFAULT_SIZE,
        help=f"set the board size (default: {DEFAULT_SIZE})",
    )
    parser.add_argument(
        "--ai",
        choices=["none", "first", "second", "both"],
        default="none",
        help="which side the computer plays (default: none)",
    )
    parser.add_argument("--strategy", choices=STRATEGIES, default="distance")
    parser.add_argument("--search-depth", type=positive_int, default=None)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--verbose", action="store_true")
    return parser


def build_source(player: Player, args: argparse.Namespace, rng: np.random.Generator) -> MoveSource:
    if args.ai in (player.name.lower(), "both"):
        config = AutomatedConfig(strategy=args.strategy, search_depth=args.search_depth)
        return AutomatedMoveSource(args.size, player, config, rng=rng)
    return InteractiveMoveSource(args.size, prompt=f"Player {player.glyph}: ")


def announce(engine: GameEngine, state: GameState) -> None:
    last = engine.board.last_move
    if last is not None and isinstance(engine.source_for(last.player), AutomatedMoveSource):
        print(f"Player {last.player.glyph} plays {last.cell.row + 1} {last.cell.col + 1}")
    if not state.is_terminal:
        print(render_board(engine.board.snapshot()))


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    rng = np.random.default_rng(args.seed)
    engine = GameEngine(
        args.size,
        build_source(Player.FIRST, args, rng),
        build_source(Player.SECOND, args, rng),
        on_transition=announce,
    )
    print(render_board(engine.board.snapshot()))
    result = engine.run()

    path = winning_path(engine.board, engine.board.neighbors, result.winner) or []
    print(render_board(engine.board.snapshot(), highlight=path))
    print(describe_state(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
