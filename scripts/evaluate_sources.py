#!/usr/bin/env python3
"""Pit two computer strategies against each other and report win rates."""

import argparse
import json
import logging
from pathlib import Path

import numpy as np
import yaml

from hexgame import AutomatedConfig, AutomatedMoveSource, Player, evaluate_sources


def make_factory(config: AutomatedConfig, rng: np.random.Generator):
    def factory(size: int, player: Player) -> AutomatedMoveSource:
        return AutomatedMoveSource(size, player, config, rng=rng)

    return factory


def load_config(path: str) -> dict:
    cfg_path = Path(path)
    if not cfg_path.exists():
        return {}
    return yaml.safe_load(cfg_path.read_text()) or {}


def main() -> None:
    parser = argparse.ArgumentParser(description="Evaluate automated hex players.")
    parser.add_argument("--config", type=str, default="configs/match.yaml")
    parser.add_argument("--episodes", type=int)
    parser.add_argument("--size", type=int)
    parser.add_argument("--seed", type=int)
    parser.add_argument("--first-strategy")
    parser.add_argument("--second-strategy")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    cfg = load_config(args.config)
    episodes = args.episodes if args.episodes is not None else cfg.get("episodes", 10)
    size = args.size if args.size is not None else cfg.get("size", 7)
    seed = args.seed if args.seed is not None else cfg.get("seed")

    first_cfg = dict(cfg.get("first", {}))
    second_cfg = dict(cfg.get("second", {}))
    if args.first_strategy is not None:
        first_cfg["strategy"] = args.first_strategy
    if args.second_strategy is not None:
        second_cfg["strategy"] = args.second_strategy

    rng = np.random.default_rng(seed)
    result = evaluate_sources(
        make_factory(AutomatedConfig(**first_cfg), rng),
        make_factory(AutomatedConfig(**second_cfg), rng),
        episodes=episodes,
        size=size,
    )
    print(
        json.dumps(
            {
                "size": size,
                "first": first_cfg,
                "second": second_cfg,
                "games_played": result.games_played,
                "first_wins": result.first_wins,
                "second_wins": result.second_wins,
                "winrate_first": result.winrate_first(),
                "average_length": result.average_length,
            },
            indent=2,
        )
    )


if __name__ == "__main__":
    main()
