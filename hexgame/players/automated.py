from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np

from hexgame.core import Board, Cell, IllegalMoveError, Player, TurnOrderError, has_won
from hexgame.players.components import ComponentTracker
from hexgame.players.heuristics import bridge_distance, edge_distance

logger = logging.getLogger(__name__)

STRATEGIES = ("distance", "random")


@dataclass
class AutomatedConfig:
    strategy: str = "distance"
    # Distance searches give up past this many empty cells; None searches the whole board.
    search_depth: Optional[int] = None

    def __post_init__(self) -> None:
        if self.strategy not in STRATEGIES:
            raise ValueError(f"Unknown strategy {self.strategy!r}; expected one of {STRATEGIES}.")
        if self.search_depth is not None and self.search_depth < 1:
            raise ValueError("search_depth must be positive.")


class AutomatedMoveSource:
    """Computer player that keeps its own copy of the game.

    The shadow board and the component tracker are fed with the opponent's
    last move on every ``propose_move`` call and with this player's own moves
    once the engine accepts them. Repeated notifications for the same move are
    ignored, so a re-solicited proposal does not record anything twice.
    """

    def __init__(
        self,
        size: int,
        player: Player,
        config: Optional[AutomatedConfig] = None,
        *,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        self.player = Player(player)
        self.config = config or AutomatedConfig()
        self.rng = rng or np.random.default_rng()
        self.board = Board(size)
        self.tracker = ComponentTracker(self.board.neighbors)

    @property
    def size(self) -> int:
        return self.board.size

    def propose_move(self, last_opponent_move: Optional[Cell]) -> Cell:
        if last_opponent_move is not None:
            self._observe(last_opponent_move, self.player.other())
        if self.board.active_player != self.player:
            raise TurnOrderError(
                f"{self.player.name} asked to move on turn {self.board.turn}; shadow board is out of sync."
            )
        if self.config.strategy == "random":
            cell = self._choose_random()
        else:
            cell = self._choose_by_distance()
        logger.debug("%s proposes %s", self.player.name, cell.as_tuple())
        return cell

    def move_accepted(self, cell: Cell) -> None:
        self._observe(cell, self.player)

    def move_rejected(self, cell: Cell, error: IllegalMoveError) -> None:
        logger.warning("%s move %s rejected: %s", self.player.name, cell.as_tuple(), error)

    def candidate_moves(self) -> List[Cell]:
        """Empty cells next to any tracked component, else the centre area, else anything empty."""
        candidates = {cell for cell in self.tracker.frontier() if self.board.is_empty(cell)}
        if not candidates:
            mid = self.size // 2
            centre = Cell(mid, mid)
            candidates = {c for c in (centre,) + self.board.neighbors[centre] if self.board.is_empty(c)}
        if not candidates:
            candidates = set(self.board.empty_cells())
        return sorted(candidates)

    def _observe(self, cell: Cell, player: Player) -> None:
        if self.board.occupancy_of(cell) == player:
            return
        self.board.apply_move(cell, player)
        self.tracker.add_stone(cell, player)

    def _choose_random(self) -> Cell:
        empty = self.board.empty_cells()
        if not empty:
            raise IllegalMoveError("No empty cells left to play.")
        return empty[int(self.rng.integers(len(empty)))]

    def _choose_by_distance(self) -> Cell:
        candidates = self.candidate_moves()
        if not candidates:
            raise IllegalMoveError("No empty cells left to play.")

        opponent = self.player.other()
        scored: List[Tuple[int, Cell]] = []
        for cell in candidates:
            trial = self.board.copy()
            trial.apply_move(cell, self.player)
            if has_won(trial, trial.neighbors, self.player):
                logger.debug("%s found winning move %s", self.player.name, cell.as_tuple())
                return cell
            mine = self._distance_or_limit(edge_distance(trial, self.player, self.config.search_depth))
            theirs = self._distance_or_limit(edge_distance(trial, opponent, self.config.search_depth))
            scored.append((theirs - mine, cell))

        best_score = max(score for score, _ in scored)
        best = [cell for score, cell in scored if score == best_score]
        if len(best) > 1:
            best = self._closest_to_own_stones(best)
        return best[int(self.rng.integers(len(best)))]

    def _closest_to_own_stones(self, cells: Sequence[Cell]) -> List[Cell]:
        own = list(self.board.cells_of(self.player))
        if not own:
            return list(cells)
        gaps = [
            self._distance_or_limit(
                bridge_distance(self.board, [cell], own, self.player, self.config.search_depth)
            )
            for cell in cells
        ]
        nearest = min(gaps)
        return [cell for cell, gap in zip(cells, gaps) if gap == nearest]

    def _distance_or_limit(self, distance: Optional[int]) -> int:
        if distance is not None:
            return distance
        if self.config.search_depth is not None:
            return self.config.search_depth + 1
        return self.size * self.size + 1
