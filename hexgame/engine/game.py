from __future__ import annotations

import logging
from typing import Callable, Optional

from hexgame.core import (
    Board,
    Cell,
    GameOverError,
    GameState,
    IllegalMoveError,
    Player,
    Won,
    derive_state,
)
from hexgame.players.base import MoveSource

logger = logging.getLogger(__name__)

TransitionCallback = Callable[["GameEngine", GameState], None]


class GameEngine:
    """Turn loop joining two move sources to one board.

    The engine does no I/O. Each ``step`` asks the side to move for a cell,
    re-asking the same source for as long as its proposals are rejected, then
    recomputes the game state from the board.
    """

    def __init__(
        self,
        size: int,
        first: MoveSource,
        second: MoveSource,
        *,
        on_transition: Optional[TransitionCallback] = None,
    ) -> None:
        self.board = Board(size)
        self._sources = (first, second)
        self._on_transition = on_transition
        self.rejected_moves = 0

    @property
    def size(self) -> int:
        return self.board.size

    @property
    def state(self) -> GameState:
        return derive_state(self.board)

    def source_for(self, player: Player) -> MoveSource:
        return self._sources[0] if player == Player.FIRST else self._sources[1]

    def step(self) -> GameState:
        state = self.state
        if state.is_terminal:
            raise GameOverError(f"Game already won by {state.winner.name}.")

        player = state.next_player
        source = self.source_for(player)
        last = self.board.last_move
        last_opponent_move: Optional[Cell] = last.cell if last is not None else None

        while True:
            cell = source.propose_move(last_opponent_move)
            try:
                self.board.apply_move(cell, player)
            except IllegalMoveError as exc:
                self.rejected_moves += 1
                logger.debug("Rejected %s from %s: %s", cell.as_tuple(), player.name, exc)
                source.move_rejected(cell, exc)
                continue
            source.move_accepted(cell)
            break

        state = self.state
        if isinstance(state, Won):
            logger.info("%s wins after %d moves", state.winner.name, self.board.turn)
        if self._on_transition is not None:
            self._on_transition(self, state)
        return state

    def run(self) -> Won:
        state = self.state
        while not state.is_terminal:
            state = self.step()
        return state
