from __future__ import annotations

from typing import Iterable, List, Optional, Tuple, Union

from hexgame.core import Cell, IllegalMoveError, MoveSourceExhausted


class ScriptedMoveSource:
    """Plays a fixed list of moves in order, skipping none."""

    def __init__(self, moves: Iterable[Union[Cell, Tuple[int, int]]]) -> None:
        self._moves: List[Cell] = [m if isinstance(m, Cell) else Cell(*m) for m in moves]
        self._position = 0
        self.accepted: List[Cell] = []
        self.rejected: List[Tuple[Cell, IllegalMoveError]] = []
        self.seen_opponent_moves: List[Optional[Cell]] = []

    @property
    def remaining(self) -> int:
        return len(self._moves) - self._position

    def propose_move(self, last_opponent_move: Optional[Cell]) -> Cell:
        self.seen_opponent_moves.append(last_opponent_move)
        if self._position >= len(self._moves):
            raise MoveSourceExhausted("Scripted move source has no moves left.")
        cell = self._moves[self._position]
        self._position += 1
        return cell

    def move_accepted(self, cell: Cell) -> None:
        self.accepted.append(cell)

    def move_rejected(self, cell: Cell, error: IllegalMoveError) -> None:
        self.rejected.append((cell, error))
