from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

from hexgame.core import Cell, IllegalMoveError


@runtime_checkable
class MoveSource(Protocol):
    """Supplies the next move for one player.

    ``propose_move`` receives the opponent's previous move (None on the very
    first turn of the game) and may block for as long as it needs. The engine
    reports the fate of every proposal through ``move_accepted`` or
    ``move_rejected``; after a rejection it asks the same source again.
    """

    def propose_move(self, last_opponent_move: Optional[Cell]) -> Cell:
        ...

    def move_accepted(self, cell: Cell) -> None:
        ...

    def move_rejected(self, cell: Cell, error: IllegalMoveError) -> None:
        ...
