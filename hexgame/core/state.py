from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Tuple, Union

EMPTY = 0


class Player(IntEnum):
    FIRST = 1
    SECOND = 2

    def other(self) -> "Player":
        return Player.SECOND if self is Player.FIRST else Player.FIRST

    @property
    def glyph(self) -> str:
        return "X" if self is Player.FIRST else "O"


@dataclass(frozen=True, order=True)
class Cell:
    row: int
    col: int

    def as_tuple(self) -> Tuple[int, int]:
        return (self.row, self.col)

    def to_index(self, size: int) -> int:
        return self.row * size + self.col

    @staticmethod
    def from_index(index: int, size: int) -> "Cell":
        if not 0 <= index < size * size:
            raise ValueError(f"Cell index {index} out of range for size {size}.")
        return Cell(index // size, index % size)


@dataclass(frozen=True)
class MoveRecord:
    cell: Cell
    player: Player
    turn: int  # turn counter value before the move was applied


@dataclass(frozen=True)
class InProgress:
    next_player: Player

    @property
    def is_terminal(self) -> bool:
        return False


@dataclass(frozen=True)
class Won:
    winner: Player

    @property
    def is_terminal(self) -> bool:
        return True


GameState = Union[InProgress, Won]


def player_for_turn(turn: int) -> Player:
    return Player.FIRST if turn % 2 == 0 else Player.SECOND
