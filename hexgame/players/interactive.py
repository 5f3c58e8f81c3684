from __future__ import annotations

import sys
from typing import Callable, Iterable, Optional

from hexgame.core import Cell, CellTakenError, IllegalMoveError

QUIT_TOKENS = frozenset({":q", "q", "quit", "exit"})


def parse_move(line: str, size: int) -> Optional[Cell]:
    """Turn "row col" (1-based) into a 0-based Cell, or None if malformed."""
    parts = line.split()
    if len(parts) != 2:
        return None
    try:
        row, col = int(parts[0]), int(parts[1])
    except ValueError:
        return None
    if not (1 <= row <= size and 1 <= col <= size):
        return None
    return Cell(row - 1, col - 1)


class InteractiveMoveSource:
    """Reads moves from a line-based console.

    Malformed lines are handled here and never reach the engine. Typing a quit
    token, or closing the input stream, ends the whole process with status 0.
    """

    def __init__(
        self,
        size: int,
        *,
        input_fn: Optional[Callable[[str], str]] = None,
        output_fn: Optional[Callable[[str], None]] = None,
        prompt: str = "",
        quit_tokens: Iterable[str] = QUIT_TOKENS,
    ) -> None:
        self.size = size
        self.prompt = prompt
        self._input = input_fn or input
        self._output = output_fn or print
        self._quit_tokens = frozenset(quit_tokens)

    @property
    def retry_message(self) -> str:
        return f"Try again.  Enter two numbers between 1 and {self.size}."

    def propose_move(self, last_opponent_move: Optional[Cell]) -> Cell:
        while True:
            try:
                line = self._input(self.prompt)
            except EOFError:
                self._quit()
            if line.strip() in self._quit_tokens:
                self._quit()
            cell = parse_move(line, self.size)
            if cell is not None:
                return cell
            self._output(self.retry_message)

    def move_accepted(self, cell: Cell) -> None:
        pass

    def move_rejected(self, cell: Cell, error: IllegalMoveError) -> None:
        if isinstance(error, CellTakenError):
            self._output("Try again.  That cell is already taken.")
        else:
            self._output(self.retry_message)

    def _quit(self) -> None:
        self._output("Bye.")
        sys.exit(0)
