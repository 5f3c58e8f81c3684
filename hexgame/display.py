"""Plain-text board rendering for terminals.

First's glyph runs along the top and bottom (the rows it must join), Second's
along the left and right. Odd rows are shifted by half a cell so that the
drawn neighbors of a cell are exactly its lattice neighbors.
"""

from __future__ import annotations

from typing import Collection, List

from hexgame.core import BoardSnapshot, Cell, GameState, Player, Won

EMPTY_GLYPH = "."
HIGHLIGHT_GLYPHS = {Player.FIRST: "#", Player.SECOND: "@"}


def _column_header(size: int) -> List[str]:
    digits = len(str(size))
    lines = []
    for place in range(digits - 1, -1, -1):
        row = []
        for col in range(1, size + 1):
            number = str(col).rjust(digits)
            row.append(number[digits - 1 - place])
        lines.append(" ".join(row))
    return lines


def render_board(snapshot: BoardSnapshot, highlight: Collection[Cell] = ()) -> str:
    size = snapshot.size
    label_width = len(str(size))
    margin = " " * (label_width + 1)
    first, second = Player.FIRST.glyph, Player.SECOND.glyph

    lines = [margin + "  " + header for header in _column_header(size)]
    lines.append(margin + "  " + " ".join([first] * size))
    for row in range(size):
        shift = " " if row % 2 else ""
        cells = []
        for col in range(size):
            cell = Cell(row, col)
            owner = snapshot.occupancy_of(cell)
            if owner is None:
                cells.append(EMPTY_GLYPH)
            elif cell in highlight:
                cells.append(HIGHLIGHT_GLYPHS[owner])
            else:
                cells.append(owner.glyph)
        label = str(row + 1).rjust(label_width)
        lines.append(f"{label} {shift}{second} {' '.join(cells)} {second}")
    bottom_shift = " " if (size - 1) % 2 else ""
    lines.append(margin + bottom_shift + "  " + " ".join([first] * size))
    return "\n".join(lines)


def describe_state(state: GameState) -> str:
    if isinstance(state, Won):
        return f"Player {state.winner.glyph} won!"
    return f"Player {state.next_player.glyph} to move"
