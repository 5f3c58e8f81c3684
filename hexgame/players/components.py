"""Connected groups of same-owner stones, maintained incrementally.

Every stone a player places either joins the components that list it as a
neighbor or starts a new singleton. When a stone touches several components
they collapse, together with the stone, into one.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Set

from hexgame.core import Cell, NeighborTable, Player, on_start_edge, on_terminal_edge


@dataclass
class ConnectedComponent:
    owner: Player
    table: NeighborTable = field(repr=False)
    cells: Set[Cell] = field(default_factory=set)
    frontier: Set[Cell] = field(default_factory=set)  # adjacent cells outside the component

    @classmethod
    def singleton(cls, owner: Player, cell: Cell, table: NeighborTable) -> "ConnectedComponent":
        component = cls(owner=owner, table=table)
        component.absorb(cell)
        return component

    def touches(self, cell: Cell) -> bool:
        return cell in self.frontier

    def absorb(self, cell: Cell) -> None:
        self.cells.add(cell)
        self.frontier.discard(cell)
        self.frontier.update(n for n in self.table[cell] if n not in self.cells)

    def merge(self, other: "ConnectedComponent") -> None:
        if other.owner != self.owner:
            raise ValueError("Cannot merge components of different owners.")
        self.cells |= other.cells
        self.frontier = (self.frontier | other.frontier) - self.cells

    def touches_start_edge(self) -> bool:
        return any(on_start_edge(cell, self.table.size, self.owner) for cell in self.cells)

    def touches_terminal_edge(self) -> bool:
        return any(on_terminal_edge(cell, self.table.size, self.owner) for cell in self.cells)

    def spans(self) -> bool:
        return self.touches_start_edge() and self.touches_terminal_edge()

    def __contains__(self, cell: object) -> bool:
        return cell in self.cells

    def __len__(self) -> int:
        return len(self.cells)


class ComponentTracker:
    """Component lists for both players, kept in two explicit fields."""

    def __init__(self, table: NeighborTable) -> None:
        self.table = table
        self.first: List[ConnectedComponent] = []
        self.second: List[ConnectedComponent] = []

    def components(self, player: Player) -> List[ConnectedComponent]:
        return self.first if player == Player.FIRST else self.second

    def add_stone(self, cell: Cell, player: Player) -> ConnectedComponent:
        existing = self.component_of(cell, player)
        if existing is not None:
            return existing
        components = self.components(player)
        merged = ConnectedComponent.singleton(player, cell, self.table)
        kept = []
        for component in components:
            if component.touches(cell):
                merged.merge(component)
            else:
                kept.append(component)
        kept.append(merged)
        components[:] = kept
        return merged

    def add_stones(self, cells: Iterable[Cell], player: Player) -> None:
        for cell in cells:
            self.add_stone(cell, player)

    def component_of(self, cell: Cell, player: Player) -> Optional[ConnectedComponent]:
        for component in self.components(player):
            if cell in component:
                return component
        return None

    def frontier(self, player: Optional[Player] = None) -> Set[Cell]:
        players = [player] if player is not None else list(Player)
        result: Set[Cell] = set()
        for p in players:
            for component in self.components(p):
                result |= component.frontier
        return result

    def spans(self, player: Player) -> bool:
        return any(component.spans() for component in self.components(player))
