import numpy as np
import pytest

from hexgame.core import Board, Cell, Player, build_neighbor_table, has_won
from hexgame.players import ComponentTracker, ConnectedComponent


def test_bridging_stone_merges_two_singletons():
    tracker = ComponentTracker(build_neighbor_table(5))
    tracker.add_stone(Cell(0, 0), Player.FIRST)
    tracker.add_stone(Cell(0, 2), Player.FIRST)
    assert len(tracker.first) == 2

    merged = tracker.add_stone(Cell(0, 1), Player.FIRST)

    assert len(tracker.first) == 1
    assert tracker.first[0] is merged
    assert merged.cells == {Cell(0, 0), Cell(0, 1), Cell(0, 2)}


def test_non_adjacent_stone_starts_new_component():
    tracker = ComponentTracker(build_neighbor_table(5))
    tracker.add_stone(Cell(0, 0), Player.SECOND)
    tracker.add_stone(Cell(1, 1), Player.SECOND)  # not a neighbor of (0, 0)
    assert len(tracker.second) == 2
    assert tracker.first == []


def test_players_are_tracked_separately():
    tracker = ComponentTracker(build_neighbor_table(4))
    tracker.add_stone(Cell(1, 1), Player.FIRST)
    tracker.add_stone(Cell(1, 2), Player.SECOND)
    assert len(tracker.components(Player.FIRST)) == 1
    assert len(tracker.components(Player.SECOND)) == 1
    assert Cell(1, 2) in tracker.first[0].frontier


def test_frontier_excludes_own_cells():
    table = build_neighbor_table(5)
    component = ConnectedComponent.singleton(Player.FIRST, Cell(2, 2), table)
    component.absorb(Cell(2, 3))
    assert Cell(2, 2) not in component.frontier
    assert Cell(2, 3) not in component.frontier
    assert component.frontier == (set(table[Cell(2, 2)]) | set(table[Cell(2, 3)])) - component.cells


def test_repeated_stone_is_ignored():
    tracker = ComponentTracker(build_neighbor_table(3))
    first = tracker.add_stone(Cell(1, 1), Player.FIRST)
    again = tracker.add_stone(Cell(1, 1), Player.FIRST)
    assert first is again
    assert len(tracker.first) == 1


def test_merge_rejects_other_owner():
    table = build_neighbor_table(3)
    a = ConnectedComponent.singleton(Player.FIRST, Cell(0, 0), table)
    b = ConnectedComponent.singleton(Player.SECOND, Cell(0, 1), table)
    with pytest.raises(ValueError):
        a.merge(b)


def test_edge_contact():
    table = build_neighbor_table(3)
    component = ConnectedComponent.singleton(Player.SECOND, Cell(1, 0), table)
    assert component.touches_start_edge()
    assert not component.touches_terminal_edge()
    component.absorb(Cell(1, 1))
    component.absorb(Cell(1, 2))
    assert component.spans()


@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_components_partition_stones_and_agree_with_win_check(seed):
    size = 6
    rng = np.random.default_rng(seed)
    order = [Cell(r, c) for r in range(size) for c in range(size)]
    rng.shuffle(order)

    board = Board(size)
    tracker = ComponentTracker(board.neighbors)
    for cell in order[:24]:
        record = board.apply_move(cell)
        tracker.add_stone(cell, record.player)

    for player in Player:
        components = tracker.components(player)
        covered = [cell for component in components for cell in component.cells]
        assert len(covered) == len(set(covered))
        assert set(covered) == set(board.cells_of(player))
        # no two components of one player touch each other
        for i, a in enumerate(components):
            for b in components[i + 1:]:
                assert not (a.cells & b.frontier)
        assert tracker.spans(player) == has_won(board, board.neighbors, player)
