from hexgame.core import Board, Cell, Player
from hexgame.players import bridge_distance, edge_distance


def test_empty_board_distance_is_board_size():
    board = Board(5)
    assert edge_distance(board, Player.FIRST) == 5
    assert edge_distance(board, Player.SECOND) == 5


def test_own_stones_are_free():
    board = Board.from_moves(4, [(0, 0), (3, 3), (1, 0)])
    assert edge_distance(board, Player.FIRST) == 2


def test_completed_chain_has_zero_distance():
    board = Board.from_moves(2, [(0, 0), (1, 1), (1, 0)])
    assert edge_distance(board, Player.FIRST) == 0


def test_cut_off_player_has_no_distance():
    # Second fills row 1 completely, so First cannot cross it.
    board = Board(3)
    for first, second in [((0, 0), (1, 0)), ((0, 1), (1, 1)), ((2, 2), (1, 2))]:
        board.apply_move(Cell(*first))
        board.apply_move(Cell(*second))
    assert edge_distance(board, Player.FIRST) is None


def test_depth_bound():
    board = Board(6)
    assert edge_distance(board, Player.FIRST, max_depth=3) is None
    assert edge_distance(board, Player.FIRST, max_depth=6) == 6


def test_bridge_distance_between_groups():
    board = Board.from_moves(5, [(2, 0), (0, 4), (2, 3)])
    assert bridge_distance(board, [Cell(2, 0)], [Cell(2, 3)], Player.FIRST) == 2
    assert bridge_distance(board, [Cell(2, 0)], [Cell(2, 3)], Player.FIRST, max_depth=1) is None
    assert bridge_distance(board, [], [Cell(2, 3)], Player.FIRST) is None
