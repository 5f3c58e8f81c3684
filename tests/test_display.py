from hexgame import describe_state, render_board
from hexgame.core import Board, Cell, InProgress, Player, Won, winning_path


def test_render_small_board_layout():
    board = Board.from_moves(3, [(0, 0), (1, 2)])
    lines = render_board(board.snapshot()).splitlines()

    assert lines == [
        "    1 2 3",
        "    X X X",
        "1 O X . . O",
        "2  O . . O O",
        "3 O . . . O",
        "    X X X",
    ]


def test_render_stacks_column_digits_for_large_boards():
    lines = render_board(Board(12).snapshot()).splitlines()
    assert lines[0] == " " * 23 + "1 1 1"
    assert lines[1] == "     1 2 3 4 5 6 7 8 9 0 1 2"
    assert lines[3].startswith(" 1 O ")
    assert lines[4].startswith(" 2  O ")
    assert len(lines) == 2 + 1 + 12 + 1


def test_render_highlights_winning_path():
    board = Board.from_moves(2, [(0, 0), (1, 1), (1, 0)])
    path = winning_path(board, board.neighbors, Player.FIRST)
    text = render_board(board.snapshot(), highlight=path)
    assert text.count("#") == 2


def test_describe_state():
    assert describe_state(Won(Player.FIRST)) == "Player X won!"
    assert describe_state(InProgress(Player.SECOND)) == "Player O to move"
