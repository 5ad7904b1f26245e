import pytest

from connect5.models import DiscColor
from connect5.services.game import Board, ROWS, COLUMNS

RED = DiscColor.RED
BLUE = DiscColor.BLUE


def place(board, cells, color):
    for row, column in cells:
        board.grid[row][column] = color


def test_new_board_is_empty():
    board = Board()
    assert len(board.grid) == ROWS
    assert all(len(row) == COLUMNS for row in board.grid)
    assert all(cell is None for row in board.grid for cell in row)


def test_drop_lands_in_lowest_empty_row():
    board = Board()
    assert board.drop(2, RED)
    assert board.cell(ROWS - 1, 2) is RED
    assert board.drop(2, BLUE)
    assert board.cell(ROWS - 2, 2) is BLUE
    # other columns untouched
    assert all(board.cell(r, 3) is None for r in range(ROWS))


def test_drop_into_full_column_fails_and_leaves_grid_unchanged():
    board = Board()
    for i in range(ROWS):
        assert board.drop(0, RED if i % 2 else BLUE)
    before = [row[:] for row in board.grid]
    assert board.drop(0, RED) is False
    assert board.grid == before


def test_drop_outside_board_raises():
    board = Board()
    with pytest.raises(IndexError):
        board.drop(COLUMNS, RED)
    with pytest.raises(IndexError):
        board.drop(-1, RED)


def test_horizontal_five_wins():
    board = Board()
    place(board, [(3, c) for c in range(0, 5)], RED)
    assert board.check_win(RED)
    assert not board.check_win(BLUE)


def test_vertical_five_wins():
    board = Board()
    for _ in range(5):
        board.drop(8, BLUE)
    assert board.check_win(BLUE)


def test_backslash_diagonal_wins():
    board = Board()
    place(board, [(1, 2), (2, 3), (3, 4), (4, 5), (5, 6)], RED)
    assert board.check_win(RED)


def test_slash_diagonal_wins():
    board = Board()
    place(board, [(5, 3), (4, 4), (3, 5), (2, 6), (1, 7)], BLUE)
    assert board.check_win(BLUE)


def test_slash_diagonal_touching_top_row_and_first_column_wins():
    # Both ends of this run sit on a low-index edge
    board = Board()
    place(board, [(4, 0), (3, 1), (2, 2), (1, 3), (0, 4)], RED)
    assert board.check_win(RED)


def test_run_touching_index_zero_counts_edge_cell():
    board = Board()
    place(board, [(5, c) for c in range(0, 4)], RED)
    assert board.run_length(5, 3, 0, 1) == 4
    assert board.run_length(5, 0, 0, 1) == 4


def test_blocked_four_does_not_win():
    board = Board()
    place(board, [(5, c) for c in range(1, 5)], RED)
    place(board, [(5, 0), (5, 5)], BLUE)
    assert not board.check_win(RED)


def test_four_with_gap_does_not_win():
    board = Board()
    place(board, [(2, 0), (2, 1), (2, 2), (2, 3), (2, 5)], BLUE)
    assert not board.check_win(BLUE)


def test_render_brackets_every_cell_top_row_first():
    board = Board()
    board.drop(0, RED)
    board.drop(1, BLUE)
    lines = board.render().splitlines()
    assert len(lines) == ROWS
    assert lines[0] == '[ ]' * COLUMNS
    assert lines[-1] == '[R][B]' + '[ ]' * (COLUMNS - 2)


def test_is_full_and_clear():
    board = Board()
    for column in range(COLUMNS):
        for _ in range(ROWS):
            board.drop(column, RED)
    assert board.is_full()
    board.clear()
    assert not board.is_full()
    assert board.to_rows() == [[None] * COLUMNS for _ in range(ROWS)]
