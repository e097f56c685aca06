import pytest

from tetris_board import Board, is_valid_placement
from tetris_piece import ActivePiece, ShapeCatalog, freeze

O = freeze([[1, 1], [1, 1]])
I_V = freeze([[1], [1], [1], [1]])


def test_empty_board_dimensions(board):
    assert (board.width, board.height) == (10, 20)
    assert len(board.rows) == 20 and all(len(r) == 10 for r in board.rows)
    assert board.occupied_count() == 0


def test_inside_empty_board_is_valid(board):
    assert is_valid_placement(O, (0, 0), board)
    assert is_valid_placement(O, (8, 18), board)


@pytest.mark.parametrize("origin", [(-1, 0), (9, 0), (4, 19), (0, 25)])
def test_outside_walls_or_floor_is_invalid(board, origin):
    assert not is_valid_placement(O, origin, board)


def test_cells_above_top_only_check_walls(board):
    assert is_valid_placement(I_V, (0, -3), board)
    assert not is_valid_placement(I_V, (-1, -3), board)
    assert not is_valid_placement(I_V, (10, -3), board)


def test_zero_bits_do_not_collide(board):
    s = freeze([[0, 1], [0, 1]])
    assert is_valid_placement(s, (-1, 0), board)


def test_overlap_is_invalid(board):
    kind = ShapeCatalog().kind("O")
    b = board.locked(ActivePiece(kind, 0, 4, 18))
    assert not is_valid_placement(O, (5, 17), b)
    assert is_valid_placement(O, (4, 16), b)


def test_lock_writes_only_piece_cells(board):
    kind = ShapeCatalog().kind("T")
    p = ActivePiece(kind, 0, 2, 5)
    b = board.locked(p)
    for y in range(b.height):
        for x in range(b.width):
            expected = "T" if (x, y) in p.cells() else None
            assert b.cell(x, y) == expected
    assert board.occupied_count() == 0


def test_lock_keeps_existing_cells(board):
    cat = ShapeCatalog()
    b1 = board.locked(ActivePiece(cat.kind("O"), 0, 0, 18))
    b2 = b1.locked(ActivePiece(cat.kind("I"), 0, 2, 19))
    assert b2.cell(0, 18) == "O" and b2.cell(1, 19) == "O"
    assert [b2.cell(x, 19) for x in range(2, 6)] == ["I"] * 4
    assert b2.occupied_count() == 8


def test_lock_drops_cells_above_top(board):
    kind = ShapeCatalog().kind("I")
    b = board.locked(ActivePiece(kind, 1, 3, -2))
    assert b.occupied_count() == 2
    assert b.cell(3, 0) == "I" and b.cell(3, 1) == "I"


def test_out_of_range_cell_is_a_contract_violation(board):
    with pytest.raises(AssertionError):
        board.cell(10, 0)
    with pytest.raises(AssertionError):
        board.cell(0, -1)


def test_full_rows(board):
    rows = [list(r) for r in board.rows]
    rows[19] = ["O"] * 10
    rows[18] = ["O"] * 9 + [None]
    b = Board(10, 20, tuple(tuple(r) for r in rows))
    assert b.full_rows() == [19]


def test_empty_requires_positive_size():
    with pytest.raises(AssertionError):
        Board.empty(0, 20)
