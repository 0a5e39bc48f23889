"""Tests for cell helpers, pieces and enums."""

from quadchess.core.enums import PieceType
from quadchess.core.piece import Piece
from quadchess.core.types import Cell, cell_name, is_valid_cell, iter_cells, make_cell


def test_cell_is_col_row_pair() -> None:
    cell = make_cell(3, 9)
    assert cell == (3, 9)
    assert cell.col == 3 and cell.row == 9
    assert str(cell) == cell_name(cell) == "3,9"


def test_is_valid_cell() -> None:
    assert is_valid_cell(0, 0)
    assert is_valid_cell(13, 13)
    assert not is_valid_cell(14, 0)
    assert not is_valid_cell(0, -1)
    assert is_valid_cell(7, 7, size=8) and not is_valid_cell(8, 7, size=8)


def test_iter_cells_covers_board() -> None:
    cells = list(iter_cells(14))
    assert len(cells) == 196
    assert len(set(cells)) == 196


def test_piece_type_identifiers() -> None:
    assert [p.value for p in PieceType] == [
        "king", "general", "elephant", "horse", "chariot", "pawn",
    ]
    assert str(PieceType.HORSE) == "horse"


def test_piece_equality_is_identity() -> None:
    a = Piece(1, PieceType.PAWN, 0)
    b = Piece(1, PieceType.PAWN, 0)
    assert a != b
    assert a == a
    assert str(a) == "P0"
