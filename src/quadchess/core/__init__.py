"""Core domain layer — board, pieces and layout with zero external dependencies.

Quick start::

    from quadchess.core import Board, Cell, PieceRegistry, setup_initial_positions

    board = Board(14)
    registry = PieceRegistry()
    setup_initial_positions(board, registry)
    print(board.get(Cell(0, 7)))
"""

from quadchess.core.board import Board
from quadchess.core.enums import PieceType
from quadchess.core.errors import InvalidCellError, InvalidInputError, UnknownPieceError
from quadchess.core.layout import (
    Placement,
    initial_layout,
    king_cell,
    setup_initial_positions,
)
from quadchess.core.piece import Piece
from quadchess.core.registry import PieceRegistry
from quadchess.core.types import (
    DEFAULT_BOARD_SIZE,
    Cell,
    cell_name,
    is_valid_cell,
    iter_cells,
    make_cell,
)

__all__ = [
    # Enums
    "PieceType",
    # Types / helpers
    "DEFAULT_BOARD_SIZE",
    "Cell",
    "cell_name",
    "is_valid_cell",
    "iter_cells",
    "make_cell",
    # Errors
    "InvalidCellError",
    "InvalidInputError",
    "UnknownPieceError",
    # Domain objects
    "Board",
    "Piece",
    "PieceRegistry",
    # Layout
    "Placement",
    "initial_layout",
    "king_cell",
    "setup_initial_positions",
]
