"""Cell coordinate type and helpers.

Cells are addressed as ``(col, row)`` with the origin in the north-west
corner: ``col`` grows eastwards and ``row`` grows southwards.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import NamedTuple

DEFAULT_BOARD_SIZE = 14


class Cell(NamedTuple):
    """One addressable board position."""

    col: int
    row: int

    def __str__(self) -> str:
        return f"{self.col},{self.row}"


def make_cell(col: int, row: int) -> Cell:
    return Cell(col, row)


def is_valid_cell(col: int, row: int, size: int = DEFAULT_BOARD_SIZE) -> bool:
    """Check whether ``(col, row)`` lies on a *size*×*size* board."""
    return 0 <= col < size and 0 <= row < size


def cell_name(cell: Cell) -> str:
    """Human-readable name, e.g. ``Cell(1, 4)`` → ``'1,4'``."""
    return f"{cell.col},{cell.row}"


def iter_cells(size: int = DEFAULT_BOARD_SIZE) -> Iterator[Cell]:
    """All cells in column-major order."""
    for col in range(size):
        for row in range(size):
            yield Cell(col, row)
