"""Board - piece placement on an N×N grid."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from quadchess.core.errors import InvalidCellError
from quadchess.core.piece import Piece
from quadchess.core.types import DEFAULT_BOARD_SIZE, Cell

_LOGGER = logging.getLogger(__name__)


class Board:
    """Mutable square grid holding at most one piece per cell.

    The grid and each piece's ``cell`` attribute are kept in agreement:
    every write goes through :meth:`place` or :meth:`clear`.
    """

    __slots__ = ("_size", "_cells")

    def __init__(self, size: int = DEFAULT_BOARD_SIZE) -> None:
        self._size = size
        self._cells: list[Piece | None] = [None] * (size * size)

    @property
    def size(self) -> int:
        return self._size

    def _index(self, cell: Cell) -> int:
        col, row = cell
        if not (0 <= col < self._size and 0 <= row < self._size):
            raise InvalidCellError(col, row, self._size)
        return row * self._size + col

    # -- Element access -----------------------------------------------------

    def get(self, cell: Cell) -> Piece | None:
        """Occupant of *cell*, or None."""
        return self._cells[self._index(cell)]

    def __getitem__(self, cell: Cell) -> Piece | None:
        return self.get(cell)

    def is_empty(self, cell: Cell) -> bool:
        return self.get(cell) is None

    # -- Mutation -----------------------------------------------------------

    def place(self, piece: Piece, cell: Cell) -> Piece | None:
        """Put *piece* on *cell*, overwriting any occupant.

        The displaced occupant, if any, is detached (its ``cell`` becomes
        None) and returned; destroying it is up to the caller.
        """
        cell = Cell(*cell)
        idx = self._index(cell)

        previous = piece.cell
        if previous is not None and previous != cell:
            prev_idx = self._index(previous)
            if self._cells[prev_idx] is piece:
                self._cells[prev_idx] = None

        displaced = self._cells[idx]
        if displaced is not None and displaced is not piece:
            displaced.cell = None
            _LOGGER.debug("Displaced %r from %s", displaced, cell)
        else:
            displaced = None

        self._cells[idx] = piece
        piece.cell = cell
        return displaced

    def clear(self, cell: Cell) -> Piece | None:
        """Remove the occupant reference at *cell* and return it."""
        idx = self._index(cell)
        piece = self._cells[idx]
        self._cells[idx] = None
        if piece is not None and piece.cell == cell:
            piece.cell = None
        return piece

    def reset(self) -> None:
        """Empty every cell."""
        for piece in self._cells:
            if piece is not None:
                piece.cell = None
        self._cells = [None] * (self._size * self._size)

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> Iterator[tuple[Cell, Piece]]:
        """Yield ``(cell, piece)`` for every occupied cell."""
        for idx, piece in enumerate(self._cells):
            if piece is not None:
                row, col = divmod(idx, self._size)
                yield Cell(col, row), piece

    def pieces_of(self, player: int) -> list[Piece]:
        """All pieces on the board owned by *player*."""
        return [p for _, p in self.occupied() if p.player == player]

    def __len__(self) -> int:
        return sum(1 for p in self._cells if p is not None)

    # -- Dunder helpers -----------------------------------------------------

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(self._size):
            line = []
            for col in range(self._size):
                p = self._cells[row * self._size + col]
                line.append(str(p) if p else "..")
            rows.append(f"{row:2d} {' '.join(line)}")
        return "\n".join(rows)
