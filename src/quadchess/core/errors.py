"""Exceptions raised for invalid caller input."""

from __future__ import annotations


class InvalidInputError(ValueError):
    """The caller passed something the model cannot accept."""


class InvalidCellError(InvalidInputError):
    """A cell coordinate lies outside the board."""

    def __init__(self, col: int, row: int, size: int) -> None:
        super().__init__(f"Cell ({col}, {row}) is outside a {size}x{size} board")
        self.col = col
        self.row = row
        self.size = size


class UnknownPieceError(InvalidInputError):
    """A piece id does not name a live piece."""

    def __init__(self, piece_id: int) -> None:
        super().__init__(f"No live piece with id {piece_id}")
        self.piece_id = piece_id
