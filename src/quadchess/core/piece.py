"""Piece entity."""

from __future__ import annotations

from dataclasses import dataclass, field

from quadchess.core.enums import PieceType
from quadchess.core.types import Cell

_LETTERS: dict[PieceType, str] = {
    PieceType.KING: "K",
    PieceType.GENERAL: "G",
    PieceType.ELEPHANT: "E",
    PieceType.HORSE: "H",
    PieceType.CHARIOT: "C",
    PieceType.PAWN: "P",
}


@dataclass(eq=False, slots=True)
class Piece:
    """A live game object with a stable identity.

    Two pieces are equal only if they are the same object; ``piece_id`` is
    what crosses the boundary to the renderer.
    """

    piece_id: int
    piece_type: PieceType
    player: int
    cell: Cell | None = field(default=None)

    @property
    def letter(self) -> str:
        """Single-letter tag, e.g. ``'H'`` for a horse."""
        return _LETTERS[self.piece_type]

    def __str__(self) -> str:
        return f"{self.letter}{self.player}"

    def __repr__(self) -> str:
        return (
            f"Piece(id={self.piece_id}, {self.piece_type.value}, "
            f"player={self.player}, cell={self.cell})"
        )
