"""Core enumerations for the four-player board."""

from __future__ import annotations

from enum import Enum


class PieceType(str, Enum):
    """Closed set of piece kinds, valued by their identifiers."""

    KING = "king"
    GENERAL = "general"
    ELEPHANT = "elephant"
    HORSE = "horse"
    CHARIOT = "chariot"
    PAWN = "pawn"

    def __str__(self) -> str:
        return self.value
