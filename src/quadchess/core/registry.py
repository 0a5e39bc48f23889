"""PieceRegistry — the set of live pieces and the factory that mints them."""

from __future__ import annotations

import itertools
import logging
from collections.abc import Iterator

from quadchess.core.enums import PieceType
from quadchess.core.errors import InvalidInputError, UnknownPieceError
from quadchess.core.piece import Piece

_LOGGER = logging.getLogger(__name__)


class PieceRegistry:
    """Allocates piece identities and tracks which pieces are alive.

    Ids come from a monotonically increasing counter and are never reused,
    so a reference kept across a reset can never alias a new piece.
    """

    __slots__ = ("_player_count", "_pieces", "_ids")

    def __init__(self, player_count: int = 4) -> None:
        self._player_count = player_count
        self._pieces: dict[int, Piece] = {}
        self._ids = itertools.count(1)

    def create(self, piece_type: PieceType, player: int) -> Piece:
        """Allocate a new piece with no cell."""
        if not 0 <= player < self._player_count:
            raise InvalidInputError(
                f"Player index {player} out of range 0..{self._player_count - 1}"
            )
        piece = Piece(next(self._ids), PieceType(piece_type), player)
        self._pieces[piece.piece_id] = piece
        return piece

    def destroy(self, piece: Piece) -> None:
        """Forget *piece*. Destroying a dead piece is a no-op."""
        if self._pieces.get(piece.piece_id) is piece:
            del self._pieces[piece.piece_id]
            _LOGGER.debug("Destroyed %r", piece)

    def get(self, piece_id: int) -> Piece | None:
        return self._pieces.get(piece_id)

    def require(self, piece_id: int) -> Piece:
        """Return the live piece *piece_id* or raise ``UnknownPieceError``."""
        piece = self._pieces.get(piece_id)
        if piece is None:
            raise UnknownPieceError(piece_id)
        return piece

    def pieces_of(self, player: int) -> list[Piece]:
        return [p for p in self._pieces.values() if p.player == player]

    def clear(self) -> None:
        """Destroy every piece."""
        self._pieces.clear()

    def __contains__(self, piece: object) -> bool:
        return isinstance(piece, Piece) and self._pieces.get(piece.piece_id) is piece

    def __iter__(self) -> Iterator[Piece]:
        return iter(list(self._pieces.values()))

    def __len__(self) -> int:
        return len(self._pieces)
