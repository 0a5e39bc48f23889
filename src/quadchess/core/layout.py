"""Initial piece layout for the four-player board.

Each player owns one edge: a king on the edge-centre cell and a line of
pawns one step inwards, spanning indices ``3 .. N-4``::

    player 3 (north)   pawns on row 1,     king at (N//2, 0)
    player 0 (west)    pawns on col 1,     king at (0, N//2)
    player 2 (east)    pawns on col N-2,   king at (N-1, N//2)
    player 1 (south)   pawns on row N-2,   king at (N//2, N-1)
"""

from __future__ import annotations

import logging
from typing import NamedTuple

from quadchess.core.board import Board
from quadchess.core.enums import PieceType
from quadchess.core.errors import InvalidInputError
from quadchess.core.registry import PieceRegistry
from quadchess.core.types import Cell

_LOGGER = logging.getLogger(__name__)

# Players are laid out in this order; pawns first, then the king.
_SETUP_ORDER = (1, 2, 3, 0)


class Placement(NamedTuple):
    player: int
    piece_type: PieceType
    cell: Cell


def _edge_cells(player: int, size: int) -> tuple[list[Cell], Cell]:
    """Pawn cells and king cell along *player*'s edge."""
    span = range(3, size - 3)
    mid = size // 2
    if player == 1:
        return [Cell(c, size - 2) for c in span], Cell(mid, size - 1)
    if player == 2:
        return [Cell(size - 2, r) for r in span], Cell(size - 1, mid)
    if player == 3:
        return [Cell(c, 1) for c in span], Cell(mid, 0)
    if player == 0:
        return [Cell(1, r) for r in span], Cell(0, mid)
    raise InvalidInputError(f"No edge defined for player {player}")


def initial_layout(size: int) -> list[Placement]:
    """Deterministic list of placements for a fresh board of *size*."""
    placements: list[Placement] = []
    for player in _SETUP_ORDER:
        pawns, king = _edge_cells(player, size)
        placements.extend(Placement(player, PieceType.PAWN, c) for c in pawns)
        placements.append(Placement(player, PieceType.KING, king))
    return placements


def king_cell(player: int, size: int) -> Cell:
    """Edge-centre cell where *player*'s king starts."""
    return _edge_cells(player, size)[1]


def setup_initial_positions(board: Board, registry: PieceRegistry) -> None:
    """Wipe *board* and *registry*, then populate the starting layout."""
    registry.clear()
    board.reset()
    for placement in initial_layout(board.size):
        piece = registry.create(placement.piece_type, placement.player)
        board.place(piece, placement.cell)
    _LOGGER.debug("Initial layout placed %d pieces", len(registry))
