"""Abstract interfaces and state enums for the game layer.

:class:`IBoardController` lists the inbound operations the board accepts;
:class:`~quadchess.game.controller.BoardController` implements it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum, IntEnum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from quadchess.game.state import GameState


# ── Interaction FSM states ───────────────────────────────────────────────────


class InteractionPhase(IntEnum):
    """Two-phase select → destination state machine."""

    IDLE = auto()
    PIECE_SELECTED = auto()


class RejectReason(str, Enum):
    """Why a destination was refused."""

    OWN_OCCUPATION = "own-occupation"


class MoveOutcome(IntEnum):
    """Result of activating a cell."""

    IGNORED = auto()  # nothing selected
    REJECTED = auto()
    COMMITTED = auto()


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IBoardController(ABC):
    """Inbound event surface of the board/turn state manager."""

    @property
    @abstractmethod
    def state(self) -> GameState: ...

    @abstractmethod
    def select_piece(self, piece_id: int) -> None:
        """Hold *piece_id* as the piece awaiting a destination."""

    @abstractmethod
    def activate_cell(self, col: int, row: int) -> MoveOutcome:
        """Offer ``(col, row)`` as destination for the selected piece."""

    @abstractmethod
    def advance_turn(self) -> int:
        """Pass the turn without moving. Returns the new player index."""

    @abstractmethod
    def reset_board(self) -> None:
        """Restore the starting layout."""
