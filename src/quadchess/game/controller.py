"""BoardController — the select-then-destination interaction state machine.

Coordinates: GameState (board, registry, turn order, selection).
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from quadchess.core.enums import PieceType
from quadchess.core.errors import InvalidCellError
from quadchess.core.piece import Piece
from quadchess.core.types import Cell
from quadchess.game.config import GameConfig
from quadchess.game.interfaces import (
    IBoardController,
    InteractionPhase,
    MoveOutcome,
    RejectReason,
)
from quadchess.game.state import GameState, MoveRecord

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

RejectedCallback = Callable[[RejectReason], None]
CommittedCallback = Callable[[int, PieceType, Cell], None]  # player, type, dest
SelectedCallback = Callable[[PieceType, int], None]  # type, player
TurnCallback = Callable[[int], None]  # new player
ResetCallback = Callable[[], None]
CapturedCallback = Callable[[Piece], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move_rejected: list[RejectedCallback] = field(default_factory=list)
    on_move_committed: list[CommittedCallback] = field(default_factory=list)
    on_piece_selected: list[SelectedCallback] = field(default_factory=list)
    on_turn_changed: list[TurnCallback] = field(default_factory=list)
    on_board_reset: list[ResetCallback] = field(default_factory=list)
    on_piece_captured: list[CapturedCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class BoardController(IBoardController):
    """Owns the game state and applies input events to it.

    States: ``IDLE`` (nothing selected) and ``PIECE_SELECTED``. Picking a
    piece always selects it, whoever owns it and whoever's turn it is.
    Activating a cell with a piece selected either rejects (the cell holds
    another piece of the same owner) or commits the move and passes the turn.

    Thread-safety: every method runs to completion on the caller's thread
    (the Qt main thread); no state is touched asynchronously.
    """

    __slots__ = ("_state", "events")

    def __init__(self, config: GameConfig | None = None) -> None:
        self.events = GameEvents()
        self._state = GameState(config or GameConfig.default())
        self._state.turns.subscribe(self._emit_turn_changed)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def config(self) -> GameConfig:
        return self._state.config

    @property
    def phase(self) -> InteractionPhase:
        return self._state.phase

    @property
    def selected_piece(self) -> Piece | None:
        return self._state.selected

    @property
    def current_player(self) -> int:
        return self._state.turns.current

    # ── IBoardController impl ────────────────────────────────────────────

    def select_piece(self, piece_id: int) -> None:
        piece = self._state.registry.require(piece_id)
        self._state.selected = piece
        _LOGGER.debug("Selected %r", piece)
        self._emit_piece_selected(piece)

    def activate_cell(self, col: int, row: int) -> MoveOutcome:
        size = self._state.board.size
        if not (0 <= col < size and 0 <= row < size):
            raise InvalidCellError(col, row, size)

        piece = self._state.selected
        if piece is None:
            return MoveOutcome.IGNORED

        dest = Cell(col, row)
        occupant = self._state.board.get(dest)

        # The mover itself on its own cell is not an own-occupation.
        if (
            occupant is not None
            and occupant is not piece
            and occupant.player == piece.player
        ):
            _LOGGER.debug("Rejected %r -> %s: own occupation", piece, dest)
            self._emit_move_rejected(RejectReason.OWN_OCCUPATION)
            return MoveOutcome.REJECTED

        self._commit(piece, dest, occupant if occupant is not piece else None)
        return MoveOutcome.COMMITTED

    def advance_turn(self) -> int:
        return self._state.turns.advance()

    def reset_board(self) -> None:
        self._state.setup()
        _LOGGER.debug("Board reset with %d pieces", len(self._state.registry))
        self._emit_board_reset()

    def clear_selection(self) -> None:
        """Drop the pending selection without any notification."""
        self._state.selected = None

    # ── Internal helpers ─────────────────────────────────────────────────

    def _commit(self, piece: Piece, dest: Cell, victim: Piece | None) -> None:
        state = self._state
        captured_type: PieceType | None = None
        captured_player: int | None = None

        # Capture and placement are separate steps.
        if victim is not None:
            captured_type, captured_player = victim.piece_type, victim.player
            state.capture(victim)
            _LOGGER.debug("%r captured %r", piece, victim)
            self._emit_piece_captured(victim)

        origin = state.relocate(piece, dest)
        state.move_history.append(
            MoveRecord(
                player=piece.player,
                piece_id=piece.piece_id,
                piece_type=piece.piece_type,
                from_cell=origin,
                to_cell=dest,
                captured_type=captured_type,
                captured_player=captured_player,
            )
        )
        self._emit_move_committed(piece.player, piece.piece_type, dest)
        state.selected = None
        state.turns.advance()

    def _emit_move_rejected(self, reason: RejectReason) -> None:
        for cb in self.events.on_move_rejected:
            cb(reason)

    def _emit_move_committed(self, player: int, piece_type: PieceType, dest: Cell) -> None:
        for cb in self.events.on_move_committed:
            cb(player, piece_type, dest)

    def _emit_piece_selected(self, piece: Piece) -> None:
        for cb in self.events.on_piece_selected:
            cb(piece.piece_type, piece.player)

    def _emit_turn_changed(self, player: int) -> None:
        for cb in self.events.on_turn_changed:
            cb(player)

    def _emit_board_reset(self) -> None:
        for cb in self.events.on_board_reset:
            cb()

    def _emit_piece_captured(self, piece: Piece) -> None:
        for cb in self.events.on_piece_captured:
            cb(piece)
