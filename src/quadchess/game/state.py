"""Game state — board, registry, turn order, selection and move history."""

from __future__ import annotations

from dataclasses import dataclass, field

from quadchess.core.board import Board
from quadchess.core.enums import PieceType
from quadchess.core.layout import setup_initial_positions
from quadchess.core.piece import Piece
from quadchess.core.registry import PieceRegistry
from quadchess.core.types import Cell
from quadchess.game.config import GameConfig
from quadchess.game.interfaces import InteractionPhase
from quadchess.game.turn import TurnTracker


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """A single entry in the move history."""

    player: int
    piece_id: int
    piece_type: PieceType
    from_cell: Cell
    to_cell: Cell
    captured_type: PieceType | None = None
    captured_player: int | None = None

    @property
    def was_capture(self) -> bool:
        return self.captured_type is not None


@dataclass
class GameState:
    """Everything the controller owns, as one constructible object.

    This is a pure data/logic class — no UI. Only :class:`BoardController`
    should call the mutating helpers.
    """

    config: GameConfig = field(default_factory=GameConfig.default)
    board: Board = field(init=False)
    registry: PieceRegistry = field(init=False)
    turns: TurnTracker = field(init=False)
    selected: Piece | None = field(default=None, init=False)
    move_history: list[MoveRecord] = field(default_factory=list, init=False)

    def __post_init__(self) -> None:
        self.board = Board(self.config.board_size)
        self.registry = PieceRegistry(self.config.player_count)
        self.turns = TurnTracker(self.config.player_count, self.config.first_player)
        self.setup()

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self) -> None:
        """Lay out a fresh board. Every previous piece id becomes dead."""
        setup_initial_positions(self.board, self.registry)
        self.selected = None
        self.move_history.clear()

    # ── Derived state ────────────────────────────────────────────────────

    @property
    def phase(self) -> InteractionPhase:
        if self.selected is None:
            return InteractionPhase.IDLE
        return InteractionPhase.PIECE_SELECTED

    @property
    def current_player(self) -> int:
        return self.turns.current

    def piece_at(self, cell: Cell) -> Piece | None:
        return self.board.get(cell)

    # ── Mutation helpers ─────────────────────────────────────────────────

    def capture(self, victim: Piece) -> None:
        """Take *victim* off the board and out of the registry."""
        if victim.cell is not None and self.board.get(victim.cell) is victim:
            self.board.clear(victim.cell)
        self.registry.destroy(victim)

    def relocate(self, piece: Piece, dest: Cell) -> Cell:
        """Clear *piece*'s cell, put it on *dest* and return the old cell."""
        origin = piece.cell
        assert origin is not None, f"{piece!r} is not on the board"
        self.board.clear(origin)
        self.board.place(piece, dest)
        return origin
