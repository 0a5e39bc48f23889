"""UI/game state synchronisation helpers for MainWindow."""

from __future__ import annotations

from collections.abc import Callable

from quadchess.core.enums import PieceType
from quadchess.core.piece import Piece
from quadchess.core.types import Cell, cell_name
from quadchess.game.config import DEFAULT_PLAYERS
from quadchess.game.controller import BoardController
from quadchess.game.interfaces import RejectReason
from quadchess.ui.board.board_view import BoardView
from quadchess.ui.i18n import t
from quadchess.ui.panels.move_log import MoveLogPanel


class GameSync:
    """Applies controller notifications to UI widgets.

    The controller never sees a widget; everything visual is driven from
    here, keyed by piece id.
    """

    __slots__ = (
        "_controller",
        "_board_view",
        "_move_log",
        "_set_status",
        "follow_active_player",
    )

    def __init__(
        self,
        *,
        controller: BoardController,
        board_view: BoardView,
        move_log: MoveLogPanel,
        set_status: Callable[[str], None],
        follow_active_player: bool = True,
    ) -> None:
        self._controller = controller
        self._board_view = board_view
        self._move_log = move_log
        self._set_status = set_status
        self.follow_active_player = follow_active_player

    def connect(self) -> None:
        """Subscribe to controller events."""
        events = self._controller.events
        events.on_piece_selected.append(self.on_piece_selected)
        events.on_move_rejected.append(self.on_move_rejected)
        events.on_piece_captured.append(self.on_piece_captured)
        events.on_move_committed.append(self.on_move_committed)
        events.on_turn_changed.append(self.on_turn_changed)
        events.on_board_reset.append(self.on_board_reset)

    def disconnect(self) -> None:
        events = self._controller.events
        for handlers, cb in (
            (events.on_piece_selected, self.on_piece_selected),
            (events.on_move_rejected, self.on_move_rejected),
            (events.on_piece_captured, self.on_piece_captured),
            (events.on_move_committed, self.on_move_committed),
            (events.on_turn_changed, self.on_turn_changed),
            (events.on_board_reset, self.on_board_reset),
        ):
            if cb in handlers:
                handlers.remove(cb)

    # ── Full sync ────────────────────────────────────────────────────────

    def sync_all(self) -> None:
        """Redraw every piece and refresh turn indicators."""
        state = self._controller.state
        self._board_view.board_scene.set_pieces(state.registry)
        selected = state.selected
        self._board_view.board_scene.set_selected(
            selected.cell if selected is not None else None
        )
        self._show_turn(state.current_player, rotate=self.follow_active_player)

    # ── Event handlers ───────────────────────────────────────────────────

    def on_piece_selected(self, piece_type: PieceType, player: int) -> None:
        s = t()
        piece_name = s.piece_name(piece_type)
        player_name = self._player_name(player)
        self._move_log.add_entry(s.log_selected.format(piece=piece_name, player=player_name))
        selected = self._controller.state.selected
        self._board_view.board_scene.set_selected(
            selected.cell if selected is not None else None
        )
        self._set_status(s.status_selected.format(piece=piece_name, player=player_name))

    def on_move_rejected(self, reason: RejectReason) -> None:
        if reason == RejectReason.OWN_OCCUPATION:
            self._move_log.add_entry(t().log_rejected_own)

    def on_piece_captured(self, piece: Piece) -> None:
        s = t()
        self._board_view.board_scene.remove_piece(piece.piece_id)
        self._move_log.add_entry(
            s.log_captured.format(
                player=self._player_name(piece.player),
                piece=s.piece_name(piece.piece_type),
            )
        )

    def on_move_committed(self, player: int, piece_type: PieceType, dest: Cell) -> None:
        s = t()
        history = self._controller.state.move_history
        scene = self._board_view.board_scene
        if history:
            scene.move_piece(history[-1].piece_id, dest)
        scene.set_selected(None)
        self._move_log.add_entry(
            s.log_moved.format(
                player=self._player_name(player),
                piece=s.piece_name(piece_type),
                cell=cell_name(dest),
            )
        )

    def on_turn_changed(self, player: int) -> None:
        self._show_turn(player, rotate=self.follow_active_player)

    def on_board_reset(self) -> None:
        self.sync_all()
        self._move_log.add_entry(t().log_board_reset)

    def log_manual_turn(self) -> None:
        self._move_log.add_entry(t().log_turn_skipped)

    # ── Helpers ──────────────────────────────────────────────────────────

    def update_status(self) -> None:
        self._set_status(
            t().status_turn.format(
                player=self._player_name(self._controller.state.current_player)
            )
        )

    def refresh_turn(self) -> None:
        """Redraw the turn banner and status in the active language."""
        self._show_turn(self._controller.current_player, rotate=False)

    def _show_turn(self, player: int, *, rotate: bool) -> None:
        info = self._controller.config.player(player)
        self._move_log.set_current_player(self._player_name(player), info.color)
        if rotate:
            self._board_view.set_perspective(player)
        self.update_status()

    def _player_name(self, player: int) -> str:
        """Localised name for the default seats, configured name otherwise."""
        config = self._controller.config
        if config.players == DEFAULT_PLAYERS:
            return t().player_names[player]
        return config.player(player).name
