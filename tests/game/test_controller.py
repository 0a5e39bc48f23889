"""Tests for BoardController — the select-then-destination state machine."""

from __future__ import annotations

from typing import Any

import pytest

from quadchess.core.enums import PieceType
from quadchess.core.errors import InvalidCellError, UnknownPieceError
from quadchess.core.piece import Piece
from quadchess.core.types import Cell
from quadchess.game.config import GameConfig
from quadchess.game.controller import BoardController
from quadchess.game.interfaces import InteractionPhase, MoveOutcome, RejectReason


class _Recorder:
    """Collects every controller notification in arrival order."""

    def __init__(self, ctrl: BoardController) -> None:
        self.log: list[tuple[str, Any]] = []
        ev = ctrl.events
        ev.on_move_rejected.append(lambda r: self.log.append(("rejected", r)))
        ev.on_move_committed.append(
            lambda p, t, c: self.log.append(("committed", (p, t, c)))
        )
        ev.on_piece_selected.append(lambda t, p: self.log.append(("selected", (t, p))))
        ev.on_turn_changed.append(lambda p: self.log.append(("turn", p)))
        ev.on_board_reset.append(lambda: self.log.append(("reset", None)))
        ev.on_piece_captured.append(lambda pc: self.log.append(("captured", pc)))

    def kinds(self) -> list[str]:
        return [kind for kind, _ in self.log]


def _piece(ctrl: BoardController, col: int, row: int) -> Piece:
    piece = ctrl.state.piece_at(Cell(col, row))
    assert piece is not None, f"no piece at {col},{row}"
    return piece


def _assert_consistent(ctrl: BoardController) -> None:
    board, registry = ctrl.state.board, ctrl.state.registry
    for cell, piece in board.occupied():
        assert piece.cell == cell
        assert piece in registry
    for piece in registry:
        if piece.cell is not None:
            assert board.get(piece.cell) is piece


@pytest.fixture
def ctrl() -> BoardController:
    return BoardController()


class TestInitialState:
    def test_idle_player_zero(self, ctrl: BoardController) -> None:
        assert ctrl.phase == InteractionPhase.IDLE
        assert ctrl.current_player == 0
        assert ctrl.selected_piece is None
        assert len(ctrl.state.registry) == 36
        _assert_consistent(ctrl)

    def test_custom_first_player(self) -> None:
        ctrl = BoardController(GameConfig(first_player=2))
        assert ctrl.current_player == 2


class TestSelection:
    def test_select_emits_ack(self, ctrl: BoardController) -> None:
        rec = _Recorder(ctrl)
        pawn = _piece(ctrl, 1, 3)
        ctrl.select_piece(pawn.piece_id)
        assert ctrl.phase == InteractionPhase.PIECE_SELECTED
        assert ctrl.selected_piece is pawn
        assert rec.log == [("selected", (PieceType.PAWN, 0))]

    def test_reselect_replaces(self, ctrl: BoardController) -> None:
        a = _piece(ctrl, 1, 3)
        b = _piece(ctrl, 7, 13)
        ctrl.select_piece(a.piece_id)
        ctrl.select_piece(b.piece_id)
        assert ctrl.selected_piece is b
        assert a in ctrl.state.registry
        assert a.cell == Cell(1, 3)

    def test_any_players_piece_may_be_selected(self, ctrl: BoardController) -> None:
        enemy = _piece(ctrl, 12, 5)
        ctrl.select_piece(enemy.piece_id)
        assert ctrl.selected_piece is enemy
        assert ctrl.current_player == 0

    def test_unknown_piece_raises(self, ctrl: BoardController) -> None:
        with pytest.raises(UnknownPieceError):
            ctrl.select_piece(999_999)
        assert ctrl.phase == InteractionPhase.IDLE

    def test_clear_selection(self, ctrl: BoardController) -> None:
        ctrl.select_piece(_piece(ctrl, 1, 3).piece_id)
        ctrl.clear_selection()
        assert ctrl.phase == InteractionPhase.IDLE


class TestActivateCell:
    def test_idle_activation_is_noop(self, ctrl: BoardController) -> None:
        rec = _Recorder(ctrl)
        assert ctrl.activate_cell(5, 5) == MoveOutcome.IGNORED
        assert rec.log == []
        assert ctrl.current_player == 0

    @pytest.mark.parametrize(("col", "row"), [(-1, 0), (14, 2), (3, 14)])
    def test_out_of_range_raises(self, ctrl: BoardController, col: int, row: int) -> None:
        ctrl.select_piece(_piece(ctrl, 1, 3).piece_id)
        with pytest.raises(InvalidCellError):
            ctrl.activate_cell(col, row)
        assert ctrl.phase == InteractionPhase.PIECE_SELECTED

    def test_same_cell_commit(self, ctrl: BoardController) -> None:
        rec = _Recorder(ctrl)
        king = _piece(ctrl, 0, 7)
        ctrl.select_piece(king.piece_id)

        outcome = ctrl.activate_cell(0, 7)

        assert outcome == MoveOutcome.COMMITTED
        assert ctrl.state.piece_at(Cell(0, 7)) is king
        assert king in ctrl.state.registry
        assert ctrl.current_player == 1
        assert "captured" not in rec.kinds()
        _assert_consistent(ctrl)

    def test_move_to_empty_cell(self, ctrl: BoardController) -> None:
        rec = _Recorder(ctrl)
        pawn = _piece(ctrl, 1, 3)
        ctrl.select_piece(pawn.piece_id)

        outcome = ctrl.activate_cell(2, 3)

        assert outcome == MoveOutcome.COMMITTED
        assert ctrl.state.piece_at(Cell(1, 3)) is None
        assert ctrl.state.piece_at(Cell(2, 3)) is pawn
        assert ("committed", (0, PieceType.PAWN, Cell(2, 3))) in rec.log
        assert ctrl.current_player == 1
        assert ctrl.phase == InteractionPhase.IDLE
        _assert_consistent(ctrl)

    def test_notification_order(self, ctrl: BoardController) -> None:
        rec = _Recorder(ctrl)
        ctrl.select_piece(_piece(ctrl, 1, 3).piece_id)
        ctrl.activate_cell(12, 3)
        assert rec.kinds() == ["selected", "captured", "committed", "turn"]

    def test_own_occupation_rejected(self, ctrl: BoardController) -> None:
        rec = _Recorder(ctrl)
        pawn = _piece(ctrl, 1, 3)
        neighbour = _piece(ctrl, 1, 4)
        ctrl.select_piece(pawn.piece_id)

        outcome = ctrl.activate_cell(1, 4)

        assert outcome == MoveOutcome.REJECTED
        assert rec.log[-1] == ("rejected", RejectReason.OWN_OCCUPATION)
        assert RejectReason.OWN_OCCUPATION.value == "own-occupation"
        assert ctrl.selected_piece is pawn
        assert ctrl.current_player == 0
        assert pawn.cell == Cell(1, 3)
        assert neighbour.cell == Cell(1, 4)
        assert "turn" not in rec.kinds()

    def test_rejection_keeps_state_usable(self, ctrl: BoardController) -> None:
        pawn = _piece(ctrl, 1, 3)
        ctrl.select_piece(pawn.piece_id)
        ctrl.activate_cell(0, 7)  # own king
        assert ctrl.activate_cell(2, 3) == MoveOutcome.COMMITTED
        assert pawn.cell == Cell(2, 3)

    def test_capture(self, ctrl: BoardController) -> None:
        rec = _Recorder(ctrl)
        pawn = _piece(ctrl, 1, 3)
        victim = _piece(ctrl, 12, 3)
        assert victim.player == 2
        ctrl.select_piece(pawn.piece_id)

        outcome = ctrl.activate_cell(12, 3)

        assert outcome == MoveOutcome.COMMITTED
        assert victim not in ctrl.state.registry
        assert ctrl.state.registry.get(victim.piece_id) is None
        assert ctrl.state.piece_at(Cell(12, 3)) is pawn
        assert ctrl.state.piece_at(Cell(1, 3)) is None
        assert ("captured", victim) in rec.log
        assert ctrl.current_player == 1
        assert len(ctrl.state.registry) == 35
        _assert_consistent(ctrl)

    def test_captured_piece_cannot_be_selected(self, ctrl: BoardController) -> None:
        victim = _piece(ctrl, 12, 3)
        ctrl.select_piece(_piece(ctrl, 1, 3).piece_id)
        ctrl.activate_cell(12, 3)
        with pytest.raises(UnknownPieceError):
            ctrl.select_piece(victim.piece_id)

    def test_moving_out_of_turn_is_allowed(self, ctrl: BoardController) -> None:
        enemy = _piece(ctrl, 7, 12)  # player 1's pawn while player 0 is to move
        ctrl.select_piece(enemy.piece_id)
        assert ctrl.activate_cell(7, 11) == MoveOutcome.COMMITTED
        assert ctrl.current_player == 1

    def test_move_history(self, ctrl: BoardController) -> None:
        pawn = _piece(ctrl, 1, 3)
        ctrl.select_piece(pawn.piece_id)
        ctrl.activate_cell(12, 3)
        (record,) = ctrl.state.move_history
        assert record.player == 0
        assert record.piece_id == pawn.piece_id
        assert record.from_cell == Cell(1, 3)
        assert record.to_cell == Cell(12, 3)
        assert record.was_capture
        assert record.captured_type == PieceType.PAWN
        assert record.captured_player == 2


class TestTurns:
    def test_manual_advance(self, ctrl: BoardController) -> None:
        rec = _Recorder(ctrl)
        before = {p.piece_id: p.cell for p in ctrl.state.registry}
        assert ctrl.advance_turn() == 1
        assert rec.log == [("turn", 1)]
        assert {p.piece_id: p.cell for p in ctrl.state.registry} == before

    def test_manual_advance_keeps_selection(self, ctrl: BoardController) -> None:
        pawn = _piece(ctrl, 1, 3)
        ctrl.select_piece(pawn.piece_id)

        assert ctrl.advance_turn() == 1
        assert ctrl.selected_piece is pawn
        assert ctrl.phase == InteractionPhase.PIECE_SELECTED

        assert ctrl.activate_cell(2, 3) == MoveOutcome.COMMITTED
        assert ctrl.state.piece_at(Cell(2, 3)) is pawn
        assert ctrl.current_player == 2
        assert ctrl.phase == InteractionPhase.IDLE

    def test_turn_fires_once_per_commit(self, ctrl: BoardController) -> None:
        rec = _Recorder(ctrl)
        ctrl.select_piece(_piece(ctrl, 1, 3).piece_id)
        ctrl.activate_cell(2, 3)
        ctrl.select_piece(_piece(ctrl, 3, 12).piece_id)
        ctrl.activate_cell(3, 11)
        assert [v for k, v in rec.log if k == "turn"] == [1, 2]

    def test_sequence_wraps(self, ctrl: BoardController) -> None:
        seen = []
        ctrl.events.on_turn_changed.append(seen.append)
        for _ in range(5):
            ctrl.advance_turn()
        assert seen == [1, 2, 3, 0, 1]


class TestReset:
    def test_reset_restores_layout_with_new_ids(self, ctrl: BoardController) -> None:
        rec = _Recorder(ctrl)
        ctrl.select_piece(_piece(ctrl, 1, 3).piece_id)
        ctrl.activate_cell(12, 3)
        old = {p.piece_id for p in ctrl.state.registry}

        ctrl.reset_board()

        assert rec.log[-1] == ("reset", None)
        assert len(ctrl.state.registry) == 36
        assert old.isdisjoint(p.piece_id for p in ctrl.state.registry)
        assert ctrl.state.piece_at(Cell(12, 3)).player == 2  # type: ignore[union-attr]
        assert ctrl.state.move_history == []
        _assert_consistent(ctrl)

    def test_reset_twice_is_deterministic(self, ctrl: BoardController) -> None:
        def snapshot() -> dict[Cell, tuple[PieceType, int]]:
            return {c: (p.piece_type, p.player) for c, p in ctrl.state.board.occupied()}

        ctrl.reset_board()
        first, first_ids = snapshot(), {p.piece_id for p in ctrl.state.registry}
        ctrl.reset_board()
        second, second_ids = snapshot(), {p.piece_id for p in ctrl.state.registry}
        assert first == second
        assert first_ids.isdisjoint(second_ids)

    def test_reset_clears_selection(self, ctrl: BoardController) -> None:
        stale = _piece(ctrl, 1, 3)
        ctrl.select_piece(stale.piece_id)
        ctrl.reset_board()
        assert ctrl.phase == InteractionPhase.IDLE
        assert ctrl.activate_cell(2, 3) == MoveOutcome.IGNORED
        with pytest.raises(UnknownPieceError):
            ctrl.select_piece(stale.piece_id)

    def test_reset_keeps_current_player(self, ctrl: BoardController) -> None:
        ctrl.advance_turn()
        ctrl.reset_board()
        assert ctrl.current_player == 1
