"""Game management layer — configuration, turn order, state and controller.

Quick start::

    from quadchess.game import BoardController

    ctrl = BoardController()
    ctrl.events.on_turn_changed.append(print)
    pawn = ctrl.state.piece_at(Cell(1, 3))
    ctrl.select_piece(pawn.piece_id)
    ctrl.activate_cell(2, 3)  # prints 1
"""

from quadchess.game.config import GameConfig, PlayerInfo
from quadchess.game.controller import BoardController, GameEvents
from quadchess.game.interfaces import (
    IBoardController,
    InteractionPhase,
    MoveOutcome,
    RejectReason,
)
from quadchess.game.state import GameState, MoveRecord
from quadchess.game.turn import TurnTracker

__all__ = [
    # Interfaces
    "IBoardController",
    "InteractionPhase",
    "MoveOutcome",
    "RejectReason",
    # Concrete
    "BoardController",
    "GameConfig",
    "GameEvents",
    "GameState",
    "MoveRecord",
    "PlayerInfo",
    "TurnTracker",
]
