"""Tests for GameConfig."""

import dataclasses

import pytest

from quadchess.core.enums import PieceType
from quadchess.core.errors import InvalidInputError
from quadchess.game.config import GameConfig, PlayerInfo


def test_defaults() -> None:
    config = GameConfig.default()
    assert config.board_size == 14
    assert [p.name for p in config.players] == ["Red", "Green", "Blue", "Yellow"]
    assert config.player(0).color == "#c0392b"
    assert config.piece_types == tuple(PieceType)
    assert config.player_count == 4


def test_is_frozen() -> None:
    config = GameConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.board_size = 10  # type: ignore[misc]


def test_rejects_tiny_board() -> None:
    with pytest.raises(InvalidInputError, match="at least"):
        GameConfig(board_size=6)


def test_rejects_wrong_player_count() -> None:
    with pytest.raises(InvalidInputError, match="Exactly 4"):
        GameConfig(players=(PlayerInfo("A", "#000000"), PlayerInfo("B", "#ffffff")))


def test_requires_layout_piece_types() -> None:
    with pytest.raises(InvalidInputError, match="king"):
        GameConfig(piece_types=(PieceType.PAWN, PieceType.HORSE))


def test_rejects_bad_first_player() -> None:
    with pytest.raises(InvalidInputError):
        GameConfig(first_player=4)
