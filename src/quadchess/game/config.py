"""Construction-time game configuration."""

from __future__ import annotations

from dataclasses import dataclass, field

from quadchess.core.enums import PieceType
from quadchess.core.errors import InvalidInputError
from quadchess.core.types import DEFAULT_BOARD_SIZE

# The starting layout defines exactly one edge per player.
PLAYER_COUNT = 4
MIN_BOARD_SIZE = 8


@dataclass(frozen=True, slots=True)
class PlayerInfo:
    """Display identity of a seat at the table."""

    name: str
    color: str  # "#rrggbb"


DEFAULT_PLAYERS = (
    PlayerInfo("Red", "#c0392b"),
    PlayerInfo("Green", "#16a34a"),
    PlayerInfo("Blue", "#2563eb"),
    PlayerInfo("Yellow", "#f59e0b"),
)


@dataclass(frozen=True, slots=True)
class GameConfig:
    """Immutable game definition.

    Args:
        board_size: Cells per side.
        players: Seats in turn order; index in this tuple is the player index.
        piece_types: Piece kinds available to the game.
        first_player: Index of the player who moves first.
    """

    board_size: int = DEFAULT_BOARD_SIZE
    players: tuple[PlayerInfo, ...] = field(default=DEFAULT_PLAYERS)
    piece_types: tuple[PieceType, ...] = field(default=tuple(PieceType))
    first_player: int = 0

    def __post_init__(self) -> None:
        if self.board_size < MIN_BOARD_SIZE:
            raise InvalidInputError(
                f"Board size must be at least {MIN_BOARD_SIZE}, got {self.board_size}"
            )
        if len(self.players) != PLAYER_COUNT:
            raise InvalidInputError(
                f"Exactly {PLAYER_COUNT} players are required, got {len(self.players)}"
            )
        missing = {PieceType.KING, PieceType.PAWN} - set(self.piece_types)
        if missing:
            names = ", ".join(sorted(p.value for p in missing))
            raise InvalidInputError(f"Starting layout needs piece types: {names}")
        if not 0 <= self.first_player < len(self.players):
            raise InvalidInputError(f"Invalid first player {self.first_player}")

    @classmethod
    def default(cls) -> GameConfig:
        return cls()

    @property
    def player_count(self) -> int:
        return len(self.players)

    def player(self, index: int) -> PlayerInfo:
        return self.players[index]
