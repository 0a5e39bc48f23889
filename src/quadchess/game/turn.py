"""TurnTracker — cyclic player order with change notification."""

from __future__ import annotations

import logging
from collections.abc import Callable

from quadchess.core.errors import InvalidInputError

_LOGGER = logging.getLogger(__name__)

TurnListener = Callable[[int], None]  # new player index


class TurnTracker:
    """Holds whose turn it is and advances it ``0 → 1 → … → P-1 → 0``.

    Listeners are the perspective notifier: each :meth:`advance` calls every
    listener exactly once, synchronously, with the new player index, so the
    renderer can turn the board towards that player.
    """

    __slots__ = ("_player_count", "_current", "_listeners")

    def __init__(self, player_count: int = 4, first_player: int = 0) -> None:
        if player_count < 1:
            raise InvalidInputError("At least one player is required")
        if not 0 <= first_player < player_count:
            raise InvalidInputError(f"Invalid first player {first_player}")
        self._player_count = player_count
        self._current = first_player
        self._listeners: list[TurnListener] = []

    @property
    def current(self) -> int:
        return self._current

    @property
    def player_count(self) -> int:
        return self._player_count

    def advance(self) -> int:
        """Move to the next player and notify listeners."""
        self._current = (self._current + 1) % self._player_count
        _LOGGER.debug("Turn passes to player %d", self._current)
        for listener in list(self._listeners):
            listener(self._current)
        return self._current

    def subscribe(self, listener: TurnListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: TurnListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)
