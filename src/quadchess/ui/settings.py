"""User-configurable application settings."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # General
    language: str = "English"
    log_level: str = "WARNING"

    # Board
    show_coordinates: bool = True
    follow_active_player: bool = True  # rotate the view on every turn change
