"""Quadchess — a four-player board with a select-then-move interaction model."""

__version__ = "0.1.0"
