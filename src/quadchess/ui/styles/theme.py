"""Visual theme constants and QSS styles for Quadchess."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor

from quadchess.game.config import GameConfig

_ALT_SHADE = 0.82


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the board.

    Each player's quadrant is tinted with that player's colour; the
    alternating tiles use a darker shade of the same colour.
    """

    quadrant_base: tuple[QColor, ...]
    quadrant_alt: tuple[QColor, ...]
    piece_fill: tuple[QColor, ...]
    piece_outline: QColor
    piece_text: QColor
    highlight_selected: QColor  # selected piece's cell
    coord_text: QColor
    background: QColor

    @classmethod
    def for_config(cls, config: GameConfig) -> BoardTheme:
        base = tuple(QColor(p.color) for p in config.players)
        return cls(
            quadrant_base=base,
            quadrant_alt=tuple(shade(c, _ALT_SHADE) for c in base),
            piece_fill=tuple(QColor(p.color).lighter(115) for p in config.players),
            piece_outline=QColor(20, 20, 24),
            piece_text=QColor(250, 250, 250),
            highlight_selected=QColor(255, 255, 0, 110),  # yellow transparent
            coord_text=QColor(235, 235, 235, 170),
            background=QColor(15, 20, 31),  # night platform
        )


def shade(color: QColor, factor: float) -> QColor:
    """Scale the RGB channels of *color* by *factor*."""
    return QColor(
        int(color.red() * factor),
        int(color.green() * factor),
        int(color.blue() * factor),
        color.alpha(),
    )


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow {
    background: #0f141f;
}

QLabel {
    color: #e0e0e0;
    font-family: "Adwaita Sans", "Helvetica Neue", sans-serif;
}

QListWidget {
    background: #1e1e1e;
    color: #d4d4d4;
    border: 1px solid #3c3c3c;
    font-family: "Adwaita Sans", "Consolas", monospace;
    font-size: 13px;
}

QPushButton {
    background: #3c3c3c;
    color: #e0e0e0;
    border: 1px solid #555;
    border-radius: 4px;
    padding: 6px 14px;
    font-size: 13px;
}
QPushButton:hover {
    background: #505050;
}
QPushButton:pressed {
    background: #264f78;
}

QMenuBar {
    background: #0f141f;
    color: #e0e0e0;
}
QMenuBar::item:selected {
    background: #3c3c3c;
}
QMenu {
    background: #1b2130;
    color: #e0e0e0;
    border: 1px solid #3c3c3c;
}
QMenu::item:selected {
    background: #264f78;
}
"""
