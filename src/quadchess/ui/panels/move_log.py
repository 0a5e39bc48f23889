"""MoveLogPanel — current player banner and a scrolling log of notices."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QLabel, QListWidget, QVBoxLayout, QWidget

from quadchess.ui.i18n import t


class MoveLogPanel(QWidget):
    """Shows whose turn it is above the list of moves and other notices."""

    MAX_ENTRIES = 500

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._player_name = ""
        self._player_color = "#e0e0e0"
        self._setup_ui()
        self.retranslate_ui()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)

        self._player_label = QLabel()
        self._player_label.setFont(QFont("Adwaita Sans", 12, QFont.Weight.Bold))
        self._player_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._player_label)

        self._header = QLabel()
        self._header.setFont(QFont("Adwaita Sans", 11))
        layout.addWidget(self._header)

        self._list = QListWidget()
        self._list.setSelectionMode(QListWidget.SelectionMode.NoSelection)
        layout.addWidget(self._list, stretch=1)

    def retranslate_ui(self) -> None:
        self._header.setText(t().log_header)
        self._refresh_player_label()

    # ── Public API ───────────────────────────────────────────────────────

    def set_current_player(self, name: str, color: str) -> None:
        self._player_name = name
        self._player_color = color
        self._refresh_player_label()

    def add_entry(self, text: str) -> None:
        """Append a notice and keep the newest one in view."""
        self._list.addItem(text)
        while self._list.count() > self.MAX_ENTRIES:
            self._list.takeItem(0)
        self._list.scrollToBottom()

    def entries(self) -> list[str]:
        return [self._list.item(i).text() for i in range(self._list.count())]

    def _refresh_player_label(self) -> None:
        self._player_label.setText(t().current_player.format(player=self._player_name))
        self._player_label.setStyleSheet(f"color: {self._player_color};")
