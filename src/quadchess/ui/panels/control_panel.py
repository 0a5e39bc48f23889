"""ControlPanel — board action buttons."""

from __future__ import annotations

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QHBoxLayout, QPushButton, QWidget

from quadchess.ui.i18n import t


class ControlPanel(QWidget):
    """Buttons for board actions: pass the turn, reset the board."""

    skip_turn_clicked = pyqtSignal()
    reset_clicked = pyqtSignal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._setup_ui()
        self.retranslate_ui()

    def _setup_ui(self) -> None:
        layout = QHBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(6)

        btn_font = QFont("Adwaita Sans", 10)

        self._btn_skip = QPushButton()
        self._btn_skip.setFont(btn_font)
        self._btn_skip.setMinimumHeight(36)
        self._btn_skip.clicked.connect(self.skip_turn_clicked)
        layout.addWidget(self._btn_skip)

        self._btn_reset = QPushButton()
        self._btn_reset.setFont(btn_font)
        self._btn_reset.setMinimumHeight(36)
        self._btn_reset.setStyleSheet(
            "QPushButton { background-color: #6b2020; }"
            "QPushButton:hover { background-color: #8b2020; }"
        )
        self._btn_reset.clicked.connect(self.reset_clicked)
        layout.addWidget(self._btn_reset)

    def retranslate_ui(self) -> None:
        s = t()
        self._btn_skip.setText(s.btn_skip_turn)
        self._btn_reset.setText(s.btn_reset)
