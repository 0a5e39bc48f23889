"""MainWindow — top-level window assembling all UI components."""

from __future__ import annotations

import logging

from PyQt6.QtGui import QAction, QActionGroup, QCloseEvent
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QStatusBar,
    QVBoxLayout,
    QWidget,
)

from quadchess.core.errors import InvalidInputError
from quadchess.game.controller import BoardController
from quadchess.ui.board.board_view import BoardView
from quadchess.ui.game_sync import GameSync
from quadchess.ui.i18n import LANGUAGES, set_language, t
from quadchess.ui.panels.control_panel import ControlPanel
from quadchess.ui.panels.move_log import MoveLogPanel
from quadchess.ui.settings import AppSettings

_LOGGER = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Main application window for Quadchess."""

    def __init__(
        self,
        controller: BoardController | None = None,
        settings: AppSettings | None = None,
    ) -> None:
        super().__init__()
        self.setMinimumSize(820, 560)
        self.resize(1100, 760)

        self._controller = controller or BoardController()
        self._settings = settings or AppSettings()
        set_language(self._settings.language)

        self._setup_ui()
        self._setup_menu()
        self._connect_signals()

        self._sync = GameSync(
            controller=self._controller,
            board_view=self._board_view,
            move_log=self._move_log,
            set_status=self._set_status,
            follow_active_player=self._settings.follow_active_player,
        )
        self._sync.connect()
        self._apply_settings()
        self._sync.sync_all()

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QHBoxLayout(central)
        root.setContentsMargins(6, 6, 6, 6)
        root.setSpacing(6)

        # Board (center)
        self._board_view = BoardView(self._controller.config)
        root.addWidget(self._board_view, stretch=3)

        # Right panel
        right = QVBoxLayout()
        right.setSpacing(6)

        self._move_log = MoveLogPanel()
        right.addWidget(self._move_log, stretch=1)

        self._control_panel = ControlPanel()
        right.addWidget(self._control_panel)

        right_widget = QWidget()
        right_widget.setLayout(right)
        right_widget.setFixedWidth(300)
        root.addWidget(right_widget)

        # Status bar
        self._status = QStatusBar()
        self.setStatusBar(self._status)
        self._status_label = QLabel()
        self._status.addWidget(self._status_label)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None

        # Game menu
        self._menu_game = menu_bar.addMenu("")
        assert self._menu_game is not None

        self._act_reset = QAction(self)
        self._act_reset.setShortcut("Ctrl+R")
        self._act_reset.triggered.connect(self._on_reset)
        self._menu_game.addAction(self._act_reset)

        self._act_skip = QAction(self)
        self._act_skip.setShortcut("Space")
        self._act_skip.triggered.connect(self._on_skip_turn)
        self._menu_game.addAction(self._act_skip)

        self._menu_game.addSeparator()

        self._act_quit = QAction(self)
        self._act_quit.setShortcut("Ctrl+Q")
        self._act_quit.triggered.connect(self.close)
        self._menu_game.addAction(self._act_quit)

        # View menu
        self._menu_view = menu_bar.addMenu("")
        assert self._menu_view is not None

        self._act_follow = QAction(self)
        self._act_follow.setCheckable(True)
        self._act_follow.toggled.connect(self._on_follow_toggled)
        self._menu_view.addAction(self._act_follow)

        self._act_coords = QAction(self)
        self._act_coords.setCheckable(True)
        self._act_coords.toggled.connect(self._on_coords_toggled)
        self._menu_view.addAction(self._act_coords)

        self._menu_language = self._menu_view.addMenu("")
        assert self._menu_language is not None
        self._language_group = QActionGroup(self)
        self._language_actions: dict[str, QAction] = {}
        for language in LANGUAGES:
            act = QAction(language, self)
            act.setCheckable(True)
            act.triggered.connect(
                lambda _checked=False, lang=language: self._on_language(lang)
            )
            self._language_group.addAction(act)
            self._menu_language.addAction(act)
            self._language_actions[language] = act

    def retranslate_ui(self) -> None:
        s = t()
        self.setWindowTitle(s.app_title)
        self._menu_game.setTitle(s.menu_game)
        self._act_reset.setText(s.menu_reset)
        self._act_skip.setText(s.menu_skip_turn)
        self._act_quit.setText(s.menu_quit)
        self._menu_view.setTitle(s.menu_view)
        self._act_follow.setText(s.menu_follow_player)
        self._act_coords.setText(s.menu_show_coords)
        self._menu_language.setTitle(s.menu_language)
        self._move_log.retranslate_ui()
        self._control_panel.retranslate_ui()
        self._sync.refresh_turn()

    # ── Signal wiring ────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        """Connect Qt widget signals."""
        self._board_view.piece_picked.connect(self._on_piece_picked)
        self._board_view.cell_activated.connect(self._on_cell_activated)
        self._control_panel.skip_turn_clicked.connect(self._on_skip_turn)
        self._control_panel.reset_clicked.connect(self._on_reset)

    def _apply_settings(self) -> None:
        s = self._settings
        set_language(s.language)
        self._act_follow.setChecked(s.follow_active_player)
        self._act_coords.setChecked(s.show_coordinates)
        act = self._language_actions.get(s.language)
        if act is not None:
            act.setChecked(True)
        self._board_view.board_scene.set_show_coordinates(s.show_coordinates)
        self._sync.follow_active_player = s.follow_active_player
        self.retranslate_ui()

    # ── Slots ────────────────────────────────────────────────────────────

    def _on_piece_picked(self, piece_id: int) -> None:
        try:
            self._controller.select_piece(piece_id)
        except InvalidInputError:
            # A stale token means the scene drifted from the model; redraw.
            _LOGGER.warning("Scene picked unknown piece %d; resyncing", piece_id)
            self._sync.sync_all()

    def _on_cell_activated(self, col: int, row: int) -> None:
        self._controller.activate_cell(col, row)

    def _on_skip_turn(self) -> None:
        self._controller.advance_turn()
        self._sync.log_manual_turn()

    def _on_reset(self) -> None:
        self._controller.reset_board()

    def _on_follow_toggled(self, checked: bool) -> None:
        self._settings.follow_active_player = checked
        self._sync.follow_active_player = checked
        if checked:
            self._board_view.set_perspective(self._controller.current_player)

    def _on_coords_toggled(self, checked: bool) -> None:
        self._settings.show_coordinates = checked
        self._board_view.board_scene.set_show_coordinates(checked)

    def _on_language(self, language: str) -> None:
        self._settings.language = language
        set_language(language)
        self.retranslate_ui()

    def _set_status(self, text: str) -> None:
        self._status_label.setText(text)

    # ── Lifecycle ────────────────────────────────────────────────────────

    def closeEvent(self, event: QCloseEvent | None) -> None:
        self._sync.disconnect()
        super().closeEvent(event)
