"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from quadchess.ui.settings import AppSettings

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

_LOGGER = logging.getLogger(__name__)
_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _configure_logging(level: str) -> None:
    """Route library logging to stderr at *level*."""
    resolved = logging.getLevelName(level.upper())
    logging.basicConfig(
        level=resolved if isinstance(resolved, int) else logging.WARNING,
        format=_LOG_FORMAT,
    )
    if not isinstance(resolved, int):
        _LOGGER.warning("Unknown log level %r, using WARNING", level)

def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings and theme."""
    from quadchess.ui.styles.theme import APP_STYLE

    app.setApplicationName("Quadchess")
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)


def run_application(
    argv: list[str] | None = None,
    settings: AppSettings | None = None,
) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    from quadchess.ui.main_window import MainWindow

    settings = settings or AppSettings()
    _configure_logging(settings.log_level)

    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    window = MainWindow(settings=settings)
    window.show()

    return app.exec()
