"""Shared pytest fixtures for the quadchess suite."""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

import pytest

# Board scenes and windows are built without a display.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """One QApplication for every test that touches widgets or scenes."""
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture(autouse=True)
def _default_language() -> Iterator[None]:
    """Every test starts and ends in the settings' default language."""
    from quadchess.ui.i18n import set_language
    from quadchess.ui.settings import AppSettings

    default = AppSettings().language
    set_language(default)
    yield
    set_language(default)


@pytest.fixture(autouse=True)
def _ui_session(request: pytest.FixtureRequest) -> Iterator[None]:
    """Give tests under tests/ui a QApplication and close their windows after."""
    if "ui" not in Path(str(request.node.fspath)).parts:
        yield
        return

    app = request.getfixturevalue("qapp")
    yield
    for widget in app.topLevelWidgets():
        widget.close()
    app.processEvents()
