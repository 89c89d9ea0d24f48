"""Qt fixtures for the widget and scene tests."""

from __future__ import annotations

import os
from collections.abc import Iterator

import pytest
from PyQt6.QtWidgets import QApplication

from gambit.ui.i18n import set_language

# Widgets are never shown on screen in tests
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def qapp() -> QApplication:
    app = QApplication.instance()
    return app if app is not None else QApplication([])


@pytest.fixture(autouse=True)
def _qt_session(qapp: QApplication) -> Iterator[None]:
    """English strings per test, and no top-level widgets left behind."""
    set_language("English")
    yield
    set_language("English")
    for widget in qapp.topLevelWidgets():
        widget.close()
    qapp.processEvents()
