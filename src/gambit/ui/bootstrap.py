"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from gambit.core.enums import Color

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

    from gambit.ui.settings import AppSettings

_LOGGER = logging.getLogger(__name__)


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings and theme."""
    from gambit.ui.styles.theme import APP_STYLE

    app.setApplicationName("Gambit")
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)


def run_application(
    argv: list[str] | None = None,
    *,
    settings: AppSettings | None = None,
    placement: str | None = None,
    side_to_move: Color = Color.WHITE,
) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    from gambit.ui.main_window import MainWindow

    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    window = MainWindow(settings, placement=placement, side_to_move=side_to_move)
    window.show()
    _LOGGER.info("Turn-based chess: %s moves first", side_to_move.label)

    return app.exec()
