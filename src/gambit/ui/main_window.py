"""MainWindow — top-level window assembling board, info panel and menus."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from PyQt6.QtGui import QAction, QActionGroup
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QMenu,
    QStatusBar,
    QWidget,
)

from gambit.core.enums import Color
from gambit.core.types import Square
from gambit.game.controller import GameController
from gambit.game.interfaces import ClickOutcome
from gambit.game.state import GameState, MoveRecord
from gambit.ui.board.board_view import BoardView
from gambit.ui.i18n import LANGUAGES, color_label, outcome_message, t
from gambit.ui.panels.info_panel import InfoPanel
from gambit.ui.settings import AppSettings, apply_settings
from gambit.ui.styles.theme import THEMES

TCallback = TypeVar("TCallback", bound=Callable[..., None])


class MainWindow(QMainWindow):
    """Main application window for Gambit."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        placement: str | None = None,
        side_to_move: Color = Color.WHITE,
    ) -> None:
        super().__init__()
        self.setMinimumSize(760, 560)
        self.resize(980, 700)

        self._controller = GameController()
        self._settings = settings or AppSettings()
        self._start_placement = placement
        self._start_side = side_to_move

        self._setup_ui()
        self._setup_menu()
        self._connect_signals()
        self._connect_game_events()

        self._controller.new_game(placement, side_to_move)
        self._board_view.board_scene.set_state(self._controller.state)
        self._apply_settings()
        self._show_message(t().status_ready)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def controller(self) -> GameController:
        return self._controller

    @property
    def settings(self) -> AppSettings:
        return self._settings

    @property
    def status_text(self) -> str:
        return self._status_label.text()

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QHBoxLayout(central)
        root.setContentsMargins(6, 6, 6, 6)
        root.setSpacing(6)

        # Board (left)
        self._board_view = BoardView()
        root.addWidget(self._board_view, stretch=3)

        # Info panel (right)
        self._info_panel = InfoPanel()
        self._info_panel.setFixedWidth(300)
        root.addWidget(self._info_panel)

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

        self._act_new_game = QAction(self)
        self._act_new_game.setShortcut("Ctrl+N")
        self._act_new_game.triggered.connect(self._on_new_game)
        self._menu_game.addAction(self._act_new_game)

        self._act_refresh = QAction(self)
        self._act_refresh.setShortcut("R")
        self._act_refresh.triggered.connect(self.refresh_view)
        self._menu_game.addAction(self._act_refresh)

        self._act_clear = QAction(self)
        self._act_clear.setShortcut("C")
        self._act_clear.triggered.connect(self._on_clear_selection)
        self._menu_game.addAction(self._act_clear)

        self._menu_game.addSeparator()

        self._act_quit = QAction(self)
        self._act_quit.setShortcut("Esc")
        self._act_quit.triggered.connect(self.close)
        self._menu_game.addAction(self._act_quit)

        # View menu
        self._menu_view = menu_bar.addMenu("")
        assert self._menu_view is not None

        self._act_coords = self._make_toggle(self._menu_view, "show_coordinates")
        self._act_legal = self._make_toggle(self._menu_view, "show_legal_moves")
        self._act_hover = self._make_toggle(self._menu_view, "show_hover")
        self._menu_view.addSeparator()

        self._menu_theme = self._menu_view.addMenu("")
        assert self._menu_theme is not None
        self._theme_group = QActionGroup(self)
        for name in THEMES:
            act = QAction(name, self)
            act.setCheckable(True)
            act.setData(name)
            act.triggered.connect(lambda _checked, n=name: self._on_theme(n))
            self._theme_group.addAction(act)
            self._menu_theme.addAction(act)

        self._menu_language = self._menu_view.addMenu("")
        assert self._menu_language is not None
        self._language_group = QActionGroup(self)
        for name in LANGUAGES:
            act = QAction(name, self)
            act.setCheckable(True)
            act.setData(name)
            act.triggered.connect(lambda _checked, n=name: self._on_language(n))
            self._language_group.addAction(act)
            self._menu_language.addAction(act)

    def _make_toggle(self, menu: QMenu, attr: str) -> QAction:
        act = QAction(self)
        act.setCheckable(True)
        act.setChecked(getattr(self._settings, attr))
        act.toggled.connect(lambda checked: self._on_toggle(attr, checked))
        menu.addAction(act)
        return act

    # ── Signal wiring ────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        """Connect Qt widget signals."""
        self._board_view.square_clicked.connect(self._on_square_clicked)
        self._board_view.square_hovered.connect(self._on_square_hovered)

    def _connect_game_events(self) -> None:
        """Subscribe to GameController callbacks (idempotent)."""
        events = self._controller.events
        self._replace_callback(events.on_move, self._on_game_move)

    @staticmethod
    def _replace_callback(
        callbacks: list[TCallback],
        callback: TCallback,
    ) -> None:
        callbacks[:] = [cb for cb in callbacks if cb != callback]
        callbacks.append(callback)

    # ── Input handlers ───────────────────────────────────────────────────

    def _on_square_clicked(self, sq: Square | None) -> None:
        outcome = self._controller.click_square(sq)
        if outcome == ClickOutcome.OFF_BOARD:
            return
        # MOVED is reported by _on_game_move
        if outcome != ClickOutcome.MOVED:
            self._show_message(
                outcome_message(outcome, sq, self._controller.side_to_move)
            )
        if outcome.changed_state:
            self.refresh_view()

    def _on_square_hovered(self, sq: Square | None) -> None:
        self._controller.hover_square(sq)
        self.refresh_view()

    def _on_clear_selection(self) -> None:
        outcome = self._controller.clear_selection()
        self._show_message(outcome_message(outcome, None, self._controller.side_to_move))
        self.refresh_view()

    def _on_new_game(self) -> None:
        self._controller.new_game(self._start_placement, self._start_side)
        self._show_message(t().status_new_game)
        self.refresh_view()

    # ── Settings ─────────────────────────────────────────────────────────

    def _on_toggle(self, attr: str, checked: bool) -> None:
        setattr(self._settings, attr, checked)
        self._apply_settings()

    def _on_theme(self, name: str) -> None:
        self._settings.board_theme = name
        self._apply_settings()

    def _on_language(self, name: str) -> None:
        self._settings.language = name
        self._apply_settings()

    def _apply_settings(self) -> None:
        apply_settings(self)
        self._sync_menu_checks()
        self.refresh_view()

    def _sync_menu_checks(self) -> None:
        s = self._settings
        for act, value in (
            (self._act_coords, s.show_coordinates),
            (self._act_legal, s.show_legal_moves),
            (self._act_hover, s.show_hover),
        ):
            act.blockSignals(True)
            act.setChecked(value)
            act.blockSignals(False)
        for act in self._theme_group.actions():
            act.setChecked(act.data() == s.board_theme)
        for act in self._language_group.actions():
            act.setChecked(act.data() == s.language)

    def retranslate_ui(self) -> None:
        """Update all translatable strings when the locale changes."""
        s = t()
        self.setWindowTitle(s.window_title)
        # Menu bar
        self._menu_game.setTitle(s.menu_game)
        self._act_new_game.setText(s.menu_new_game)
        self._act_refresh.setText(s.menu_refresh)
        self._act_clear.setText(s.menu_clear_selection)
        self._act_quit.setText(s.menu_quit)
        self._menu_view.setTitle(s.menu_view)
        self._act_coords.setText(s.menu_show_coords)
        self._act_legal.setText(s.menu_show_legal)
        self._act_hover.setText(s.menu_show_hover)
        self._menu_theme.setTitle(s.menu_theme)
        self._menu_language.setTitle(s.menu_language)
        # Child widgets
        self._info_panel.retranslate_ui()

    # ── Game event callbacks ─────────────────────────────────────────────

    def _on_game_move(self, record: MoveRecord, _state: GameState) -> None:
        self._show_message(
            t().msg_moved.format(
                number=record.number,
                color=color_label(record.color),
                src=record.from_sq.name,
                dst=record.to_sq.name,
            )
        )

    # ── Rendering ────────────────────────────────────────────────────────

    def refresh_view(self) -> None:
        """Redraw the board and readouts from the controller's state."""
        self._board_view.board_scene.refresh()
        self._info_panel.update_from(self._controller.state)

    def _show_message(self, text: str) -> None:
        self._status_label.setText(text)
