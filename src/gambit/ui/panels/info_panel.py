"""InfoPanel — turn, selection, legal-move and hover readouts."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PyQt6.QtWidgets import QLabel, QVBoxLayout, QWidget

from gambit.ui.i18n import color_label, piece_label, t
from gambit.ui.styles.theme import TURN_COLORS

if TYPE_CHECKING:
    from gambit.game.state import GameState


class InfoPanel(QWidget):
    """Text overlay describing the current game state."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._state: GameState | None = None

        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)
        layout.setSpacing(4)

        self._title = QLabel()
        self._title.setObjectName("titleLabel")
        self._turn = QLabel()
        self._turn.setObjectName("turnLabel")
        self._instructions = QLabel()
        self._instructions.setWordWrap(True)
        self._controls = QLabel()
        self._selected = QLabel()
        self._legal_count = QLabel()
        self._hover = QLabel()

        for label in (
            self._title,
            self._turn,
            self._instructions,
            self._controls,
            self._selected,
            self._legal_count,
            self._hover,
        ):
            layout.addWidget(label)
        layout.addStretch(1)

        self.retranslate_ui()

    # ── Accessors (tests / main window) ──────────────────────────────────

    @property
    def turn_text(self) -> str:
        return self._turn.text()

    @property
    def selected_text(self) -> str:
        return self._selected.text()

    @property
    def legal_count_text(self) -> str:
        return self._legal_count.text()

    @property
    def hover_text(self) -> str:
        return self._hover.text()

    # ── Updates ──────────────────────────────────────────────────────────

    def retranslate_ui(self) -> None:
        s = t()
        self._title.setText(s.title)
        self._instructions.setText(s.instructions)
        self._controls.setText(s.controls)
        self.update_from(self._state)

    def update_from(self, state: GameState | None) -> None:
        """Refresh every readout from *state*."""
        self._state = state
        s = t()
        if state is None:
            for label in (self._turn, self._selected, self._legal_count, self._hover):
                label.setText("")
            return

        side = state.side_to_move
        self._turn.setText(
            s.turn_info.format(color=color_label(side), number=state.fullmove_display)
        )
        self._turn.setStyleSheet(f"color: {TURN_COLORS[str(side)]};")

        selected = state.selected_piece
        if state.selection is not None and selected is not None:
            self._selected.setText(
                s.selected_info.format(
                    square=state.selection.name,
                    piece=piece_label(selected),
                )
            )
            count = state.legal_mask.count()
            self._legal_count.setText(
                s.legal_moves_info.format(count=count) if count else ""
            )
        else:
            self._selected.setText("")
            self._legal_count.setText("")

        if state.hovered is not None:
            self._hover.setText(
                s.hover_info.format(
                    square=state.hovered.name,
                    piece=piece_label(state.board[state.hovered]),
                )
            )
        else:
            self._hover.setText("")
