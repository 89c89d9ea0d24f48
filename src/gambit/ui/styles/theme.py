"""Visual theme constants and QSS styles for Gambit."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the chessboard."""

    light_square: QColor
    dark_square: QColor
    square_border: QColor
    selected: QColor  # selected piece origin
    legal_move: QColor  # empty legal destination
    capture: QColor  # occupied legal destination
    hover: QColor  # square under the pointer
    move_dot: QColor
    capture_marker: QColor  # corner triangles on capture targets
    piece_white: QColor
    piece_black: QColor
    coord_text: QColor

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor(230, 230, 230),  # light grey
            dark_square=QColor(77, 51, 26),  # dark brown
            square_border=QColor(26, 26, 26),
            selected=QColor(230, 179, 51),  # golden yellow
            legal_move=QColor(51, 179, 51),  # green
            capture=QColor(204, 51, 51),  # red
            hover=QColor(102, 153, 204),  # light blue
            move_dot=QColor(26, 128, 26),
            capture_marker=QColor(230, 26, 26),
            piece_white=QColor(250, 250, 245),
            piece_black=QColor(20, 20, 20),
            coord_text=QColor(0, 0, 0),
        )

    @classmethod
    def walnut(cls) -> BoardTheme:
        return cls(
            light_square=QColor(228, 210, 184),
            dark_square=QColor(118, 74, 47),
            square_border=QColor(60, 40, 25),
            selected=QColor(230, 179, 51),
            legal_move=QColor(120, 170, 80),
            capture=QColor(200, 70, 60),
            hover=QColor(140, 170, 200),
            move_dot=QColor(40, 100, 30),
            capture_marker=QColor(220, 40, 30),
            piece_white=QColor(250, 250, 245),
            piece_black=QColor(20, 20, 20),
            coord_text=QColor(40, 30, 20),
        )

    @classmethod
    def slate(cls) -> BoardTheme:
        return cls(
            light_square=QColor(224, 226, 231),
            dark_square=QColor(101, 110, 122),
            square_border=QColor(40, 44, 50),
            selected=QColor(230, 200, 80),
            legal_move=QColor(90, 170, 110),
            capture=QColor(200, 80, 80),
            hover=QColor(120, 160, 210),
            move_dot=QColor(30, 100, 50),
            capture_marker=QColor(220, 40, 40),
            piece_white=QColor(250, 250, 250),
            piece_black=QColor(15, 15, 20),
            coord_text=QColor(20, 20, 25),
        )


THEMES: dict[str, BoardTheme] = {
    "Classic": BoardTheme.default(),
    "Walnut": BoardTheme.walnut(),
    "Slate": BoardTheme.slate(),
}


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow {
    background: #cccc99;
}

QLabel {
    color: #000000;
    font-family: "Helvetica Neue", "Arial", sans-serif;
}

QLabel#titleLabel {
    font-size: 18px;
    font-weight: bold;
}

QLabel#turnLabel {
    font-size: 16px;
}

QStatusBar {
    background: #b8b888;
    color: #000000;
}

QMenuBar {
    background: #b8b888;
    color: #000000;
}
QMenu {
    background: #e6e6cc;
    color: #000000;
    border: 1px solid #999966;
}
QMenu::item:selected {
    background: #6699cc;
}
"""

# Per-side colours for the turn indicator (gold / purple)
TURN_COLORS: dict[str, str] = {
    "white": "#cc9900",
    "black": "#6633cc",
}
