"""Internationalisation strings for the Gambit UI.

Usage::

    from gambit.ui.i18n import t, set_language

    set_language("Russian")
    print(t().menu_clear_selection)   # "Снять выделение"
"""

from __future__ import annotations

from dataclasses import dataclass

from gambit.core.enums import Color, PieceType
from gambit.core.piece import Piece
from gambit.core.types import Square
from gambit.game.interfaces import ClickOutcome


@dataclass(frozen=True)
class Strings:
    # ── Main window ──────────────────────────────────────────────────────
    window_title: str
    title: str
    menu_game: str
    menu_new_game: str
    menu_refresh: str
    menu_clear_selection: str
    menu_quit: str
    menu_view: str
    menu_show_coords: str
    menu_show_legal: str
    menu_show_hover: str
    menu_theme: str
    menu_language: str

    status_ready: str
    status_new_game: str

    # ── Info panel ───────────────────────────────────────────────────────
    turn_info: str  # "Turn: {color} (Move #{number})"
    instructions: str
    controls: str
    selected_info: str  # "Selected: {square} - {piece}"
    legal_moves_info: str  # "Legal moves available: {count}"
    hover_info: str  # "Hover: {square} - {piece}"
    empty_square: str

    color_white: str
    color_black: str
    piece_pawn: str
    piece_rook: str
    piece_knight: str
    piece_bishop: str
    piece_queen: str
    piece_king: str

    # ── Click outcomes (status bar) ──────────────────────────────────────
    msg_off_board: str
    msg_selected: str  # "Selected piece at {square}"
    msg_not_your_turn: str  # "It's {turn}'s turn! Cannot select {other} piece."
    msg_no_piece: str  # "No piece to select at {square}"
    msg_deselected: str
    msg_moved: str  # "Move #{number}: {color} moved from {src} to {dst}"
    msg_reselected: str  # "Selected new piece at {square}"
    msg_invalid_move: str  # "Invalid move to {square}"
    msg_cleared: str


_EN = Strings(
    window_title="Gambit",
    title="Chess Game - Turn-Based Mode",
    menu_game="&Game",
    menu_new_game="&New Game",
    menu_refresh="&Refresh",
    menu_clear_selection="&Clear Selection",
    menu_quit="&Quit",
    menu_view="&View",
    menu_show_coords="Show Coordinates",
    menu_show_legal="Show Legal Moves",
    menu_show_hover="Highlight Hovered Square",
    menu_theme="Board Theme",
    menu_language="Language",
    status_ready="Ready",
    status_new_game="New game started. White moves first.",
    turn_info="Turn: {color} (Move #{number})",
    instructions="Click to select/move pieces - Green dots: legal moves, Red corners: captures",
    controls="ESC: Exit, R: Refresh, C: Clear selection",
    selected_info="Selected: {square} - {piece}",
    legal_moves_info="Legal moves available: {count}",
    hover_info="Hover: {square} - {piece}",
    empty_square="Empty square",
    color_white="White",
    color_black="Black",
    piece_pawn="Pawn",
    piece_rook="Rook",
    piece_knight="Knight",
    piece_bishop="Bishop",
    piece_queen="Queen",
    piece_king="King",
    msg_off_board="",
    msg_selected="Selected piece at {square}",
    msg_not_your_turn="It's {turn}'s turn! Cannot select {other} piece.",
    msg_no_piece="No piece to select at {square}",
    msg_deselected="Deselected square",
    msg_moved="Move #{number}: {color} moved from {src} to {dst}",
    msg_reselected="Selected new piece at {square}",
    msg_invalid_move="Invalid move to {square}",
    msg_cleared="Selection cleared",
)

_RU = Strings(
    window_title="Gambit",
    title="Шахматы — поочерёдные ходы",
    menu_game="&Игра",
    menu_new_game="&Новая игра",
    menu_refresh="&Обновить",
    menu_clear_selection="&Снять выделение",
    menu_quit="&Выход",
    menu_view="&Вид",
    menu_show_coords="Показывать координаты",
    menu_show_legal="Показывать возможные ходы",
    menu_show_hover="Подсвечивать клетку под курсором",
    menu_theme="Тема доски",
    menu_language="Язык",
    status_ready="Готово",
    status_new_game="Новая игра. Белые ходят первыми.",
    turn_info="Ход: {color} (ход №{number})",
    instructions="Щёлкните, чтобы выбрать/переместить фигуру — зелёные точки: ходы, красные углы: взятия",
    controls="ESC: выход, R: обновить, C: снять выделение",
    selected_info="Выбрано: {square} — {piece}",
    legal_moves_info="Доступно ходов: {count}",
    hover_info="Под курсором: {square} — {piece}",
    empty_square="Пустая клетка",
    color_white="Белые",
    color_black="Чёрные",
    piece_pawn="пешка",
    piece_rook="ладья",
    piece_knight="конь",
    piece_bishop="слон",
    piece_queen="ферзь",
    piece_king="король",
    msg_off_board="",
    msg_selected="Выбрана фигура на {square}",
    msg_not_your_turn="Сейчас ходят {turn}! Нельзя выбрать фигуру: {other}.",
    msg_no_piece="На {square} нет фигуры",
    msg_deselected="Выделение снято",
    msg_moved="Ход №{number}: {color}, {src} → {dst}",
    msg_reselected="Выбрана другая фигура на {square}",
    msg_invalid_move="Недопустимый ход на {square}",
    msg_cleared="Выделение снято",
)

_LOCALES: dict[str, Strings] = {
    "English": _EN,
    "Russian": _RU,
}

LANGUAGES: list[str] = list(_LOCALES.keys())

_current: Strings = _EN


def t() -> Strings:
    """Return the active locale strings."""
    return _current


def set_language(language: str) -> None:
    """Switch the global locale. Unknown names fall back to English."""
    global _current
    _current = _LOCALES.get(language, _EN)


# ── Formatting helpers ───────────────────────────────────────────────────────


def color_label(color: Color) -> str:
    s = t()
    return s.color_white if color == Color.WHITE else s.color_black


def piece_label(piece: Piece) -> str:
    """Localised piece description, e.g. ``"White Knight"``."""
    s = t()
    if piece.is_empty:
        return s.empty_square
    names = {
        PieceType.PAWN: s.piece_pawn,
        PieceType.ROOK: s.piece_rook,
        PieceType.KNIGHT: s.piece_knight,
        PieceType.BISHOP: s.piece_bishop,
        PieceType.QUEEN: s.piece_queen,
        PieceType.KING: s.piece_king,
    }
    return f"{color_label(piece.color)} {names[piece.piece_type]}"


def outcome_message(outcome: ClickOutcome, sq: Square | None, turn: Color) -> str:
    """Status-bar text for a click outcome.

    *turn* is the side to move when the message is shown. ``MOVED`` is
    formatted from the move record instead, see ``MainWindow``.
    """
    s = t()
    square = sq.name if sq is not None else ""
    if outcome == ClickOutcome.SELECTED:
        return s.msg_selected.format(square=square)
    if outcome == ClickOutcome.NOT_YOUR_TURN:
        return s.msg_not_your_turn.format(
            turn=color_label(turn), other=color_label(turn.opposite)
        )
    if outcome == ClickOutcome.NO_PIECE:
        return s.msg_no_piece.format(square=square)
    if outcome == ClickOutcome.DESELECTED:
        return s.msg_deselected
    if outcome == ClickOutcome.RESELECTED:
        return s.msg_reselected.format(square=square)
    if outcome == ClickOutcome.INVALID_MOVE:
        return s.msg_invalid_move.format(square=square)
    if outcome == ClickOutcome.CLEARED:
        return s.msg_cleared
    return s.msg_off_board
