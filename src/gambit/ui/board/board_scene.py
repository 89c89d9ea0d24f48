"""BoardScene — QGraphicsScene that draws the board from a GameState.

The scene never mutates game state. It reads the board, selection,
legality mask and hovered square, and reports clicks / pointer motion as
resolved board squares through its signals.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont, QPen, QPolygonF
from PyQt6.QtWidgets import (
    QGraphicsEllipseItem,
    QGraphicsItem,
    QGraphicsPolygonItem,
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from gambit.core.enums import Color
from gambit.core.piece import Piece
from gambit.core.types import BOARD_SIZE, Square, all_squares
from gambit.ui.styles.theme import BoardTheme

if TYPE_CHECKING:
    from gambit.game.state import GameState


class BoardScene(QGraphicsScene):
    """Renders squares, coordinates, highlights and piece glyphs.

    Signals:
        square_clicked(object): ``Square`` under a left click, or ``None``
            when the click landed outside the board.
        square_hovered(object): ``Square`` under the pointer, or ``None``;
            emitted only when it changes.
    """

    square_clicked = pyqtSignal(object)
    square_hovered = pyqtSignal(object)

    TILE = 80  # px per square
    MARGIN = 28  # room for coordinate labels

    _DOT_RATIO = 0.15
    _CORNER_RATIO = 0.3

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._state: GameState | None = None
        self._show_coordinates = True
        self._show_legal_moves = True
        self._show_hover = True
        self._last_hover: Square | None = None

        # Visual layers
        self._square_items: dict[Square, QGraphicsRectItem] = {}
        self._marker_items: list[QGraphicsItem] = []
        self._piece_items: dict[Square, QGraphicsSimpleTextItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []

        self._draw_board()

    # ── Public API ───────────────────────────────────────────────────────

    def set_state(self, state: GameState) -> None:
        """Attach the game state to render and redraw."""
        self._state = state
        self.refresh()

    def refresh(self) -> None:
        """Re-read the attached state and update every layer."""
        self._paint_squares()
        self._sync_markers()
        self._sync_pieces()

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._draw_board()
        self.refresh()

    def theme(self) -> BoardTheme:
        return self._theme

    def set_show_coordinates(self, visible: bool) -> None:
        """Show or hide rank/file coordinate labels."""
        self._show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    def set_show_legal_moves(self, visible: bool) -> None:
        """Show or hide legal-move highlights and markers."""
        self._show_legal_moves = visible
        self.refresh()

    def set_show_hover(self, visible: bool) -> None:
        self._show_hover = visible
        self._paint_squares()

    # ── Pixel ↔ board mapping ────────────────────────────────────────────

    def pos_to_square(self, pos: QPointF) -> Square | None:
        """Scene position → board square, ``None`` off the board."""
        t = self.TILE
        col = int(pos.x() // t)
        visual_row = int(pos.y() // t)
        if not (0 <= col < BOARD_SIZE and 0 <= visual_row < BOARD_SIZE):
            return None
        return Square(BOARD_SIZE - 1 - visual_row, col)

    def square_origin(self, sq: Square) -> QPointF:
        """Top-left scene point of *sq*. Row 0 (rank 1) is drawn at the bottom."""
        t = self.TILE
        return QPointF(sq.col * t, (BOARD_SIZE - 1 - sq.row) * t)

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if event is None or event.button() != Qt.MouseButton.LeftButton:
            return super().mousePressEvent(event)
        self.square_clicked.emit(self.pos_to_square(event.scenePos()))
        event.accept()

    def mouseMoveEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if event is not None:
            sq = self.pos_to_square(event.scenePos())
            if sq != self._last_hover:
                self._last_hover = sq
                self.square_hovered.emit(sq)
        super().mouseMoveEvent(event)

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw or redraw the 64 squares and coordinates."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()
        for coord_item in self._coord_items:
            self.removeItem(coord_item)
        self._coord_items.clear()

        t = self.TILE
        font = QFont("Helvetica", max(9, t // 7))
        border = QPen(self._theme.square_border)
        border.setWidthF(1.0)

        for sq in all_squares():
            origin = self.square_origin(sq)
            rect = QGraphicsRectItem(origin.x(), origin.y(), t, t)
            rect.setPen(border)
            rect.setZValue(0)
            self.addItem(rect)
            self._square_items[sq] = rect

        for idx in range(BOARD_SIZE):
            # File letters below the board, rank numbers to its left
            file_label = self._make_label(chr(ord("A") + idx), font)
            bounds = file_label.boundingRect()
            file_label.setPos(
                idx * t + (t - bounds.width()) / 2,
                BOARD_SIZE * t + (self.MARGIN - bounds.height()) / 2,
            )
            rank_label = self._make_label(str(idx + 1), font)
            bounds = rank_label.boundingRect()
            rank_label.setPos(
                -(self.MARGIN + bounds.width()) / 2,
                (BOARD_SIZE - 1 - idx) * t + (t - bounds.height()) / 2,
            )

        side = BOARD_SIZE * t + self.MARGIN
        self.setSceneRect(-self.MARGIN, 0, side, side)
        self._paint_squares()

    def _make_label(self, text: str, font: QFont) -> QGraphicsSimpleTextItem:
        txt = QGraphicsSimpleTextItem(text)
        txt.setFont(font)
        txt.setBrush(QBrush(self._theme.coord_text))
        txt.setZValue(0.3)
        txt.setVisible(self._show_coordinates)
        self.addItem(txt)
        self._coord_items.append(txt)
        return txt

    def _paint_squares(self) -> None:
        for sq, rect in self._square_items.items():
            rect.setBrush(QBrush(self._square_color(sq)))

    def _square_color(self, sq: Square) -> QColor:
        theme = self._theme
        state = self._state
        if state is not None:
            if state.selection == sq:
                return theme.selected
            if self._show_legal_moves and state.is_legal_target(sq):
                if state.board[sq].is_empty:
                    return theme.legal_move
                return theme.capture
            if self._show_hover and state.hovered == sq:
                return theme.hover
        # A1 is dark: (row + col) even means a dark square
        if (sq.row + sq.col) % 2 == 0:
            return theme.dark_square
        return theme.light_square

    # ── Markers (move dots / capture corners) ────────────────────────────

    def _sync_markers(self) -> None:
        for item in self._marker_items:
            self.removeItem(item)
        self._marker_items.clear()

        state = self._state
        if state is None or not self._show_legal_moves or state.selection is None:
            return
        for sq in state.legal_mask.squares():
            if state.board[sq].is_empty:
                self._add_move_dot(sq)
            else:
                self._add_capture_corners(sq)

    def _add_move_dot(self, sq: Square) -> None:
        t = self.TILE
        radius = t * self._DOT_RATIO
        origin = self.square_origin(sq)
        cx, cy = origin.x() + t / 2, origin.y() + t / 2
        dot = QGraphicsEllipseItem(cx - radius, cy - radius, 2 * radius, 2 * radius)
        dot.setBrush(QBrush(self._theme.move_dot))
        dot.setPen(QPen(Qt.PenStyle.NoPen))
        dot.setZValue(0.8)
        self.addItem(dot)
        self._marker_items.append(dot)

    def _add_capture_corners(self, sq: Square) -> None:
        t = self.TILE
        k = t * self._CORNER_RATIO
        o = self.square_origin(sq)
        x, y = o.x(), o.y()
        corners = (
            (QPointF(x, y), QPointF(x + k, y), QPointF(x, y + k)),
            (QPointF(x + t, y + t), QPointF(x + t - k, y + t), QPointF(x + t, y + t - k)),
        )
        for points in corners:
            tri = QGraphicsPolygonItem(QPolygonF(list(points)))
            tri.setBrush(QBrush(self._theme.capture_marker))
            tri.setPen(QPen(Qt.PenStyle.NoPen))
            tri.setZValue(0.8)
            self.addItem(tri)
            self._marker_items.append(tri)

    # ── Piece synchronisation ────────────────────────────────────────────

    def _sync_pieces(self) -> None:
        """Re-create all piece glyphs from the current board."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()

        if self._state is None:
            return

        for sq, piece in self._state.board.occupied():
            item = self._make_piece_item(piece)
            bounds = item.boundingRect()
            origin = self.square_origin(sq)
            item.setPos(
                origin.x() + (self.TILE - bounds.width()) / 2,
                origin.y() + (self.TILE - bounds.height()) / 2,
            )
            self.addItem(item)
            self._piece_items[sq] = item

    def _make_piece_item(self, piece: Piece) -> QGraphicsSimpleTextItem:
        # Solid glyph shape for both sides, filled with the side's colour
        glyph = Piece(piece.piece_type, Color.BLACK).symbol
        item = QGraphicsSimpleTextItem(glyph)
        item.setFont(QFont("DejaVu Sans", int(self.TILE * 0.6)))
        fill, outline = self._theme.piece_white, self._theme.piece_black
        if piece.color == Color.BLACK:
            fill, outline = outline, fill
        item.setBrush(QBrush(fill))
        pen = QPen(outline)
        pen.setWidthF(1.2)
        item.setPen(pen)
        item.setZValue(1)
        return item
