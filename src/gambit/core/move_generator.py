"""Pseudo-legal destination generation for a single selected square.

Only piece geometry and occupancy are considered. Check, castling,
en passant and promotion are outside this engine's rules.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from gambit.core.enums import Color, PieceType
from gambit.core.mask import LegalityMask
from gambit.core.types import Square

if TYPE_CHECKING:
    from gambit.core.board import Board


KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (2, 1),
    (2, -1),
    (-2, 1),
    (-2, -1),
    (1, 2),
    (1, -2),
    (-1, 2),
    (-1, -2),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

ROOK_DIRS: tuple[tuple[int, int], ...] = ((0, 1), (0, -1), (1, 0), (-1, 0))
BISHOP_DIRS: tuple[tuple[int, int], ...] = ((1, 1), (1, -1), (-1, 1), (-1, -1))

# (forward direction, starting row) per color
PAWN_RULES: dict[Color, tuple[int, int]] = {
    Color.WHITE: (1, 1),
    Color.BLACK: (-1, 6),
}


class MoveGenerator:
    """Fills a :class:`LegalityMask` for the piece on one square.

    Reads the board through its occupancy predicates only; never mutates it.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def legal_mask(self, sq: Square | None) -> LegalityMask:
        """Fresh mask of destinations for the piece on *sq*.

        ``None`` or an empty square yields an all-false mask.
        """
        mask = LegalityMask()
        self.fill_mask(sq, mask)
        return mask

    def fill_mask(self, sq: Square | None, mask: LegalityMask) -> None:
        """Clear *mask*, then mark every destination reachable from *sq*."""
        mask.clear()
        if sq is None or not self._board.in_bounds(*sq):
            return
        piece = self._board[sq]
        generate = _GENERATORS.get(piece.piece_type)
        if generate is None:
            return
        generate(self, sq.row, sq.col, piece.color, mask)

    def destinations(self, sq: Square | None) -> list[Square]:
        """Marked squares of :meth:`legal_mask` as a list."""
        return list(self.legal_mask(sq).squares())

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, row: int, col: int, color: Color, mask: LegalityMask) -> None:
        board = self._board
        direction, start_row = PAWN_RULES[color]
        one_step = row + direction

        if board.is_empty(one_step, col):
            mask.mark(one_step, col)
            two_step = one_step + direction
            if row == start_row and board.is_empty(two_step, col):
                mask.mark(two_step, col)

        for cap_col in (col - 1, col + 1):
            if board.is_enemy(one_step, cap_col, color):
                mask.mark(one_step, cap_col)

    def _gen_rook(self, row: int, col: int, color: Color, mask: LegalityMask) -> None:
        self._gen_sliding(row, col, color, ROOK_DIRS, mask)

    def _gen_bishop(self, row: int, col: int, color: Color, mask: LegalityMask) -> None:
        self._gen_sliding(row, col, color, BISHOP_DIRS, mask)

    def _gen_queen(self, row: int, col: int, color: Color, mask: LegalityMask) -> None:
        self._gen_rook(row, col, color, mask)
        self._gen_bishop(row, col, color, mask)

    def _gen_knight(self, row: int, col: int, color: Color, mask: LegalityMask) -> None:
        self._gen_steps(row, col, color, KNIGHT_OFFSETS, mask)

    def _gen_king(self, row: int, col: int, color: Color, mask: LegalityMask) -> None:
        self._gen_steps(row, col, color, KING_OFFSETS, mask)

    def _gen_sliding(
        self,
        row: int,
        col: int,
        color: Color,
        directions: tuple[tuple[int, int], ...],
        mask: LegalityMask,
    ) -> None:
        board = self._board
        for dr, dc in directions:
            r, c = row + dr, col + dc
            while board.in_bounds(r, c):
                if board.is_empty(r, c):
                    mask.mark(r, c)
                    r += dr
                    c += dc
                    continue
                if board.is_enemy(r, c, color):
                    mask.mark(r, c)
                break

    def _gen_steps(
        self,
        row: int,
        col: int,
        color: Color,
        offsets: tuple[tuple[int, int], ...],
        mask: LegalityMask,
    ) -> None:
        board = self._board
        for dr, dc in offsets:
            r, c = row + dr, col + dc
            if board.is_empty(r, c) or board.is_enemy(r, c, color):
                mask.mark(r, c)


_GENERATORS: dict[
    PieceType, Callable[[MoveGenerator, int, int, Color, LegalityMask], None]
] = {
    PieceType.PAWN: MoveGenerator._gen_pawn,
    PieceType.ROOK: MoveGenerator._gen_rook,
    PieceType.KNIGHT: MoveGenerator._gen_knight,
    PieceType.BISHOP: MoveGenerator._gen_bishop,
    PieceType.QUEEN: MoveGenerator._gen_queen,
    PieceType.KING: MoveGenerator._gen_king,
}


def compute_legal_mask(board: Board, sq: Square | None) -> LegalityMask:
    """Shortcut for ``MoveGenerator(board).legal_mask(sq)``."""
    return MoveGenerator(board).legal_mask(sq)
