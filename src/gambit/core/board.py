"""Board - piece placement on an 8x8 grid plus occupancy predicates."""

from __future__ import annotations

from collections.abc import Iterator

from gambit.core.enums import Color, PieceType
from gambit.core.piece import Piece
from gambit.core.types import BOARD_SIZE, Square, all_squares, in_bounds

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 8x8 board. Every square always holds a :class:`Piece`.

    Empty squares hold ``Piece()``; there is no ``None`` slot.
    """

    __slots__ = ("_grid",)

    def __init__(self) -> None:
        self._grid: list[list[Piece]] = [
            [Piece() for _ in range(BOARD_SIZE)] for _ in range(BOARD_SIZE)
        ]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece:
        row, col = self._checked(sq)
        return self._grid[row][col]

    def __setitem__(self, sq: Square, piece: Piece) -> None:
        row, col = self._checked(sq)
        self._grid[row][col] = piece

    @staticmethod
    def _checked(sq: Square) -> tuple[int, int]:
        row, col = sq
        if not in_bounds(row, col):
            raise IndexError(f"Square off the board: ({row}, {col})")
        return row, col

    # -- Occupancy predicates -----------------------------------------------
    # Total and side-effect free: off-board coordinates never raise.

    @staticmethod
    def in_bounds(row: int, col: int) -> bool:
        return in_bounds(row, col)

    def is_empty(self, row: int, col: int) -> bool:
        """Off-board squares count as not empty."""
        return in_bounds(row, col) and self._grid[row][col].is_empty

    def is_enemy(self, row: int, col: int, color: Color) -> bool:
        if not in_bounds(row, col):
            return False
        piece = self._grid[row][col]
        return not piece.is_empty and piece.color != color

    def is_friendly(self, row: int, col: int, color: Color) -> bool:
        if not in_bounds(row, col):
            return False
        piece = self._grid[row][col]
        return not piece.is_empty and piece.color == color

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        """(square, piece) pairs for every non-empty square."""
        for sq in all_squares():
            piece = self._grid[sq.row][sq.col]
            if not piece.is_empty:
                yield sq, piece

    # -- Mutation / copying -------------------------------------------------

    def move_piece(self, from_sq: Square, to_sq: Square) -> Piece:
        """Relocate the piece on *from_sq* to *to_sq*.

        Whatever stood on *to_sq* is overwritten (that is how captures
        happen). The source becomes empty and the moved piece is flagged
        as having moved. Returns the overwritten piece.
        """
        captured = self[to_sq]
        self[to_sq] = self[from_sq].moved()
        self[from_sq] = Piece()
        return captured

    def copy(self) -> Board:
        b = Board()
        b._grid = [row.copy() for row in self._grid]
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position. White on rows 0-1, Black on rows 6-7."""
        b = cls()
        for col, pt in enumerate(_BACK_RANK):
            b._grid[0][col] = Piece(pt, Color.WHITE)
            b._grid[1][col] = Piece(PieceType.PAWN, Color.WHITE)
            b._grid[6][col] = Piece(PieceType.PAWN, Color.BLACK)
            b._grid[7][col] = Piece(pt, Color.BLACK)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(BOARD_SIZE - 1, -1, -1):
            cells = " ".join(str(p) for p in self._grid[row])
            rows.append(f"{row + 1} {cells}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
