"""Square coordinates and helpers.

Board layout::

    row 0 = rank 1 (White's back rank), row 7 = rank 8
    col 0 = file A, col 7 = file H
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import NamedTuple

BOARD_SIZE = 8

_FILES = "ABCDEFGH"
_RANKS = "12345678"


class Square(NamedTuple):
    """A (row, col) board coordinate."""

    row: int
    col: int

    @property
    def name(self) -> str:
        return square_name(self)

    def offset(self, d_row: int, d_col: int) -> Square:
        """The square *d_row*/*d_col* away. May lie off the board."""
        return Square(self.row + d_row, self.col + d_col)

    def __str__(self) -> str:
        return square_name(self)


def in_bounds(row: int, col: int) -> bool:
    """True iff both coordinates lie in [0, 8)."""
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def all_squares() -> Iterator[Square]:
    """All 64 squares, row-major from A1."""
    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            yield Square(row, col)


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. ``Square(1, 4)`` → ``'E2'``."""
    if not in_bounds(sq.row, sq.col):
        return f"({sq.row}, {sq.col})"
    return _FILES[sq.col] + _RANKS[sq.row]


def parse_square(name: str) -> Square:
    """Parse a square name, e.g. ``'e2'`` → ``Square(1, 4)``."""
    if len(name) != 2:
        raise ValueError(f"Invalid square name: {name!r}")
    file_char, rank_char = name[0].upper(), name[1]
    if file_char not in _FILES or rank_char not in _RANKS:
        raise ValueError(f"Invalid square name: {name!r}")
    return Square(_RANKS.index(rank_char), _FILES.index(file_char))


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = (Square(0, c) for c in range(8))
A2, B2, C2, D2, E2, F2, G2, H2 = (Square(1, c) for c in range(8))
A3, B3, C3, D3, E3, F3, G3, H3 = (Square(2, c) for c in range(8))
A4, B4, C4, D4, E4, F4, G4, H4 = (Square(3, c) for c in range(8))
A5, B5, C5, D5, E5, F5, G5, H5 = (Square(4, c) for c in range(8))
A6, B6, C6, D6, E6, F6, G6, H6 = (Square(5, c) for c in range(8))
A7, B7, C7, D7, E7, F7, G7, H7 = (Square(6, c) for c in range(8))
A8, B8, C8, D8, E8, F8, G8, H8 = (Square(7, c) for c in range(8))
