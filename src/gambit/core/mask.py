"""LegalityMask - per-square destination flags for the selected piece."""

from __future__ import annotations

from collections.abc import Iterator

from gambit.core.types import BOARD_SIZE, Square, all_squares, in_bounds


class LegalityMask:
    """Mutable 8x8 grid of booleans."""

    __slots__ = ("_cells",)

    def __init__(self) -> None:
        self._cells: list[list[bool]] = [[False] * BOARD_SIZE for _ in range(BOARD_SIZE)]

    def __getitem__(self, sq: Square) -> bool:
        row, col = sq
        if not in_bounds(row, col):
            raise IndexError(f"Square off the board: ({row}, {col})")
        return self._cells[row][col]

    def __setitem__(self, sq: Square, value: bool) -> None:
        row, col = sq
        if not in_bounds(row, col):
            raise IndexError(f"Square off the board: ({row}, {col})")
        self._cells[row][col] = value

    def mark(self, row: int, col: int) -> None:
        self._cells[row][col] = True

    def clear(self) -> None:
        for cells in self._cells:
            cells[:] = [False] * BOARD_SIZE

    def any(self) -> bool:
        return any(any(cells) for cells in self._cells)

    def count(self) -> int:
        return sum(sum(cells) for cells in self._cells)

    def squares(self) -> Iterator[Square]:
        """Marked squares, row-major from A1."""
        return (sq for sq in all_squares() if self._cells[sq.row][sq.col])

    def copy(self) -> LegalityMask:
        m = LegalityMask()
        m._cells = [cells.copy() for cells in self._cells]
        return m

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LegalityMask):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        marked = ", ".join(sq.name for sq in self.squares())
        return f"LegalityMask({marked})"
