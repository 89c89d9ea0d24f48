"""FEN piece-placement parsing and formatting.

Only the placement field is handled, e.g.
``rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR``. Side to move, castling
rights and clocks have no meaning for this engine.
"""

from __future__ import annotations

from gambit.core.board import Board
from gambit.core.piece import Piece
from gambit.core.types import BOARD_SIZE, Square

STARTING_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"


def board_from_fen(placement: str) -> Board:
    """Build a board from a FEN placement field.

    A full FEN string is accepted too; everything after the first space is
    ignored. Pieces start with ``has_moved`` unset.
    """
    fields = placement.split()
    if not fields:
        raise ValueError("Empty FEN placement")
    ranks = fields[0].split("/")
    if len(ranks) != BOARD_SIZE:
        raise ValueError(f"FEN placement must have 8 ranks, got {len(ranks)}")

    board = Board()
    # FEN lists rank 8 first
    for rank_idx, rank_str in enumerate(ranks):
        row = BOARD_SIZE - 1 - rank_idx
        col = 0
        for ch in rank_str:
            if ch.isdigit():
                col += int(ch)
                continue
            if col >= BOARD_SIZE:
                raise ValueError(f"Too many squares in FEN rank: {rank_str!r}")
            board[Square(row, col)] = Piece.from_char(ch)
            col += 1
        if col != BOARD_SIZE:
            raise ValueError(f"FEN rank must cover 8 squares: {rank_str!r}")
    return board


def board_to_fen(board: Board) -> str:
    """FEN placement field for *board*."""
    parts: list[str] = []
    for row in range(BOARD_SIZE - 1, -1, -1):
        empty = 0
        rank_str = ""
        for col in range(BOARD_SIZE):
            piece = board[Square(row, col)]
            if piece.is_empty:
                empty += 1
                continue
            if empty:
                rank_str += str(empty)
                empty = 0
            rank_str += str(piece)
        if empty:
            rank_str += str(empty)
        parts.append(rank_str)
    return "/".join(parts)
