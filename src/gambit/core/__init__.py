"""Core domain layer — board, occupancy predicates and move generation.

Quick start::

    from gambit.core import Board, MoveGenerator, parse_square

    board = Board.initial()
    mask = MoveGenerator(board).legal_mask(parse_square("e2"))
    print([sq.name for sq in mask.squares()])  # ['E3', 'E4']
"""

from gambit.core.board import Board
from gambit.core.enums import Color, PieceType
from gambit.core.mask import LegalityMask
from gambit.core.move_generator import MoveGenerator, compute_legal_mask
from gambit.core.notation import STARTING_PLACEMENT, board_from_fen, board_to_fen
from gambit.core.piece import Piece
from gambit.core.types import (
    BOARD_SIZE,
    Square,
    all_squares,
    in_bounds,
    parse_square,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Types / helpers
    "BOARD_SIZE",
    "Square",
    "all_squares",
    "in_bounds",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "LegalityMask",
    "MoveGenerator",
    "Piece",
    "compute_legal_mask",
    # Notation
    "STARTING_PLACEMENT",
    "board_from_fen",
    "board_to_fen",
]
