"""Game state aggregate — board, turn, selection, mask and move counter."""

from __future__ import annotations

from dataclasses import dataclass, field

from gambit.core.board import Board
from gambit.core.enums import Color
from gambit.core.mask import LegalityMask
from gambit.core.notation import board_from_fen
from gambit.core.piece import Piece
from gambit.core.types import Square
from gambit.game.interfaces import SelectionPhase


@dataclass(frozen=True)
class MoveRecord:
    """A completed move, as reported to listeners."""

    number: int
    color: Color
    piece: Piece  # as it stands after the move
    from_sq: Square
    to_sq: Square
    captured: Piece

    @property
    def was_capture(self) -> bool:
        return not self.captured.is_empty

    def __str__(self) -> str:
        return (
            f"Move #{self.number}: {self.color.label} moved "
            f"from {self.from_sq.name} to {self.to_sq.name}"
        )


@dataclass
class GameState:
    """Everything the controller owns. Renderers only read it.

    Invariant: ``legal_mask`` is all-false whenever ``selection`` is None.
    """

    board: Board = field(default_factory=Board.initial)
    side_to_move: Color = Color.WHITE
    selection: Square | None = None
    legal_mask: LegalityMask = field(default_factory=LegalityMask)
    move_count: int = 0
    hovered: Square | None = None

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(
        self,
        placement: str | None = None,
        side_to_move: Color = Color.WHITE,
    ) -> None:
        """Initialise (or reset) the game."""
        self.board = Board.initial() if placement is None else board_from_fen(placement)
        self.side_to_move = side_to_move
        self.selection = None
        self.legal_mask.clear()
        self.move_count = 0
        self.hovered = None

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def phase(self) -> SelectionPhase:
        if self.selection is None:
            return SelectionPhase.IDLE
        return SelectionPhase.SELECTED

    @property
    def selected_piece(self) -> Piece | None:
        if self.selection is None:
            return None
        return self.board[self.selection]

    @property
    def hovered_piece(self) -> Piece | None:
        if self.hovered is None:
            return None
        return self.board[self.hovered]

    @property
    def fullmove_display(self) -> int:
        """Current full-move number for display."""
        return (self.move_count // 2) + 1

    def is_legal_target(self, sq: Square) -> bool:
        return self.selection is not None and self.legal_mask[sq]
