"""Abstract interfaces and FSM enums for the game layer."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from gambit.core.enums import Color

if TYPE_CHECKING:
    from gambit.core.types import Square


# ── Selection FSM states ─────────────────────────────────────────────────────


class SelectionPhase(IntEnum):
    """Finite-state-machine states of the selection controller."""

    IDLE = auto()  # nothing selected
    SELECTED = auto()  # own piece selected, mask populated


class ClickOutcome(IntEnum):
    """Which transition a click (or clear command) resolved to.

    None of these is an error: rejected interactions leave the state
    untouched and are merely reported.
    """

    OFF_BOARD = auto()  # click outside the board, ignored
    SELECTED = auto()  # Idle → Selected
    NOT_YOUR_TURN = auto()  # Idle, opponent's piece clicked
    NO_PIECE = auto()  # Idle, empty square clicked
    DESELECTED = auto()  # Selected → Idle, same square clicked again
    MOVED = auto()  # Selected → Idle, move executed
    RESELECTED = auto()  # Selected → Selected, another own piece
    INVALID_MOVE = auto()  # Selected, illegal destination, unchanged
    CLEARED = auto()  # explicit clear command

    @property
    def changed_state(self) -> bool:
        return self not in (
            ClickOutcome.OFF_BOARD,
            ClickOutcome.NOT_YOUR_TURN,
            ClickOutcome.NO_PIECE,
            ClickOutcome.INVALID_MOVE,
        )


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IGameController(ABC):
    """Interface for the selection / turn controller."""

    @abstractmethod
    def new_game(
        self,
        placement: str | None = None,
        side_to_move: Color = Color.WHITE,
    ) -> None:
        """Set up a new game from the start or from a FEN placement."""

    @abstractmethod
    def click_square(self, sq: Square | None) -> ClickOutcome:
        """Feed one resolved click. ``None`` means off the board."""

    @abstractmethod
    def clear_selection(self) -> ClickOutcome:
        """Drop any selection unconditionally."""

    @abstractmethod
    def hover_square(self, sq: Square | None) -> None:
        """Track the square under the pointer (display only)."""
