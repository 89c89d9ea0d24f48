"""GameController — the selection / turn state machine.

Consumes resolved board clicks, mutates the owned :class:`GameState` and
notifies listeners via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from gambit.core.enums import Color
from gambit.core.move_generator import MoveGenerator
from gambit.core.types import Square, in_bounds
from gambit.game.interfaces import ClickOutcome, IGameController
from gambit.game.state import GameState, MoveRecord

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, GameState], None]
SelectionCallback = Callable[[Square | None], None]
OutcomeCallback = Callable[[ClickOutcome, Square | None], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_selection_changed: list[SelectionCallback] = field(default_factory=list)
    on_outcome: list[OutcomeCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Drives selection, move execution and turn alternation.

    Every click runs to completion before returning. Invalid interactions
    are no-op transitions reported through :class:`ClickOutcome`; nothing
    here raises for bad input. A move is executed purely on the strength
    of the current legality mask.

    Thread-safety: call from a single thread (the UI thread).
    """

    __slots__ = ("_state", "events")

    def __init__(self) -> None:
        self._state = GameState()
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def side_to_move(self) -> Color:
        return self._state.side_to_move

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(
        self,
        placement: str | None = None,
        side_to_move: Color = Color.WHITE,
    ) -> None:
        had_selection = self._state.selection is not None
        self._state.setup(placement, side_to_move)
        _LOGGER.info("New game, %s to move", side_to_move.label)
        if had_selection:
            self._emit_selection(None)

    def click_square(self, sq: Square | None) -> ClickOutcome:
        if sq is None or not in_bounds(sq.row, sq.col):
            return self._report(ClickOutcome.OFF_BOARD, None)

        state = self._state
        piece = state.board[sq]
        _LOGGER.debug("Clicked on square %s (%s)", sq.name, piece.name)

        if state.selection is None:
            if piece.is_empty:
                _LOGGER.info("No piece to select at %s", sq.name)
                return self._report(ClickOutcome.NO_PIECE, sq)
            if piece.color != state.side_to_move:
                _LOGGER.info(
                    "It's %s's turn! Cannot select %s piece.",
                    state.side_to_move.label,
                    piece.color.label,
                )
                return self._report(ClickOutcome.NOT_YOUR_TURN, sq)
            self._select(sq)
            _LOGGER.info("Selected piece at %s", sq.name)
            return self._report(ClickOutcome.SELECTED, sq)

        if sq == state.selection:
            self._deselect()
            _LOGGER.info("Deselected square")
            return self._report(ClickOutcome.DESELECTED, sq)

        if state.legal_mask[sq]:
            self._execute_move(state.selection, sq)
            return self._report(ClickOutcome.MOVED, sq)

        if not piece.is_empty and piece.color == state.side_to_move:
            self._select(sq)
            _LOGGER.info("Selected new piece at %s", sq.name)
            return self._report(ClickOutcome.RESELECTED, sq)

        _LOGGER.info("Invalid move to %s", sq.name)
        return self._report(ClickOutcome.INVALID_MOVE, sq)

    def clear_selection(self) -> ClickOutcome:
        if self._state.selection is not None:
            self._deselect()
        _LOGGER.info("Selection cleared")
        return self._report(ClickOutcome.CLEARED, None)

    def hover_square(self, sq: Square | None) -> None:
        self._state.hovered = sq

    # ── Internal helpers ─────────────────────────────────────────────────

    def _select(self, sq: Square) -> None:
        state = self._state
        state.selection = sq
        MoveGenerator(state.board).fill_mask(sq, state.legal_mask)
        self._emit_selection(sq)

    def _deselect(self) -> None:
        self._state.selection = None
        self._state.legal_mask.clear()
        self._emit_selection(None)

    def _execute_move(self, from_sq: Square, to_sq: Square) -> None:
        state = self._state
        mover = state.side_to_move

        captured = state.board.move_piece(from_sq, to_sq)
        state.move_count += 1
        state.side_to_move = mover.opposite

        record = MoveRecord(
            number=state.move_count,
            color=mover,
            piece=state.board[to_sq],
            from_sq=from_sq,
            to_sq=to_sq,
            captured=captured,
        )
        _LOGGER.info("%s", record)
        _LOGGER.info("Now it's %s's turn.", state.side_to_move.label)

        self._deselect()
        self._emit_move(record)

    def _report(self, outcome: ClickOutcome, sq: Square | None) -> ClickOutcome:
        for cb in self.events.on_outcome:
            cb(outcome, sq)
        return outcome

    def _emit_move(self, record: MoveRecord) -> None:
        for cb in self.events.on_move:
            cb(record, self._state)

    def _emit_selection(self, sq: Square | None) -> None:
        for cb in self.events.on_selection_changed:
            cb(sq)
