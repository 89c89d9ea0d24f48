"""Tests for GameController — the selection / turn state machine."""

from __future__ import annotations

import logging
import random

import pytest

from gambit.core.enums import Color, PieceType
from gambit.core.piece import Piece
from gambit.core.types import (
    A1,
    A7,
    B1,
    E2,
    E4,
    E5,
    E7,
    F2,
    Square,
    all_squares,
    parse_square,
)
from gambit.game.controller import GameController
from gambit.game.interfaces import ClickOutcome, SelectionPhase
from gambit.game.state import GameState, MoveRecord


def _marked(ctrl: GameController) -> set[str]:
    return {sq.name for sq in ctrl.state.legal_mask.squares()}


def _assert_invariants(ctrl: GameController) -> None:
    state = ctrl.state
    assert all(isinstance(state.board[sq], Piece) for sq in all_squares())
    if state.selection is None:
        assert not state.legal_mask.any()


class TestNewGame:
    def test_starts_idle_with_white(self) -> None:
        ctrl = GameController()
        assert ctrl.side_to_move == Color.WHITE
        assert ctrl.state.phase == SelectionPhase.IDLE
        assert ctrl.state.move_count == 0

    def test_custom_placement_and_side(self) -> None:
        ctrl = GameController()
        ctrl.new_game("4k3/8/8/8/8/8/8/4K3", Color.BLACK)
        assert ctrl.side_to_move == Color.BLACK
        assert ctrl.state.board[parse_square("e8")].piece_type is PieceType.KING

    def test_new_game_drops_selection(self) -> None:
        ctrl = GameController()
        changes: list[Square | None] = []
        ctrl.click_square(E2)
        ctrl.events.on_selection_changed.append(changes.append)
        ctrl.new_game()
        assert ctrl.state.selection is None
        assert not ctrl.state.legal_mask.any()
        assert changes == [None]


class TestScenarios:
    def test_select_white_pawn(self) -> None:
        ctrl = GameController()
        assert ctrl.click_square(E2) == ClickOutcome.SELECTED
        assert ctrl.state.selection == E2
        assert ctrl.state.phase == SelectionPhase.SELECTED
        assert _marked(ctrl) == {"E3", "E4"}

    def test_move_pawn_double_step(self) -> None:
        ctrl = GameController()
        ctrl.click_square(E2)
        assert ctrl.click_square(E4) == ClickOutcome.MOVED

        state = ctrl.state
        assert state.board[E2] == Piece()
        assert state.board[E4] == Piece(PieceType.PAWN, Color.WHITE, has_moved=True)
        assert state.side_to_move == Color.BLACK
        assert state.move_count == 1
        assert state.selection is None
        assert not state.legal_mask.any()

    def test_knight_b1(self) -> None:
        ctrl = GameController()
        ctrl.click_square(B1)
        assert _marked(ctrl) == {"A3", "C3"}

    def test_cannot_select_opponent_piece(self) -> None:
        ctrl = GameController()
        assert ctrl.click_square(A7) == ClickOutcome.NOT_YOUR_TURN
        assert ctrl.state.selection is None
        assert not ctrl.state.legal_mask.any()

    def test_reselect_other_own_piece(self) -> None:
        ctrl = GameController()
        ctrl.click_square(E2)
        assert ctrl.click_square(F2) == ClickOutcome.RESELECTED
        assert ctrl.state.selection == F2
        assert _marked(ctrl) == {"F3", "F4"}

    def test_rook_captures_stop_rays(self) -> None:
        ctrl = GameController()
        ctrl.new_game("8/8/8/8/1p1R2p1/8/8/8")
        ctrl.click_square(Square(3, 3))
        mask = ctrl.state.legal_mask
        for col in (1, 2, 4, 5, 6):
            assert mask[Square(3, col)]
        assert not mask[Square(3, 0)]
        assert not mask[Square(3, 7)]


class TestTransitions:
    def test_click_empty_square_when_idle(self) -> None:
        ctrl = GameController()
        assert ctrl.click_square(E4) == ClickOutcome.NO_PIECE
        assert ctrl.state.selection is None

    def test_reclick_deselects(self) -> None:
        ctrl = GameController()
        ctrl.click_square(E2)
        assert ctrl.click_square(E2) == ClickOutcome.DESELECTED
        assert ctrl.state.selection is None
        assert not ctrl.state.legal_mask.any()

    def test_select_then_deselect_is_idempotent(self) -> None:
        ctrl = GameController()
        board_before = ctrl.state.board.copy()
        for _ in range(3):
            ctrl.click_square(B1)
            ctrl.click_square(B1)
        assert ctrl.state.phase == SelectionPhase.IDLE
        assert ctrl.state.board == board_before
        assert ctrl.state.move_count == 0

    def test_illegal_empty_destination_keeps_selection(self) -> None:
        ctrl = GameController()
        ctrl.click_square(E2)
        before = ctrl.state.legal_mask.copy()
        assert ctrl.click_square(E5) == ClickOutcome.INVALID_MOVE
        assert ctrl.state.selection == E2
        assert ctrl.state.legal_mask == before

    def test_illegal_enemy_destination_keeps_selection(self) -> None:
        ctrl = GameController()
        ctrl.click_square(E2)
        assert ctrl.click_square(E7) == ClickOutcome.INVALID_MOVE
        assert ctrl.state.selection == E2
        assert ctrl.state.board[E7].color == Color.BLACK

    def test_off_board_click_is_ignored(self) -> None:
        ctrl = GameController()
        ctrl.click_square(E2)
        assert ctrl.click_square(None) == ClickOutcome.OFF_BOARD
        assert ctrl.click_square(Square(8, 0)) == ClickOutcome.OFF_BOARD
        assert ctrl.state.selection == E2

    def test_clear_selection(self) -> None:
        ctrl = GameController()
        ctrl.click_square(B1)
        assert ctrl.clear_selection() == ClickOutcome.CLEARED
        assert ctrl.state.selection is None
        assert not ctrl.state.legal_mask.any()

    def test_clear_selection_when_idle_is_harmless(self) -> None:
        ctrl = GameController()
        assert ctrl.clear_selection() == ClickOutcome.CLEARED
        assert ctrl.state.phase == SelectionPhase.IDLE

    def test_capture_overwrites_target(self) -> None:
        ctrl = GameController()
        ctrl.new_game("8/8/8/3p4/4P3/8/8/8")
        d5 = parse_square("d5")
        ctrl.click_square(E4)
        assert ctrl.click_square(d5) == ClickOutcome.MOVED
        assert ctrl.state.board[d5] == Piece(PieceType.PAWN, Color.WHITE, has_moved=True)
        assert ctrl.state.board[E4].is_empty
        assert all(p.color == Color.WHITE for _, p in ctrl.state.board.occupied())

    def test_king_may_capture_protected_piece(self) -> None:
        # No check detection: the move is allowed even into attack.
        ctrl = GameController()
        ctrl.new_game("8/8/8/8/8/2r5/1p6/K7")
        b2 = parse_square("b2")
        ctrl.click_square(A1)
        assert ctrl.click_square(b2) == ClickOutcome.MOVED


class TestTurnAlternation:
    def test_turns_alternate(self) -> None:
        ctrl = GameController()
        ctrl.click_square(E2)
        ctrl.click_square(E4)
        # White may not move again
        assert ctrl.click_square(parse_square("d2")) == ClickOutcome.NOT_YOUR_TURN
        assert ctrl.click_square(E7) == ClickOutcome.SELECTED
        assert ctrl.click_square(E5) == ClickOutcome.MOVED
        assert ctrl.side_to_move == Color.WHITE
        assert ctrl.state.move_count == 2
        assert ctrl.state.fullmove_display == 2

    def test_scripted_game_keeps_invariants(self) -> None:
        ctrl = GameController()
        script = ["e2", "e4", "e7", "e5", "g1", "f3", "b8", "c6", "f1", "c4",
                  "g8", "f6", "f3", "g5", "d7", "d5", "e4", "d5", "f6", "d5",
                  "g5", "f7"]
        moves = 0
        for name in script:
            outcome = ctrl.click_square(parse_square(name))
            _assert_invariants(ctrl)
            if outcome == ClickOutcome.MOVED:
                moves += 1
        assert moves == 11
        assert ctrl.state.move_count == 11
        assert ctrl.side_to_move == Color.BLACK
        # Knight took the f7 pawn; nothing stops it next to the black king.
        assert ctrl.state.board[parse_square("f7")] == Piece(
            PieceType.KNIGHT, Color.WHITE, has_moved=True
        )

    def test_no_move_without_selection_of_own_color(self) -> None:
        ctrl = GameController()
        ctrl.click_square(A7)
        ctrl.click_square(parse_square("a6"))
        assert ctrl.state.move_count == 0
        assert ctrl.state.board[A7].color == Color.BLACK


class TestEvents:
    def test_move_event_fires_with_record(self) -> None:
        ctrl = GameController()
        records: list[MoveRecord] = []
        states: list[GameState] = []

        def on_move(record: MoveRecord, state: GameState) -> None:
            records.append(record)
            states.append(state)

        ctrl.events.on_move.append(on_move)
        ctrl.click_square(E2)
        ctrl.click_square(E4)

        assert len(records) == 1
        record = records[0]
        assert (record.number, record.color) == (1, Color.WHITE)
        assert (record.from_sq, record.to_sq) == (E2, E4)
        assert record.piece.has_moved
        assert not record.was_capture
        assert states[0] is ctrl.state

    def test_outcome_event_reports_every_click(self) -> None:
        ctrl = GameController()
        seen: list[tuple[ClickOutcome, Square | None]] = []
        ctrl.events.on_outcome.append(lambda o, sq: seen.append((o, sq)))
        ctrl.click_square(E4)
        ctrl.click_square(E2)
        ctrl.click_square(None)
        ctrl.clear_selection()
        assert seen == [
            (ClickOutcome.NO_PIECE, E4),
            (ClickOutcome.SELECTED, E2),
            (ClickOutcome.OFF_BOARD, None),
            (ClickOutcome.CLEARED, None),
        ]

    def test_selection_events(self) -> None:
        ctrl = GameController()
        changes: list[Square | None] = []
        ctrl.events.on_selection_changed.append(changes.append)
        ctrl.click_square(E2)
        ctrl.click_square(F2)
        ctrl.click_square(F2)
        assert changes == [E2, F2, None]


class TestHoverAndLogging:
    def test_hover_is_display_only(self) -> None:
        ctrl = GameController()
        ctrl.hover_square(E4)
        assert ctrl.state.hovered == E4
        assert ctrl.state.selection is None
        ctrl.hover_square(None)
        assert ctrl.state.hovered is None

    def test_move_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        ctrl = GameController()
        with caplog.at_level(logging.INFO, logger="gambit.game.controller"):
            ctrl.click_square(E2)
            ctrl.click_square(E4)
        assert "Move #1: White moved from E2 to E4" in caplog.text
        assert "Now it's Black's turn." in caplog.text

    def test_wrong_turn_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        ctrl = GameController()
        with caplog.at_level(logging.INFO, logger="gambit.game.controller"):
            ctrl.click_square(A7)
        assert "It's White's turn! Cannot select Black piece." in caplog.text


@pytest.mark.slow
@pytest.mark.parametrize("seed", range(5))
def test_random_clicks_keep_invariants(seed: int) -> None:
    rng = random.Random(seed)
    ctrl = GameController()
    squares = list(all_squares())
    pieces_before = len(list(ctrl.state.board.occupied()))
    for _ in range(2000):
        side = ctrl.side_to_move
        moves_before = ctrl.state.move_count
        outcome = ctrl.click_square(rng.choice(squares))
        _assert_invariants(ctrl)
        if outcome == ClickOutcome.MOVED:
            assert ctrl.state.move_count == moves_before + 1
            assert ctrl.side_to_move == side.opposite
        else:
            assert ctrl.side_to_move == side
    # Pieces only ever disappear through captures
    assert len(list(ctrl.state.board.occupied())) <= pieces_before


@pytest.mark.parametrize(
    ("outcome", "changed"),
    [
        (ClickOutcome.OFF_BOARD, False),
        (ClickOutcome.NOT_YOUR_TURN, False),
        (ClickOutcome.NO_PIECE, False),
        (ClickOutcome.INVALID_MOVE, False),
        (ClickOutcome.SELECTED, True),
        (ClickOutcome.DESELECTED, True),
        (ClickOutcome.MOVED, True),
        (ClickOutcome.RESELECTED, True),
        (ClickOutcome.CLEARED, True),
    ],
)
def test_outcome_changed_state(outcome: ClickOutcome, changed: bool) -> None:
    assert outcome.changed_state is changed
