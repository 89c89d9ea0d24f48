"""Tests for GameState."""

from gambit.core.board import Board
from gambit.core.enums import Color, PieceType
from gambit.core.piece import Piece
from gambit.core.types import D4, E2, E4
from gambit.game.interfaces import SelectionPhase
from gambit.game.state import GameState, MoveRecord


class TestGameStateSetup:
    def test_defaults(self) -> None:
        gs = GameState()
        assert gs.board == Board.initial()
        assert gs.side_to_move == Color.WHITE
        assert gs.selection is None
        assert not gs.legal_mask.any()
        assert gs.move_count == 0
        assert gs.phase == SelectionPhase.IDLE

    def test_setup_resets(self) -> None:
        gs = GameState()
        gs.board.move_piece(E2, E4)
        gs.selection = E4
        gs.legal_mask[D4] = True
        gs.move_count = 3
        gs.side_to_move = Color.BLACK
        gs.hovered = D4

        mask = gs.legal_mask
        gs.setup()

        assert gs.board == Board.initial()
        assert gs.selection is None
        assert gs.legal_mask is mask
        assert not mask.any()
        assert gs.move_count == 0
        assert gs.side_to_move == Color.WHITE
        assert gs.hovered is None

    def test_setup_custom_placement(self) -> None:
        gs = GameState()
        gs.setup("8/8/8/8/3R4/8/8/8", Color.BLACK)
        assert gs.board[D4] == Piece(PieceType.ROOK, Color.WHITE)
        assert gs.side_to_move == Color.BLACK


class TestGameStateQueries:
    def test_phase_follows_selection(self) -> None:
        gs = GameState()
        gs.selection = E2
        assert gs.phase == SelectionPhase.SELECTED
        assert gs.selected_piece == Piece(PieceType.PAWN, Color.WHITE)

    def test_hovered_piece(self) -> None:
        gs = GameState()
        assert gs.hovered_piece is None
        gs.hovered = E4
        assert gs.hovered_piece == Piece()

    def test_fullmove_display(self) -> None:
        gs = GameState()
        assert gs.fullmove_display == 1
        gs.move_count = 1
        assert gs.fullmove_display == 1
        gs.move_count = 2
        assert gs.fullmove_display == 2

    def test_is_legal_target_requires_selection(self) -> None:
        gs = GameState()
        gs.legal_mask[E4] = True
        assert not gs.is_legal_target(E4)
        gs.selection = E2
        assert gs.is_legal_target(E4)


class TestMoveRecord:
    def test_str_and_capture_flag(self) -> None:
        record = MoveRecord(
            number=1,
            color=Color.WHITE,
            piece=Piece(PieceType.PAWN, Color.WHITE, has_moved=True),
            from_sq=E2,
            to_sq=E4,
            captured=Piece(),
        )
        assert str(record) == "Move #1: White moved from E2 to E4"
        assert not record.was_capture
