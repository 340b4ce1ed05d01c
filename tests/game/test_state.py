"""Tests for GameState."""

import random

import pytest

from shahmaty.core.board import Board
from shahmaty.core.enums import Color, PieceType
from shahmaty.core.move_generator import is_king_in_check
from shahmaty.core.piece import Piece
from shahmaty.core.types import Position
from shahmaty.game.interfaces import SelectionPhase
from shahmaty.game.state import GameState

E2 = Position.parse("e2")
E4 = Position.parse("e4")
E7 = Position.parse("e7")

CHECK_ON_E_FILE = """
k...r...
........
........
........
........
........
...PB...
....K...
"""


class TestGameStateSetup:
    def test_start_default(self) -> None:
        gs = GameState.start()
        assert gs.board == Board.initial()
        assert gs.turn == Color.WHITE
        assert gs.phase == SelectionPhase.IDLE
        assert gs.valid_moves == ()
        assert not gs.in_check

    def test_start_detects_check(self) -> None:
        board = Board.from_diagram(CHECK_ON_E_FILE)
        board[Position(6, 4)] = None
        gs = GameState.start(board)
        assert gs.in_check
        assert gs.checked_king == Position(7, 4)


class TestShuffledStart:
    @pytest.mark.parametrize("seed", range(200))
    def test_neither_king_starts_attacked(self, seed: int) -> None:
        gs = GameState.shuffled(random.Random(seed))
        assert not is_king_in_check(gs.board, Color.WHITE)
        assert not is_king_in_check(gs.board, Color.BLACK)
        assert gs.turn == Color.WHITE
        assert not gs.in_check

    def test_same_seed_same_layout(self) -> None:
        assert (
            GameState.shuffled(random.Random(4)).board
            == GameState.shuffled(random.Random(4)).board
        )

    def test_kings_kept_and_no_pawns(self) -> None:
        board = GameState.shuffled(random.Random(4)).board
        assert board.king_position(Color.WHITE) == Position(7, 4)
        assert board.king_position(Color.BLACK) == Position(0, 4)
        assert all(p.piece_type != PieceType.PAWN for _, p in board.pieces())


class TestSelection:
    def test_select_own_piece(self) -> None:
        gs = GameState.start().select(E2)
        assert gs is not None
        assert gs.phase == SelectionPhase.SELECTED
        assert gs.selected == E2
        assert gs.valid_moves == (E4, Position.parse("e3"))

    def test_select_opponent_piece_refused(self) -> None:
        assert GameState.start().select(E7) is None

    def test_select_empty_square_refused(self) -> None:
        assert GameState.start().select(Position(4, 4)) is None

    def test_clear_selection(self) -> None:
        gs = GameState.start().select(E2)
        assert gs is not None
        cleared = gs.clear_selection()
        assert cleared.selected is None
        assert cleared.valid_moves == ()

    def test_pinned_selection_has_no_targets(self) -> None:
        gs = GameState.start(Board.from_diagram(CHECK_ON_E_FILE)).select(Position(6, 4))
        assert gs is not None
        assert gs.valid_moves == ()
        assert not gs.is_valid_target(Position(5, 5))


class TestApplyMove:
    def test_legal_move_passes_turn(self) -> None:
        gs = GameState.start()
        after = gs.apply_move(E2, E4)
        assert after is not None
        assert after.turn == Color.BLACK
        assert after.board[E4] == Piece(Color.WHITE, PieceType.PAWN)
        assert after.selected is None

    def test_original_state_untouched(self) -> None:
        gs = GameState.start()
        gs.apply_move(E2, E4)
        assert gs.board == Board.initial()
        assert gs.turn == Color.WHITE

    def test_illegal_move_refused(self) -> None:
        assert GameState.start().apply_move(E2, Position.parse("e5")) is None

    def test_wrong_color_refused(self) -> None:
        assert GameState.start().apply_move(E7, Position.parse("e5")) is None

    def test_self_check_refused(self) -> None:
        gs = GameState.start(Board.from_diagram(CHECK_ON_E_FILE))
        assert gs.apply_move(Position(6, 4), Position(5, 5)) is None

    def test_other_piece_may_move_when_not_pinned(self) -> None:
        gs = GameState.start(Board.from_diagram(CHECK_ON_E_FILE))
        after = gs.apply_move(Position(6, 3), Position(5, 3))
        assert after is not None
        assert after.turn == Color.BLACK

    def test_check_recomputed_for_next_side(self) -> None:
        board = Board.from_diagram(
            """
            ....k...
            ........
            ........
            ........
            ........
            ........
            ........
            R...K...
            """
        )
        after = GameState.start(board).apply_move(Position(7, 0), Position(0, 0))
        assert after is not None
        assert after.turn == Color.BLACK
        assert after.in_check
        assert after.checked_king == Position(0, 4)
