"""Tests for Position and coordinate helpers."""

import pytest

from shahmaty.core.enums import Color, PieceType
from shahmaty.core.piece import Piece
from shahmaty.core.types import ALL_POSITIONS, Position, is_on_board


class TestPosition:
    def test_name(self) -> None:
        assert Position(6, 4).name == "e2"
        assert Position(0, 0).name == "a8"
        assert Position(7, 7).name == "h1"

    def test_parse(self) -> None:
        assert Position.parse("e4") == Position(4, 4)
        assert Position.parse("a1") == Position(7, 0)

    @pytest.mark.parametrize("name", ["", "e", "i1", "a9", "e44"])
    def test_parse_invalid(self, name: str) -> None:
        with pytest.raises(ValueError, match="Invalid square name"):
            Position.parse(name)

    @pytest.mark.parametrize("row,col", [(-1, 0), (0, 8), (8, 8)])
    def test_off_board_rejected(self, row: int, col: int) -> None:
        with pytest.raises(ValueError, match="off the board"):
            Position(row, col)

    def test_hashable_and_ordered(self) -> None:
        assert len({Position(1, 1), Position(1, 1)}) == 1
        assert Position(0, 7) < Position(1, 0)


class TestHelpers:
    def test_is_on_board(self) -> None:
        assert is_on_board(0, 0)
        assert not is_on_board(8, 0)
        assert not is_on_board(0, -1)

    def test_all_positions_row_major(self) -> None:
        assert len(ALL_POSITIONS) == 64
        assert ALL_POSITIONS[0] == Position(0, 0)
        assert ALL_POSITIONS[8] == Position(1, 0)
        assert list(ALL_POSITIONS) == sorted(ALL_POSITIONS)


class TestPiece:
    def test_symbols(self) -> None:
        assert Piece(Color.WHITE, PieceType.KING).symbol == "♔"
        assert Piece(Color.BLACK, PieceType.KNIGHT).symbol == "♞"

    def test_from_char(self) -> None:
        assert Piece.from_char("q") == Piece(Color.BLACK, PieceType.QUEEN)
        assert str(Piece(Color.WHITE, PieceType.ROOK)) == "R"

    def test_from_char_invalid(self) -> None:
        with pytest.raises(ValueError, match="Invalid piece character"):
            Piece.from_char("z")

    @pytest.mark.parametrize("text", ["", "Kk", "1"])
    def test_from_char_needs_one_letter(self, text: str) -> None:
        with pytest.raises(ValueError, match="Invalid piece character"):
            Piece.from_char(text)

    def test_case_picks_color(self) -> None:
        assert Piece.from_char("B") == Piece(Color.WHITE, PieceType.BISHOP)
        assert str(Piece(Color.BLACK, PieceType.PAWN)) == "p"
        assert Piece(Color.WHITE, PieceType.PAWN).symbol == "♙"

    def test_color_opposite(self) -> None:
        assert Color.WHITE.opposite == Color.BLACK
        assert str(Color.BLACK) == "black"
