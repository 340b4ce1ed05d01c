"""High-level chess rules: move legality, check and move safety."""

from __future__ import annotations

from shahmaty.core.board import Board
from shahmaty.core.enums import Color
from shahmaty.core.move import Move
from shahmaty.core.move_generator import MoveGenerator, is_legal_move
from shahmaty.core.piece import Piece
from shahmaty.core.types import Position


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    # Product policy:
    # - No castling, en passant or promotion.
    # - Check is reported; checkmate, stalemate and draws are not computed.

    @staticmethod
    def is_legal_move(
        board: Board, from_pos: Position, to_pos: Position, piece: Piece
    ) -> bool:
        return is_legal_move(board, from_pos, to_pos, piece)

    @staticmethod
    def is_in_check(board: Board, color: Color) -> bool:
        return MoveGenerator(board).is_in_check(color)

    @staticmethod
    def valid_moves(board: Board, from_pos: Position, piece: Piece) -> list[Position]:
        return MoveGenerator(board).legal_destinations(from_pos, piece)

    @staticmethod
    def is_safe_move(board: Board, move: Move) -> bool:
        """Legal and does not leave the mover's own king in check."""
        return MoveGenerator(board).is_safe(move)
