"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from shahmaty.core import Board, Position, calculate_valid_moves

    board = Board.initial()
    pawn = board[Position.parse("e2")]
    for pos in calculate_valid_moves(board, Position.parse("e2"), pawn):
        print(pos)
"""

from shahmaty.core.board import Board
from shahmaty.core.enums import HEAVY_PIECE_TYPES, Color, PieceType
from shahmaty.core.move import Move
from shahmaty.core.move_generator import (
    MoveGenerator,
    calculate_valid_moves,
    is_king_in_check,
    is_legal_move,
    is_path_clear,
)
from shahmaty.core.piece import Piece
from shahmaty.core.rules import Rules
from shahmaty.core.types import ALL_POSITIONS, BOARD_SIZE, Position, is_on_board

__all__ = [
    # Enums
    "Color",
    "HEAVY_PIECE_TYPES",
    "PieceType",
    # Types / helpers
    "ALL_POSITIONS",
    "BOARD_SIZE",
    "Position",
    "is_on_board",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "Piece",
    "Rules",
    # Rule functions
    "calculate_valid_moves",
    "is_king_in_check",
    "is_legal_move",
    "is_path_clear",
]
