"""Move legality, path obstruction, check detection and move enumeration.

Everything here is a pure function of the board it is given. Simulation
always happens on a copy produced by :meth:`Board.with_move`.
"""

from __future__ import annotations

from collections.abc import Callable

from shahmaty.core.board import Board
from shahmaty.core.enums import Color, PieceType
from shahmaty.core.move import Move
from shahmaty.core.piece import Piece
from shahmaty.core.types import ALL_POSITIONS, Position

# row delta for a pawn step, and the row a pawn may double-step from
_PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: -1, Color.BLACK: 1}
_PAWN_START_ROW: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


# -- Path obstruction -------------------------------------------------------


def is_path_clear(board: Board, from_pos: Position, to_pos: Position) -> bool:
    """Whether every square strictly between *from_pos* and *to_pos* is empty.

    The two squares must share a row, a column or a diagonal; that is not
    re-checked here.
    """
    drow = _sign(to_pos.row - from_pos.row)
    dcol = _sign(to_pos.col - from_pos.col)

    row = from_pos.row + drow
    col = from_pos.col + dcol
    while (row, col) != (to_pos.row, to_pos.col):
        if not board.is_empty(Position(row, col)):
            return False
        row += drow
        col += dcol
    return True


# -- Piece-specific geometry ------------------------------------------------


def _pawn_ok(board: Board, from_pos: Position, to_pos: Position, piece: Piece) -> bool:
    direction = _PAWN_DIRECTION[piece.color]
    target = board[to_pos]
    row_step = to_pos.row - from_pos.row

    if from_pos.col == to_pos.col and target is None:
        if row_step == direction:
            return True
        if (
            from_pos.row == _PAWN_START_ROW[piece.color]
            and row_step == 2 * direction
            and board.is_empty(Position(from_pos.row + direction, from_pos.col))
        ):
            return True

    # Diagonal capture; friendly targets were already rejected.
    return (
        abs(to_pos.col - from_pos.col) == 1
        and row_step == direction
        and target is not None
    )


def _knight_ok(board: Board, from_pos: Position, to_pos: Position, piece: Piece) -> bool:
    deltas = {abs(to_pos.row - from_pos.row), abs(to_pos.col - from_pos.col)}
    return deltas == {1, 2}


def _bishop_ok(board: Board, from_pos: Position, to_pos: Position, piece: Piece) -> bool:
    if abs(to_pos.row - from_pos.row) != abs(to_pos.col - from_pos.col):
        return False
    return is_path_clear(board, from_pos, to_pos)


def _rook_ok(board: Board, from_pos: Position, to_pos: Position, piece: Piece) -> bool:
    if from_pos.row != to_pos.row and from_pos.col != to_pos.col:
        return False
    return is_path_clear(board, from_pos, to_pos)


def _queen_ok(board: Board, from_pos: Position, to_pos: Position, piece: Piece) -> bool:
    straight = from_pos.row == to_pos.row or from_pos.col == to_pos.col
    diagonal = abs(to_pos.row - from_pos.row) == abs(to_pos.col - from_pos.col)
    if not (straight or diagonal):
        return False
    return is_path_clear(board, from_pos, to_pos)


def _king_ok(board: Board, from_pos: Position, to_pos: Position, piece: Piece) -> bool:
    return abs(to_pos.row - from_pos.row) <= 1 and abs(to_pos.col - from_pos.col) <= 1


_PieceRule = Callable[[Board, Position, Position, Piece], bool]

_PIECE_RULES: dict[PieceType, _PieceRule] = {
    PieceType.PAWN: _pawn_ok,
    PieceType.KNIGHT: _knight_ok,
    PieceType.BISHOP: _bishop_ok,
    PieceType.ROOK: _rook_ok,
    PieceType.QUEEN: _queen_ok,
    PieceType.KING: _king_ok,
}


# -- Public API -------------------------------------------------------------


def is_legal_move(
    board: Board, from_pos: Position, to_pos: Position, piece: Piece
) -> bool:
    """Whether *piece* may go from *from_pos* to *to_pos*, ignoring check.

    ``from_pos`` is assumed to hold ``piece``. A move onto the square it
    starts from is never legal, nor is a move onto a friendly piece.
    """
    if from_pos == to_pos:
        return False

    target = board[to_pos]
    if target is not None and target.color == piece.color:
        return False

    rule = _PIECE_RULES.get(piece.piece_type)
    if rule is None:
        return False
    return rule(board, from_pos, to_pos, piece)


def is_king_in_check(board: Board, color: Color) -> bool:
    """Could any opposing piece legally capture *color*'s king right now?

    A board without a king of *color* is reported as not in check.
    """
    king_pos = board.king_position(color)
    if king_pos is None:
        return False

    for pos, piece in board.pieces(color.opposite):
        if is_legal_move(board, pos, king_pos, piece):
            return True
    return False


def calculate_valid_moves(
    board: Board, from_pos: Position, piece: Piece
) -> list[Position]:
    """Every destination that is legal and keeps *piece*'s king out of check.

    Candidates are scanned row by row; the result keeps that order.
    """
    return MoveGenerator(board).legal_destinations(from_pos, piece)


class MoveGenerator:
    """Rule queries bound to a single board snapshot.

    The board is never mutated; safety checks simulate on copies.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    @property
    def board(self) -> Board:
        return self._board

    # -- Public API ---------------------------------------------------------

    def is_legal(self, move: Move) -> bool:
        return is_legal_move(self._board, move.from_pos, move.to_pos, move.piece)

    def is_safe(self, move: Move) -> bool:
        """Legal, and the mover's king is not in check afterwards."""
        if not self.is_legal(move):
            return False
        after = self._simulate(move)
        return not is_king_in_check(after, move.piece.color)

    def legal_destinations(self, from_pos: Position, piece: Piece) -> list[Position]:
        destinations: list[Position] = []
        append = destinations.append

        for to_pos in ALL_POSITIONS:
            if not is_legal_move(self._board, from_pos, to_pos, piece):
                continue
            after = self._simulate(Move(from_pos, to_pos, piece))
            if not is_king_in_check(after, piece.color):
                append(to_pos)
        return destinations

    # -- Attack detection ---------------------------------------------------

    def is_in_check(self, color: Color) -> bool:
        return is_king_in_check(self._board, color)

    # -- Internal -----------------------------------------------------------

    def _simulate(self, move: Move) -> Board:
        after = self._board.with_move(move.from_pos, move.to_pos)
        after[move.to_pos] = move.piece
        return after
