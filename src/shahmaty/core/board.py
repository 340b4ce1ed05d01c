"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

import random
from collections.abc import Iterator

from shahmaty.core.enums import HEAVY_PIECE_TYPES, Color, PieceType
from shahmaty.core.piece import Piece
from shahmaty.core.types import ALL_POSITIONS, BOARD_SIZE, Position

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)

# Per side: one queen and two of every other heavy type.
_HEAVY_SET: tuple[PieceType, ...] = tuple(
    pt for pt in HEAVY_PIECE_TYPES for _ in range(1 if pt == PieceType.QUEEN else 2)
)

BLACK_KING_HOME = Position(0, 4)
WHITE_KING_HOME = Position(7, 4)


def _index(pos: Position) -> int:
    return pos.row * BOARD_SIZE + pos.col


class Board:
    """64-square board of ``Piece | None``, addressed by :class:`Position`.

    Item assignment exists for building layouts. Rule code treats boards
    as snapshots and only ever derives new ones through :meth:`with_move`.
    """

    __slots__ = ("_squares",)

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * (BOARD_SIZE * BOARD_SIZE)

    # -- Element access -----------------------------------------------------

    def __getitem__(self, pos: Position) -> Piece | None:
        return self._squares[_index(pos)]

    def __setitem__(self, pos: Position, piece: Piece | None) -> None:
        self._squares[_index(pos)] = piece

    def is_empty(self, pos: Position) -> bool:
        return self._squares[_index(pos)] is None

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color | None = None) -> Iterator[tuple[Position, Piece]]:
        """Occupied squares in row-major order, optionally filtered by *color*."""
        for pos in ALL_POSITIONS:
            piece = self._squares[_index(pos)]
            if piece is None:
                continue
            if color is None or piece.color == color:
                yield pos, piece

    def king_position(self, color: Color) -> Position | None:
        """Square of *color*'s king, or ``None`` if there is none."""
        for pos, piece in self.pieces(color):
            if piece.piece_type == PieceType.KING:
                return pos
        return None

    # -- Copying ------------------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        return b

    def with_move(self, from_pos: Position, to_pos: Position) -> Board:
        """New board with the piece on *from_pos* moved to *to_pos*.

        Whatever stood on *to_pos* is discarded. ``self`` is left untouched.
        """
        b = self.copy()
        b[to_pos] = self[from_pos]
        b[from_pos] = None
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position (black on rows 0-1, white on rows 6-7)."""
        b = cls()
        for col, pt in enumerate(_BACK_RANK):
            b[Position(0, col)] = Piece(Color.BLACK, pt)
            b[Position(1, col)] = Piece(Color.BLACK, PieceType.PAWN)
            b[Position(6, col)] = Piece(Color.WHITE, PieceType.PAWN)
            b[Position(7, col)] = Piece(Color.WHITE, pt)
        return b

    @classmethod
    def from_diagram(cls, diagram: str) -> Board:
        """Build a board from eight rows of eight characters, row 0 first.

        ``.`` marks an empty square, piece letters follow :meth:`Piece.from_char`.
        Whitespace inside a row is ignored, so ``repr``-style spacing works.
        """
        rows = [line.replace(" ", "") for line in diagram.strip().splitlines()]
        if len(rows) != BOARD_SIZE or any(len(r) != BOARD_SIZE for r in rows):
            raise ValueError("Board diagram must be 8 rows of 8 squares")
        b = cls()
        for row, line in enumerate(rows):
            for col, char in enumerate(line):
                if char != ".":
                    b[Position(row, col)] = Piece.from_char(char)
        return b

    @classmethod
    def shuffled_heavy(cls, rng: random.Random | None = None) -> Board:
        """Kings on their home squares, heavy pieces scattered at random.

        Both sides' queens, rooks, bishops and knights land on distinct
        squares drawn from the 62 squares the kings leave free. No pawns.
        Either king may start attacked; :meth:`GameState.shuffled` redraws
        until neither is.
        """
        rng = rng or random.Random()
        b = cls()
        b[BLACK_KING_HOME] = Piece(Color.BLACK, PieceType.KING)
        b[WHITE_KING_HOME] = Piece(Color.WHITE, PieceType.KING)

        heavy = [Piece(Color.WHITE, pt) for pt in _HEAVY_SET] + [
            Piece(Color.BLACK, pt) for pt in _HEAVY_SET
        ]
        free = [pos for pos in ALL_POSITIONS if b.is_empty(pos)]
        for pos, piece in zip(rng.sample(free, len(heavy)), heavy):
            b[pos] = piece
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(BOARD_SIZE):
            cells = []
            for col in range(BOARD_SIZE):
                p = self[Position(row, col)]
                cells.append(str(p) if p else ".")
            rows.append(f"{BOARD_SIZE - row} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
