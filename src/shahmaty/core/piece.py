"""Pieces: a side plus a piece type, printable as a letter or a glyph."""

from __future__ import annotations

from dataclasses import dataclass

from shahmaty.core.enums import Color, PieceType

# Letter per type; white uses the uppercase form in diagrams.
_LETTERS: dict[PieceType, str] = {
    PieceType.PAWN: "p",
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
    PieceType.KING: "k",
}
_TYPE_BY_LETTER: dict[str, PieceType] = {ch: pt for pt, ch in _LETTERS.items()}

# (white, black) glyphs as drawn on the board buttons.
_GLYPHS: dict[PieceType, tuple[str, str]] = {
    PieceType.PAWN: ("♙", "♟"),
    PieceType.KNIGHT: ("♘", "♞"),
    PieceType.BISHOP: ("♗", "♝"),
    PieceType.ROOK: ("♖", "♜"),
    PieceType.QUEEN: ("♕", "♛"),
    PieceType.KING: ("♔", "♚"),
}


@dataclass(frozen=True, slots=True)
class Piece:
    """One piece on the board. Equal pieces are interchangeable."""

    color: Color
    piece_type: PieceType

    def __str__(self) -> str:
        letter = _LETTERS[self.piece_type]
        return letter.upper() if self.color == Color.WHITE else letter

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """``'N'`` is a white knight, ``'n'`` a black one."""
        ptype = _TYPE_BY_LETTER.get(char.lower()) if len(char) == 1 else None
        if ptype is None:
            raise ValueError(f"Invalid piece character: {char!r}")
        return cls(Color.WHITE if char.isupper() else Color.BLACK, ptype)

    @property
    def symbol(self) -> str:
        white, black = _GLYPHS[self.piece_type]
        return white if self.color == Color.WHITE else black
