"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from shahmaty.core.piece import Piece
from shahmaty.core.types import Position


@dataclass(frozen=True, slots=True)
class Move:
    """A candidate transition of *piece* from one square to another.

    Moves are evaluated against a board and then discarded; no history
    of them is kept.
    """

    from_pos: Position
    to_pos: Position
    piece: Piece

    def __str__(self) -> str:
        return f"{self.from_pos.name}{self.to_pos.name}"
