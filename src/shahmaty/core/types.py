"""Position value object and coordinate helpers.

Board layout (row-major, row 0 at the top):
    row 0 = rank 8 (black's home rank), row 7 = rank 1 (white's home rank)
    col 0 = file a, col 7 = file h

So ``Position(6, 4)`` is ``e2`` and ``Position(0, 4)`` is ``e8``.
"""

from __future__ import annotations

from dataclasses import dataclass

BOARD_SIZE = 8

_FILES = "abcdefgh"


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """A board coordinate; both components are in ``[0, 7]``."""

    row: int
    col: int

    def __post_init__(self) -> None:
        if not is_on_board(self.row, self.col):
            raise ValueError(f"Position off the board: ({self.row}, {self.col})")

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return self.name

    @property
    def name(self) -> str:
        """Human-readable square name, e.g. ``Position(6, 4).name == 'e2'``."""
        return f"{_FILES[self.col]}{BOARD_SIZE - self.row}"

    @classmethod
    def parse(cls, name: str) -> Position:
        """Parse a square name, e.g. ``'e4'`` → ``Position(4, 4)``."""
        if len(name) != 2 or name[0] not in _FILES or name[1] not in "12345678":
            raise ValueError(f"Invalid square name: {name!r}")
        return cls(BOARD_SIZE - int(name[1]), _FILES.index(name[0]))


def is_on_board(row: int, col: int) -> bool:
    """Check whether a raw coordinate pair lies on the board."""
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


# Row 0 → 7, col 0 → 7.
ALL_POSITIONS: tuple[Position, ...] = tuple(
    Position(row, col) for row in range(BOARD_SIZE) for col in range(BOARD_SIZE)
)
