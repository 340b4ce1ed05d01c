"""Tic-tac-toe — the 3x3 companion game."""

from __future__ import annotations

from enum import Enum

BOARD_CELLS = 9

# Cell indexes run 0..8, left to right, top to bottom.
WINNING_LINES: tuple[tuple[int, int, int], ...] = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),  # rows
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),  # columns
    (0, 4, 8),
    (2, 4, 6),  # diagonals
)


class Mark(Enum):
    X = "X"
    O = "O"  # noqa: E741

    @property
    def opposite(self) -> Mark:
        return Mark.O if self is Mark.X else Mark.X

    def __str__(self) -> str:
        return self.value


class Outcome(Enum):
    IN_PROGRESS = "in_progress"
    X_WINS = "x_wins"
    O_WINS = "o_wins"
    DRAW = "draw"


_WIN_FOR: dict[Mark, Outcome] = {Mark.X: Outcome.X_WINS, Mark.O: Outcome.O_WINS}


def find_winning_line(cells: list[Mark | None]) -> tuple[int, int, int] | None:
    """First completed line, if any."""
    for line in WINNING_LINES:
        a, b, c = line
        if cells[a] is not None and cells[a] == cells[b] == cells[c]:
            return line
    return None


class TicTacToeGame:
    """X moves first. Clicks on taken cells or after the end are ignored."""

    __slots__ = ("_cells", "_current", "_outcome", "_winning_line")

    def __init__(self) -> None:
        self._cells: list[Mark | None] = [None] * BOARD_CELLS
        self._current = Mark.X
        self._outcome = Outcome.IN_PROGRESS
        self._winning_line: tuple[int, int, int] | None = None

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def cells(self) -> tuple[Mark | None, ...]:
        return tuple(self._cells)

    @property
    def current(self) -> Mark:
        return self._current

    @property
    def outcome(self) -> Outcome:
        return self._outcome

    @property
    def winning_line(self) -> tuple[int, int, int] | None:
        return self._winning_line

    @property
    def is_over(self) -> bool:
        return self._outcome != Outcome.IN_PROGRESS

    # ── Actions ──────────────────────────────────────────────────────────

    def play(self, index: int) -> bool:
        """Mark *index* for the current player. ``False`` if the click is ignored."""
        if not 0 <= index < BOARD_CELLS:
            raise ValueError(f"Cell index out of range: {index}")
        if self.is_over or self._cells[index] is not None:
            return False

        self._cells[index] = self._current
        line = find_winning_line(self._cells)
        if line is not None:
            self._winning_line = line
            self._outcome = _WIN_FOR[self._current]
        elif all(cell is not None for cell in self._cells):
            self._outcome = Outcome.DRAW
        else:
            self._current = self._current.opposite
        return True

    def reset(self) -> None:
        self._cells = [None] * BOARD_CELLS
        self._current = Mark.X
        self._outcome = Outcome.IN_PROGRESS
        self._winning_line = None
