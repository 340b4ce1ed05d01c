"""Game state — board, turn and selection as one immutable snapshot."""

from __future__ import annotations

import random
from dataclasses import dataclass, field, replace

from shahmaty.core.board import Board
from shahmaty.core.enums import Color
from shahmaty.core.move import Move
from shahmaty.core.move_generator import MoveGenerator
from shahmaty.core.types import Position
from shahmaty.game.interfaces import SelectionPhase


@dataclass(frozen=True)
class GameState:
    """Everything the chess screen needs to render one moment of a game.

    Transitions return new states; the board inside is never modified
    after the state is built. Game-over is not tracked: the rules layer
    reports check only.
    """

    board: Board
    turn: Color = Color.WHITE
    selected: Position | None = None
    valid_moves: tuple[Position, ...] = field(default=())
    in_check: bool = False  # is the side to move in check?

    # ── Initialisation ───────────────────────────────────────────────────

    @classmethod
    def start(cls, board: Board | None = None, turn: Color = Color.WHITE) -> GameState:
        board = board if board is not None else Board.initial()
        in_check = MoveGenerator(board).is_in_check(turn)
        return cls(board=board, turn=turn, in_check=in_check)

    @classmethod
    def shuffled(cls, rng: random.Random | None = None) -> GameState:
        """Fresh game on a :meth:`Board.shuffled_heavy` layout, white to move.

        Layouts where either king is already attacked are drawn again, so
        no first move can capture a king.
        """
        rng = rng or random.Random()
        while True:
            board = Board.shuffled_heavy(rng)
            gen = MoveGenerator(board)
            if not (gen.is_in_check(Color.WHITE) or gen.is_in_check(Color.BLACK)):
                return cls(board=board)

    # ── Selection ────────────────────────────────────────────────────────

    def select(self, pos: Position) -> GameState | None:
        """Pick up the side-to-move's piece on *pos*; ``None`` if there is none."""
        piece = self.board[pos]
        if piece is None or piece.color != self.turn:
            return None
        moves = MoveGenerator(self.board).legal_destinations(pos, piece)
        return replace(self, selected=pos, valid_moves=tuple(moves))

    def clear_selection(self) -> GameState:
        if self.selected is None and not self.valid_moves:
            return self
        return replace(self, selected=None, valid_moves=())

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, from_pos: Position, to_pos: Position) -> GameState | None:
        """State after moving the piece on *from_pos*, or ``None`` if refused.

        Legality and king safety are both re-checked here rather than
        trusted from :attr:`valid_moves`.
        """
        piece = self.board[from_pos]
        if piece is None or piece.color != self.turn:
            return None

        move = Move(from_pos, to_pos, piece)
        if not MoveGenerator(self.board).is_safe(move):
            return None

        board = self.board.with_move(from_pos, to_pos)
        nxt = self.turn.opposite
        return GameState(
            board=board,
            turn=nxt,
            in_check=MoveGenerator(board).is_in_check(nxt),
        )

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def phase(self) -> SelectionPhase:
        if self.selected is None:
            return SelectionPhase.IDLE
        return SelectionPhase.SELECTED

    def is_valid_target(self, pos: Position) -> bool:
        return pos in self.valid_moves

    @property
    def checked_king(self) -> Position | None:
        """Square of the side-to-move's king when it is in check."""
        if not self.in_check:
            return None
        return self.board.king_position(self.turn)
