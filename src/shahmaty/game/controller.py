"""GameController — owns the current chess state and drives it from clicks.

Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Callable
from dataclasses import dataclass, field

from shahmaty.core.board import Board
from shahmaty.core.enums import Color
from shahmaty.core.move import Move
from shahmaty.core.move_generator import is_legal_move
from shahmaty.core.types import Position
from shahmaty.game.interfaces import ClickOutcome, IGameController
from shahmaty.game.state import GameState

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

StateCallback = Callable[[GameState], None]
MoveCallback = Callable[[Move, GameState], None]  # move, state after
CheckCallback = Callable[[Color], None]  # color now in check


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_state_changed: list[StateCallback] = field(default_factory=list)
    on_move: list[MoveCallback] = field(default_factory=list)
    on_check: list[CheckCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Holds the single current :class:`GameState` and replaces it wholesale.

    Thread-safety: none. Call from one thread (the UI thread); a server
    hosting several games needs one controller per game behind its own lock.
    """

    __slots__ = ("_state", "events")

    def __init__(self, board: Board | None = None) -> None:
        self._state = GameState.start(board)
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def turn(self) -> Color:
        return self._state.turn

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(self, board: Board | None = None) -> None:
        _LOGGER.info("New game")
        self._set_state(GameState.start(board))

    def randomize_heavy_pieces(self, rng: random.Random | None = None) -> None:
        _LOGGER.info("New game with shuffled heavy pieces")
        self._set_state(GameState.shuffled(rng))

    def click_square(self, pos: Position) -> ClickOutcome:
        state = self._state

        if state.selected is None:
            selected = state.select(pos)
            if selected is None:
                _LOGGER.debug("Ignored click on %s", pos)
                return ClickOutcome.IGNORED
            self._set_state(selected)
            return ClickOutcome.SELECTED

        from_pos = state.selected
        if self._commit(from_pos, pos):
            return ClickOutcome.MOVED

        # Clicking another piece of ours switches the selection.
        reselected = state.select(pos)
        if reselected is not None:
            self._set_state(reselected)
            return ClickOutcome.SELECTED

        piece = state.board[from_pos]
        self._set_state(state.clear_selection())
        if piece is not None and is_legal_move(state.board, from_pos, pos, piece):
            _LOGGER.debug("Rejected %s%s: own king would be in check", from_pos, pos)
            return ClickOutcome.REJECTED
        return ClickOutcome.DESELECTED

    def submit_move(self, from_pos: Position, to_pos: Position) -> bool:
        if self._commit(from_pos, to_pos):
            return True
        _LOGGER.debug("Refused move %s%s", from_pos, to_pos)
        return False

    # ── Internal helpers ─────────────────────────────────────────────────

    def _commit(self, from_pos: Position, to_pos: Position) -> bool:
        before = self._state
        after = before.apply_move(from_pos, to_pos)
        if after is None:
            return False

        piece = before.board[from_pos]
        assert piece is not None  # apply_move refuses empty squares
        move = Move(from_pos, to_pos, piece)
        _LOGGER.info("%s %s", before.turn, move)

        self._set_state(after)
        self._emit_move(move)
        if after.in_check:
            _LOGGER.info("%s is in check", after.turn)
            self._emit_check(after.turn)
        return True

    def _set_state(self, state: GameState) -> None:
        self._state = state
        for cb in self.events.on_state_changed:
            cb(state)

    def _emit_move(self, move: Move) -> None:
        for cb in self.events.on_move:
            cb(move, self._state)

    def _emit_check(self, color: Color) -> None:
        for cb in self.events.on_check:
            cb(color)
