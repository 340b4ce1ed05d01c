"""Abstract interfaces for the game layer.

Presentation code talks to :class:`IGameController`, not to the concrete
controller, so a different front end can drive the same rules.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import random

    from shahmaty.core.board import Board
    from shahmaty.core.types import Position
    from shahmaty.game.state import GameState


# ── Selection FSM states ─────────────────────────────────────────────────────


class SelectionPhase(IntEnum):
    """Idle (nothing picked up) or Selected (a piece and its moves shown)."""

    IDLE = auto()
    SELECTED = auto()


class ClickOutcome(IntEnum):
    """What a square click did to the game."""

    IGNORED = auto()  # nothing selectable there
    SELECTED = auto()  # own piece picked up (or switched to)
    DESELECTED = auto()  # selection dropped, board unchanged
    MOVED = auto()  # move committed, turn passed
    REJECTED = auto()  # legal shape, but it would leave own king in check


# ── Controller interface ─────────────────────────────────────────────────────


class IGameController(ABC):
    """Contract for the object that owns turn and selection state."""

    @property
    @abstractmethod
    def state(self) -> GameState: ...

    @abstractmethod
    def new_game(self, board: Board | None = None) -> None:
        """Start over on *board* (standard layout when omitted)."""

    @abstractmethod
    def randomize_heavy_pieces(self, rng: random.Random | None = None) -> None:
        """Start over on a shuffled heavy-piece layout."""

    @abstractmethod
    def click_square(self, pos: Position) -> ClickOutcome:
        """Feed one user click into the selection state machine."""

    @abstractmethod
    def submit_move(self, from_pos: Position, to_pos: Position) -> bool:
        """Commit a move directly. Returns ``False`` if it was refused."""
