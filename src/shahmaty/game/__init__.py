"""Game management layer — controller and state machine.

Quick start::

    from shahmaty.core import Position
    from shahmaty.game import GameController

    ctrl = GameController()
    ctrl.click_square(Position.parse("e2"))
    ctrl.click_square(Position.parse("e4"))
"""

from shahmaty.game.controller import GameController, GameEvents
from shahmaty.game.interfaces import ClickOutcome, IGameController, SelectionPhase
from shahmaty.game.state import GameState

__all__ = [
    # Interfaces
    "ClickOutcome",
    "IGameController",
    "SelectionPhase",
    # Concrete
    "GameController",
    "GameEvents",
    "GameState",
]
