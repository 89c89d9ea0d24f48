"""Game management layer — state aggregate and selection controller.

Quick start::

    from gambit.core import parse_square
    from gambit.game import GameController

    ctrl = GameController()
    ctrl.click_square(parse_square("e2"))
    ctrl.click_square(parse_square("e4"))
"""

from gambit.game.controller import GameController, GameEvents
from gambit.game.interfaces import ClickOutcome, IGameController, SelectionPhase
from gambit.game.state import GameState, MoveRecord

__all__ = [
    # Interfaces
    "ClickOutcome",
    "IGameController",
    "SelectionPhase",
    # Concrete
    "GameController",
    "GameEvents",
    "GameState",
    "MoveRecord",
]
