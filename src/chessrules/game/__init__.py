"""Game management layer — controller, state machine, events.

Quick start::

    from chessrules.game import GameController

    ctrl = GameController()
    ctrl.apply_move(12, 28)  # e2-e4
"""

from chessrules.game.controller import GameController, GameEvents
from chessrules.game.interfaces import GamePhase, IGameController
from chessrules.game.state import GameState, MoveRecord

__all__ = [
    # Interfaces
    "GamePhase",
    "IGameController",
    # Concrete
    "GameController",
    "GameEvents",
    "GameState",
    "MoveRecord",
]
