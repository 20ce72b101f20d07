"""Game management layer — state machine, controller and functional API.

Quick start::

    from chessrules.core import E2, E4
    from chessrules.game import GameController

    ctrl = GameController()
    ctrl.new_game()
    result = ctrl.submit_move(E2, E4)
"""

from chessrules.game.api import apply_move, is_in_check, legal_moves, new_game, status
from chessrules.game.controller import GameController, GameEvents
from chessrules.game.interfaces import (
    IGameController,
    InternalInvariantViolation,
    MoveResult,
    RejectReason,
)
from chessrules.game.state import GameState, MoveRecord

__all__ = [
    # Interfaces / results
    "IGameController",
    "InternalInvariantViolation",
    "MoveResult",
    "RejectReason",
    # Concrete
    "GameController",
    "GameEvents",
    "GameState",
    "MoveRecord",
    # Functional API
    "apply_move",
    "is_in_check",
    "legal_moves",
    "new_game",
    "status",
]
