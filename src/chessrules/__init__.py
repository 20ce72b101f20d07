"""Rules engine for standard chess.

Quick start::

    import chessrules
    from chessrules.core import E2, E4

    game = chessrules.new_game()
    chessrules.apply_move(game, E2, E4)
    print(chessrules.status(game))
"""

from chessrules.core import Color, GameStatus, Move, Outcome, PieceType, Square
from chessrules.game import (
    GameState,
    InternalInvariantViolation,
    MoveResult,
    RejectReason,
    apply_move,
    is_in_check,
    legal_moves,
    new_game,
    status,
)

__all__ = [
    "Color",
    "GameState",
    "GameStatus",
    "InternalInvariantViolation",
    "Move",
    "MoveResult",
    "Outcome",
    "PieceType",
    "RejectReason",
    "Square",
    "apply_move",
    "is_in_check",
    "legal_moves",
    "new_game",
    "status",
]
