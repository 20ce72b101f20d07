"""Functional entry points for presentation collaborators.

Each call takes the :class:`GameState` explicitly, so any number of games can
be driven side by side.
"""

from __future__ import annotations

import logging

from chessrules.core.enums import Color
from chessrules.core.move import Move
from chessrules.core.rules import Outcome
from chessrules.core.types import Square
from chessrules.game.interfaces import MoveResult
from chessrules.game.state import GameState

_LOGGER = logging.getLogger(__name__)


def new_game() -> GameState:
    """Standard starting position, white to move."""
    _LOGGER.info("New game")
    return GameState()


def legal_moves(state: GameState, square: Square) -> list[Move]:
    return state.legal_moves(square)


def apply_move(state: GameState, from_sq: Square, to_sq: Square) -> MoveResult:
    """Play a move; *state* is updated in place when the move is accepted."""
    return state.apply_move(from_sq, to_sq)


def is_in_check(state: GameState, color: Color) -> bool:
    return state.is_in_check(color)


def status(state: GameState) -> Outcome:
    return state.outcome
