"""Result types, errors and abstract interfaces for the game layer.

Presentation collaborators depend on :class:`IGameController`, not on the
concrete controller.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chessrules.core.move import Move
    from chessrules.core.types import Square
    from chessrules.game.state import GameState, MoveRecord


# ── Move request outcomes ────────────────────────────────────────────────────


class RejectReason(IntEnum):
    """Why a move request was refused. All are recoverable."""

    INVALID_SELECTION = auto()  # empty square or opponent's piece
    ILLEGAL_DESTINATION = auto()
    GAME_ALREADY_OVER = auto()


@dataclass(frozen=True, slots=True)
class MoveResult:
    """Answer to a move request.

    On success ``record`` describes the executed move and ``state`` is the
    updated game. On rejection ``reason`` and ``message`` say why, and the
    game is exactly as it was before the request.
    """

    state: GameState
    record: MoveRecord | None = None
    reason: RejectReason | None = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.reason is None

    def __bool__(self) -> bool:
        return self.ok


class InternalInvariantViolation(RuntimeError):
    """The mover's king was attacked after a move certified as legal.

    Signals a bug in move simulation, never bad user input, and is not meant
    to be caught and recovered from.
    """


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IGameController(ABC):
    """Interface for the game orchestrator."""

    @abstractmethod
    def new_game(self, fen: str | None = None) -> None:
        """Set up a new game."""

    @abstractmethod
    def submit_move(self, from_sq: Square, to_sq: Square) -> MoveResult:
        """Submit a move request; rejected requests leave the game unchanged."""

    @abstractmethod
    def legal_moves(self, sq: Square) -> list[Move]:
        """Legal moves of the piece on *sq* for the side to move."""
