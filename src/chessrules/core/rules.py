"""High-level chess rules: check, checkmate and stalemate."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from chessrules.core.enums import Color, GameStatus
from chessrules.core.move_generator import MoveGenerator

if TYPE_CHECKING:
    from chessrules.core.position import Position


@dataclass(frozen=True, slots=True)
class Outcome:
    """Game status as seen by callers: active, checkmate (with sides) or stalemate."""

    status: GameStatus
    winner: Color | None = None

    @property
    def loser(self) -> Color | None:
        """The checkmated side, if any."""
        return None if self.winner is None else self.winner.opposite

    @property
    def is_terminal(self) -> bool:
        return self.status != GameStatus.ACTIVE

    def __str__(self) -> str:
        if self.status == GameStatus.CHECKMATE:
            return f"checkmate, {self.winner} wins"
        if self.status == GameStatus.STALEMATE:
            return "stalemate"
        return "active"


ACTIVE = Outcome(GameStatus.ACTIVE)
STALEMATE = Outcome(GameStatus.STALEMATE)


class Rules:
    """Static rule-checker that operates on a :class:`Position`."""

    # No draw claims of any kind: only checkmate and stalemate end a game.

    @staticmethod
    def is_in_check(position: Position) -> bool:
        gen = MoveGenerator(position)
        return gen.is_in_check(position.side_to_move)

    @staticmethod
    def is_checkmate(position: Position) -> bool:
        if not Rules.is_in_check(position):
            return False
        return not MoveGenerator(position).has_legal_moves()

    @staticmethod
    def is_stalemate(position: Position) -> bool:
        if Rules.is_in_check(position):
            return False
        return not MoveGenerator(position).has_legal_moves()

    @staticmethod
    def outcome(position: Position) -> Outcome:
        """Evaluate the terminal condition for the side to move."""
        gen = MoveGenerator(position)
        if gen.has_legal_moves():
            return ACTIVE
        if gen.is_in_check(position.side_to_move):
            return Outcome(GameStatus.CHECKMATE, winner=position.side_to_move.opposite)
        return STALEMATE
