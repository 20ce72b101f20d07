"""Game state machine: applies moves, keeps history and detects game end."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from chessrules.core.board import Board
from chessrules.core.check import is_in_check
from chessrules.core.enums import Color, GameStatus
from chessrules.core.fen import position_from_fen
from chessrules.core.move import Move
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.piece import Piece
from chessrules.core.position import Position
from chessrules.core.rules import Outcome, Rules
from chessrules.core.serialization import position_from_dict, position_to_dict
from chessrules.core.types import Square
from chessrules.game.interfaces import (
    InternalInvariantViolation,
    MoveResult,
    RejectReason,
)

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """A single entry in the move history."""

    move: Move
    piece: Piece
    captured: Piece | None = None
    was_check: bool = False

    @property
    def was_capture(self) -> bool:
        return self.captured is not None


class GameState:
    """Owns one game: its position, status and move history.

    Pure data and logic with no threading and no UI. Only
    :meth:`apply_move` changes it, and nothing changes once the game is over.
    Readers get copies of the position and history.
    """

    __slots__ = ("_position", "_outcome", "_history")

    def __init__(self, position: Position | None = None) -> None:
        self._position = position if position is not None else Position.initial()
        self._outcome = Rules.outcome(self._position)
        self._history: list[MoveRecord] = []

    # ── Construction ─────────────────────────────────────────────────────

    @classmethod
    def from_position(cls, position: Position) -> GameState:
        """Start from an arbitrary position; status is evaluated immediately."""
        return cls(position)

    @classmethod
    def from_fen(cls, fen: str) -> GameState:
        return cls.from_position(position_from_fen(fen))

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, from_sq: Square, to_sq: Square) -> MoveResult:
        """Play the legal move from *from_sq* to *to_sq* for the side to move.

        Requests that cannot be played are returned as rejections and leave
        the game untouched.
        """
        if self.is_game_over:
            return self._reject(
                RejectReason.GAME_ALREADY_OVER, f"Game is over ({self.outcome})"
            )

        piece = self._position.board[from_sq]
        if piece is None:
            return self._reject(
                RejectReason.INVALID_SELECTION, f"No piece on {from_sq.name}"
            )
        if piece.color != self.side_to_move:
            return self._reject(
                RejectReason.INVALID_SELECTION,
                f"Piece on {from_sq.name} belongs to {piece.color}, "
                f"{self.side_to_move} to move",
            )

        candidate = self._find_legal(from_sq, to_sq)
        if candidate is None:
            return self._reject(
                RejectReason.ILLEGAL_DESTINATION,
                f"{piece.kind} on {from_sq.name} cannot move to {to_sq.name}",
            )

        mover = self.side_to_move
        after = self._position.copy()
        executed = after.make_move(candidate)
        if is_in_check(after.board, mover):
            raise InternalInvariantViolation(
                f"{mover} king attacked after legal move {executed}"
            )

        self._position = after
        assert after.last_move is not None
        record = MoveRecord(
            move=executed,
            piece=piece,
            captured=after.last_move.captured,
            was_check=is_in_check(after.board, after.side_to_move),
        )
        self._history.append(record)
        _LOGGER.debug("%s played %s", mover, executed)

        self._outcome = Rules.outcome(after)
        if self.is_game_over:
            _LOGGER.info("Game over after %d plies: %s", self.ply_count, self.outcome)

        return MoveResult(self, record)

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def position(self) -> Position:
        """A copy of the current position; changing it does not affect the game."""
        return self._position.copy()

    @property
    def outcome(self) -> Outcome:
        return self._outcome

    @property
    def history(self) -> list[MoveRecord]:
        """Played moves, oldest first. The list is a copy."""
        return list(self._history)

    @property
    def side_to_move(self) -> Color:
        return self._position.side_to_move

    @property
    def status(self) -> GameStatus:
        return self.outcome.status

    @property
    def winner(self) -> Color | None:
        return self.outcome.winner

    @property
    def is_game_over(self) -> bool:
        return self.outcome.is_terminal

    @property
    def board(self) -> Board:
        """A copy of the board; changing it does not affect the game."""
        return self._position.board.copy()

    @property
    def last_move(self) -> MoveRecord | None:
        return self._history[-1] if self._history else None

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self._history)

    def legal_moves(self, sq: Square) -> list[Move]:
        """Legal moves of the piece on *sq*; empty once the game is over."""
        if self.is_game_over:
            return []
        return MoveGenerator(self._position).legal_moves(sq)

    def all_legal_moves(self) -> list[Move]:
        """Legal moves in the current position."""
        if self.is_game_over:
            return []
        return MoveGenerator(self._position).generate_legal_moves()

    def is_in_check(self, color: Color) -> bool:
        return is_in_check(self._position.board, color)

    # ── Persistence ──────────────────────────────────────────────────────

    def to_dict(self) -> dict[str, Any]:
        """Snapshot for save/resume; move history is not included."""
        return position_to_dict(self._position)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GameState:
        return cls.from_position(position_from_dict(data))

    # ── Internal ─────────────────────────────────────────────────────────

    def _find_legal(self, from_sq: Square, to_sq: Square) -> Move | None:
        for move in self.legal_moves(from_sq):
            if move.to_sq == to_sq:
                return move
        return None

    def _reject(self, reason: RejectReason, message: str) -> MoveResult:
        _LOGGER.debug("Move rejected (%s): %s", reason.name, message)
        return MoveResult(self, reason=reason, message=message)
