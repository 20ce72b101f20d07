"""GameController — the central orchestrator of a chess game.

Coordinates move requests against the GameState and emits events via simple
callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chessrules.core.move import Move
from chessrules.core.rules import Outcome
from chessrules.core.types import Square
from chessrules.game.interfaces import IGameController, MoveResult
from chessrules.game.state import GameState, MoveRecord

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, GameState], None]
RejectedCallback = Callable[[MoveResult], None]
GameOverCallback = Callable[[Outcome], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_rejected: list[RejectedCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Validates move requests, applies them and notifies listeners.

    Thread-safety: methods are designed to be called from a single thread.
    Each controller owns exactly one :class:`GameState`.
    """

    __slots__ = ("_state", "events")

    def __init__(self) -> None:
        self._state = GameState()
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def outcome(self) -> Outcome:
        return self._state.outcome

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(self, fen: str | None = None) -> None:
        self._state = GameState() if fen is None else GameState.from_fen(fen)
        _LOGGER.info("New game started (%s to move)", self._state.side_to_move)
        if self._state.is_game_over:
            self._emit_game_over(self._state.outcome)

    def submit_move(self, from_sq: Square, to_sq: Square) -> MoveResult:
        result = self._state.apply_move(from_sq, to_sq)
        if not result.ok:
            self._emit_rejected(result)
            return result

        assert result.record is not None
        self._emit_move(result.record)
        if self._state.is_game_over:
            self._emit_game_over(self._state.outcome)
        return result

    def legal_moves(self, sq: Square) -> list[Move]:
        return self._state.legal_moves(sq)

    def legal_destinations(self, sq: Square) -> list[Square]:
        """Target squares of the piece on *sq*, in generation order."""
        return [move.to_sq for move in self._state.legal_moves(sq)]

    # ── Internal helpers ─────────────────────────────────────────────────

    def _emit_move(self, record: MoveRecord) -> None:
        for cb in self.events.on_move:
            cb(record, self._state)

    def _emit_rejected(self, result: MoveResult) -> None:
        for cb in self.events.on_rejected:
            cb(result)

    def _emit_game_over(self, outcome: Outcome) -> None:
        for cb in self.events.on_game_over:
            cb(outcome)
