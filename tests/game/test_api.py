"""Tests for the functional entry points exposed at package level."""

import chessrules
from chessrules import Color, GameStatus, RejectReason
from chessrules.core.types import E2, E4, E5, E7, parse_square


def _play(state: chessrules.GameState, *moves: str) -> None:
    for text in moves:
        result = chessrules.apply_move(
            state, parse_square(text[:2]), parse_square(text[2:])
        )
        assert result.ok, result.message


class TestFunctionalApi:
    def test_new_game(self) -> None:
        state = chessrules.new_game()
        assert state.side_to_move == Color.WHITE
        assert chessrules.status(state).status == GameStatus.ACTIVE

    def test_legal_moves(self) -> None:
        state = chessrules.new_game()
        dests = {m.to_sq for m in chessrules.legal_moves(state, E2)}
        assert dests == {parse_square("e3"), E4}
        assert chessrules.legal_moves(state, E7) == []

    def test_apply_move_updates_in_place(self) -> None:
        state = chessrules.new_game()
        result = chessrules.apply_move(state, E2, E4)
        assert result.ok
        assert result.state is state
        assert state.side_to_move == Color.BLACK

    def test_rejected_move(self) -> None:
        state = chessrules.new_game()
        result = chessrules.apply_move(state, E2, E5)
        assert result.reason == RejectReason.ILLEGAL_DESTINATION
        assert state.ply_count == 0

    def test_is_in_check(self) -> None:
        state = chessrules.new_game()
        _play(state, "e2e4", "f7f6", "d2d4", "g7g5", "d1h5")
        assert chessrules.is_in_check(state, Color.BLACK)
        assert not chessrules.is_in_check(state, Color.WHITE)

    def test_status_reports_checkmate(self) -> None:
        state = chessrules.new_game()
        _play(state, "e2e4", "f7f6", "d2d4", "g7g5", "d1h5")
        outcome = chessrules.status(state)
        assert outcome.status == GameStatus.CHECKMATE
        assert outcome.winner == Color.WHITE

    def test_independent_games(self) -> None:
        first = chessrules.new_game()
        second = chessrules.new_game()
        chessrules.apply_move(first, E2, E4)
        assert second.side_to_move == Color.WHITE
