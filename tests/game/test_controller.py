"""Tests for GameController: orchestration and events."""

from chessrules.core.enums import Color, GameStatus, MoveFlag
from chessrules.core.rules import Outcome
from chessrules.core.types import D5, D7, E2, E4, E5, parse_square
from chessrules.game.controller import GameController
from chessrules.game.interfaces import IGameController, MoveResult, RejectReason
from chessrules.game.state import GameState, MoveRecord

FOOLS_MATE = "rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR w KQkq - 1 3"


def _make_controller(fen: str | None = None) -> GameController:
    ctrl = GameController()
    ctrl.new_game(fen)
    return ctrl


class TestNewGame:
    def test_is_a_controller(self) -> None:
        assert isinstance(GameController(), IGameController)

    def test_default_setup(self) -> None:
        ctrl = _make_controller()
        assert ctrl.state.side_to_move == Color.WHITE
        assert ctrl.outcome.status == GameStatus.ACTIVE

    def test_custom_fen(self) -> None:
        fen = "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1"
        ctrl = _make_controller(fen)
        assert ctrl.state.side_to_move == Color.BLACK

    def test_new_game_resets(self) -> None:
        ctrl = _make_controller()
        ctrl.submit_move(E2, E4)
        ctrl.new_game()
        assert ctrl.state.ply_count == 0

    def test_terminal_start_emits_game_over(self) -> None:
        ctrl = GameController()
        seen: list[Outcome] = []
        ctrl.events.on_game_over.append(seen.append)
        ctrl.new_game(FOOLS_MATE)
        assert seen == [Outcome(GameStatus.CHECKMATE, winner=Color.BLACK)]


class TestSubmitMove:
    def test_legal_move_accepted(self) -> None:
        ctrl = _make_controller()
        result = ctrl.submit_move(E2, E4)
        assert result
        assert ctrl.state.side_to_move == Color.BLACK

    def test_illegal_move_rejected(self) -> None:
        ctrl = _make_controller()
        result = ctrl.submit_move(E2, E5)
        assert not result
        assert result.reason == RejectReason.ILLEGAL_DESTINATION
        assert ctrl.state.side_to_move == Color.WHITE

    def test_legal_destinations(self) -> None:
        ctrl = _make_controller()
        assert set(ctrl.legal_destinations(E2)) == {parse_square("e3"), E4}
        assert ctrl.legal_destinations(D7) == []

    def test_legal_moves_carry_tags(self) -> None:
        ctrl = _make_controller()
        flags = {m.to_sq: m.flag for m in ctrl.legal_moves(E2)}
        assert flags[E4] == MoveFlag.DOUBLE_PAWN


class TestEvents:
    def test_on_move(self) -> None:
        ctrl = _make_controller()
        seen: list[tuple[MoveRecord, GameState]] = []
        ctrl.events.on_move.append(lambda rec, st: seen.append((rec, st)))
        ctrl.submit_move(E2, E4)
        ctrl.submit_move(D7, D5)
        assert [str(rec.move) for rec, _ in seen] == ["e2e4", "d7d5"]
        assert all(st is ctrl.state for _, st in seen)

    def test_on_rejected(self) -> None:
        ctrl = _make_controller()
        rejected: list[MoveResult] = []
        moved: list[MoveRecord] = []
        ctrl.events.on_rejected.append(rejected.append)
        ctrl.events.on_move.append(lambda rec, st: moved.append(rec))
        ctrl.submit_move(D5, D7)
        assert len(rejected) == 1
        assert rejected[0].reason == RejectReason.INVALID_SELECTION
        assert moved == []

    def test_on_game_over(self) -> None:
        ctrl = _make_controller()
        outcomes: list[Outcome] = []
        ctrl.events.on_game_over.append(outcomes.append)
        for move in ("f2f3", "e7e5", "g2g4", "d8h4"):
            ctrl.submit_move(parse_square(move[:2]), parse_square(move[2:]))
        assert len(outcomes) == 1
        assert outcomes[0].winner == Color.BLACK

        result = ctrl.submit_move(E2, E4)
        assert result.reason == RejectReason.GAME_ALREADY_OVER
        assert len(outcomes) == 1
