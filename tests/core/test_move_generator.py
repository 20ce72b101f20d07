"""Perft and legality tests for MoveGenerator.

Perft reference values: https://www.chessprogramming.org/Perft_Results
Positions whose published counts include promotions are adjusted for the
forced queen promotion (one move per promoting pawn step instead of four).
"""

from collections.abc import Callable

import pytest

from chessrules.core.check import is_in_check
from chessrules.core.enums import Color, MoveFlag
from chessrules.core.fen import STARTING_FEN, position_from_fen
from chessrules.core.geometry import geometric_moves
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.position import Position
from chessrules.core.types import E1, E2, E4, E8, parse_square


def perft(position: Position, depth: int) -> int:
    """Count leaf nodes at *depth*, trying every move on a copy."""
    moves = MoveGenerator(position).generate_legal_moves()
    if depth == 1:
        return len(moves)
    return sum(perft(position.after(move), depth - 1) for move in moves)


# ── Starting position ────────────────────────────────────────────────────────


class TestPerftStarting:
    def test_depth_1(self) -> None:
        assert perft(position_from_fen(STARTING_FEN), 1) == 20

    def test_depth_2(self) -> None:
        assert perft(position_from_fen(STARTING_FEN), 2) == 400

    def test_depth_3(self) -> None:
        assert perft(position_from_fen(STARTING_FEN), 3) == 8_902

    @pytest.mark.slow
    def test_depth_4(self) -> None:
        assert perft(position_from_fen(STARTING_FEN), 4) == 197_281


# ── Kiwipete (castling, en passant, pins) ────────────────────────────────────

KIWIPETE = "r3k2r/p1ppqpb1/bn2pnp1/3PN3/1p2P3/2N2Q1p/PPPBBPPP/R3K2R w KQkq - 0 1"


class TestPerftKiwipete:
    def test_depth_1(self) -> None:
        assert perft(position_from_fen(KIWIPETE), 1) == 48

    def test_depth_2(self) -> None:
        assert perft(position_from_fen(KIWIPETE), 2) == 2_039

    @pytest.mark.slow
    def test_depth_3(self) -> None:
        assert perft(position_from_fen(KIWIPETE), 3) == 97_862


# ── Position 3: en-passant discovered checks ────────────────────────────────

POS3 = "8/2p5/3p4/KP5r/1R3p1k/8/4P1P1/8 w - - 0 1"


class TestPerftPos3:
    def test_depth_1(self) -> None:
        assert perft(position_from_fen(POS3), 1) == 14

    def test_depth_2(self) -> None:
        assert perft(position_from_fen(POS3), 2) == 191

    def test_depth_3(self) -> None:
        assert perft(position_from_fen(POS3), 3) == 2_812

    @pytest.mark.slow
    def test_depth_4(self) -> None:
        assert perft(position_from_fen(POS3), 4) == 43_238


# ── Position 4 and its colour-flipped mirror ────────────────────────────────

POS4 = "r3k2r/Pppp1ppp/1b3nbN/nP6/BBP1P3/q4N2/Pp1P2PP/R2Q1RK1 w kq - 0 1"
POS4_MIRROR = "r2q1rk1/pP1p2pp/Q4n2/bbp1p3/Np6/1B3NBn/pPPP1PPP/R3K2R b KQ - 0 1"


class TestPerftPos4:
    def test_depth_1(self) -> None:
        assert perft(position_from_fen(POS4), 1) == 6

    def test_mirror_depth_1(self) -> None:
        assert perft(position_from_fen(POS4_MIRROR), 1) == 6


# ── Position 5: promotion by capture ────────────────────────────────────────

POS5 = "rnbq1k1r/pp1Pbppp/2p5/8/2B5/8/PPP1NnPP/RNBQK2R w KQ - 1 8"


class TestPerftPos5:
    def test_depth_1(self) -> None:
        # 44 with under-promotions; d7xc8 counts once here.
        assert perft(position_from_fen(POS5), 1) == 41


# ── Legality ────────────────────────────────────────────────────────────────


class TestLegality:
    def test_opening_moves(self) -> None:
        gen = MoveGenerator(Position.initial())
        moves = gen.generate_legal_moves()
        assert len(moves) == 20
        assert {str(m) for m in moves if m.from_sq == E2} == {"e2e3", "e2e4"}

    def test_black_replies(self) -> None:
        start = Position.initial()
        for move in MoveGenerator(start).generate_legal_moves():
            reply = start.after(move)
            assert len(MoveGenerator(reply).generate_legal_moves()) == 20, str(move)

    def test_wrong_side_or_empty_square(self) -> None:
        gen = MoveGenerator(Position.initial())
        assert gen.legal_moves(parse_square("e7")) == []
        assert gen.legal_moves(E4) == []

    def test_pinned_piece_stays_on_line(self) -> None:
        pos = position_from_fen("4r1k1/8/8/8/8/8/4R3/4K3 w - - 0 1")
        targets = {m.to_sq.name for m in MoveGenerator(pos).legal_moves(E2)}
        assert targets == {"e3", "e4", "e5", "e6", "e7", "e8"}

    def test_pinned_knight_cannot_move(self) -> None:
        pos = position_from_fen("4k3/4r3/8/8/8/8/4N3/4K3 w - - 0 1")
        assert MoveGenerator(pos).legal_moves(E2) == []

    def test_en_passant_exposing_king_is_illegal(self) -> None:
        # Taking c5 en passant would open the fifth rank to the h5 rook.
        pos = position_from_fen("8/8/8/KPp4r/8/8/8/4k3 w - c6 0 1")
        moves = MoveGenerator(pos).legal_moves(parse_square("b5"))
        assert {m.to_sq.name for m in moves} == {"b6"}
        assert not any(m.flag == MoveFlag.EN_PASSANT for m in moves)

    def test_king_cannot_step_into_check(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/3r4/4K3 w - - 0 1")
        targets = {m.to_sq.name for m in MoveGenerator(pos).legal_moves(E1)}
        assert targets == {"d2", "f1"}

    def test_king_cannot_retreat_along_checking_ray(self) -> None:
        pos = position_from_fen("4r1k1/8/8/8/8/8/8/4K3 w - - 0 1")
        targets = {m.to_sq.name for m in MoveGenerator(pos).legal_moves(E1)}
        assert "e2" not in targets
        assert targets == {"d1", "d2", "f1", "f2"}

    def test_double_check_only_king_moves(self) -> None:
        pos = position_from_fen("4k3/8/8/8/1b6/8/8/R3K1r1 w - - 0 1")
        gen = MoveGenerator(pos)
        assert gen.is_in_check(Color.WHITE)
        moves = gen.generate_legal_moves()
        assert {m.from_sq for m in moves} == {E1}
        assert {m.to_sq.name for m in moves} == {"e2", "f2"}

    def test_every_legal_move_keeps_king_safe(
        self, attack_oracle: Callable[..., bool]
    ) -> None:
        pos = position_from_fen(KIWIPETE)
        for move in MoveGenerator(pos).generate_legal_moves():
            board = pos.after(move).board
            king = board.find_king(Color.WHITE)
            assert king is not None
            assert not attack_oracle(board, king, Color.WHITE), str(move)

    def test_rejected_candidates_are_really_unsafe(self) -> None:
        pos = position_from_fen(POS3)
        gen = MoveGenerator(pos)
        for sq, piece in pos.board.pieces(pos.side_to_move):
            legal = set(gen.legal_moves(sq))
            for move in geometric_moves(pos, sq, piece):
                unsafe = is_in_check(pos.after(move).board, Color.WHITE)
                assert (move in legal) != unsafe, str(move)


class TestPurity:
    def test_generation_is_idempotent(self) -> None:
        pos = position_from_fen(KIWIPETE)
        snapshot = pos.copy()
        gen = MoveGenerator(pos)
        first = gen.generate_legal_moves()
        second = gen.generate_legal_moves()
        assert first == second
        assert pos == snapshot

    def test_has_legal_moves_agrees_with_generation(self) -> None:
        for fen in (STARTING_FEN, KIWIPETE, "7k/8/5KQ1/8/8/8/8/8 b - - 0 1"):
            gen = MoveGenerator(position_from_fen(fen))
            assert gen.has_legal_moves() == bool(gen.generate_legal_moves())

    def test_is_in_check_helper(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/8/4K2r w - - 0 1")
        gen = MoveGenerator(pos)
        assert gen.is_in_check(Color.WHITE)
        assert not gen.is_in_check(Color.BLACK)
        assert E8 not in {m.to_sq for m in gen.generate_legal_moves()}
