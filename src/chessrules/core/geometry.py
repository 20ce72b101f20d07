"""Geometric move and attack generation.

Everything here ignores whether a move would leave the mover's own king in
check; :mod:`chessrules.core.move_generator` filters for that. Functions only
read the board they are given.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, NamedTuple

from chessrules.core.board import Board
from chessrules.core.check import is_attacked
from chessrules.core.enums import Color, MovedFlags, PieceType
from chessrules.core.move import LastMove, Move
from chessrules.core.piece import Piece
from chessrules.core.tables import (
    BACK_RANK,
    BISHOP_RAYS,
    KING_HOME_FILE,
    KING_TARGETS,
    KINGSIDE_ROOK_FILE,
    KNIGHT_TARGETS,
    PAWN_DIRECTION,
    PAWN_HOME_RANK,
    QUEEN_RAYS,
    QUEENSIDE_ROOK_FILE,
    ROOK_RAYS,
    pawn_attacks,
)
from chessrules.core.types import Square

if TYPE_CHECKING:
    from chessrules.core.position import Position

MoveGen = Callable[["Position", Square, Piece], list[Move]]


class _CastlingPath(NamedTuple):
    rook_file: int
    king_to_file: int
    rook_to_file: int
    rook_flag: Callable[[Color], MovedFlags]


_CASTLING_PATHS: tuple[_CastlingPath, ...] = (
    _CastlingPath(KINGSIDE_ROOK_FILE, 6, 5, MovedFlags.kingside_rook),
    _CastlingPath(QUEENSIDE_ROOK_FILE, 2, 3, MovedFlags.queenside_rook),
)


# -- Shared walkers ----------------------------------------------------------


def _step_targets(
    board: Board, sq: Square, color: Color, targets: dict[Square, tuple[Square, ...]]
) -> list[Move]:
    moves: list[Move] = []
    for to_sq in targets[sq]:
        target = board[to_sq]
        if target is None or target.color != color:
            moves.append(Move(sq, to_sq))
    return moves


def _slide(
    board: Board,
    sq: Square,
    color: Color,
    rays: dict[Square, tuple[tuple[Square, ...], ...]],
) -> list[Move]:
    moves: list[Move] = []
    for ray in rays[sq]:
        for to_sq in ray:
            target = board[to_sq]
            if target is None:
                moves.append(Move(sq, to_sq))
                continue
            if target.color != color:
                moves.append(Move(sq, to_sq))
            break
    return moves


# -- Per-kind generators -----------------------------------------------------


def _en_passant_target(
    board: Board, last_move: LastMove | None, sq: Square, color: Color
) -> Square | None:
    if last_move is None or not last_move.is_pawn_double_advance:
        return None
    if last_move.piece.color == color or board[last_move.to_sq] != last_move.piece:
        return None
    landed = last_move.to_sq
    if landed.rank != sq.rank or abs(landed.file - sq.file) != 1:
        return None
    target = Square(sq.rank + PAWN_DIRECTION[color], landed.file)
    if not board.is_empty(target):
        return None
    return target


def _pawn_moves(position: Position, sq: Square, piece: Piece) -> list[Move]:
    board = position.board
    color = piece.color
    step = PAWN_DIRECTION[color]
    moves: list[Move] = []

    one_step = sq.shifted(step, 0)
    if one_step is not None and board.is_empty(one_step):
        moves.append(Move(sq, one_step))
        if sq.rank == PAWN_HOME_RANK[color]:
            two_step = Square(sq.rank + 2 * step, sq.file)
            if board.is_empty(two_step):
                moves.append(Move.double_pawn(sq, two_step))

    for cap_sq in pawn_attacks(sq, color):
        target = board[cap_sq]
        if target is not None and target.color != color:
            moves.append(Move(sq, cap_sq))

    ep_sq = _en_passant_target(board, position.last_move, sq, color)
    if ep_sq is not None:
        moves.append(Move.en_passant(sq, ep_sq))
    return moves


def _knight_moves(position: Position, sq: Square, piece: Piece) -> list[Move]:
    return _step_targets(position.board, sq, piece.color, KNIGHT_TARGETS)


def _bishop_moves(position: Position, sq: Square, piece: Piece) -> list[Move]:
    return _slide(position.board, sq, piece.color, BISHOP_RAYS)


def _rook_moves(position: Position, sq: Square, piece: Piece) -> list[Move]:
    return _slide(position.board, sq, piece.color, ROOK_RAYS)


def _queen_moves(position: Position, sq: Square, piece: Piece) -> list[Move]:
    return _slide(position.board, sq, piece.color, QUEEN_RAYS)


def _castling_moves(position: Position, sq: Square, piece: Piece) -> list[Move]:
    board = position.board
    color = piece.color
    rank = BACK_RANK[color]
    if sq != Square(rank, KING_HOME_FILE) or position.moved & MovedFlags.king(color):
        return []
    if is_attacked(board, sq, color):
        return []

    own_rook = Piece(color, PieceType.ROOK)
    moves: list[Move] = []
    for path in _CASTLING_PATHS:
        if position.moved & path.rook_flag(color):
            continue
        rook_from = Square(rank, path.rook_file)
        if board[rook_from] != own_rook:
            continue

        lo, hi = sorted((KING_HOME_FILE, path.rook_file))
        if any(not board.is_empty(Square(rank, f)) for f in range(lo + 1, hi)):
            continue

        # King transit includes the destination square.
        step = 1 if path.king_to_file > KING_HOME_FILE else -1
        transit = range(KING_HOME_FILE + step, path.king_to_file + step, step)
        if any(is_attacked(board, Square(rank, f), color) for f in transit):
            continue

        moves.append(
            Move.castle(
                sq,
                Square(rank, path.king_to_file),
                rook_from,
                Square(rank, path.rook_to_file),
            )
        )
    return moves


def _king_moves(position: Position, sq: Square, piece: Piece) -> list[Move]:
    moves = _step_targets(position.board, sq, piece.color, KING_TARGETS)
    moves.extend(_castling_moves(position, sq, piece))
    return moves


_GENERATORS: dict[PieceType, MoveGen] = {
    PieceType.PAWN: _pawn_moves,
    PieceType.KNIGHT: _knight_moves,
    PieceType.BISHOP: _bishop_moves,
    PieceType.ROOK: _rook_moves,
    PieceType.QUEEN: _queen_moves,
    PieceType.KING: _king_moves,
}


# -- Public API ---------------------------------------------------------------


def geometric_moves(position: Position, sq: Square, piece: Piece) -> list[Move]:
    """Candidate moves for *piece* on *sq*, before the king-safety filter.

    Pawn candidates carry the double-advance and en-passant tags; king
    candidates include castling. Promotion is applied later, when the move
    is made.
    """
    return _GENERATORS[piece.kind](position, sq, piece)


def attacked_squares(board: Board, sq: Square, piece: Piece) -> list[Square]:
    """Squares *piece* on *sq* attacks.

    Pawns attack their two capture diagonals whether or not anything stands
    there, and never the squares ahead of them. Kings attack their
    neighbours only, since castling cannot capture.
    """
    color = piece.color
    kind = piece.kind
    if kind == PieceType.PAWN:
        return list(pawn_attacks(sq, color))
    if kind == PieceType.KNIGHT:
        moves = _step_targets(board, sq, color, KNIGHT_TARGETS)
    elif kind == PieceType.KING:
        moves = _step_targets(board, sq, color, KING_TARGETS)
    elif kind == PieceType.BISHOP:
        moves = _slide(board, sq, color, BISHOP_RAYS)
    elif kind == PieceType.ROOK:
        moves = _slide(board, sq, color, ROOK_RAYS)
    else:
        moves = _slide(board, sq, color, QUEEN_RAYS)
    return [move.to_sq for move in moves]
