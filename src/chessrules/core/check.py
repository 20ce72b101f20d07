"""Check detection: is a square, or a king, attacked by the other side?"""

from __future__ import annotations

from chessrules.core.board import Board
from chessrules.core.enums import Color, PieceType
from chessrules.core.piece import Piece
from chessrules.core.tables import (
    BISHOP_RAYS,
    KING_TARGETS,
    KNIGHT_TARGETS,
    ROOK_RAYS,
    pawn_attacks,
)
from chessrules.core.types import Square

_DIAGONAL_ATTACKERS = frozenset((PieceType.BISHOP, PieceType.QUEEN))
_ORTHOGONAL_ATTACKERS = frozenset((PieceType.ROOK, PieceType.QUEEN))


def is_attacked(board: Board, sq: Square, defender: Color) -> bool:
    """Is *sq* attacked by any piece of *defender*'s opponent?

    Equivalent to scanning every opposing piece's attack set (pawns by their
    capture diagonals only, the king without castling), but computed by
    looking outward from *sq*: a piece attacks *sq* exactly when a piece of
    the same kind standing on *sq* would attack it back.
    """
    attacker = defender.opposite

    # A pawn of ``attacker`` hits sq iff a ``defender`` pawn on sq would hit it.
    enemy_pawn = Piece(attacker, PieceType.PAWN)
    for origin in pawn_attacks(sq, defender):
        if board[origin] == enemy_pawn:
            return True

    enemy_knight = Piece(attacker, PieceType.KNIGHT)
    for origin in KNIGHT_TARGETS[sq]:
        if board[origin] == enemy_knight:
            return True

    enemy_king = Piece(attacker, PieceType.KING)
    for origin in KING_TARGETS[sq]:
        if board[origin] == enemy_king:
            return True

    for rays, kinds in (
        (BISHOP_RAYS[sq], _DIAGONAL_ATTACKERS),
        (ROOK_RAYS[sq], _ORTHOGONAL_ATTACKERS),
    ):
        for ray in rays:
            for origin in ray:
                piece = board[origin]
                if piece is None:
                    continue
                if piece.color == attacker and piece.kind in kinds:
                    return True
                break

    return False


def is_in_check(board: Board, color: Color) -> bool:
    """Is *color*'s king attacked? ``False`` when the king is missing."""
    king_sq = board.find_king(color)
    if king_sq is None:
        return False
    return is_attacked(board, king_sq, color)
