"""Legal move generation: geometric candidates filtered for king safety."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessrules.core.check import is_in_check
from chessrules.core.geometry import geometric_moves

if TYPE_CHECKING:
    from chessrules.core.enums import Color
    from chessrules.core.move import Move
    from chessrules.core.position import Position
    from chessrules.core.types import Square


class MoveGenerator:
    """Generates legal moves for a given :class:`Position`.

    Every candidate is tried on a copy of the position, so en-passant
    removals and castling rook moves are part of the safety check and the
    original position is never touched.
    """

    __slots__ = ("_pos",)

    def __init__(self, position: Position) -> None:
        self._pos = position

    # -- Public API ---------------------------------------------------------

    def legal_moves(self, sq: Square) -> list[Move]:
        """Legal moves of the piece on *sq*.

        Empty when *sq* is empty or holds a piece of the side not to move.
        """
        piece = self._pos.board[sq]
        if piece is None or piece.color != self._pos.side_to_move:
            return []
        return [
            move
            for move in geometric_moves(self._pos, sq, piece)
            if self._is_safe(move)
        ]

    def generate_legal_moves(self) -> list[Move]:
        """All strictly legal moves for the side to move."""
        legal: list[Move] = []
        for sq, _piece in self._pos.board.pieces(self._pos.side_to_move):
            legal.extend(self.legal_moves(sq))
        return legal

    def has_legal_moves(self) -> bool:
        """Whether the side to move has at least one legal move."""
        pos = self._pos
        for sq, piece in pos.board.pieces(pos.side_to_move):
            for move in geometric_moves(pos, sq, piece):
                if self._is_safe(move):
                    return True
        return False

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?"""
        return is_in_check(self._pos.board, color)

    # -- Internal -----------------------------------------------------------

    def _is_safe(self, move: Move) -> bool:
        mover = self._pos.side_to_move
        return not is_in_check(self._pos.after(move).board, mover)
