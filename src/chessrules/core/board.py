"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

from chessrules.core.enums import Color, PieceType
from chessrules.core.piece import Piece
from chessrules.core.types import ALL_SQUARES, Square, in_bounds

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 64-square board of optional pieces.

    Pure data: no move rules live here. Squares must be on the board;
    callers check :func:`in_bounds` before building squares from arithmetic.
    """

    __slots__ = ("_squares",)

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * 64

    @staticmethod
    def _slot(sq: Square) -> int:
        rank, file = sq
        if not in_bounds(rank, file):
            raise IndexError(f"Square off board: {sq!r}")
        return rank * 8 + file

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[self._slot(sq)]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        self._squares[self._slot(sq)] = piece

    def get(self, sq: Square) -> Piece | None:
        return self[sq]

    def set(self, sq: Square, piece: Piece | None) -> None:
        self[sq] = piece

    def is_empty(self, sq: Square) -> bool:
        return self[sq] is None

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color) -> list[tuple[Square, Piece]]:
        """All ``(square, piece)`` pairs owned by *color*, a1 first."""
        return [
            (sq, piece)
            for sq, piece in zip(ALL_SQUARES, self._squares)
            if piece is not None and piece.color == color
        ]

    def find_king(self, color: Color) -> Square | None:
        """Square of *color*'s king, or ``None`` if it is missing."""
        king = Piece(color, PieceType.KING)
        for sq, piece in zip(ALL_SQUARES, self._squares):
            if piece == king:
                return sq
        return None

    # -- Copying ------------------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for f in range(8):
            b[Square(1, f)] = Piece(Color.WHITE, PieceType.PAWN)
            b[Square(6, f)] = Piece(Color.BLACK, PieceType.PAWN)

        for f, kind in enumerate(_BACK_RANK):
            b[Square(0, f)] = Piece(Color.WHITE, kind)
            b[Square(7, f)] = Piece(Color.BLACK, kind)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(7, -1, -1):
            row = []
            for file in range(8):
                p = self[Square(rank, file)]
                row.append(str(p) if p else ".")
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
