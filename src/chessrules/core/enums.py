"""Core enumerations and flags for the rules engine."""

from __future__ import annotations

from enum import IntEnum, IntFlag


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()

    def __format__(self, spec: str) -> str:
        return format(str(self), spec)


class PieceType(IntEnum):
    """Chess piece kinds ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    def __str__(self) -> str:
        return self.name.lower()

    def __format__(self, spec: str) -> str:
        return format(str(self), spec)


class MoveFlag(IntEnum):
    """Tag of a move variant; each tag carries its own payload on ``Move``."""

    NORMAL = 0
    DOUBLE_PAWN = 1
    EN_PASSANT = 2
    CASTLE_KINGSIDE = 3
    CASTLE_QUEENSIDE = 4
    PROMOTION = 5


class MovedFlags(IntFlag):
    """Which castling pieces have left their home square.

    Tracked as "has moved", not as "may castle": eligibility also depends on
    the path being clear and unattacked, which is derived per position.
    """

    NONE = 0
    WHITE_KING = 1
    WHITE_KINGSIDE_ROOK = 2
    WHITE_QUEENSIDE_ROOK = 4
    BLACK_KING = 8
    BLACK_KINGSIDE_ROOK = 16
    BLACK_QUEENSIDE_ROOK = 32

    WHITE_ALL = WHITE_KING | WHITE_KINGSIDE_ROOK | WHITE_QUEENSIDE_ROOK
    BLACK_ALL = BLACK_KING | BLACK_KINGSIDE_ROOK | BLACK_QUEENSIDE_ROOK
    ALL = WHITE_ALL | BLACK_ALL

    @classmethod
    def king(cls, color: Color) -> MovedFlags:
        return cls.WHITE_KING if color == Color.WHITE else cls.BLACK_KING

    @classmethod
    def kingside_rook(cls, color: Color) -> MovedFlags:
        return (
            cls.WHITE_KINGSIDE_ROOK if color == Color.WHITE else cls.BLACK_KINGSIDE_ROOK
        )

    @classmethod
    def queenside_rook(cls, color: Color) -> MovedFlags:
        return (
            cls.WHITE_QUEENSIDE_ROOK
            if color == Color.WHITE
            else cls.BLACK_QUEENSIDE_ROOK
        )


class GameStatus(IntEnum):
    """States of the game state machine. Everything but ACTIVE is terminal."""

    ACTIVE = 0
    CHECKMATE = 1
    STALEMATE = 2
