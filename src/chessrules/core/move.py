"""Move value objects.

A :class:`Move` is a tagged variant: ``flag`` names the variant and only the
payload fields belonging to that variant are set.

===================  ==============================
flag                 payload
===================  ==============================
NORMAL               none
DOUBLE_PAWN          none
EN_PASSANT           ``captured_sq``
CASTLE_KINGSIDE      ``rook_from``, ``rook_to``
CASTLE_QUEENSIDE     ``rook_from``, ``rook_to``
PROMOTION            ``promotion``
===================  ==============================
"""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.enums import MoveFlag, PieceType
from chessrules.core.piece import Piece
from chessrules.core.types import Square

_PROMO_CHARS: dict[PieceType, str] = {
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
}


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single candidate or played move."""

    from_sq: Square
    to_sq: Square
    flag: MoveFlag = MoveFlag.NORMAL
    captured_sq: Square | None = None
    rook_from: Square | None = None
    rook_to: Square | None = None
    promotion: PieceType | None = None

    # ── Variant constructors ─────────────────────────────────────────────

    @classmethod
    def double_pawn(cls, from_sq: Square, to_sq: Square) -> Move:
        return cls(from_sq, to_sq, MoveFlag.DOUBLE_PAWN)

    @classmethod
    def en_passant(cls, from_sq: Square, to_sq: Square) -> Move:
        # The captured pawn sits beside the mover: mover's rank, target's file.
        return cls(
            from_sq,
            to_sq,
            MoveFlag.EN_PASSANT,
            captured_sq=Square(from_sq.rank, to_sq.file),
        )

    @classmethod
    def castle(
        cls, from_sq: Square, to_sq: Square, rook_from: Square, rook_to: Square
    ) -> Move:
        flag = (
            MoveFlag.CASTLE_KINGSIDE
            if to_sq.file > from_sq.file
            else MoveFlag.CASTLE_QUEENSIDE
        )
        return cls(from_sq, to_sq, flag, rook_from=rook_from, rook_to=rook_to)

    @classmethod
    def promote(cls, from_sq: Square, to_sq: Square, kind: PieceType) -> Move:
        return cls(from_sq, to_sq, MoveFlag.PROMOTION, promotion=kind)

    # ── Tags ─────────────────────────────────────────────────────────────

    @property
    def is_castling(self) -> bool:
        return self.flag in (MoveFlag.CASTLE_KINGSIDE, MoveFlag.CASTLE_QUEENSIDE)

    @property
    def is_en_passant(self) -> bool:
        return self.flag == MoveFlag.EN_PASSANT

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        base = f"{self.from_sq.name}{self.to_sq.name}"
        if self.promotion is not None:
            base += _PROMO_CHARS.get(self.promotion, "")
        return base


@dataclass(frozen=True, slots=True)
class LastMove:
    """The most recently executed move; only used to detect en passant."""

    piece: Piece
    from_sq: Square
    to_sq: Square
    captured: Piece | None = None

    @property
    def is_pawn_double_advance(self) -> bool:
        return (
            self.piece.kind == PieceType.PAWN
            and abs(self.to_sq.rank - self.from_sq.rank) == 2
        )
