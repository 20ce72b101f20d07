"""Direction sets, precomputed target tables and rule constants."""

from __future__ import annotations

from typing import Final

from chessrules.core.enums import Color, PieceType
from chessrules.core.types import ALL_SQUARES, Square, in_bounds

# Offsets are (d_rank, d_file).
KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = ROOK_DIRS + BISHOP_DIRS

# ── Rule constants ──────────────────────────────────────────────────────────

KING_HOME_FILE: Final = 4
KINGSIDE_ROOK_FILE: Final = 7
QUEENSIDE_ROOK_FILE: Final = 0
PROMOTION_PIECE: Final = PieceType.QUEEN

BACK_RANK: Final[dict[Color, int]] = {Color.WHITE: 0, Color.BLACK: 7}
PAWN_HOME_RANK: Final[dict[Color, int]] = {Color.WHITE: 1, Color.BLACK: 6}
PAWN_DIRECTION: Final[dict[Color, int]] = {Color.WHITE: 1, Color.BLACK: -1}
PROMOTION_RANKS: Final = frozenset((0, 7))


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> dict[Square, tuple[Square, ...]]:
    targets: dict[Square, tuple[Square, ...]] = {}
    for sq in ALL_SQUARES:
        moves: list[Square] = []
        for dr, df in offsets:
            ar = sq.rank + dr
            af = sq.file + df
            if in_bounds(ar, af):
                moves.append(Square(ar, af))
        targets[sq] = tuple(moves)
    return targets


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> dict[Square, tuple[tuple[Square, ...], ...]]:
    rays_per_square: dict[Square, tuple[tuple[Square, ...], ...]] = {}
    for sq in ALL_SQUARES:
        square_rays: list[tuple[Square, ...]] = []
        for dr, df in directions:
            ar = sq.rank + dr
            af = sq.file + df
            ray: list[Square] = []
            while in_bounds(ar, af):
                ray.append(Square(ar, af))
                ar += dr
                af += df
            square_rays.append(tuple(ray))
        rays_per_square[sq] = tuple(square_rays)
    return rays_per_square


def pawn_attacks(sq: Square, color: Color) -> tuple[Square, ...]:
    """The (up to two) diagonal squares a *color* pawn on *sq* attacks."""
    return _PAWN_ATTACKS[color][sq]


KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
KING_TARGETS = _build_targets(KING_OFFSETS)

BISHOP_RAYS = _build_rays(BISHOP_DIRS)
ROOK_RAYS = _build_rays(ROOK_DIRS)
QUEEN_RAYS = _build_rays(QUEEN_DIRS)

_PAWN_ATTACKS: dict[Color, dict[Square, tuple[Square, ...]]] = {
    color: _build_targets(((PAWN_DIRECTION[color], -1), (PAWN_DIRECTION[color], 1)))
    for color in Color
}
