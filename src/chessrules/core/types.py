"""Square type and coordinate helpers.

Board layout: rank 0 is White's back rank, rank 7 is Black's.
Files run 0–7 from the a-file to the h-file, so ``Square(0, 4)`` is e1.
"""

from __future__ import annotations

from typing import NamedTuple


def in_bounds(rank: int, file: int) -> bool:
    """Whether (*rank*, *file*) lies on the board."""
    return 0 <= rank < 8 and 0 <= file < 8


class Square(NamedTuple):
    """A (rank, file) pair, both in ``range(8)``."""

    rank: int
    file: int

    @property
    def name(self) -> str:
        """Human-readable name, e.g. ``Square(3, 4).name == 'e4'``."""
        return chr(ord("a") + self.file) + str(self.rank + 1)

    def shifted(self, d_rank: int, d_file: int) -> Square | None:
        """Square offset by the given deltas, or ``None`` when off the board."""
        rank = self.rank + d_rank
        file = self.file + d_file
        if not in_bounds(rank, file):
            return None
        return Square(rank, file)

    def __str__(self) -> str:
        return self.name


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e4' → Square(3, 4)."""
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return Square(int(name[1]) - 1, ord(name[0]) - ord("a"))


ALL_SQUARES: tuple[Square, ...] = tuple(
    Square(rank, file) for rank in range(8) for file in range(8)
)


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = (Square(0, f) for f in range(8))
A2, B2, C2, D2, E2, F2, G2, H2 = (Square(1, f) for f in range(8))
A3, B3, C3, D3, E3, F3, G3, H3 = (Square(2, f) for f in range(8))
A4, B4, C4, D4, E4, F4, G4, H4 = (Square(3, f) for f in range(8))
A5, B5, C5, D5, E5, F5, G5, H5 = (Square(4, f) for f in range(8))
A6, B6, C6, D6, E6, F6, G6, H6 = (Square(5, f) for f in range(8))
A7, B7, C7, D7, E7, F7, G7, H7 = (Square(6, f) for f in range(8))
A8, B8, C8, D8, E8, F8, G8, H8 = (Square(7, f) for f in range(8))
