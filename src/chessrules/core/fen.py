"""FEN parsing and serialization.

Castling availability maps onto the "has moved" flags, and an en-passant
square is turned back into the pawn double advance that produced it. The
halfmove clock is accepted but not tracked; it is always written as ``0``.
"""

from __future__ import annotations

from chessrules.core.board import Board
from chessrules.core.enums import Color, MovedFlags, PieceType
from chessrules.core.move import LastMove
from chessrules.core.piece import Piece
from chessrules.core.position import Position
from chessrules.core.types import Square, parse_square

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_CASTLING_CHARS: tuple[tuple[str, MovedFlags], ...] = (
    ("K", MovedFlags.WHITE_KINGSIDE_ROOK),
    ("Q", MovedFlags.WHITE_QUEENSIDE_ROOK),
    ("k", MovedFlags.BLACK_KINGSIDE_ROOK),
    ("q", MovedFlags.BLACK_QUEENSIDE_ROOK),
)


def board_from_placement(placement: str) -> Board:
    """Parse the piece-placement field of a FEN string."""
    ranks = placement.split("/")
    if len(ranks) != 8:
        raise ValueError(f"Invalid FEN board (must contain 8 ranks): {placement!r}")
    board = Board()
    for rank_idx, rank_text in enumerate(ranks):
        rank = 7 - rank_idx
        file = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= 8):
                    raise ValueError(f"Invalid FEN digit {ch!r}: {placement!r}")
                file += step
            else:
                if file >= 8:
                    raise ValueError(f"Invalid FEN rank width: {placement!r}")
                board[Square(rank, file)] = Piece.from_char(ch)
                file += 1
            if file > 8:
                raise ValueError(f"Invalid FEN rank width: {placement!r}")
        if file != 8:
            raise ValueError(f"Invalid FEN rank width: {placement!r}")
    return board


def board_to_placement(board: Board) -> str:
    rows: list[str] = []
    for rank in range(7, -1, -1):
        empty = 0
        row = ""
        for file in range(8):
            piece = board[Square(rank, file)]
            if piece is None:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    return "/".join(rows)


def _parse_counter(text: str, label: str, minimum: int) -> int:
    try:
        value = int(text)
    except ValueError:
        raise ValueError(f"Invalid FEN {label}: {text!r}") from None
    if value < minimum:
        raise ValueError(f"Invalid FEN {label}: {text!r}")
    return value


def position_from_fen(fen: str) -> Position:
    """Parse a FEN string into a :class:`Position`."""
    parts = fen.split()
    if not (4 <= len(parts) <= 6):
        raise ValueError(f"Invalid FEN (need 4-6 fields): {fen!r}")

    placement, side_part, castling_part, ep_part = parts[:4]

    # 1. Piece placement
    board = board_from_placement(placement)

    # 2. Side to move
    if side_part == "w":
        side = Color.WHITE
    elif side_part == "b":
        side = Color.BLACK
    else:
        raise ValueError(f"Invalid FEN side-to-move field: {side_part!r}")

    # 3. Castling: every right not listed counts as a moved rook
    moved = MovedFlags.NONE
    if castling_part != "-":
        if len(set(castling_part)) != len(castling_part) or any(
            ch not in "KQkq" for ch in castling_part
        ):
            raise ValueError(f"Invalid FEN castling field: {castling_part!r}")
    for ch, flag in _CASTLING_CHARS:
        if ch not in castling_part:
            moved |= flag

    # 4. En passant
    last_move: LastMove | None = None
    if ep_part != "-":
        ep = parse_square(ep_part)
        expected_ep_rank = 5 if side == Color.WHITE else 2
        if ep.rank != expected_ep_rank:
            raise ValueError(
                f"Invalid FEN en-passant square for side-to-move: {ep_part!r}"
            )
        # The opponent's pawn passed over ep and stands one rank further on.
        mover = side.opposite
        direction = 1 if mover == Color.WHITE else -1
        last_move = LastMove(
            Piece(mover, PieceType.PAWN),
            Square(ep.rank - direction, ep.file),
            Square(ep.rank + direction, ep.file),
        )

    # 5-6. Clocks (optional); the halfmove clock is validated, then dropped
    if len(parts) > 4:
        _parse_counter(parts[4], "halfmove clock", 0)
    fullmove = _parse_counter(parts[5], "fullmove number", 1) if len(parts) > 5 else 1

    return Position(board, side, moved, last_move, fullmove)


def position_to_fen(pos: Position) -> str:
    """Serialise a :class:`Position` to FEN."""
    # 1. Board
    board_str = board_to_placement(pos.board)

    # 2. Side
    side_str = "w" if pos.side_to_move == Color.WHITE else "b"

    # 3. Castling: rights survive only while king and rook are unmoved
    castling_str = ""
    for ch, flag in _CASTLING_CHARS:
        color = Color.WHITE if ch.isupper() else Color.BLACK
        if not pos.moved & (flag | MovedFlags.king(color)):
            castling_str += ch
    if not castling_str:
        castling_str = "-"

    # 4. En passant
    ep_str = "-"
    last = pos.last_move
    if last is not None and last.is_pawn_double_advance:
        ep_rank = (last.from_sq.rank + last.to_sq.rank) // 2
        ep_str = Square(ep_rank, last.to_sq.file).name

    return f"{board_str} {side_str} {castling_str} {ep_str} 0 {pos.fullmove_number}"
