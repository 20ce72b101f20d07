"""Save/resume snapshots of a :class:`Position` as plain dicts or JSON.

Snapshot layout::

    {
        "board": [[null | {"kind": "rook", "color": "white"}, ...] * 8],  # rank 0 first
        "side_to_move": "white",
        "moved": {"white_king": false, ..., "black_queenside_rook": false},
        "last_move": null | {"piece": {...}, "from": "e2", "to": "e4",
                             "captured": null | {...}},
        "fullmove_number": 1,
    }

Everything needed to keep generating the same legal moves survives the round
trip; history older than the last move does not.
"""

from __future__ import annotations

import json
from typing import Any

from chessrules.core.board import Board
from chessrules.core.enums import Color, MovedFlags
from chessrules.core.move import LastMove
from chessrules.core.piece import Piece
from chessrules.core.position import Position
from chessrules.core.types import Square, parse_square

_MOVED_KEYS: tuple[tuple[str, MovedFlags], ...] = (
    ("white_king", MovedFlags.WHITE_KING),
    ("white_kingside_rook", MovedFlags.WHITE_KINGSIDE_ROOK),
    ("white_queenside_rook", MovedFlags.WHITE_QUEENSIDE_ROOK),
    ("black_king", MovedFlags.BLACK_KING),
    ("black_kingside_rook", MovedFlags.BLACK_KINGSIDE_ROOK),
    ("black_queenside_rook", MovedFlags.BLACK_QUEENSIDE_ROOK),
)


def _optional_piece(data: dict[str, str] | None) -> Piece | None:
    return None if data is None else Piece.from_dict(data)


def _piece_dict(piece: Piece | None) -> dict[str, str] | None:
    return None if piece is None else piece.to_dict()


def position_to_dict(pos: Position) -> dict[str, Any]:
    board = [
        [_piece_dict(pos.board[Square(rank, file)]) for file in range(8)]
        for rank in range(8)
    ]

    last_move: dict[str, Any] | None = None
    if pos.last_move is not None:
        last = pos.last_move
        last_move = {
            "piece": last.piece.to_dict(),
            "from": last.from_sq.name,
            "to": last.to_sq.name,
            "captured": _piece_dict(last.captured),
        }

    return {
        "board": board,
        "side_to_move": str(pos.side_to_move),
        "moved": {key: bool(pos.moved & flag) for key, flag in _MOVED_KEYS},
        "last_move": last_move,
        "fullmove_number": pos.fullmove_number,
    }


def position_from_dict(data: dict[str, Any]) -> Position:
    """Rebuild a :class:`Position` from :func:`position_to_dict` output."""
    try:
        rows = data["board"]
        if len(rows) != 8 or any(len(row) != 8 for row in rows):
            raise ValueError(f"Snapshot board must be 8x8: {rows!r}")
        board = Board()
        for rank, row in enumerate(rows):
            for file, cell in enumerate(row):
                board[Square(rank, file)] = _optional_piece(cell)

        side = Color[data["side_to_move"].upper()]

        moved = MovedFlags.NONE
        for key, flag in _MOVED_KEYS:
            if data["moved"][key]:
                moved |= flag

        last_move: LastMove | None = None
        if data.get("last_move") is not None:
            last = data["last_move"]
            last_move = LastMove(
                Piece.from_dict(last["piece"]),
                parse_square(last["from"]),
                parse_square(last["to"]),
                _optional_piece(last.get("captured")),
            )

        fullmove = data.get("fullmove_number", 1)
    except (KeyError, TypeError, AttributeError) as exc:
        raise ValueError(f"Invalid position snapshot: {exc}") from exc

    if not isinstance(fullmove, int) or isinstance(fullmove, bool) or fullmove < 1:
        raise ValueError(f"Invalid snapshot fullmove number: {fullmove!r}")

    return Position(board, side, moved, last_move, fullmove)


def dumps(pos: Position) -> str:
    """JSON text for *pos*."""
    return json.dumps(position_to_dict(pos))


def loads(text: str) -> Position:
    """Inverse of :func:`dumps`."""
    return position_from_dict(json.loads(text))
