"""Position — board plus the metadata needed to generate moves from it."""

from __future__ import annotations

from chessrules.core.board import Board
from chessrules.core.enums import Color, MovedFlags, MoveFlag, PieceType
from chessrules.core.move import LastMove, Move
from chessrules.core.piece import Piece
from chessrules.core.tables import PROMOTION_PIECE, PROMOTION_RANKS
from chessrules.core.types import A1, A8, H1, H8, Square


class Position:
    """Board, side to move, castling "has moved" flags and the last move.

    Moves are applied in place with :meth:`make_move`; callers that only
    want to look ahead use :meth:`after` on a copy instead, so a simulation
    can never leak partial state into the original.
    """

    __slots__ = (
        "board",
        "side_to_move",
        "moved",
        "last_move",
        "fullmove_number",
    )

    def __init__(
        self,
        board: Board | None = None,
        side_to_move: Color = Color.WHITE,
        moved: MovedFlags = MovedFlags.NONE,
        last_move: LastMove | None = None,
        fullmove_number: int = 1,
    ) -> None:
        self.board = board if board is not None else Board.initial()
        self.side_to_move = side_to_move
        self.moved = moved
        self.last_move = last_move
        self.fullmove_number = fullmove_number

    # ── Core move operations ─────────────────────────────────────────────

    def make_move(self, move: Move) -> Move:
        """Apply *move* in place and return it as executed.

        A pawn reaching the first or last rank is promoted here, so the
        returned move may carry the ``PROMOTION`` tag even when *move* did
        not. Legality is the caller's business.
        """
        board = self.board
        piece = board[move.from_sq]
        if piece is None:
            raise ValueError(f"No piece on {move.from_sq}")

        move = self._resolve_promotion(move, piece)
        captured = board[move.to_sq]
        placed = piece
        flag = move.flag

        board[move.from_sq] = None
        if flag == MoveFlag.EN_PASSANT:
            assert move.captured_sq is not None
            captured = board[move.captured_sq]
            board[move.captured_sq] = None
        elif flag in (MoveFlag.CASTLE_KINGSIDE, MoveFlag.CASTLE_QUEENSIDE):
            assert move.rook_from is not None and move.rook_to is not None
            board[move.rook_to] = board[move.rook_from]
            board[move.rook_from] = None
        elif flag == MoveFlag.PROMOTION:
            assert move.promotion is not None
            placed = Piece(piece.color, move.promotion)
        elif flag not in (MoveFlag.NORMAL, MoveFlag.DOUBLE_PAWN):
            raise ValueError(f"Unknown move flag: {flag!r}")
        board[move.to_sq] = placed

        self._update_moved(move, piece)
        self.last_move = LastMove(piece, move.from_sq, move.to_sq, captured)

        if self.side_to_move == Color.BLACK:
            self.fullmove_number += 1
        self.side_to_move = self.side_to_move.opposite
        return move

    def after(self, move: Move) -> Position:
        """A new position with *move* applied; ``self`` is left untouched."""
        pos = self.copy()
        pos.make_move(move)
        return pos

    @staticmethod
    def _resolve_promotion(move: Move, piece: Piece) -> Move:
        if (
            piece.kind == PieceType.PAWN
            and move.to_sq.rank in PROMOTION_RANKS
            and move.flag == MoveFlag.NORMAL
        ):
            return Move.promote(move.from_sq, move.to_sq, PROMOTION_PIECE)
        return move

    # ── Castling bookkeeping ─────────────────────────────────────────────

    _ROOK_CORNERS: dict[Square, MovedFlags] = {
        A1: MovedFlags.WHITE_QUEENSIDE_ROOK,
        H1: MovedFlags.WHITE_KINGSIDE_ROOK,
        A8: MovedFlags.BLACK_QUEENSIDE_ROOK,
        H8: MovedFlags.BLACK_KINGSIDE_ROOK,
    }

    def _update_moved(self, move: Move, piece: Piece) -> None:
        moved = self.moved
        if piece.kind == PieceType.KING:
            moved |= MovedFlags.king(piece.color)

        # A rook leaving its corner, or being captured on it.
        for sq in (move.from_sq, move.to_sq):
            if sq in self._ROOK_CORNERS:
                moved |= self._ROOK_CORNERS[sq]

        self.moved = moved

    # ── Utilities ────────────────────────────────────────────────────────

    def copy(self) -> Position:
        """Independent copy; the board is duplicated, pieces are shared values."""
        return Position(
            board=self.board.copy(),
            side_to_move=self.side_to_move,
            moved=self.moved,
            last_move=self.last_move,
            fullmove_number=self.fullmove_number,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return (
            self.board == other.board
            and self.side_to_move == other.side_to_move
            and self.moved == other.moved
            and self.last_move == other.last_move
            and self.fullmove_number == other.fullmove_number
        )

    def __repr__(self) -> str:
        return f"{self.board!r}\n{self.side_to_move} to move"

    @classmethod
    def initial(cls) -> Position:
        """Standard starting position, white to move."""
        return cls()
