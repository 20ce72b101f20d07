"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from chessrules.core import E2, MoveGenerator, Position

    pos = Position.initial()
    gen = MoveGenerator(pos)
    for move in gen.legal_moves(E2):
        print(move)
"""

from chessrules.core.board import Board
from chessrules.core.check import is_attacked, is_in_check
from chessrules.core.enums import Color, GameStatus, MovedFlags, MoveFlag, PieceType
from chessrules.core.fen import STARTING_FEN, position_from_fen, position_to_fen
from chessrules.core.geometry import attacked_squares, geometric_moves
from chessrules.core.move import LastMove, Move
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.piece import Piece
from chessrules.core.position import Position
from chessrules.core.rules import Outcome, Rules
from chessrules.core.types import (
    A1, A2, A3, A4, A5, A6, A7, A8,
    B1, B2, B3, B4, B5, B6, B7, B8,
    C1, C2, C3, C4, C5, C6, C7, C8,
    D1, D2, D3, D4, D5, D6, D7, D8,
    E1, E2, E3, E4, E5, E6, E7, E8,
    F1, F2, F3, F4, F5, F6, F7, F8,
    G1, G2, G3, G4, G5, G6, G7, G8,
    H1, H2, H3, H4, H5, H6, H7, H8,
    Square,
    in_bounds,
    parse_square,
)  # fmt: skip

__all__ = [
    # Enums / flags
    "Color",
    "GameStatus",
    "MoveFlag",
    "MovedFlags",
    "PieceType",
    # Types / helpers
    "Square",
    "in_bounds",
    "parse_square",
    # Domain objects
    "Board",
    "LastMove",
    "Move",
    "MoveGenerator",
    "Outcome",
    "Piece",
    "Position",
    "Rules",
    # Geometry / check detection
    "attacked_squares",
    "geometric_moves",
    "is_attacked",
    "is_in_check",
    # FEN
    "STARTING_FEN",
    "position_from_fen",
    "position_to_fen",
    # Named squares
    "A1", "A2", "A3", "A4", "A5", "A6", "A7", "A8",
    "B1", "B2", "B3", "B4", "B5", "B6", "B7", "B8",
    "C1", "C2", "C3", "C4", "C5", "C6", "C7", "C8",
    "D1", "D2", "D3", "D4", "D5", "D6", "D7", "D8",
    "E1", "E2", "E3", "E4", "E5", "E6", "E7", "E8",
    "F1", "F2", "F3", "F4", "F5", "F6", "F7", "F8",
    "G1", "G2", "G3", "G4", "G5", "G6", "G7", "G8",
    "H1", "H2", "H3", "H4", "H5", "H6", "H7", "H8",
]  # fmt: skip
