"""Shared pytest fixtures and helpers used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from chessrules.core.board import Board
from chessrules.core.enums import Color
from chessrules.core.geometry import attacked_squares
from chessrules.core.types import Square, parse_square
from chessrules.game.state import GameState


def brute_force_attacked(board: Board, sq: Square, defender: Color) -> bool:
    """Reference check: scan every opposing piece's attack set."""
    return any(
        sq in attacked_squares(board, origin, piece)
        for origin, piece in board.pieces(defender.opposite)
    )


def play_moves(state: GameState, *moves: str) -> None:
    """Play moves written as 'e2e4'; every one of them must be accepted."""
    for text in moves:
        result = state.apply_move(parse_square(text[:2]), parse_square(text[2:4]))
        assert result.ok, f"{text}: {result.message}"


@pytest.fixture
def game() -> GameState:
    """A fresh game from the standard setup."""
    return GameState()


@pytest.fixture
def play() -> Callable[..., None]:
    return play_moves


@pytest.fixture
def attack_oracle() -> Callable[[Board, Square, Color], bool]:
    return brute_force_attacked
