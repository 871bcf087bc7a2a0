"""Unit tests for src/chess/fen.py"""

import pytest

from src.chess.fen import (
    STARTING_POSITION,
    grid_from_fen,
    grid_to_fen,
    is_valid_position,
)
from src.chess.pieces import Color, Piece, PieceType
from src.core.exceptions import GameError, InvalidFENError

EMPTY_FEN = "/".join(["8"] * 8)


@pytest.mark.parametrize(
    "position",
    [
        STARTING_POSITION,
        EMPTY_FEN,
        "r3k2r/pppq1ppp/2npbn2/4p3/2B1P3/2NP1N2/PPP2PPP/R1BQ1RK1",
        "8/8/8/3P4/8/8/8/8",
    ],
)
def test_valid_positions(position: str) -> None:
    assert is_valid_position(position)


@pytest.mark.parametrize(
    "position",
    [
        "",
        "/".join(["8"] * 7),  # too few rows
        "/".join(["8"] * 9),  # too many rows
        "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBN",  # row too short
        "rnbqkbnr/pppppppp/9/8/8/8/PPPPPPPP/RNBQKBNR",  # row too long
        "rnbqkbnr/ppppxppp/8/8/8/8/PPPPPPPP/RNBQKBNR",  # unknown piece letter
    ],
)
def test_invalid_positions(position: str) -> None:
    assert not is_valid_position(position)


def test_grid_from_starting_position() -> None:
    """Row 0 holds black's back rank, row 7 white's back rank, rows 2-5 are empty"""
    grid = grid_from_fen(STARTING_POSITION)
    assert len(grid) == 8
    assert all(len(row) == 8 for row in grid)
    assert grid[0][0] == Piece(PieceType.ROOK, Color.BLACK)
    assert grid[0][4] == Piece(PieceType.KING, Color.BLACK)
    assert grid[7][3] == Piece(PieceType.QUEEN, Color.WHITE)
    assert all(piece == Piece(PieceType.PAWN, Color.BLACK) for piece in grid[1])
    assert all(piece == Piece(PieceType.PAWN, Color.WHITE) for piece in grid[6])
    assert all(piece.is_empty for row in grid[2:6] for piece in row)


@pytest.mark.parametrize(
    "position",
    [
        STARTING_POSITION,
        EMPTY_FEN,
        "r3k2r/pppq1ppp/2npbn2/4p3/2B1P3/2NP1N2/PPP2PPP/R1BQ1RK1",
    ],
)
def test_grid_to_fen_reverses_parsing(position: str) -> None:
    assert grid_to_fen(grid_from_fen(position)) == position


def test_invalid_fen_raises() -> None:
    """Custom exception, which is also catchable as the top-level GameError"""
    with pytest.raises(InvalidFENError):
        grid_from_fen("not a fen")

    with pytest.raises(GameError):
        grid_from_fen("/".join(["8"] * 7))
