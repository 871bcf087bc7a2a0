"""
Reading and writing the piece placement part of a FEN string.

Only the first field is relevant here: castling rights, en passant squares and move counters are not tracked by this game.
"""

from src.chess.pieces import FEN_TO_PIECE, Piece
from src.chess.square import BOARD_DIMENSIONS
from src.core.exceptions import InvalidFENError

STARTING_POSITION = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"

Grid = list[list[Piece]]


def is_valid_position(position: str) -> bool:
    """Only check the part of the FEN encoding for the board position."""
    num_rows, num_cols = BOARD_DIMENSIONS
    row_fens = position.split("/")
    if len(row_fens) != num_rows:
        return False

    for row_fen in row_fens:
        col_count = 0
        for character in row_fen:
            # make sure every character is valid
            if character.isdigit():
                col_count += int(character)
            elif character.lower() in FEN_TO_PIECE:
                col_count += 1
            else:
                # immediately invalidate if the character is anything else
                return False

        # make sure you are creating a correctly sized board
        if col_count != num_cols:
            return False
    return True


def grid_from_fen(position: str) -> Grid:
    """
    Parse a FEN piece placement into a row-major grid.

    FEN is read from the 8th rank down to the 1st, which is exactly the order of our rows (row 0 = 8th rank).
    Each rank is read from the a-file onwards, so columns also come out in the normal direction.
    ex. standard starting position:
    rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR
    """
    if not is_valid_position(position):
        raise InvalidFENError(f"Cannot interpret supplied string as FEN: {position!r}")

    grid: Grid = []
    for row_fen in position.split("/"):
        row: list[Piece] = []
        for character in row_fen:
            if character.isalpha():
                row.append(Piece.from_fen(character))
            else:
                # A number denotes the amount of empty squares after each other
                row.extend(Piece.empty() for _ in range(int(character)))
        grid.append(row)
    return grid


def grid_to_fen(grid: Grid) -> str:
    """Rows are separated by slashes in FEN string."""
    return "/".join(_row_to_fen(row) for row in grid)


def _row_to_fen(row: list[Piece]) -> str:
    """FEN string of a single row"""
    fen_characters: list[str] = []
    empty_count = 0
    for piece in row:
        if not piece.is_empty:
            if empty_count > 0:
                fen_characters.append(str(empty_count))
                empty_count = 0
            fen_characters.append(piece.to_fen())
        else:
            empty_count += 1

    # if the entire row is empty, then we still place this number in the string
    if empty_count > 0:
        fen_characters.append(str(empty_count))
    return "".join(fen_characters)
