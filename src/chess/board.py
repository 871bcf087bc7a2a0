"""The Game board: an 8x8 grid of pieces, plus the operations that change or inspect the configuration of pieces on it."""

from copy import deepcopy
from dataclasses import dataclass
from typing import Self

from src.chess.fen import STARTING_POSITION, Grid, grid_from_fen, grid_to_fen
from src.chess.pieces import Color, Piece
from src.chess.square import BOARD_DIMENSIONS, Square


@dataclass
class Board:
    grid: Grid

    @classmethod
    def from_fen(cls, fen_str: str) -> Self:
        """Construct a board from the piece placement part of a FEN string."""
        return cls(grid_from_fen(fen_str))

    @classmethod
    def starting_position(cls) -> Self:
        return cls.from_fen(STARTING_POSITION)

    @classmethod
    def empty(cls) -> Self:
        num_rows, num_cols = BOARD_DIMENSIONS
        return cls([[Piece.empty() for _ in range(num_cols)] for _ in range(num_rows)])

    def to_fen(self) -> str:
        return grid_to_fen(self.grid)

    def piece(self, square: Square) -> Piece:
        return self.grid[square.row][square.col]

    def is_empty(self, square: Square) -> bool:
        return self.piece(square).is_empty

    def place(self, square: Square, piece: Piece) -> None:
        self.grid[square.row][square.col] = piece

    def squares(self) -> list[Square]:
        """All squares of the board, row-major."""
        num_rows, num_cols = BOARD_DIMENSIONS
        return [Square(row, col) for row in range(num_rows) for col in range(num_cols)]

    def locate_color(self, color: Color) -> list[Square]:
        return [square for square in self.squares() if self.piece(square).color == color]

    def move_piece(self, from_square: Square, to_square: Square) -> None:
        """Update the position on the board. Whatever stood on the target square is captured."""
        piece_that_moved = self.piece(from_square)
        self.place(from_square, Piece.empty())
        self.place(to_square, piece_that_moved)

    def copy(self) -> Self:
        return deepcopy(self)

    def glyphs(self) -> list[list[str]]:
        """Snapshot for rendering: every square as its unicode symbol (empty string for an empty square)."""
        return [[piece.glyph for piece in row] for row in self.grid]
