"""Defines the types of chess pieces"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Self


class PieceType(Enum):
    EMPTY = auto()
    PAWN = auto()
    KNIGHT = auto()
    BISHOP = auto()
    ROOK = auto()
    QUEEN = auto()
    KING = auto()


class Color(Enum):
    NONE = auto()
    WHITE = auto()
    BLACK = auto()


FEN_TO_PIECE: dict[str, PieceType] = {
    "p": PieceType.PAWN,
    "n": PieceType.KNIGHT,
    "b": PieceType.BISHOP,
    "r": PieceType.ROOK,
    "q": PieceType.QUEEN,
    "k": PieceType.KING,
}

PIECE_TO_FEN: dict[PieceType, str] = {value: key for key, value in FEN_TO_PIECE.items()}

# Unicode chess symbols, used when sending a snapshot of the board to the presentation layer
PIECE_GLYPHS: dict[tuple[PieceType, Color], str] = {
    (PieceType.PAWN, Color.WHITE): "♙",
    (PieceType.ROOK, Color.WHITE): "♖",
    (PieceType.KNIGHT, Color.WHITE): "♘",
    (PieceType.BISHOP, Color.WHITE): "♗",
    (PieceType.QUEEN, Color.WHITE): "♕",
    (PieceType.KING, Color.WHITE): "♔",
    (PieceType.PAWN, Color.BLACK): "♟",
    (PieceType.ROOK, Color.BLACK): "♜",
    (PieceType.KNIGHT, Color.BLACK): "♞",
    (PieceType.BISHOP, Color.BLACK): "♝",
    (PieceType.QUEEN, Color.BLACK): "♛",
    (PieceType.KING, Color.BLACK): "♚",
}


def opponent(color: Color) -> Color:
    """The other side. The empty 'color' has no opponent."""
    if color == Color.NONE:
        return Color.NONE
    return Color.WHITE if color == Color.BLACK else Color.BLACK


@dataclass(frozen=True)
class Piece:
    type: PieceType
    color: Color

    @classmethod
    def empty(cls) -> Self:
        return cls(PieceType.EMPTY, Color.NONE)

    @classmethod
    def from_fen(cls, character: str) -> Self:
        # lower case: Black pieces, upper case: White pieces
        color = Color.WHITE if character.isupper() else Color.BLACK
        piece_type = FEN_TO_PIECE[character.lower()]
        return cls(piece_type, color)

    def to_fen(self) -> str:
        return (
            PIECE_TO_FEN[self.type].upper()
            if self.color == Color.WHITE
            else PIECE_TO_FEN[self.type].lower()
        )

    @property
    def is_empty(self) -> bool:
        return self.type == PieceType.EMPTY

    @property
    def glyph(self) -> str:
        """The empty square has no symbol"""
        return PIECE_GLYPHS.get((self.type, self.color), "")
