"""
Geometry/Base movement and capturing rules

Key idea: Use strategy pattern to define the movement rule for each piece type.

Every rule answers a single question: "may the piece on `from_square` go to `to_square`?"
Check detection, castling, en passant and promotion are not part of these rules.
"""

from typing import Callable, Protocol

from src.chess.pieces import Color, Piece, PieceType
from src.chess.square import Square

# home rows of the pawns, the only rows from which a pawn may advance by two squares
PAWN_HOME_ROW: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}

# White moves UP the board (towards row 0), black moves DOWN (towards row 7)
PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: -1, Color.BLACK: 1}


class Board(Protocol):
    """Just the parts the movement rules need"""

    def piece(self, square: Square) -> Piece: ...
    def is_empty(self, square: Square) -> bool: ...
    def squares(self) -> list[Square]: ...


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def is_path_clear(board: Board, from_square: Square, to_square: Square) -> bool:
    """
    Walk from the square next to `from_square` towards `to_square` (exclusive) one unit step at a time.

    The step is the sign of the row and column deltas, so this only makes sense for straight lines and diagonals.
    Adjacent squares have nothing in between, hence are always clear.
    """
    row_step = _sign(to_square.row - from_square.row)
    col_step = _sign(to_square.col - from_square.col)

    row = from_square.row + row_step
    col = from_square.col + col_step
    while (row, col) != (to_square.row, to_square.col):
        if not board.is_empty(Square(row, col)):
            return False
        row += row_step
        col += col_step
    return True


# --- SHAPE RULES ---
def is_straight_line(from_square: Square, to_square: Square) -> bool:
    """Same row or same column (but not the same square)"""
    same_row = from_square.row == to_square.row
    same_col = from_square.col == to_square.col
    return (same_row or same_col) and from_square != to_square


def is_diagonal(from_square: Square, to_square: Square) -> bool:
    """|delta_row| = |delta_col|, and the piece actually moves"""
    delta_row = abs(to_square.row - from_square.row)
    delta_col = abs(to_square.col - from_square.col)
    return delta_row == delta_col and delta_row != 0


# --- MOVEMENT RULES ---
def is_valid_pawn_move(board: Board, from_square: Square, to_square: Square) -> bool:
    """
    A pawn:
    - moves by a single square forward onto an empty square.
    - It can move by two from its home row, when both the square it passes and the square it lands on are empty.
    - takes diagonally (one square forward, one file to the side)
    """
    color = board.piece(from_square).color
    direction = PAWN_DIRECTION[color]
    delta_row = to_square.row - from_square.row
    delta_col = to_square.col - from_square.col
    target_is_empty = board.is_empty(to_square)

    if delta_col == 0 and target_is_empty:
        if delta_row == direction:
            return True

        passed_square = Square(from_square.row + direction, from_square.col)
        if (
            from_square.row == PAWN_HOME_ROW[color]
            and delta_row == 2 * direction
            and board.is_empty(passed_square)
        ):
            return True

    # capture. (Own pieces on the target square were already rejected by is_valid_move)
    return abs(delta_col) == 1 and delta_row == direction and not target_is_empty


def is_valid_rook_move(board: Board, from_square: Square, to_square: Square) -> bool:
    """Rooks move either horizontally or vertically"""
    return is_straight_line(from_square, to_square) and is_path_clear(
        board, from_square, to_square
    )


def is_valid_knight_move(board: Board, from_square: Square, to_square: Square) -> bool:
    """Knights jump such that {|delta_row|, |delta_col|} = {1, 2}. Nothing can block them."""
    delta_row = abs(to_square.row - from_square.row)
    delta_col = abs(to_square.col - from_square.col)
    return (delta_row, delta_col) in {(2, 1), (1, 2)}


def is_valid_bishop_move(board: Board, from_square: Square, to_square: Square) -> bool:
    """Bishops move diagonally: |delta_row| = |delta_col|"""
    return is_diagonal(from_square, to_square) and is_path_clear(
        board, from_square, to_square
    )


def is_valid_queen_move(board: Board, from_square: Square, to_square: Square) -> bool:
    """
    The Queen combines the rook moves (horizontal + vertical movements) and bishop moves (diagonal movement)
    """
    shape_ok = is_straight_line(from_square, to_square) or is_diagonal(
        from_square, to_square
    )
    return shape_ok and is_path_clear(board, from_square, to_square)


def is_valid_king_move(board: Board, from_square: Square, to_square: Square) -> bool:
    """The king can move by a single square at the time."""
    delta_row = abs(to_square.row - from_square.row)
    delta_col = abs(to_square.col - from_square.col)
    return delta_row <= 1 and delta_col <= 1


def _no_piece(board: Board, from_square: Square, to_square: Square) -> bool:
    """There is nothing to move on an empty square."""
    return False


# -- STRATEGY PATTERN: MOVEMENT RULES ---
MoveRuleFn = Callable[[Board, Square, Square], bool]
MOVEMENT_RULES: dict[PieceType, MoveRuleFn] = {
    PieceType.EMPTY: _no_piece,
    PieceType.PAWN: is_valid_pawn_move,
    PieceType.KNIGHT: is_valid_knight_move,
    PieceType.BISHOP: is_valid_bishop_move,
    PieceType.ROOK: is_valid_rook_move,
    PieceType.QUEEN: is_valid_queen_move,
    PieceType.KING: is_valid_king_move,
}


def is_valid_move(board: Board, from_square: Square, to_square: Square) -> bool:
    """
    Can the piece standing on `from_square` move to `to_square`?
    ----

    1. Both squares must be on the board (anything else is simply a rejected move).
    2. You cannot capture your own piece.
    3. The movement rule of the piece type decides the rest.
    """
    if not (from_square.is_within_bounds() and to_square.is_within_bounds()):
        return False

    piece = board.piece(from_square)
    target_piece = board.piece(to_square)
    if not target_piece.is_empty and target_piece.color == piece.color:
        return False

    movement_rule = MOVEMENT_RULES[piece.type]
    return movement_rule(board, from_square, to_square)


def legal_destinations(board: Board, from_square: Square) -> list[Square]:
    """All squares the piece on `from_square` may move to (row-major order). Used to highlight targets of a selection."""
    return [
        square for square in board.squares() if is_valid_move(board, from_square, square)
    ]
