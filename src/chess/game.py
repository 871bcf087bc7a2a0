"""
The GameState will be the entrypoint into the domain layer for the service layer.
It holds the board, whose turn it is, and which square (if any) was selected, and runs the click-to-move state machine.

NOTE: GameState itself is not thread safe. The service layer owns the single instance and guards it with a lock.
"""

from dataclasses import dataclass, field
from typing import Optional

from src.chess.board import Board
from src.chess.moves import is_valid_move, legal_destinations
from src.chess.pieces import Color, opponent
from src.chess.square import Square
from src.core.models import GameModel
from src.core.shared_types import ClickOutcome


@dataclass
class GameState:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    board: Board = field(default_factory=Board.starting_position)
    current_player: Color = Color.WHITE
    selected_square: Optional[Square] = None

    def reset(self) -> None:
        """Back to the standard starting position, white to move, nothing selected."""
        self.board = Board.starting_position()
        self.current_player = Color.WHITE
        self.selected_square = None

    def click(self, square: Square) -> ClickOutcome:
        """
        A player clicked on a square
        -----

        Nothing selected yet:
        * your own piece --> it becomes the selected square
        * anything else --> ignored

        A square was selected already:
        * the same square again --> deselect
        * a valid move --> move the piece and hand the turn to the opponent
        * an invalid move --> board stays as it is

        The selection is cleared after every move attempt, whatever the outcome.
        """
        if self.selected_square is None:
            return self._select(square)

        from_square = self.selected_square
        self.selected_square = None

        if square == from_square:
            return ClickOutcome.DESELECTED

        if not is_valid_move(self.board, from_square, square):
            return ClickOutcome.REJECTED

        self._apply_move(from_square, square)
        return ClickOutcome.MOVED

    def to_model(self) -> GameModel:
        """Encode into a format the Service layer uses"""
        selected = self.selected_square
        return GameModel(
            board=self.board.glyphs(),
            position=self.board.to_fen(),
            current_player=self.current_player.name.lower(),
            selected_square=selected.as_tuple() if selected else None,
            legal_destinations=(
                [square.as_tuple() for square in legal_destinations(self.board, selected)]
                if selected
                else []
            ),
        )

    # -- PRIVATE HELPERS ---
    def _select(self, square: Square) -> ClickOutcome:
        if not square.is_within_bounds():
            return ClickOutcome.IGNORED

        if self.board.piece(square).color != self.current_player:
            return ClickOutcome.IGNORED

        self.selected_square = square
        return ClickOutcome.SELECTED

    def _apply_move(self, from_square: Square, to_square: Square) -> None:
        self.board.move_piece(from_square, to_square)
        self.current_player = opponent(self.current_player)
