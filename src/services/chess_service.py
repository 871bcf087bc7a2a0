"""Orchestration of communication from API router to business logic (and the reverse direction)."""

import logging
import threading
from typing import Optional

from src.api.models import GameResponse, MoveRequest, SquareResponse
from src.chess.game import GameState
from src.chess.square import Square
from src.core.models import Coordinates, GameModel
from src.core.shared_types import ClickOutcome, Color

logger = logging.getLogger(__name__)


class ChessService:
    """
    Owns the single game played by this process.

    Every public method holds the lock for the whole state transition (and the snapshot taken afterwards),
    so concurrent requests see the click-to-move state machine as atomic steps.
    """

    def __init__(self, game: Optional[GameState] = None) -> None:
        self.game = game if game is not None else GameState()
        self._lock = threading.Lock()

    # -- API routes logic ---
    def get_game_state(self) -> GameResponse:
        """Read the current game without changing anything."""
        with self._lock:
            return self._create_game_response(self.game.to_model())

    def select_or_move(self, request: MoveRequest) -> GameResponse:
        """Handle a click: select a piece, deselect it, or attempt a move with the selected piece."""
        square = Square(request.row, request.col)
        with self._lock:
            player = self.game.current_player
            from_square = self.game.selected_square
            outcome = self.game.click(square)
            self._log_outcome(outcome, player.name.lower(), from_square, square)
            return self._create_game_response(self.game.to_model(), outcome)

    def reset_game(self) -> GameResponse:
        """Start over from the standard starting position."""
        with self._lock:
            self.game.reset()
            logger.info("Game reset to the starting position")
            return self._create_game_response(self.game.to_model())

    # -- Internal helpers --
    def _create_game_response(
        self, model: GameModel, outcome: Optional[ClickOutcome] = None
    ) -> GameResponse:
        """Convert info in GameModel to a GameResponse."""
        return GameResponse(
            board=model.board,
            position=model.position,
            current_player=Color(model.current_player),
            selected_square=(
                self._square_response(model.selected_square)
                if model.selected_square is not None
                else None
            ),
            legal_destinations=[
                self._square_response(coordinates)
                for coordinates in model.legal_destinations
            ],
            last_outcome=outcome,
        )

    @staticmethod
    def _square_response(coordinates: Coordinates) -> SquareResponse:
        row, col = coordinates
        return SquareResponse(
            row=row, col=col, name=Square(row, col).to_algebraic()
        )

    @staticmethod
    def _log_outcome(
        outcome: ClickOutcome,
        player: str,
        from_square: Optional[Square],
        to_square: Square,
    ) -> None:
        if outcome == ClickOutcome.MOVED and from_square is not None:
            logger.info(
                "%s moved %s%s",
                player,
                from_square.to_algebraic(),
                to_square.to_algebraic(),
            )
        elif outcome == ClickOutcome.REJECTED and from_square is not None:
            logger.info(
                "Rejected move by %s from %s to %s",
                player,
                from_square.as_tuple(),
                to_square.as_tuple(),
            )
        else:
            logger.debug("Click on %s by %s: %s", to_square.as_tuple(), player, outcome)
