"""HTTP routes. Thin layer: parse the request, hand it to the ChessService, return its response."""

from fastapi import APIRouter, Depends, Request

from src.api.models import GameResponse, HealthResponse, MoveRequest
from src.services.chess_service import ChessService

router = APIRouter()


def get_chess_service(request: Request) -> ChessService:
    """The service (and the game it owns) is created once by the application factory and stored on the app state."""
    return request.app.state.chess_service


@router.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(status="ok")


@router.get("/game", response_model=GameResponse)
def get_game(service: ChessService = Depends(get_chess_service)) -> GameResponse:
    """Current board, player to move, and selection."""
    return service.get_game_state()


@router.post("/move", response_model=GameResponse)
def move(
    request: MoveRequest, service: ChessService = Depends(get_chess_service)
) -> GameResponse:
    """A click on the board: select, deselect, or move the selected piece."""
    return service.select_or_move(request)


@router.post("/reset", response_model=GameResponse)
def reset(service: ChessService = Depends(get_chess_service)) -> GameResponse:
    return service.reset_game()
