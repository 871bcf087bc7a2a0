"""
Application factory and entrypoint.

Sync route handlers: FastAPI runs them in a thread pool, which is why the ChessService guards the game with a lock.
"""

import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from src.api.routes import router
from src.core.config import Settings, configure_logging
from src.core.exceptions import GameError
from src.services.chess_service import ChessService

logger = logging.getLogger(__name__)


async def handle_game_error(request: Request, exc: Exception) -> JSONResponse:
    logger.warning("Bad request on %s: %s", request.url.path, exc)
    return JSONResponse(status_code=400, content={"detail": str(exc)})


def create_app(service: Optional[ChessService] = None) -> FastAPI:
    """Build the FastAPI app around a single ChessService (a fresh game unless one is supplied)."""
    app = FastAPI(title="Chess move validator")
    app.state.chess_service = service if service is not None else ChessService()
    app.add_exception_handler(GameError, handle_game_error)
    app.include_router(router)
    return app


def main() -> None:
    settings = Settings.from_env()
    configure_logging(settings)
    logger.info("Starting server on %s:%d", settings.host, settings.port)
    uvicorn.run(
        create_app(),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
