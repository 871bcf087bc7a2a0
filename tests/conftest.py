"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Generator

import pytest
from fastapi.testclient import TestClient

from src.main import create_app
from src.services.chess_service import ChessService


@pytest.fixture
def chess_service() -> ChessService:
    """A service owning a fresh game in the starting position."""
    return ChessService()


@pytest.fixture
def client(chess_service: ChessService) -> Generator[TestClient, None, None]:
    """HTTP client talking to an app built around the `chess_service` fixture (so tests can inspect the game directly)."""
    app = create_app(chess_service)
    with TestClient(app) as test_client:
        yield test_client
