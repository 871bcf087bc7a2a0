"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Hence, both the API layer (higher) and domain layer (lower) will use model(s) defined here to send to/receive from the Service
(Decouples the data model specific to the API layer or domain layer from the information needed to send across boundaries)
"""

from dataclasses import dataclass, field
from typing import Optional

# Type aliases to make GameModel easier to read
PieceGlyph = str
PieceColor = str
Coordinates = tuple[int, int]


@dataclass
class GameModel:
    """Transport-safe snapshot of the game used between API, Service, and Game layers."""

    board: list[list[PieceGlyph]]
    position: str
    current_player: PieceColor
    selected_square: Optional[Coordinates] = None
    legal_destinations: list[Coordinates] = field(default_factory=list)
