"""
Type definitions used across layers
"""

from enum import StrEnum


# --- NOTE The domain layer has its own Color (including NONE for empty squares). See src/chess/pieces.py
# --- These versions are the ones that cross the API boundary, so they carry readable string values.


class Color(StrEnum):
    WHITE = "white"
    BLACK = "black"


class ClickOutcome(StrEnum):
    """What happened to the game after a single click on a square."""

    SELECTED = "selected"
    IGNORED = "ignored"
    DESELECTED = "deselected"
    MOVED = "moved"
    REJECTED = "rejected"
