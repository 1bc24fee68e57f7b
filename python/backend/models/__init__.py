from backend.models.position import Direction, Position
from backend.models.state import (
    BOARD_SIZE,
    InvalidConfigurationError,
    Piece,
    PuzzleState,
)

__all__ = [
    "BOARD_SIZE",
    "Direction",
    "InvalidConfigurationError",
    "Piece",
    "Position",
    "PuzzleState",
]
