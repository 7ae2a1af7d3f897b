"""
Board coordinate system.
NO UI DEPENDENCIES.
"""
from enum import Enum, auto
from typing import Tuple

from .constants import BOARD_COLUMNS, BOARD_ROWS, COL_WIDTH, ROW_HEIGHT, OFFSET_Y


class Direction(Enum):
    """Cardinal directions."""
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()

    def delta(self) -> Tuple[int, int]:
        """Return (dx, dy) for this direction."""
        deltas = {
            Direction.UP: (0, -1),
            Direction.DOWN: (0, 1),
            Direction.LEFT: (-1, 0),
            Direction.RIGHT: (1, 0),
        }
        return deltas[self]


def in_bounds(x: float, y: float) -> bool:
    """
    Check if coordinates are on the board.

    Coordinate system:
    - (0, 0) is the top-left cell (goal row)
    - x increases to the right
    - y increases downward
    """
    return 0 <= x < BOARD_COLUMNS and 0 <= y < BOARD_ROWS


def cell_to_pixels(x: float, y: float) -> Tuple[float, float]:
    """Convert a (possibly fractional) cell position to sprite pixel offsets."""
    return (x * COL_WIDTH, y * ROW_HEIGHT - OFFSET_Y)
