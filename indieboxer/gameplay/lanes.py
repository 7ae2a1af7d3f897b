"""
Lane occupancy tracking for enemy traffic.
NO UI DEPENDENCIES.
"""
import logging
from typing import Dict, List, TYPE_CHECKING

from .constants import ENEMY_ROWS

if TYPE_CHECKING:
    from .enemy import Enemy

logger = logging.getLogger(__name__)


class Lane:
    """
    One enemy lane.

    Enemies waiting off-board are held in `queued`, keyed by enemy with the
    slot they occupy (a slot is the whole-column distance left of column 0).
    Enemies on the board are held in `on_board` in the order they entered.
    """

    def __init__(self, row: int):
        self.row = row
        self.queued: Dict['Enemy', int] = {}
        self.on_board: List['Enemy'] = []

    def occupied_slots(self) -> List[int]:
        """Sorted slots currently taken by off-board enemies."""
        return sorted(set(self.queued.values()))

    def __repr__(self) -> str:
        return f"Lane({self.row}, queued={len(self.queued)}, on_board={len(self.on_board)})"


class LaneTracker:
    """
    Tracks which off-board and on-board positions each enemy lane holds.

    Lookups of enemies that are not in a lane are no-ops, never errors.
    """

    def __init__(self, rows=ENEMY_ROWS):
        self.lanes: Dict[int, Lane] = {row: Lane(row) for row in rows}

    def get_lane(self, row: int) -> Lane:
        """Get the lane for a row, raising ValueError for non-enemy rows."""
        lane = self.lanes.get(row)
        if lane is None:
            raise ValueError(f"Row {row} is not an enemy lane")
        return lane

    def enqueue(self, row: int, enemy: 'Enemy', slot: int) -> None:
        """Register an enemy waiting off-board at `slot`."""
        lane = self.get_lane(row)
        lane.queued[enemy] = slot
        logger.debug(f"Enemy queued in lane {row} at slot {slot} ({len(lane.queued)} waiting)")

    def advance(self, row: int, enemy: 'Enemy', slot: int) -> None:
        """Move a queued enemy to a new slot."""
        lane = self.get_lane(row)
        if enemy in lane.queued:
            lane.queued[enemy] = slot

    def promote(self, row: int, enemy: 'Enemy') -> None:
        """Move an enemy from the off-board queue onto the board."""
        lane = self.get_lane(row)
        lane.queued.pop(enemy, None)
        if enemy not in lane.on_board:
            lane.on_board.append(enemy)
        logger.debug(f"Enemy entered lane {row} ({len(lane.queued)} still waiting)")

    def retire(self, row: int, enemy: 'Enemy') -> None:
        """Remove an enemy from the on-board list of a lane."""
        lane = self.get_lane(row)
        if enemy in lane.on_board:
            lane.on_board.remove(enemy)

    def occupied_slots(self, row: int) -> List[int]:
        return self.get_lane(row).occupied_slots()

    def queued_count(self, row: int) -> int:
        return len(self.get_lane(row).queued)

    def on_board_count(self, row: int) -> int:
        return len(self.get_lane(row).on_board)
