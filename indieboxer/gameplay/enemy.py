"""
Enemy traffic: movement, respawn queueing, convoy speed matching.
NO UI DEPENDENCIES.
"""
import logging
import math
import random
from typing import List, Optional, Tuple, TYPE_CHECKING

from .constants import (
    BOARD_COLUMNS, ENEMY_ROWS, ENEMY_MIN_SPEED, ENEMY_MAX_SPEED,
    ENEMY_INITIAL_SLOTS, ENEMY_RESPAWN_SLOTS, ENEMY_POOL_SPEEDS, CONVOY_DISTANCE,
    HIT_TOLERANCE
)
from .entities import Entity
from .lanes import LaneTracker
from .randomness import random_int, random_int_inclusive, random_int_excluding_set

if TYPE_CHECKING:
    from .world import World

logger = logging.getLogger(__name__)


class Enemy(Entity):
    """
    A bug crossing one of the enemy lanes from left to right.

    Enemies are never destroyed. Once an enemy runs off the right edge it is
    parked off-board again, left of column 0, in a random lane and at a slot
    no other waiting enemy in that lane holds.
    """

    sprite = 'enemy-bug'

    def __init__(self, speed: int, rng: Optional[random.Random] = None):
        if not ENEMY_MIN_SPEED <= speed <= ENEMY_MAX_SPEED:
            raise ValueError(
                f"Enemy speed must be in [{ENEMY_MIN_SPEED}, {ENEMY_MAX_SPEED}], got {speed}"
            )
        super().__init__(0.0, ENEMY_ROWS[0])
        self._rng = rng
        self.speed: int = speed
        self.visible: bool = False
        self.hit_box: bool = False  # already damaged the current box this pass
        self.slot: int = 0          # last recorded off-board slot

    def spawn(self, lanes: LaneTracker, slots: Tuple[int, int] = ENEMY_INITIAL_SLOTS) -> None:
        """Park this enemy off-board in a random lane at a free slot."""
        self.y = random_int(ENEMY_ROWS[0], ENEMY_ROWS[-1] + 1, self._rng)
        self.slot = random_int_excluding_set(slots[0], slots[1], lanes.occupied_slots(self.y), self._rng)
        self.x = -self.slot
        self.visible = False
        lanes.enqueue(self.y, self, self.slot)

    def update(self, dt: float, world: 'World') -> None:
        lanes = world.lanes
        self.x += dt * self.speed

        if self.x > 0 and not self.visible:
            self.visible = True
            lanes.promote(self.y, self)
        elif self.x >= BOARD_COLUMNS and self.visible:
            self._respawn(lanes)
        else:
            if not self.visible:
                self._track_slot(lanes)
            self._match_convoy_speed(world.enemies)

        self._check_collisions(world)

    def _respawn(self, lanes: LaneTracker) -> None:
        """Leave the board and queue up again with a fresh lane and speed."""
        lanes.retire(self.y, self)
        self.speed = random_int_inclusive(ENEMY_MIN_SPEED, ENEMY_MAX_SPEED, self._rng)
        self.hit_box = False
        self.spawn(lanes, ENEMY_RESPAWN_SLOTS)
        logger.debug(f"Enemy respawned in lane {self.y} at {self.x} with speed {self.speed}")

    def _track_slot(self, lanes: LaneTracker) -> None:
        """Record the slot while still approaching the board."""
        if self.x >= 0:
            return
        slot = -math.floor(self.x)
        if slot < self.slot:
            lanes.advance(self.y, self, slot)
            self.slot = slot

    def _match_convoy_speed(self, enemies: List['Enemy']) -> None:
        """Slow down to the speed of a slower enemy just ahead in the lane."""
        new_speed = self.speed
        for other in enemies:
            if other is self or other.y != self.y:
                continue
            if self.x <= other.x <= self.x + CONVOY_DISTANCE and other.speed < new_speed:
                new_speed = other.speed
        self.speed = new_speed

    def _check_collisions(self, world: 'World') -> None:
        if world.player.intersects(self):
            if not world.session.hit:
                logger.info(f"Player hit by enemy at ({self.x:.2f}, {self.y})")
            world.session.hit = True

        box = world.box
        if self.y == box.y and not self.hit_box and abs(self.x - box.x) <= HIT_TOLERANCE:
            self.hit_box = True
            box.damage += 1
            logger.info(f"Box ran over ({box.damage} hits)")

    def __repr__(self) -> str:
        return f"Enemy(x={self.x:.2f}, y={self.y}, speed={self.speed}, visible={self.visible})"


def create_enemies(
    lanes: LaneTracker,
    speeds=None,
    rng: Optional[random.Random] = None
) -> List[Enemy]:
    """Build and park the fixed pool of enemies."""
    enemies = []
    for speed in speeds if speeds is not None else ENEMY_POOL_SPEEDS:
        enemy = Enemy(speed, rng)
        enemy.spawn(lanes)
        enemies.append(enemy)
    return enemies
