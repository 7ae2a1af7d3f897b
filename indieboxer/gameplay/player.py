"""
The player avatar: discrete-cell moves, lives, level progression.
NO UI DEPENDENCIES.
"""
import logging
import random
from typing import List, Optional, Tuple, TYPE_CHECKING

from .constants import (
    HOME_CELL, HOME_ROW, PLAYER_BASE_SPEED,
    STARTING_LIVES, LEVEL_BAND, MAX_LEVEL, HIT_TOLERANCE
)
from .entities import Entity
from .events import LifeLostEvent
from .grid import Direction, in_bounds
from .randomness import random_int
from .session import LogEntry, MoveRecord

if TYPE_CHECKING:
    from .entities import Goal
    from .enemy import Enemy
    from .items import Item
    from .world import World

logger = logging.getLogger(__name__)


def level_for_score(score: int) -> Tuple[int, int]:
    """
    Return (level, speed) for a score.

    Level 1 below LEVEL_BAND points, then one level per band up to MAX_LEVEL.
    Speed is PLAYER_BASE_SPEED at level 1 and one faster per level after.
    """
    level = min(MAX_LEVEL, max(1, score // LEVEL_BAND + 1))
    return level, PLAYER_BASE_SPEED + level - 1


class Player(Entity):
    """
    The player-controlled avatar.

    Moves are two-phase: handle_input() sets a target cell one step away,
    update() slides the position toward it and snaps to the cell on arrival.
    A new move is only accepted once the previous one has finished.
    """

    sprite = 'char-boy'

    def __init__(self, rng: Optional[random.Random] = None):
        super().__init__(*HOME_CELL)
        self._rng = rng
        self.move_x: int = HOME_CELL[0]
        self.move_y: int = HOME_CELL[1]
        self.direction: Optional[Direction] = None
        self.moving: bool = False
        self.speed: int = PLAYER_BASE_SPEED
        self.lives: int = STARTING_LIVES
        self.level: int = 1
        self.movements: List[MoveRecord] = []
        self.deliveries: List[LogEntry] = []

    # =========================================================================
    # INPUT
    # =========================================================================

    def handle_input(self, direction: Direction, world: 'World') -> bool:
        """
        Try to start a one-cell move.
        Returns False if mid-move, off the board, or blocked by a rock.
        """
        if self.moving:
            return False

        dx, dy = direction.delta()
        target_x = self.move_x + dx
        target_y = self.move_y + dy

        if not in_bounds(target_x, target_y):
            return False
        if world.rock_at(target_x, target_y):
            return False

        self.direction = direction
        self.moving = True
        self.move_x = target_x
        self.move_y = target_y
        self.movements.append(MoveRecord(direction, world.session.elapsed, target_x, target_y))
        logger.debug(f"Player moving {direction.name} to ({target_x}, {target_y})")
        return True

    # =========================================================================
    # UPDATE
    # =========================================================================

    def update(self, dt: float, world: 'World') -> None:
        session = world.session

        if self.moving and not session.hit:
            self._step(dt)

        if session.hit:
            self._take_hit(world)

        self.check_level(session.score)

    def _step(self, dt: float) -> None:
        """Slide toward the target cell, snapping once it is reached."""
        distance = dt * self.speed

        if self.direction == Direction.LEFT and self.x > self.move_x:
            self.x = max(self.x - distance, self.move_x)
        elif self.direction == Direction.RIGHT and self.x < self.move_x:
            self.x = min(self.x + distance, self.move_x)
        elif self.direction == Direction.UP and self.y > self.move_y:
            self.y = max(self.y - distance, self.move_y)
        elif self.direction == Direction.DOWN and self.y < self.move_y:
            self.y = min(self.y + distance, self.move_y)

        if self.x == self.move_x and self.y == self.move_y:
            self._arrive()

    def _arrive(self) -> None:
        self.moving = False
        self.x = self.move_x
        self.y = self.move_y

    def _take_hit(self, world: 'World') -> None:
        """Lose a life, or end the game on the last one."""
        session = world.session
        session.hit = False
        self.moving = False

        if self.lives > 1:
            self.lives -= 1
            self._place(random_int(1, 4, self._rng), HOME_ROW)
            logger.info(f"Player lost a life, {self.lives} left")
            world.emit(LifeLostEvent(self.lives))
        else:
            self.lives = STARTING_LIVES
            self._place(*HOME_CELL)
            session.game_over = True
            world.box.reset(world.enemies)
            logger.info("GAME OVER")

    def _place(self, x: int, y: int) -> None:
        self.x = self.move_x = x
        self.y = self.move_y = y

    def check_level(self, score: int) -> None:
        self.level, self.speed = level_for_score(score)

    # =========================================================================
    # QUERIES
    # =========================================================================

    def intersects(self, enemy: 'Enemy') -> bool:
        """True if the enemy is in this row and within half a column."""
        return enemy.y == self.y and abs(enemy.x - self.x) <= HIT_TOLERANCE

    def collects(self, item: 'Item') -> bool:
        """True if the item sits exactly on the player's cell."""
        return item.x == self.x and item.y == self.y

    def reaches_goal(self, item: 'Item', goal: 'Goal') -> bool:
        """True if the item is on the goal cell."""
        return item.x == goal.x and item.y == goal.y

    def __repr__(self) -> str:
        return f"Player(x={self.x}, y={self.y}, lives={self.lives}, level={self.level})"
