"""
Pickups: the box the player delivers and the bonus heart.
NO UI DEPENDENCIES.
"""
import logging
import random
from enum import Enum, auto
from typing import Iterable, Optional, TYPE_CHECKING

from .constants import (
    BOARD_COLUMNS, ENEMY_ROWS, ROCK_ROW, OFFBOARD_CELL,
    DELIVERY_POINTS, BOX_DESTROY_HITS, BOX_LOST_PENALTY,
    HEART_POINTS, HEART_APPEAR_EVERY, HEART_HIDE_EVERY
)
from .entities import Entity
from .events import BoxDeliveredEvent, BoxDestroyedEvent, HeartCollectedEvent
from .grid import in_bounds
from .randomness import random_int, random_int_excluding
from .session import LogEntry

if TYPE_CHECKING:
    from .enemy import Enemy
    from .world import World

logger = logging.getLogger(__name__)


class ItemKind(Enum):
    """What an item does when the player reaches it."""
    CARGO = auto()   # Carried to the goal for points
    BONUS = auto()   # Picked up on the spot for a life


class DamageTier(Enum):
    """Visual state of the box, by number of times it was run over."""
    UNDAMAGED = 0
    FIRST_HIT = 1
    SECOND_HIT = 2
    DESTROYED = 3


TIER_SPRITES = {
    DamageTier.UNDAMAGED: 'gem-blue',
    DamageTier.FIRST_HIT: 'gem-green',
    DamageTier.SECOND_HIT: 'gem-orange',
    DamageTier.DESTROYED: 'gem-blue',
}


def rearm_enemies(enemies: Iterable['Enemy']) -> None:
    """Clear the hit-box flag so each enemy can damage a relocated box."""
    for enemy in enemies:
        enemy.hit_box = False


class Item(Entity):
    """Base class for pickups."""

    kind: ItemKind

    def __init__(self, x: float, y: float, rng: Optional[random.Random] = None):
        super().__init__(x, y)
        self._rng = rng
        self.collected: bool = False

    @property
    def visible(self) -> bool:
        return in_bounds(self.x, self.y)


class Box(Item):
    """
    The cargo. Picked up by walking onto it, then carried along with the
    player until it reaches the goal or is run over too many times.
    """

    kind = ItemKind.CARGO

    def __init__(self, rng: Optional[random.Random] = None):
        super().__init__(0, ENEMY_ROWS[0], rng)
        self.damage: int = 0
        self.place_randomly()

    @property
    def tier(self) -> DamageTier:
        return DamageTier(min(self.damage, BOX_DESTROY_HITS))

    @property
    def sprite(self) -> str:
        return TIER_SPRITES[self.tier]

    def place_randomly(self) -> None:
        """Drop the box on a random cell in the enemy lanes."""
        self.x = random_int(0, BOARD_COLUMNS, self._rng)
        self.y = random_int(ENEMY_ROWS[0], ENEMY_ROWS[-1] + 1, self._rng)

    def reset(self, enemies: Iterable['Enemy'] = ()) -> None:
        """
        Fresh, undamaged box somewhere on the lanes.
        Every enemy in `enemies` may damage it again.
        """
        self.collected = False
        self.damage = 0
        self.place_randomly()
        rearm_enemies(enemies)

    def update(self, dt: float, world: 'World') -> None:
        session = world.session
        player = world.player

        # Dropped when the carrier gets hit
        if session.hit and self.collected:
            self.collected = False
            self.place_randomly()
            rearm_enemies(world.enemies)
            logger.debug(f"Box dropped at ({self.x}, {self.y})")

        if player.collects(self):
            self.collected = True

        if self.collected:
            self.x = player.x
            self.y = player.y
            if player.reaches_goal(self, world.goal):
                self._deliver(world)

        if self.damage >= BOX_DESTROY_HITS:
            self._destroy(world)

    def _deliver(self, world: 'World') -> None:
        session = world.session
        points = DELIVERY_POINTS.get(self.damage, 0)
        damage = self.damage

        world.player.deliveries.append(LogEntry(session.elapsed, self.x, self.y))
        session.score += points
        session.goal_reached = True
        logger.info(f"Box delivered with {damage} hits for {points} points")

        self.reset(world.enemies)
        for rock in world.rocks:
            rock.relocate()

        world.emit(BoxDeliveredEvent(points, damage))

    def _destroy(self, world: 'World') -> None:
        session = world.session
        session.boxes_lost.append(LogEntry(session.elapsed, self.x, self.y))
        session.score -= BOX_LOST_PENALTY
        logger.info(f"Box destroyed at ({self.x}, {self.y}), {len(session.boxes_lost)} lost")

        self.reset(world.enemies)

        world.emit(BoxDestroyedEvent(BOX_LOST_PENALTY))

    def __repr__(self) -> str:
        return f"Box(x={self.x}, y={self.y}, damage={self.damage}, collected={self.collected})"


class Heart(Item):
    """
    Bonus pickup. Shows up on whole seconds divisible by HEART_APPEAR_EVERY
    and is packed away on whole seconds divisible by HEART_HIDE_EVERY, in
    that order, so a second matching both leaves it hidden.
    """

    kind = ItemKind.BONUS
    sprite = 'heart'

    def __init__(self, rng: Optional[random.Random] = None):
        super().__init__(*OFFBOARD_CELL, rng)
        self.appear_x: int = 0
        self.appear_y: int = ENEMY_ROWS[0]
        self._last_second: Optional[int] = None
        self.roll_appear_cell()

    def roll_appear_cell(self) -> None:
        self.appear_x = random_int(0, BOARD_COLUMNS, self._rng)
        self.appear_y = random_int_excluding(ENEMY_ROWS[0], ROCK_ROW + 1, ROCK_ROW, self._rng)

    def show(self) -> None:
        self.x = self.appear_x
        self.y = self.appear_y

    def hide(self) -> None:
        self.x, self.y = OFFBOARD_CELL

    def update(self, dt: float, world: 'World') -> None:
        player = world.player

        if self.visible and player.collects(self):
            self._collect(world)

        # Only act once per whole second
        second = world.session.whole_seconds
        if second == self._last_second:
            return
        self._last_second = second

        if second % HEART_APPEAR_EVERY == 0:
            self.show()
        if second % HEART_HIDE_EVERY == 0:
            self.hide()
            self.roll_appear_cell()

    def _collect(self, world: 'World') -> None:
        session = world.session
        player = world.player

        player.lives += 1
        session.score += HEART_POINTS
        self.collected = False
        self.hide()
        logger.info(f"Heart collected, {player.lives} lives")
        world.emit(HeartCollectedEvent(HEART_POINTS, player.lives))

    def __repr__(self) -> str:
        return f"Heart(x={self.x}, y={self.y}, visible={self.visible})"
