"""
Board entities: Entity base, Goal, Rock.
NO UI DEPENDENCIES.
"""
import logging
import random
from typing import Optional, Tuple, TYPE_CHECKING

from .constants import BOARD_COLUMNS, GOAL_ROW, ROCK_ROW
from .grid import cell_to_pixels
from .randomness import random_int

if TYPE_CHECKING:
    from .world import World

logger = logging.getLogger(__name__)


class Entity:
    """Base class for everything drawn on the board."""

    sprite: str = ''

    def __init__(self, x: float = 0, y: float = 0):
        self.x = x
        self.y = y

    def update(self, dt: float, world: 'World') -> None:
        """Update entity state. dt is delta time in seconds."""
        pass

    @property
    def position(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def occupies(self, x: float, y: float) -> bool:
        """True if this entity sits exactly on (x, y)."""
        return self.x == x and self.y == y

    def render_info(self) -> Tuple[str, float, float]:
        """Return (sprite_id, pixel_x, pixel_y) for the renderer."""
        pixel_x, pixel_y = cell_to_pixels(self.x, self.y)
        return (self.sprite, pixel_x, pixel_y)


class Goal(Entity):
    """
    The delivery target. Always on the top row; jumps to a new column
    after every delivery.
    """

    sprite = 'star'

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng
        super().__init__(random_int(0, BOARD_COLUMNS, rng), GOAL_ROW)

    def relocate(self) -> None:
        self.x = random_int(0, BOARD_COLUMNS, self._rng)

    def update(self, dt: float, world: 'World') -> None:
        if world.session.goal_reached:
            world.session.goal_reached = False
            self.relocate()
            logger.debug(f"Goal moved to column {self.x}")

    def __repr__(self) -> str:
        return f"Goal({self.x}, {self.y})"


class Rock(Entity):
    """A static blocker the player cannot walk onto."""

    sprite = 'rock'

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng
        super().__init__(random_int(0, BOARD_COLUMNS, rng), ROCK_ROW)

    def relocate(self) -> None:
        self.x = random_int(0, BOARD_COLUMNS, self._rng)

    def __repr__(self) -> str:
        return f"Rock({self.x}, {self.y})"
