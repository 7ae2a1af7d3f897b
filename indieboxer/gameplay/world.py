"""
World - the context object passed into every entity update.
NO UI DEPENDENCIES.
"""
import random
from dataclasses import dataclass, field
from typing import List, TYPE_CHECKING

from .events import GameEvent
from .lanes import LaneTracker
from .session import Session

if TYPE_CHECKING:
    from .enemy import Enemy
    from .entities import Goal, Rock
    from .items import Item
    from .player import Player


@dataclass
class World:
    """
    Everything a tick can read or write.

    The orchestrator owns the collections; entities only see them through
    the world handed to their update call.
    """
    session: Session
    lanes: LaneTracker
    player: 'Player'
    box: 'Item'
    heart: 'Item'
    goal: 'Goal'
    rocks: List['Rock']
    enemies: List['Enemy']
    rng: random.Random = field(default_factory=random.Random)
    events: List[GameEvent] = field(default_factory=list)

    def emit(self, event: GameEvent) -> None:
        self.events.append(event)

    def rock_at(self, x: float, y: float) -> bool:
        """True if any rock occupies (x, y)."""
        return any(rock.occupies(x, y) for rock in self.rocks)
