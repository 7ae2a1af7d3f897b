"""
Events raised during a tick for the UI to react to.
NO UI DEPENDENCIES.
"""
from dataclasses import dataclass
from enum import Enum, auto


class GamePhase(Enum):
    """Current phase of the session state machine."""
    IDLE = auto()       # Waiting for the player to confirm a (re)start
    RUNNING = auto()    # Entities update every frame


@dataclass
class GameEvent:
    """An event that occurred during gameplay."""
    pass


@dataclass
class PhaseChangedEvent(GameEvent):
    """Game phase changed."""
    old_phase: GamePhase
    new_phase: GamePhase


@dataclass
class LifeLostEvent(GameEvent):
    """Player was hit and lost a life."""
    lives_left: int


@dataclass
class GameOverEvent(GameEvent):
    """Player was hit on the last life."""
    final_score: int
    delivered: int


@dataclass
class BoxDeliveredEvent(GameEvent):
    """The box reached the goal."""
    points: int
    damage: int


@dataclass
class BoxDestroyedEvent(GameEvent):
    """The box took too many hits and was lost."""
    penalty: int


@dataclass
class HeartCollectedEvent(GameEvent):
    """The player picked up the bonus heart."""
    points: int
    lives: int
