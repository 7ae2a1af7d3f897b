"""
Session state shared by every entity during a tick.
NO UI DEPENDENCIES.
"""
from dataclasses import dataclass, field
from typing import List

from .grid import Direction


@dataclass
class LogEntry:
    """A timestamped board position (deliveries and lost boxes)."""
    time: float
    x: int
    y: int


@dataclass
class MoveRecord:
    """An accepted player move and the cell it targets."""
    direction: Direction
    time: float
    x: int
    y: int


@dataclass
class Session:
    """
    Mutable per-session state.

    `hit` and `goal_reached` are one-tick signals: enemies raise `hit`, the
    player consumes it on the next tick; the box raises `goal_reached`, the
    goal consumes it later in the same tick.
    """
    score: int = 0
    hit: bool = False
    goal_reached: bool = False
    game_over: bool = False
    elapsed: float = 0.0
    boxes_lost: List[LogEntry] = field(default_factory=list)

    @property
    def whole_seconds(self) -> int:
        return int(self.elapsed)

    @property
    def hours(self) -> int:
        return self.whole_seconds // 3600

    @property
    def minutes(self) -> int:
        return (self.whole_seconds // 60) % 60

    @property
    def seconds(self) -> int:
        return self.whole_seconds % 60

    def format_elapsed(self) -> str:
        """Elapsed running time as HH:MM:SS."""
        return f"{self.hours:02d}:{self.minutes:02d}:{self.seconds:02d}"

    def reset(self) -> None:
        """Zero everything for a fresh run."""
        self.score = 0
        self.hit = False
        self.goal_reached = False
        self.game_over = False
        self.elapsed = 0.0
        self.boxes_lost = []
