"""
HUD snapshot and the display sink it is published to.
NO UI DEPENDENCIES.
"""
from dataclasses import dataclass
from typing import List, Protocol, Tuple, runtime_checkable


@runtime_checkable
class DisplaySink(Protocol):
    """Anything that can show a text value under an element id."""

    def set_text(self, element_id: str, value: str) -> None:
        ...


@runtime_checkable
class SpriteRenderer(Protocol):
    """Anything that can draw a sprite at pixel offsets."""

    def render(self, sprite_id: str, pixel_x: float, pixel_y: float) -> None:
        ...


@dataclass(frozen=True)
class HudState:
    """Plain snapshot of the values shown around the board."""
    score: int
    lives: int
    level: int
    delivered: int
    lost: int
    timer: str
    lane_queues: Tuple[int, ...] = ()

    def elements(self) -> List[Tuple[str, str]]:
        """(element_id, text) pairs in display order."""
        pairs = [
            ('points', str(self.score)),
            ('lives', str(self.lives)),
            ('level', str(self.level)),
            ('boxes_saved', str(self.delivered)),
            ('boxes_lost', str(self.lost)),
            ('timer', self.timer),
        ]
        for lane_number, count in enumerate(self.lane_queues, start=1):
            pairs.append((f'enemy_lane_{lane_number}', str(count)))
        return pairs


def publish(state: HudState, sink: DisplaySink) -> None:
    """Write every HUD element through the sink."""
    for element_id, value in state.elements():
        sink.set_text(element_id, value)
