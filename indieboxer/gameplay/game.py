"""
Main Game class - orchestrates all gameplay systems.
NO UI DEPENDENCIES.

This is the central gameplay module. It can be fully tested
without any UI framework.
"""
import logging
import random
from typing import Iterator, List, Optional, Sequence, Tuple

from .constants import ENEMY_ROWS
from .enemy import Enemy, create_enemies
from .entities import Goal, Rock
from .events import GameEvent, GamePhase, GameOverEvent, PhaseChangedEvent
from .grid import Direction
from .hud import DisplaySink, HudState, SpriteRenderer, publish
from .items import Box, Heart, rearm_enemies
from .lanes import LaneTracker
from .player import Player
from .session import Session
from .world import World

logger = logging.getLogger(__name__)


class Game:
    """
    The main game class that orchestrates all gameplay.

    This class is COMPLETELY DECOUPLED from UI.
    It exposes state as plain data and accepts commands as method calls.

    Usage:
        game = Game()
        game.confirm()
        while not game.quit_requested:
            events = game.update(dt)
            game.publish_hud(sink)
            game.render(renderer)

    Every tick updates the player, the enemies, the box, the goal and the
    heart in that order. Later entities read what earlier ones wrote in the
    same tick, so the order must not change.
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        enemy_speeds: Optional[Sequence[int]] = None,
        rock_count: int = 1,
        debug_lanes: bool = False
    ):
        self.rng = rng if rng is not None else random.Random(seed)
        self.debug_lanes = debug_lanes

        lanes = LaneTracker()
        self.world = World(
            session=Session(),
            lanes=lanes,
            player=Player(self.rng),
            box=Box(self.rng),
            heart=Heart(self.rng),
            goal=Goal(self.rng),
            rocks=[Rock(self.rng) for _ in range(rock_count)],
            enemies=create_enemies(lanes, enemy_speeds, self.rng),
            rng=self.rng,
        )

        self.phase = GamePhase.IDLE
        self.quit_requested = False
        self._confirmed = False

    # =========================================================================
    # STATE ACCESS
    # =========================================================================

    @property
    def session(self) -> Session:
        return self.world.session

    @property
    def player(self) -> Player:
        return self.world.player

    @property
    def box(self) -> Box:
        return self.world.box

    @property
    def heart(self) -> Heart:
        return self.world.heart

    @property
    def goal(self) -> Goal:
        return self.world.goal

    @property
    def rocks(self) -> List[Rock]:
        return self.world.rocks

    @property
    def enemies(self) -> List[Enemy]:
        return self.world.enemies

    @property
    def lanes(self) -> LaneTracker:
        return self.world.lanes

    # =========================================================================
    # COMMANDS
    # =========================================================================

    def confirm(self) -> None:
        """
        The player agreed to start (or restart).
        Consumed by the next update().
        """
        self._confirmed = True

    def decline(self) -> None:
        """The player chose not to (re)start."""
        self.quit_requested = True

    def handle_input(self, direction: Direction) -> bool:
        """
        Forward a directional input to the player.
        Returns True if a move was started.
        """
        if self.phase != GamePhase.RUNNING or self.session.game_over:
            return False
        return self.player.handle_input(direction, self.world)

    def reset(self) -> None:
        """Fresh player and box, zeroed score, lost log and clock."""
        self.session.reset()
        self.world.player = Player(self.rng)
        self.world.box = Box(self.rng)
        rearm_enemies(self.enemies)
        logger.info("Session reset")

    # =========================================================================
    # UPDATE LOOP
    # =========================================================================

    def update(self, dt: float) -> List[GameEvent]:
        """
        Advance the game by dt seconds.
        Returns the list of events that occurred.
        """
        self.world.events = []

        if self.phase == GamePhase.IDLE:
            if self._confirmed:
                self._confirmed = False
                if self.session.game_over:
                    self.reset()
                self._set_phase(GamePhase.RUNNING)
            return self.world.events

        if not self.session.game_over:
            self._update_entities(dt)
            self.session.elapsed += dt

        if self.session.game_over:
            self.world.emit(GameOverEvent(self.session.score, len(self.player.deliveries)))
            self._set_phase(GamePhase.IDLE)

        return self.world.events

    def _update_entities(self, dt: float) -> None:
        world = self.world
        world.player.update(dt, world)
        for enemy in world.enemies:
            enemy.update(dt, world)
        world.box.update(dt, world)
        world.goal.update(dt, world)
        world.heart.update(dt, world)

    def _set_phase(self, new_phase: GamePhase) -> None:
        old_phase = self.phase
        self.phase = new_phase
        logger.info(f"Phase {old_phase.name} -> {new_phase.name}")
        self.world.emit(PhaseChangedEvent(old_phase, new_phase))

    # =========================================================================
    # PRESENTATION (read-only)
    # =========================================================================

    def get_hud_state(self) -> HudState:
        lane_queues: Tuple[int, ...] = ()
        if self.debug_lanes:
            lane_queues = tuple(self.lanes.queued_count(row) for row in ENEMY_ROWS)
        return HudState(
            score=self.session.score,
            lives=self.player.lives,
            level=self.player.level,
            delivered=len(self.player.deliveries),
            lost=len(self.session.boxes_lost),
            timer=self.session.format_elapsed(),
            lane_queues=lane_queues,
        )

    def publish_hud(self, sink: DisplaySink) -> None:
        publish(self.get_hud_state(), sink)

    def iter_sprites(self) -> Iterator[Tuple[str, float, float]]:
        """
        Yield (sprite_id, pixel_x, pixel_y) in draw order.
        Hidden items are skipped.
        """
        world = self.world
        yield world.goal.render_info()
        yield world.box.render_info()
        if world.heart.visible:
            yield world.heart.render_info()
        for enemy in world.enemies:
            yield enemy.render_info()
        for rock in world.rocks:
            yield rock.render_info()
        yield world.player.render_info()

    def render(self, renderer: SpriteRenderer) -> None:
        for sprite_id, pixel_x, pixel_y in self.iter_sprites():
            renderer.render(sprite_id, pixel_x, pixel_y)

    # =========================================================================
    # CONVENIENCE METHODS FOR TESTING
    # =========================================================================

    def simulate(self, seconds: float, dt: float = 0.05) -> List[GameEvent]:
        """
        Run the game for a number of seconds while it stays RUNNING.
        Returns all events that occurred.
        """
        all_events = []
        elapsed = 0.0
        while elapsed < seconds and self.phase == GamePhase.RUNNING:
            all_events.extend(self.update(dt))
            elapsed += dt
        return all_events
