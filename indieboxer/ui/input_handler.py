"""
Input Handler - Translates key releases to gameplay commands.
This is a THIN ADAPTER - no game logic here.
"""
import logging
from typing import Optional

import pygame

from indieboxer.gameplay.events import GamePhase
from indieboxer.gameplay.game import Game
from indieboxer.gameplay.grid import Direction
from indieboxer.ui.renderer import Renderer

logger = logging.getLogger(__name__)


# Arrow keys drive the player; anything else is ignored while running
DIRECTION_KEYS = {
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_UP: Direction.UP,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_DOWN: Direction.DOWN,
}

CONFIRM_KEYS = {pygame.K_y, pygame.K_RETURN, pygame.K_SPACE}
DECLINE_KEYS = {pygame.K_n}

START_PROMPT = "Start game? (Y/N)"
GAME_OVER_PROMPT = "GAME OVER! Try again? (Y/N)"


class InputHandler:
    """
    Handles keyboard input and translates it to game commands.

    While the game is IDLE the handler acts as the confirmation prompt:
    Y/Enter/Space confirms, N declines. While RUNNING, arrow key releases
    become player moves.
    """

    def __init__(self, game: Game, renderer: Renderer):
        self.game = game
        self.renderer = renderer

    def handle_key_up(self, key: int) -> bool:
        """
        Handle a single key release.
        Returns True if the game should quit.
        """
        if key == pygame.K_ESCAPE:
            return True

        if self.game.phase == GamePhase.IDLE:
            if key in CONFIRM_KEYS:
                self.game.confirm()
            elif key in DECLINE_KEYS:
                logger.info("Player declined to continue")
                self.game.decline()
            return self.game.quit_requested

        direction = DIRECTION_KEYS.get(key)
        if direction is not None:
            self.game.handle_input(direction)
        return False

    def current_prompt(self) -> Optional[str]:
        """Prompt to show for the current phase, if any."""
        if self.game.phase != GamePhase.IDLE:
            return None
        if self.game.session.game_over:
            return GAME_OVER_PROMPT
        return START_PROMPT

    def sync_prompt(self) -> None:
        self.renderer.prompt = self.current_prompt()
