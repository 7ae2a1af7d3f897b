#!/usr/bin/env python3
"""
Indieboxer - Main Entry Point

Pick up the box, carry it across the bug lanes and drop it on the star.
Every time a bug runs the box over it is worth less; three hits and it is
gone. Hearts show up now and then for an extra life.

Usage:
    python -m indieboxer.main

Controls:
    Arrow keys: Move (on key release)
    Y/Enter/Space: Confirm start / restart
    N: Decline and quit
    Escape: Quit

Settings are read from INDIEBOXER_* environment variables or a .env file.
"""
import logging

import pygame

from indieboxer.config import get_settings
from indieboxer.gameplay.events import GameOverEvent
from indieboxer.gameplay.game import Game
from indieboxer.ui.input_handler import InputHandler
from indieboxer.ui.renderer import Renderer

logger = logging.getLogger(__name__)


def main():
    """Main entry point."""
    settings = get_settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.info("Indieboxer - Starting...")

    pygame.init()

    game = Game(seed=settings.seed, debug_lanes=settings.debug_lanes)

    renderer = Renderer(game, scale=settings.window_scale)
    renderer.init_window()
    input_handler = InputHandler(game, renderer)

    clock = pygame.time.Clock()
    should_quit = False

    while not should_quit:
        dt = clock.tick(settings.fps) / 1000.0

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                should_quit = True
            elif event.type == pygame.KEYUP:
                should_quit = input_handler.handle_key_up(event.key) or should_quit

        for game_event in game.update(dt):
            if isinstance(game_event, GameOverEvent):
                logger.info(
                    f"Game over: {game_event.final_score} points, "
                    f"{game_event.delivered} boxes delivered"
                )

        # Presentation step after the tick
        game.publish_hud(renderer)
        input_handler.sync_prompt()
        renderer.draw_frame()

    logger.info("Indieboxer stopped.")
    pygame.quit()


if __name__ == "__main__":
    main()
