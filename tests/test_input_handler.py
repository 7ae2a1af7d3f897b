"""
Tests for the key-release input adapter.
"""
import pygame

from indieboxer.gameplay.events import GamePhase
from indieboxer.gameplay.grid import Direction
from indieboxer.ui.input_handler import InputHandler, START_PROMPT, GAME_OVER_PROMPT


class StubRenderer:
    prompt = None


class TestInputHandler:
    """Tests for InputHandler."""

    def test_confirm_key_starts_game(self, game):
        handler = InputHandler(game, StubRenderer())
        assert not handler.handle_key_up(pygame.K_y)
        game.update(0.0)
        assert game.phase == GamePhase.RUNNING

    def test_decline_key_quits(self, game):
        handler = InputHandler(game, StubRenderer())
        assert handler.handle_key_up(pygame.K_n)
        assert game.quit_requested

    def test_escape_quits(self, game):
        handler = InputHandler(game, StubRenderer())
        assert handler.handle_key_up(pygame.K_ESCAPE)

    def test_arrow_moves_player(self, game):
        handler = InputHandler(game, StubRenderer())
        game.confirm()
        game.update(0.0)

        handler.handle_key_up(pygame.K_UP)

        assert game.player.moving
        assert game.player.direction == Direction.UP

    def test_unmapped_key_ignored(self, game):
        handler = InputHandler(game, StubRenderer())
        game.confirm()
        game.update(0.0)

        assert not handler.handle_key_up(pygame.K_a)
        assert not game.player.moving

    def test_prompts(self, game):
        """Start prompt while idle, game over prompt after losing, none while running."""
        renderer = StubRenderer()
        handler = InputHandler(game, renderer)

        handler.sync_prompt()
        assert renderer.prompt == START_PROMPT

        game.confirm()
        game.update(0.0)
        handler.sync_prompt()
        assert renderer.prompt is None

        game.player.lives = 1
        game.session.hit = True
        game.update(0.05)
        handler.sync_prompt()
        assert renderer.prompt == GAME_OVER_PROMPT
