"""
Shared fixtures for gameplay tests.
"""
import pytest

from indieboxer.gameplay.game import Game


@pytest.fixture
def game():
    """A seeded game with no enemies and the rock parked in column 0."""
    game = Game(seed=1234, enemy_speeds=[])
    game.rocks[0].x = 0
    return game


@pytest.fixture
def world(game):
    return game.world
