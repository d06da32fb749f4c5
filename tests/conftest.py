"""Shared test fixtures for the Monopoly engine tests."""

import pytest

from monopoly_engine import GameConfig, GameEngine, create_game


class ScriptedDice:
    """Stands in for the game RNG: dice come from a queue, shuffles do nothing."""

    def __init__(self, *rolls):
        self.values = [value for roll in rolls for value in roll]

    def randint(self, a, b):
        return self.values.pop(0)

    def shuffle(self, items):
        pass


@pytest.fixture
def game_config():
    """Default game configuration with fixed seed for reproducibility."""
    return GameConfig(seed=42)


@pytest.fixture
def basic_game(game_config):
    """Two humans, Alice (g1-0) then Bob (g1-1)."""
    return create_game("g1", ["Alice", "Bob"], config=game_config)


@pytest.fixture
def three_player_game(game_config):
    """Alice (g1-0), Bob (g1-1) and Carol (g1-2)."""
    return create_game("g1", ["Alice", "Bob", "Carol"], config=game_config)


@pytest.fixture
def cpu_game(game_config):
    """Alice (g1-0) against one CPU (g1-cpu-0)."""
    return create_game("g1", ["Alice"], cpu_count=1, config=game_config)


@pytest.fixture
def rig_dice():
    """Replace a game's RNG so the next rolls are known."""

    def _rig(game, *rolls):
        game.rng = ScriptedDice(*rolls)

    return _rig


@pytest.fixture
def give():
    """Hand board tiles to a player."""

    def _give(game, player_id, *indices):
        for index in indices:
            game.board[index].owner_id = player_id

    return _give


@pytest.fixture
def engine(game_config):
    """Engine backed by the in-memory store."""
    return GameEngine(config=game_config)
