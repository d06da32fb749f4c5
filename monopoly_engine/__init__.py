"""
Monopoly Online game-state engine.

Owns the authoritative state of each game and applies player and CPU actions
to it: movement, rent, building, mortgages, cards, trades, bankruptcy and the
end of the game.
"""

from monopoly_engine.config import GameConfig
from monopoly_engine.engine import GameEngine
from monopoly_engine.exceptions import GameNotFoundError, MonopolyError
from monopoly_engine.game import GameState, GameStatus, create_game
from monopoly_engine.player import Player
from monopoly_engine.rules import ActionType, apply_action, play_action

__all__ = [
    "ActionType",
    "GameConfig",
    "GameEngine",
    "GameNotFoundError",
    "GameState",
    "GameStatus",
    "MonopolyError",
    "Player",
    "apply_action",
    "create_game",
    "play_action",
]
