"""
Exception hierarchy for the Monopoly engine.

Only host-facing failures are exceptions. Illegal or unaffordable moves are
recorded in the game log instead and never raise.
"""


class MonopolyError(Exception):
    """Base exception for all game-related errors."""


class GameNotFoundError(MonopolyError):
    """Game does not exist."""

    def __init__(self, game_id: str):
        super().__init__(f"Game not found: {game_id}")
        self.game_id = game_id


class InvalidPayloadError(MonopolyError):
    """Action payload could not be parsed."""
