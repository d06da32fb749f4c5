"""Base class for CPU agents."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from monopoly_engine.game import GameState


class Agent(ABC):
    """
    Abstract base class for CPU agents.

    An agent plays one complete turn for whichever CPU player is currently on
    turn. It must finish by passing the turn so the lifecycle loop advances.
    """

    name = "agent"

    @abstractmethod
    def take_turn(self, game: "GameState") -> None:
        """
        Play the current player's whole turn.

        Args:
            game: The current game state, mutated in place.
        """
        pass
