"""
Player state.
"""

from dataclasses import dataclass


@dataclass
class Player:
    """Represents the complete state of a player in the game."""

    player_id: str
    name: str
    money: int
    color: str
    is_cpu: bool = False
    position: int = 0
    in_jail: bool = False
    jail_turns: int = 0
    get_out_of_jail_cards: int = 0

    @property
    def is_bankrupt(self) -> bool:
        """Negative money is the bankruptcy marker."""
        return self.money < 0

    def __repr__(self) -> str:
        return (
            f"Player(id={self.player_id}, name='{self.name}', "
            f"money={self.money}, position={self.position}, cpu={self.is_cpu})"
        )
