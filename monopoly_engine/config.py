"""
Game configuration settings.
"""

from dataclasses import dataclass, field
from typing import List, Optional


PLAYER_COLORS: List[str] = [
    "#e74c3c",
    "#3498db",
    "#2ecc71",
    "#f1c40f",
    "#9b59b6",
    "#e67e22",
    "#1abc9c",
    "#34495e",
]


@dataclass
class GameConfig:
    """Rule constants for a Monopoly game."""

    starting_cash: int = 1500
    go_salary: int = 200
    jail_fine: int = 50
    mortgage_interest_rate: float = 0.10

    board_size: int = 40
    jail_position: int = 10

    # CPU players keep this much cash in hand after buying or building
    cpu_purchase_reserve: int = 500
    cpu_build_reserve: int = 200

    # None means one CPU turn per seat
    max_cpu_turns_per_action: Optional[int] = None

    seed: Optional[int] = None

    player_colors: List[str] = field(default_factory=lambda: list(PLAYER_COLORS))

    def color_for(self, index: int) -> str:
        """Color assigned to the player sitting at ``index``."""
        return self.player_colors[index % len(self.player_colors)]
