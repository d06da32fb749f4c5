"""
Money movement and the game log.
"""

import logging
from enum import Enum
from typing import Iterable, List, Optional

from monopoly_engine.player import Player

logger = logging.getLogger(__name__)


class EventType(Enum):
    """Types of game events."""

    GAME_START = "game_start"
    TURN_START = "turn_start"
    DICE_ROLL = "dice_roll"
    MOVE = "move"
    PASS_GO = "pass_go"

    PURCHASE = "purchase"
    RENT_PAYMENT = "rent_payment"
    TAX_PAYMENT = "tax_payment"

    CARD_DRAW = "card_draw"
    CARD_EFFECT = "card_effect"

    BUILD_HOUSE = "build_house"
    SELL_BUILDING = "sell_building"
    MORTGAGE = "mortgage"
    UNMORTGAGE = "unmortgage"

    GO_TO_JAIL = "go_to_jail"
    JAIL_RELEASE = "jail_release"
    JAIL_STUCK = "jail_stuck"

    TRADE_PROPOSED = "trade_proposed"
    TRADE_ACCEPTED = "trade_accepted"
    TRADE_REJECTED = "trade_rejected"

    CPU_THINKING = "cpu_thinking"
    ACTION_REJECTED = "action_rejected"
    BANKRUPTCY = "bankruptcy"
    GAME_END = "game_end"


class GameLog:
    """
    Append-only list of human-readable game events.

    Entries are never reordered or removed. Each entry is mirrored to the
    module logger with its event type so hosts can route them.
    """

    def __init__(self, entries: Optional[Iterable[str]] = None):
        self.entries: List[str] = list(entries or [])

    def log(self, event_type: EventType, message: str, player_id: Optional[str] = None) -> None:
        self.entries.append(message)
        logger.debug("[%s] %s: %s", player_id or "system", event_type.value, message)

    def reject(self, message: str, player_id: Optional[str] = None) -> None:
        """Record a refused action."""
        self.log(EventType.ACTION_REJECTED, message, player_id)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)


def transfer(payer: Player, payee: Player, amount: int) -> None:
    """Move cash between two players in one step. The payer may go negative."""
    payer.money -= amount
    payee.money += amount


def format_money(amount: int) -> str:
    return f"${amount}" if amount >= 0 else f"-${-amount}"
