"""
Trading system.

A game holds at most one pending trade. Proposing replaces whatever was
pending; the recipient's answer consumes it.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List

from monopoly_engine.money import EventType, format_money

if TYPE_CHECKING:
    from monopoly_engine.game import GameState


@dataclass
class TradeOffer:
    """
    Assets one player offers another in exchange for assets in return.

    Properties are board indices.
    """

    from_player_id: str
    to_player_id: str
    properties_offered: List[int] = field(default_factory=list)
    properties_requested: List[int] = field(default_factory=list)
    money_offered: int = 0
    money_requested: int = 0

    def __repr__(self) -> str:
        return (
            f"TradeOffer({self.from_player_id} -> {self.to_player_id}: "
            f"{self.properties_offered} + ${self.money_offered} for "
            f"{self.properties_requested} + ${self.money_requested})"
        )


def validate_trade_offer(game: "GameState", offer: TradeOffer) -> tuple[bool, str]:
    """Check the offer is between two distinct solvent players and the proposer can pay."""
    proposer = game.get_player(offer.from_player_id)
    recipient = game.get_player(offer.to_player_id)

    if proposer is None:
        return False, f"Unknown player {offer.from_player_id}"
    if recipient is None:
        return False, f"Unknown player {offer.to_player_id}"
    if proposer is recipient:
        return False, f"{proposer.name} cannot trade with themselves"
    if proposer.is_bankrupt or recipient.is_bankrupt:
        return False, "Bankrupt players cannot trade"
    if offer.money_offered < 0 or offer.money_requested < 0:
        return False, "Trade amounts cannot be negative"
    if proposer.money < offer.money_offered:
        return False, f"Insufficient cash: {proposer.name} has {format_money(proposer.money)}"
    return True, ""


def propose_trade(game: "GameState", offer: TradeOffer) -> bool:
    """Store the offer as the pending trade."""
    valid, error = validate_trade_offer(game, offer)
    if not valid:
        game.reject(f"Trade rejected: {error}.")
        return False

    proposer = game.get_player(offer.from_player_id)
    recipient = game.get_player(offer.to_player_id)

    if game.active_trade is not None:
        game.log(EventType.TRADE_REJECTED, "The previous trade offer was withdrawn.")
    game.active_trade = offer
    game.log(
        EventType.TRADE_PROPOSED,
        f"{proposer.name} proposed a trade to {recipient.name}.",
        proposer,
    )
    return True


def respond_to_trade(game: "GameState", accepted: bool) -> bool:
    """
    Accept or reject the pending trade.

    On acceptance, cash moves both ways and each listed tile changes hands only
    if it still belongs to the expected side. Returns True if the trade executed.
    """
    offer = game.active_trade
    if offer is None:
        game.reject("There is no trade to respond to.")
        return False

    game.active_trade = None
    proposer = game.get_player(offer.from_player_id)
    recipient = game.get_player(offer.to_player_id)

    if not accepted or proposer is None or recipient is None:
        game.log(EventType.TRADE_REJECTED, "Trade was rejected.", recipient)
        return False

    proposer.money += offer.money_requested - offer.money_offered
    recipient.money += offer.money_offered - offer.money_requested

    _move_tiles(game, offer.properties_offered, proposer.player_id, recipient.player_id)
    _move_tiles(game, offer.properties_requested, recipient.player_id, proposer.player_id)

    game.log(
        EventType.TRADE_ACCEPTED,
        f"Trade between {proposer.name} and {recipient.name} was accepted.",
        recipient,
    )
    return True


def _move_tiles(game: "GameState", indices: List[int], from_id: str, to_id: str) -> None:
    for index in indices:
        tile = game.board.get_ownable(index)
        if tile is None or tile.owner_id != from_id:
            continue
        tile.owner_id = to_id
