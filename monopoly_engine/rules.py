"""
Action dispatch.

This module is the public interface for executing moves: a named action and
its payload go in, the resolvers mutate the game, and the lifecycle pass
settles bankruptcies, the winner and any CPU turns that follow.
"""

import logging
from enum import Enum
from typing import Any, Dict, List, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from monopoly_engine.agents import Agent, GreedyCpuAgent
from monopoly_engine.economy import PropertyAction, buy_property, manage_property
from monopoly_engine.exceptions import InvalidPayloadError
from monopoly_engine.game import GameState
from monopoly_engine.lifecycle import end_turn, run_cpu_turns, settle
from monopoly_engine.movement import roll_dice
from monopoly_engine.trade import TradeOffer, propose_trade, respond_to_trade

logger = logging.getLogger(__name__)

PayloadT = TypeVar("PayloadT", bound=BaseModel)


class ActionType(str, Enum):
    """Actions a host can submit."""

    ROLL_DICE = "rollDice"
    BUY_PROPERTY = "buyProperty"
    MANAGE_PROPERTY = "manageProperty"
    PROPOSE_TRADE = "proposeTrade"
    RESPOND_TO_TRADE = "respondToTrade"
    END_TURN = "endTurn"

    @classmethod
    def parse(cls, name: str) -> Optional["ActionType"]:
        """Look up an action by wire name (``rollDice``) or snake_case (``roll_dice``)."""
        for action_type in cls:
            if name in (action_type.value, action_type.name.lower()):
                return action_type
        return None


class _Payload(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class ManagePropertyPayload(_Payload):
    tile_index: int = Field(ge=0)
    action: PropertyAction


class TradeOfferPayload(_Payload):
    from_player_id: str
    to_player_id: str
    properties_offered: List[int] = Field(default_factory=list)
    properties_requested: List[int] = Field(default_factory=list)
    money_offered: int = 0
    money_requested: int = 0

    def to_offer(self) -> TradeOffer:
        return TradeOffer(
            from_player_id=self.from_player_id,
            to_player_id=self.to_player_id,
            properties_offered=list(self.properties_offered),
            properties_requested=list(self.properties_requested),
            money_offered=self.money_offered,
            money_requested=self.money_requested,
        )


class TradeResponsePayload(_Payload):
    accepted: bool


def _parse_payload(model: Type[PayloadT], payload: Optional[Dict[str, Any]]) -> PayloadT:
    try:
        return model.model_validate(payload or {})
    except ValidationError as e:
        fields = ", ".join(".".join(str(part) for part in err["loc"]) or "payload" for err in e.errors())
        raise InvalidPayloadError(f"bad or missing {fields}") from e


def apply_action(game: GameState, action: str, payload: Optional[Dict[str, Any]] = None) -> bool:
    """
    Apply one named action to the game state.

    Args:
        game: Current game state, mutated in place
        action: Action name, e.g. ``rollDice`` or ``manageProperty``
        payload: Action parameters

    Returns:
        True if the action took effect. Unknown actions, malformed payloads and
        rule violations return False; the latter two leave a log entry.
    """
    game.last_card = None

    action_type = ActionType.parse(action)
    if action_type is None:
        logger.info("Ignoring unknown action %r in game %s", action, game.game_id)
        return False

    try:
        return _dispatch(game, action_type, payload)
    except InvalidPayloadError as e:
        game.reject(f"Invalid {action_type.value} request: {e}.", game.current_player)
        return False


def _dispatch(game: GameState, action_type: ActionType, payload: Optional[Dict[str, Any]]) -> bool:
    if action_type is ActionType.ROLL_DICE:
        return roll_dice(game)
    if action_type is ActionType.BUY_PROPERTY:
        return buy_property(game)
    if action_type is ActionType.MANAGE_PROPERTY:
        request = _parse_payload(ManagePropertyPayload, payload)
        return manage_property(game, request.tile_index, request.action)
    if action_type is ActionType.PROPOSE_TRADE:
        offer = _parse_payload(TradeOfferPayload, payload).to_offer()
        return propose_trade(game, offer)
    if action_type is ActionType.RESPOND_TO_TRADE:
        response = _parse_payload(TradeResponsePayload, payload)
        return respond_to_trade(game, response.accepted)
    if action_type is ActionType.END_TURN:
        end_turn(game)
        return True
    raise ValueError(f"Unhandled action: {action_type}")


def play_action(
    game: GameState,
    action: str,
    payload: Optional[Dict[str, Any]] = None,
    agent: Optional[Agent] = None,
) -> GameState:
    """
    Apply an action, settle the result and play any CPU turns that follow.

    Finished games are returned untouched.
    """
    if not game.is_playing:
        return game

    apply_action(game, action, payload)
    settle(game)
    run_cpu_turns(game, agent or GreedyCpuAgent())
    return game
