"""
Snapshot serialization of GameState.

A snapshot is a plain JSON-compatible dict holding the whole game: players,
every tile with its ownership, both decks in order, the pending trade and the
log. Hosts persist it as an opaque blob and rebuild the state from it for the
next action.
"""

from __future__ import annotations

import random
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from monopoly_engine.board import Board
from monopoly_engine.cards import Card, CardKind, Deck
from monopoly_engine.config import GameConfig
from monopoly_engine.game import GameState, GameStatus
from monopoly_engine.money import GameLog
from monopoly_engine.player import Player
from monopoly_engine.spaces import (
    CardTile,
    DeckKind,
    PropertyTile,
    SpecialKind,
    SpecialTile,
    StationTile,
    TaxTile,
    Tile,
    TileKind,
    UtilityTile,
)
from monopoly_engine.trade import TradeOffer


def serialize_tile(tile: Tile) -> Dict[str, Any]:
    entry: Dict[str, Any] = {"type": tile.kind.value, "name": tile.name}
    if tile.kind is TileKind.PROPERTY:
        entry.update(
            price=tile.price,
            rent=list(tile.rent),
            house_cost=tile.house_cost,
            color_group=tile.color_group,
            owner_id=tile.owner_id,
            houses=tile.houses,
            mortgaged=tile.mortgaged,
        )
    elif tile.kind is TileKind.STATION:
        entry.update(price=tile.price, rent=list(tile.rent), owner_id=tile.owner_id, mortgaged=tile.mortgaged)
    elif tile.kind is TileKind.UTILITY:
        entry.update(price=tile.price, owner_id=tile.owner_id, mortgaged=tile.mortgaged)
    elif tile.kind is TileKind.TAX:
        entry["amount"] = tile.amount
    elif tile.kind is TileKind.SPECIAL:
        entry["special"] = tile.special.value
    elif tile.kind is TileKind.CARD:
        entry["deck"] = tile.deck.value
    return entry


def deserialize_tile(data: Dict[str, Any]) -> Tile:
    kind = TileKind(data["type"])
    name = data["name"]
    if kind is TileKind.PROPERTY:
        return PropertyTile(
            name,
            price=data["price"],
            rent=list(data["rent"]),
            house_cost=data["house_cost"],
            color_group=data["color_group"],
            owner_id=data.get("owner_id"),
            houses=data.get("houses", 0),
            mortgaged=data.get("mortgaged", False),
        )
    if kind is TileKind.STATION:
        return StationTile(
            name,
            price=data["price"],
            rent=list(data["rent"]),
            owner_id=data.get("owner_id"),
            mortgaged=data.get("mortgaged", False),
        )
    if kind is TileKind.UTILITY:
        return UtilityTile(
            name, price=data["price"], owner_id=data.get("owner_id"), mortgaged=data.get("mortgaged", False)
        )
    if kind is TileKind.TAX:
        return TaxTile(name, amount=data["amount"])
    if kind is TileKind.SPECIAL:
        return SpecialTile(name, special=SpecialKind(data["special"]))
    return CardTile(name, deck=DeckKind(data["deck"]))


def serialize_card(card: Card) -> Dict[str, Any]:
    return {
        "text": card.text,
        "kind": card.kind.value,
        "amount": card.amount,
        "position": card.position,
        "deck": card.deck.value if card.deck else None,
    }


def deserialize_card(data: Dict[str, Any]) -> Card:
    return Card(
        text=data["text"],
        kind=CardKind(data["kind"]),
        amount=data.get("amount", 0),
        position=data.get("position"),
        deck=DeckKind(data["deck"]) if data.get("deck") else None,
    )


def serialize_snapshot(game: GameState) -> Dict[str, Any]:
    """Serialize a GameState into a stable JSON dict."""
    return {
        "game_id": game.game_id,
        "players": [asdict(player) for player in game.players],
        "board": [serialize_tile(tile) for tile in game.board],
        "current_player_index": game.current_player_index,
        "dice": list(game.dice),
        "game_status": game.game_status.value,
        "chance_deck": [serialize_card(card) for card in game.chance_deck.cards],
        "community_chest_deck": [serialize_card(card) for card in game.community_chest_deck.cards],
        "active_trade": asdict(game.active_trade) if game.active_trade else None,
        "game_log": list(game.game_log.entries),
        "last_card": serialize_card(game.last_card) if game.last_card else None,
        "winner": game.winner_id,
        "bankrupt_player_ids": list(game.bankrupt_player_ids),
        "last_update": game.last_update,
    }


def deserialize_snapshot(
    data: Dict[str, Any],
    config: Optional[GameConfig] = None,
    rng: Optional[random.Random] = None,
) -> GameState:
    """Rebuild a GameState from a snapshot produced by serialize_snapshot."""
    players: List[Player] = [Player(**entry) for entry in data["players"]]
    board = Board([deserialize_tile(entry) for entry in data["board"]])
    chance = Deck(DeckKind.CHANCE, (deserialize_card(c) for c in data["chance_deck"]))
    chest = Deck(DeckKind.COMMUNITY_CHEST, (deserialize_card(c) for c in data["community_chest_deck"]))

    game = GameState(
        data["game_id"],
        players,
        config=config,
        board=board,
        chance_deck=chance,
        community_chest_deck=chest,
        rng=rng,
    )
    game.current_player_index = data["current_player_index"]
    die1, die2 = data["dice"]
    game.dice = (die1, die2)
    game.game_status = GameStatus(data["game_status"])
    game.active_trade = TradeOffer(**data["active_trade"]) if data.get("active_trade") else None
    game.game_log = GameLog(data["game_log"])
    game.last_card = deserialize_card(data["last_card"]) if data.get("last_card") else None
    game.winner_id = data.get("winner")
    game.bankrupt_player_ids = list(data.get("bankrupt_player_ids", []))
    game.last_update = data.get("last_update", 0)
    return game
