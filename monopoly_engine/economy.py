"""
Rent, purchases, building and mortgages.

Every function here acts for the current player. Illegal or unaffordable
requests leave the state unchanged apart from an explanatory log entry.
"""

import math
from enum import Enum
from typing import TYPE_CHECKING, Optional

from monopoly_engine.money import EventType, format_money, transfer
from monopoly_engine.player import Player
from monopoly_engine.spaces import OwnableTile, PropertyTile, StationTile, TileKind, UtilityTile

if TYPE_CHECKING:
    from monopoly_engine.game import GameState


class PropertyAction(str, Enum):
    """What a player can do to a tile they own."""

    BUILD = "build"
    SELL = "sell"
    MORTGAGE = "mortgage"
    UNMORTGAGE = "unmortgage"


def calculate_rent(game: "GameState", tile: OwnableTile) -> int:
    """
    Calculate the rent owed for landing on a tile.

    Streets charge by development level, stations by how many stations the
    owner holds, utilities by the last dice total. Unowned and mortgaged tiles
    charge nothing.
    """
    if not tile.is_owned() or tile.mortgaged:
        return 0

    if tile.kind is TileKind.PROPERTY:
        return tile.get_rent()
    if tile.kind is TileKind.STATION:
        stations = game.board.count_owned(tile.owner_id, StationTile)
        return tile.get_rent(stations)
    if tile.kind is TileKind.UTILITY:
        utilities = game.board.count_owned(tile.owner_id, UtilityTile)
        return tile.get_rent(sum(game.dice), utilities)
    raise ValueError(f"{tile!r} does not charge rent")


def settle_rent(game: "GameState", player: Player, tile: OwnableTile) -> int:
    """
    Charge the landing player rent for ``tile``.

    Returns the amount paid; nothing is paid on your own or a mortgaged tile.
    """
    owner = game.get_player(tile.owner_id)
    if owner is None or owner is player or tile.mortgaged:
        return 0

    rent = calculate_rent(game, tile)
    transfer(player, owner, rent)
    game.log(EventType.RENT_PAYMENT, f"{player.name} paid {format_money(rent)} rent to {owner.name}.", player)
    return rent


def buy_property(game: "GameState") -> bool:
    """
    Current player buys the tile they are standing on.

    Returns True if successful, False otherwise.
    """
    player = game.current_player
    tile = game.board.get_ownable(player.position)

    if tile is None:
        game.reject(f"{game.board[player.position].name} cannot be bought.", player)
        return False
    if tile.is_owned():
        game.reject(f"{tile.name} is already owned.", player)
        return False
    if player.money < tile.price:
        game.reject(f"{player.name} cannot afford {tile.name} ({format_money(tile.price)}).", player)
        return False

    player.money -= tile.price
    tile.owner_id = player.player_id
    game.log(EventType.PURCHASE, f"{player.name} bought {tile.name} for {format_money(tile.price)}.", player)
    return True


def _build_refusal(game: "GameState", player: Player, tile: PropertyTile) -> Optional[str]:
    """Reason a house cannot go on ``tile`` right now, or None if it can."""
    if tile.owner_id != player.player_id:
        return f"{player.name} does not own {tile.name}."
    if not game.board.has_monopoly(player.player_id, tile.color_group):
        return f"Cannot build on {tile.name} without owning the whole color group."
    if tile.mortgaged:
        return f"Cannot build on {tile.name} while it is mortgaged."
    if tile.has_hotel():
        return f"{tile.name} already has a hotel."
    if player.money < tile.house_cost:
        return f"{player.name} cannot afford a house on {tile.name}."
    lowest, _ = game.board.house_range(tile.color_group)
    if tile.houses != lowest:
        return f"Cannot build on {tile.name}. Must build evenly."
    return None


def can_build_house(game: "GameState", player: Player, index: int) -> bool:
    tile = game.board.get_property(index)
    return tile is not None and _build_refusal(game, player, tile) is None


def build_house(game: "GameState", index: int) -> bool:
    """
    Build one house (the fifth is the hotel) on a street.

    Enforces the even-building rule: the street must currently have the fewest
    houses in its color group.
    """
    player = game.current_player
    tile = game.board.get_property(index)
    if tile is None:
        game.reject("Houses can only be built on streets.", player)
        return False

    refusal = _build_refusal(game, player, tile)
    if refusal:
        game.reject(refusal, player)
        return False

    player.money -= tile.house_cost
    tile.houses += 1
    game.log(EventType.BUILD_HOUSE, f"{player.name} built a house on {tile.name}.", player)
    return True


def sell_house(game: "GameState", index: int) -> bool:
    """
    Sell one house back to the bank for half its cost.

    The street must currently have the most houses in its color group.
    """
    player = game.current_player
    tile = game.board.get_property(index)
    if tile is None or tile.owner_id != player.player_id:
        game.reject(f"{player.name} has no street to sell houses from there.", player)
        return False
    if not game.board.has_monopoly(player.player_id, tile.color_group):
        game.reject(f"Cannot sell from {tile.name} without owning the whole color group.", player)
        return False
    if tile.mortgaged or tile.houses == 0:
        game.reject(f"{tile.name} has no houses to sell.", player)
        return False

    _, highest = game.board.house_range(tile.color_group)
    if tile.houses != highest:
        game.reject(f"Cannot sell from {tile.name}. Must sell evenly.", player)
        return False

    tile.houses -= 1
    player.money += tile.house_cost // 2
    game.log(EventType.SELL_BUILDING, f"{player.name} sold a house on {tile.name}.", player)
    return True


def unmortgage_cost(game: "GameState", tile: OwnableTile) -> int:
    """Mortgage value plus interest, rounded up to whole dollars."""
    return math.ceil(round(tile.mortgage_value * (1 + game.config.mortgage_interest_rate), 6))


def mortgage_property(game: "GameState", index: int) -> bool:
    """
    Mortgage a tile for half its price.

    Cannot mortgage a street that has buildings.
    """
    player = game.current_player
    tile = game.board.get_ownable(index)
    if tile is None or tile.owner_id != player.player_id:
        game.reject(f"{player.name} does not own that tile.", player)
        return False
    if tile.mortgaged:
        game.reject(f"{tile.name} is already mortgaged.", player)
        return False
    if isinstance(tile, PropertyTile) and tile.houses > 0:
        game.reject(f"Cannot mortgage {tile.name} while it has houses.", player)
        return False

    tile.mortgaged = True
    player.money += tile.mortgage_value
    game.log(EventType.MORTGAGE, f"{player.name} mortgaged {tile.name}.", player)
    return True


def unmortgage_property(game: "GameState", index: int) -> bool:
    """Lift a mortgage by repaying it with interest."""
    player = game.current_player
    tile = game.board.get_ownable(index)
    if tile is None or tile.owner_id != player.player_id:
        game.reject(f"{player.name} does not own that tile.", player)
        return False
    if not tile.mortgaged:
        game.reject(f"{tile.name} is not mortgaged.", player)
        return False

    cost = unmortgage_cost(game, tile)
    if player.money < cost:
        game.reject(f"{player.name} cannot afford to unmortgage {tile.name} ({format_money(cost)}).", player)
        return False

    tile.mortgaged = False
    player.money -= cost
    game.log(EventType.UNMORTGAGE, f"{player.name} unmortgaged {tile.name}.", player)
    return True


def manage_property(game: "GameState", index: int, action: PropertyAction) -> bool:
    """Dispatch a property-management request."""
    if action is PropertyAction.BUILD:
        return build_house(game, index)
    if action is PropertyAction.SELL:
        return sell_house(game, index)
    if action is PropertyAction.MORTGAGE:
        return mortgage_property(game, index)
    if action is PropertyAction.UNMORTGAGE:
        return unmortgage_property(game, index)
    raise ValueError(f"Unknown property action: {action}")
