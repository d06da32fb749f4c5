"""
Dice, movement, jail and what happens when a token lands on a tile.
"""

from typing import TYPE_CHECKING

from monopoly_engine.cards import Card, CardKind
from monopoly_engine.economy import settle_rent
from monopoly_engine.lifecycle import end_turn
from monopoly_engine.money import EventType, format_money
from monopoly_engine.player import Player
from monopoly_engine.spaces import DeckKind, SpecialKind, TileKind

if TYPE_CHECKING:
    from monopoly_engine.game import GameState


def roll_dice(game: "GameState") -> bool:
    """
    Roll two dice for the current player and move them.

    A jailed player first leaves jail with a Get Out of Jail Free card, or by
    paying the fine. A player who can do neither stays put and the turn passes.
    Returns True if the player moved.
    """
    player = game.current_player
    if game.has_rolled:
        game.reject(f"{player.name} has already rolled this turn.", player)
        return False

    if player.in_jail and not _leave_jail(game, player):
        return False

    die1 = game.rng.randint(1, 6)
    die2 = game.rng.randint(1, 6)
    game.dice = (die1, die2)
    game.log(EventType.DICE_ROLL, f"{player.name} rolled a {die1} and a {die2}.", player)

    move_player(game, die1 + die2)
    return True


def _leave_jail(game: "GameState", player: Player) -> bool:
    if player.get_out_of_jail_cards > 0:
        player.get_out_of_jail_cards -= 1
        release_from_jail(player)
        game.log(EventType.JAIL_RELEASE, f"{player.name} used a Get Out of Jail Free card.", player)
        return True

    fine = game.config.jail_fine
    if player.money >= fine:
        player.money -= fine
        release_from_jail(player)
        game.log(EventType.JAIL_RELEASE, f"{player.name} paid {format_money(fine)} to get out of jail.", player)
        return True

    player.jail_turns += 1
    game.log(EventType.JAIL_STUCK, f"{player.name} is stuck in jail!", player)
    end_turn(game)
    return False


def release_from_jail(player: Player) -> None:
    player.in_jail = False
    player.jail_turns = 0


def send_to_jail(game: "GameState", player: Player) -> None:
    """Send a player straight to jail without passing GO."""
    player.position = game.config.jail_position
    player.in_jail = True
    player.jail_turns = 0
    game.log(EventType.GO_TO_JAIL, f"{player.name} went to jail!", player)


def move_player(game: "GameState", amount: int, absolute: bool = False) -> None:
    """
    Move the current player and resolve the tile they land on.

    Relative moves wrap around the board and pay the GO salary when a forward
    move passes GO. Absolute moves teleport without paying it.
    """
    player = game.current_player
    board_size = game.config.board_size

    if absolute:
        new_position = amount % board_size
    else:
        new_position = (player.position + amount) % board_size
        if amount > 0 and new_position < player.position:
            player.money += game.config.go_salary
            game.log(
                EventType.PASS_GO,
                f"{player.name} passed GO and collected {format_money(game.config.go_salary)}.",
                player,
            )

    player.position = new_position
    game.log(EventType.MOVE, f"{player.name} moved to {game.board[new_position].name}.", player)
    land_on_tile(game)


def land_on_tile(game: "GameState") -> None:
    """Apply the effect of the tile under the current player."""
    player = game.current_player
    tile = game.board[player.position]

    if tile.kind in (TileKind.PROPERTY, TileKind.STATION, TileKind.UTILITY):
        if tile.is_owned() and tile.owner_id != player.player_id and not tile.mortgaged:
            settle_rent(game, player, tile)
    elif tile.kind is TileKind.TAX:
        player.money -= tile.amount
        game.log(EventType.TAX_PAYMENT, f"{player.name} paid {format_money(tile.amount)} in {tile.name}.", player)
    elif tile.kind is TileKind.SPECIAL:
        if tile.special is SpecialKind.GO_TO_JAIL:
            send_to_jail(game, player)
    elif tile.kind is TileKind.CARD:
        draw_card(game, tile.deck)
    else:
        raise ValueError(f"Unhandled tile kind: {tile.kind}")


def draw_card(game: "GameState", deck_kind: DeckKind) -> None:
    """Draw the top card of a deck, cycle it to the bottom and apply it."""
    card = game.get_deck(deck_kind).draw()
    if card is None:
        return

    player = game.current_player
    game.last_card = card
    game.log(EventType.CARD_DRAW, f"{player.name} drew a {deck_kind.title} card: {card.text}", player)
    apply_card(game, card)


def apply_card(game: "GameState", card: Card) -> None:
    """Apply a card's effect to the current player."""
    player = game.current_player

    if card.kind is CardKind.MONEY:
        player.money += card.amount
        message = f"Collected {format_money(card.amount)}" if card.amount > 0 else f"Paid {format_money(-card.amount)}"
        game.log(EventType.CARD_EFFECT, message, player)
    elif card.kind is CardKind.MOVE:
        move_player(game, card.amount)
    elif card.kind is CardKind.GOTO:
        move_player(game, card.position, absolute=True)
    elif card.kind is CardKind.JAIL:
        send_to_jail(game, player)
    elif card.kind is CardKind.GET_OUT_OF_JAIL:
        player.get_out_of_jail_cards += 1
        game.log(EventType.CARD_EFFECT, f"{player.name} keeps a Get Out of Jail Free card.", player)
    else:
        raise ValueError(f"Unhandled card kind: {card.kind}")
