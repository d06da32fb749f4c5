"""
Turn order, bankruptcy and the end of the game.
"""

import logging
from typing import TYPE_CHECKING

from monopoly_engine.game import NOT_ROLLED, GameStatus
from monopoly_engine.money import EventType

if TYPE_CHECKING:
    from monopoly_engine.agents.base import Agent
    from monopoly_engine.game import GameState

logger = logging.getLogger(__name__)


def end_turn(game: "GameState") -> None:
    """
    Pass the turn to the next solvent player and re-arm the dice.

    If every other player is bankrupt the pointer stays put; the winner check
    deals with that case.
    """
    if game.game_status == GameStatus.ENDED:
        return

    start = game.current_player_index
    next_index = start
    while True:
        next_index = (next_index + 1) % len(game.players)
        if next_index == start or not game.players[next_index].is_bankrupt:
            break

    game.current_player_index = next_index
    game.dice = NOT_ROLLED
    game.log(EventType.TURN_START, f"It's now {game.current_player.name}'s turn.", game.current_player)


def check_bankruptcy(game: "GameState") -> None:
    """
    Process every newly bankrupt player exactly once.

    Their tiles go back to the bank unowned, undeveloped and unmortgaged.
    """
    for player in game.players:
        if not player.is_bankrupt or player.player_id in game.bankrupt_player_ids:
            continue

        game.bankrupt_player_ids.append(player.player_id)
        game.log(EventType.BANKRUPTCY, f"{player.name} has gone bankrupt!", player)
        for index in game.board.owned_by(player.player_id):
            game.board[index].release()
        player.get_out_of_jail_cards = 0
        logger.info("Player %s went bankrupt in game %s", player.player_id, game.game_id)


def check_winner(game: "GameState") -> None:
    """End the game once exactly one of several players is still solvent."""
    if game.game_status != GameStatus.PLAYING:
        return

    active = game.get_active_players()
    if len(active) == 1 and len(game.players) > 1:
        winner = active[0]
        game.winner_id = winner.player_id
        game.game_status = GameStatus.ENDED
        game.log(EventType.GAME_END, f"{winner.name} has won the game!", winner)
        logger.info("Game %s won by %s", game.game_id, winner.player_id)


def settle(game: "GameState") -> None:
    """
    Post-action pass: bankruptcies, winner, and moving the turn off a player
    who just went bankrupt.
    """
    check_bankruptcy(game)
    check_winner(game)
    if game.is_playing and game.current_player.is_bankrupt:
        end_turn(game)


def run_cpu_turns(game: "GameState", agent: "Agent") -> int:
    """
    Play CPU turns until a human is on turn or the game ends.

    Each CPU turn ends by passing the turn, so one turn per seat is enough to
    reach any solvent human. Returns the number of CPU turns played.
    """
    limit = game.config.max_cpu_turns_per_action or len(game.players)
    played = 0
    while played < limit and game.is_playing and game.current_player.is_cpu:
        agent.take_turn(game)
        settle(game)
        played += 1

    if game.is_playing and game.current_player.is_cpu:
        logger.warning("Stopped after %d CPU turns in game %s", played, game.game_id)
    return played
