"""Greedy agent that buys when it is comfortably rich and builds evenly."""

from monopoly_engine.agents.base import Agent
from monopoly_engine.economy import build_house, buy_property, can_build_house
from monopoly_engine.game import GameState
from monopoly_engine.lifecycle import end_turn
from monopoly_engine.money import EventType
from monopoly_engine.movement import roll_dice
from monopoly_engine.spaces import PropertyTile


class GreedyCpuAgent(Agent):
    """
    Simple AI for CPU seats.

    Roll, buy the tile it lands on if it keeps a cash reserve afterwards, put
    one house on each street of every complete color group it can afford,
    then end the turn. CPUs never sell, mortgage or trade.
    """

    name = "greedy"

    def take_turn(self, game: GameState) -> None:
        player = game.current_player
        game.log(EventType.CPU_THINKING, f"{player.name} is thinking...", player)

        roll_dice(game)
        if game.current_player is not player:
            # Stuck in jail, the turn has already passed
            return

        if not player.in_jail:
            self._maybe_buy(game)
        self._build_evenly(game)
        end_turn(game)

    def _maybe_buy(self, game: GameState) -> None:
        player = game.current_player
        tile = game.board.get_ownable(player.position)
        if tile is None or tile.is_owned():
            return
        if player.money > tile.price + game.config.cpu_purchase_reserve:
            buy_property(game)

    def _build_evenly(self, game: GameState) -> None:
        player = game.current_player
        reserve = game.config.cpu_build_reserve
        for index, tile in enumerate(game.board):
            if not isinstance(tile, PropertyTile) or tile.owner_id != player.player_id:
                continue
            if player.money <= tile.house_cost + reserve:
                continue
            if can_build_house(game, player, index):
                build_house(game, index)
