"""
Main game aggregate and construction.
"""

import random
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from monopoly_engine.board import Board
from monopoly_engine.cards import Card, Deck, create_chance_deck, create_community_chest_deck
from monopoly_engine.config import GameConfig
from monopoly_engine.money import EventType, GameLog
from monopoly_engine.player import Player
from monopoly_engine.spaces import DeckKind
from monopoly_engine.trade import TradeOffer

NOT_ROLLED: Tuple[int, int] = (0, 0)


class GameStatus(str, Enum):
    """Lifecycle of a game."""

    LOBBY = "lobby"
    PLAYING = "playing"
    ENDED = "ended"


class GameState:
    """
    Represents the complete state of one Monopoly game.

    A GameState has a single writer: the engine loads it, hands it through the
    resolvers for one action, then saves it. Resolvers never keep a reference
    to it between calls.
    """

    def __init__(
        self,
        game_id: str,
        players: List[Player],
        config: Optional[GameConfig] = None,
        board: Optional[Board] = None,
        chance_deck: Optional[Deck] = None,
        community_chest_deck: Optional[Deck] = None,
        rng: Optional[random.Random] = None,
    ):
        self.game_id = game_id
        self.config = config or GameConfig()
        self.rng = rng or random.Random(self.config.seed)

        self.players = players
        self.board = board if board is not None else Board()
        self.chance_deck = chance_deck if chance_deck is not None else create_chance_deck(self.rng)
        self.community_chest_deck = (
            community_chest_deck if community_chest_deck is not None else create_community_chest_deck(self.rng)
        )

        self.current_player_index = 0
        self.dice: Tuple[int, int] = NOT_ROLLED
        self.game_status = GameStatus.LOBBY
        self.active_trade: Optional[TradeOffer] = None
        self.game_log = GameLog()
        self.last_card: Optional[Card] = None
        self.winner_id: Optional[str] = None
        self.bankrupt_player_ids: List[str] = []
        self.last_update = 0

    @property
    def current_player(self) -> Player:
        """Get the player whose turn it is."""
        return self.players[self.current_player_index]

    @property
    def winner(self) -> Optional[Player]:
        if self.winner_id is None:
            return None
        return self.get_player(self.winner_id)

    @property
    def is_playing(self) -> bool:
        return self.game_status == GameStatus.PLAYING

    @property
    def has_rolled(self) -> bool:
        return self.dice != NOT_ROLLED

    def get_player(self, player_id: Optional[str]) -> Optional[Player]:
        for player in self.players:
            if player.player_id == player_id:
                return player
        return None

    def get_active_players(self) -> List[Player]:
        """Get all players with non-negative money."""
        return [p for p in self.players if not p.is_bankrupt]

    def get_deck(self, kind: DeckKind) -> Deck:
        return self.chance_deck if kind is DeckKind.CHANCE else self.community_chest_deck

    def log(self, event_type: EventType, message: str, player: Optional[Player] = None) -> None:
        self.game_log.log(event_type, message, player.player_id if player else None)

    def reject(self, message: str, player: Optional[Player] = None) -> None:
        self.game_log.reject(message, player.player_id if player else None)

    def __repr__(self) -> str:
        return (
            f"GameState(id={self.game_id}, status={self.game_status.value}, "
            f"players={len(self.players)}, current={self.current_player_index})"
        )


def create_game(
    game_id: str,
    player_names: Sequence[str],
    cpu_count: int = 0,
    config: Optional[GameConfig] = None,
    rng: Optional[random.Random] = None,
) -> GameState:
    """
    Create a new game ready to play.

    Humans are seated first in listing order, then CPUs. Colors follow seat
    order. The caller is responsible for rejecting games with fewer than two
    players.
    """
    config = config or GameConfig()
    seats = [
        (f"{game_id}-{i}", name or f"Player {i + 1}", False) for i, name in enumerate(player_names)
    ]
    seats += [(f"{game_id}-cpu-{i}", f"CPU {i + 1}", True) for i in range(cpu_count)]

    players = [
        Player(
            player_id=player_id,
            name=name,
            money=config.starting_cash,
            color=config.color_for(index),
            is_cpu=is_cpu,
        )
        for index, (player_id, name, is_cpu) in enumerate(seats)
    ]

    game = GameState(game_id, players, config=config, rng=rng)
    game.game_status = GameStatus.PLAYING
    game.log(EventType.GAME_START, f"Game started with {len(players)} players!")
    return game
