"""
Host-facing engine: create games, look them up, and execute actions.

Every call works on a fresh copy rebuilt from the store, so an action either
completes and is saved, or raises and leaves the stored snapshot untouched.
"""

from __future__ import annotations

import logging
import random
import threading
import time
from collections import defaultdict
from typing import Any, Dict, Optional, Sequence

from monopoly_engine.agents import Agent, GreedyCpuAgent
from monopoly_engine.config import GameConfig
from monopoly_engine.data import GameStore, InMemoryGameStore
from monopoly_engine.exceptions import GameNotFoundError
from monopoly_engine.game import GameState, create_game
from monopoly_engine.rules import play_action
from monopoly_engine.snapshot import deserialize_snapshot, serialize_snapshot

logger = logging.getLogger(__name__)


class GameEngine:
    """Use-case service for creating and running games."""

    def __init__(
        self,
        store: Optional[GameStore] = None,
        config: Optional[GameConfig] = None,
        agent: Optional[Agent] = None,
    ):
        self.store = store if store is not None else InMemoryGameStore()
        self.config = config or GameConfig()
        self.agent = agent or GreedyCpuAgent()
        # One lock per game id this engine has touched, kept for the engine's lifetime
        self._locks: Dict[str, threading.Lock] = defaultdict(threading.Lock)
        self._locks_guard = threading.Lock()

    def _rng_for(self, game_id: str, step: int) -> random.Random:
        """
        Dice and shuffle source for one transaction.

        Unseeded engines draw from OS entropy. Seeded engines derive a stream
        from the seed, the game and how far the game has progressed, so games
        never share a generator and a replay with the same seed is identical.
        """
        if self.config.seed is None:
            return random.Random()
        return random.Random(f"{self.config.seed}:{game_id}:{step}")

    def _lock_for(self, game_id: str) -> threading.Lock:
        with self._locks_guard:
            return self._locks[game_id]

    def create_game(self, game_id: str, player_names: Sequence[str], cpu_count: int = 0) -> GameState:
        """Start a new game with humans seated before CPUs and persist it."""
        with self._lock_for(game_id):
            game = create_game(game_id, player_names, cpu_count, config=self.config, rng=self._rng_for(game_id, 0))
            self._save(game, previous_update=0)
            logger.info(
                f"Created game {game_id} with {len(player_names)} humans and {cpu_count} CPUs"
            )
            return game

    def get_game_state(self, game_id: str) -> Optional[GameState]:
        """Look a game up without changing it."""
        snapshot = self.store.load(game_id)
        if snapshot is None:
            return None
        rng = self._rng_for(game_id, len(snapshot["game_log"]))
        return deserialize_snapshot(snapshot, config=self.config, rng=rng)

    def execute_action(
        self,
        game_id: str,
        action: str,
        payload: Optional[Dict[str, Any]] = None,
    ) -> GameState:
        """
        Apply one action plus the CPU turns it triggers, then save.

        Raises:
            GameNotFoundError: If no game with this id exists
        """
        with self._lock_for(game_id):
            game = self.get_game_state(game_id)
            if game is None:
                raise GameNotFoundError(game_id)
            if not game.is_playing:
                return game

            previous_update = game.last_update
            play_action(game, action, payload, agent=self.agent)
            self._save(game, previous_update)
            logger.debug(f"Game {game_id}: applied {action}, status {game.game_status.value}")
            return game

    def _save(self, game: GameState, previous_update: int) -> None:
        game.last_update = max(int(time.time() * 1000), previous_update + 1)
        self.store.save(game.game_id, serialize_snapshot(game))
