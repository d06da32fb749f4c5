"""
Snapshot stores.

The engine only needs two operations: load the current snapshot of a game
and save a new one. Stores hand out copies, so a failed action never leaks a
half-applied state into storage.
"""

from __future__ import annotations

import copy
import logging
import threading
from typing import Any, Dict, Optional, Protocol

from sqlalchemy.orm import Session, sessionmaker

from monopoly_engine.data.models import GameSnapshot
from monopoly_engine.data.session import session_scope

logger = logging.getLogger(__name__)

Snapshot = Dict[str, Any]


class GameStore(Protocol):
    """Load/save boundary between the engine and durable storage."""

    def load(self, game_id: str) -> Optional[Snapshot]: ...

    def save(self, game_id: str, snapshot: Snapshot) -> None: ...


class InMemoryGameStore:
    """Process-local store, used in tests and single-process hosts."""

    def __init__(self):
        self._games: Dict[str, Snapshot] = {}
        self._lock = threading.Lock()

    def load(self, game_id: str) -> Optional[Snapshot]:
        with self._lock:
            snapshot = self._games.get(game_id)
            return copy.deepcopy(snapshot) if snapshot is not None else None

    def save(self, game_id: str, snapshot: Snapshot) -> None:
        with self._lock:
            self._games[game_id] = copy.deepcopy(snapshot)

    def __contains__(self, game_id: str) -> bool:
        return game_id in self._games

    def __len__(self) -> int:
        return len(self._games)


class SqlGameStore:
    """Store backed by the ``game_snapshots`` table."""

    def __init__(self, session_factory: sessionmaker[Session]):
        self.session_factory = session_factory

    def load(self, game_id: str) -> Optional[Snapshot]:
        with session_scope(self.session_factory) as session:
            row = session.get(GameSnapshot, game_id)
            return copy.deepcopy(row.state) if row is not None else None

    def save(self, game_id: str, snapshot: Snapshot) -> None:
        with session_scope(self.session_factory) as session:
            row = session.get(GameSnapshot, game_id)
            if row is None:
                row = GameSnapshot(game_id=game_id)
                session.add(row)
                logger.info(f"Created game snapshot: {game_id}")
            row.state = copy.deepcopy(snapshot)
            row.status = snapshot["game_status"]
            row.last_update = snapshot["last_update"]
