from monopoly_engine.data.models import Base, GameSnapshot
from monopoly_engine.data.repository import GameStore, InMemoryGameStore, SqlGameStore
from monopoly_engine.data.session import create_db_engine, create_session_factory, session_scope

__all__ = [
    "Base",
    "GameSnapshot",
    "GameStore",
    "InMemoryGameStore",
    "SqlGameStore",
    "create_db_engine",
    "create_session_factory",
    "session_scope",
]
