from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from monopoly_engine import GameEngine, GameNotFoundError
from monopoly_engine.data import InMemoryGameStore, SqlGameStore, create_db_engine, create_session_factory
from monopoly_engine.settings import EngineSettings, StorageBackend, get_settings
from monopoly_engine.snapshot import serialize_snapshot

from .schemas import ActionRequest, ApiResponse, CreateGameRequest

logger = logging.getLogger(__name__)

MIN_PLAYERS = 2


def build_engine(settings: EngineSettings) -> GameEngine:
    """Create the engine with the store selected in settings."""
    if settings.storage == StorageBackend.SQL:
        db_engine = create_db_engine(settings.database_url, echo=settings.db_echo)
        store = SqlGameStore(create_session_factory(db_engine))
    else:
        store = InMemoryGameStore()
    return GameEngine(store=store, config=settings.game_config())


def _error(status_code: int, message: str) -> JSONResponse:
    body = ApiResponse(success=False, error=message)
    return JSONResponse(status_code=status_code, content=body.model_dump())


def create_app(engine: Optional[GameEngine] = None) -> FastAPI:
    """Build the HTTP adapter around an engine (one is built from settings if omitted)."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        settings = get_settings()
        logging.basicConfig(level=settings.log_level)
        if getattr(app.state, "engine", None) is None:
            app.state.engine = build_engine(settings)
        logger.info("Monopoly engine ready (storage=%s)", settings.storage.value)
        yield
        logger.info("Shutting down Monopoly engine")

    app = FastAPI(title="Monopoly Online Server", version="0.3.0", lifespan=lifespan)
    app.state.engine = engine

    def get_engine(request: Request) -> GameEngine:
        if request.app.state.engine is None:
            request.app.state.engine = build_engine(get_settings())
        return request.app.state.engine

    @app.exception_handler(RequestValidationError)
    async def invalid_body(request: Request, exc: RequestValidationError):
        return _error(400, "Invalid request body")

    @app.post("/api/game", response_model=ApiResponse)
    def create_game(req: CreateGameRequest, engine: GameEngine = Depends(get_engine)):
        if len(req.player_names) + req.cpu_count < MIN_PLAYERS:
            return _error(400, "Invalid request body")
        game = engine.create_game(req.game_id, req.player_names, req.cpu_count)
        return ApiResponse(success=True, data=serialize_snapshot(game))

    @app.get("/api/game/{game_id}", response_model=ApiResponse)
    def get_game(game_id: str, engine: GameEngine = Depends(get_engine)):
        game = engine.get_game_state(game_id)
        if game is None:
            return _error(404, "Game not found")
        return ApiResponse(success=True, data=serialize_snapshot(game))

    @app.post("/api/game/{game_id}/action", response_model=ApiResponse)
    def execute_action(game_id: str, req: ActionRequest, engine: GameEngine = Depends(get_engine)):
        try:
            game = engine.execute_action(game_id, req.action, req.payload)
        except GameNotFoundError as e:
            return _error(400, str(e))
        return ApiResponse(success=True, data=serialize_snapshot(game))

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("server.app:app", host="0.0.0.0", port=8000)
