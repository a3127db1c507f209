"""FastAPI application for the Golf Tournament scoring API."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import config
from database.connection import db
from database.db_manager import DatabaseManager

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize DB pool and schema on startup, close on shutdown."""
    await db.initialize(dsn=config.DATABASE_URL)
    app.state.db_manager = DatabaseManager(db.pool)
    await app.state.db_manager.initialize_schema()
    yield
    await db.close()


def create_app() -> FastAPI:
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(
        title="Golf Tournament Scoring API",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from api.routers import leaderboards, players, rounds, scores
    app.include_router(scores.router, prefix="/api", tags=["scores"])
    app.include_router(leaderboards.router, prefix="/api", tags=["leaderboards"])
    app.include_router(players.router, prefix="/api/players", tags=["players"])
    app.include_router(rounds.router, prefix="/api/rounds", tags=["rounds"])

    @app.get("/api/health")
    async def health():
        healthy = await db.health_check()
        return {"status": "ok" if healthy else "degraded", "database": healthy}

    return app


app = create_app()
