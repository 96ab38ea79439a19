"""Main FastAPI application for the Riftstats backend."""

from contextlib import asynccontextmanager
from typing import Any, Dict

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from riftstats import __version__
from riftstats.core import db_manager, get_global_settings
from riftstats.core.logging import get_logger, setup_logging
from riftstats.features.matches.router import router as matches_router
from riftstats.features.players.router import router as players_router
from riftstats.features.stats.router import router as stats_router

settings = get_global_settings()
setup_logging(settings.log_level, json_logs=not settings.debug)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Starting up Riftstats backend application")
    if not settings.has_riot_api_key:
        logger.warning(
            "⚠️  RIOT_API_KEY not configured! Set it in .env file.",
            hint="Get your key from https://developer.riotgames.com",
        )
    await db_manager.create_tables()
    yield
    logger.info("Shutting down Riftstats backend application")
    await db_manager.close()


# OpenAPI tags metadata
tags_metadata = [
    {
        "name": "players",
        "description": "Look up players by Riot ID and store their profile.",
    },
    {
        "name": "matches",
        "description": "Ingest match history from Riot and read stored matches.",
    },
    {
        "name": "stats",
        "description": "Player statistics aggregated from stored matches.",
    },
]

app = FastAPI(
    title="Riftstats API",
    description="League of Legends match history and player statistics",
    version=__version__,
    openapi_tags=tags_metadata,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(players_router)
app.include_router(matches_router)
app.include_router(stats_router)


@app.get("/api/status")
async def status() -> Dict[str, Any]:
    """Report that the service is up and list the main endpoints."""
    return {
        "message": "Riftstats API server is running!",
        "version": __version__,
        "endpoints": [
            "/api/search/{game_name}/{tag_line}",
            "/api/players/{puuid}/fetch-matches",
            "/players/{puuid}/matches",
            "/players/{puuid}/champions/{champion}",
            "/matches/{match_id}",
            "/players/{puuid}/stats",
            "/players/{puuid}/update-stats",
        ],
    }
