"""
Fantasy Soccer API - Main Application

FastAPI application serving players, fantasy scores and team validation.
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from fantasy_soccer import __version__
from fantasy_soccer.api.routes import admin, players, scoring, teams, viz
from fantasy_soccer.clients.players import PlayerSource
from fantasy_soccer.config import Settings, get_settings
from fantasy_soccer.services.cache import ResultCache

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    """Configure root logging from settings."""
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown."""
    settings: Settings = app.state.settings
    logger.info("Starting Fantasy Soccer API v%s", __version__)
    logger.info("Debug mode: %s, cache TTL: %ss", settings.debug, settings.cache_ttl)

    yield

    logger.info("Shutting down Fantasy Soccer API")
    app.state.cache.clear()


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render HTTP errors in the response envelope."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "error": str(exc.detail)},
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render malformed requests as 400 errors in the response envelope."""
    errors = exc.errors()
    first = errors[0] if errors else {}
    location = ".".join(str(part) for part in first.get("loc", ()))
    message = first.get("msg", "Invalid request")
    return JSONResponse(
        status_code=400,
        content={"success": False, "error": f"{location}: {message}" if location else message},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log unexpected errors and hide their details from the client."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"success": False, "error": "Internal Server Error"},
    )


def create_app(
    settings: Settings | None = None,
    player_source: PlayerSource | None = None,
) -> FastAPI:
    """Application factory to create the FastAPI app."""
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title=settings.api_title,
        description=settings.api_description,
        version=settings.api_version,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.state.settings = settings
    app.state.player_source = player_source or PlayerSource()
    app.state.cache = ResultCache(ttl=settings.cache_ttl)

    # Route-level settings lookups see the same settings as the app
    app.dependency_overrides[get_settings] = lambda: settings

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # Health check endpoint
    @app.get("/health", tags=["Health"])
    async def health_check():
        """Health check endpoint."""
        return {"success": True, "status": "OK", "version": __version__}

    # Root endpoint
    @app.get("/", tags=["Root"])
    async def root():
        """Root endpoint with API info."""
        return {
            "name": settings.api_title,
            "version": __version__,
            "docs": "/docs",
            "health": "/health",
            "endpoints": {
                "players": "/players",
                "top_players": "/topPlayers",
                "validate_team": "/validate-team",
                "calculate_team_score": "/calculate-team-score",
                "custom_scoring": "/custom-scoring",
                "clear_cache": "/clear-cache",
                "viz": "/viz",
            },
        }

    # Register API routes
    app.include_router(players.router, tags=["Players"])
    app.include_router(teams.router, tags=["Teams"])
    app.include_router(scoring.router, tags=["Scoring"])
    app.include_router(admin.router, tags=["Admin"])
    app.include_router(viz.router, prefix="/viz", tags=["Visualization"])

    return app


# Create the application instance
app = create_app()


def run():
    """Run the application (used by the CLI entry point)."""
    settings = get_settings()
    uvicorn.run(
        "fantasy_soccer.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
    )


if __name__ == "__main__":
    run()
