"""FastAPI application entry point."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from music_library import __version__
from music_library.api import api_router
from music_library.api.docs import router as docs_router
from music_library.catalog import Catalog, NotFoundError
from music_library.config import get_settings

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan - runs on startup and shutdown."""
    # Startup
    logger.info("Starting %s v%s", settings.app_name, __version__)
    logger.info("Debug mode: %s", settings.debug)
    logger.info("Catalog seeded: %s", app.state.catalog.counts())

    # Validate and log warnings
    warnings = settings.validate_runtime_config()
    if warnings:
        logger.warning("Configuration warnings:")
        for warning in warnings:
            logger.warning("  - %s", warning)
    else:
        logger.info("Configuration validation passed - no warnings")

    logger.info("Application startup complete")

    yield

    # Shutdown
    logger.info("Application shutting down")


app = FastAPI(
    title=settings.app_name,
    description="API for managing a music library with artists, albums, and songs",
    version=__version__,
    debug=settings.debug,
    lifespan=lifespan,
    # /openapi.json serves the hand-written document
    openapi_url="/openapi.generated.json",
    docs_url="/docs",
    redoc_url=None,
)

# Process-wide store; restarting the app resets it to the seed data
app.state.catalog = Catalog.seeded()

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(NotFoundError)
async def not_found_error_handler(_request: Request, exc: NotFoundError) -> JSONResponse:
    """Handle NotFoundError exceptions globally."""
    return JSONResponse(
        status_code=404,
        content={"error": str(exc) or "Resource not found"},
    )


# Include API router
app.include_router(api_router)
app.include_router(docs_router)


@app.get("/", response_class=PlainTextResponse, include_in_schema=False)
async def root() -> str:
    """Text banner."""
    return "** Music Library API **"


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint to verify the API is running."""
    return {"status": "healthy", "version": __version__}


def run() -> None:
    """Run the API with uvicorn using the configured host and port."""
    uvicorn.run(
        "music_library.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info",
    )
