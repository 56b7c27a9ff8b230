"""FastAPI application factory.

API layer boundary:
- Validates inputs, reads the source catalog
- Returns payloads for the mixer UI
- Forbidden: catalog writes
"""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Generator

from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from vamos import __version__, config
from vamos.db.repo import DbSession, StoreUnavailable
from vamos.db.session import get_session

logger = logging.getLogger(__name__)


def get_db_session(request: Request) -> Generator[DbSession, None, None]:
    """Dependency to get database session.

    Yields:
        Database session that is automatically closed after request.
    """
    session = get_session(request.app.state.db_path)
    try:
        yield session
    finally:
        session.close()


def get_rng(request: Request) -> random.Random:
    """Dependency returning the application's random source."""
    return request.app.state.rng


async def _store_unavailable_handler(request: Request, exc: StoreUnavailable) -> JSONResponse:
    logger.error(f"{request.method} {request.url.path} failed: {exc}: {exc.__cause__}")
    return JSONResponse(status_code=503, content={"detail": "Source store unavailable"})


async def _validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    # Unreadable JSON is a bad request; schema violations keep the 422
    if any(error.get("type") == "json_invalid" for error in exc.errors()):
        return JSONResponse(status_code=400, content={"detail": "Malformed request body"})
    return await request_validation_exception_handler(request, exc)


def create_app(
    db_path: Path | None = None,
    rng: random.Random | None = None,
    cors_origins: list[str] | None = None,
) -> FastAPI:
    """Create FastAPI application.

    Args:
        db_path: Optional path to database file. Defaults to VAMOS_DB_PATH.
        rng: Random source for mix selection. Seeded from
            VAMOS_RANDOM_SEED when omitted.
        cors_origins: Allowed CORS origins. Defaults to VAMOS_CORS_ORIGINS.

    Returns:
        Configured FastAPI application.
    """
    app = FastAPI(
        title="VAMOS API",
        description="Random audio/video mixes from a media catalog",
        version=__version__,
    )

    app.state.db_path = db_path if db_path is not None else config.DB_PATH
    app.state.rng = rng if rng is not None else random.Random(config.get_random_seed())

    # Mixer frontend may be served from any origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins if cors_origins is not None else config.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StoreUnavailable, _store_unavailable_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)

    # Include routes
    from vamos.api.routes import mix

    app.include_router(mix.router, prefix="/api/mix")

    @app.get("/health")
    def health_check():
        """Health check endpoint."""
        return {"status": "ok"}

    return app


# Default app instance
app = create_app()
