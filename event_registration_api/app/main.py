"""
Main entrypoint for the Event Registration API.

This module assembles the FastAPI application: it sets up logging,
wires the services to the SQLite store, installs the error handlers
that render every failure as ``{"erro": "<mensagem>"}`` and mounts the
API router under ``/api``.  The app is instantiated at import time as
``app`` so it can be served directly, e.g.::

    uvicorn event_registration_api.app.main:app --reload
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.router import router as api_router
from .core.config import Settings, settings as default_settings
from .core.db import connection_factory, init_db
from .core.errors import StoreError, StoreUnavailableError
from .core.logging_config import setup_logging
from .services import build_services

logger = logging.getLogger(__name__)


def _error(status_code: int, message: str, headers: Optional[dict] = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"erro": message}, headers=headers)


def _describe_validation_error(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        field = ".".join(str(p) for p in error.get("loc", ()) if p not in ("body", "path", "query"))
        message = "campo obrigatório" if error.get("type") == "missing" else error.get("msg", "")
        parts.append(f"{field}: {message}" if field else message)
    return "Dados inválidos: " + "; ".join(parts)


def register_error_handlers(app: FastAPI) -> None:
    """Render every error response with the single field ``erro``."""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        if exc.status_code == status.HTTP_404_NOT_FOUND and exc.detail == "Not Found":
            return _error(exc.status_code, "Rota não encontrada")
        if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
            return _error(exc.status_code, "Método não permitido", getattr(exc, "headers", None))
        return _error(exc.status_code, str(exc.detail), getattr(exc, "headers", None))

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return _error(status.HTTP_400_BAD_REQUEST, _describe_validation_error(exc))

    @app.exception_handler(StoreUnavailableError)
    async def store_unavailable_handler(request: Request, exc: StoreUnavailableError) -> JSONResponse:
        logger.warning("%s %s: %s", request.method, request.url.path, exc.message)
        return _error(status.HTTP_503_SERVICE_UNAVAILABLE, exc.message)

    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
        logger.error("%s %s: %s", request.method, request.url.path, exc.message)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, exc.message)


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to use instead of the ones read from the environment.
        Tests pass their own to point the app at a temporary database.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    cfg = app_settings or default_settings
    # Logging first so that everything below can log.
    setup_logging(cfg.log_level, cfg.log_file or None)

    connect = connection_factory(cfg.database_url, cfg.db_timeout)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        # Creates the database file if needed and brings the schema up to date.
        init_db(connect)
        logger.info("Database ready at %s", cfg.database_url)
        yield

    app = FastAPI(
        title=cfg.project_name,
        version=cfg.api_version,
        debug=cfg.debug,
        lifespan=lifespan,
    )
    app.state.settings = cfg
    app.state.services = build_services(connect)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def request_timeout(request: Request, call_next):
        try:
            return await asyncio.wait_for(call_next(request), timeout=cfg.request_timeout)
        except asyncio.TimeoutError:
            logger.warning("Request %s %s timed out", request.method, request.url.path)
            return _error(status.HTTP_503_SERVICE_UNAVAILABLE, "Tempo limite da requisição excedido")

    register_error_handlers(app)
    app.include_router(api_router, prefix="/api")

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
