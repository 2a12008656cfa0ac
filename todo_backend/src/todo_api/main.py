from __future__ import annotations

import logging
import sys
import time
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .exceptions import ENDPOINT_NOT_FOUND, INTERNAL_ERROR, INVALID_INPUT, ApiError
from .middleware import SecurityHeadersMiddleware, UnhandledErrorMiddleware
from .repositories import TodoStore, build_store
from .routers import health as health_router
from .routers import todos as todos_router
from .schemas import ErrorEnvelope
from .settings import Settings, get_settings

logger = logging.getLogger(__name__)

openapi_tags = [
    {"name": "health", "description": "Service liveness and uptime."},
    {"name": "todos", "description": "CRUD operations for Todo items kept in memory."},
]


# PUBLIC_INTERFACE
def configure_logging(level: str = "INFO") -> None:
    """Install a stdout log handler on the root logger at the given level."""
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorEnvelope(error=message).model_dump())


def register_exception_handlers(app: FastAPI) -> None:
    """
    Render every failure as the error envelope.

    - ApiError: status and message chosen by the route
    - RequestValidationError: 400, body of the wrong shape or type
    - 404/405 from routing: 404, no endpoint for this method and path
    - anything else: 500, details only in the server log. Route errors are
      caught by UnhandledErrorMiddleware; this handler covers failures in
      the middleware stack itself
    """

    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
        return _error_response(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
        return _error_response(status.HTTP_400_BAD_REQUEST, INVALID_INPUT)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
            return _error_response(status.HTTP_404_NOT_FOUND, ENDPOINT_NOT_FOUND)
        return _error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def unexpected_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)


# PUBLIC_INTERFACE
def create_app(settings: Optional[Settings] = None, store: Optional[TodoStore] = None) -> FastAPI:
    """
    Build the application around an explicitly owned store.

    Args:
        settings: Configuration; read from the environment when omitted.
        store: The todo store to serve; a new in-memory store (seeded with the
            sample todos when settings allow) when omitted.

    Returns:
        The configured FastAPI application. Its store is ``app.state.store``.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Todo Service",
        description="Minimal in-memory todo API with a liveness probe.",
        version="1.0.0",
        openapi_tags=openapi_tags,
    )
    app.state.settings = settings
    app.state.store = store if store is not None else build_store(seed=settings.seed_sample_todos)
    app.state.started_at = time.monotonic()

    # Added first so it runs innermost, inside CORS and the security headers
    app.add_middleware(UnhandledErrorMiddleware)
    allow_all = (settings.cors_allow_origins == ["*"]) or (len(settings.cors_allow_origins) == 0)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if allow_all else settings.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(SecurityHeadersMiddleware)

    register_exception_handlers(app)

    app.include_router(health_router.router)
    app.include_router(todos_router.router)
    return app


app = create_app()
