"""
Start the Todo Service with uvicorn.

Usage:
    python -m todo_api
    todo-api
"""
from __future__ import annotations

import logging

import uvicorn

from .main import configure_logging, create_app
from .settings import get_settings

logger = logging.getLogger("todo_api")


# PUBLIC_INTERFACE
def main() -> None:
    """Build the application from the environment and serve it until interrupted."""
    settings = get_settings()
    configure_logging(settings.log_level)
    app = create_app(settings)

    base_url = f"http://localhost:{settings.port}"
    logger.info("Server listening on %s:%d", settings.host, settings.port)
    logger.info("Todo API available at %s/todos", base_url)
    logger.info("Health check: %s/health", base_url)

    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
