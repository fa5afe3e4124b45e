"""Serve the API with uvicorn: ``python -m task_tracker``."""
from __future__ import annotations

import uvicorn
from loguru import logger

from .settings import get_settings

# loguru's SUCCESS level has no uvicorn counterpart
_UVICORN_LEVELS = {"TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def main() -> None:
    settings = get_settings()
    # Importing the app configures logging from the same settings
    from .main import app

    level = settings.log_level if settings.log_level in _UVICORN_LEVELS else "INFO"
    logger.info("Serving task tracker on {}:{}", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=level.lower())


if __name__ == "__main__":
    main()
