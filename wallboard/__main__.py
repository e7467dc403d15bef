"""
Run the wallboard with uvicorn.

Usage:
    python -m wallboard
"""

import logging

import uvicorn

from wallboard.config import settings_from_env
from wallboard.transport.app import create_app

logger = logging.getLogger(__name__)


def main() -> None:
    settings = settings_from_env()
    app = create_app(settings)

    logger.info(f"Server running on port {settings.port}")
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
