#!/usr/bin/env python3
"""Startup script for Ziplan Backend Service"""

import sys
import uvicorn
import structlog

from core.config import get_settings

logger = structlog.get_logger()


def start_server():
    """Start the FastAPI server on the configured host and port"""
    settings = get_settings()

    logger.info(
        "Starting Ziplan Backend Service",
        host=settings.HOST,
        port=settings.PORT,
        environment=settings.ENVIRONMENT
    )

    try:
        # Import the app here to catch any import errors
        from main import app

        config = uvicorn.Config(
            app=app,
            host=settings.HOST,
            port=settings.PORT,
            log_level=settings.LOG_LEVEL.lower(),
            access_log=True,
            use_colors=False,
            server_header=False,
            timeout_keep_alive=5,
        )

        server = uvicorn.Server(config)
        server.run()

    except ImportError as e:
        logger.error("Failed to import app", error=str(e))
        sys.exit(1)


if __name__ == "__main__":
    start_server()
