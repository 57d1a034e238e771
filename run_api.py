#!/usr/bin/env python3
"""
Script to run the Book Catalog API server.

uvicorn stops accepting connections on SIGINT/SIGTERM and gives in-flight
requests ``shutdown_grace_period`` seconds to finish before closing them.
"""

import sys

import uvicorn

from book_api.config import config
from utilities.logger import get_logger, setup_logging


def main():
    """Run the API server."""
    setup_logging(
        log_level=config.log_level,
        log_format=config.log_format,
        log_file=config.log_file,
        debug=config.debug
    )
    logger = get_logger(__name__)

    print("🚀 Starting Book Catalog API Server")
    print(f"📡 Host: {config.host}")
    print(f"🔌 Port: {config.port}")
    print(f"🌐 Debug: {config.debug}")
    print(f"⏳ Shutdown grace period: {config.shutdown_grace_period}s")
    print("=" * 50)

    try:
        uvicorn.run(
            "book_api.main:app",
            host=config.host,
            port=config.port,
            log_level=config.log_level.lower(),
            timeout_graceful_shutdown=config.shutdown_grace_period,
            access_log=True
        )
    except SystemExit as e:
        # uvicorn exits with status 1 when the listener cannot bind
        if e.code:
            logger.error("Server failed to start", host=config.host, port=config.port, exit_code=e.code)
        raise
    except Exception as e:
        logger.error("Server terminated with an error", error=str(e))
        sys.exit(1)

    logger.info("Server stopped")


if __name__ == "__main__":
    main()
