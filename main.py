#!/usr/bin/env python3
"""
ShippedToday - community feed of product launches
Main application entry point
"""

import logging

import uvicorn

from shippedtoday.core.app import create_app
from shippedtoday.core.config import config

logger = logging.getLogger(__name__)

app = create_app()


def main():
    """Run the application with uvicorn"""
    server = config.app_config.server
    try:
        uvicorn.run(
            "main:app",
            host=server.host,
            port=server.port,
            log_level="info"
        )
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down...")
    except Exception as e:
        logger.error(f"Failed to start: {e}")
        raise


if __name__ == "__main__":
    main()
