"""
CORS middleware
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ..core.config import config


def setup_cors(app: FastAPI) -> None:
    """Allow the configured origins only; none by default"""
    origins = config.app_config.security.cors_origins
    if not origins:
        return

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_methods=["GET", "POST"],
        allow_headers=["Content-Type"],
    )
