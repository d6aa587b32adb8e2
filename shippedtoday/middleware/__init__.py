"""
Middleware package

FastAPI middleware and handlers:
- cors: cross-origin resource sharing
- logging: request logging
- error_handler: exception to JSON error mapping
- origin_guard: same-origin check for submissions
"""

from .cors import setup_cors
from .error_handler import setup_error_handlers
from .logging import LoggingMiddleware
from .origin_guard import OriginGuardMiddleware

__all__ = [
    "setup_cors",
    "LoggingMiddleware",
    "setup_error_handlers",
    "OriginGuardMiddleware",
]
