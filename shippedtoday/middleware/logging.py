"""
Request logging middleware

Names each request by the same client id the submission rate limit uses,
so request lines can be matched with ``shippedtoday.launches`` entries.
"""

import logging
import time
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from ..core.config import config
from ..core.dependencies import resolve_client_id

logger = logging.getLogger(__name__)


class LoggingMiddleware(BaseHTTPMiddleware):
    """One log line per request with client, status and duration"""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.time()

        response = await call_next(request)

        process_time = time.time() - start_time

        # Set by get_client_id when the route resolved one
        client_id = getattr(request.state, "client_id", None) or resolve_client_id(
            request, config.app_config.security.trust_forwarded_for)

        logger.info(
            f"{request.method} {request.url.path} {response.status_code} "
            f"client={client_id} {process_time * 1000:.1f}ms"
        )

        response.headers["X-Process-Time"] = f"{process_time:.4f}"

        return response
