"""
Same-origin guard

Rejects state-changing requests whose Origin header names a different host
than the one being addressed.
"""

import logging
from typing import Callable, Iterable, Optional
from urllib.parse import urlsplit

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from ..core.constants import LAUNCHES_PATH
from ..core.exceptions import CrossOriginError
from .error_handler import error_response

logger = logging.getLogger(__name__)

DEFAULT_PORTS = {"http": 80, "https": 443}


class OriginGuardMiddleware(BaseHTTPMiddleware):
    """Same-origin enforcement for POST requests to the guarded paths"""

    def __init__(self, app, guarded_paths: Optional[Iterable[str]] = None):
        super().__init__(app)
        self.guarded_paths = set(guarded_paths or [LAUNCHES_PATH])

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if request.method == "POST" and request.url.path in self.guarded_paths:
            origin = request.headers.get("origin")
            host = request.headers.get("host")
            if origin and host and not self._same_host(origin, host):
                logger.warning(
                    f"Rejected cross-origin request: {request.method} {request.url.path} "
                    f"origin: {origin} host: {host}")
                error = CrossOriginError()
                return error_response(error.status_code, error.message)

        return await call_next(request)

    @staticmethod
    def _same_host(origin: str, host: str) -> bool:
        # "null" and other unparseable origins never match
        try:
            origin_parts = urlsplit(origin)
            host_parts = urlsplit("//" + host)
            origin_port = origin_parts.port or DEFAULT_PORTS.get(origin_parts.scheme)
            host_port = host_parts.port or DEFAULT_PORTS.get(origin_parts.scheme)
        except ValueError:
            return False
        if not origin_parts.hostname:
            return False
        return origin_parts.hostname == host_parts.hostname and origin_port == host_port
