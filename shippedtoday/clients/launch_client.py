import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from shippedtoday.core.constants import LAUNCHES_PATH
from shippedtoday.models import Launch, LaunchListResponse, LaunchSubmission

logger = logging.getLogger(__name__)


class LaunchClientError(Exception):
    """A submission the server did not accept"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class LaunchClient:
    """Async client for the launches API"""

    def __init__(self, base_url: str, timeout: float = 10.0,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url, timeout=self.timeout, transport=self.transport)

    async def get_all_launches(self) -> LaunchListResponse:
        """Fetch the feed; an empty feed is returned when the request fails"""
        try:
            async with self._client() as client:
                response = await client.get(
                    LAUNCHES_PATH, headers={"Cache-Control": "no-store"})
                response.raise_for_status()
                return LaunchListResponse.model_validate(response.json())
        except (httpx.HTTPError, ValueError, ValidationError) as e:
            logger.error(f"Failed to fetch launches: {e}")
            return LaunchListResponse(launches=[], total=0)

    async def submit_launch(self, submission: LaunchSubmission) -> Launch:
        """Submit a launch and return it as stored by the server"""
        async with self._client() as client:
            response = await client.post(
                LAUNCHES_PATH, json=submission.model_dump(mode="json", exclude_none=True))

        if not response.is_success:
            message = self._error_message(response)
            logger.error(f"Failed to submit launch: {response.status_code} - {message}")
            raise LaunchClientError(message, status_code=response.status_code)

        return Launch.model_validate(response.json())

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        fallback = f"HTTP error! status: {response.status_code}"
        try:
            body = response.json()
        except ValueError:
            return fallback
        if isinstance(body, dict) and body.get("error"):
            return str(body["error"])
        return fallback
