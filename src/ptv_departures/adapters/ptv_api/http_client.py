"""aiohttp based HTTP transport for the PTV API."""

import asyncio
import logging

import aiohttp
from yarl import URL

from ptv_departures.adapters.api_request_logger import log_api_request, redact_url
from ptv_departures.adapters.ptv_api.constants import DEFAULT_HEADERS
from ptv_departures.domain.errors import TransportError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 10.0


class AiohttpTransport:
    """Fetches signed URLs with GET requests over a shared aiohttp session."""

    def __init__(
        self, session: aiohttp.ClientSession, timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    ) -> None:
        """Initialize with an aiohttp session.

        Args:
            session: aiohttp ClientSession owned by the caller.
            timeout_seconds: Total timeout per request.
        """
        self._session = session
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    async def _read_response(self, response: aiohttp.ClientResponse, url: str) -> str:
        body = await response.text()
        if response.status != 200:
            logger.error(
                f"PTV API returned status {response.status} for {redact_url(url)}: {body[:200]}"
            )
            raise TransportError(body[:200] or (response.reason or ""), response.status)
        return body

    async def fetch(self, url: str) -> str:
        """Fetch a URL and return its body.

        The URL is sent exactly as given: re-quoting it would invalidate the
        signature.

        Raises:
            TransportError: On connection errors, timeouts and non-200 responses.
        """
        log_api_request("GET", url, DEFAULT_HEADERS)
        try:
            async with self._session.get(
                URL(url, encoded=True), headers=DEFAULT_HEADERS, timeout=self._timeout
            ) as response:
                return await self._read_response(response, url)
        except aiohttp.ClientError as e:
            raise TransportError(f"Request to {redact_url(url)} failed: {e}") from e
        except asyncio.TimeoutError as e:
            raise TransportError(f"Request to {redact_url(url)} timed out") from e
