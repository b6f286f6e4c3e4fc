"""Pre-flight health check of the PTV API.

Every data query first asks the API whether it is usable. A bad security
token or an unavailable database makes every answer meaningless, so those
abort the query. Clock skew and a missing memcache only degrade accuracy or
speed and are just logged.
"""

import logging
import time
from collections.abc import Callable

from pydantic import ValidationError

from ptv_departures.adapters.ptv_api.constants import HEALTH_CHECK_PATH, PTV_BASE_URL
from ptv_departures.adapters.ptv_api.json_fields import load_json, require_dict
from ptv_departures.adapters.ptv_api.url_signer import UrlSigner
from ptv_departures.domain.errors import HealthCheckError, MalformedResponseError
from ptv_departures.domain.models.health_status import HealthStatus
from ptv_departures.domain.ports.http_transport import HttpTransport

logger = logging.getLogger(__name__)


class HealthGate:
    """Verifies the PTV API is healthy before a query proceeds."""

    def __init__(
        self,
        transport: HttpTransport,
        signer: UrlSigner,
        base_url: str = PTV_BASE_URL,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """Initialize the gate.

        Args:
            transport: HTTP transport used for the health check request.
            signer: Signer for the health check URL.
            base_url: API base URL without trailing slash.
            clock: Returns the current time in seconds since the epoch.
        """
        self._transport = transport
        self._signer = signer
        self._base_url = base_url.rstrip("/")
        self._clock = clock

    def build_url(self) -> str:
        """Signed health check URL for the current time.

        Raises:
            ConfigurationError: If signing fails; an unsigned request is never sent.
        """
        timestamp = int(self._clock())
        return self._signer.sign(f"{self._base_url}{HEALTH_CHECK_PATH}?timestamp={timestamp}")

    async def check(self) -> HealthStatus:
        """Fetch and parse the current health status."""
        body = await self._transport.fetch(self.build_url())
        data = require_dict(load_json(body), "health check")
        try:
            return HealthStatus.model_validate(data)
        except ValidationError as e:
            raise MalformedResponseError(f"Invalid health check response: {e}") from e

    async def assert_healthy(self) -> HealthStatus:
        """Raise unless the API can serve queries.

        Raises:
            HealthCheckError: If the security token or database check failed.
            TransportError: If the health check request failed.
            MalformedResponseError: If the health check response is invalid.
        """
        status = await self.check()

        blocking = status.blocking_failures()
        if blocking:
            raise HealthCheckError(status, status.failed_checks())

        for name in status.failed_checks():
            logger.warning(f"PTV health check {name} failed, continuing")

        return status
