"""Tests for the PTV health gate."""

import logging
from typing import Any
from unittest.mock import AsyncMock, MagicMock
from urllib.parse import urlsplit

import pytest
from conftest import HEALTHY, TEST_BASE_URL, FakeTransport

from ptv_departures.adapters.ptv_api.health_gate import HealthGate
from ptv_departures.adapters.ptv_api.url_signer import UrlSigner, sign_url
from ptv_departures.domain.errors import (
    ConfigurationError,
    HealthCheckError,
    MalformedResponseError,
    TransportError,
)
from ptv_departures.domain.models import Credentials


def _gate(transport: Any, credentials: Credentials, clock: Any) -> HealthGate:
    return HealthGate(transport, UrlSigner(credentials), base_url=TEST_BASE_URL, clock=clock)


class TestHealthCheckUrl:
    """Tests for the health check request."""

    def test_url_carries_timestamp_and_signature(
        self, credentials: Credentials, clock: Any
    ) -> None:
        """Given a fixed clock, when building the URL, then it is the signed timestamp URL."""
        url = _gate(FakeTransport(), credentials, clock).build_url()

        assert url == sign_url(
            f"{TEST_BASE_URL}/v2/healthcheck?timestamp=1408083488", "135", "abcdefg"
        )
        assert urlsplit(url).query.startswith("timestamp=1408083488&devid=135&signature=")

    def test_signing_failure_aborts_instead_of_sending_unsigned(
        self, credentials: Credentials, clock: Any
    ) -> None:
        """Given a signer that fails, when checking, then ConfigurationError propagates."""
        transport = FakeTransport()
        signer = MagicMock(spec=UrlSigner)
        signer.sign.side_effect = ConfigurationError("no SHA-1")
        gate = HealthGate(transport, signer, base_url=TEST_BASE_URL, clock=clock)

        with pytest.raises(ConfigurationError):
            gate.build_url()
        assert transport.requested_urls == []


class TestAssertHealthy:
    """Tests for the blocking policy."""

    @pytest.mark.asyncio
    async def test_healthy_service_passes(self, credentials: Credentials, clock: Any) -> None:
        """Given all checks OK, when asserting health, then the status is returned."""
        transport = FakeTransport()

        status = await _gate(transport, credentials, clock).assert_healthy()

        assert status.failed_checks() == []
        assert transport.requested_paths == ["/v2/healthcheck"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("check", ["securityTokenOK", "databaseOK"])
    async def test_blocking_failure_raises(
        self, credentials: Credentials, clock: Any, check: str
    ) -> None:
        """Given a failed security token or database check, when asserting, then it raises."""
        transport = FakeTransport(health={**HEALTHY, check: False})

        with pytest.raises(HealthCheckError) as exc_info:
            await _gate(transport, credentials, clock).assert_healthy()

        assert exc_info.value.failed_checks == [check]
        assert check in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_error_lists_every_failed_check(
        self, credentials: Credentials, clock: Any
    ) -> None:
        """Given several failures, when asserting, then the error names all of them."""
        health = {**HEALTHY, "databaseOK": False, "memcacheOK": False}

        with pytest.raises(HealthCheckError) as exc_info:
            await _gate(FakeTransport(health=health), credentials, clock).assert_healthy()

        assert exc_info.value.failed_checks == ["memcacheOK", "databaseOK"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("check", ["clientClockOK", "memcacheOK"])
    async def test_degraded_checks_are_logged_and_ignored(
        self,
        credentials: Credentials,
        clock: Any,
        check: str,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """Given clock or cache failure, when asserting, then it passes with a warning."""
        transport = FakeTransport(health={**HEALTHY, check: False})

        with caplog.at_level(logging.WARNING):
            status = await _gate(transport, credentials, clock).assert_healthy()

        assert status.failed_checks() == [check]
        assert check in caplog.text

    @pytest.mark.asyncio
    async def test_invalid_json_is_malformed(self, credentials: Credentials, clock: Any) -> None:
        """Given a non-JSON body, when asserting, then it is malformed."""
        transport = AsyncMock()
        transport.fetch.return_value = "<html>maintenance</html>"

        with pytest.raises(MalformedResponseError):
            await _gate(transport, credentials, clock).assert_healthy()

    @pytest.mark.asyncio
    async def test_missing_flag_is_malformed(self, credentials: Credentials, clock: Any) -> None:
        """Given a status without databaseOK, when asserting, then it is malformed."""
        health = {k: v for k, v in HEALTHY.items() if k != "databaseOK"}

        with pytest.raises(MalformedResponseError):
            await _gate(FakeTransport(health=health), credentials, clock).assert_healthy()

    @pytest.mark.asyncio
    async def test_transport_error_propagates(self, credentials: Credentials, clock: Any) -> None:
        """Given a failing transport, when asserting, then TransportError propagates unchanged."""
        transport = AsyncMock()
        error = TransportError("Service Unavailable", 503)
        transport.fetch.side_effect = error

        with pytest.raises(TransportError) as exc_info:
            await _gate(transport, credentials, clock).assert_healthy()

        assert exc_info.value is error
