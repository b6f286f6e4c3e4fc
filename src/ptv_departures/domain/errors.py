"""Error taxonomy for the PTV adapter."""

from ptv_departures.domain.models.health_status import HealthStatus


class PtvError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(PtvError):
    """Requests cannot be signed: missing devid or invalid private key.

    Indicates a deployment defect, so retrying is pointless.
    """


class HealthCheckError(PtvError):
    """The PTV health check reported a blocking failure."""

    def __init__(self, status: HealthStatus, failed_checks: list[str]) -> None:
        self.status = status
        self.failed_checks = failed_checks
        super().__init__(f"PTV API is unhealthy, failed checks: {', '.join(failed_checks)}")


class TransportError(PtvError):
    """Network or HTTP level failure while talking to the API."""

    def __init__(self, reason: str, status_code: int | None = None) -> None:
        self.reason = reason
        self.status_code = status_code
        if status_code is not None:
            super().__init__(f"HTTP {status_code}: {reason}")
        else:
            super().__init__(reason)


class MalformedResponseError(PtvError):
    """The response body is not valid JSON or lacks a required field."""


class UnknownTransportTypeError(MalformedResponseError):
    """A transport type string that maps to no known product."""

    def __init__(self, transport_type: object) -> None:
        self.transport_type = transport_type
        super().__init__(f"Unknown transport type: {transport_type!r}")
