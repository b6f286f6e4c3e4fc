"""Ports (interfaces) for the ports-and-adapters architecture."""

from ptv_departures.domain.ports.http_transport import HttpTransport
from ptv_departures.domain.ports.network_provider import NetworkProvider

__all__ = [
    "HttpTransport",
    "NetworkProvider",
]
