"""Adapters layer - external system integrations."""

from ptv_departures.adapters.config import AppConfig
from ptv_departures.adapters.ptv_api import AiohttpTransport, PtvProvider

__all__ = [
    "AiohttpTransport",
    "AppConfig",
    "PtvProvider",
]
