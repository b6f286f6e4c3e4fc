"""PTV Timetable API adapters for Public Transport Victoria."""

from ptv_departures.adapters.ptv_api.health_gate import HealthGate
from ptv_departures.adapters.ptv_api.http_client import AiohttpTransport
from ptv_departures.adapters.ptv_api.ptv_provider import PtvProvider
from ptv_departures.adapters.ptv_api.url_signer import UrlSigner, sign_url

__all__ = ["AiohttpTransport", "HealthGate", "PtvProvider", "UrlSigner", "sign_url"]
