"""PTV (Melbourne) network provider.

Implements the three supported queries on top of the PTV Timetable API v2.
Each query runs the health gate first, then performs exactly one signed
request and maps its JSON body onto domain models.
"""

import logging
import time
from collections.abc import Callable
from typing import Any
from urllib.parse import quote

from ptv_departures.adapters.ptv_api.constants import (
    API_VERSION,
    DEPARTURES_PATH,
    NEARBY_PATH,
    PTV_BASE_URL,
    SEARCH_PATH,
    SERVER_PRODUCT,
)
from ptv_departures.adapters.ptv_api.departure_parser import DepartureParser
from ptv_departures.adapters.ptv_api.health_gate import HealthGate
from ptv_departures.adapters.ptv_api.json_fields import (
    load_json,
    require_dict,
    require_list,
    require_number,
)
from ptv_departures.adapters.ptv_api.location_parser import parse_location
from ptv_departures.adapters.ptv_api.search_result_parser import parse_search_results
from ptv_departures.adapters.ptv_api.url_signer import UrlSigner
from ptv_departures.domain.models import (
    Capability,
    Credentials,
    HealthStatus,
    Location,
    NearbyLocationsResult,
    NetworkId,
    Point,
    Product,
    QueryDeparturesResult,
    QueryTripsResult,
    ResultHeader,
    StationDepartures,
    SuggestLocationsResult,
)
from ptv_departures.domain.ports.http_transport import HttpTransport
from ptv_departures.domain.ports.network_provider import NetworkProvider

logger = logging.getLogger(__name__)

SUPPORTED_CAPABILITIES = frozenset(
    {Capability.NEARBY_LOCATIONS, Capability.DEPARTURES, Capability.SUGGEST_LOCATIONS}
)


class PtvProvider(NetworkProvider):
    """Network provider for Public Transport Victoria."""

    def __init__(
        self,
        credentials: Credentials,
        transport: HttpTransport,
        base_url: str = PTV_BASE_URL,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """Initialize the provider.

        Args:
            credentials: PTV devid and private key.
            transport: HTTP transport used for every request.
            base_url: API base URL without trailing slash.
            clock: Returns seconds since the epoch, used by the health check.

        Raises:
            ConfigurationError: If the credentials cannot sign requests.
        """
        self._transport = transport
        self._base_url = base_url.rstrip("/")
        self._signer = UrlSigner(credentials)
        self._health_gate = HealthGate(transport, self._signer, self._base_url, clock)

    @property
    def network_id(self) -> NetworkId:
        return NetworkId.MELBOURNE

    def has_capabilities(self, *capabilities: Capability) -> bool:
        return all(capability in SUPPORTED_CAPABILITIES for capability in capabilities)

    def default_products(self) -> set[Product]:
        return set(Product)

    async def check_health(self) -> HealthStatus:
        """Run the health gate on its own, e.g. to verify credentials."""
        return await self._health_gate.assert_healthy()

    def _header(self) -> ResultHeader:
        return ResultHeader(
            network=self.network_id, server_product=SERVER_PRODUCT, api_version=API_VERSION
        )

    async def _fetch_json(self, path: str) -> Any:
        """Run the health gate, then fetch and decode a signed API path."""
        await self._health_gate.assert_healthy()
        url = self._signer.sign(f"{self._base_url}{path}")
        body = await self._transport.fetch(url)
        return load_json(body)

    async def query_nearby_locations(
        self, point: Point, max_distance: int = 0, max_locations: int = 0
    ) -> NearbyLocationsResult:
        """Find stops around a point.

        Entries are taken in upstream order. An entry is accepted when
        max_distance is 0 or its reported distance is below max_distance, and
        collection stops once max_locations (if > 0) entries were accepted.

        Args:
            point: Centre of the search.
            max_distance: Exclusive distance bound in meters, 0 for unbounded.
            max_locations: Maximum number of locations, 0 for unlimited.

        Returns:
            NearbyLocationsResult with the accepted locations.
        """
        path = NEARBY_PATH.format(lat=point.lat_as_double, lon=point.lon_as_double)
        entries = require_list(await self._fetch_json(path), "nearby results")

        locations: list[Location] = []
        for entry in entries:
            stop = require_dict(require_dict(entry, "nearby result").get("result"), "stop")
            if max_distance > 0 and require_number(stop, "distance") >= max_distance:
                continue
            locations.append(parse_location(stop))
            if max_locations > 0 and len(locations) >= max_locations:
                break

        logger.debug(f"Found {len(locations)} nearby location(s) around {point}")
        return NearbyLocationsResult(header=self._header(), locations=locations)

    async def query_departures(
        self, station_id: str, max_departures: int = 10
    ) -> QueryDeparturesResult:
        """Get the departure board of one stop, grouped by destination upstream.

        Args:
            station_id: PTV stop id.
            max_departures: Limit passed to the API per destination.

        Returns:
            QueryDeparturesResult with a single StationDepartures group.
        """
        path = DEPARTURES_PATH.format(stop_id=quote(station_id, safe=""), limit=max_departures)
        values = DepartureParser.parse_board(await self._fetch_json(path))

        departures = DepartureParser.parse_departures(values)
        station = DepartureParser.parse_station(values[0]) if values else None
        group = StationDepartures(
            location=station,
            departures=departures,
            lines=DepartureParser.collect_lines(departures),
        )

        logger.debug(f"Parsed {len(departures)} departure(s) for stop {station_id}")
        return QueryDeparturesResult(header=self._header(), station_departures=[group])

    async def suggest_locations(self, constraint: str) -> SuggestLocationsResult:
        """Suggest stops matching free text.

        Non-stop results (lines, unknown kinds) are omitted; each suggestion
        keeps its index in the upstream list as priority.
        """
        text = constraint.strip()
        if not text:
            # no request is sent for blank text, so the health check is skipped too
            return SuggestLocationsResult(header=self._header(), suggested_locations=[])

        path = SEARCH_PATH.format(text=quote(text, safe=""))
        suggestions = parse_search_results(await self._fetch_json(path))
        return SuggestLocationsResult(header=self._header(), suggested_locations=suggestions)

    async def query_trips(
        self, origin: Location, destination: Location, **options: Any
    ) -> QueryTripsResult:
        """Trip routing is not offered by this provider."""
        logger.debug(
            f"Trip query from {origin.id} to {destination.id} is not supported"
            f" (options: {sorted(options)})"
        )
        return QueryTripsResult(header=self._header())
