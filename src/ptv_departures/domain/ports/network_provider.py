"""Network provider port."""

from typing import Any, Protocol

from ptv_departures.domain.models import (
    Capability,
    Location,
    NearbyLocationsResult,
    NetworkId,
    Point,
    Product,
    QueryDeparturesResult,
    QueryTripsResult,
    SuggestLocationsResult,
)


class NetworkProvider(Protocol):
    """Port implemented by every transit network adapter."""

    @property
    def network_id(self) -> NetworkId:
        """Network this provider serves."""
        ...

    def has_capabilities(self, *capabilities: Capability) -> bool:
        """Whether every given capability is supported."""
        ...

    def default_products(self) -> set[Product]:
        """Products served by the network."""
        ...

    async def query_nearby_locations(
        self, point: Point, max_distance: int = 0, max_locations: int = 0
    ) -> NearbyLocationsResult:
        """Find locations around a point."""
        ...

    async def query_departures(
        self, station_id: str, max_departures: int = 10
    ) -> QueryDeparturesResult:
        """Get the departure board of a station."""
        ...

    async def suggest_locations(self, constraint: str) -> SuggestLocationsResult:
        """Suggest locations matching free text."""
        ...

    async def query_trips(
        self, origin: Location, destination: Location, **options: Any
    ) -> QueryTripsResult:
        """Plan trips between two locations."""
        ...
