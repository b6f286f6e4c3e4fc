"""Domain models for PTV departures."""

from ptv_departures.domain.models.capability import Capability
from ptv_departures.domain.models.credentials import Credentials
from ptv_departures.domain.models.departure import Departure
from ptv_departures.domain.models.health_status import HealthStatus
from ptv_departures.domain.models.line import Line, LineDestination
from ptv_departures.domain.models.location import Location, LocationType, Product
from ptv_departures.domain.models.point import Point, to_micro_degrees
from ptv_departures.domain.models.result_header import NetworkId, ResultHeader
from ptv_departures.domain.models.results import (
    NearbyLocationsResult,
    QueryDeparturesResult,
    QueryTripsResult,
    ResultStatus,
    SuggestLocationsResult,
)
from ptv_departures.domain.models.station_departures import StationDepartures
from ptv_departures.domain.models.suggested_location import SuggestedLocation

__all__ = [
    "Capability",
    "Credentials",
    "Departure",
    "HealthStatus",
    "Line",
    "LineDestination",
    "Location",
    "LocationType",
    "NearbyLocationsResult",
    "NetworkId",
    "Point",
    "Product",
    "QueryDeparturesResult",
    "QueryTripsResult",
    "ResultHeader",
    "ResultStatus",
    "StationDepartures",
    "SuggestLocationsResult",
    "SuggestedLocation",
    "to_micro_degrees",
]
