"""Result envelopes returned by network provider queries."""

from dataclasses import dataclass, field
from enum import Enum

from ptv_departures.domain.models.location import Location
from ptv_departures.domain.models.result_header import ResultHeader
from ptv_departures.domain.models.station_departures import StationDepartures
from ptv_departures.domain.models.suggested_location import SuggestedLocation


class ResultStatus(Enum):
    """Outcome of a query."""

    OK = "ok"
    NOT_SUPPORTED = "not_supported"


@dataclass(frozen=True)
class NearbyLocationsResult:
    """Locations found around a point, in upstream order."""

    header: ResultHeader
    locations: list[Location]
    status: ResultStatus = ResultStatus.OK


@dataclass(frozen=True)
class QueryDeparturesResult:
    """Departure boards, one group per station."""

    header: ResultHeader
    station_departures: list[StationDepartures]
    status: ResultStatus = ResultStatus.OK

    def find_station_departures(self, station_id: str) -> StationDepartures | None:
        """Return the group for the given station id, if present."""
        for group in self.station_departures:
            if group.location is not None and group.location.id == station_id:
                return group
        return None


@dataclass(frozen=True)
class SuggestLocationsResult:
    """Locations matching a free-text query, in upstream order."""

    header: ResultHeader
    suggested_locations: list[SuggestedLocation]
    status: ResultStatus = ResultStatus.OK

    @property
    def locations(self) -> list[Location]:
        return [suggestion.location for suggestion in self.suggested_locations]


@dataclass(frozen=True)
class QueryTripsResult:
    """Trip planning result. PTV trip routing is not implemented."""

    header: ResultHeader
    status: ResultStatus = ResultStatus.NOT_SUPPORTED
    trips: list[object] = field(default_factory=list)
