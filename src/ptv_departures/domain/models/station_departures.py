"""Station departures domain model."""

from dataclasses import dataclass

from ptv_departures.domain.models.departure import Departure
from ptv_departures.domain.models.line import LineDestination
from ptv_departures.domain.models.location import Location


@dataclass(frozen=True)
class StationDepartures:
    """Departures of one station plus the distinct (line, destination) pairs serving it.

    The station location is None only for an empty board, since PTV reports the
    stop details as part of each departure.
    """

    location: Location | None
    departures: list[Departure]
    lines: list[LineDestination]
