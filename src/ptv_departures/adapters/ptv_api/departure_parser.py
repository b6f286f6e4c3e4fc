"""Parser for PTV departure board responses (by-destination format)."""

from datetime import datetime
from typing import Any

from ptv_departures.adapters.ptv_api.json_fields import (
    require_dict,
    require_id,
    require_list,
    require_str,
)
from ptv_departures.adapters.ptv_api.location_parser import parse_location
from ptv_departures.adapters.ptv_api.product_classifier import classify_product
from ptv_departures.domain.errors import MalformedResponseError
from ptv_departures.domain.models.departure import Departure
from ptv_departures.domain.models.line import Line, LineDestination
from ptv_departures.domain.models.location import Location, LocationType


class DepartureParser:
    """Parses PTV departure board entries into Departure objects.

    Each entry looks like::

        {"time_timetable_utc": "2014-08-15T06:18:08Z",
         "time_realtime_utc": null,
         "platform": {
             "stop": {...stop fields...},
             "direction": {
                 "linedir_id": 38, "direction_name": "Belgrave",
                 "line": {"line_id": 1, "line_name": "Belgrave",
                          "transport_type": "train"}}}}
    """

    @staticmethod
    def parse_board(data: Any) -> list[dict[str, Any]]:
        """Extract the list of departure entries from a board response."""
        board = require_dict(data, "departure board")
        return require_list(board.get("values"), "departure board values")

    @staticmethod
    def parse_departures(values: list[Any]) -> list[Departure]:
        """Parse every departure entry, keeping upstream order."""
        return [DepartureParser.parse_departure(value) for value in values]

    @staticmethod
    def parse_departure(data: Any) -> Departure:
        """Parse a single departure entry.

        Raises:
            MalformedResponseError: If a required field is missing or invalid.
            UnknownTransportTypeError: If the line's transport type is unknown.
        """
        entry = require_dict(data, "departure")
        platform = require_dict(entry.get("platform"), "platform")
        direction = require_dict(platform.get("direction"), "direction")

        line = DepartureParser._parse_line(direction)
        destination = DepartureParser._parse_destination(direction, line)

        planned_time = DepartureParser._parse_time(require_str(entry, "time_timetable_utc"))
        realtime_str = entry.get("time_realtime_utc")
        predicted_time = (
            DepartureParser._parse_time(realtime_str) if realtime_str is not None else None
        )

        return Departure(
            planned_time=planned_time,
            predicted_time=predicted_time,
            line=line,
            destination=destination,
        )

    @staticmethod
    def parse_station(data: Any) -> Location:
        """Parse the stop a departure entry leaves from."""
        entry = require_dict(data, "departure")
        platform = require_dict(entry.get("platform"), "platform")
        return parse_location(platform.get("stop"))

    @staticmethod
    def collect_lines(departures: list[Departure]) -> list[LineDestination]:
        """Distinct (line, destination) pairs in order of first appearance."""
        pairs = (LineDestination(line=d.line, destination=d.destination) for d in departures)
        return list(dict.fromkeys(pairs))

    @staticmethod
    def _parse_line(direction: dict[str, Any]) -> Line:
        line_data = require_dict(direction.get("line"), "line")
        return Line(
            id=require_id(line_data, "line_id"),
            network="",
            product=classify_product(require_str(line_data, "transport_type")),
            label=require_str(line_data, "line_name"),
        )

    @staticmethod
    def _parse_destination(direction: dict[str, Any], line: Line) -> Location:
        """Build the destination from the direction, not from any stop."""
        return Location(
            type=LocationType.STATION,
            id=require_id(direction, "linedir_id"),
            lat=None,
            lon=None,
            name=direction.get("direction_name") or "",
            place="",
            products=frozenset({line.product}),
        )

    @staticmethod
    def _parse_time(time_str: Any) -> datetime:
        """Parse ISO 8601 time string."""
        if not isinstance(time_str, str):
            raise MalformedResponseError(f"Expected ISO 8601 timestamp, got {time_str!r}")
        try:
            return datetime.fromisoformat(time_str.replace("Z", "+00:00"))
        except ValueError as e:
            raise MalformedResponseError(f"Invalid ISO 8601 timestamp {time_str!r}") from e
