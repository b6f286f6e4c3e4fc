"""Tests for CLI output helpers."""

from datetime import UTC, datetime

from ptv_departures.cli import departure_to_dict, location_to_dict
from ptv_departures.domain.models import Departure, Line, Location, LocationType, Product


def _station() -> Location:
    return Location(
        type=LocationType.STATION,
        id="1071",
        lat=-37818305,
        lon=144966964,
        name="Flinders Street Station",
        place="Melbourne City",
        products=frozenset({Product.SUBURBAN_TRAIN, Product.REGIONAL_TRAIN}),
    )


def test_location_to_dict_converts_coordinates_and_products() -> None:
    """Given a station, when converting, then degrees and sorted product names are returned."""
    result = location_to_dict(_station())

    assert result["id"] == "1071"
    assert result["latitude"] == -37.818305
    assert result["longitude"] == 144.966964
    assert result["products"] == ["regional_train", "suburban_train"]


def test_location_to_dict_without_coordinates() -> None:
    """Given a direction-only destination, when converting, then coordinates are None."""
    destination = Location(
        LocationType.STATION, "38", None, None, "Belgrave", "", frozenset({Product.SUBURBAN_TRAIN})
    )

    result = location_to_dict(destination)

    assert result["latitude"] is None
    assert result["longitude"] is None


def test_departure_to_dict() -> None:
    """Given a departure without realtime data, when converting, then predicted_time is None."""
    line = Line(id="1", network="", product=Product.SUBURBAN_TRAIN, label="Belgrave")
    departure = Departure(
        planned_time=datetime(2014, 8, 15, 6, 18, 8, tzinfo=UTC),
        predicted_time=None,
        line=line,
        destination=_station(),
    )

    result = departure_to_dict(departure)

    assert result == {
        "planned_time": "2014-08-15T06:18:08+00:00",
        "predicted_time": None,
        "line": "Belgrave",
        "product": "suburban_train",
        "destination": "Flinders Street Station",
    }
