"""Parser for PTV stop objects."""

from typing import Any

from ptv_departures.adapters.ptv_api.json_fields import (
    require_dict,
    require_id,
    require_number,
    require_str,
)
from ptv_departures.adapters.ptv_api.product_classifier import classify_product
from ptv_departures.domain.models.location import Location, LocationType
from ptv_departures.domain.models.point import to_micro_degrees


def parse_location(data: Any) -> Location:
    """Parse a PTV stop object into a station Location.

    Expected shape::

        {"stop_id": 1071, "location_name": "Flinders Street Station",
         "suburb": "Melbourne City", "lat": -37.8183, "lon": 144.9671,
         "transport_type": "train"}

    Raises:
        MalformedResponseError: If a field is missing or has the wrong type.
        UnknownTransportTypeError: If transport_type maps to no product.
    """
    stop = require_dict(data, "stop")
    product = classify_product(require_str(stop, "transport_type"))

    return Location(
        type=LocationType.STATION,
        id=require_id(stop, "stop_id"),
        lat=to_micro_degrees(require_number(stop, "lat")),
        lon=to_micro_degrees(require_number(stop, "lon")),
        name=require_str(stop, "location_name"),
        place=require_str(stop, "suburb"),
        products=frozenset({product}),
    )
