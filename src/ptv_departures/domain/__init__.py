"""Domain layer - core models, errors and ports."""

from ptv_departures.domain.models import (
    Departure,
    Line,
    Location,
    Point,
    Product,
)
from ptv_departures.domain.ports import (
    HttpTransport,
    NetworkProvider,
)

__all__ = [
    "Departure",
    "HttpTransport",
    "Line",
    "Location",
    "NetworkProvider",
    "Point",
    "Product",
]
