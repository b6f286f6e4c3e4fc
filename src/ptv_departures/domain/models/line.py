"""Line domain models."""

from dataclasses import dataclass

from ptv_departures.domain.models.location import Location, Product


@dataclass(frozen=True)
class Line:
    """A public transport line (route) as identified by PTV."""

    id: str
    network: str
    product: Product
    label: str


@dataclass(frozen=True)
class LineDestination:
    """A line together with the destination it runs towards."""

    line: Line
    destination: Location
