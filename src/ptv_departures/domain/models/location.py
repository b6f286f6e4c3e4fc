"""Location domain model and the enums describing it."""

from dataclasses import dataclass
from enum import Enum


class LocationType(Enum):
    """Kind of location. PTV stops are always reported as stations."""

    ANY = "any"
    STATION = "station"


class Product(Enum):
    """Normalized transport mode served at a location."""

    REGIONAL_TRAIN = "regional_train"
    SUBURBAN_TRAIN = "suburban_train"
    TRAM = "tram"
    BUS = "bus"


@dataclass(frozen=True)
class Location:
    """A stop as reported by the PTV API.

    Coordinates are integer micro-degrees. They are None for destinations,
    which PTV identifies by direction rather than by geography.
    """

    type: LocationType
    id: str
    lat: int | None
    lon: int | None
    name: str
    place: str
    products: frozenset[Product]

    def __post_init__(self) -> None:
        if not self.products:
            raise ValueError(f"Location {self.id!r} must serve at least one product")

    @property
    def has_coord(self) -> bool:
        return self.lat is not None and self.lon is not None
