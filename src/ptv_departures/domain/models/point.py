"""Point domain model."""

from dataclasses import dataclass
from decimal import Decimal

MICRO_DEGREES = 1_000_000


def to_micro_degrees(degrees: float) -> int:
    """Scale degrees to integer micro-degrees, truncating toward zero.

    The value goes through its shortest decimal repr so inputs with at most six
    decimal digits convert exactly (float multiplication would not).
    """
    return int(Decimal(str(degrees)) * MICRO_DEGREES)


@dataclass(frozen=True)
class Point:
    """A geographic coordinate in fixed-point micro-degrees (degrees x 1e6)."""

    lat: int
    lon: int

    @classmethod
    def from_degrees(cls, latitude: float, longitude: float) -> "Point":
        """Create a point from floating-point degrees."""
        return cls(lat=to_micro_degrees(latitude), lon=to_micro_degrees(longitude))

    @property
    def lat_as_double(self) -> float:
        return self.lat / MICRO_DEGREES

    @property
    def lon_as_double(self) -> float:
        return self.lon / MICRO_DEGREES
