"""Provider capability enum."""

from enum import Enum


class Capability(Enum):
    """Queries a network provider may support."""

    NEARBY_LOCATIONS = "nearby_locations"
    DEPARTURES = "departures"
    SUGGEST_LOCATIONS = "suggest_locations"
    TRIPS = "trips"
