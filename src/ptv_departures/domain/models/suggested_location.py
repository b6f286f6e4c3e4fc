"""Suggested location domain model."""

from dataclasses import dataclass

from ptv_departures.domain.models.location import Location


@dataclass(frozen=True)
class SuggestedLocation:
    """A location found by a free-text search, with its rank in the result list."""

    location: Location
    priority: int
