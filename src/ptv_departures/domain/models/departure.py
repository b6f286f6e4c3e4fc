"""Departure domain model."""

from dataclasses import dataclass
from datetime import datetime

from ptv_departures.domain.models.line import Line
from ptv_departures.domain.models.location import Location


@dataclass(frozen=True)
class Departure:
    """Represents a single departure from a station."""

    planned_time: datetime
    predicted_time: datetime | None  # None when no realtime data is known
    line: Line
    destination: Location
    position: str | None = None

    @property
    def time(self) -> datetime:
        """Best known departure time: predicted if available, else planned."""
        return self.predicted_time or self.planned_time

    @property
    def is_realtime(self) -> bool:
        return self.predicted_time is not None
