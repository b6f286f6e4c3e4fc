"""Result header domain model."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class NetworkId(Enum):
    """Transit networks served by this package."""

    MELBOURNE = "melbourne"


@dataclass(frozen=True)
class ResultHeader:
    """Metadata attached to every query result."""

    network: NetworkId
    server_product: str
    api_version: str
    server_time: datetime | None = field(default=None)
