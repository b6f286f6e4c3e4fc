"""Parser for PTV free-text search results.

Search results mix several entity kinds, discriminated by a "type" field.
Only stops become suggestions; anything else, including result kinds PTV may
add in the future, is dropped without failing the whole query.
"""

import logging
from typing import Any

from ptv_departures.adapters.ptv_api.json_fields import require_dict, require_list
from ptv_departures.adapters.ptv_api.location_parser import parse_location
from ptv_departures.domain.errors import UnknownTransportTypeError
from ptv_departures.domain.models.suggested_location import SuggestedLocation

logger = logging.getLogger(__name__)

RESULT_TYPE_STOP = "stop"
RESULT_TYPE_LINE = "line"


def parse_search_result(data: Any, rank: int) -> SuggestedLocation | None:
    """Parse one search entry, or return None if it is not a usable stop.

    Args:
        data: Entry of the form {"type": ..., "result": {...}}.
        rank: Index of the entry in the upstream result list.

    Raises:
        MalformedResponseError: If a stop entry lacks required fields.
    """
    entry = require_dict(data, "search result")
    result_type = entry.get("type")

    if result_type == RESULT_TYPE_LINE:
        return None

    if result_type != RESULT_TYPE_STOP:
        logger.debug(f"Ignoring search result {rank} with unrecognized type {result_type!r}")
        return None

    try:
        location = parse_location(entry.get("result"))
    except UnknownTransportTypeError as e:
        logger.debug(f"Ignoring search result {rank}: {e}")
        return None

    return SuggestedLocation(location=location, priority=rank)


def parse_search_results(data: Any) -> list[SuggestedLocation]:
    """Parse a search response, keeping upstream order and original ranks."""
    suggestions = []
    for rank, entry in enumerate(require_list(data, "search results")):
        suggestion = parse_search_result(entry, rank)
        if suggestion is not None:
            suggestions.append(suggestion)
    return suggestions
