"""Helpers for strict access to fields of decoded PTV JSON payloads."""

import json
import math
from typing import Any

from ptv_departures.domain.errors import MalformedResponseError


def load_json(body: str) -> Any:
    """Decode a response body, raising MalformedResponseError on invalid JSON."""
    try:
        return json.loads(body)
    except (TypeError, ValueError) as e:
        raise MalformedResponseError(f"Response is not valid JSON: {e}") from e


def require_dict(value: Any, context: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise MalformedResponseError(
            f"Expected JSON object for {context}, got {type(value).__name__}"
        )
    return value


def require_list(value: Any, context: str) -> list[Any]:
    if not isinstance(value, list):
        raise MalformedResponseError(
            f"Expected JSON array for {context}, got {type(value).__name__}"
        )
    return value


def require_field(data: dict[str, Any], key: str) -> Any:
    """Return a field that must be present and non-null."""
    value = data.get(key)
    if value is None:
        raise MalformedResponseError(f"Missing required field '{key}'")
    return value


def require_str(data: dict[str, Any], key: str) -> str:
    value = require_field(data, key)
    if not isinstance(value, str):
        raise MalformedResponseError(f"Field '{key}' must be a string")
    return value


def require_number(data: dict[str, Any], key: str) -> float:
    value = require_field(data, key)
    # bool is an int subclass but never a valid coordinate or distance
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MalformedResponseError(f"Field '{key}' must be a number")
    if not math.isfinite(value):
        raise MalformedResponseError(f"Field '{key}' must be a finite number")
    return value


def require_bool(data: dict[str, Any], key: str) -> bool:
    value = require_field(data, key)
    if not isinstance(value, bool):
        raise MalformedResponseError(f"Field '{key}' must be a boolean")
    return value


def require_id(data: dict[str, Any], key: str) -> str:
    """Return an identifier field as string; PTV sends ids as numbers or strings."""
    value = require_field(data, key)
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise MalformedResponseError(f"Field '{key}' must be an identifier")
    return str(value)
