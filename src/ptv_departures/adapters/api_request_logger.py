"""Utility for logging API requests when PTV_LOG_REQUESTS is enabled."""

import json
import logging
import os
from urllib.parse import urlsplit, urlunsplit

logger = logging.getLogger(__name__)

REDACTED = "***REDACTED***"
SENSITIVE_QUERY_PARAMS = {"devid", "signature"}


def should_log_requests() -> bool:
    """Check if request logging is enabled via PTV_LOG_REQUESTS environment variable."""
    return os.getenv("PTV_LOG_REQUESTS", "").lower() == "true"


def redact_url(url: str) -> str:
    """Replace credential-bearing query parameter values in a URL."""
    parts = urlsplit(url)
    if not parts.query:
        return url

    pairs = []
    for pair in parts.query.split("&"):
        name = pair.split("=", 1)[0]
        pairs.append(f"{name}={REDACTED}" if name in SENSITIVE_QUERY_PARAMS else pair)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, "&".join(pairs), parts.fragment))


def _redact_sensitive_headers(headers: dict[str, str]) -> dict[str, str]:
    """Redact sensitive headers from logging."""
    sensitive_keys = {"authorization", "cookie", "x-api-key"}
    return {k: REDACTED if k.lower() in sensitive_keys else v for k, v in headers.items()}


def log_api_request(
    method: str,
    url: str,
    headers: dict[str, str] | None = None,
) -> None:
    """Log API request details if PTV_LOG_REQUESTS is enabled.

    Args:
        method: HTTP method (GET, POST, etc.).
        url: Request URL, devid and signature are redacted.
        headers: Request headers (optional, sensitive headers are redacted).
    """
    if not should_log_requests():
        return

    log_parts = [f"{method} {redact_url(url)}"]

    if headers:
        safe_headers = _redact_sensitive_headers(headers)
        log_parts.append(f"Headers: {json.dumps(safe_headers, indent=2)}")

    logger.info("API Request:\n" + "\n".join(log_parts))
