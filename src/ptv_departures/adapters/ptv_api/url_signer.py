"""Request signing for the PTV Timetable API.

PTV authenticates each request by an HMAC-SHA1 over the full URL (scheme, host,
path and query including the devid), keyed by the developer's private key. The
signature is appended as the last query parameter, as uppercase hex.
"""

import hashlib
import hmac
from urllib.parse import quote, urlsplit, urlunsplit

from ptv_departures.adapters.ptv_api.constants import DEVID_PARAM, SIGNATURE_PARAM
from ptv_departures.domain.errors import ConfigurationError
from ptv_departures.domain.models.credentials import Credentials


def _validate_credentials(devid: str | int, private_key: str) -> None:
    if devid is None or str(devid).strip() == "":
        raise ConfigurationError("PTV devid must not be empty")
    if not isinstance(private_key, str) or not private_key:
        raise ConfigurationError("PTV private key must be a non-empty string")


def _query_param_names(query: str) -> set[str]:
    return {pair.split("=", 1)[0] for pair in query.split("&") if pair}


def compute_signature(signing_input: str, private_key: str) -> str:
    """Return the 40 character uppercase hex HMAC-SHA1 of the signing input."""
    try:
        mac = hmac.new(private_key.encode("utf-8"), signing_input.encode("utf-8"), hashlib.sha1)
    except (ValueError, TypeError) as e:
        # ValueError covers SHA-1 being disabled (FIPS) and unencodable keys
        raise ConfigurationError(f"Cannot compute request signature: {e}") from e
    return mac.hexdigest().upper()


def sign_url(url: str, devid: str | int, private_key: str) -> str:
    """Append devid and signature query parameters to a URL.

    Existing query parameters are kept verbatim and in order; devid is appended
    after them and signature last.

    Args:
        url: Absolute URL without devid or signature parameters.
        devid: Developer id issued by PTV.
        private_key: Private signing key issued by PTV.

    Returns:
        The signed URL.

    Raises:
        ConfigurationError: If the credentials are unusable or the URL is
            already signed.
    """
    _validate_credentials(devid, private_key)

    parts = urlsplit(url)
    if _query_param_names(parts.query) & {DEVID_PARAM, SIGNATURE_PARAM}:
        raise ConfigurationError(f"URL already carries {DEVID_PARAM} or {SIGNATURE_PARAM}")

    devid_pair = f"{DEVID_PARAM}={quote(str(devid), safe='')}"
    query = f"{parts.query}&{devid_pair}" if parts.query else devid_pair
    path = parts.path or "/"

    signing_input = urlunsplit((parts.scheme, parts.netloc, path, query, ""))
    signature = compute_signature(signing_input, private_key)
    signed_query = f"{query}&{SIGNATURE_PARAM}={signature}"
    return urlunsplit((parts.scheme, parts.netloc, path, signed_query, parts.fragment))


class UrlSigner:
    """Signs URLs with a fixed set of credentials."""

    def __init__(self, credentials: Credentials) -> None:
        """Initialize the signer.

        Raises:
            ConfigurationError: If the credentials can never produce a signature.
        """
        _validate_credentials(credentials.devid, credentials.private_key)
        self._credentials = credentials

    def sign(self, url: str) -> str:
        return sign_url(url, self._credentials.devid, self._credentials.private_key)
