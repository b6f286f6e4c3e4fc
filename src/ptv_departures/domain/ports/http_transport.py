"""HTTP transport port."""

from typing import Protocol


class HttpTransport(Protocol):
    """Port for fetching a fully built URL with a GET request."""

    async def fetch(self, url: str) -> str:
        """Fetch the URL and return the response body.

        Raises:
            TransportError: On network failures or non-success HTTP status.
        """
        ...
