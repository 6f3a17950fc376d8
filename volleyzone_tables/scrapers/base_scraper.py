from typing import Any, Dict, Optional

import httpx
from loguru import logger

from volleyzone_tables.config.settings import settings


class ScraperError(Exception):
    """Custom exception for scraper-related errors."""

    pass


class FetchError(ScraperError):
    """The request could not be sent, the connection dropped, or the server
    answered with an HTTP error status."""

    pass


class ResponseDecodeError(ScraperError):
    """The response body is not valid JSON."""

    pass


class MissingFieldError(ScraperError):
    """An expected key is absent from the JSON response."""

    def __init__(self, field: str):
        super().__init__(f"Response has no '{field}' field")
        self.field = field


class WrongTypeError(ScraperError):
    """A JSON response field holds a value of an unexpected type."""

    def __init__(self, field: str, expected: type, actual: Any):
        super().__init__(
            f"Response field '{field}' should be {expected.__name__}, "
            f"got {type(actual).__name__}"
        )
        self.field = field
        self.expected = expected
        self.actual = actual


class BaseScraper:
    """Base class owning the HTTP client used by the site scrapers."""

    site: str = "unknown"

    def __init__(self, client: Optional[httpx.AsyncClient] = None):
        if client is None:
            client_kwargs: Dict[str, Any] = {"follow_redirects": True}
            if settings.request_timeout is not None:
                client_kwargs["timeout"] = httpx.Timeout(settings.request_timeout)
            client = httpx.AsyncClient(**client_kwargs)
        self.client = client

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()

    async def _make_request(
        self,
        method: str,
        url: str,
        headers: Optional[Dict[str, str]] = None,
        params: Optional[Dict[str, Any]] = None,
        data: Optional[Dict[str, Any]] = None,
        **kwargs,
    ) -> httpx.Response:
        """Makes a single asynchronous HTTP request. Failures are not retried."""
        logger.debug(f"Making request: {method} {url} params={params}")
        try:
            response = await self.client.request(
                method,
                url,
                headers=headers,
                params=params,
                data=data,
                **kwargs,
            )
            response.raise_for_status()  # Raises HTTPStatusError for 4xx/5xx
            logger.debug(f"Request successful: {response.status_code} for {url}")
            return response

        except httpx.HTTPStatusError as e:
            logger.error(
                f"HTTP error during request to {self.site}: {e.response.status_code} - {e}"
            )
            raise FetchError(f"HTTP error: {e.response.status_code}") from e
        except httpx.RequestError as e:
            # Network errors, timeouts etc.
            logger.error(f"Request error for {self.site}: {e!r}")
            raise FetchError(f"Request to {url} failed: {e}") from e

    async def close(self):
        """Closes the underlying HTTP client."""
        await self.client.aclose()
        logger.debug(f"Closed HTTP client for {self.site}")
