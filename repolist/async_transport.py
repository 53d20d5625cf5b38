"""
Async HTTP Transport for RepoList.

Async twin of :mod:`repolist.transport` built on httpx's async client. Response
classification and Link header parsing are shared with the sync transport.
"""

import time
from typing import Any

import httpx

from repolist.logging import log_http_request, log_http_response
from repolist.transport import (
    DEFAULT_HEADERS,
    RATE_LIMIT_REMAINING_HEADER,
    check_response,
    translate_request_error,
)


class AsyncHTTPTransport:
    """
    Async HTTP transport layer for the GitHub REST API.

    Handles:
    - Base URL and default header management
    - Rate-limit detection from X-RateLimit-* headers
    - Error classification into typed exceptions

    Cancelling the awaiting task propagates asyncio.CancelledError unchanged;
    it is never translated into a RepoListError.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        headers: dict[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize async HTTP transport.

        Args:
            base_url: Base URL for API requests (e.g., "https://api.github.com")
            timeout: Request timeout in seconds
            headers: Extra headers sent with every request
            transport: Custom httpx transport (e.g. httpx.MockTransport in tests)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            headers={**DEFAULT_HEADERS, **(headers or {})},
            follow_redirects=True,
            transport=transport,
        )

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> "AsyncHTTPTransport":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def get(self, url: str, params: dict[str, Any] | None = None) -> httpx.Response:
        """
        Make a GET request.

        Args:
            url: API path (e.g., "/repositories") or absolute URL
            params: Query parameters

        Returns:
            The successful (2xx) response

        Raises:
            RepoListError: On transport failures and unsuccessful responses
        """
        log_http_request("GET", url)
        started = time.perf_counter()

        try:
            response = await self._client.get(url, params=params)
        except (httpx.InvalidURL, httpx.RequestError) as e:
            raise translate_request_error(e) from e

        log_http_response(
            response.status_code,
            str(response.url),
            elapsed_ms=(time.perf_counter() - started) * 1000,
            rate_limit_remaining=response.headers.get(RATE_LIMIT_REMAINING_HEADER),
        )

        check_response(response)
        return response
