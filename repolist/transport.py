"""
HTTP Transport for RepoList.

Handles HTTP communication with the GitHub REST API, maps failures to typed
exceptions and extracts pagination cursors from the Link header.
"""

import time
from typing import Any

import httpx

from repolist.exceptions import (
    InvalidResponseError,
    MalformedBodyError,
    MalformedRequestError,
    NetworkError,
    RateLimitedError,
    RepoListError,
    StatusCodeError,
)
from repolist.logging import log_http_request, log_http_response

DEFAULT_HEADERS = {
    "Accept": "application/vnd.github+json",
    "X-GitHub-Api-Version": "2022-11-28",
}

RATE_LIMIT_REMAINING_HEADER = "X-RateLimit-Remaining"
RATE_LIMIT_RESET_HEADER = "X-RateLimit-Reset"
LINK_HEADER = "Link"


def parse_next_link(link_header: str | None) -> str | None:
    """
    Extract the ``rel="next"`` URL from a Link header.

    Each comma-separated entry must have exactly two ``;``-separated parts,
    and the relation must be exactly ``rel="next"``. Anything else is skipped.

    Args:
        link_header: Raw Link header value (may be None)

    Returns:
        The next-page URL, or None when there is no next page
    """
    if not link_header:
        return None

    for link in link_header.split(","):
        parts = link.split(";")
        if len(parts) != 2 or parts[1].strip() != 'rel="next"':
            continue

        url = parts[0].strip().strip("<>")
        if url:
            return url

    return None


def rate_limit_error(
    response: httpx.Response, now: float | None = None
) -> RateLimitedError | None:
    """
    Detect an exhausted rate limit.

    Args:
        response: Response to inspect
        now: Current epoch time in seconds (default: time.time())

    Returns:
        RateLimitedError when the response is a 403 with zero remaining quota,
        otherwise None
    """
    if response.status_code != 403:
        return None
    if response.headers.get(RATE_LIMIT_REMAINING_HEADER) != "0":
        return None

    reset = response.headers.get(RATE_LIMIT_RESET_HEADER)
    try:
        reset_at = int(reset) if reset is not None else None
    except ValueError:
        reset_at = None

    if reset_at is None:
        return RateLimitedError(None)

    if now is None:
        now = time.time()
    return RateLimitedError(max(0, reset_at - int(now)))


def check_response(response: httpx.Response) -> None:
    """
    Raise the typed error for an unsuccessful response.

    Raises:
        RateLimitedError: On 403 with an exhausted quota
        StatusCodeError: On any other non-2xx status
    """
    limited = rate_limit_error(response)
    if limited is not None:
        raise limited

    if not 200 <= response.status_code < 300:
        raise StatusCodeError(response.status_code)


def decode_json(response: httpx.Response) -> Any:
    """
    Parse the response body as JSON.

    Raises:
        MalformedBodyError: If the body is not valid JSON
    """
    try:
        return response.json()
    except ValueError as e:
        raise MalformedBodyError(str(e)) from e


def next_page_url(response: httpx.Response) -> str | None:
    """Return the next-page URL advertised by a listing response."""
    return parse_next_link(response.headers.get(LINK_HEADER))


def translate_request_error(error: Exception) -> RepoListError:
    """
    Map an httpx exception raised while sending a request to a typed error.

    Args:
        error: Exception raised by httpx

    Returns:
        Appropriate RepoListError subclass
    """
    if isinstance(error, (httpx.InvalidURL, httpx.UnsupportedProtocol)):
        return MalformedRequestError(str(error))
    if isinstance(error, (httpx.RemoteProtocolError, httpx.DecodingError)):
        return InvalidResponseError(str(error))
    return NetworkError(str(error) or type(error).__name__)


class HTTPTransport:
    """
    HTTP transport layer for the GitHub REST API.

    Handles:
    - Base URL and default header management
    - Rate-limit detection from X-RateLimit-* headers
    - Error classification into typed exceptions
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        headers: dict[str, str] | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize HTTP transport.

        Args:
            base_url: Base URL for API requests (e.g., "https://api.github.com")
            timeout: Request timeout in seconds
            headers: Extra headers sent with every request
            transport: Custom httpx transport (e.g. httpx.MockTransport in tests)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
            headers={**DEFAULT_HEADERS, **(headers or {})},
            follow_redirects=True,
            transport=transport,
        )

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> "HTTPTransport":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def get(self, url: str, params: dict[str, Any] | None = None) -> httpx.Response:
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
            response = self._client.get(url, params=params)
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
