"""
RepoList main client.

Provides the synchronous interface for reading the GitHub repository listing.
"""

from typing import Any

import httpx

from repolist.clients import ReposClient
from repolist.exceptions import ConfigurationError
from repolist.transport import HTTPTransport

DEFAULT_BASE_URL = "https://api.github.com"
DEFAULT_TIMEOUT = 30.0
DEFAULT_USER_AGENT = "repolist/0.1.0"


def validate_settings(base_url: str, timeout: float) -> None:
    """
    Check client settings.

    Raises:
        ConfigurationError: If base_url is empty or timeout is not positive
    """
    if not base_url or not base_url.strip():
        raise ConfigurationError("base_url must not be empty")
    if timeout <= 0:
        raise ConfigurationError(f"timeout must be positive, got {timeout}")


class GitHubClient:
    """
    Client for the GitHub repository listing.

    Example:
        ```python
        from repolist import GitHubClient

        with GitHubClient() as client:
            page = client.repos.fetch_repositories()
            for repo in page.repositories:
                print(repo.full_name)
            if page.next_cursor:
                page = client.repos.fetch_repositories(page.next_cursor)
        ```
    """

    DEFAULT_BASE_URL = DEFAULT_BASE_URL
    DEFAULT_TIMEOUT = DEFAULT_TIMEOUT

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            base_url: Base URL for API requests (default: https://api.github.com)
            timeout: Request timeout in seconds (default: 30.0)
            user_agent: User-Agent header value (GitHub rejects requests without one)
            transport: Custom httpx transport, mainly for tests

        Raises:
            ConfigurationError: If base_url or timeout is invalid
        """
        validate_settings(base_url, timeout)
        self.base_url = base_url
        self.timeout = timeout

        self._transport = HTTPTransport(
            base_url=base_url,
            timeout=timeout,
            headers={"User-Agent": user_agent},
            transport=transport,
        )

        self.repos = ReposClient(self._transport)

    @property
    def transport(self) -> HTTPTransport:
        """Get the underlying HTTP transport (for advanced use cases)."""
        return self._transport

    def close(self) -> None:
        """Close the client and release resources."""
        self._transport.close()

    def __enter__(self) -> "GitHubClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()
