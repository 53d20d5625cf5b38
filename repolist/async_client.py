"""
RepoList async client.

Provides the async interface used by the list model.
"""

from typing import Any

import httpx

from repolist.async_clients import AsyncReposClient
from repolist.async_transport import AsyncHTTPTransport
from repolist.client import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
    validate_settings,
)


class AsyncGitHubClient:
    """
    Async client for the GitHub repository listing.

    Example:
        ```python
        import asyncio
        from repolist import AsyncGitHubClient, RepositoryListModel

        async def main():
            async with AsyncGitHubClient() as client:
                model = RepositoryListModel(client.repos)
                await model.load_repositories()
                await model.load_star_count(model.repositories[0])

        asyncio.run(main())
        ```
    """

    DEFAULT_BASE_URL = DEFAULT_BASE_URL
    DEFAULT_TIMEOUT = DEFAULT_TIMEOUT

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the async client.

        Args:
            base_url: Base URL for API requests (default: https://api.github.com)
            timeout: Request timeout in seconds (default: 30.0)
            user_agent: User-Agent header value
            transport: Custom httpx transport, mainly for tests

        Raises:
            ConfigurationError: If base_url or timeout is invalid
        """
        validate_settings(base_url, timeout)
        self.base_url = base_url
        self.timeout = timeout

        self._transport = AsyncHTTPTransport(
            base_url=base_url,
            timeout=timeout,
            headers={"User-Agent": user_agent},
            transport=transport,
        )

        self.repos = AsyncReposClient(self._transport)

    @property
    def transport(self) -> AsyncHTTPTransport:
        """Get the underlying async HTTP transport (for advanced use cases)."""
        return self._transport

    async def close(self) -> None:
        """Close the client and release resources."""
        await self._transport.close()

    async def __aenter__(self) -> "AsyncGitHubClient":
        """Async context manager entry."""
        return self

    async def __aexit__(self, *args: Any) -> None:
        """Async context manager exit - closes the client."""
        await self.close()
