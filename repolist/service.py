"""Service contract consumed by the list model."""

from typing import Protocol

from repolist.types.pages import PageCursor, RepositoryPage


class RepositoryService(Protocol):
    """Async source of repository pages and star counts.

    Implemented by :class:`repolist.async_clients.AsyncReposClient` and by
    :class:`repolist.testing.MockRepositoryService`.
    """

    async def fetch_repositories(self, cursor: PageCursor | None = None) -> RepositoryPage:
        ...

    async def fetch_star_count(self, owner: str, repo: str) -> int:
        ...
