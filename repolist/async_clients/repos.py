"""Async Repositories resource client."""

from typing import TYPE_CHECKING

from repolist.clients.repos import (
    build_page,
    page_request_url,
    parse_repository_detail,
    repository_path,
)
from repolist.transport import decode_json, next_page_url
from repolist.types.pages import PageCursor, RepositoryPage
from repolist.types.repos import RepositoryDetail

if TYPE_CHECKING:
    from repolist.async_transport import AsyncHTTPTransport


class AsyncReposClient:
    """Async client for repository listing and detail operations.

    Satisfies :class:`repolist.service.RepositoryService`, so it can be
    handed straight to :class:`repolist.list_model.RepositoryListModel`.
    """

    def __init__(self, transport: "AsyncHTTPTransport") -> None:
        """
        Initialize the async repos client.

        Args:
            transport: Async HTTP transport for making requests
        """
        self.transport = transport

    async def fetch_repositories(self, cursor: PageCursor | None = None) -> RepositoryPage:
        """
        Fetch one page of public repositories.

        Args:
            cursor: Cursor from the previous page, or None for the first page

        Returns:
            RepositoryPage with the repositories and the cursor of the next page
        """
        response = await self.transport.get(page_request_url(cursor))
        return build_page(decode_json(response), next_page_url(response))

    async def get_detail(self, owner: str, repo: str) -> RepositoryDetail:
        """
        Get the detail of a single repository.

        Args:
            owner: Owner login
            repo: Repository name

        Returns:
            RepositoryDetail
        """
        response = await self.transport.get(repository_path(owner, repo))
        return parse_repository_detail(decode_json(response))

    async def fetch_star_count(self, owner: str, repo: str) -> int:
        """Return the stargazer count of a repository."""
        detail = await self.get_detail(owner, repo)
        return detail.stargazers_count
