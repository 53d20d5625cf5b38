"""Pagination data models."""

from dataclasses import dataclass, field

from repolist.types.repos import Repository


@dataclass(frozen=True)
class PageCursor:
    """Opaque pointer to the next page: the full URL of the follow-up request."""

    url: str


@dataclass(frozen=True)
class RepositoryPage:
    """One page of repositories.

    ``next_cursor`` is None on the last page.
    """

    repositories: list[Repository] = field(default_factory=list)
    next_cursor: PageCursor | None = None

    @property
    def is_last(self) -> bool:
        return self.next_cursor is None
