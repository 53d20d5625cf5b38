"""RepoList type definitions.

This module exports all data model types used by the package.
"""

from repolist.types.pages import PageCursor, RepositoryPage
from repolist.types.repos import Owner, Repository, RepositoryDetail
from repolist.types.states import LoadResult, StarCountState, StarCountStatus

__all__ = [
    # Repository types
    "Owner",
    "Repository",
    "RepositoryDetail",
    # Pagination types
    "PageCursor",
    "RepositoryPage",
    # Load state types
    "LoadResult",
    "StarCountState",
    "StarCountStatus",
]
