"""RepoList resource clients."""

from repolist.clients.repos import ReposClient

__all__ = [
    "ReposClient",
]
