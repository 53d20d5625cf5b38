"""RepoList async resource clients."""

from repolist.async_clients.repos import AsyncReposClient

__all__ = [
    "AsyncReposClient",
]
