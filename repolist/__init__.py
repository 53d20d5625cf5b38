"""RepoList - paginated GitHub repository list with lazily loaded star counts."""

from repolist.async_client import AsyncGitHubClient
from repolist.client import GitHubClient
from repolist.exceptions import (
    ConfigurationError,
    InvalidResponseError,
    MalformedBodyError,
    MalformedRequestError,
    NetworkError,
    RateLimitedError,
    RepoListError,
    StatusCodeError,
    describe_error,
)
from repolist.list_model import RepositoryListModel
from repolist.logging import configure_logging, get_logger
from repolist.service import RepositoryService
from repolist.star_counts import StarCountLoader
from repolist.types import (
    LoadResult,
    Owner,
    PageCursor,
    Repository,
    RepositoryDetail,
    RepositoryPage,
    StarCountState,
    StarCountStatus,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Clients
    "GitHubClient",
    "AsyncGitHubClient",
    "RepositoryService",
    # List state
    "RepositoryListModel",
    "StarCountLoader",
    # Types
    "Owner",
    "Repository",
    "RepositoryDetail",
    "PageCursor",
    "RepositoryPage",
    "LoadResult",
    "StarCountState",
    "StarCountStatus",
    # Exceptions
    "RepoListError",
    "ConfigurationError",
    "MalformedRequestError",
    "InvalidResponseError",
    "StatusCodeError",
    "MalformedBodyError",
    "NetworkError",
    "RateLimitedError",
    "describe_error",
    # Logging
    "configure_logging",
    "get_logger",
]
