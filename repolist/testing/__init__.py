"""RepoList testing utilities.

Provides a mock service, factories and fixtures for testing code built on
the repository list model.
"""

from repolist.testing.fixtures import (
    create_mock_owner,
    create_mock_page,
    create_mock_repositories,
    create_mock_repository,
)
from repolist.testing.mock import MockCall, MockRepositoryService

__all__ = [
    # Mock service
    "MockRepositoryService",
    "MockCall",
    # Helper functions
    "create_mock_owner",
    "create_mock_repository",
    "create_mock_repositories",
    "create_mock_page",
]
