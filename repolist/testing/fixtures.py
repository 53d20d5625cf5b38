"""
Pytest fixtures for RepoList testing.

Provides factories and fixtures for tests that drive the list model.
"""

from typing import Generator

import pytest

from repolist.list_model import RepositoryListModel
from repolist.testing.mock import MockRepositoryService
from repolist.types.pages import PageCursor, RepositoryPage
from repolist.types.repos import Owner, Repository


# ============================================================================
# Factories
# ============================================================================


def create_mock_owner(
    owner_id: int = 1,
    login: str = "octocat",
    avatar_url: str = "https://example.com/avatar.png",
) -> Owner:
    """Create an Owner with default values."""
    return Owner(id=owner_id, login=login, avatar_url=avatar_url)


def create_mock_repository(
    repo_id: int = 1,
    name: str | None = None,
    owner: Owner | None = None,
) -> Repository:
    """Create a Repository; the name defaults to "repo-<id>"."""
    return Repository(
        id=repo_id,
        name=name if name is not None else f"repo-{repo_id}",
        owner=owner or create_mock_owner(),
    )


def create_mock_repositories(
    count: int,
    starting_id: int = 1,
    owner: Owner | None = None,
) -> list[Repository]:
    """Create count repositories with consecutive ids."""
    return [
        create_mock_repository(repo_id=starting_id + i, owner=owner)
        for i in range(count)
    ]


def create_mock_page(
    repositories: list[Repository] | int,
    next_url: str | None = None,
) -> RepositoryPage:
    """
    Create a RepositoryPage.

    Args:
        repositories: Repositories on the page, or a count of generated ones
        next_url: URL of the following page; None makes this the last page
    """
    if isinstance(repositories, int):
        repositories = create_mock_repositories(repositories)
    return RepositoryPage(
        repositories=list(repositories),
        next_cursor=PageCursor(next_url) if next_url else None,
    )


# ============================================================================
# Service & Model Fixtures
# ============================================================================


@pytest.fixture
def mock_service() -> Generator[MockRepositoryService, None, None]:
    """
    Provide an empty MockRepositoryService.

    Example:
        ```python
        def test_my_feature(mock_service):
            mock_service.configure_pages(create_mock_page(3))
            ...
            assert mock_service.was_called("fetch_repositories")
        ```
    """
    service = MockRepositoryService()
    yield service
    service.reset()


@pytest.fixture
def list_model(mock_service: MockRepositoryService) -> RepositoryListModel:
    """Provide a RepositoryListModel backed by mock_service."""
    return RepositoryListModel(mock_service)


# ============================================================================
# Sample Data Fixtures
# ============================================================================


@pytest.fixture
def sample_owner() -> Owner:
    """Provide a sample Owner object."""
    return create_mock_owner()


@pytest.fixture
def sample_repository(sample_owner: Owner) -> Repository:
    """Provide a sample Repository object."""
    return create_mock_repository(repo_id=1, name="grit", owner=sample_owner)


@pytest.fixture
def sample_repositories(sample_owner: Owner) -> list[Repository]:
    """Provide three sample repositories with ids 1..3."""
    return create_mock_repositories(3, owner=sample_owner)
