"""Shared fixtures for the RepoList test suite."""

from repolist.testing.conftest import (  # noqa: F401
    list_model,
    mock_service,
    sample_owner,
    sample_repositories,
    sample_repository,
)
