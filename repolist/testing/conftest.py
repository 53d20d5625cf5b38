"""
Pytest plugin for RepoList testing fixtures.

This module re-exports all fixtures from fixtures.py so they can be
discovered by pytest. Add this to your top-level conftest.py:

    pytest_plugins = ["repolist.testing.conftest"]

Or import the fixtures directly:

    from repolist.testing.fixtures import mock_service, list_model
"""

# Re-export all fixtures for pytest auto-discovery
from repolist.testing.fixtures import (
    list_model,
    mock_service,
    sample_owner,
    sample_repositories,
    sample_repository,
)

__all__ = [
    "mock_service",
    "list_model",
    "sample_owner",
    "sample_repository",
    "sample_repositories",
]
