"""
Tests for lazy star-count loading.
"""

import asyncio

import pytest

from repolist.exceptions import RateLimitedError
from repolist.list_model import RepositoryListModel
from repolist.star_counts import StarCountLoader
from repolist.testing import (
    MockRepositoryService,
    create_mock_page,
    create_mock_repositories,
    create_mock_repository,
)
from repolist.types.states import StarCountState, StarCountStatus


class TestStarCountLoader:
    """Tests for StarCountLoader."""

    @pytest.mark.asyncio
    async def test_loads_count(self, mock_service: MockRepositoryService) -> None:
        loader = StarCountLoader(mock_service)
        repo = create_mock_repository(1)
        mock_service.configure_star_count("octocat", "repo-1", 42)

        state = await loader.load(repo)

        assert state == StarCountState.loaded(42)
        assert loader.get(1) == StarCountState.loaded(42)
        assert mock_service.get_calls("fetch_star_count")[0].args == ("octocat", "repo-1")

    def test_absent_until_requested(self, mock_service: MockRepositoryService) -> None:
        loader = StarCountLoader(mock_service)

        assert loader.get(1) is None
        assert 1 not in loader.states

    def test_states_view_is_read_only(self, mock_service: MockRepositoryService) -> None:
        loader = StarCountLoader(mock_service)

        with pytest.raises(TypeError):
            loader.states[1] = StarCountState.loaded(1)  # type: ignore[index]

    @pytest.mark.asyncio
    async def test_loaded_entry_is_not_refetched(self, mock_service: MockRepositoryService) -> None:
        loader = StarCountLoader(mock_service)
        repo = create_mock_repository(1)
        mock_service.configure_star_count("octocat", "repo-1", 42)

        await loader.load(repo)
        state = await loader.load(repo)

        assert state == StarCountState.loaded(42)
        assert mock_service.call_count("fetch_star_count") == 1

    @pytest.mark.asyncio
    async def test_failure_marks_failed(self, mock_service: MockRepositoryService) -> None:
        loader = StarCountLoader(mock_service)
        repo = create_mock_repository(1)

        state = await loader.load(repo)

        assert state is not None
        assert state.status is StarCountStatus.FAILED
        assert state.count is None

    @pytest.mark.asyncio
    async def test_failed_entry_is_retried(self, mock_service: MockRepositoryService) -> None:
        loader = StarCountLoader(mock_service)
        repo = create_mock_repository(1)
        await loader.load(repo)

        mock_service.configure_star_count("octocat", "repo-1", 5)
        state = await loader.load(repo)

        assert state == StarCountState.loaded(5)
        assert mock_service.call_count("fetch_star_count") == 2

    @pytest.mark.asyncio
    async def test_overlapping_requests_share_one_call(
        self, mock_service: MockRepositoryService
    ) -> None:
        loader = StarCountLoader(mock_service)
        repo = create_mock_repository(1)
        mock_service.configure_star_count("octocat", "repo-1", 42)
        gate = mock_service.hold("fetch_star_count")

        task = asyncio.create_task(loader.load(repo))
        await asyncio.sleep(0)
        assert loader.get(1) == StarCountState.loading()

        second = await loader.load(repo)
        assert second == StarCountState.loading()

        gate.set()
        await task

        assert mock_service.call_count("fetch_star_count") == 1
        assert loader.get(1) == StarCountState.loaded(42)

    @pytest.mark.asyncio
    async def test_cancellation_resets_to_absent(self, mock_service: MockRepositoryService) -> None:
        loader = StarCountLoader(mock_service)
        repo = create_mock_repository(1)
        mock_service.configure_star_count("octocat", "repo-1", 42)
        mock_service.hold("fetch_star_count")

        task = asyncio.create_task(loader.load(repo))
        await asyncio.sleep(0)
        task.cancel()

        with pytest.raises(asyncio.CancelledError):
            await task

        assert loader.get(1) is None

        mock_service.release()
        assert await loader.load(repo) == StarCountState.loaded(42)

    @pytest.mark.asyncio
    async def test_reset_drops_in_flight_result(self, mock_service: MockRepositoryService) -> None:
        loader = StarCountLoader(mock_service)
        repo = create_mock_repository(1)
        mock_service.configure_star_count("octocat", "repo-1", 42)
        gate = mock_service.hold("fetch_star_count")

        task = asyncio.create_task(loader.load(repo))
        await asyncio.sleep(0)
        loader.reset()
        gate.set()

        assert await task is None
        assert loader.get(1) is None

    @pytest.mark.asyncio
    async def test_entries_are_independent(self, mock_service: MockRepositoryService) -> None:
        loader = StarCountLoader(mock_service)
        first, second, third = create_mock_repositories(3)
        mock_service.configure_star_count("octocat", "repo-1", 10)
        mock_service.configure_star_count("octocat", "repo-3", 30)
        gate = mock_service.hold("fetch_star_count")

        pending = asyncio.create_task(loader.load(third))
        await asyncio.sleep(0)
        mock_service.release()
        await loader.load(second)  # fails: no count configured
        await pending

        assert await loader.load(first) == StarCountState.loaded(10)
        assert loader.get(2) == StarCountState.failed()
        assert loader.get(3) == StarCountState.loaded(30)
        assert gate.is_set()

    @pytest.mark.asyncio
    async def test_many_items_in_flight_at_once(self, mock_service: MockRepositoryService) -> None:
        loader = StarCountLoader(mock_service)
        repos = create_mock_repositories(5)
        for repo in repos:
            mock_service.configure_star_count("octocat", repo.name, repo.id * 100)
        gate = mock_service.hold("fetch_star_count")

        tasks = [asyncio.create_task(loader.load(repo)) for repo in repos]
        await asyncio.sleep(0)
        assert all(loader.get(repo.id) == StarCountState.loading() for repo in repos)

        gate.set()
        await asyncio.gather(*tasks)

        assert {repo.id: loader.get(repo.id) for repo in repos} == {
            repo.id: StarCountState.loaded(repo.id * 100) for repo in repos
        }
        assert mock_service.call_count("fetch_star_count") == 5


class TestModelStarCounts:
    """Tests for star counts through RepositoryListModel."""

    @pytest.mark.asyncio
    async def test_failure_does_not_touch_page_state(
        self, list_model: RepositoryListModel, mock_service: MockRepositoryService
    ) -> None:
        repos = create_mock_repositories(2)
        mock_service.configure_pages(create_mock_page(repos, next_url="https://api.github.com/repositories?since=2"))
        await list_model.load_repositories()
        mock_service.configure_error(RateLimitedError(60), method="fetch_star_count")

        state = await list_model.load_star_count(repos[0])

        assert state == StarCountState.failed()
        assert list_model.error_message is None
        assert list_model.repositories == repos
        assert list_model.has_more_pages is True

    @pytest.mark.asyncio
    async def test_reload_during_star_load(
        self, list_model: RepositoryListModel, mock_service: MockRepositoryService
    ) -> None:
        repos = create_mock_repositories(1)
        mock_service.configure_pages(create_mock_page(repos), create_mock_page(repos))
        mock_service.configure_star_count("octocat", "repo-1", 3)
        await list_model.load_repositories()
        gate = mock_service.hold("fetch_star_count")

        task = asyncio.create_task(list_model.load_star_count(repos[0]))
        await asyncio.sleep(0)
        await list_model.load_repositories()
        gate.set()
        await task

        assert 1 not in list_model.star_counts
