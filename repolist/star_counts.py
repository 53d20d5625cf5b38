"""Lazy, per-repository star-count loading."""

import asyncio
from collections.abc import Mapping
from types import MappingProxyType

from repolist.logging import get_logger
from repolist.service import RepositoryService
from repolist.types.repos import Repository
from repolist.types.states import StarCountState

logger = get_logger("list")


class StarCountLoader:
    """
    Loads star counts on demand and tracks one state per repository id.

    A repository id is absent until first requested. LOADING and LOADED
    entries make further requests no-ops; a FAILED entry is retried.
    All mutations happen on the event loop, and the LOADING entry is written
    before the first ``await``, so overlapping requests for the same
    repository issue a single service call.
    """

    def __init__(self, service: RepositoryService) -> None:
        self._service = service
        self._states: dict[int, StarCountState] = {}
        # Bumped by reset(); requests started before a reset drop their result.
        self._generation = 0

    @property
    def states(self) -> Mapping[int, StarCountState]:
        """Read-only view of the state map, keyed by repository id."""
        return MappingProxyType(self._states)

    def get(self, repo_id: int) -> StarCountState | None:
        return self._states.get(repo_id)

    def reset(self) -> None:
        """Forget every entry. In-flight requests will not write back."""
        self._states = {}
        self._generation += 1

    async def load(self, repo: Repository) -> StarCountState | None:
        """
        Load the star count of a repository unless it is loading or loaded.

        Args:
            repo: Repository to load the count for

        Returns:
            The entry for the repository after the call

        Raises:
            asyncio.CancelledError: If the awaiting task is cancelled; the
                entry is removed so the next request starts fresh
        """
        existing = self._states.get(repo.id)
        if existing is not None and not existing.is_failed:
            return existing

        generation = self._generation
        self._states[repo.id] = StarCountState.loading()

        try:
            count = await self._service.fetch_star_count(repo.owner.login, repo.name)
        except asyncio.CancelledError:
            if generation == self._generation:
                self._states.pop(repo.id, None)
            raise
        except Exception as e:
            logger.warning("Star count for %s failed: %s", repo.full_name, e)
            if generation == self._generation:
                self._states[repo.id] = StarCountState.failed()
            return self._states.get(repo.id)

        if generation == self._generation:
            self._states[repo.id] = StarCountState.loaded(count)
        return self._states.get(repo.id)
