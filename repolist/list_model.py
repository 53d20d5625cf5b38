"""
Repository list state.

Owns the loaded repositories, the pagination cursor and the load flags that a
UI binds to, plus the per-repository star counts.
"""

import asyncio
from collections.abc import Mapping

from repolist.exceptions import ConfigurationError, describe_error
from repolist.logging import get_logger
from repolist.service import RepositoryService
from repolist.star_counts import StarCountLoader
from repolist.types.pages import PageCursor
from repolist.types.repos import Repository
from repolist.types.states import LoadResult, StarCountState

logger = get_logger("list")

DEFAULT_PREFETCH_THRESHOLD = 5


class RepositoryListModel:
    """
    Paginated repository list with lazily loaded star counts.

    The first-page load and the next-page load are each single-flight and do
    not block each other. A first-page load replaces the list and clears the
    star counts; a next-page load appends. Failures are stored in
    ``error_message`` and never discard repositories that are already loaded.
    Cancelling the awaiting task leaves the state as it was before the call.

    Example:
        ```python
        model = RepositoryListModel(client.repos)
        await model.load_repositories()

        # Called by the view for every row it shows
        await model.load_more_if_needed(row_repo)
        await model.load_star_count(row_repo)
        ```
    """

    def __init__(
        self,
        service: RepositoryService,
        prefetch_threshold: int = DEFAULT_PREFETCH_THRESHOLD,
    ) -> None:
        """
        Initialize the model.

        Args:
            service: Source of repository pages and star counts
            prefetch_threshold: Load the next page once a repository this close
                to the end of the list is shown

        Raises:
            ConfigurationError: If prefetch_threshold is less than 1
        """
        if prefetch_threshold < 1:
            raise ConfigurationError(
                f"prefetch_threshold must be at least 1, got {prefetch_threshold}"
            )

        self._service = service
        self.prefetch_threshold = prefetch_threshold

        self.repositories: list[Repository] = []
        self.is_loading = False
        self.is_loading_more = False
        self.error_message: str | None = None

        self._next_cursor: PageCursor | None = None
        self._has_more_pages = True
        # Bumped on every successful first-page load.
        self._generation = 0
        # Bumped whenever a load clears error_message.
        self._attempts = 0
        self._star_counts = StarCountLoader(service)

    @property
    def next_cursor(self) -> PageCursor | None:
        return self._next_cursor

    @property
    def has_more_pages(self) -> bool:
        return self._has_more_pages

    @property
    def star_counts(self) -> Mapping[int, StarCountState]:
        """Star-count states keyed by repository id."""
        return self._star_counts.states

    async def load_repositories(self) -> LoadResult:
        """
        Load the first page, replacing the current list.

        Returns:
            LoadResult.SKIPPED if a first-page load is already running,
            otherwise LOADED or FAILED
        """
        if self.is_loading:
            return LoadResult.SKIPPED

        self.is_loading = True
        previous_error = self.error_message
        self.error_message = None
        self._attempts += 1
        attempt = self._attempts
        logger.debug("Loading first page")

        try:
            page = await self._service.fetch_repositories(None)
        except asyncio.CancelledError:
            logger.debug("First page load cancelled")
            if attempt == self._attempts:
                self.error_message = previous_error
            raise
        except Exception as e:
            self.error_message = describe_error(e)
            logger.warning("First page load failed: %s", self.error_message)
            return LoadResult.FAILED
        finally:
            self.is_loading = False

        self.repositories = list(page.repositories)
        self._next_cursor = page.next_cursor
        self._has_more_pages = page.next_cursor is not None
        self._generation += 1
        self._star_counts.reset()

        logger.debug(
            "Loaded first page: %d repositories, has_more_pages=%s",
            len(self.repositories),
            self._has_more_pages,
        )
        return LoadResult.LOADED

    def should_load_more(self, current_item: Repository) -> bool:
        """Return True if showing current_item should trigger the next page."""
        if not self._has_more_pages or self.is_loading_more:
            return False

        index = self._index_of(current_item)
        if index is None:
            return False

        return index >= len(self.repositories) - self.prefetch_threshold

    async def load_more_if_needed(self, current_item: Repository) -> LoadResult:
        """
        Load the next page if current_item is close to the end of the list.

        Args:
            current_item: Repository the consumer is currently showing

        Returns:
            LoadResult.SKIPPED when no page was requested, STALE when the list
            was reloaded while the page was in flight, otherwise LOADED or FAILED
        """
        if not self.should_load_more(current_item):
            return LoadResult.SKIPPED

        self.is_loading_more = True
        previous_error = self.error_message
        self.error_message = None
        self._attempts += 1
        attempt = self._attempts
        generation = self._generation
        logger.debug("Loading next page from %s", self._next_cursor)

        try:
            page = await self._service.fetch_repositories(self._next_cursor)
        except asyncio.CancelledError:
            logger.debug("Next page load cancelled")
            if attempt == self._attempts:
                self.error_message = previous_error
            raise
        except Exception as e:
            self.error_message = describe_error(e)
            logger.warning("Next page load failed: %s", self.error_message)
            return LoadResult.FAILED
        finally:
            self.is_loading_more = False

        if generation != self._generation:
            logger.debug("Dropping next page fetched for a list that was reloaded")
            return LoadResult.STALE

        self.repositories.extend(page.repositories)
        self._next_cursor = page.next_cursor
        self._has_more_pages = page.next_cursor is not None

        logger.debug(
            "Appended %d repositories (total %d), has_more_pages=%s",
            len(page.repositories),
            len(self.repositories),
            self._has_more_pages,
        )
        return LoadResult.LOADED

    async def load_star_count(self, repo: Repository) -> StarCountState | None:
        """Load the star count of repo. See :meth:`StarCountLoader.load`."""
        return await self._star_counts.load(repo)

    def _index_of(self, repo: Repository) -> int | None:
        for index, item in enumerate(self.repositories):
            if item.id == repo.id:
                return index
        return None
