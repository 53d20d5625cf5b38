"""Load state models used by the list model."""

from dataclasses import dataclass
from enum import Enum


class StarCountStatus(str, Enum):
    """Status of a single star-count request."""

    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


@dataclass(frozen=True)
class StarCountState:
    """Star-count entry for one repository. ``count`` is set only when LOADED."""

    status: StarCountStatus
    count: int | None = None

    @classmethod
    def loading(cls) -> "StarCountState":
        return cls(StarCountStatus.LOADING)

    @classmethod
    def loaded(cls, count: int) -> "StarCountState":
        return cls(StarCountStatus.LOADED, count)

    @classmethod
    def failed(cls) -> "StarCountState":
        return cls(StarCountStatus.FAILED)

    @property
    def is_loading(self) -> bool:
        return self.status is StarCountStatus.LOADING

    @property
    def is_loaded(self) -> bool:
        return self.status is StarCountStatus.LOADED

    @property
    def is_failed(self) -> bool:
        return self.status is StarCountStatus.FAILED


class LoadResult(str, Enum):
    """Outcome of a page load that ran to completion."""

    LOADED = "loaded"
    SKIPPED = "skipped"  # guard conditions not met, nothing fetched
    FAILED = "failed"
    STALE = "stale"  # list was reloaded while this page was in flight
