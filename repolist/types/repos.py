"""Repository-related data models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Owner:
    """Account that owns a repository."""

    id: int
    login: str
    avatar_url: str


@dataclass(frozen=True)
class Repository:
    """Repository as returned by the listing endpoint."""

    id: int
    name: str
    owner: Owner

    @property
    def full_name(self) -> str:
        """Returns the full repository name (owner/name)."""
        return f"{self.owner.login}/{self.name}"


@dataclass(frozen=True)
class RepositoryDetail:
    """Subset of the single-repository endpoint that the list needs."""

    stargazers_count: int
