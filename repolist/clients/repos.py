"""Repositories resource client."""

from typing import TYPE_CHECKING, Any
from urllib.parse import quote

from repolist.exceptions import MalformedBodyError, MalformedRequestError
from repolist.transport import decode_json, next_page_url
from repolist.types.pages import PageCursor, RepositoryPage
from repolist.types.repos import Owner, Repository, RepositoryDetail

if TYPE_CHECKING:
    from repolist.transport import HTTPTransport

REPOSITORIES_PATH = "/repositories"


def _int_field(data: dict[str, Any], key: str) -> int:
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, int):
        raise MalformedBodyError(f"invalid field '{key}': expected an integer")
    return value


def _str_field(data: dict[str, Any], key: str) -> str:
    value = data[key]
    if not isinstance(value, str):
        raise MalformedBodyError(f"invalid field '{key}': expected a string")
    return value


def _parse_owner(data: dict[str, Any]) -> Owner:
    return Owner(
        id=_int_field(data, "id"),
        login=_str_field(data, "login"),
        avatar_url=_str_field(data, "avatar_url"),
    )


def _parse_repository(data: dict[str, Any]) -> Repository:
    """Parse a repository object, ignoring fields the list does not use."""
    return Repository(
        id=_int_field(data, "id"),
        name=_str_field(data, "name"),
        owner=_parse_owner(data["owner"]),
    )


def parse_repositories(data: Any) -> list[Repository]:
    """
    Parse the body of a listing response.

    Raises:
        MalformedBodyError: If the body is not an array of repository objects
    """
    if not isinstance(data, list):
        raise MalformedBodyError(f"expected a JSON array, got {type(data).__name__}")

    try:
        return [_parse_repository(item) for item in data]
    except KeyError as e:
        raise MalformedBodyError(f"missing field {e}") from e
    except TypeError as e:
        raise MalformedBodyError(str(e)) from e


def parse_repository_detail(data: Any) -> RepositoryDetail:
    """
    Parse the body of a single-repository response.

    Raises:
        MalformedBodyError: If stargazers_count is missing or not an integer
    """
    if not isinstance(data, dict):
        raise MalformedBodyError(f"expected a JSON object, got {type(data).__name__}")

    count = data.get("stargazers_count")
    if isinstance(count, bool) or not isinstance(count, int):
        raise MalformedBodyError("missing or invalid field 'stargazers_count'")

    return RepositoryDetail(stargazers_count=count)


def repository_path(owner: str, repo: str) -> str:
    """
    Build the path of the single-repository endpoint.

    Raises:
        MalformedRequestError: If owner or repo is empty
    """
    if not owner or not repo:
        raise MalformedRequestError(f"cannot build path for {owner!r}/{repo!r}")
    return f"/repos/{quote(owner, safe='')}/{quote(repo, safe='')}"


def page_request_url(cursor: PageCursor | None) -> str:
    """Return the URL to fetch for a cursor; None means the first page."""
    return cursor.url if cursor is not None else REPOSITORIES_PATH


def build_page(data: Any, next_url: str | None) -> RepositoryPage:
    return RepositoryPage(
        repositories=parse_repositories(data),
        next_cursor=PageCursor(next_url) if next_url else None,
    )


class ReposClient:
    """Client for repository listing and detail operations."""

    def __init__(self, transport: "HTTPTransport") -> None:
        """
        Initialize the repos client.

        Args:
            transport: HTTP transport for making requests
        """
        self.transport = transport

    def fetch_repositories(self, cursor: PageCursor | None = None) -> RepositoryPage:
        """
        Fetch one page of public repositories.

        Args:
            cursor: Cursor from the previous page, or None for the first page

        Returns:
            RepositoryPage with the repositories and the cursor of the next page
        """
        response = self.transport.get(page_request_url(cursor))
        return build_page(decode_json(response), next_page_url(response))

    def get_detail(self, owner: str, repo: str) -> RepositoryDetail:
        """
        Get the detail of a single repository.

        Args:
            owner: Owner login
            repo: Repository name

        Returns:
            RepositoryDetail
        """
        response = self.transport.get(repository_path(owner, repo))
        return parse_repository_detail(decode_json(response))

    def fetch_star_count(self, owner: str, repo: str) -> int:
        """Return the stargazer count of a repository."""
        return self.get_detail(owner, repo).stargazers_count
