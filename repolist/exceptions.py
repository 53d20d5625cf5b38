"""RepoList exception classes."""

from typing import Any

# User-facing descriptions keyed by error code.
_DESCRIPTIONS: dict[str, str] = {
    "CONFIGURATION_ERROR": "{detail}",
    "INVALID_URL": "Invalid URL.",
    "INVALID_RESPONSE": "Invalid response from server.",
    "HTTP_ERROR": "Server returned an error (HTTP {status_code}).",
    "DECODING_ERROR": "Failed to parse server response: {detail}",
    "NETWORK_ERROR": "{detail}",
    "RATE_LIMITED": "API rate limit exceeded. Try again in {retry_after} seconds.",
    "RATE_LIMITED_UNKNOWN": "API rate limit exceeded. Please try again later.",
}


def _describe(code: str, **fields: Any) -> str:
    return _DESCRIPTIONS[code].format(**fields)


class RepoListError(Exception):
    """Base exception for all RepoList errors."""

    def __init__(self, code: str, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(f"[{code}] {message}")


class ConfigurationError(RepoListError):
    """Raised when client or model configuration is invalid."""

    def __init__(self, detail: str) -> None:
        super().__init__("CONFIGURATION_ERROR", _describe("CONFIGURATION_ERROR", detail=detail))


class MalformedRequestError(RepoListError):
    """Raised when a request URL cannot be built. Indicates a programming error."""

    def __init__(self, detail: str | None = None) -> None:
        super().__init__("INVALID_URL", _describe("INVALID_URL"))
        self.detail = detail


class InvalidResponseError(RepoListError):
    """Raised when the server reply is not a usable HTTP response."""

    def __init__(self, detail: str | None = None) -> None:
        super().__init__("INVALID_RESPONSE", _describe("INVALID_RESPONSE"))
        self.detail = detail


class StatusCodeError(RepoListError):
    """Raised on non-2xx responses."""

    def __init__(self, status_code: int) -> None:
        super().__init__("HTTP_ERROR", _describe("HTTP_ERROR", status_code=status_code))
        self.status_code = status_code


class MalformedBodyError(RepoListError):
    """Raised when a response body cannot be decoded into the expected model."""

    def __init__(self, detail: str) -> None:
        super().__init__("DECODING_ERROR", _describe("DECODING_ERROR", detail=detail))
        self.detail = detail


class NetworkError(RepoListError):
    """Raised on connectivity failures (DNS, connect, read, timeouts)."""

    def __init__(self, detail: str) -> None:
        super().__init__("NETWORK_ERROR", _describe("NETWORK_ERROR", detail=detail))
        self.detail = detail


class RateLimitedError(RepoListError):
    """Raised when the API quota is exhausted."""

    def __init__(self, retry_after: int | None = None) -> None:
        if retry_after is None:
            message = _describe("RATE_LIMITED_UNKNOWN")
        else:
            message = _describe("RATE_LIMITED", retry_after=retry_after)
        super().__init__("RATE_LIMITED", message)
        self.retry_after = retry_after


def describe_error(error: BaseException) -> str:
    """
    Return a message suitable for showing to a user.

    Args:
        error: Any exception raised while loading

    Returns:
        The description for RepoList errors, otherwise the exception text
        (or its class name when the text is empty)
    """
    if isinstance(error, RepoListError):
        return error.message
    return str(error) or type(error).__name__
