"""Exceptions for the GitHub activity reporter.

Exception Hierarchy:
    GitHubActivityError (base)
    ├── ConfigurationError (invalid or conflicting inputs, detected before any request)
    ├── GitHubAPIError (HTTP failures with status codes)
    │   └── AuthenticationError (401, token rejected)
    ├── GitHubGraphQLError (GraphQL `errors` array in the response)
    ├── UserNotFoundError (response carried no user)
    ├── FetchFailedError (one fetch failed; fatal for the whole report)
    │   └── PaginationOverrunError (iteration cap exceeded while paginating)
    └── FetchTimeoutError (caller-level timeout elapsed)

Usage:
    - Transport errors (GitHubAPIError, GitHubGraphQLError) are raised by the
      GraphQL client and wrapped into FetchFailedError by the paginator and
      aggregator, so callers only need to handle FetchFailedError.
    - ConfigurationError is always raised before any network activity.
"""

from typing import Any

__all__ = [
    "GitHubActivityError",
    "ConfigurationError",
    "GitHubAPIError",
    "AuthenticationError",
    "GitHubGraphQLError",
    "UserNotFoundError",
    "FetchFailedError",
    "PaginationOverrunError",
    "FetchTimeoutError",
]


class GitHubActivityError(Exception):
    """Base exception for all GitHub activity reporter errors."""

    pass


class ConfigurationError(GitHubActivityError):
    """Raised when command-line or SDK inputs are invalid or conflicting."""

    pass


class GitHubAPIError(GitHubActivityError):
    """Raised when the HTTP request fails or returns an error status code."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_body: Any = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response_body = response_body


class AuthenticationError(GitHubAPIError):
    """Raised when GitHub rejects the configured token (HTTP 401)."""

    def __init__(
        self,
        message: str,
        status_code: int | None = 401,
        response_body: Any = None,
    ):
        super().__init__(message, status_code=status_code, response_body=response_body)


class GitHubGraphQLError(GitHubActivityError):
    """Exception for GraphQL API errors."""

    def __init__(self, message: str, errors: list | None = None):
        super().__init__(message)
        self.errors = errors or []


class UserNotFoundError(GitHubActivityError):
    """Raised when a GitHub user is not found."""

    def __init__(self, username: str):
        super().__init__(f"User not found: {username}")
        self.username = username


class FetchFailedError(GitHubActivityError):
    """Raised when the base query or a paginated connection could not be fetched.

    A failed fetch aborts the whole report: no partial ActivityReport is ever
    returned.

    Attributes:
        connection: The Connection that failed.
        cause: The underlying exception.
    """

    def __init__(self, connection: Any, cause: BaseException | None = None, message: str | None = None):
        name = getattr(connection, "value", connection)
        if message is None:
            message = f"Failed to fetch {name}: {cause}"
        super().__init__(message)
        self.connection = connection
        self.cause = cause


class PaginationOverrunError(FetchFailedError):
    """Raised when a connection keeps reporting more pages past the iteration cap.

    This signals server or contract misbehavior, not legitimate data volume.
    """

    def __init__(self, connection: Any, max_pages: int):
        name = getattr(connection, "value", connection)
        super().__init__(
            connection,
            cause=None,
            message=f"Pagination of {name} exceeded {max_pages} pages without completing",
        )
        self.max_pages = max_pages


class FetchTimeoutError(GitHubActivityError):
    """Raised when the caller-level fetch timeout elapses."""

    def __init__(self, timeout: float):
        super().__init__(f"Fetching activity timed out after {timeout:g} seconds")
        self.timeout = timeout
