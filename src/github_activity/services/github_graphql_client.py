"""GitHub GraphQL API client used as the report transport."""

import logging
from typing import Any, Optional, Protocol

import httpx
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from github_activity._version import version as __version__
from github_activity.config import Config, get_config
from github_activity.exceptions import (
    AuthenticationError,
    ConfigurationError,
    GitHubAPIError,
    GitHubGraphQLError,
)
from github_activity.services.queries import QUERIES

logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Executes a named GraphQL operation and returns its `data` object."""

    async def execute(self, operation_name: str, variables: dict[str, Any]) -> dict[str, Any]:
        ...


class _ServerError(GitHubAPIError):
    """HTTP 5xx response, retried before surfacing as GitHubAPIError."""


class GitHubGraphQLClient:
    """Async client for GitHub GraphQL API."""

    def __init__(
        self,
        config: Optional[Config] = None,
        http_transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config or get_config()
        self._http_transport = http_transport
        self._client: Optional[httpx.AsyncClient] = None

    def _get_headers(self) -> dict[str, str]:
        """Get headers for API requests."""
        if not self.config.github_token:
            raise ConfigurationError(
                "GitHub token is required for GraphQL API. "
                "Set GITHUB_TOKEN environment variable."
            )

        return {
            "Authorization": f"Bearer {self.config.github_token}",
            "Content-Type": "application/json",
            "User-Agent": f"github-activity/{__version__}",
        }

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                headers=self._get_headers(),
                timeout=self.config.request_timeout,
                transport=self._http_transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()

    async def __aenter__(self) -> "GitHubGraphQLClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    @retry(
        retry=retry_if_exception_type(
            (httpx.TimeoutException, httpx.ConnectError, _ServerError)
        ),
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=1, max=10),
        reraise=True,
    )
    async def _post(self, payload: dict[str, Any]) -> httpx.Response:
        client = await self._get_client()
        response = await client.post(self.config.github_graphql_url, json=payload)

        if response.status_code >= 500:
            logger.debug("GraphQL endpoint returned %d, retrying", response.status_code)
            raise _ServerError(
                f"GraphQL request failed with status {response.status_code}: {response.text}",
                status_code=response.status_code,
            )
        return response

    async def execute(
        self,
        operation_name: str,
        variables: Optional[dict[str, Any]] = None,
    ) -> dict[str, Any]:
        """Execute a named GraphQL operation.

        Args:
            operation_name: Name of an operation in the query contract
            variables: Query variables

        Returns:
            Query result data

        Raises:
            GitHubAPIError: If the request fails or returns a non-200 status
            AuthenticationError: If the token is rejected
            GitHubGraphQLError: If the response carries GraphQL errors
        """
        try:
            query = QUERIES[operation_name]
        except KeyError:
            raise ValueError(f"Unknown GraphQL operation: {operation_name}") from None

        payload: dict[str, Any] = {"query": query, "operationName": operation_name}
        if variables:
            payload["variables"] = variables

        logger.debug("Executing %s with %s", operation_name, variables)

        try:
            response = await self._post(payload)
        except GitHubAPIError:
            raise
        except httpx.HTTPError as e:
            raise GitHubAPIError(f"GraphQL request failed: {e}") from e

        if response.status_code == 401:
            raise AuthenticationError(
                "GitHub rejected the token (401 Unauthorized)",
                response_body=response.text,
            )

        if response.status_code != 200:
            raise GitHubAPIError(
                f"GraphQL request failed with status {response.status_code}: {response.text}",
                status_code=response.status_code,
                response_body=response.text,
            )

        try:
            result = response.json()
        except ValueError as e:
            raise GitHubAPIError(
                f"GraphQL response is not valid JSON: {e}",
                status_code=response.status_code,
                response_body=response.text,
            ) from e

        # Check for GraphQL errors
        if result.get("errors"):
            error_messages = [e.get("message", "Unknown error") for e in result["errors"]]
            raise GitHubGraphQLError(
                f"GraphQL errors: {'; '.join(error_messages)}",
                errors=result["errors"],
            )

        return result.get("data") or {}
