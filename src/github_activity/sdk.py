"""GitHub activity SDK - High-level API for building activity reports."""

import asyncio
import logging
from datetime import date, datetime

import httpx

from github_activity.config import DEFAULT_GRAPHQL_URL, Config
from github_activity.exceptions import (
    ConfigurationError,
    FetchTimeoutError,
    GitHubActivityError,
)
from github_activity.models.activity import ActivityReport
from github_activity.models.window import DateWindow
from github_activity.services.aggregator import ActivityAggregator
from github_activity.services.github_graphql_client import GitHubGraphQLClient
from github_activity.services.report_filter import filter_report
from github_activity.utils.validation import validate_filters, validate_username

logger = logging.getLogger(__name__)


class GitHubActivity:
    """High-level SDK for a user's GitHub contribution activity.

    Example usage:
        ```python
        from github_activity import GitHubActivity

        async with GitHubActivity(token="ghp_xxx") as client:
            report = await client.get_report("torvalds", period="1w")
            acme = await client.get_report("octocat", period="1m", org="acme")
        ```

    Args:
        token: GitHub personal access token (required by the GraphQL API)
        graphql_url: GitHub GraphQL API URL (default: https://api.github.com/graphql)
        config: Full configuration; overrides token and graphql_url when given
        http_transport: Optional httpx transport, e.g. for tests
    """

    def __init__(
        self,
        token: str | None = None,
        graphql_url: str = DEFAULT_GRAPHQL_URL,
        config: Config | None = None,
        http_transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._config = config or Config(
            github_token=token,
            github_graphql_url=graphql_url,
        )
        self._http_transport = http_transport
        self._graphql_client: GitHubGraphQLClient | None = None
        self._aggregator: ActivityAggregator | None = None
        self._initialized = False

    @property
    def is_authenticated(self) -> bool:
        """Check if a token is configured."""
        return self._config.is_authenticated

    async def __aenter__(self) -> "GitHubActivity":
        """Async context manager entry."""
        await self._initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.close()

    async def _initialize(self) -> None:
        """Initialize clients."""
        if self._initialized:
            return

        if not self._config.is_authenticated:
            raise ConfigurationError(
                "A GitHub token is required. Set GITHUB_TOKEN environment variable."
            )

        self._graphql_client = GitHubGraphQLClient(
            config=self._config,
            http_transport=self._http_transport,
        )
        self._aggregator = ActivityAggregator(
            self._graphql_client,
            page_sizes=self._config.page_sizes,
            max_pages=self._config.max_pages,
        )

        self._initialized = True
        logger.debug("GitHubActivity initialized (endpoint=%s)", self._config.github_graphql_url)

    async def close(self) -> None:
        """Close all HTTP connections."""
        if self._graphql_client:
            await self._graphql_client.close()
        self._initialized = False
        logger.debug("GitHubActivity closed")

    def _ensure_initialized(self) -> None:
        """Ensure the client is initialized."""
        if not self._initialized:
            raise GitHubActivityError(
                "Client not initialized. Use 'async with GitHubActivity(...) as client:'"
            )

    async def collect(self, username: str, window: DateWindow) -> ActivityReport:
        """Fetch the unfiltered report for a user and window.

        Honors `fetch_timeout` from the configuration; on expiry every pending
        fetch is cancelled.

        Raises:
            FetchFailedError: If any fetch fails
            FetchTimeoutError: If the configured timeout elapses
        """
        self._ensure_initialized()
        assert self._aggregator is not None

        timeout = self._config.fetch_timeout
        try:
            return await asyncio.wait_for(
                self._aggregator.collect(username, window),
                timeout=timeout,
            )
        except asyncio.TimeoutError:
            logger.error("Fetching activity for %s timed out after %ss", username, timeout)
            raise FetchTimeoutError(timeout) from None

    async def get_report(
        self,
        username: str,
        period: str | None = None,
        start: str | date | datetime | None = None,
        end: str | date | datetime | None = None,
        repo: str | None = None,
        org: str | None = None,
    ) -> ActivityReport:
        """Fetch and filter a user's activity report.

        Inputs are validated before any request is made.

        Args:
            username: GitHub username
            period: Relative window such as "7d", "2w" or "1m"
            start: Explicit window start (exclusive with period)
            end: Explicit window end (exclusive with period)
            repo: Keep only this `owner/name` repository
            org: Keep only repositories owned by this organization or user

        Returns:
            Filtered ActivityReport

        Raises:
            ConfigurationError: If inputs are invalid or conflicting
            FetchFailedError: If any fetch fails
        """
        username = validate_username(username)
        window = DateWindow.resolve(period=period, start=start, end=end)
        repo, org = validate_filters(repo, org)

        self._ensure_initialized()
        logger.info("Fetching activity report for %s", username)

        report = await self.collect(username, window)
        return filter_report(report, repo_filter=repo, org_filter=org)
