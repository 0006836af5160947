"""Builds an ActivityReport from the base query and three paginated connections."""

import asyncio
import logging
from typing import Any, Callable

from pydantic import BaseModel, ValidationError

from github_activity.exceptions import FetchFailedError, GitHubActivityError
from github_activity.models.activity import (
    ActivityReport,
    IssueItem,
    PullRequestItem,
    PullRequestReviewItem,
)
from github_activity.models.contribution import ContributionSummary
from github_activity.models.repository import CommitBucket
from github_activity.models.window import DateWindow
from github_activity.services.github_graphql_client import Transport
from github_activity.services.paginator import (
    DEFAULT_MAX_PAGES,
    DEFAULT_PAGE_SIZE,
    PaginatedResult,
    Paginator,
    contributions_collection,
)
from github_activity.services.queries import Connection

logger = logging.getLogger(__name__)

_ITEM_PARSERS: dict[Connection, Callable[[dict[str, Any]], BaseModel]] = {
    Connection.ISSUES: IssueItem.from_graphql,
    Connection.PULL_REQUESTS: PullRequestItem.from_graphql,
    Connection.PULL_REQUEST_REVIEWS: PullRequestReviewItem.from_graphql,
}


def _as_object(entry: Any, field: str) -> dict[str, Any]:
    if not isinstance(entry, dict):
        raise ValueError(f"{field} entry is not an object: {entry!r}")
    return entry


class ActivityAggregator:
    """Runs one full fetch cycle for a user and window."""

    def __init__(
        self,
        transport: Transport,
        page_sizes: dict[Connection, int] | None = None,
        max_pages: int = DEFAULT_MAX_PAGES,
    ):
        self.transport = transport
        self.page_sizes = page_sizes or {}
        self.max_pages = max_pages

    async def fetch_base(
        self, username: str, window: DateWindow
    ) -> tuple[ContributionSummary, tuple[CommitBucket, ...]]:
        """Run the base query for the summary, calendar and commit buckets.

        Raises:
            FetchFailedError: If the query fails or its response is malformed
        """
        logger.debug("Fetching contribution summary for %s", username)

        variables = {"username": username, **window.as_variables()}
        try:
            data = await self.transport.execute(Connection.BASE.operation_name, variables)
            collection = contributions_collection(data, username)
            summary = ContributionSummary.from_graphql(collection)
            buckets = tuple(
                CommitBucket.from_graphql(_as_object(entry, "commitContributionsByRepository"))
                for entry in collection.get("commitContributionsByRepository") or []
            )
        except (GitHubActivityError, ValueError) as e:
            logger.error("Failed to fetch contribution summary: %s", e)
            raise FetchFailedError(Connection.BASE, e) from e

        logger.debug(
            "Found %d contributions across %d repositories",
            summary.total_contributions,
            len(buckets),
        )
        return summary, buckets

    def _paginator(self, connection: Connection) -> Paginator:
        return Paginator(
            self.transport,
            connection,
            page_size=self.page_sizes.get(connection, DEFAULT_PAGE_SIZE),
            max_pages=self.max_pages,
        )

    async def fetch_connections(
        self, username: str, window: DateWindow
    ) -> dict[Connection, PaginatedResult]:
        """Drain the three paginated connections concurrently.

        All three are awaited to completion before any failure is raised.

        Raises:
            FetchFailedError: The first failure in connection order
        """
        connections = Connection.paginated()
        results = await asyncio.gather(
            *(self._paginator(c).fetch_all(username, window) for c in connections),
            return_exceptions=True,
        )

        failures = [r for r in results if isinstance(r, BaseException)]
        if failures:
            if len(failures) > 1:
                logger.debug("%d connections failed; reporting the first", len(failures))
            raise failures[0]

        return dict(zip(connections, results))

    @staticmethod
    def _parse_items(result: PaginatedResult) -> tuple[Any, ...]:
        parser = _ITEM_PARSERS[result.connection]
        try:
            return tuple(parser(node) for node in result.nodes)
        except ValidationError as e:
            logger.error("Malformed %s node: %s", result.connection.value, e)
            raise FetchFailedError(result.connection, e) from e

    async def collect(self, username: str, window: DateWindow) -> ActivityReport:
        """Collect the full activity report for a user.

        Args:
            username: GitHub username
            window: Contribution window

        Returns:
            ActivityReport with unfiltered lists

        Raises:
            FetchFailedError: If the base query or any connection fails
        """
        logger.info(
            "Collecting activity for %s from %s to %s",
            username,
            window.start.isoformat(),
            window.end.isoformat(),
        )

        summary, buckets = await self.fetch_base(username, window)
        results = await self.fetch_connections(username, window)

        report = ActivityReport(
            username=username,
            window=window,
            summary=summary,
            commit_buckets=buckets,
            issues=self._parse_items(results[Connection.ISSUES]),
            pull_requests=self._parse_items(results[Connection.PULL_REQUESTS]),
            reviews=self._parse_items(results[Connection.PULL_REQUEST_REVIEWS]),
        )

        logger.info(
            "Collected %d issues, %d pull requests and %d reviews for %s",
            len(report.issues),
            len(report.pull_requests),
            len(report.reviews),
            username,
        )
        return report
