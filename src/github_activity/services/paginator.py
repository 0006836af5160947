"""Drains one cursor-paginated contributions connection."""

import logging
from dataclasses import dataclass
from typing import Any

from github_activity.exceptions import (
    FetchFailedError,
    GitHubActivityError,
    PaginationOverrunError,
    UserNotFoundError,
)
from github_activity.models.window import DateWindow
from github_activity.services.github_graphql_client import Transport
from github_activity.services.queries import Connection
from github_activity.utils.pagination import PageState, parse_page, step

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 25
DEFAULT_MAX_PAGES = 100


@dataclass(frozen=True)
class PaginatedResult:
    """All nodes of a connection plus the server-reported total.

    `total_count` comes from the first page; `nodes` is authoritative when the
    two disagree.
    """

    connection: Connection
    nodes: tuple[dict[str, Any], ...]
    total_count: int | None


def contributions_collection(data: dict[str, Any], username: str) -> dict[str, Any]:
    """Return `user.contributionsCollection` from a response.

    Raises:
        UserNotFoundError: If the response carries no user
        ValueError: If the collection is missing
    """
    user = data.get("user")
    if not user:
        raise UserNotFoundError(username)

    collection = user.get("contributionsCollection")
    if not isinstance(collection, dict):
        raise ValueError("Response is missing contributionsCollection")
    return collection


class Paginator:
    """Fetches every page of one connection, strictly in sequence."""

    def __init__(
        self,
        transport: Transport,
        connection: Connection,
        page_size: int = DEFAULT_PAGE_SIZE,
        max_pages: int = DEFAULT_MAX_PAGES,
    ):
        if connection not in Connection.paginated():
            raise ValueError(f"{connection.value} is not a paginated connection")
        if page_size < 1:
            raise ValueError("page_size must be positive")
        if max_pages < 1:
            raise ValueError("max_pages must be positive")

        self.transport = transport
        self.connection = connection
        self.page_size = page_size
        self.max_pages = max_pages

    async def fetch_all(self, username: str, window: DateWindow) -> PaginatedResult:
        """Fetch all nodes of the connection.

        Args:
            username: GitHub username
            window: Contribution window

        Returns:
            PaginatedResult with nodes in server-delivery order

        Raises:
            FetchFailedError: If any page fails; partial nodes are discarded
            PaginationOverrunError: If the server is still reporting pages after max_pages
        """
        logger.debug(
            "Paginating %s for %s (page size %d)",
            self.connection.value,
            username,
            self.page_size,
        )

        state = PageState()
        while not state.done:
            if state.pages >= self.max_pages:
                logger.error(
                    "Pagination of %s exceeded %d pages", self.connection.value, self.max_pages
                )
                raise PaginationOverrunError(self.connection, self.max_pages)

            variables = {
                "username": username,
                **window.as_variables(),
                "first": self.page_size,
                "after": state.cursor,
            }

            try:
                data = await self.transport.execute(self.connection.operation_name, variables)
                collection = contributions_collection(data, username)
                page = parse_page(collection.get(self.connection.field))
                state = step(state, page)
            except (GitHubActivityError, ValueError) as e:
                logger.error(
                    "Failed to fetch %s page %d: %s", self.connection.value, state.pages + 1, e
                )
                raise FetchFailedError(self.connection, e) from e

            logger.debug(
                "Fetched %d %s nodes on page %d (has next: %s)",
                len(page.nodes),
                self.connection.value,
                state.pages,
                not state.done,
            )

        if state.total_count is not None and state.total_count != len(state.nodes):
            logger.debug(
                "%s reported totalCount %d but delivered %d nodes",
                self.connection.value,
                state.total_count,
                len(state.nodes),
            )

        return PaginatedResult(
            connection=self.connection,
            nodes=state.nodes,
            total_count=state.total_count,
        )
