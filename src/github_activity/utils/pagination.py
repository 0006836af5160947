"""Cursor pagination state machine for GraphQL connections.

The functions here are pure: they never touch the network, so the paginator
loop can be driven (and tested) page by page.

Example connection object as returned by GitHub:
    {
        "totalCount": 42,
        "pageInfo": {"endCursor": "Y3Vyc29yOjI1", "hasNextPage": true},
        "nodes": [...]
    }
"""

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class PageInfo:
    """Cursor position reported by the server for one page."""

    end_cursor: Optional[str]
    has_next_page: bool


@dataclass(frozen=True)
class Page:
    """One page of a connection."""

    nodes: tuple[dict[str, Any], ...]
    page_info: PageInfo
    total_count: Optional[int] = None


@dataclass(frozen=True)
class PageState:
    """Accumulated pagination state for one connection.

    `cursor` is None before the first page; `done` flips once the server
    reports no further page.
    """

    cursor: Optional[str] = None
    nodes: tuple[dict[str, Any], ...] = field(default_factory=tuple)
    total_count: Optional[int] = None
    pages: int = 0
    done: bool = False


def parse_page(connection: Optional[dict[str, Any]]) -> Page:
    """Build a Page from a raw connection object.

    Raises:
        ValueError: If the connection or its pageInfo is missing, or a node is not an object
    """
    if not isinstance(connection, dict):
        raise ValueError("Response is missing the connection object")

    page_info = connection.get("pageInfo")
    if not isinstance(page_info, dict) or "hasNextPage" not in page_info:
        raise ValueError("Connection is missing pageInfo.hasNextPage")

    # `nodes` may be null when the page is empty
    nodes = connection.get("nodes") or []
    if not isinstance(nodes, list):
        raise ValueError("Connection nodes must be a list")
    for index, node in enumerate(nodes):
        if not isinstance(node, dict):
            raise ValueError(f"Connection node {index} is not an object: {node!r}")

    return Page(
        nodes=tuple(nodes),
        page_info=PageInfo(
            end_cursor=page_info.get("endCursor"),
            has_next_page=bool(page_info["hasNextPage"]),
        ),
        total_count=connection.get("totalCount"),
    )


def step(state: PageState, page: Page) -> PageState:
    """Advance the pagination state by one page.

    Nodes are appended in delivery order. The total count is taken from the
    first page only.

    Raises:
        ValueError: If the state is already done, or the page reports a next
            page without an end cursor
    """
    if state.done:
        raise ValueError("Pagination already finished")

    has_next = page.page_info.has_next_page
    if has_next and not page.page_info.end_cursor:
        raise ValueError("Server reported hasNextPage without an endCursor")

    return PageState(
        cursor=page.page_info.end_cursor if has_next else state.cursor,
        nodes=state.nodes + page.nodes,
        total_count=state.total_count if state.pages else page.total_count,
        pages=state.pages + 1,
        done=not has_next,
    )
