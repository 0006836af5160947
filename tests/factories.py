"""Response builders and a scripted transport for tests."""

import asyncio
from datetime import datetime, timezone
from typing import Any

from github_activity.models import (
    ActivityReport,
    CommitBucket,
    ContributionSummary,
    DateWindow,
    IssueItem,
    PullRequestItem,
    PullRequestReviewItem,
)
from github_activity.services.queries import Connection

WINDOW = DateWindow(
    start=datetime(2025, 3, 1, tzinfo=timezone.utc),
    end=datetime(2025, 3, 12, tzinfo=timezone.utc),
)


def repository(name_with_owner: str) -> dict[str, Any]:
    return {"nameWithOwner": name_with_owner, "updatedAt": "2025-03-10T00:00:00Z"}


def issue_node(number: int, repo: str = "acme/api", state: str = "OPEN") -> dict[str, Any]:
    return {
        "occurredAt": "2025-03-02T00:00:00Z",
        "issue": {
            "number": number,
            "title": f"Issue {number}",
            "url": f"https://github.com/{repo}/issues/{number}",
            "createdAt": "2025-03-02T00:00:00Z",
            "state": state,
            "closedAt": "2025-03-03T00:00:00Z" if state == "CLOSED" else None,
            "repository": repository(repo),
        },
    }


def pr_node(number: int, repo: str = "acme/api", merged: bool = False) -> dict[str, Any]:
    return {
        "occurredAt": "2025-03-04T00:00:00Z",
        "pullRequest": {
            "number": number,
            "title": f"PR {number}",
            "url": f"https://github.com/{repo}/pull/{number}",
            "createdAt": "2025-03-04T00:00:00Z",
            "state": "MERGED" if merged else "OPEN",
            "merged": merged,
            "mergedAt": "2025-03-05T00:00:00Z" if merged else None,
            "closedAt": "2025-03-05T00:00:00Z" if merged else None,
            "repository": repository(repo),
        },
    }


def review_node(number: int) -> dict[str, Any]:
    return {
        "occurredAt": "2025-03-06T00:00:00Z",
        "pullRequestReview": {
            "pullRequest": {
                "number": number,
                "title": f"Reviewed PR {number}",
                "url": f"https://github.com/other/tool/pull/{number}",
            }
        },
    }


def connection_page(
    connection: Connection,
    nodes: list[dict[str, Any]],
    end_cursor: str | None = None,
    has_next: bool = False,
    total_count: int | None = None,
) -> dict[str, Any]:
    """`data` object for one page of a paginated connection."""
    return {
        "user": {
            "contributionsCollection": {
                connection.field: {
                    "totalCount": len(nodes) if total_count is None else total_count,
                    "pageInfo": {"endCursor": end_cursor, "hasNextPage": has_next},
                    "nodes": nodes,
                }
            }
        }
    }


def base_data(
    repos: dict[str, int] | None = None,
    total_commits: int = 12,
    total_issues: int = 2,
    total_pull_requests: int = 3,
    total_reviews: int = 1,
) -> dict[str, Any]:
    """`data` object for the base query."""
    repos = {"acme/api": 7, "acme/web": 4, "other/tool": 1} if repos is None else repos
    return {
        "user": {
            "contributionsCollection": {
                "totalCommitContributions": total_commits,
                "totalIssueContributions": total_issues,
                "totalPullRequestContributions": total_pull_requests,
                "totalPullRequestReviewContributions": total_reviews,
                "restrictedContributionsCount": 0,
                "contributionCalendar": {
                    "totalContributions": 18,
                    "weeks": [
                        {
                            "contributionDays": [
                                {"date": "2025-03-09", "contributionCount": 0, "weekday": 0},
                                {"date": "2025-03-10", "contributionCount": 3, "weekday": 1},
                                {"date": "2025-03-11", "contributionCount": 5, "weekday": 2},
                            ]
                        }
                    ],
                },
                "commitContributionsByRepository": [
                    {"repository": repository(name), "contributions": {"totalCount": count}}
                    for name, count in repos.items()
                ],
            }
        }
    }


class FakeTransport:
    """Transport returning scripted responses per operation.

    Each operation has a queue of `data` objects or exceptions. The last entry
    repeats once the queue is down to one item.
    """

    def __init__(self, responses: dict[Connection, list[Any]]):
        self.responses = {c.operation_name: list(items) for c, items in responses.items()}
        self.calls: list[tuple[str, dict[str, Any]]] = []

    async def execute(self, operation_name: str, variables: dict[str, Any]) -> dict[str, Any]:
        self.calls.append((operation_name, dict(variables)))
        # Yield like a real round-trip so concurrent paginators interleave
        await asyncio.sleep(0)

        queue = self.responses.get(operation_name)
        if not queue:
            raise AssertionError(f"Unexpected operation: {operation_name}")
        item = queue.pop(0) if len(queue) > 1 else queue[0]
        if isinstance(item, BaseException):
            raise item
        return item

    def calls_for(self, connection: Connection) -> list[dict[str, Any]]:
        return [v for name, v in self.calls if name == connection.operation_name]


def empty_connections() -> dict[Connection, list[Any]]:
    return {c: [connection_page(c, [])] for c in Connection.paginated()}


def sample_report(**overrides: Any) -> ActivityReport:
    """Parsed report built from the default base data and one item of each kind."""
    collection = base_data()["user"]["contributionsCollection"]
    fields: dict[str, Any] = {
        "username": "octocat",
        "window": WINDOW,
        "summary": ContributionSummary.from_graphql(collection),
        "commit_buckets": tuple(
            CommitBucket.from_graphql(e) for e in collection["commitContributionsByRepository"]
        ),
        "issues": (IssueItem.from_graphql(issue_node(1, state="CLOSED")),),
        "pull_requests": (PullRequestItem.from_graphql(pr_node(2, repo="acme/web", merged=True)),),
        "reviews": (PullRequestReviewItem.from_graphql(review_node(3)),),
    }
    fields.update(overrides)
    return ActivityReport(**fields)
