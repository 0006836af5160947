"""Contribution item models and the consolidated activity report."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from github_activity.models.contribution import ContributionSummary
from github_activity.models.repository import CommitBucket, RepositoryRef
from github_activity.models.window import DateWindow


class IssueItem(BaseModel):
    """Issue opened by the user within the window."""

    model_config = ConfigDict(frozen=True)

    number: int
    title: str
    url: str
    created_at: datetime
    state: str  # OPEN, CLOSED
    closed_at: datetime | None = None
    repository: RepositoryRef

    @model_validator(mode="after")
    def _closed_at_requires_closed(self) -> "IssueItem":
        if self.closed_at is not None and not self.is_closed:
            raise ValueError(f"issue #{self.number} has closedAt but state {self.state}")
        return self

    @classmethod
    def from_graphql(cls, node: dict[str, Any]) -> "IssueItem":
        """Create from an issueContributions node."""
        issue = node.get("issue") or {}
        return cls(
            number=issue.get("number"),
            title=issue.get("title"),
            url=issue.get("url"),
            created_at=issue.get("createdAt"),
            state=issue.get("state"),
            closed_at=issue.get("closedAt"),
            repository=RepositoryRef.from_graphql(issue.get("repository") or {}),
        )

    @property
    def is_closed(self) -> bool:
        return self.state.upper() == "CLOSED"


class PullRequestItem(BaseModel):
    """Pull request opened by the user within the window."""

    model_config = ConfigDict(frozen=True)

    number: int
    title: str
    url: str
    created_at: datetime
    state: str  # OPEN, CLOSED, MERGED
    merged: bool = False
    merged_at: datetime | None = None
    closed_at: datetime | None = None
    repository: RepositoryRef

    @model_validator(mode="after")
    def _merged_requires_merged_at(self) -> "PullRequestItem":
        if self.merged and self.merged_at is None:
            raise ValueError(f"pull request #{self.number} is merged but has no mergedAt")
        return self

    @classmethod
    def from_graphql(cls, node: dict[str, Any]) -> "PullRequestItem":
        """Create from a pullRequestContributions node."""
        pr = node.get("pullRequest") or {}
        return cls(
            number=pr.get("number"),
            title=pr.get("title"),
            url=pr.get("url"),
            created_at=pr.get("createdAt"),
            state=pr.get("state"),
            merged=pr.get("merged", False),
            merged_at=pr.get("mergedAt"),
            closed_at=pr.get("closedAt"),
            repository=RepositoryRef.from_graphql(pr.get("repository") or {}),
        )


class PullRequestSummary(BaseModel):
    """Pull request embedded in a review; carries no repository."""

    model_config = ConfigDict(frozen=True)

    number: int
    title: str
    url: str


class PullRequestReviewItem(BaseModel):
    """Review the user submitted within the window."""

    model_config = ConfigDict(frozen=True)

    pull_request: PullRequestSummary
    occurred_at: datetime

    @classmethod
    def from_graphql(cls, node: dict[str, Any]) -> "PullRequestReviewItem":
        """Create from a pullRequestReviewContributions node."""
        review = node.get("pullRequestReview") or {}
        pr = review.get("pullRequest") or {}
        return cls(
            pull_request=PullRequestSummary(
                number=pr.get("number"),
                title=pr.get("title"),
                url=pr.get("url"),
            ),
            occurred_at=node.get("occurredAt"),
        )


class ActivityReport(BaseModel):
    """Consolidated activity for one user over one window.

    Built once by the aggregator and read-only afterwards; filtering produces
    a new report.
    """

    model_config = ConfigDict(frozen=True)

    username: str
    window: DateWindow
    summary: ContributionSummary
    commit_buckets: tuple[CommitBucket, ...] = Field(default_factory=tuple)
    issues: tuple[IssueItem, ...] = Field(default_factory=tuple)
    pull_requests: tuple[PullRequestItem, ...] = Field(default_factory=tuple)
    reviews: tuple[PullRequestReviewItem, ...] = Field(default_factory=tuple)

    @property
    def repositories(self) -> list[str]:
        """Repositories with commits, issues or pull requests, in first-seen order."""
        seen: dict[str, None] = {}
        for bucket in self.commit_buckets:
            seen.setdefault(bucket.repository.name_with_owner)
        for item in (*self.issues, *self.pull_requests):
            seen.setdefault(item.repository.name_with_owner)
        return list(seen)

    @property
    def merged_pull_requests(self) -> list[PullRequestItem]:
        return [pr for pr in self.pull_requests if pr.merged]
