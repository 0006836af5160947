"""Data models for the GitHub activity reporter."""

from github_activity.models.activity import (
    ActivityReport,
    IssueItem,
    PullRequestItem,
    PullRequestReviewItem,
    PullRequestSummary,
)
from github_activity.models.contribution import (
    ContributionCalendar,
    ContributionDay,
    ContributionSummary,
    ContributionWeek,
)
from github_activity.models.repository import CommitBucket, RepositoryRef
from github_activity.models.window import DateWindow

__all__ = [
    "DateWindow",
    "RepositoryRef",
    "CommitBucket",
    "ContributionDay",
    "ContributionWeek",
    "ContributionCalendar",
    "ContributionSummary",
    "IssueItem",
    "PullRequestItem",
    "PullRequestSummary",
    "PullRequestReviewItem",
    "ActivityReport",
]
