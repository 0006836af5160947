"""GitHub Activity - Report a user's GitHub contributions over a date window.

This package fetches a user's contribution summary, calendar, commits per
repository, issues, pull requests and pull-request reviews from the GitHub
GraphQL API and renders them as plain text, Markdown or JSON.

Example usage:
    ```python
    from github_activity import GitHubActivity, render

    async with GitHubActivity(token="ghp_xxx") as client:
        report = await client.get_report("torvalds", period="1w")
        print(render(report, "markdown"))
    ```
"""

from github_activity._version import version as __version__
from github_activity.config import Config
from github_activity.exceptions import (
    AuthenticationError,
    ConfigurationError,
    FetchFailedError,
    FetchTimeoutError,
    GitHubActivityError,
    GitHubAPIError,
    GitHubGraphQLError,
    PaginationOverrunError,
    UserNotFoundError,
)
from github_activity.models import (
    ActivityReport,
    CommitBucket,
    ContributionCalendar,
    ContributionDay,
    ContributionSummary,
    DateWindow,
    IssueItem,
    PullRequestItem,
    PullRequestReviewItem,
    RepositoryRef,
)
from github_activity.output import OutputFormat, render
from github_activity.sdk import GitHubActivity
from github_activity.services.report_filter import filter_report

__all__ = [
    "__version__",
    # Main SDK class
    "GitHubActivity",
    # Configuration
    "Config",
    # Exceptions
    "GitHubActivityError",
    "ConfigurationError",
    "GitHubAPIError",
    "AuthenticationError",
    "GitHubGraphQLError",
    "UserNotFoundError",
    "FetchFailedError",
    "PaginationOverrunError",
    "FetchTimeoutError",
    # Models
    "DateWindow",
    "RepositoryRef",
    "CommitBucket",
    "ContributionDay",
    "ContributionCalendar",
    "ContributionSummary",
    "IssueItem",
    "PullRequestItem",
    "PullRequestReviewItem",
    "ActivityReport",
    # Filtering and output
    "filter_report",
    "OutputFormat",
    "render",
]
