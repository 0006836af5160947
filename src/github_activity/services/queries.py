"""GraphQL documents for the base query and the three paginated connections."""

from enum import Enum

BASE_OPERATION = "UserContributionSummary"

# Aggregate counters, calendar and per-repository commit totals.
# commitContributionsByRepository is not paginated; the server caps it at
# maxRepositories entries.
BASE_QUERY = """
query UserContributionSummary($username: String!, $from: DateTime!, $to: DateTime!) {
  user(login: $username) {
    contributionsCollection(from: $from, to: $to) {
      totalCommitContributions
      totalIssueContributions
      totalPullRequestContributions
      totalPullRequestReviewContributions
      restrictedContributionsCount
      contributionCalendar {
        totalContributions
        weeks {
          contributionDays {
            date
            contributionCount
            weekday
          }
        }
      }
      commitContributionsByRepository(maxRepositories: 100) {
        repository {
          nameWithOwner
          updatedAt
        }
        contributions {
          totalCount
        }
      }
    }
  }
}
"""

ISSUES_QUERY = """
query UserIssueContributions(
  $username: String!, $from: DateTime!, $to: DateTime!, $first: Int!, $after: String
) {
  user(login: $username) {
    contributionsCollection(from: $from, to: $to) {
      issueContributions(first: $first, after: $after) {
        totalCount
        pageInfo {
          endCursor
          hasNextPage
        }
        nodes {
          occurredAt
          issue {
            number
            title
            url
            createdAt
            state
            closedAt
            repository {
              nameWithOwner
              updatedAt
            }
          }
        }
      }
    }
  }
}
"""

PULL_REQUESTS_QUERY = """
query UserPullRequestContributions(
  $username: String!, $from: DateTime!, $to: DateTime!, $first: Int!, $after: String
) {
  user(login: $username) {
    contributionsCollection(from: $from, to: $to) {
      pullRequestContributions(first: $first, after: $after) {
        totalCount
        pageInfo {
          endCursor
          hasNextPage
        }
        nodes {
          occurredAt
          pullRequest {
            number
            title
            url
            createdAt
            state
            merged
            mergedAt
            closedAt
            repository {
              nameWithOwner
              updatedAt
            }
          }
        }
      }
    }
  }
}
"""

# The embedded pull request deliberately carries no repository.
PULL_REQUEST_REVIEWS_QUERY = """
query UserPullRequestReviewContributions(
  $username: String!, $from: DateTime!, $to: DateTime!, $first: Int!, $after: String
) {
  user(login: $username) {
    contributionsCollection(from: $from, to: $to) {
      pullRequestReviewContributions(first: $first, after: $after) {
        totalCount
        pageInfo {
          endCursor
          hasNextPage
        }
        nodes {
          occurredAt
          pullRequestReview {
            pullRequest {
              number
              title
              url
            }
          }
        }
      }
    }
  }
}
"""


class Connection(str, Enum):
    """A fetch unit of the report: the base query or one paginated connection."""

    BASE = "base"
    ISSUES = "issues"
    PULL_REQUESTS = "pull_requests"
    PULL_REQUEST_REVIEWS = "pull_request_reviews"

    @property
    def operation_name(self) -> str:
        """GraphQL operation executed for this connection."""
        return _OPERATIONS[self]

    @property
    def field(self) -> str | None:
        """Field of contributionsCollection holding the connection."""
        return _FIELDS[self]

    @classmethod
    def paginated(cls) -> tuple["Connection", ...]:
        """The connections drained by the paginator, in report order."""
        return (cls.ISSUES, cls.PULL_REQUESTS, cls.PULL_REQUEST_REVIEWS)


_OPERATIONS = {
    Connection.BASE: BASE_OPERATION,
    Connection.ISSUES: "UserIssueContributions",
    Connection.PULL_REQUESTS: "UserPullRequestContributions",
    Connection.PULL_REQUEST_REVIEWS: "UserPullRequestReviewContributions",
}

_FIELDS = {
    Connection.BASE: None,
    Connection.ISSUES: "issueContributions",
    Connection.PULL_REQUESTS: "pullRequestContributions",
    Connection.PULL_REQUEST_REVIEWS: "pullRequestReviewContributions",
}

# Operation name -> query document, used by the transport.
QUERIES = {
    BASE_OPERATION: BASE_QUERY,
    "UserIssueContributions": ISSUES_QUERY,
    "UserPullRequestContributions": PULL_REQUESTS_QUERY,
    "UserPullRequestReviewContributions": PULL_REQUEST_REVIEWS_QUERY,
}
