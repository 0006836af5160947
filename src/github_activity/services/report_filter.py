"""Repository and organization filtering of a finished report."""

import logging

from github_activity.models.activity import ActivityReport
from github_activity.models.repository import RepositoryRef

logger = logging.getLogger(__name__)


def matches_repository(
    repository: RepositoryRef,
    repo_filter: str | None = None,
    org_filter: str | None = None,
) -> bool:
    """Check a repository against every filter that is set."""
    if repo_filter is not None and repository.name_with_owner != repo_filter:
        return False
    if org_filter is not None and repository.owner != org_filter:
        return False
    return True


def filter_report(
    report: ActivityReport,
    repo_filter: str | None = None,
    org_filter: str | None = None,
) -> ActivityReport:
    """Narrow a report to one repository and/or organization.

    Commit buckets, issues and pull requests are filtered. Reviews carry no
    repository and are kept as-is. Summary counters and the calendar still
    describe the whole window.

    Args:
        report: Unfiltered report
        repo_filter: Exact `owner/name` to keep
        org_filter: Owner to keep

    Returns:
        A new report, or the same report when no filter is set
    """
    if repo_filter is None and org_filter is None:
        return report

    def keep(repository: RepositoryRef) -> bool:
        return matches_repository(repository, repo_filter, org_filter)

    filtered = report.model_copy(
        update={
            "commit_buckets": tuple(b for b in report.commit_buckets if keep(b.repository)),
            "issues": tuple(i for i in report.issues if keep(i.repository)),
            "pull_requests": tuple(p for p in report.pull_requests if keep(p.repository)),
        }
    )

    logger.debug(
        "Filtered report (repo=%s, org=%s): %d/%d repositories, %d/%d issues, %d/%d pull requests",
        repo_filter,
        org_filter,
        len(filtered.commit_buckets),
        len(report.commit_buckets),
        len(filtered.issues),
        len(report.issues),
        len(filtered.pull_requests),
        len(report.pull_requests),
    )
    return filtered
