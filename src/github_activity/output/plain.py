"""Plain text report renderer."""

from datetime import datetime

from github_activity.models.activity import ActivityReport


def _ts(value: datetime | None) -> str:
    return value.isoformat() if value else "N/A"


def render_plain(report: ActivityReport) -> str:
    """Render a report as plain text."""
    summary = report.summary
    lines = [
        f"User: {report.username}",
        f"Time Period: {report.window.start.isoformat()} to {report.window.end.isoformat()}",
        f"Total Commit Contributions: {summary.total_commits}",
        f"Total Issue Contributions: {summary.total_issues}",
        f"Total Pull Request Contributions: {summary.total_pull_requests}",
        f"Total Pull Request Review Contributions: {summary.total_reviews}",
        "",
        "Contribution Calendar:",
        f"  Total Contributions: {summary.total_contributions}",
    ]
    for day in summary.calendar.days:
        lines.append(
            f"    {day.date.isoformat()}: {day.count} contributions (weekday {day.weekday})"
        )
    lines.append("")

    lines.append("Repository Contributions:")
    for bucket in report.commit_buckets:
        lines.append(f"- {bucket.repository.name_with_owner}: {bucket.count} commits")
    lines.append("")

    lines.append("Issue Contributions:")
    for issue in report.issues:
        lines.extend(
            [
                f"- Issue #{issue.number}: {issue.title}",
                f"  Repository: {issue.repository.name_with_owner}",
                f"  URL: {issue.url}",
                f"  Created: {_ts(issue.created_at)}",
                f"  State: {issue.state}",
                f"  Closed: {_ts(issue.closed_at)}",
            ]
        )
    lines.append("")

    lines.append("Pull Request Contributions:")
    for pr in report.pull_requests:
        lines.extend(
            [
                f"- PR #{pr.number}: {pr.title}",
                f"  Repository: {pr.repository.name_with_owner}",
                f"  URL: {pr.url}",
                f"  Created: {_ts(pr.created_at)}",
                f"  State: {pr.state}",
                f"  Merged: {str(pr.merged).lower()}",
                f"  Merged At: {_ts(pr.merged_at)}",
                f"  Closed: {_ts(pr.closed_at)}",
            ]
        )
    lines.append("")

    lines.append("Pull Request Review Contributions:")
    for review in report.reviews:
        lines.extend(
            [
                f"- PR Review for PR #{review.pull_request.number}: {review.pull_request.title}",
                f"  URL: {review.pull_request.url}",
                f"  Occurred At: {_ts(review.occurred_at)}",
            ]
        )

    return "\n".join(lines) + "\n"
