"""Markdown report renderer."""

from datetime import datetime

from github_activity.models.activity import ActivityReport


def _cell(value: object) -> str:
    """Table cell text; backslashes, pipes and newlines would break the row."""
    if value is None:
        return "N/A"
    if isinstance(value, datetime):
        value = value.isoformat()
    return str(value).replace("\\", "\\\\").replace("|", "\\|").replace("\n", " ")


def _table(headers: list[str], rows: list[list[object]]) -> list[str]:
    lines = [
        "| " + " | ".join(headers) + " |",
        "|" + "|".join("-" * (len(h) + 2) for h in headers) + "|",
    ]
    for row in rows:
        lines.append("| " + " | ".join(_cell(v) for v in row) + " |")
    return lines


def render_markdown(report: ActivityReport) -> str:
    """Render a report as Markdown with one table per contribution kind."""
    summary = report.summary
    lines = [
        f"# GitHub Activity Report for {report.username}",
        "",
        f"**Time Period:** {report.window.start.isoformat()} to {report.window.end.isoformat()}",
        "",
        "## Summary",
        "",
        f"- **Total Commit Contributions:** {summary.total_commits}",
        f"- **Total Issue Contributions:** {summary.total_issues}",
        f"- **Total Pull Request Contributions:** {summary.total_pull_requests}",
        f"- **Total Pull Request Review Contributions:** {summary.total_reviews}",
        "",
        "## Contribution Calendar",
        "",
        f"**Total Contributions:** {summary.total_contributions}",
        "",
    ]
    for day in summary.calendar.days:
        lines.append(f"* {day.date.isoformat()}: {day.count} contributions (weekday {day.weekday})")
    lines.append("")

    lines += ["## Repository Contributions", ""]
    lines += _table(
        ["Repository", "Commits"],
        [[b.repository.name_with_owner, b.count] for b in report.commit_buckets],
    )
    lines.append("")

    lines += ["## Issue Contributions", ""]
    lines += _table(
        ["Issue #", "Title", "Repository", "URL", "Created At", "State", "Closed At"],
        [
            [i.number, i.title, i.repository.name_with_owner, i.url, i.created_at, i.state, i.closed_at]
            for i in report.issues
        ],
    )
    lines.append("")

    lines += ["## Pull Request Contributions", ""]
    lines += _table(
        ["PR #", "Title", "Repository", "URL", "Created At", "State", "Merged", "Merged At", "Closed At"],
        [
            [
                p.number,
                p.title,
                p.repository.name_with_owner,
                p.url,
                p.created_at,
                p.state,
                str(p.merged).lower(),
                p.merged_at,
                p.closed_at,
            ]
            for p in report.pull_requests
        ],
    )
    lines.append("")

    lines += ["## Pull Request Review Contributions", ""]
    lines += _table(
        ["PR #", "Title", "URL", "Occurred At"],
        [
            [r.pull_request.number, r.pull_request.title, r.pull_request.url, r.occurred_at]
            for r in report.reviews
        ],
    )

    return "\n".join(lines) + "\n"
