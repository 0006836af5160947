"""JSON rendering and report file output."""

import json
from pathlib import Path
from typing import Any

from github_activity.models.activity import ActivityReport


def build_report(report: ActivityReport) -> dict[str, Any]:
    """Build a JSON-serializable dictionary from a report."""
    summary = report.summary
    busiest = summary.calendar.busiest_day()

    return {
        "username": report.username,
        "period": {
            "from": report.window.start.isoformat(),
            "to": report.window.end.isoformat(),
        },
        "summary": {
            "total_contributions": summary.total_contributions,
            "commits": summary.total_commits,
            "issues": summary.total_issues,
            "pull_requests": summary.total_pull_requests,
            "reviews": summary.total_reviews,
            "restricted": summary.restricted_contributions,
            "current_streak": summary.calendar.current_streak(),
            "longest_streak": summary.calendar.longest_streak(),
            "busiest_day": busiest.date.isoformat() if busiest else None,
            "busiest_day_count": busiest.count if busiest else 0,
        },
        "calendar": summary.calendar.model_dump(mode="json"),
        "commit_contributions": [
            {"repository": b.repository.name_with_owner, "commits": b.count}
            for b in report.commit_buckets
        ],
        "issues": [i.model_dump(mode="json") for i in report.issues],
        "pull_requests": [p.model_dump(mode="json") for p in report.pull_requests],
        "reviews": [r.model_dump(mode="json") for r in report.reviews],
    }


def render_json(report: ActivityReport) -> str:
    """Render a report as pretty-printed JSON."""
    return json.dumps(build_report(report), indent=2, ensure_ascii=False) + "\n"


def write_report(content: str, output_path: Path) -> Path:
    """Write rendered report text to a file.

    Args:
        content: Rendered report
        output_path: Output file path

    Returns:
        Path to written file
    """
    # Ensure parent directory exists
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w", encoding="utf-8") as f:
        f.write(content)

    return output_path
