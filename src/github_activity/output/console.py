"""Rich console output for status messages.

Status output goes to stderr so stdout carries only the rendered report.
"""

from rich.console import Console as RichConsole
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from github_activity.models.activity import ActivityReport


class Console:
    """Wrapper for rich console output."""

    def __init__(self):
        self.console = RichConsole(stderr=True)

    def print_error(self, message: str):
        """Print error message."""
        self.console.print(f"[red]Error:[/red] {message}", highlight=False)

    def print_warning(self, message: str):
        """Print warning message."""
        self.console.print(f"[yellow]Warning:[/yellow] {message}", highlight=False)

    def create_progress(self) -> Progress:
        """Create a spinner shown while fetching."""
        return Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=self.console,
            transient=True,
        )

    def print_summary(self, report: ActivityReport):
        """Print the report's counters as a table."""
        table = Table(title=f"Activity for {report.username}", show_header=False, expand=False)
        table.add_column("Metric", style="dim")
        table.add_column("Value")

        summary = report.summary
        table.add_row("Total Contributions", str(summary.total_contributions))
        table.add_row("Commits", str(summary.total_commits))
        table.add_row("Issues", f"{summary.total_issues} ({len(report.issues)} listed)")
        table.add_row(
            "Pull Requests",
            f"{summary.total_pull_requests} ({len(report.pull_requests)} listed)",
        )
        table.add_row("Reviews", f"{summary.total_reviews} ({len(report.reviews)} listed)")
        table.add_row("Repositories", str(len(report.repositories)))

        self.console.print(table)

    def print_output_path(self, path: str):
        """Print output file path."""
        self.console.print(f"[green]Report saved to:[/green] {path}")
