"""CLI interface for the GitHub activity reporter."""

import asyncio
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from github_activity import __version__
from github_activity.config import Config, get_config
from github_activity.exceptions import ConfigurationError, GitHubActivityError
from github_activity.models.activity import ActivityReport
from github_activity.models.window import DateWindow
from github_activity.output.console import Console as OutputConsole
from github_activity.output.formats import OutputFormat, infer_format, render
from github_activity.output.json_writer import write_report
from github_activity.sdk import GitHubActivity
from github_activity.services.report_filter import filter_report
from github_activity.utils.validation import validate_filters, validate_username

app = typer.Typer(
    name="github-activity",
    help="Report a user's GitHub activity over a date window",
    add_completion=False,
)

console = Console()

# Exit codes
EXIT_FETCH_ERROR = 1
EXIT_CONFIG_ERROR = 2


def version_callback(value: bool):
    """Print version and exit."""
    if value:
        console.print(f"github-activity version {__version__}")
        raise typer.Exit()


def setup_logging(verbose: bool = False, debug: bool = False):
    """Configure logging based on verbosity level."""
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
):
    """GitHub Activity - Report a user's GitHub contributions."""
    pass


@app.command()
def report(
    username: str = typer.Option(..., "--username", "-u", help="GitHub username"),
    period: Optional[str] = typer.Option(
        None,
        "--period",
        "-p",
        help="Relative window ending now: <number><d|w|m>, e.g. 7d, 2w, 1m (m = 30 days)",
    ),
    start: Optional[str] = typer.Option(
        None,
        "--from",
        help="Window start (YYYY-MM-DD or ISO 8601); requires --to",
    ),
    end: Optional[str] = typer.Option(
        None,
        "--to",
        help="Window end (YYYY-MM-DD or ISO 8601); requires --from",
    ),
    repo: Optional[str] = typer.Option(
        None,
        "--repo",
        "-r",
        help="Only include contributions to this repository (owner/name)",
    ),
    org: Optional[str] = typer.Option(
        None,
        "--org",
        help="Only include contributions to repositories owned by this organization",
    ),
    output_format: OutputFormat = typer.Option(
        OutputFormat.PLAIN,
        "--format",
        "-f",
        case_sensitive=False,
        help="Output format",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the report to a file; .md, .txt and .json extensions select the format",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Verbose output",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Debug logging",
    ),
):
    """Fetch and render a user's contribution activity.

    Collects:
    - Contribution summary and calendar
    - Commits per repository
    - Issues, pull requests and pull request reviews

    Examples:
        github-activity report -u torvalds -p 1w
        github-activity report -u octocat --from 2025-01-01 --to 2025-03-31 -f markdown
        github-activity report -u octocat -p 1m --org acme -o report.json
    """
    setup_logging(verbose=verbose, debug=debug)
    output_console = OutputConsole()

    # Everything below is validated before any request is made
    try:
        username = validate_username(username)
        window = DateWindow.resolve(period=period, start=start, end=end)
        repo, org = validate_filters(repo, org)
        config = get_config()
        if not config.is_authenticated:
            raise ConfigurationError(
                "GITHUB_TOKEN environment variable is required"
            )
    except ConfigurationError as e:
        output_console.print_error(str(e))
        raise typer.Exit(EXIT_CONFIG_ERROR)

    fmt = infer_format(output, output_format)

    try:
        activity = asyncio.run(_fetch_report(config, username, window, output_console))
    except KeyboardInterrupt:
        output_console.print_warning("Fetch cancelled")
        raise typer.Exit(EXIT_FETCH_ERROR)
    except GitHubActivityError as e:
        output_console.print_error(str(e))
        if verbose or debug:
            output_console.console.print_exception()
        raise typer.Exit(EXIT_FETCH_ERROR)

    activity = filter_report(activity, repo_filter=repo, org_filter=org)
    content = render(activity, fmt)

    if output is not None:
        try:
            output_file = write_report(content, output)
        except OSError as e:
            output_console.print_error(f"Failed to write report to {output}: {e}")
            raise typer.Exit(EXIT_FETCH_ERROR)
        output_console.print_summary(activity)
        output_console.print_output_path(str(output_file))
    else:
        typer.echo(content, nl=False)


async def _fetch_report(
    config: Config,
    username: str,
    window: DateWindow,
    output_console: OutputConsole,
) -> ActivityReport:
    """Fetch the unfiltered report with a spinner on stderr."""
    async with GitHubActivity(config=config) as client:
        with output_console.create_progress() as progress:
            progress.add_task(f"Fetching activity for {username}...", total=None)
            return await client.collect(username, window)


@app.command()
def check_token():
    """Check GitHub token configuration."""
    config = get_config()

    if config.is_authenticated:
        console.print("[green]GitHub token is configured[/green]")
    else:
        console.print("[yellow]No GitHub token configured[/yellow]")
        console.print()
        console.print("To configure a token:")
        console.print("  export GITHUB_TOKEN=your_token_here")
        console.print()
        console.print("Create a token at: https://github.com/settings/tokens")
        console.print("The read:user scope is enough for public contribution data.")

    console.print(f"GraphQL endpoint: {config.github_graphql_url}")
    console.print(
        "Page sizes: "
        f"issues={config.issues_page_size}, "
        f"pull requests={config.pull_requests_page_size}, "
        f"reviews={config.reviews_page_size}"
    )

    if not config.is_authenticated:
        raise typer.Exit(EXIT_CONFIG_ERROR)


if __name__ == "__main__":
    app()
