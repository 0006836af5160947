"""Output handlers for the GitHub activity reporter."""

from github_activity.output.console import Console
from github_activity.output.formats import OutputFormat, infer_format, render
from github_activity.output.json_writer import render_json, write_report
from github_activity.output.markdown import render_markdown
from github_activity.output.plain import render_plain

__all__ = [
    "Console",
    "OutputFormat",
    "infer_format",
    "render",
    "render_plain",
    "render_markdown",
    "render_json",
    "write_report",
]
