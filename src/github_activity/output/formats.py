"""Output format selection."""

from enum import Enum
from pathlib import Path
from typing import Callable

from github_activity.models.activity import ActivityReport
from github_activity.output.json_writer import render_json
from github_activity.output.markdown import render_markdown
from github_activity.output.plain import render_plain


class OutputFormat(str, Enum):
    """Supported report formats."""

    PLAIN = "plain"
    MARKDOWN = "markdown"
    JSON = "json"


RENDERERS: dict[OutputFormat, Callable[[ActivityReport], str]] = {
    OutputFormat.PLAIN: render_plain,
    OutputFormat.MARKDOWN: render_markdown,
    OutputFormat.JSON: render_json,
}

EXTENSION_FORMATS = {
    ".md": OutputFormat.MARKDOWN,
    ".markdown": OutputFormat.MARKDOWN,
    ".txt": OutputFormat.PLAIN,
    ".json": OutputFormat.JSON,
}


def infer_format(output_path: Path | None, default: OutputFormat) -> OutputFormat:
    """Pick the format from an output file extension, falling back to the default."""
    if output_path is None:
        return default
    return EXTENSION_FORMATS.get(output_path.suffix.lower(), default)


def render(report: ActivityReport, fmt: OutputFormat | str = OutputFormat.PLAIN) -> str:
    """Render a report in the given format."""
    return RENDERERS[OutputFormat(fmt)](report)
