"""Utility modules for the GitHub activity reporter."""

from github_activity.utils.pagination import Page, PageInfo, PageState, parse_page, step
from github_activity.utils.validation import validate_filters, validate_username

__all__ = [
    "Page",
    "PageInfo",
    "PageState",
    "parse_page",
    "step",
    "validate_username",
    "validate_filters",
]
