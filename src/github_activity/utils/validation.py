"""Input validation performed before any request is made."""

import re

from github_activity.exceptions import ConfigurationError

# Letters, digits and hyphens; no leading or trailing hyphen
USERNAME_PATTERN = re.compile(r"^[a-zA-Z0-9](?:[a-zA-Z0-9-]*[a-zA-Z0-9])?$")
MAX_USERNAME_LENGTH = 39


def validate_username(username: str) -> str:
    """Validate a GitHub username.

    Raises:
        ConfigurationError: If the username is empty, too long or malformed
    """
    username = username.strip()
    if not username:
        raise ConfigurationError("Username cannot be empty")
    if len(username) > MAX_USERNAME_LENGTH:
        raise ConfigurationError(
            f"Username cannot be longer than {MAX_USERNAME_LENGTH} characters"
        )
    if not USERNAME_PATTERN.match(username):
        raise ConfigurationError(
            "Username contains invalid characters. Allowed: letters, digits, "
            "and hyphens (but not at the beginning or end)"
        )
    return username


def validate_filters(
    repo_filter: str | None = None,
    org_filter: str | None = None,
) -> tuple[str | None, str | None]:
    """Validate repository (`owner/name`) and organization filters.

    Raises:
        ConfigurationError: If a filter is empty or malformed
    """
    if repo_filter is not None:
        owner, sep, name = repo_filter.partition("/")
        if not sep or not owner or not name or "/" in name:
            raise ConfigurationError(
                f"Invalid repository filter: {repo_filter!r}. Use owner/name"
            )
    if org_filter is not None:
        if not org_filter or "/" in org_filter:
            raise ConfigurationError(
                f"Invalid organization filter: {org_filter!r}. Use the owner name only"
            )
    return repo_filter, org_filter
