"""Configuration management for the GitHub activity reporter."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from github_activity.exceptions import ConfigurationError
from github_activity.services.queries import Connection

DEFAULT_GRAPHQL_URL = "https://api.github.com/graphql"


@dataclass
class Config:
    """Application configuration."""

    github_token: str | None
    github_graphql_url: str = DEFAULT_GRAPHQL_URL

    # Pagination (GitHub caps `first` at 100)
    issues_page_size: int = 25
    pull_requests_page_size: int = 25
    reviews_page_size: int = 25
    max_pages: int = 100  # Per connection

    # Timeouts
    request_timeout: float = 30.0
    fetch_timeout: float | None = None  # Whole-report timeout, None = no limit

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        # override=False ensures environment variables take precedence over .env
        load_dotenv(override=False)

        # Support both GITHUB_ACTIVITY_TOKEN (preferred) and GITHUB_TOKEN (fallback)
        token = os.getenv("GITHUB_ACTIVITY_TOKEN") or os.getenv("GITHUB_TOKEN")

        config = cls(
            github_token=token,
            github_graphql_url=os.getenv("GITHUB_GRAPHQL_URL", DEFAULT_GRAPHQL_URL),
        )

        page_size = os.getenv("GITHUB_ACTIVITY_PAGE_SIZE")
        if page_size:
            size = _parse_int("GITHUB_ACTIVITY_PAGE_SIZE", page_size)
            if not 1 <= size <= 100:
                raise ConfigurationError("GITHUB_ACTIVITY_PAGE_SIZE must be between 1 and 100")
            config.issues_page_size = size
            config.pull_requests_page_size = size
            config.reviews_page_size = size

        timeout = os.getenv("GITHUB_ACTIVITY_TIMEOUT")
        if timeout:
            try:
                config.fetch_timeout = float(timeout)
            except ValueError:
                raise ConfigurationError(
                    f"GITHUB_ACTIVITY_TIMEOUT must be a number of seconds, got {timeout!r}"
                ) from None

        return config

    @property
    def is_authenticated(self) -> bool:
        """Check if a GitHub token is configured."""
        return bool(self.github_token)

    @property
    def page_sizes(self) -> dict[Connection, int]:
        """Page size for each paginated connection."""
        return {
            Connection.ISSUES: self.issues_page_size,
            Connection.PULL_REQUESTS: self.pull_requests_page_size,
            Connection.PULL_REQUEST_REVIEWS: self.reviews_page_size,
        }


def _parse_int(name: str, value: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {value!r}") from None


# Global config instance
_config: Config | None = None


def get_config() -> Config:
    """Get or create the global configuration instance."""
    global _config
    if _config is None:
        _config = Config.from_env()
    return _config


def set_config(config: Config | None) -> None:
    """Set the global configuration instance (useful for testing)."""
    global _config
    _config = config
