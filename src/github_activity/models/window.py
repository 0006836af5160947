"""Contribution window model and its resolution from CLI-style inputs."""

import re
from datetime import date, datetime, time, timedelta, timezone

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from github_activity.exceptions import ConfigurationError

PERIOD_PATTERN = re.compile(r"^(\d+)([dwm])$")

# `m` is a fixed 30-day approximation, not calendar-month arithmetic
PERIOD_UNIT_DAYS = {"d": 1, "w": 7, "m": 30}

# Word forms accepted for compatibility with "day"/"week"/"month" periods
PERIOD_ALIASES = {"day": "1d", "week": "1w", "month": "1m"}


def parse_period(token: str) -> timedelta:
    """Parse a relative duration token such as `7d`, `2w` or `1m`.

    Raises:
        ConfigurationError: If the token is malformed or not positive
    """
    normalized = token.strip()
    # Word forms are case-insensitive; the numeric form is not
    normalized = PERIOD_ALIASES.get(normalized.lower(), normalized)

    match = PERIOD_PATTERN.match(normalized)
    if not match:
        raise ConfigurationError(
            f"Invalid period: {token!r}. Use <number><d|w|m>, e.g. 7d, 2w or 1m"
        )

    amount = int(match.group(1))
    if amount <= 0:
        raise ConfigurationError(f"Invalid period: {token!r}. The number must be positive")

    try:
        return timedelta(days=amount * PERIOD_UNIT_DAYS[match.group(2)])
    except OverflowError:
        raise ConfigurationError(f"Invalid period: {token!r}. The duration is too large") from None


def parse_bound(value: str | date | datetime, end_of_day: bool = False) -> datetime:
    """Parse an explicit window bound into an aware UTC datetime.

    Accepts `YYYY-MM-DD` dates or ISO 8601 datetimes (a trailing `Z` is
    allowed). Naive values are taken as UTC. A bare date used as an end bound
    covers the whole day.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime.combine(value, time.max if end_of_day else time.min)
    else:
        text = value.strip()
        try:
            if len(text) == 10:
                day = date.fromisoformat(text)
                parsed = datetime.combine(day, time.max if end_of_day else time.min)
            else:
                if text.endswith("Z"):
                    text = text[:-1] + "+00:00"
                parsed = datetime.fromisoformat(text)
        except ValueError:
            raise ConfigurationError(
                f"Invalid date: {value!r}. Use YYYY-MM-DD or an ISO 8601 timestamp"
            ) from None

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


class DateWindow(BaseModel):
    """The `[start, end)` range over which activity is queried."""

    model_config = ConfigDict(frozen=True)

    start: datetime
    end: datetime

    @field_validator("start", "end")
    @classmethod
    def _as_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    @model_validator(mode="after")
    def _check_order(self) -> "DateWindow":
        if self.start > self.end:
            raise ValueError("window start must not be after its end")
        return self

    @classmethod
    def from_period(cls, token: str, now: datetime | None = None) -> "DateWindow":
        """Window ending now and spanning the given relative duration."""
        end = now or datetime.now(timezone.utc)
        duration = parse_period(token)
        try:
            start = end - duration
        except OverflowError:
            raise ConfigurationError(
                f"Invalid period: {token!r}. The window would start before year 1"
            ) from None
        return cls(start=start, end=end)

    @classmethod
    def from_bounds(
        cls,
        start: str | date | datetime,
        end: str | date | datetime,
    ) -> "DateWindow":
        """Window between two explicit bounds.

        Raises:
            ConfigurationError: If a bound is malformed or start is after end
        """
        start_dt = parse_bound(start)
        end_dt = parse_bound(end, end_of_day=True)
        if start_dt > end_dt:
            raise ConfigurationError(
                f"Start date {start_dt.isoformat()} is after end date {end_dt.isoformat()}"
            )
        return cls(start=start_dt, end=end_dt)

    @classmethod
    def resolve(
        cls,
        period: str | None = None,
        start: str | date | datetime | None = None,
        end: str | date | datetime | None = None,
        now: datetime | None = None,
    ) -> "DateWindow":
        """Resolve exactly one of a period token or an explicit start/end pair.

        Raises:
            ConfigurationError: If both forms, neither form, or only one bound is given
        """
        has_bounds = start is not None or end is not None

        if period is not None and has_bounds:
            raise ConfigurationError(
                "Use either --period or --from/--to, not both"
            )
        if period is not None:
            return cls.from_period(period, now=now)
        if not has_bounds:
            raise ConfigurationError("A time window is required: use --period or --from/--to")
        if start is None or end is None:
            raise ConfigurationError("Both --from and --to are required for an explicit window")
        return cls.from_bounds(start, end)

    def as_variables(self) -> dict[str, str]:
        """GraphQL `from`/`to` variables."""
        return {
            "from": self.start.strftime("%Y-%m-%dT%H:%M:%SZ"),
            "to": self.end.strftime("%Y-%m-%dT%H:%M:%SZ"),
        }

    @property
    def duration(self) -> timedelta:
        return self.end - self.start
