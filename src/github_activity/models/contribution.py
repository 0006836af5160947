"""Contribution calendar and summary models."""

from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ContributionDay(BaseModel):
    """Single day in contribution calendar."""

    model_config = ConfigDict(frozen=True)

    date: date
    count: int = 0
    weekday: int  # 0 = Sunday ... 6 = Saturday

    @classmethod
    def from_graphql(cls, data: dict[str, Any]) -> "ContributionDay":
        """Create from GraphQL response."""
        return cls(
            date=data.get("date"),
            count=data.get("contributionCount", 0),
            weekday=data.get("weekday"),
        )


class ContributionWeek(BaseModel):
    """Week of contributions."""

    model_config = ConfigDict(frozen=True)

    days: tuple[ContributionDay, ...] = Field(default_factory=tuple)

    @classmethod
    def from_graphql(cls, data: dict[str, Any]) -> "ContributionWeek":
        """Create from GraphQL response."""
        days = tuple(
            ContributionDay.from_graphql(day)
            for day in data.get("contributionDays") or []
        )
        return cls(days=days)


class ContributionCalendar(BaseModel):
    """Full contribution calendar (the green squares mosaic)."""

    model_config = ConfigDict(frozen=True)

    total_contributions: int = 0
    weeks: tuple[ContributionWeek, ...] = Field(default_factory=tuple)

    @classmethod
    def from_graphql(cls, data: dict[str, Any]) -> "ContributionCalendar":
        """Create from GraphQL response."""
        weeks = tuple(
            ContributionWeek.from_graphql(week)
            for week in data.get("weeks") or []
        )
        return cls(
            total_contributions=data.get("totalContributions", 0),
            weeks=weeks,
        )

    @property
    def days(self) -> list[ContributionDay]:
        """All days in chronological order."""
        return [day for week in self.weeks for day in week.days]

    def busiest_day(self) -> ContributionDay | None:
        """Find the day with most contributions."""
        busiest = None
        for day in self.days:
            if busiest is None or day.count > busiest.count:
                busiest = day
        return busiest

    def current_streak(self) -> int:
        """Consecutive days with contributions, counting back from the last day."""
        streak = 0
        for day in reversed(self.days):
            if day.count > 0:
                streak += 1
            else:
                break
        return streak

    def longest_streak(self) -> int:
        """Calculate longest contribution streak."""
        longest = 0
        current = 0
        for day in self.days:
            if day.count > 0:
                current += 1
                longest = max(longest, current)
            else:
                current = 0
        return longest


class ContributionSummary(BaseModel):
    """Aggregate counters from the base query.

    These describe the whole window and are never recomputed from filtered
    item lists.
    """

    model_config = ConfigDict(frozen=True)

    total_commits: int
    total_issues: int
    total_pull_requests: int
    total_reviews: int
    restricted_contributions: int = 0  # Private contributions (count only)
    calendar: ContributionCalendar = Field(default_factory=ContributionCalendar)

    @classmethod
    def from_graphql(cls, data: dict[str, Any]) -> "ContributionSummary":
        """Create from GraphQL contributionsCollection response."""
        return cls(
            total_commits=data.get("totalCommitContributions"),
            total_issues=data.get("totalIssueContributions"),
            total_pull_requests=data.get("totalPullRequestContributions"),
            total_reviews=data.get("totalPullRequestReviewContributions"),
            restricted_contributions=data.get("restrictedContributionsCount") or 0,
            calendar=ContributionCalendar.from_graphql(data.get("contributionCalendar") or {}),
        )

    @property
    def total_contributions(self) -> int:
        """Total contributions shown on the calendar."""
        return self.calendar.total_contributions
