"""Tests for date window resolution."""

from datetime import date, datetime, timedelta, timezone

import pytest

from github_activity.exceptions import ConfigurationError
from github_activity.models.window import DateWindow, parse_bound, parse_period

NOW = datetime(2025, 3, 31, 12, 0, tzinfo=timezone.utc)


class TestParsePeriod:
    """Tests for relative period tokens."""

    @pytest.mark.parametrize(
        "token,days",
        [("7d", 7), ("2w", 14), ("1m", 30), ("3m", 90), (" 1d ", 1), ("week", 7), ("Month", 30)],
    )
    def test_valid_tokens(self, token, days):
        """Test that valid tokens map to fixed durations."""
        assert parse_period(token) == timedelta(days=days)

    @pytest.mark.parametrize("token", ["", "7", "d", "7x", "1y", "-1d", "0d", "1.5w", "7D", "2W", "1M"])
    def test_invalid_tokens(self, token):
        """Test that malformed or non-positive tokens are rejected."""
        with pytest.raises(ConfigurationError):
            parse_period(token)

    @pytest.mark.parametrize("token", ["9999999999d", "1000000d", "999999999w"])
    def test_too_large(self, token):
        """Test that durations beyond the datetime range are rejected."""
        with pytest.raises(ConfigurationError):
            DateWindow.resolve(period=token, now=NOW)


class TestParseBound:
    """Tests for explicit bounds."""

    def test_date_start_is_midnight(self):
        """Test that a bare start date begins at midnight UTC."""
        assert parse_bound("2025-01-15") == datetime(2025, 1, 15, tzinfo=timezone.utc)

    def test_date_end_covers_day(self):
        """Test that a bare end date runs to the end of the day."""
        bound = parse_bound("2025-01-15", end_of_day=True)
        assert bound.date() == date(2025, 1, 15)
        assert bound.hour == 23 and bound.minute == 59

    def test_zulu_timestamp(self):
        """Test parsing an ISO 8601 timestamp with a Z suffix."""
        assert parse_bound("2025-01-15T10:30:00Z") == datetime(
            2025, 1, 15, 10, 30, tzinfo=timezone.utc
        )

    def test_offset_converted_to_utc(self):
        """Test that offsets are normalized to UTC."""
        assert parse_bound("2025-01-15T10:00:00+02:00") == datetime(
            2025, 1, 15, 8, 0, tzinfo=timezone.utc
        )

    def test_invalid(self):
        """Test that garbage is rejected."""
        with pytest.raises(ConfigurationError):
            parse_bound("yesterday")


class TestResolve:
    """Tests for DateWindow.resolve."""

    def test_period(self):
        """Test a window ending now."""
        window = DateWindow.resolve(period="7d", now=NOW)

        assert window.end == NOW
        assert window.start == NOW - timedelta(days=7)
        assert window.duration == timedelta(days=7)

    def test_month_is_thirty_days(self):
        """Test that a month is a fixed 30 days."""
        window = DateWindow.resolve(period="1m", now=NOW)
        assert window.start == datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)

    def test_explicit_bounds(self):
        """Test an explicit start and end."""
        window = DateWindow.resolve(start="2025-01-01", end="2025-01-31")

        assert window.start == datetime(2025, 1, 1, tzinfo=timezone.utc)
        assert window.end.date() == date(2025, 1, 31)

    def test_period_and_bounds_conflict(self):
        """Test that a period and explicit bounds cannot be combined."""
        with pytest.raises(ConfigurationError, match="not both"):
            DateWindow.resolve(period="7d", start="2025-01-01", end="2025-01-31")

    def test_period_and_single_bound_conflict(self):
        """Test that a period plus one bound is also a conflict."""
        with pytest.raises(ConfigurationError):
            DateWindow.resolve(period="7d", start="2025-01-01")

    def test_neither(self):
        """Test that some window is required."""
        with pytest.raises(ConfigurationError):
            DateWindow.resolve()

    def test_single_bound(self):
        """Test that both bounds are needed."""
        with pytest.raises(ConfigurationError):
            DateWindow.resolve(end="2025-01-31")

    def test_start_after_end(self):
        """Test that inverted bounds are rejected."""
        with pytest.raises(ConfigurationError):
            DateWindow.resolve(start="2025-02-01", end="2025-01-01")

    def test_same_day(self):
        """Test that a single-day window is allowed."""
        window = DateWindow.resolve(start="2025-01-01", end="2025-01-01")
        assert window.start < window.end


class TestDateWindow:
    """Tests for DateWindow itself."""

    def test_naive_datetimes_become_utc(self):
        """Test that naive datetimes are taken as UTC."""
        window = DateWindow(start=datetime(2025, 1, 1), end=datetime(2025, 1, 2))
        assert window.start.tzinfo is not None

    def test_as_variables(self):
        """Test GraphQL variable formatting."""
        window = DateWindow(
            start=datetime(2025, 1, 1, tzinfo=timezone.utc),
            end=datetime(2025, 1, 2, 6, 30, tzinfo=timezone.utc),
        )

        assert window.as_variables() == {
            "from": "2025-01-01T00:00:00Z",
            "to": "2025-01-02T06:30:00Z",
        }
