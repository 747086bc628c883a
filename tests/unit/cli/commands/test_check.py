"""Unit tests for the check-date command."""

import pytest
from click.testing import CliRunner

from src.cli.commands.check import check_date


@pytest.fixture
def runner(mock_env):
    """Create a Click CLI test runner with test configuration."""
    return CliRunner()


def invoke(runner, *args):
    return runner.invoke(check_date, [*args, "--now", "2024-06-15"])


class TestCheckDateWindow:
    """Test the plain month window check."""

    def test_date_within_window(self, runner):
        """Test that a date inside the window exits cleanly."""
        result = invoke(runner, "2025-03-01", "--min", "-12", "--max", "12")

        assert result.exit_code == 0
        assert "Evaluated at: 2024-06-15T00:00:00" in result.output
        assert "2025-03-01 is valid" in result.output

    def test_date_outside_window(self, runner):
        """Test that a date outside the window exits with status 1."""
        result = invoke(runner, "2026-03-01", "--min", "-12", "--max", "12")

        assert result.exit_code == 1
        assert "date must be within -12 and 12 months from today" in result.output
        assert "[out_of_window]" in result.output

    def test_window_bounds_are_inclusive(self, runner):
        """Test that both bounds are accepted."""
        assert invoke(runner, "2023-06-15", "--min", "-12", "--max", "12").exit_code == 0
        assert invoke(runner, "2025-06-15", "--min", "-12", "--max", "12").exit_code == 0

    def test_month_end_is_clamped(self, runner):
        """Test that one month after Jan 31 ends on the last day of February."""
        args = ["--min", "0", "--max", "1", "--now", "2024-01-31"]

        assert runner.invoke(check_date, ["2024-02-29", *args]).exit_code == 0
        assert runner.invoke(check_date, ["2024-03-01", *args]).exit_code == 1

    def test_datetime_argument(self, runner):
        """Test that datetimes are accepted as instants."""
        result = invoke(runner, "2024-07-01T09:30:00", "--min", "0", "--max", "1")
        assert result.exit_code == 0

    def test_window_beyond_year_9999(self, runner):
        """Test that a very wide window is evaluated instead of crashing."""
        result = invoke(runner, "2024-07-01", "--min", "-12", "--max", "200000")

        assert result.exit_code == 0
        assert "2024-07-01 is valid" in result.output


class TestCheckDateRelated:
    """Test the related date check."""

    def test_related_after_date(self, runner):
        """Test a related date six months after the primary date."""
        result = invoke(
            runner, "2025-03-01", "--min", "-12", "--max", "12",
            "--related", "2025-09-01",
        )
        assert result.exit_code == 0

    def test_related_before_date(self, runner):
        """Test that a related date before the primary date fails."""
        result = invoke(
            runner, "2025-03-01", "--min", "-12", "--max", "12",
            "--related", "2025-01-01",
        )

        assert result.exit_code == 1
        assert "related_date must not be before date" in result.output
        assert "[ordering_violation]" in result.output

    def test_related_beyond_horizon(self, runner):
        """Test that the horizon option bounds the related date."""
        result = invoke(
            runner, "2025-03-01", "--min", "-12", "--max", "12",
            "--related", "2030-01-01", "--horizon", "24",
        )

        assert result.exit_code == 1
        assert "[sanity_horizon_exceeded]" in result.output

    def test_related_within_default_horizon(self, runner):
        """Test that the configured horizon applies without --horizon."""
        result = invoke(
            runner, "2025-03-01", "--min", "-12", "--max", "12",
            "--related", "2030-01-01",
        )
        assert result.exit_code == 0


class TestCheckDateUsageErrors:
    """Test rejected arguments."""

    def test_invalid_date(self, runner):
        """Test that a non-ISO date is a usage error."""
        result = invoke(runner, "tomorrow", "--min", "0", "--max", "1")

        assert result.exit_code == 2
        assert "is not an ISO date or datetime" in result.output

    def test_inverted_window(self, runner):
        """Test that min greater than max is a usage error."""
        result = invoke(runner, "2024-07-01", "--min", "5", "--max", "1")

        assert result.exit_code == 2
        assert "invalid window [5, 1]" in result.output

    def test_missing_bounds(self, runner):
        """Test that both bounds are required."""
        result = invoke(runner, "2024-07-01", "--min", "0")
        assert result.exit_code == 2

    def test_non_positive_horizon(self, runner):
        """Test that the horizon must be at least one month."""
        result = invoke(
            runner, "2024-07-01", "--min", "0", "--max", "1",
            "--related", "2024-08-01", "--horizon", "0",
        )
        assert result.exit_code == 2

    def test_horizon_without_related(self, runner):
        """Test that --horizon is rejected when there is no related date."""
        result = invoke(
            runner, "2024-07-01", "--min", "0", "--max", "1", "--horizon", "24"
        )

        assert result.exit_code == 2
        assert "--horizon requires --related" in result.output
