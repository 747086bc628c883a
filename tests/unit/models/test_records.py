"""Unit tests for the example records and their rule tables."""

import datetime as dt

import pytest

from src.models.records import (
    YEAR_WINDOW_MESSAGE,
    Dates,
    Post,
    SmartDates,
    dates_rules,
    post_rules,
    smart_dates_rules,
)
from src.validators.clock import fixed_clock
from src.validators.date_window import add_months
from src.validators.validator import RecordValidator


class TestDates:
    """Test Dates against two independent year windows."""

    @pytest.fixture
    def validator(self, clock):
        return RecordValidator(dates_rules(), clock=clock)

    @pytest.mark.parametrize("months", [9, -9, 0, 12, -12])
    def test_dates_within_a_year_are_good(self, validator, now, months):
        """Test dates up to a year away in either direction."""
        eff = add_months(now, months)
        assert validator.field_errors(Dates(eff, eff)) == []

    @pytest.mark.parametrize("months", [19, -19, 13, -13])
    def test_dates_beyond_a_year_are_bad(self, validator, now, months):
        """Test dates more than a year away in either direction."""
        eff = add_months(now, months)

        errors = validator.field_errors(Dates(eff, eff))

        assert [issue.field for issue in errors] == [
            "effective_date",
            "expiration_date",
        ]
        assert all(issue.message == YEAR_WINDOW_MESSAGE for issue in errors)

    def test_non_date_values(self, validator):
        """Test that missing dates fail both the type and window checks."""
        errors = validator.field_errors(Dates(None, None))
        assert [issue.code for issue in errors] == [
            "is_date",
            "not_a_date",
            "is_date",
            "not_a_date",
        ]


class TestSmartDates:
    """Test SmartDates: effective within a year, expiration after it."""

    @pytest.fixture
    def validator(self, clock):
        return RecordValidator(smart_dates_rules(1200), clock=clock)

    @pytest.mark.parametrize("months", [9, -9])
    def test_expiration_six_months_later_is_good(self, validator, now, months):
        """Test an effective date within a year and a later expiration."""
        eff = add_months(now, months)
        assert validator.field_errors(SmartDates(eff, add_months(eff, 6))) == []

    @pytest.mark.parametrize("months", [19, -19])
    def test_effective_beyond_a_year_is_bad(self, validator, now, months):
        """Test that an out-of-window effective date fails."""
        eff = add_months(now, months)

        errors = validator.field_errors(SmartDates(eff, add_months(eff, 6)))

        assert [issue.code for issue in errors] == ["out_of_window"]

    def test_expiration_before_effective_is_bad(self, validator, now):
        """Test that an expiration before the effective date fails."""
        eff = add_months(now, 9)

        errors = validator.field_errors(SmartDates(eff, add_months(eff, -6)))

        assert [issue.code for issue in errors] == ["ordering_violation"]
        assert errors[0].message == "expiration_date must not be before effective_date"

    def test_expiration_a_thousand_years_later_is_bad(self, validator, now):
        """Test that an implausibly distant expiration fails."""
        eff = add_months(now, 9)

        errors = validator.field_errors(SmartDates(eff, add_months(eff, 12000)))

        assert [issue.code for issue in errors] == ["sanity_horizon_exceeded"]

    def test_same_record_expires_over_time(self):
        """Test that a record valid today is invalid two years later."""
        record = SmartDates(dt.date(2024, 9, 1), dt.date(2025, 3, 1))
        rules = smart_dates_rules(1200)

        assert RecordValidator(
            rules, clock=fixed_clock(dt.datetime(2024, 6, 15))
        ).is_valid(record)
        assert not RecordValidator(
            rules, clock=fixed_clock(dt.datetime(2026, 6, 15))
        ).is_valid(record)


class TestPost:
    """Test Post against built-in constraints."""

    @pytest.fixture
    def validator(self, clock):
        return RecordValidator(post_rules(), clock=clock)

    def test_valid_post(self, validator):
        """Test a post passing every constraint."""
        post = Post(
            title="Hello World",
            text="this is a great post about hello world",
            rating=3,
            email="me@google.com",
            site="google.com",
        )

        assert validator.field_errors(post) == []

    def test_invalid_post(self, validator):
        """Test that each failing field is reported."""
        post = Post(
            title="Hello",
            text="nothing to see here",
            rating=11,
            email="me-at-google",
            site="localhost",
        )

        report = validator.validate(post)

        assert report.error_fields() == ["title", "text", "rating", "email", "site"]
        assert [issue.code for issue in report.errors_for("rating")] == ["max"]
