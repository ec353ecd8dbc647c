"""Tests for calendar configuration validation."""

import pytest

from bizcal import BizcalError, ConfigurationError, FixedDateRule, StepLimitError
from bizcal.validation import (
    DEFAULT_WEEKEND_DAYS,
    validate_holiday_matchers,
    validate_weekend_days,
)


class TestValidateWeekendDays:
    """Test validate_weekend_days function."""

    def test_default(self):
        """Neither option gives Saturday and Sunday."""
        assert validate_weekend_days() == DEFAULT_WEEKEND_DAYS == frozenset({6, 7})

    def test_weekend_days_deduplicated(self):
        """Repeated entries collapse."""
        assert validate_weekend_days([7, 7, 6]) == frozenset({6, 7})

    def test_business_days_complement(self):
        """Working week is turned into its complement."""
        assert validate_weekend_days(business_days=[1, 2, 3, 4]) == frozenset({5, 6, 7})

    def test_both_given(self):
        """Options are exclusive."""
        with pytest.raises(ConfigurationError, match="not both"):
            validate_weekend_days([6], [1])

    def test_non_integer_entry(self):
        """Strings and bools are not weekdays."""
        with pytest.raises(ConfigurationError, match="integers"):
            validate_weekend_days(["6"])
        with pytest.raises(ConfigurationError, match="integers"):
            validate_weekend_days([True])

    def test_out_of_range(self):
        """Weekdays are 1-7."""
        with pytest.raises(ConfigurationError, match="got 8"):
            validate_weekend_days([8])

    def test_not_a_collection(self):
        """A bare number or string is rejected."""
        with pytest.raises(ConfigurationError, match="collection"):
            validate_weekend_days(6)  # type: ignore[arg-type]
        with pytest.raises(ConfigurationError, match="collection"):
            validate_weekend_days("67")

    def test_whole_week(self):
        """Seven weekend days leave no working day."""
        with pytest.raises(ConfigurationError, match="no working weekday"):
            validate_weekend_days(range(1, 8))


class TestValidateHolidayMatchers:
    """Test validate_holiday_matchers function."""

    def test_none_is_empty(self):
        """No matchers."""
        assert validate_holiday_matchers(None) == ()

    def test_tuple_returned(self):
        """Any iterable becomes a tuple, order kept."""
        a, b = FixedDateRule(1, 1), FixedDateRule(12, 25)
        assert validate_holiday_matchers(iter([a, b])) == (a, b)

    def test_single_matcher_rejected(self):
        """A lone rule must be wrapped in a collection."""
        with pytest.raises(ConfigurationError, match="single matcher"):
            validate_holiday_matchers(FixedDateRule(1, 1))

    def test_non_callable_entry(self):
        """Every entry must be callable."""
        with pytest.raises(ConfigurationError, match="not callable"):
            validate_holiday_matchers([FixedDateRule(1, 1), None])


class TestErrorHierarchy:
    """Test the error classes."""

    def test_configuration_error_is_value_error(self):
        """ConfigurationError can be caught as ValueError."""
        assert issubclass(ConfigurationError, ValueError)
        assert issubclass(ConfigurationError, BizcalError)

    def test_step_limit_error(self):
        """StepLimitError shares the package base class."""
        assert issubclass(StepLimitError, BizcalError)
        assert not issubclass(StepLimitError, ValueError)
