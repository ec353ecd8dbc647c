"""Tests for BusinessCalendar."""

from datetime import date, datetime

import pandas as pd
import pytest

from bizcal import (
    BusinessCalendar,
    BusinessDate,
    ConfigurationError,
    FixedDateRule,
    create_business_calendar,
    holidays,
)


def ts(value: str) -> pd.Timestamp:
    return pd.Timestamp(value)


def exploding_matcher(d):
    raise AssertionError(f"holiday rule evaluated for {d!r}")


@pytest.fixture
def italian_calendar():
    """Saturday/Sunday weekend with Italian national holidays."""
    return BusinessCalendar(holiday_matchers=holidays.it.get_holidays())


class TestConfiguration:
    """Test calendar construction and validation."""

    def test_defaults(self):
        """Saturday and Sunday weekend, no holidays."""
        cal = BusinessCalendar()
        assert cal.weekend_days == frozenset({6, 7})
        assert cal.business_days == frozenset({1, 2, 3, 4, 5})
        assert cal.holiday_matchers == ()

    def test_custom_weekend(self):
        """Friday/Saturday weekend."""
        cal = BusinessCalendar(weekend_days=[5, 6])
        assert cal.is_business_day("2024-01-07")  # Sunday
        assert not cal.is_business_day("2024-01-05")  # Friday

    def test_business_days_complement(self):
        """business_days gives the working week instead of the weekend."""
        cal = BusinessCalendar(business_days=[2])
        assert cal.weekend_days == frozenset({1, 3, 4, 5, 6, 7})
        assert cal.is_business_day("2024-01-02")  # Tuesday
        assert not cal.is_business_day("2024-01-03")

    def test_empty_weekend(self):
        """Every day can be a working day."""
        cal = BusinessCalendar(weekend_days=[])
        assert cal.is_business_day("2024-01-06")
        assert cal.is_business_day("2024-01-07")

    def test_six_day_weekend_allowed(self):
        """One working weekday is enough."""
        cal = BusinessCalendar(weekend_days=[1, 2, 3, 4, 5, 6])
        assert cal.business_days == frozenset({7})

    def test_all_weekend_raises(self):
        """A weekend covering every day is rejected."""
        with pytest.raises(ConfigurationError, match="no working weekday"):
            BusinessCalendar(weekend_days=range(1, 8))

    def test_empty_business_days_raises(self):
        """A working week with no days is rejected."""
        with pytest.raises(ConfigurationError, match="at least one"):
            BusinessCalendar(business_days=[])

    def test_both_options_raise(self):
        """weekend_days and business_days are mutually exclusive."""
        with pytest.raises(ConfigurationError, match="not both"):
            BusinessCalendar(weekend_days=[6, 7], business_days=[1, 2, 3, 4, 5])

    def test_out_of_range_weekday_raises(self):
        """Weekday 0 is not an ISO weekday."""
        with pytest.raises(ConfigurationError, match="1-7"):
            BusinessCalendar(weekend_days=[0, 6])

    def test_non_callable_matcher_raises(self):
        """Every holiday matcher must be callable."""
        with pytest.raises(ConfigurationError, match="not callable"):
            BusinessCalendar(holiday_matchers=["2024-12-25"])

    def test_repr(self):
        """repr shows weekend and rule count."""
        cal = BusinessCalendar(holiday_matchers=[FixedDateRule(1, 1)])
        assert repr(cal) == "BusinessCalendar(weekend_days=[6, 7], holiday_rules=1)"


class TestDecisionProcedure:
    """Test is_weekend / is_holiday / is_business_day."""

    def test_weekday_is_business_day(self, italian_calendar):
        """Ordinary Tuesday is worked."""
        assert italian_calendar.is_business_day("2024-05-07")
        assert not italian_calendar.is_weekend("2024-05-07")
        assert not italian_calendar.is_holiday("2024-05-07")

    def test_holiday_on_weekday(self, italian_calendar):
        """May 1 is a holiday, not a weekend."""
        assert italian_calendar.is_holiday("2024-05-01")
        assert not italian_calendar.is_weekend("2024-05-01")
        assert not italian_calendar.is_business_day("2024-05-01")

    def test_holiday_on_weekend(self, italian_calendar):
        """Christmas 2022 is a Sunday: both holiday and weekend."""
        assert italian_calendar.is_holiday("2022-12-25")
        assert italian_calendar.is_weekend("2022-12-25")

    def test_accepts_date_like_values(self, italian_calendar):
        """Strings, dates, datetimes and BusinessDates all work."""
        assert not italian_calendar.is_business_day(date(2024, 12, 25))
        assert not italian_calendar.is_business_day(datetime(2024, 12, 25, 9, 30))
        assert not italian_calendar.is_business_day(BusinessDate("2024-12-25"))
        assert italian_calendar.is_business_day(ts("2024-12-27"))

    def test_plain_function_matcher(self):
        """Any callable works as a holiday matcher."""
        def company_day(d):
            return d.month == 3 and d.day == 15

        cal = BusinessCalendar(holiday_matchers=[company_day])
        assert cal.is_holiday("2024-03-15")
        assert not cal.is_business_day("2024-03-15")

    def test_invalid_date_is_nothing(self):
        """NaT is never a business day, weekend or holiday."""
        cal = BusinessCalendar(holiday_matchers=[exploding_matcher])
        assert not cal.is_business_day(pd.NaT)
        assert not cal.is_weekend(pd.NaT)
        assert not cal.is_holiday("not a date")

    def test_weekend_short_circuits_rules(self):
        """Weekend days are decided without evaluating holiday rules."""
        cal = BusinessCalendar(holiday_matchers=[exploding_matcher])
        assert not cal.is_business_day("2024-01-06")


class TestCountBusinessDays:
    """Test count_business_days."""

    def test_forward(self):
        """Start counted, end not."""
        cal = BusinessCalendar()
        assert cal.count_business_days("2024-01-08", "2024-01-12") == 4
        assert cal.count_business_days("2024-01-08", "2024-01-15") == 5

    def test_backward(self):
        """Backward counts are negative."""
        cal = BusinessCalendar()
        assert cal.count_business_days("2024-01-15", "2024-01-08") == -5

    def test_same_day(self):
        """Zero for equal dates."""
        assert BusinessCalendar().count_business_days("2024-01-08", "2024-01-08 17:00") == 0

    def test_exclude_starting_day(self):
        """Business start day is skipped when asked."""
        cal = BusinessCalendar()
        assert cal.count_business_days("2024-01-08", "2024-01-15", exclude_starting_day=True) == 4
        assert cal.count_business_days("2024-01-15", "2024-01-08", exclude_starting_day=True) == -4

    def test_exclude_starting_day_on_weekend(self):
        """Non-business start day is never counted anyway."""
        cal = BusinessCalendar()
        assert cal.count_business_days("2024-01-06", "2024-01-12") == 4
        assert cal.count_business_days("2024-01-06", "2024-01-12", exclude_starting_day=True) == 4

    def test_holidays_skipped(self, italian_calendar):
        """May 1 is not counted."""
        assert italian_calendar.count_business_days("2024-04-30", "2024-05-05") == 3

    def test_invalid_returns_none(self):
        """Invalid endpoints give None without evaluating rules."""
        cal = BusinessCalendar(holiday_matchers=[exploding_matcher])
        assert cal.count_business_days(pd.NaT, "2024-01-08") is None
        assert cal.count_business_days("2024-01-08", "garbage") is None


class TestStepBusinessDays:
    """Test step_business_days."""

    def test_forward_over_holiday(self, italian_calendar):
        """April 29 + 2 skips May 1."""
        assert italian_calendar.step_business_days("2024-04-29", 2) == ts("2024-05-02")

    def test_fraction_rounds_away_from_zero(self):
        """Half a day is a full business day in either direction."""
        cal = BusinessCalendar()
        assert cal.step_business_days("2024-01-05", 0.5) == ts("2024-01-08")
        assert cal.step_business_days("2024-01-08", -0.5) == ts("2024-01-05")

    def test_zero_keeps_weekend_date(self):
        """Zero steps return the input even on a Saturday."""
        assert BusinessCalendar().step_business_days("2024-01-06", 0) == ts("2024-01-06")

    def test_keeps_time_of_day(self):
        """Wall-clock time is preserved."""
        cal = BusinessCalendar()
        assert cal.step_business_days("2024-01-05 14:30", 1) == ts("2024-01-08 14:30")

    def test_nan_and_invalid(self):
        """NaN, infinite counts and invalid dates give NaT."""
        cal = BusinessCalendar()
        assert cal.step_business_days("2024-01-05", float("nan")) is pd.NaT
        assert cal.step_business_days("2024-01-05", float("inf")) is pd.NaT
        assert cal.step_business_days(pd.NaT, 1) is pd.NaT


class TestRangesAndOffsets:
    """Test dt_range, dt_offset and range helpers."""

    def test_dt_range_excludes_weekends(self):
        """Jan 1-7 2024 has five business days."""
        cal = BusinessCalendar()
        dates = list(cal.dt_range(datetime(2024, 1, 1), datetime(2024, 1, 7)))

        assert len(dates) == 5
        assert ts("2024-01-06") not in dates  # Saturday
        assert ts("2024-01-07") not in dates  # Sunday

    def test_dt_range_excludes_holidays(self, italian_calendar):
        """Christmas week in Italy."""
        dates = list(italian_calendar.dt_range("2024-12-23", "2024-12-29"))
        assert dates == [ts("2024-12-23"), ts("2024-12-24"), ts("2024-12-27")]

    def test_dt_range_mixed_time_zones(self):
        """A naive end is read in the start's time zone."""
        start = pd.Timestamp("2024-01-05 09:00", tz="Europe/Rome")
        dates = list(BusinessCalendar().dt_range(start, "2024-01-09 12:00"))
        assert dates == [
            pd.Timestamp("2024-01-05 09:00", tz="Europe/Rome"),
            pd.Timestamp("2024-01-08 09:00", tz="Europe/Rome"),
            pd.Timestamp("2024-01-09 09:00", tz="Europe/Rome"),
        ]

    def test_dt_range_invalid_is_empty(self):
        """Invalid bounds give no dates."""
        assert list(BusinessCalendar().dt_range(pd.NaT, "2024-01-07")) == []

    def test_dt_offset_skips_weekends(self):
        """Friday + 1 is Monday, Monday - 1 is Friday."""
        cal = BusinessCalendar()
        assert cal.dt_offset(datetime(2024, 1, 5), 1) == datetime(2024, 1, 8)
        assert cal.dt_offset(datetime(2024, 1, 8), -1) == datetime(2024, 1, 5)

    def test_dt_offset_multiple_weeks(self):
        """+10 business days from a Monday is two weeks later."""
        assert BusinessCalendar().dt_offset(datetime(2024, 1, 1), 10) == datetime(2024, 1, 15)

    def test_dt_offset_zero(self):
        """Zero returns the same datetime."""
        dt = datetime(2024, 1, 15)
        assert BusinessCalendar().dt_offset(dt, 0) == dt

    def test_holidays_in_range(self, italian_calendar):
        """Holidays inside the window, normalized."""
        result = italian_calendar.holidays_in_range("2024-12-20 12:00", "2024-12-31")
        assert result == [ts("2024-12-25"), ts("2024-12-26")]

    def test_holidays_in_range_includes_weekends(self, italian_calendar):
        """Immaculate Conception 2024 falls on a Sunday and is listed."""
        result = italian_calendar.holidays_in_range("2024-12-01", "2024-12-10")
        assert result == [ts("2024-12-08")]

    def test_holidays_in_range_mixed_time_zones(self, italian_calendar):
        """An aware start and naive end do not clash."""
        start = pd.Timestamp("2024-12-20", tz="Europe/Rome")
        result = italian_calendar.holidays_in_range(start, "2024-12-31")
        assert result == [
            pd.Timestamp("2024-12-25", tz="Europe/Rome"),
            pd.Timestamp("2024-12-26", tz="Europe/Rome"),
        ]

    def test_weekmask(self):
        """Weekmask lists working days in order."""
        assert BusinessCalendar().weekmask() == "Mon Tue Wed Thu Fri"
        assert BusinessCalendar(weekend_days=[5, 6]).weekmask() == "Mon Tue Wed Thu Sun"

    def test_bdate_range_matches_pandas(self, italian_calendar):
        """bdate_range agrees with pandas CustomBusinessDay on the same window."""
        start, end = "2024-12-01", "2024-12-31"
        offset = italian_calendar.to_custom_business_day(start, end)

        expected = pd.date_range(start, end, freq=offset)
        result = italian_calendar.bdate_range(start, end)

        assert list(result) == list(expected)
        assert ts("2024-12-25") not in result

    def test_bdate_range_invalid_is_empty(self):
        """Invalid bounds give an empty index."""
        assert len(BusinessCalendar().bdate_range("garbage", "2024-01-07")) == 0


class TestCallableCalendar:
    """Test wrapping dates through the calendar."""

    def test_call_returns_business_date(self, italian_calendar):
        """Calling the calendar binds the date to it."""
        bd = italian_calendar("2024-04-29")
        assert isinstance(bd, BusinessDate)
        assert bd.calendar is italian_calendar
        assert bd.plus_business(2) == ts("2024-05-02")

    def test_call_without_value_is_now(self):
        """No value wraps the current time."""
        before = pd.Timestamp.now()
        bd = BusinessCalendar()()
        assert bd.to_timestamp() >= before

    def test_create_business_calendar(self):
        """Factory passes every option through."""
        cal = create_business_calendar(
            business_days=[1, 2, 3, 4],
            holiday_matchers=holidays.us.get_holidays(only_federal=True),
        )
        assert cal.weekend_days == frozenset({5, 6, 7})
        assert len(cal.holiday_matchers) == 11
        # Thanksgiving 2024 and the following Friday weekend
        assert cal("2024-11-27").plus_business(1) == ts("2024-12-02")
