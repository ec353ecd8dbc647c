"""Business calendar: weekend definition, holiday rules and day counting."""

import math
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any, Iterator

import pandas as pd
from pandas.tseries.offsets import CustomBusinessDay

from bizcal.config import get_max_step_days
from bizcal.logging import get_logger, timed_block
from bizcal.rules import HolidayMatcher
from bizcal.utils import align_tz, ceil_magnitude, shift_days, to_timestamp
from bizcal.validation import (
    ISO_WEEKDAYS,
    StepLimitError,
    validate_holiday_matchers,
    validate_weekend_days,
)

if TYPE_CHECKING:
    from bizcal.core import BusinessDate

_WEEKDAY_ABBR = {1: "Mon", 2: "Tue", 3: "Wed", 4: "Thu", 5: "Fri", 6: "Sat", 7: "Sun"}


class BusinessCalendar:
    """Calendar of working days built from a weekend and holiday rules.

    A calendar is immutable and holds no date of its own. Calling it wraps a
    date into a BusinessDate bound to this calendar::

        cal = BusinessCalendar(holiday_matchers=holidays.us.get_holidays())
        due = cal("2024-11-27").plus_business(3)

    Invalid dates (NaT) are never business days, weekends or holidays, and
    arithmetic on them yields NaT instead of raising.
    """

    def __init__(
        self,
        weekend_days: Iterable[int] | None = None,
        holiday_matchers: Iterable[HolidayMatcher] | None = None,
        business_days: Iterable[int] | None = None,
    ) -> None:
        """Initialize a BusinessCalendar.

        Args:
            weekend_days: ISO weekdays (1=Monday .. 7=Sunday) that are not
                worked. At most six. Defaults to Saturday and Sunday.
            holiday_matchers: Callables taking a Timestamp and returning True
                on holidays. Rules from bizcal.rules or plain functions.
            business_days: Alternative to weekend_days: the ISO weekdays that
                are worked. Cannot be combined with weekend_days.

        Raises:
            ConfigurationError: If the weekend leaves no working weekday, has
                out-of-range entries, or a matcher is not callable.
        """
        self._weekend_days = validate_weekend_days(weekend_days, business_days)
        self._holiday_matchers = validate_holiday_matchers(holiday_matchers)
        self._log = get_logger(__name__).bind(weekend_days=sorted(self._weekend_days))
        self._log.debug(
            "business_calendar_created", holiday_rules=len(self._holiday_matchers)
        )

    @property
    def weekend_days(self) -> frozenset[int]:
        return self._weekend_days

    @property
    def business_days(self) -> frozenset[int]:
        return ISO_WEEKDAYS - self._weekend_days

    @property
    def holiday_matchers(self) -> tuple[HolidayMatcher, ...]:
        return self._holiday_matchers

    def __call__(self, value: Any = None) -> "BusinessDate":
        """Wrap a date-like value (default: now) as a BusinessDate."""
        from bizcal.core import BusinessDate

        return BusinessDate(value, self)

    def __repr__(self) -> str:
        return (
            f"BusinessCalendar(weekend_days={sorted(self._weekend_days)}, "
            f"holiday_rules={len(self._holiday_matchers)})"
        )

    # Decision procedure

    def _is_weekend(self, ts: pd.Timestamp) -> bool:
        return ts.isoweekday() in self._weekend_days

    def _is_holiday(self, ts: pd.Timestamp) -> bool:
        return any(matcher(ts) for matcher in self._holiday_matchers)

    def _is_business_day(self, ts: pd.Timestamp) -> bool:
        return not self._is_weekend(ts) and not self._is_holiday(ts)

    def is_weekend(self, dt: Any) -> bool:
        """Check if dt falls on a non-working weekday."""
        ts = to_timestamp(dt)
        return ts is not pd.NaT and self._is_weekend(ts)

    def is_holiday(self, dt: Any) -> bool:
        """Check if any holiday rule matches dt."""
        ts = to_timestamp(dt)
        return ts is not pd.NaT and self._is_holiday(ts)

    def is_business_day(self, dt: Any) -> bool:
        """Check if dt is neither a weekend day nor a holiday."""
        ts = to_timestamp(dt)
        return ts is not pd.NaT and self._is_business_day(ts)

    # Counting and stepping

    def _check_walk(self, walked: int) -> None:
        """Enforce the configured max_step_days, if any."""
        limit = get_max_step_days()
        if limit is not None and walked > limit:
            self._log.warning("step_limit_exceeded", max_step_days=limit)
            raise StepLimitError(
                f"Walked more than max_step_days={limit} calendar days"
            )

    def count_business_days(
        self, start: Any, end: Any, exclude_starting_day: bool = False
    ) -> int | None:
        """Count business days from start towards end, signed by direction.

        Ends in different time zones are compared in the time zone of
        start, then both are normalized to midnight. Going forward, start
        is counted and end is not. Going backward the count runs from start
        (counted) down to end (not counted) and is negative.

        Args:
            start: Date to count from.
            end: Date to count towards.
            exclude_starting_day: If True and start is a business day, skip
                it, moving one day in the counting direction first.

        Returns:
            Signed business-day count, or None if either date is invalid.
        """
        start_ts = to_timestamp(start)
        end_ts = align_tz(to_timestamp(end), start_ts)
        if start_ts is pd.NaT or end_ts is pd.NaT:
            return None

        current = start_ts.normalize()
        stop = end_ts.normalize()
        if current == stop:
            return 0

        direction = 1 if stop > current else -1
        count = 0
        walked = 0
        with timed_block(self._log, "count_business_days", direction=direction):
            if exclude_starting_day and self._is_business_day(current):
                current = shift_days(current, direction)
            while (current < stop) if direction > 0 else (current > stop):
                if self._is_business_day(current):
                    count += 1
                current = shift_days(current, direction)
                walked += 1
                self._check_walk(walked)
        return count * direction

    def step_business_days(self, dt: Any, days: float) -> pd.Timestamp:
        """Move dt by a number of business days.

        A fractional count is rounded away from zero. Zero returns dt
        unchanged, even when dt is a weekend day or holiday. Otherwise the
        walk moves one calendar day at a time and only business days count.

        Returns:
            The resulting Timestamp (same time of day), or NaT if dt is
            invalid or days is NaN/infinite.
        """
        ts = to_timestamp(dt)
        if ts is pd.NaT or not math.isfinite(days):
            return pd.NaT

        periods = ceil_magnitude(days)
        if periods == 0:
            return ts

        direction = 1 if periods > 0 else -1
        remaining = abs(periods)
        current = ts
        walked = 0
        with timed_block(self._log, "step_business_days", periods=periods):
            while remaining > 0:
                current = shift_days(current, direction)
                walked += 1
                self._check_walk(walked)
                if self._is_business_day(current):
                    remaining -= 1
        return current

    def dt_range(self, start_dt: Any, end_dt: Any) -> Iterator[pd.Timestamp]:
        """Generate business days in range [start_dt, end_dt]."""
        current = to_timestamp(start_dt)
        end = align_tz(to_timestamp(end_dt), current)
        if current is pd.NaT or end is pd.NaT:
            return
        walked = 0
        while current <= end:
            if self._is_business_day(current):
                yield current
            current = shift_days(current, 1)
            walked += 1
            self._check_walk(walked)

    def dt_offset(self, dt: Any, periods: int) -> pd.Timestamp:
        """Shift datetime by N business days."""
        return self.step_business_days(dt, periods)

    def holidays_in_range(self, start_dt: Any, end_dt: Any) -> list[pd.Timestamp]:
        """Dates in [start_dt, end_dt] matched by a holiday rule, weekends included."""
        current = to_timestamp(start_dt)
        end = align_tz(to_timestamp(end_dt), current)
        if current is pd.NaT or end is pd.NaT:
            return []
        current, end = current.normalize(), end.normalize()
        holidays = []
        walked = 0
        with timed_block(self._log, "holidays_in_range"):
            while current <= end:
                if self._is_holiday(current):
                    holidays.append(current)
                current = shift_days(current, 1)
                walked += 1
                self._check_walk(walked)
        return holidays

    def bdate_range(self, start_dt: Any, end_dt: Any) -> pd.DatetimeIndex:
        """Business days in [start_dt, end_dt] as a DatetimeIndex at midnight."""
        start = to_timestamp(start_dt)
        end = to_timestamp(end_dt)
        if start is pd.NaT or end is pd.NaT:
            return pd.DatetimeIndex([])
        return pd.DatetimeIndex(list(self.dt_range(start.normalize(), end.normalize())))

    def weekmask(self) -> str:
        """Working week in pandas weekmask form, e.g. "Mon Tue Wed Thu Fri"."""
        return " ".join(_WEEKDAY_ABBR[day] for day in sorted(self.business_days))

    def to_custom_business_day(self, start_dt: Any, end_dt: Any) -> CustomBusinessDay:
        """Equivalent pandas offset for dates within [start_dt, end_dt].

        Holiday rules are evaluated only inside the given window, so the
        offset is exact there and ignores holidays outside it.
        """
        holidays = [ts.date() for ts in self.holidays_in_range(start_dt, end_dt)]
        return CustomBusinessDay(weekmask=self.weekmask(), holidays=holidays)


def create_business_calendar(
    weekend_days: Iterable[int] | None = None,
    holiday_matchers: Iterable[HolidayMatcher] | None = None,
    business_days: Iterable[int] | None = None,
) -> BusinessCalendar:
    """Create a BusinessCalendar; call the result to wrap dates.

    Example:
        from bizcal import create_business_calendar, holidays

        calendar = create_business_calendar(
            holiday_matchers=holidays.it.get_holidays(),
        )
        calendar("2024-04-29").plus_business(2)  # 2024-05-02
    """
    return BusinessCalendar(
        weekend_days=weekend_days,
        holiday_matchers=holiday_matchers,
        business_days=business_days,
    )
