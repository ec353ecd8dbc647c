"""BusinessDate: a Timestamp bound to a business calendar."""

import math
from typing import TYPE_CHECKING, Any

import pandas as pd

from bizcal.proxy import _TimestampMixins
from bizcal.utils import duration_to_days, to_timestamp

if TYPE_CHECKING:
    from bizcal.calendar import BusinessCalendar


class BusinessDate(_TimestampMixins):
    """A date together with the calendar that decides its working days.

    BusinessDate is immutable. Stepping operations and delegated Timestamp
    operations return new BusinessDates bound to the same calendar. An
    invalid input (unparseable string, NaT) gives an invalid BusinessDate
    whose arithmetic results are NaT; nothing raises.
    """

    __slots__ = ("_ts", "_calendar")

    def __init__(
        self,
        value: Any = None,
        calendar: "BusinessCalendar | None" = None,
    ) -> None:
        """Initialize a BusinessDate.

        Args:
            value: Date-like value (Timestamp, datetime, date, ISO string,
                another BusinessDate). None means now.
            calendar: Calendar deciding weekends and holidays. Defaults to a
                new calendar with a Saturday/Sunday weekend and no holidays.
        """
        if calendar is None:
            from bizcal.calendar import BusinessCalendar

            calendar = BusinessCalendar()
        self._ts = pd.Timestamp.now() if value is None else to_timestamp(value)
        self._calendar = calendar

    @property
    def calendar(self) -> "BusinessCalendar":
        return self._calendar

    def __repr__(self) -> str:
        return f"BusinessDate({self.isoformat()!r}, {self._calendar!r})"

    def __reduce__(self) -> tuple:
        return (type(self), (self._ts, self._calendar))

    def is_business_day(self) -> bool:
        """True if this date is neither a weekend day nor a holiday."""
        return self._calendar.is_business_day(self._ts)

    def is_holiday(self) -> bool:
        """True if any holiday rule of the calendar matches this date."""
        return self._calendar.is_holiday(self._ts)

    def is_weekend(self) -> bool:
        """True if this date falls on one of the calendar's weekend days."""
        return self._calendar.is_weekend(self._ts)

    def diff_business_days(
        self, other: Any, exclude_starting_day: bool = False
    ) -> pd.Timedelta:
        """Business days from this date to other, as a whole-day Timedelta.

        Counting is done on calendar days: both ends are normalized to
        midnight, so the time of day of either input does not change the
        result. If other is later, this day is counted and other is not;
        if other is earlier, the count runs backward the same way and is
        negative.

        Args:
            other: BusinessDate or any date-like value. Only its date is
                used, never its calendar.
            exclude_starting_day: Do not count this date even when it is a
                business day.

        Returns:
            Timedelta of N days where N is the signed count, or NaT if
            either date is invalid.
        """
        count = self._calendar.count_business_days(
            self._ts, to_timestamp(other), exclude_starting_day=exclude_starting_day
        )
        if count is None:
            return pd.NaT
        return pd.Timedelta(days=count)

    def plus_business(self, duration: Any, unit: str = "days") -> "BusinessDate":
        """Move forward by a number of business days.

        The duration is converted to days (a month counts as 30, a week
        as 7) and rounded away from zero, so half a day is a full business
        day. Negative durations move backward. Zero returns this same date
        even on a weekend or holiday.

        Args:
            duration: Number in ``unit``, Timedelta/timedelta, or a mapping
                such as ``{"weeks": 1}``.
            unit: Unit for a numeric duration ("days", "weeks", "months",
                "hours", ...).

        Returns:
            New BusinessDate on the same calendar, keeping the time of day.
        """
        return self._step(duration_to_days(duration, unit))

    def minus_business(self, duration: Any, unit: str = "days") -> "BusinessDate":
        """Move backward by a number of business days. See plus_business."""
        return self._step(-duration_to_days(duration, unit))

    def _step(self, days: float) -> "BusinessDate":
        if math.isnan(days):
            return self._rewrap(pd.NaT)
        return self._rewrap(self._calendar.step_business_days(self._ts, days))
