"""Timestamp delegation for BusinessDate.

BusinessDate exposes a fixed set of read accessors of the wrapped Timestamp.
Every delegated operation that produces a new Timestamp hands back a
BusinessDate bound to the same calendar.
"""

import operator
from datetime import date, datetime
from typing import TYPE_CHECKING, Any, Callable

import numpy as np
import pandas as pd

from bizcal.utils import to_timestamp

if TYPE_CHECKING:
    from bizcal.calendar import BusinessCalendar
    from bizcal.core import BusinessDate

_DATE_LIKE = (date, np.datetime64, str)


class _TimestampMixins:
    __slots__ = ()

    _ts: pd.Timestamp
    _calendar: "BusinessCalendar"

    def _rewrap(self, value: Any) -> Any:
        """Re-attach the calendar to Timestamp results."""
        if isinstance(value, pd.Timestamp) or value is pd.NaT:
            return type(self)(value, self._calendar)
        return value

    def _is_date_like(self, other: Any) -> bool:
        return isinstance(other, (_TimestampMixins,) + _DATE_LIKE)

    # Read accessors

    @property
    def is_valid(self) -> bool:
        """False when the wrapped value is NaT."""
        return self._ts is not pd.NaT

    @property
    def year(self) -> int:
        return self._ts.year

    @property
    def month(self) -> int:
        return self._ts.month

    @property
    def day(self) -> int:
        return self._ts.day

    @property
    def hour(self) -> int:
        return self._ts.hour

    @property
    def minute(self) -> int:
        return self._ts.minute

    @property
    def second(self) -> int:
        return self._ts.second

    @property
    def microsecond(self) -> int:
        return self._ts.microsecond

    @property
    def tz(self) -> Any:
        return self._ts.tz

    @property
    def weekday(self) -> int:
        """ISO weekday, 1=Monday .. 7=Sunday."""
        return self._ts.isoweekday()

    def isoweekday(self) -> int:
        return self._ts.isoweekday()

    @property
    def day_of_year(self) -> int:
        return self._ts.day_of_year

    @property
    def days_in_month(self) -> int:
        return self._ts.days_in_month

    @property
    def is_leap_year(self) -> bool:
        return self._ts.is_leap_year

    # Conversion and formatting

    def to_timestamp(self) -> pd.Timestamp:
        """The wrapped Timestamp (NaT when invalid)."""
        return self._ts

    def to_pydatetime(self) -> datetime | None:
        return self._ts.to_pydatetime() if self.is_valid else None

    def date(self) -> date | None:
        return self._ts.date() if self.is_valid else None

    def isoformat(self, sep: str = "T") -> str:
        return self._ts.isoformat(sep=sep) if self.is_valid else "NaT"

    def to_iso_date(self) -> str | None:
        """Date part as YYYY-MM-DD, or None when invalid."""
        return self._ts.date().isoformat() if self.is_valid else None

    def strftime(self, fmt: str) -> str | None:
        return self._ts.strftime(fmt) if self.is_valid else None

    def __str__(self) -> str:
        return self.isoformat(sep=" ")

    # Timestamp-returning operations, re-wrapped

    def _delegate(self, method: str, *args: Any, **kwargs: Any) -> "BusinessDate":
        if not self.is_valid:
            return self._rewrap(pd.NaT)
        return self._rewrap(getattr(self._ts, method)(*args, **kwargs))

    def normalize(self) -> "BusinessDate":
        """Same day at midnight."""
        return self._delegate("normalize")

    def replace(self, **fields: Any) -> "BusinessDate":
        return self._delegate("replace", **fields)

    def tz_localize(self, tz: Any, **kwargs: Any) -> "BusinessDate":
        return self._delegate("tz_localize", tz, **kwargs)

    def tz_convert(self, tz: Any) -> "BusinessDate":
        return self._delegate("tz_convert", tz)

    def floor(self, freq: str) -> "BusinessDate":
        return self._delegate("floor", freq)

    def ceil(self, freq: str) -> "BusinessDate":
        return self._delegate("ceil", freq)

    def round(self, freq: str) -> "BusinessDate":
        return self._delegate("round", freq)

    def plus(self, **units: Any) -> "BusinessDate":
        """Calendar arithmetic, e.g. ``plus(days=1)`` or ``plus(months=1)``."""
        return self._rewrap(self._ts + pd.DateOffset(**units))

    def minus(self, **units: Any) -> "BusinessDate":
        """Calendar arithmetic backwards, e.g. ``minus(weeks=2)``."""
        return self._rewrap(self._ts - pd.DateOffset(**units))

    # Operators

    def __add__(self, other: Any) -> Any:
        """Add an offset or timedelta."""
        if self._is_date_like(other):
            return NotImplemented
        return self._rewrap(self._ts + other)

    def __radd__(self, other: Any) -> Any:
        """Right add an offset or timedelta."""
        return self.__add__(other)

    def __sub__(self, other: Any) -> Any:
        """Subtract a date (giving a Timedelta) or an offset (giving a BusinessDate)."""
        if self._is_date_like(other):
            return self._ts - to_timestamp(other)
        return self._rewrap(self._ts - other)

    def __rsub__(self, other: Any) -> Any:
        """Right subtract: date minus BusinessDate gives a Timedelta."""
        if self._is_date_like(other):
            return to_timestamp(other) - self._ts
        return NotImplemented

    def _compare(self, other: Any, op: Callable[[Any, Any], bool]) -> Any:
        if not self._is_date_like(other):
            return NotImplemented
        return op(self._ts, to_timestamp(other))

    def __eq__(self, other: Any) -> Any:
        """Same instant."""
        return self._compare(other, operator.eq)

    def __ne__(self, other: Any) -> Any:
        return self._compare(other, operator.ne)

    def __lt__(self, other: Any) -> Any:
        return self._compare(other, operator.lt)

    def __le__(self, other: Any) -> Any:
        return self._compare(other, operator.le)

    def __gt__(self, other: Any) -> Any:
        return self._compare(other, operator.gt)

    def __ge__(self, other: Any) -> Any:
        return self._compare(other, operator.ge)

    def __hash__(self) -> int:
        """Hash of the wrapped Timestamp, consistent with equality."""
        return hash(self._ts)
