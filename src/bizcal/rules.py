"""Holiday rules and rule set composition.

A holiday rule is any callable taking a Timestamp and returning True when
that date is a designated holiday. The classes here cover the common shapes
(fixed dates, nth weekday of a month, Easter-relative feasts) and all share
that same calling convention, so they compose freely with plain functions.

Rules compare by identity. Two distinct rules that happen to match the same
dates stay distinct entries when rule sets are combined.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from itertools import chain
from typing import Any, Callable

import pandas as pd

from bizcal.easter import calculate_easter_monday, easter_offset
from bizcal.utils import shift_days
from bizcal.validation import ConfigurationError

MONDAY, TUESDAY, WEDNESDAY, THURSDAY, FRIDAY, SATURDAY, SUNDAY = range(1, 8)

HolidayMatcher = Callable[[pd.Timestamp], bool]
RuleSet = tuple[HolidayMatcher, ...]


def rule_name(rule: HolidayMatcher) -> str:
    """Human-readable name of a rule or plain matcher function."""
    name = getattr(rule, "name", None)
    if isinstance(name, str):
        return name
    return getattr(rule, "__name__", repr(rule))


def _check_range(value: Any, low: int, high: int, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or not low <= value <= high:
        raise ConfigurationError(f"{what} must be an integer in {low}-{high}, got {value!r}")
    return value


class HolidayRule(ABC):
    """Abstract base class for holiday rules."""

    def __init__(self, name: str | None = None) -> None:
        self._name = name

    @property
    def name(self) -> str:
        return self._name or self._default_name()

    @abstractmethod
    def _default_name(self) -> str:
        pass

    @abstractmethod
    def matches(self, ts: pd.Timestamp) -> bool:
        """Return True if ts falls on this holiday."""
        pass

    def __call__(self, ts: pd.Timestamp) -> bool:
        return self.matches(ts)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class FixedDateRule(HolidayRule):
    """Same month and day every year, e.g. Christmas on December 25."""

    def __init__(self, month: int, day: int, name: str | None = None) -> None:
        super().__init__(name)
        self.month = _check_range(month, 1, 12, "month")
        self.day = _check_range(day, 1, 31, "day")

    def _default_name(self) -> str:
        return f"{self.month:02d}-{self.day:02d}"

    def matches(self, ts: pd.Timestamp) -> bool:
        return ts.month == self.month and ts.day == self.day


class NthWeekdayRule(HolidayRule):
    """Nth occurrence of a weekday in a month, e.g. 4th Thursday in November.

    ``occurrence`` is zero-based: 0 is the first such weekday in the month.
    """

    def __init__(
        self, month: int, weekday: int, occurrence: int, name: str | None = None
    ) -> None:
        super().__init__(name)
        self.month = _check_range(month, 1, 12, "month")
        self.weekday = _check_range(weekday, MONDAY, SUNDAY, "weekday")
        self.occurrence = _check_range(occurrence, 0, 4, "occurrence")

    def _default_name(self) -> str:
        return f"weekday {self.weekday} #{self.occurrence + 1} of month {self.month}"

    def matches(self, ts: pd.Timestamp) -> bool:
        return (
            ts.month == self.month
            and ts.isoweekday() == self.weekday
            and (ts.day - 1) // 7 == self.occurrence
        )


class LastWeekdayRule(HolidayRule):
    """Last occurrence of a weekday in a month, e.g. last Monday in May."""

    def __init__(self, month: int, weekday: int, name: str | None = None) -> None:
        super().__init__(name)
        self.month = _check_range(month, 1, 12, "month")
        self.weekday = _check_range(weekday, MONDAY, SUNDAY, "weekday")

    def _default_name(self) -> str:
        return f"last weekday {self.weekday} of month {self.month}"

    def matches(self, ts: pd.Timestamp) -> bool:
        if ts.month != self.month or ts.isoweekday() != self.weekday:
            return False
        # No further occurrence of this weekday left in the month
        return shift_days(ts, 7).month != self.month


class EasterRule(HolidayRule):
    """Feast at a fixed offset in days from Easter Sunday of the same year."""

    def __init__(self, offset_days: int = 0, name: str | None = None) -> None:
        super().__init__(name)
        if isinstance(offset_days, bool) or not isinstance(offset_days, int):
            raise ConfigurationError(f"offset_days must be an integer, got {offset_days!r}")
        self.offset_days = offset_days

    def _default_name(self) -> str:
        return f"Easter{self.offset_days:+d}"

    def matches(self, ts: pd.Timestamp) -> bool:
        if self.offset_days == 1:
            feast = calculate_easter_monday(ts.year)
        else:
            feast = easter_offset(ts.year, self.offset_days)
        return ts.month == feast.month and ts.day == feast.day


class OffsetRule(HolidayRule):
    """Holiday falling a fixed number of days after another rule's date.

    ``OffsetRule(thanksgiving, 1)`` matches the day after Thanksgiving.
    """

    def __init__(self, base: HolidayMatcher, days: int, name: str | None = None) -> None:
        super().__init__(name)
        if not callable(base):
            raise ConfigurationError(f"Base rule is not callable: {base!r}")
        if isinstance(days, bool) or not isinstance(days, int):
            raise ConfigurationError(f"days must be an integer, got {days!r}")
        self.base = base
        self.days = days

    def _default_name(self) -> str:
        return f"{rule_name(self.base)} {self.days:+d}d"

    def matches(self, ts: pd.Timestamp) -> bool:
        return bool(self.base(shift_days(ts, -self.days)))


class WeekendAdjustedRule(HolidayRule):
    """Observe a holiday on Friday when it falls on Saturday, Monday when on Sunday.

    The holiday still matches its own date as well. Both observances are
    evaluated independently, so a base rule matching a whole weekend fires
    on Friday and on Monday.
    """

    def __init__(self, base: HolidayMatcher, name: str | None = None) -> None:
        super().__init__(name)
        if not callable(base):
            raise ConfigurationError(f"Base rule is not callable: {base!r}")
        self.base = base

    def _default_name(self) -> str:
        return f"{rule_name(self.base)} (Observed)"

    def matches(self, ts: pd.Timestamp) -> bool:
        if self.base(ts):
            return True
        weekday = ts.isoweekday()
        if weekday == FRIDAY and self.base(shift_days(ts, 1)):
            return True
        if weekday == MONDAY and self.base(shift_days(ts, -1)):
            return True
        return False


def adjust_for_weekend(rule: HolidayMatcher) -> WeekendAdjustedRule:
    """Wrap a rule with Friday/Monday weekend observance."""
    return WeekendAdjustedRule(rule)


def adjust_rule_set_for_weekend(rule_set: Iterable[HolidayMatcher]) -> RuleSet:
    """Apply weekend observance to every rule of a set, keeping order."""
    return tuple(adjust_for_weekend(rule) for rule in rule_set)


def combine_holiday_rule_sets(*rule_sets: Iterable[HolidayMatcher]) -> RuleSet:
    """Union of rule sets, dropping repeated rule objects.

    Duplicates are detected by identity: passing the same rule object twice
    keeps one entry, while two different rules that match the same dates
    are both kept. Order follows first occurrence.
    """
    seen: set[int] = set()
    combined = []
    for rule in chain.from_iterable(rule_sets):
        if id(rule) in seen:
            continue
        seen.add(id(rule))
        combined.append(rule)
    return tuple(combined)
