"""Easter Sunday and Easter-relative feast dates."""

from datetime import date, timedelta
from functools import lru_cache
from typing import NamedTuple

import pandas as pd


class EasterDate(NamedTuple):
    """Civil date of an Easter-relative feast."""

    year: int
    month: int
    day: int

    def to_date(self) -> date:
        return date(self.year, self.month, self.day)

    def to_timestamp(self) -> pd.Timestamp:
        """Midnight Timestamp for this date."""
        return pd.Timestamp(self.year, self.month, self.day)


@lru_cache(maxsize=512)
def calculate_easter(year: int) -> EasterDate:
    """Calculate Easter Sunday with the Meeus/Jones/Butcher algorithm.

    Valid for any proleptic Gregorian year; no range checking is done.

    Args:
        year: Calendar year.

    Returns:
        EasterDate with month 3 or 4.
    """
    a = year % 19
    b = year // 100
    c = year % 100
    d = b // 4
    e = b % 4
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i = c // 4
    k = c % 4
    l = (32 + 2 * e + 2 * i - h - k) % 7  # noqa: E741
    m = (a + 11 * h + 22 * l) // 451
    month = (h + l - 7 * m + 114) // 31
    day = (h + l - 7 * m + 114) % 31 + 1
    return EasterDate(year, month, day)


def calculate_easter_monday(year: int) -> EasterDate:
    """Calculate Easter Monday, the day after Easter Sunday."""
    sunday = calculate_easter(year)
    month, day = sunday.month, sunday.day + 1
    # Easter Sunday on March 31 or April 30
    if (month == 3 and day > 31) or (month == 4 and day > 30):
        month, day = month + 1, 1
    return EasterDate(year, month, day)


@lru_cache(maxsize=1024)
def easter_offset(year: int, days: int) -> EasterDate:
    """Date of the feast `days` after (or before, if negative) Easter Sunday.

    Uses date arithmetic so month rollovers come out right, e.g. Corpus
    Domini is ``easter_offset(year, 60)`` and Good Friday ``easter_offset(year, -2)``.
    """
    shifted = calculate_easter(year).to_date() + timedelta(days=days)
    return EasterDate(shifted.year, shifted.month, shifted.day)
