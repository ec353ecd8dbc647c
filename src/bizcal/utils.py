"""Common utility functions for bizcal."""

import math
import numbers
from collections.abc import Mapping
from datetime import date, timedelta
from typing import Any

import numpy as np
import pandas as pd

# Calendar-unit lengths used when converting a duration to days.
_DAYS_PER_UNIT = {
    "millisecond": 1 / 86_400_000,
    "second": 1 / 86_400,
    "minute": 1 / 1_440,
    "hour": 1 / 24,
    "day": 1.0,
    "week": 7.0,
    "month": 30.0,
    "quarter": 91.0,
    "year": 365.0,
}


def _is_invalid(value: Any) -> bool:
    """Check if value is the NaT sentinel."""
    return value is pd.NaT


def to_timestamp(value: Any) -> pd.Timestamp:
    """Coerce a date-like value to a Timestamp.

    Unparseable or out-of-range values become NaT rather than raising, so
    invalid dates flow through arithmetic and can be checked once at the end.

    Raises:
        TypeError: If value is not date-like at all (e.g. an int).
    """
    from bizcal.core import BusinessDate

    if isinstance(value, BusinessDate):
        return value.to_timestamp()
    if value is None or _is_invalid(value):
        return pd.NaT
    if isinstance(value, pd.Timestamp):
        return value
    if isinstance(value, (str, date, np.datetime64)):
        return pd.to_datetime(value, errors="coerce")
    raise TypeError(f"Cannot interpret {type(value).__name__} as a date: {value!r}")


def _unit_days(unit: str) -> float:
    key = unit.lower()
    if key not in _DAYS_PER_UNIT and key.endswith("s"):
        key = key[:-1]
    try:
        return _DAYS_PER_UNIT[key]
    except KeyError:
        raise ValueError(
            f"Unknown duration unit: {unit!r}. "
            f"Expected one of {sorted(_DAYS_PER_UNIT)}"
        ) from None


def _amount(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise TypeError(f"Duration amount must be a number, got {value!r}")
    return float(value)


def duration_to_days(duration: Any, unit: str = "days") -> float:
    """Convert a duration-like value to a (possibly fractional) number of days.

    Accepts a number interpreted in ``unit``, a Timedelta / timedelta /
    numpy timedelta64, or a mapping of unit name to amount such as
    ``{"weeks": 1, "days": 2}``. Months count as 30 days, quarters as 91 and
    years as 365. NaT converts to NaN.
    """
    if _is_invalid(duration):
        return math.nan
    if isinstance(duration, (timedelta, np.timedelta64)):
        td = pd.Timedelta(duration)
        if _is_invalid(td):
            return math.nan
        return td.total_seconds() / 86_400
    if isinstance(duration, Mapping):
        return sum(_amount(amount) * _unit_days(name) for name, amount in duration.items())
    return _amount(duration) * _unit_days(unit)


def ceil_magnitude(days: float) -> int:
    """Round away from zero: fractional days always count as a whole day."""
    magnitude = math.ceil(abs(days))
    return magnitude if days >= 0 else -magnitude


def shift_days(ts: pd.Timestamp, days: int) -> pd.Timestamp:
    """Move by whole calendar days, keeping the wall-clock time."""
    return ts + pd.DateOffset(days=days)


def align_tz(ts: pd.Timestamp, reference: pd.Timestamp) -> pd.Timestamp:
    """Express ts in reference's time zone, or as naive local time if reference is naive."""
    if _is_invalid(ts) or _is_invalid(reference):
        return ts
    if reference.tz is None:
        return ts if ts.tz is None else ts.tz_localize(None)
    if ts.tz is None:
        return ts.tz_localize(reference.tz, ambiguous=True, nonexistent="shift_forward")
    return ts.tz_convert(reference.tz)
