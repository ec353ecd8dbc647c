"""Calendar configuration validation."""

from collections.abc import Iterable
from typing import Any

ISO_WEEKDAYS = frozenset(range(1, 8))
DEFAULT_WEEKEND_DAYS = frozenset({6, 7})


class BizcalError(Exception):
    """Base class for bizcal errors."""
    pass


class ConfigurationError(BizcalError, ValueError):
    """Raised when a calendar configuration is invalid."""
    pass


class StepLimitError(BizcalError):
    """Raised when a walk exceeds the configured max_step_days."""
    pass


def _validate_weekday_numbers(days: Iterable[Any], option: str) -> frozenset[int]:
    """Coerce to a frozenset of ISO weekday numbers, rejecting bad entries."""
    if isinstance(days, (str, bytes)) or not isinstance(days, Iterable):
        raise ConfigurationError(
            f"{option} must be a collection of ISO weekday numbers, got {days!r}"
        )
    result = set()
    for day in days:
        if isinstance(day, bool) or not isinstance(day, int):
            raise ConfigurationError(
                f"{option} entries must be integers 1-7, got {day!r}"
            )
        if day not in ISO_WEEKDAYS:
            raise ConfigurationError(
                f"{option} entries must be ISO weekdays 1-7, got {day}"
            )
        result.add(day)
    return frozenset(result)


def validate_weekend_days(
    weekend_days: Iterable[int] | None = None,
    business_days: Iterable[int] | None = None,
) -> frozenset[int]:
    """Resolve and validate the set of non-working ISO weekdays.

    Either the weekend or its complement (the working week) may be given,
    never both. With neither, Saturday and Sunday are the weekend.

    Checks:
    1. Every entry is an integer ISO weekday (1=Monday .. 7=Sunday)
    2. At least one working weekday remains

    Raises:
        ConfigurationError: If validation fails
    """
    if weekend_days is not None and business_days is not None:
        raise ConfigurationError(
            "Pass either weekend_days or business_days, not both"
        )

    if business_days is not None:
        working = _validate_weekday_numbers(business_days, "business_days")
        if not working:
            raise ConfigurationError("business_days must contain at least one weekday")
        return ISO_WEEKDAYS - working

    if weekend_days is None:
        return DEFAULT_WEEKEND_DAYS

    weekend = _validate_weekday_numbers(weekend_days, "weekend_days")
    if len(weekend) > 6:
        raise ConfigurationError(
            "weekend_days leaves no working weekday; at most 6 weekdays may be non-working"
        )
    return weekend


def validate_holiday_matchers(holiday_matchers: Iterable[Any] | None) -> tuple:
    """Validate holiday matchers, returning them as a tuple.

    Raises:
        ConfigurationError: If any matcher is not callable
    """
    if holiday_matchers is None:
        return ()
    if callable(holiday_matchers):
        raise ConfigurationError(
            "holiday_matchers must be a collection of matchers, not a single matcher"
        )
    if isinstance(holiday_matchers, (str, bytes)) or not isinstance(
        holiday_matchers, Iterable
    ):
        raise ConfigurationError(
            f"holiday_matchers must be a collection of callables, got {holiday_matchers!r}"
        )
    matchers = tuple(holiday_matchers)
    for matcher in matchers:
        if not callable(matcher):
            raise ConfigurationError(f"Holiday matcher is not callable: {matcher!r}")
    return matchers
