"""bizcal - Business-day arithmetic over the Gregorian calendar."""

from bizcal import holidays
from bizcal.calendar import BusinessCalendar, create_business_calendar
from bizcal.config import (
    configure_bizcal,
    get_bizcal_config,
    reset_bizcal_config,
)
from bizcal.core import BusinessDate
from bizcal.easter import (
    EasterDate,
    calculate_easter,
    calculate_easter_monday,
    easter_offset,
)
from bizcal.logging import configure_logging, get_logger
from bizcal.rules import (
    FRIDAY,
    MONDAY,
    SATURDAY,
    SUNDAY,
    THURSDAY,
    TUESDAY,
    WEDNESDAY,
    EasterRule,
    FixedDateRule,
    HolidayMatcher,
    HolidayRule,
    LastWeekdayRule,
    NthWeekdayRule,
    OffsetRule,
    RuleSet,
    WeekendAdjustedRule,
    adjust_for_weekend,
    adjust_rule_set_for_weekend,
    combine_holiday_rule_sets,
)
from bizcal.validation import BizcalError, ConfigurationError, StepLimitError

__all__ = [
    # Primary API
    "BusinessCalendar",
    "BusinessDate",
    "create_business_calendar",
    # Easter
    "EasterDate",
    "calculate_easter",
    "calculate_easter_monday",
    "easter_offset",
    # Rules
    "HolidayMatcher",
    "HolidayRule",
    "RuleSet",
    "FixedDateRule",
    "NthWeekdayRule",
    "LastWeekdayRule",
    "EasterRule",
    "OffsetRule",
    "WeekendAdjustedRule",
    "adjust_for_weekend",
    "adjust_rule_set_for_weekend",
    "combine_holiday_rule_sets",
    "MONDAY",
    "TUESDAY",
    "WEDNESDAY",
    "THURSDAY",
    "FRIDAY",
    "SATURDAY",
    "SUNDAY",
    # Holiday tables
    "holidays",
    # Errors
    "BizcalError",
    "ConfigurationError",
    "StepLimitError",
    # Logging
    "configure_logging",
    "get_logger",
    # Config
    "configure_bizcal",
    "get_bizcal_config",
    "reset_bizcal_config",
]
__version__ = "0.1.0"
