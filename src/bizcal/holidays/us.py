"""United States holidays."""

from bizcal.rules import (
    MONDAY,
    THURSDAY,
    FixedDateRule,
    LastWeekdayRule,
    NthWeekdayRule,
    OffsetRule,
    RuleSet,
)

NEW_YEARS_DAY = FixedDateRule(1, 1, "New Year's Day")
MLK_DAY = NthWeekdayRule(1, MONDAY, 2, "Martin Luther King Jr. Day")
PRESIDENTS_DAY = NthWeekdayRule(2, MONDAY, 2, "Presidents' Day")
MEMORIAL_DAY = LastWeekdayRule(5, MONDAY, "Memorial Day")
JUNETEENTH = FixedDateRule(6, 19, "Juneteenth")
INDEPENDENCE_DAY = FixedDateRule(7, 4, "Independence Day")
LABOR_DAY = NthWeekdayRule(9, MONDAY, 0, "Labor Day")
COLUMBUS_DAY = NthWeekdayRule(10, MONDAY, 1, "Columbus Day")
VETERANS_DAY = FixedDateRule(11, 11, "Veterans Day")
THANKSGIVING_DAY = NthWeekdayRule(11, THURSDAY, 3, "Thanksgiving Day")
CHRISTMAS_DAY = FixedDateRule(12, 25, "Christmas Day")

# Widely observed, not federal
CHRISTMAS_EVE = FixedDateRule(12, 24, "Christmas Eve")
NEW_YEARS_EVE = FixedDateRule(12, 31, "New Year's Eve")
BLACK_FRIDAY = OffsetRule(THANKSGIVING_DAY, 1, "Black Friday")

FEDERAL_HOLIDAYS: RuleSet = (
    NEW_YEARS_DAY,
    MLK_DAY,
    PRESIDENTS_DAY,
    MEMORIAL_DAY,
    JUNETEENTH,
    INDEPENDENCE_DAY,
    LABOR_DAY,
    COLUMBUS_DAY,
    VETERANS_DAY,
    THANKSGIVING_DAY,
    CHRISTMAS_DAY,
)


def get_holidays(only_federal: bool = False) -> RuleSet:
    """US holiday rules.

    Args:
        only_federal: If True, return only the eleven federal holidays.
            Otherwise also include Christmas Eve, New Year's Eve and
            Black Friday.
    """
    if only_federal:
        return FEDERAL_HOLIDAYS
    return FEDERAL_HOLIDAYS + (CHRISTMAS_EVE, NEW_YEARS_EVE, BLACK_FRIDAY)
