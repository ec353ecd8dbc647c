"""San Marino holidays."""

from bizcal.rules import EasterRule, FixedDateRule, RuleSet

NEW_YEARS_DAY = FixedDateRule(1, 1, "New Year's Day")
EPIPHANY = FixedDateRule(1, 6, "Epiphany")
SAINT_AGATHA_DAY = FixedDateRule(2, 5, "Feast of Saint Agatha")
ARENGO_ANNIVERSARY = FixedDateRule(3, 25, "Anniversary of the Arengo")
EASTER_SUNDAY = EasterRule(0, "Easter Sunday")
EASTER_MONDAY = EasterRule(1, "Easter Monday")
WORKERS_DAY = FixedDateRule(5, 1, "Workers' Day")
CORPUS_DOMINI = EasterRule(60, "Corpus Domini")
FREEDOM_DAY = FixedDateRule(7, 28, "Fall of Fascism")
ASSUMPTION_DAY = FixedDateRule(8, 15, "Assumption Day")
REPUBLIC_DAY = FixedDateRule(9, 3, "Foundation of the Republic")
ALL_SAINTS_DAY = FixedDateRule(11, 1, "All Saints' Day")
ALL_SOULS_DAY = FixedDateRule(11, 2, "All Souls' Day")
IMMACULATE_CONCEPTION = FixedDateRule(12, 8, "Immaculate Conception")
CHRISTMAS_DAY = FixedDateRule(12, 25, "Christmas Day")
ST_STEPHENS_DAY = FixedDateRule(12, 26, "Saint Stephen's Day")

HOLIDAYS: RuleSet = (
    NEW_YEARS_DAY,
    EPIPHANY,
    SAINT_AGATHA_DAY,
    ARENGO_ANNIVERSARY,
    EASTER_SUNDAY,
    EASTER_MONDAY,
    WORKERS_DAY,
    CORPUS_DOMINI,
    FREEDOM_DAY,
    ASSUMPTION_DAY,
    REPUBLIC_DAY,
    ALL_SAINTS_DAY,
    ALL_SOULS_DAY,
    IMMACULATE_CONCEPTION,
    CHRISTMAS_DAY,
    ST_STEPHENS_DAY,
)


def get_holidays() -> RuleSet:
    """All San Marino holiday rules."""
    return HOLIDAYS
