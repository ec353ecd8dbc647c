"""Italian national holidays."""

from bizcal.rules import EasterRule, FixedDateRule, RuleSet

NEW_YEARS_DAY = FixedDateRule(1, 1, "Capodanno")
EPIPHANY = FixedDateRule(1, 6, "Epifania")
EASTER_SUNDAY = EasterRule(0, "Pasqua")
EASTER_MONDAY = EasterRule(1, "Lunedì dell'Angelo")
LIBERATION_DAY = FixedDateRule(4, 25, "Festa della Liberazione")
WORKERS_DAY = FixedDateRule(5, 1, "Festa del Lavoro")
REPUBLIC_DAY = FixedDateRule(6, 2, "Festa della Repubblica")
ASSUMPTION_DAY = FixedDateRule(8, 15, "Ferragosto")
ALL_SAINTS_DAY = FixedDateRule(11, 1, "Ognissanti")
IMMACULATE_CONCEPTION = FixedDateRule(12, 8, "Immacolata Concezione")
CHRISTMAS_DAY = FixedDateRule(12, 25, "Natale")
ST_STEPHENS_DAY = FixedDateRule(12, 26, "Santo Stefano")

HOLIDAYS: RuleSet = (
    NEW_YEARS_DAY,
    EPIPHANY,
    EASTER_SUNDAY,
    EASTER_MONDAY,
    LIBERATION_DAY,
    WORKERS_DAY,
    REPUBLIC_DAY,
    ASSUMPTION_DAY,
    ALL_SAINTS_DAY,
    IMMACULATE_CONCEPTION,
    CHRISTMAS_DAY,
    ST_STEPHENS_DAY,
)


def get_holidays() -> RuleSet:
    """All Italian national holiday rules."""
    return HOLIDAYS
