"""Country holiday tables.

Each table is a tuple of module-level rule objects. Tables that share a rule
object collapse it when combined with combine_holiday_rule_sets().
"""

from bizcal.holidays import it, sm, us
from bizcal.rules import RuleSet
from bizcal.validation import ConfigurationError

HOLIDAYS: dict[str, dict[str, RuleSet]] = {
    "US": {
        "federal": us.get_holidays(only_federal=True),
        "all": us.get_holidays(),
    },
    "IT": {
        "all": it.get_holidays(),
    },
    "SM": {
        "all": sm.get_holidays(),
    },
}


def get_holiday_rule_set(country: str, group: str = "all") -> RuleSet:
    """Look up a country table by ISO code and group name.

    Raises:
        ConfigurationError: If the country or group is unknown.
    """
    groups = HOLIDAYS.get(country.upper())
    if groups is None:
        raise ConfigurationError(
            f"Unknown holiday country: {country!r}. Expected one of {sorted(HOLIDAYS)}"
        )
    if group not in groups:
        raise ConfigurationError(
            f"Unknown holiday group {group!r} for {country.upper()}. "
            f"Expected one of {sorted(groups)}"
        )
    return groups[group]


__all__ = ["HOLIDAYS", "get_holiday_rule_set", "it", "sm", "us"]
