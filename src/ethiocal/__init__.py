"""ethiocal public API.

Keep this surface small: users should mostly interact with EthiopicDate,
EthiopicDateRange and the functions re-exported here.
"""

from .api import (
    to_gregorian,
    from_gregorian,
    new_year_day,
    month_bounds,
    first_day_of_month,
    last_day_of_month,
    first_day_of_year,
    last_day_of_year,
    dates_in_month,
    dates_in_year,
    is_same_month,
    is_same_year,
    months_between,
    years_between,
    days_between,
    leap_years_in_range,
    next_leap_year,
    previous_leap_year,
    calculate_age,
    current_age,
    next_day_of_month,
)
from .config import configure, get_config, reset_config
from .core.clock import Clock, FixedClock, SystemClock
from .core.errors import EthiocalError, InvalidArgumentError
from .core.types import EthiopicEra, MonthBounds, Period
from .date import EthiopicDate
from .engines.rules import days_in_month, days_in_year, is_leap_year, is_valid_date
from .range import EthiopicDateRange

__all__ = [
    "EthiopicDate",
    "EthiopicDateRange",
    "EthiopicEra",
    "Period",
    "MonthBounds",
    "EthiocalError",
    "InvalidArgumentError",
    "Clock",
    "FixedClock",
    "SystemClock",
    "configure",
    "get_config",
    "reset_config",
    "is_leap_year",
    "is_valid_date",
    "days_in_month",
    "days_in_year",
    "to_gregorian",
    "from_gregorian",
    "new_year_day",
    "month_bounds",
    "first_day_of_month",
    "last_day_of_month",
    "first_day_of_year",
    "last_day_of_year",
    "dates_in_month",
    "dates_in_year",
    "is_same_month",
    "is_same_year",
    "months_between",
    "years_between",
    "days_between",
    "leap_years_in_range",
    "next_leap_year",
    "previous_leap_year",
    "calculate_age",
    "current_age",
    "next_day_of_month",
]
