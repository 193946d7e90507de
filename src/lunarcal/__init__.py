"""lunarcal public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Register the standard day attributes on import
from .attributes import standard as _standard  # noqa: F401

from .api import (
    day_info,
    to_gregorian,
    explain,
    months_in_year,
    days_in_month,
    month_bounds,
    prev_month,
    next_month,
    new_year_day,
    first_day_of_month,
    last_day_of_month,
)
from .attributes.names import (
    year_to_chinese,
    month_name,
    day_name,
    zodiac_animal,
    ganzhi_year,
)
from .birthdays.arithmetic import (
    days_until_next_occurrence,
    next_occurrence,
    age,
    zodiac_sign,
)
from .core.errors import (
    LunarCalError,
    InvalidDate,
    InvalidYear,
    InvalidMonth,
    InvalidDay,
    InvalidLeapMonth,
    DateBeforeEpoch,
    RecordError,
)
from .core.types import DayInfo, LunarDate, MonthDay, MonthInfo
from .engines.converter import solar_to_lunar, lunar_to_solar, months_of_year
from .engines.table import (
    EPOCH,
    MIN_YEAR,
    MAX_YEAR,
    leap_month,
    leap_month_days,
    month_days,
    year_days,
    is_gregorian_leap_year,
    gregorian_month_days,
)

__all__ = [
    "day_info",
    "to_gregorian",
    "explain",
    "months_in_year",
    "days_in_month",
    "month_bounds",
    "prev_month",
    "next_month",
    "new_year_day",
    "first_day_of_month",
    "last_day_of_month",
    "year_to_chinese",
    "month_name",
    "day_name",
    "zodiac_animal",
    "ganzhi_year",
    "days_until_next_occurrence",
    "next_occurrence",
    "age",
    "zodiac_sign",
    "LunarCalError",
    "InvalidDate",
    "InvalidYear",
    "InvalidMonth",
    "InvalidDay",
    "InvalidLeapMonth",
    "DateBeforeEpoch",
    "RecordError",
    "DayInfo",
    "LunarDate",
    "MonthDay",
    "MonthInfo",
    "solar_to_lunar",
    "lunar_to_solar",
    "months_of_year",
    "EPOCH",
    "MIN_YEAR",
    "MAX_YEAR",
    "leap_month",
    "leap_month_days",
    "month_days",
    "year_days",
    "is_gregorian_leap_year",
    "gregorian_month_days",
]
