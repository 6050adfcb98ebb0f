import calendar
from datetime import date
from typing import TypeVar

D = TypeVar("D", bound=date)


def is_leap_year(year: int) -> bool:
    return calendar.isleap(year)


def last_day_of_month(year: int, month: int) -> int:
    """Number of days in ``month`` of ``year`` (proleptic Gregorian)."""
    return calendar.monthrange(year, month)[1]


def add_months(dt: D, months: int) -> D:
    """
    Shift ``dt`` by a signed number of calendar months.

    The day is clamped to the last day of the target month instead of
    overflowing into the next one, so 2024-01-31 + 1 month is 2024-02-29.
    Time of day and tzinfo of a ``datetime`` are kept.
    """
    if months == 0:
        return dt
    month0 = dt.month - 1 + months
    year = dt.year + month0 // 12
    month = month0 % 12 + 1
    day = min(dt.day, last_day_of_month(year, month))
    return dt.replace(year=year, month=month, day=day)


def add_years(dt: D, years: int) -> D:
    """Shift ``dt`` by whole years; Feb 29 clamps to Feb 28 off leap years."""
    if years == 0:
        return dt
    year = dt.year + years
    day = min(dt.day, last_day_of_month(year, dt.month))
    return dt.replace(year=year, day=day)
