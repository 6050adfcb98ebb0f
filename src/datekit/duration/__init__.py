# src/datekit/duration/__init__.py
"""
datekit.duration
~~~~~~~~~~~~~~~~

Calendar-aware durations.  A CalendarDuration combines years and months,
whose length varies, with a fixed-length timedelta remainder, and adds to
dates by clamping to the last valid day of a month instead of overflowing.

Basic usage::

    from datetime import date
    from datekit.duration import CalendarDuration

    step = CalendarDuration.of(months=1)
    date(2024, 1, 31) + step                           # → 2024-02-29
    CalendarDuration.of(years=1).add(date(2024, 2, 29))  # → 2025-02-28

NumPy datetime64 arrays are accepted everywhere a date is::

    import numpy as np
    days = np.array(["2024-01-31", "2024-03-31"], dtype="datetime64[D]")
    days + step                                        # → [2024-02-29, 2024-04-30]

Public API
----------
CalendarDuration      The duration value type.
add_years, add_months The two clamping steps on their own.
is_leap_year, last_day_of_month
"""

from __future__ import annotations

from datekit.duration.duration import CalendarDuration
from datekit.duration.months import (
    add_months,
    add_years,
    is_leap_year,
    last_day_of_month,
)

__all__ = [
    "CalendarDuration",
    "add_months",
    "add_years",
    "is_leap_year",
    "last_day_of_month",
]
