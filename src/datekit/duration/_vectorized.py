from __future__ import annotations

from datetime import timedelta

import numpy as np

from datekit._exceptions import InvalidDurationError

# datetime64 units too coarse to carry a day of the month.
_COARSE_UNITS = frozenset({"Y", "M", "W", "generic"})

_ONE_DAY = np.timedelta64(1, "D")
_ONE_MONTH = np.timedelta64(1, "M")


def _shift_months(days: np.ndarray, months: int) -> np.ndarray:
    """Vectorised month shift with clamp-to-last-valid-day on datetime64[D]."""
    if months == 0:
        return days
    month_start = days.astype("datetime64[M]")
    day_offset = days - month_start.astype("datetime64[D]")

    target = month_start + np.timedelta64(months, "M")
    target_start = target.astype("datetime64[D]")
    month_length = (target + _ONE_MONTH).astype("datetime64[D]") - target_start

    return target_start + np.minimum(day_offset, month_length - _ONE_DAY)


def add_datetime64(
    values: np.datetime64 | np.ndarray,
    years: int,
    months: int,
    remainder: timedelta,
) -> np.datetime64 | np.ndarray:
    scalar = np.ndim(values) == 0
    arr = np.atleast_1d(np.asarray(values))
    if arr.dtype.kind != "M":
        raise InvalidDurationError(
            f"Expected a datetime64 array; got dtype {arr.dtype}."
        )
    unit, _ = np.datetime_data(arr.dtype)
    if unit in _COARSE_UNITS:
        raise InvalidDurationError(
            f"datetime64 unit must be days or finer; got {unit!r}."
        )

    # Split into calendar day and time of day; only the day is shifted.
    days = arr.astype("datetime64[D]")
    time_of_day = arr - days

    shifted = _shift_months(days, 12 * years)
    shifted = _shift_months(shifted, months)

    result = shifted + time_of_day
    if remainder:
        result = result + np.timedelta64(remainder)
    result = result.astype(arr.dtype)
    return result[0] if scalar else result
